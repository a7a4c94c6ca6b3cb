from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, Set, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from iot_spoofer.domain.entities.device import Device  # noqa: E402
from iot_spoofer.domain.entities.entity import (  # noqa: E402
    EntityStates,
    LightEntity,
    NumberEntity,
    SensorEntity,
)
from iot_spoofer.domain.entities.errors import (  # noqa: E402
    BrokerNotConnectedError,
    BrokerPublishError,
)
from iot_spoofer.infrastructure.repositories.json_device_repository import (  # noqa: E402
    JsonDeviceRepository,
)


class FakeMqttConnection:
    """In-memory stand-in for MqttConnection that records broker traffic."""

    def __init__(self, connected: bool = True) -> None:
        self.host = "broker.test"
        self.port = 1883
        self.connected = connected
        self.published: List[Tuple[str, str, int, bool]] = []
        self.subscribed: List[str] = []
        self.unsubscribed: List[str] = []
        self.failing_topics: Set[str] = set()
        self.connect_listeners: List[Callable[[], Awaitable[None]]] = []
        self.message_handler: Optional[Callable[[str, str], Awaitable[None]]] = None
        self.connect_calls = 0
        self.disconnect_calls = 0

    @property
    def is_connected(self) -> bool:
        return self.connected

    def add_connect_listener(self, listener: Callable[[], Awaitable[None]]) -> None:
        self.connect_listeners.append(listener)

    def set_message_handler(self, handler: Callable[[str, str], Awaitable[None]]) -> None:
        self.message_handler = handler

    async def connect(self) -> None:
        self.connect_calls += 1

    async def disconnect(self) -> None:
        self.disconnect_calls += 1

    async def publish(
        self, topic: str, payload: str, qos: int = 1, retain: bool = True
    ) -> None:
        if not self.connected:
            raise BrokerNotConnectedError()
        if topic in self.failing_topics:
            raise BrokerPublishError(topic, "rejected")
        self.published.append((topic, payload, qos, retain))

    async def subscribe(self, topic: str, qos: int = 1) -> None:
        if not self.connected:
            raise BrokerNotConnectedError()
        self.subscribed.append(topic)

    async def unsubscribe(self, topic: str) -> None:
        if not self.connected:
            raise BrokerNotConnectedError()
        self.unsubscribed.append(topic)

    def topics(self) -> List[str]:
        return [topic for topic, _payload, _qos, _retain in self.published]

    def last_payload_for(self, topic: str) -> Optional[str]:
        for published_topic, payload, _qos, _retain in reversed(self.published):
            if published_topic == topic:
                return payload
        return None


class RecordingDiscoveryPublisher:
    """Discovery publisher stub returning scripted results."""

    def __init__(self, results: Optional[List[bool]] = None) -> None:
        self._results = list(results or [])
        self.published: List[Device] = []
        self.removed: List[Device] = []

    async def publish_discovery(self, device: Device) -> bool:
        self.published.append(device)
        return self._results.pop(0) if self._results else True

    async def remove_discovery(self, device: Device) -> bool:
        self.removed.append(device)
        return True


class RecordingCommandChannel:
    """Command channel stub recording subscriptions and state publishes."""

    def __init__(self, error: Optional[Exception] = None) -> None:
        self._error = error
        self.subscribed: List[str] = []
        self.unsubscribed: List[str] = []
        self.states: List[Tuple[str, str, str]] = []

    async def subscribe_device(self, device: Device) -> None:
        self.subscribed.append(device.id)

    async def unsubscribe_device(self, device: Device) -> None:
        self.unsubscribed.append(device.id)

    async def publish_state(self, device_id: str, entity_id: str, state: str) -> None:
        if self._error is not None:
            raise self._error
        self.states.append((device_id, entity_id, state))


@pytest.fixture()
def fake_connection() -> FakeMqttConnection:
    return FakeMqttConnection()


@pytest.fixture()
def devices_file(tmp_path) -> Path:
    return tmp_path / "data" / "devices.json"


@pytest.fixture()
def device_repository(devices_file: Path) -> JsonDeviceRepository:
    return JsonDeviceRepository(str(devices_file))


@pytest.fixture()
def sample_device() -> Device:
    return Device(
        id="d1",
        name="Living Room",
        manufacturer="Acme",
        entities=[
            LightEntity(
                id="e1",
                name="Lamp",
                states=EntityStates(available_states=["On", "Off"], default_state="Off"),
            ),
            SensorEntity(id="e2", name="Power", unit="W", device_class="power"),
            NumberEntity(id="e3", name="Brightness", min=1, max=255),
        ],
    )


@pytest.fixture()
def sample_definitions() -> List[Dict[str, Any]]:
    return [
        {"type": "light", "name": "Lamp"},
        {"type": "sensor", "name": "Power", "unit": "W"},
    ]
