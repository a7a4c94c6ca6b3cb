from __future__ import annotations

from iot_spoofer.domain.entities.errors import (
    BrokerNotConnectedError,
    BrokerPublishError,
    DeviceNotFoundError,
    DomainError,
    UnknownEntityTypeError,
)


def test_error_messages() -> None:
    assert str(DeviceNotFoundError("abc")) == "Device with ID abc not found"
    assert str(UnknownEntityTypeError("fan")) == "Unknown entity type: fan"
    assert str(BrokerNotConnectedError()) == "MQTT client not connected"


def test_publish_error_carries_topic() -> None:
    error = BrokerPublishError("iot_spoofer/d1/e1/state", "timeout")
    assert isinstance(error, DomainError)
    assert error.topic == "iot_spoofer/d1/e1/state"
    assert error.details == {"topic": "iot_spoofer/d1/e1/state", "reason": "timeout"}
