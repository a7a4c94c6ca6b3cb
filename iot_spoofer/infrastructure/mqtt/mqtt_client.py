"""
MQTT Connection - Infrastructure Layer

Async-friendly wrapper around a single paho-mqtt client.

paho runs its network loop in a background thread and owns reconnection
(with the backoff configured through ``reconnect_delay_set``). Blocking
calls are pushed to the default executor and paho callbacks are handed
back to the asyncio loop, so nothing here blocks the FastAPI event loop.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, List, Optional

import paho.mqtt.client as mqtt

from iot_spoofer.domain.entities.errors import (
    BrokerNotConnectedError,
    BrokerPublishError,
)
from iot_spoofer.shared import get_logger

logger = get_logger(__name__)

ConnectListener = Callable[[], Awaitable[None]]
MessageHandler = Callable[[str, str], Awaitable[None]]


class MqttConnection:
    """Owns the broker session shared by discovery and command handling."""

    def __init__(
        self,
        *,
        host: str = "localhost",
        port: int = 1883,
        username: Optional[str] = None,
        password: Optional[str] = None,
        client_id: str = "iot_spoofer",
        keepalive: int = 60,
        reconnect_min_delay: int = 1,
        reconnect_max_delay: int = 5,
        publish_timeout: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self._username = username
        self._password = password
        self._client_id = client_id
        self._keepalive = keepalive
        self._reconnect_min_delay = reconnect_min_delay
        self._reconnect_max_delay = reconnect_max_delay
        self._publish_timeout = publish_timeout

        self._client: Optional[mqtt.Client] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._connect_listeners: List[ConnectListener] = []
        self._message_handler: Optional[MessageHandler] = None

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------

    def add_connect_listener(self, listener: ConnectListener) -> None:
        """Run ``listener`` on the event loop after every successful connect."""
        self._connect_listeners.append(listener)

    def set_message_handler(self, handler: MessageHandler) -> None:
        """Route every inbound message to ``handler(topic, payload)``."""
        self._message_handler = handler

    @property
    def is_connected(self) -> bool:
        return self._client is not None and self._client.is_connected()

    # ------------------------------------------------------------------
    # paho callbacks (network thread)
    # ------------------------------------------------------------------

    def _create_client(self) -> mqtt.Client:
        client = mqtt.Client(
            mqtt.CallbackAPIVersion.VERSION2,
            client_id=self._client_id,
            protocol=mqtt.MQTTv311,
        )
        if self._username:
            client.username_pw_set(self._username, self._password)

        client.reconnect_delay_set(
            min_delay=self._reconnect_min_delay,
            max_delay=self._reconnect_max_delay,
        )
        client.on_connect = self._on_connect
        client.on_disconnect = self._on_disconnect
        client.on_message = self._on_message
        return client

    def _schedule(self, coro: Awaitable[None]) -> None:
        loop = self._loop
        if loop is None or loop.is_closed():
            # Nothing can run it anymore; close it to avoid a "never awaited" warning
            close = getattr(coro, "close", None)
            if close is not None:
                close()
            return
        asyncio.run_coroutine_threadsafe(coro, loop)

    def _on_connect(self, client, userdata, flags, reason_code, properties) -> None:
        if reason_code.is_failure:
            logger.warning(
                "mqtt.connect_failed",
                host=self.host,
                port=self.port,
                reason=str(reason_code),
            )
            return

        logger.info("mqtt.connected", host=self.host, port=self.port)
        for listener in list(self._connect_listeners):
            self._schedule(self._run_listener(listener))

    def _on_disconnect(
        self, client, userdata, disconnect_flags, reason_code, properties
    ) -> None:
        if reason_code.is_failure:
            logger.warning("mqtt.connection_lost", reason=str(reason_code))
        else:
            logger.info("mqtt.disconnected")

    def _on_message(self, client, userdata, message) -> None:
        if self._message_handler is None:
            return
        payload = message.payload.decode("utf-8", errors="replace")
        self._schedule(self._dispatch_message(message.topic, payload))

    async def _run_listener(self, listener: ConnectListener) -> None:
        try:
            await listener()
        except Exception as e:
            logger.error("mqtt.connect_listener_failed", error=str(e), exc_info=e)

    async def _dispatch_message(self, topic: str, payload: str) -> None:
        if self._message_handler is None:
            return
        try:
            await self._message_handler(topic, payload)
        except Exception as e:
            logger.error("mqtt.message_handler_failed", topic=topic, error=str(e))

    # ------------------------------------------------------------------
    # Public async API
    # ------------------------------------------------------------------

    async def connect(self) -> None:
        """
        Start the background network loop.

        Returns immediately; the first connection attempt and any later
        reconnects happen in paho's thread. Connection state is observed
        through ``is_connected`` and the connect listeners.
        """
        if self._client is not None:
            return

        self._loop = asyncio.get_running_loop()
        client = self._create_client()
        self._client = client

        def _blocking_start() -> None:
            client.connect_async(self.host, self.port, self._keepalive)
            client.loop_start()

        await self._loop.run_in_executor(None, _blocking_start)
        logger.info("mqtt.connecting", host=self.host, port=self.port)

    async def disconnect(self) -> None:
        """Cleanly disconnect and stop the background loop."""
        if self._client is None:
            return

        client = self._client
        self._client = None

        def _blocking_stop() -> None:
            try:
                client.disconnect()
            finally:
                client.loop_stop()

        await asyncio.get_running_loop().run_in_executor(None, _blocking_stop)
        logger.info("mqtt.stopped")

    def _require_client(self) -> mqtt.Client:
        client = self._client
        if client is None or not client.is_connected():
            raise BrokerNotConnectedError()
        return client

    async def publish(
        self,
        topic: str,
        payload: str,
        qos: int = 1,
        retain: bool = True,
    ) -> None:
        """
        Publish a message and wait for the broker acknowledgment.

        Raises:
            BrokerNotConnectedError: If the client is not connected
            BrokerPublishError: If the broker did not accept the message
        """
        client = self._require_client()
        timeout = self._publish_timeout

        def _blocking_publish() -> None:
            info = client.publish(topic, payload=payload, qos=qos, retain=retain)
            if info.rc != mqtt.MQTT_ERR_SUCCESS:
                raise BrokerPublishError(topic, mqtt.error_string(info.rc))
            info.wait_for_publish(timeout=timeout)
            if not info.is_published():
                raise BrokerPublishError(topic, "timed out waiting for acknowledgment")

        await asyncio.get_running_loop().run_in_executor(None, _blocking_publish)

    async def subscribe(self, topic: str, qos: int = 1) -> None:
        """
        Raises:
            BrokerNotConnectedError: If the client is not connected
            BrokerPublishError: If the subscribe request could not be sent
        """
        client = self._require_client()
        rc, _mid = client.subscribe(topic, qos=qos)
        if rc != mqtt.MQTT_ERR_SUCCESS:
            raise BrokerPublishError(topic, mqtt.error_string(rc))

    async def unsubscribe(self, topic: str) -> None:
        client = self._require_client()
        rc, _mid = client.unsubscribe(topic)
        if rc != mqtt.MQTT_ERR_SUCCESS:
            raise BrokerPublishError(topic, mqtt.error_string(rc))
