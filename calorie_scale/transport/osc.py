"""OSC over UDP, via python-osc."""

from __future__ import annotations

import logging

from pythonosc.osc_message_builder import BuildError
from pythonosc.udp_client import SimpleUDPClient

from calorie_scale.transport.base import Transport, TransportError

logger = logging.getLogger(__name__)


class OscTransport(Transport):
    """Sends one int32 argument per OSC message to a fixed host and port."""

    def __init__(self, host: str, port: int) -> None:
        self._host = host
        self._port = port
        self._client = SimpleUDPClient(host, port)

    @property
    def destination(self) -> str:
        return f"{self._host}:{self._port}"

    def send(self, address: str, value: int) -> None:
        try:
            self._client.send_message(address, int(value))
        except (BuildError, OSError, ValueError) as exc:
            raise TransportError(address, self.destination, str(exc)) from exc
        logger.debug("Sent %s %d to %s", address, value, self.destination)
