"""Abstract base for downstream transports that carry the intensity out."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TransportError(Exception):
    """Raised when a message cannot be handed to the underlying carrier."""

    def __init__(self, address: str, destination: str, reason: str) -> None:
        self.address = address
        self.destination = destination
        self.reason = reason
        super().__init__(f"Send of {address} to {destination} failed: {reason}")


class Transport(ABC):
    """Fire-and-forget sender of single numeric values."""

    @abstractmethod
    def send(self, address: str, value: int) -> None:
        """Send *value* under *address*.

        Raises:
            TransportError: If the message could not be sent.
        """
        ...

    @property
    @abstractmethod
    def destination(self) -> str:
        """Where messages go, for logging."""
        ...
