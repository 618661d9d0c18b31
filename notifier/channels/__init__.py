"""Base types for notification channels."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """
    Common interface for all notification channels.
    Each channel implements send() using its own transport.
    """

    @property
    @abstractmethod
    def channel_type(self) -> str:
        ...

    @abstractmethod
    def send(self, title: str, message: str) -> None:
        """Deliver one alert. Raises a NotifierError subclass on failure."""
        ...
