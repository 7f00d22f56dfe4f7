"""Queue channel port — abstract interface for publishing to a message queue."""

from abc import ABC, abstractmethod


class QueuePort(ABC):
    """Abstract interface for queue publishing adapters."""

    @abstractmethod
    def publish(self, body: str) -> dict:
        """Publish one message body to the configured queue.

        Returns:
            dict with keys: status ("sent" or "failed"), error (optional)
        """
        ...
