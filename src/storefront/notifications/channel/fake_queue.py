"""Fake queue adapter — records published messages for testing."""

from storefront.notifications.channel.queue_port import QueuePort


class FakeQueueAdapter(QueuePort):
    """Queue adapter that records message bodies in memory for test assertions."""

    def __init__(self):
        self.published: list[str] = []
        self.raise_error: Exception | None = None

    def configure(self, raise_error: Exception | None = None):
        self.raise_error = raise_error

    def publish(self, body: str) -> dict:
        if self.raise_error is not None:
            raise self.raise_error
        self.published.append(body)
        return {"status": "sent", "queue_length": len(self.published)}

    def reset(self):
        self.published.clear()
        self.raise_error = None
