"""Fake webhook adapter — records payloads for testing."""

from storefront.notifications.channel.webhook_port import WebhookPort


class FakeWebhookAdapter(WebhookPort):
    """Webhook adapter that records payloads in memory for test assertions."""

    def __init__(self):
        self.sent_payloads: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Webhook delivery failed"
        self.raise_error: Exception | None = None

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Webhook delivery failed",
        raise_error: Exception | None = None,
    ):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.raise_error = raise_error

    def send(self, payload: dict) -> dict:
        if self.raise_error is not None:
            raise self.raise_error
        if not self.should_succeed:
            return {"status": "failed", "error": self.failure_reason}

        self.sent_payloads.append(payload)
        return {"status": "sent", "status_code": 200}

    def reset(self):
        """Clear recorded payloads (useful between tests)."""
        self.sent_payloads.clear()
        self.should_succeed = True
        self.failure_reason = "Webhook delivery failed"
        self.raise_error = None
