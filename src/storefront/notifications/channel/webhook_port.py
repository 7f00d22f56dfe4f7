"""Webhook channel port — abstract interface for order webhook delivery."""

from abc import ABC, abstractmethod


class WebhookPort(ABC):
    """Abstract interface for webhook dispatch adapters."""

    @abstractmethod
    def send(self, payload: dict) -> dict:
        """POST a JSON payload to the configured endpoint.

        Returns:
            dict with keys: status ("sent" or "failed"), status_code (optional), error (optional)
        """
        ...
