"""HTTP webhook adapter — POSTs JSON to the order-processing endpoint."""

import requests

from storefront.notifications.channel.webhook_port import WebhookPort


class HttpWebhookAdapter(WebhookPort):
    def __init__(self, url: str, timeout: float):
        self.url = url
        self.timeout = timeout

    def send(self, payload: dict) -> dict:
        # A fresh session per delivery, closed whatever the outcome
        with requests.Session() as session:
            response = session.post(self.url, json=payload, timeout=self.timeout)
        response.raise_for_status()
        return {"status": "sent", "status_code": response.status_code}
