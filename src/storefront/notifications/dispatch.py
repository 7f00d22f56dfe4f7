"""Best-effort dispatch of order and basket notifications.

Delivery failures of any kind (network, serialisation, timeouts, a "failed"
result from the adapter) are logged and dropped here. Nothing is retried and
nothing is ever raised back to the caller, so a notification outage can never
change the outcome of a checkout or a basket update.
"""

import json

import structlog

from storefront.notifications.channel import QUEUE, WEBHOOK, get_channel
from storefront.notifications.projections import BasketSnapshot, OrderNotification

logger = structlog.get_logger(__name__)


def deliver_best_effort(channel_type: str, payload) -> bool:
    """Attempt one delivery of payload on the channel. Returns True when sent."""
    try:
        adapter = get_channel(channel_type)
        if channel_type == WEBHOOK:
            result = adapter.send(payload.to_payload())
        elif channel_type == QUEUE:
            result = adapter.publish(json.dumps(payload.to_payload()))
        else:
            result = {"status": "failed", "error": f"Unknown channel: {channel_type}"}
        status = result.get("status")
        error = result.get("error", "Unknown dispatch error")
    except Exception as exc:
        logger.error(
            "Best-effort delivery failed",
            channel=channel_type,
            payload_id=getattr(payload, "id", None),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return False

    if status != "sent":
        logger.error(
            "Best-effort delivery rejected",
            channel=channel_type,
            payload_id=getattr(payload, "id", None),
            error=error,
        )
        return False

    logger.info("Notification delivered", channel=channel_type, payload_id=getattr(payload, "id", None))
    return True


def notify_order_placed(notification: OrderNotification) -> bool:
    return deliver_best_effort(WEBHOOK, notification)


def publish_basket_snapshot(snapshot: BasketSnapshot) -> bool:
    return deliver_best_effort(QUEUE, snapshot)
