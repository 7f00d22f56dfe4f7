"""Channel adapter registry — pluggable outbound notification channels.

Provides singleton access to the order webhook and the reservation queue.
Fake in-memory adapters are used unless an endpoint is configured through
ORDER_WEBHOOK_URL / RESERVATION_QUEUE_URL.
"""

from storefront.utils import settings

WEBHOOK = "webhook"
QUEUE = "queue"

_channel_instances: dict[str, object] = {}


def get_channel(channel_type: str):
    """Return the configured channel adapter (singleton per channel type).

    Args:
        channel_type: "webhook" or "queue"
    """
    if channel_type not in _channel_instances:
        if channel_type == WEBHOOK:
            if settings.ORDER_WEBHOOK_URL:
                from storefront.notifications.channel.http_webhook import HttpWebhookAdapter

                adapter = HttpWebhookAdapter(
                    url=settings.ORDER_WEBHOOK_URL,
                    timeout=settings.NOTIFICATION_TIMEOUT_SECONDS,
                )
            else:
                from storefront.notifications.channel.fake_webhook import FakeWebhookAdapter

                adapter = FakeWebhookAdapter()
        elif channel_type == QUEUE:
            if settings.RESERVATION_QUEUE_URL:
                from storefront.notifications.channel.redis_queue import RedisQueueAdapter

                adapter = RedisQueueAdapter(
                    url=settings.RESERVATION_QUEUE_URL,
                    queue_name=settings.RESERVATION_QUEUE_NAME,
                    timeout=settings.NOTIFICATION_TIMEOUT_SECONDS,
                )
            else:
                from storefront.notifications.channel.fake_queue import FakeQueueAdapter

                adapter = FakeQueueAdapter()
        else:
            raise ValueError(f"Unknown channel type: {channel_type}")
        _channel_instances[channel_type] = adapter

    return _channel_instances[channel_type]


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    _channel_instances.clear()
