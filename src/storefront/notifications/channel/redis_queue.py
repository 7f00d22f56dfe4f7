"""Redis queue adapter — pushes JSON messages onto a named Redis list."""

import redis

from storefront.notifications.channel.queue_port import QueuePort


class RedisQueueAdapter(QueuePort):
    def __init__(self, url: str, queue_name: str, timeout: float):
        self.url = url
        self.queue_name = queue_name
        self.timeout = timeout

    def publish(self, body: str) -> dict:
        client = redis.Redis.from_url(
            self.url,
            socket_timeout=self.timeout,
            socket_connect_timeout=self.timeout,
        )
        try:
            length = client.rpush(self.queue_name, body)
        finally:
            client.close()
        return {"status": "sent", "queue_length": length}
