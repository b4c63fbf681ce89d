# digit_services/infrastructure/messaging/rabbitmq_publisher.py

import json
import uuid
from typing import Any, Dict, List

import aio_pika

from digit_services.config.settings import settings


class RabbitMQPublisher:
    def __init__(self, exchange_name: str | None = None):
        self._exchange_name = exchange_name or settings.rabbitmq_exchange
        self._connection = None
        self._channel = None

    async def connect(self):
        self._connection = await aio_pika.connect_robust(
            settings.rabbitmq_url
        )
        self._channel = await self._connection.channel()
        await self._channel.set_qos(prefetch_count=10)

    async def publish(
        self,
        exchange_name: str,
        routing_key: str,
        message: Any,
        message_id: str,
    ):

        if not self._channel:
            await self.connect()

        exchange = await self._channel.declare_exchange(
            exchange_name,
            aio_pika.ExchangeType.TOPIC,
            durable=True,
        )

        msg = aio_pika.Message(
            body=json.dumps(message).encode(),
            content_type="application/json",
            delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
            message_id=message_id,
        )

        await exchange.publish(msg, routing_key=routing_key)

    async def push(self, topic: str, records: List[Dict[str, Any]]):
        """Publish records as one message; the topic is the routing key on the platform exchange."""
        await self.publish(self._exchange_name, topic, records, str(uuid.uuid4()))

    async def close(self):
        if self._connection is not None:
            await self._connection.close()
            self._connection = None
            self._channel = None
