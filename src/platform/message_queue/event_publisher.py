"""
Kafka Message Publisher

Publishing through confluent-kafka's experimental AsyncIO Producer, with
orjson-encoded payloads.

Features:
- Global async producer instance for connection reuse
- Producer settings centralized in Settings.KAFKA_PRODUCER_CONFIG
- True async - doesn't block event loop
"""

from typing import Any, Literal, Optional

from confluent_kafka.experimental.aio import AIOProducer
from opentelemetry import trace
import orjson

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# Global async producer instance
_global_producer: AIOProducer | None = None


async def _get_global_producer() -> AIOProducer:
    """Get global async producer instance - avoid creating new producer on every publish"""
    global _global_producer
    if _global_producer is None:
        _global_producer = AIOProducer(settings.KAFKA_PRODUCER_CONFIG)
    return _global_producer


async def publish_message(
    *,
    topic: str,
    payload: dict[str, Any],
    key: Optional[str] = None,
) -> Literal[True]:
    """
    Publish a JSON message to a Kafka topic (async, non-blocking).

    Example:
        await publish_message(
            topic='push_notifications',
            payload={'pushNotificationKey': 'abc', 'title': 'Call Reminder', ...},
            key='abc',
        )
    """
    tracer = trace.get_tracer(__name__)

    with tracer.start_as_current_span(
        'kafka.publish',
        attributes={
            'messaging.system': 'kafka',
            'messaging.destination': topic,
            'messaging.destination_kind': 'topic',
        },
    ):
        producer = await _get_global_producer()
        await producer.produce(
            topic=topic,
            key=key.encode() if key else None,
            value=orjson.dumps(payload),
        )

        Logger.base.info(f'Published message to {topic} (key={key})')

        return True


async def close_producer() -> None:
    global _global_producer
    if _global_producer is not None:
        await _global_producer.flush()
        await _global_producer.close()
        _global_producer = None
        Logger.base.info('Closed async producer')
