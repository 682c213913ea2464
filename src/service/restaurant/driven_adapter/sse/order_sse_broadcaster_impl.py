"""
Order SSE Broadcaster Implementation

Driven Adapter implementing IOrderBroadcaster on top of the platform
in-memory broadcaster, keyed by table id.

Limitations:
- Single-instance only (no cross-process fan-out)
- Subscribers are lost on restart; clients reconnect and re-seed from
  the query endpoints
"""

from src.platform.event.i_in_memory_broadcaster import IInMemoryBroadcaster
from src.platform.event.i_subscriber_channel import ISubscriberChannel
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_table_registry import ITableRegistry
from src.service.restaurant.domain.entity.order_entity import Order
from src.service.restaurant.driven_adapter.sse.order_message_codec import OrderMessageCodec


class OrderSSEBroadcasterImpl:
    def __init__(self, *, broadcaster: IInMemoryBroadcaster, table_registry: ITableRegistry) -> None:
        self._broadcaster = broadcaster
        self._table_registry = table_registry

    def subscribe(self, *, table_id: int, channel: ISubscriberChannel) -> None:
        self._table_registry.get(table_id)  # raises NotFoundError for unknown tables
        self._broadcaster.subscribe(key=table_id, channel=channel)
        Logger.base.info(
            f'📡 [SSE] Subscribed to table {table_id} '
            f'(subscribers: {self._broadcaster.subscriber_count(key=table_id)})'
        )

    def unsubscribe(self, *, table_id: int, channel: ISubscriberChannel) -> None:
        self._broadcaster.unsubscribe(key=table_id, channel=channel)
        Logger.base.info(
            f'📡 [SSE] Unsubscribed from table {table_id} '
            f'(remaining: {self._broadcaster.subscriber_count(key=table_id)})'
        )

    def broadcast(self, *, table_id: int, order: Order) -> int:
        self._table_registry.get(table_id)
        delivered = self._broadcaster.broadcast(
            key=table_id, payload=self.encode(order)
        )
        Logger.base.info(
            f'📤 [SSE] Order {order.id} ({order.status}) pushed to {delivered} '
            f'subscriber(s) of table {table_id}'
        )
        return delivered

    def subscriber_count(self, *, table_id: int) -> int:
        return self._broadcaster.subscriber_count(key=table_id)

    def encode(self, order: Order) -> bytes:
        return OrderMessageCodec.encode(order)
