"""
Order Broadcaster Interface

Abstraction for pushing order snapshots to the live subscribers of a table.

Follows Dependency Inversion Principle:
- Use cases depend on this interface
- The SSE driven adapter implements it on top of the platform broadcaster
"""

from typing import Protocol

from src.platform.event.i_subscriber_channel import ISubscriberChannel
from src.service.restaurant.domain.entity.order_entity import Order


class IOrderBroadcaster(Protocol):
    def subscribe(self, *, table_id: int, channel: ISubscriberChannel) -> None:
        """
        Raises:
            NotFoundError: table_id is outside the registered set
        """
        ...

    def unsubscribe(self, *, table_id: int, channel: ISubscriberChannel) -> None: ...

    def broadcast(self, *, table_id: int, order: Order) -> int:
        """
        Serialize the order and push it to every channel subscribed to the table

        Returns:
            Number of channels that received the snapshot
        """
        ...

    def subscriber_count(self, *, table_id: int) -> int: ...

    def encode(self, order: Order) -> bytes:
        """Wire form of an order snapshot, identical to what broadcast sends"""
        ...
