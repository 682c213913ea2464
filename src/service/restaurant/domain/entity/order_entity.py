from datetime import datetime, timezone

import attrs
import uuid_utils as uuid

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.domain.entity.menu_item_entity import MenuItem
from src.service.restaurant.domain.enum.order_status import OrderStatus


@attrs.frozen
class OrderItem:
    """Copy of a menu item taken when the order is placed"""

    id: str
    name: str
    description: str
    price: float

    @classmethod
    def snapshot_of(cls, menu_item: MenuItem) -> 'OrderItem':
        return cls(
            id=menu_item.id,
            name=menu_item.name,
            description=menu_item.description,
            price=menu_item.price,
        )


@attrs.frozen
class Order:
    """
    A guest's single active order on a table

    Immutable: a status change produces a new Order with the same id,
    item and created_at. Later menu edits never reach a placed order.
    """

    id: str
    table_id: int
    name: str
    item: OrderItem
    status: OrderStatus
    created_at: datetime

    @classmethod
    @Logger.io
    def create(cls, *, table_id: int, name: str, menu_item: MenuItem) -> 'Order':
        return cls(
            id=str(uuid.uuid7()),
            table_id=table_id,
            name=name,
            item=OrderItem.snapshot_of(menu_item),
            status=OrderStatus.ORDER_RECEIVED,
            created_at=datetime.now(timezone.utc),
        )

    def with_status(self, status: OrderStatus) -> 'Order':
        return attrs.evolve(self, status=status)
