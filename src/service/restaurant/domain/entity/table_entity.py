from typing import Optional

import attrs

from src.service.restaurant.domain.entity.order_entity import Order
from src.service.restaurant.domain.enum.table_status import TableStatus


@attrs.define
class Table:
    """
    Seating unit with reservation and order state

    Invariants:
    - reserved_by is set iff status is RESERVED
    - order is None whenever status is FREE
    """

    table_id: int
    status: TableStatus = TableStatus.FREE
    reserved_by: Optional[str] = None
    order: Optional[Order] = None

    @property
    def is_free(self) -> bool:
        return self.status == TableStatus.FREE

    def is_held_by_other(self, name: str) -> bool:
        return self.status == TableStatus.RESERVED and self.reserved_by != name

    def reserve(self, name: str) -> None:
        # A FREE table never carries an order, so any existing order is kept
        self.status = TableStatus.RESERVED
        self.reserved_by = name

    def install_order(self, order: Order) -> None:
        self.order = order

    def free(self) -> None:
        self.status = TableStatus.FREE
        self.reserved_by = None
        self.order = None

    def snapshot(self) -> 'Table':
        """Copy decoupled from later in-place mutation (Order itself is immutable)"""
        return attrs.evolve(self)
