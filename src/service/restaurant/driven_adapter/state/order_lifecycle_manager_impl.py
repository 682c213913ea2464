"""
Order Lifecycle Manager

Owns every mutation of table/order state. Each mutation holds the table's
lock for the whole read-modify-write and broadcasts before releasing it, so
callers observe: state written → all subscribers notified → return.
"""

from src.platform.exception.exceptions import ConflictError, InvalidStateError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_menu_catalog import IMenuCatalog
from src.service.restaurant.app.interface.i_order_broadcaster import IOrderBroadcaster
from src.service.restaurant.app.interface.i_table_registry import ITableRegistry
from src.service.restaurant.domain.constant.error_message import ErrorMessage
from src.service.restaurant.domain.entity.order_entity import Order
from src.service.restaurant.domain.enum.order_status import OrderStatus
from src.service.restaurant.domain.order_status_transition import (
    TransitionPolicy,
    validate_transition,
)


class OrderLifecycleManagerImpl:
    def __init__(
        self,
        *,
        table_registry: ITableRegistry,
        menu_catalog: IMenuCatalog,
        order_broadcaster: IOrderBroadcaster,
        transition_policy: TransitionPolicy | str = TransitionPolicy.FREE,
    ) -> None:
        self.table_registry = table_registry
        self.menu_catalog = menu_catalog
        self.order_broadcaster = order_broadcaster
        self.transition_policy = TransitionPolicy(transition_policy)

    @Logger.io
    async def create_order(
        self,
        *,
        table_id: int,
        guest_name: str,
        menu_item_id: str,
        reject_other_guest: bool = False,
    ) -> Order:
        async with self.table_registry.lock(table_id):
            table = self.table_registry.get(table_id)
            if reject_other_guest and table.is_held_by_other(guest_name):
                raise ConflictError(ErrorMessage.TABLE_TAKEN)

            menu_item = self.menu_catalog.find(menu_item_id)
            if menu_item is None:
                raise NotFoundError(ErrorMessage.MENU_ITEM_NOT_FOUND)

            if table.is_free:
                # Ordering normally follows a reservation; cover the direct path
                Logger.base.warning(
                    f'⚠️ [ORDER] Table {table_id} was FREE on order creation, auto-reserving'
                )
                self.table_registry.reserve(table_id, guest_name)

            order = Order.create(table_id=table_id, name=guest_name, menu_item=menu_item)
            if table.order is not None:
                Logger.base.info(
                    f'🔁 [ORDER] Replacing order {table.order.id} on table {table_id}'
                )
            table.install_order(order)

            self.order_broadcaster.broadcast(table_id=table_id, order=order)
            return order

    @Logger.io
    async def update_order_status(self, *, table_id: int, status: OrderStatus) -> Order:
        async with self.table_registry.lock(table_id):
            table = self.table_registry.get(table_id)
            if table.order is None:
                raise InvalidStateError(ErrorMessage.ORDER_NOT_FOUND)

            validate_transition(
                current=table.order.status, target=status, policy=self.transition_policy
            )
            order = table.order.with_status(status)
            table.install_order(order)

            self.order_broadcaster.broadcast(table_id=table_id, order=order)
            return order

    @Logger.io
    async def free_table(self, *, table_id: int) -> None:
        async with self.table_registry.lock(table_id):
            self.table_registry.free(table_id)
