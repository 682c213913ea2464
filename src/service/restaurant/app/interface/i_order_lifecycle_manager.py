from typing import Protocol

from src.service.restaurant.domain.entity.order_entity import Order
from src.service.restaurant.domain.enum.order_status import OrderStatus


class IOrderLifecycleManager(Protocol):
    """Creates, updates and clears the single order of a table"""

    async def create_order(
        self,
        *,
        table_id: int,
        guest_name: str,
        menu_item_id: str,
        reject_other_guest: bool = False,
    ) -> Order:
        """
        Place a new order, replacing any prior one, then broadcast it

        With reject_other_guest the reservation check runs under the same
        table lock as the write.

        Raises:
            NotFoundError: unknown table or menu item
            ConflictError: reject_other_guest and the table is held by another name
        """
        ...

    async def update_order_status(self, *, table_id: int, status: OrderStatus) -> Order:
        """
        Replace the status of the table's order, then broadcast it

        Raises:
            NotFoundError: unknown table
            InvalidStateError: the table has no order, or the policy rejects the jump
        """
        ...

    async def free_table(self, *, table_id: int) -> None: ...
