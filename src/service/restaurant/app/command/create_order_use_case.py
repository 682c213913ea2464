from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.reserve_table_use_case import (
    normalize_guest_name,
    reserve_for_guest,
)
from src.service.restaurant.app.dto.action_result import ActionResult, action_boundary
from src.service.restaurant.app.interface.i_order_lifecycle_manager import (
    IOrderLifecycleManager,
)
from src.service.restaurant.app.interface.i_table_registry import ITableRegistry


class CreateOrderUseCase:
    """
    Guest places an order for a menu item

    Flow:
    1. Reject if the table is reserved under a different name
    2. Without a menu item: reserve only, no order
    3. Otherwise hand over to the lifecycle manager, which installs the
       order and pushes it to the table's live subscribers
    """

    def __init__(
        self,
        *,
        table_registry: ITableRegistry,
        order_lifecycle_manager: IOrderLifecycleManager,
    ) -> None:
        self.table_registry = table_registry
        self.order_lifecycle_manager = order_lifecycle_manager

    @classmethod
    @inject
    def depends(
        cls,
        table_registry: ITableRegistry = Depends(Provide[Container.table_registry]),
        order_lifecycle_manager: IOrderLifecycleManager = Depends(
            Provide[Container.order_lifecycle_manager]
        ),
    ) -> Self:
        return cls(table_registry=table_registry, order_lifecycle_manager=order_lifecycle_manager)

    @action_boundary
    @Logger.io
    async def execute(
        self, *, table_id: int, name: str, menu_item_id: Optional[str] = None
    ) -> ActionResult:
        guest_name = normalize_guest_name(name)

        if not menu_item_id:
            await reserve_for_guest(self.table_registry, table_id=table_id, name=guest_name)
            return ActionResult.ok()

        order = await self.order_lifecycle_manager.create_order(
            table_id=table_id,
            guest_name=guest_name,
            menu_item_id=menu_item_id,
            reject_other_guest=True,
        )
        Logger.base.info(f'🧾 [ORDER] {order.id} placed on table {table_id}: {order.item.name}')
        return ActionResult.ok(order)
