from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.dto.action_result import ActionResult, action_boundary
from src.service.restaurant.app.interface.i_order_lifecycle_manager import (
    IOrderLifecycleManager,
)
from src.service.restaurant.domain.enum.order_status import OrderStatus
from src.service.restaurant.domain.order_status_transition import parse_order_status


class UpdateOrderStatusUseCase:
    """Staff moves a table's order through the kitchen lifecycle"""

    def __init__(self, *, order_lifecycle_manager: IOrderLifecycleManager) -> None:
        self.order_lifecycle_manager = order_lifecycle_manager

    @classmethod
    @inject
    def depends(
        cls,
        order_lifecycle_manager: IOrderLifecycleManager = Depends(
            Provide[Container.order_lifecycle_manager]
        ),
    ) -> Self:
        return cls(order_lifecycle_manager=order_lifecycle_manager)

    @action_boundary
    @Logger.io
    async def execute(self, *, table_id: int, status: str | OrderStatus) -> ActionResult:
        order = await self.order_lifecycle_manager.update_order_status(
            table_id=table_id, status=parse_order_status(status)
        )
        return ActionResult.ok(order)
