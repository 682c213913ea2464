from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.dto.action_result import ActionResult, action_boundary
from src.service.restaurant.app.interface.i_order_lifecycle_manager import (
    IOrderLifecycleManager,
)


class FreeTableUseCase:
    """Staff resets a table after the guest leaves; the order is discarded"""

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
    async def execute(self, *, table_id: int) -> ActionResult:
        await self.order_lifecycle_manager.free_table(table_id=table_id)
        return ActionResult.ok()
