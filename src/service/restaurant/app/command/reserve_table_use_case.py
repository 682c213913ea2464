from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, InvalidInputError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.dto.action_result import ActionResult, action_boundary
from src.service.restaurant.app.interface.i_table_registry import ITableRegistry
from src.service.restaurant.domain.constant.error_message import ErrorMessage


def normalize_guest_name(name: str | None) -> str:
    guest_name = (name or '').strip()
    if not guest_name:
        raise InvalidInputError(ErrorMessage.NAME_REQUIRED)
    return guest_name


async def reserve_for_guest(table_registry: ITableRegistry, *, table_id: int, name: str) -> None:
    """
    Reserve unless another guest already holds the table

    Re-reserving under the same name is allowed and changes nothing.
    """
    async with table_registry.lock(table_id):
        table = table_registry.get(table_id)
        if table.is_held_by_other(name):
            raise ConflictError(ErrorMessage.TABLE_TAKEN)
        if table.is_free:
            table_registry.reserve(table_id, name)


class ReserveTableUseCase:
    """Guest claims a table by name before ordering"""

    def __init__(self, *, table_registry: ITableRegistry) -> None:
        self.table_registry = table_registry

    @classmethod
    @inject
    def depends(
        cls,
        table_registry: ITableRegistry = Depends(Provide[Container.table_registry]),
    ) -> Self:
        return cls(table_registry=table_registry)

    @action_boundary
    @Logger.io
    async def execute(self, *, table_id: int, name: str) -> ActionResult:
        guest_name = normalize_guest_name(name)
        await reserve_for_guest(self.table_registry, table_id=table_id, name=guest_name)
        return ActionResult.ok()
