from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_table_registry import ITableRegistry
from src.service.restaurant.domain.entity.table_entity import Table


class GetTableUseCase:
    def __init__(self, *, table_registry: ITableRegistry) -> None:
        self.table_registry = table_registry

    @classmethod
    @inject
    def depends(
        cls,
        table_registry: ITableRegistry = Depends(Provide[Container.table_registry]),
    ) -> Self:
        return cls(table_registry=table_registry)

    @Logger.io
    def get_table(self, *, table_id: int) -> Table:
        """
        Snapshot of a single table, used to seed a page before subscribing

        Raises:
            NotFoundError: table_id is outside the registered set
        """
        return self.table_registry.get(table_id).snapshot()
