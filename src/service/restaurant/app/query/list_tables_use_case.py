from typing import List, Self, Tuple

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_table_registry import ITableRegistry
from src.service.restaurant.domain.entity.table_entity import Table


class ListTablesUseCase:
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
    def list_tables(self) -> List[Tuple[int, Table]]:
        """Admin overview: every table ordered by id"""
        tables = [(table_id, table.snapshot()) for table_id, table in self.table_registry.list()]
        Logger.base.info(
            f'📋 [LIST_TABLES] {sum(1 for _, t in tables if not t.is_free)}/{len(tables)} tables occupied'
        )
        return tables

    def table_ids(self) -> List[int]:
        return list(self.table_registry.table_ids())
