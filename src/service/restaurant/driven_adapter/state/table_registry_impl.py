"""
In-memory Table Registry

Process-wide table state. Created once by the DI container and shared by
every request handler; nothing here survives a restart.
"""

from collections.abc import Iterable
from typing import Dict

from anyio import Lock

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.domain.constant.error_message import ErrorMessage
from src.service.restaurant.domain.entity.table_entity import Table


class TableRegistryImpl:
    def __init__(self, *, table_ids: Iterable[int]) -> None:
        ids = sorted(set(table_ids))
        if not ids:
            raise ValueError('At least one table id is required')
        self._table_ids: tuple[int, ...] = tuple(ids)
        self._tables: Dict[int, Table] = {table_id: Table(table_id=table_id) for table_id in ids}
        self._locks: Dict[int, Lock] = {table_id: Lock() for table_id in ids}

        Logger.base.info(f'🍽️ [REGISTRY] Registered tables: {list(self._table_ids)}')

    def table_ids(self) -> tuple[int, ...]:
        return self._table_ids

    def is_valid(self, table_id: int) -> bool:
        return table_id in self._tables

    def _validate(self, table_id: int) -> None:
        if not self.is_valid(table_id):
            raise NotFoundError(ErrorMessage.invalid_table(table_id, self._table_ids))

    def get(self, table_id: int) -> Table:
        self._validate(table_id)
        return self._tables[table_id]

    def lock(self, table_id: int) -> Lock:
        self._validate(table_id)
        return self._locks[table_id]

    def reserve(self, table_id: int, name: str) -> None:
        self.get(table_id).reserve(name)
        Logger.base.info(f'🍽️ [REGISTRY] Table {table_id} reserved by {name!r}')

    def free(self, table_id: int) -> None:
        self.get(table_id).free()
        Logger.base.info(f'🍽️ [REGISTRY] Table {table_id} freed')

    def list(self) -> list[tuple[int, Table]]:
        return [(table_id, self._tables[table_id]) for table_id in self._table_ids]
