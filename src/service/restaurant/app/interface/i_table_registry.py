from typing import Protocol

from anyio import Lock

from src.service.restaurant.domain.entity.table_entity import Table


class ITableRegistry(Protocol):
    """
    Fixed set of addressable tables

    Tables exist from process start and are never created or removed.
    Mutations happen in place; callers hold lock(table_id) around every
    read-modify-write.
    """

    def table_ids(self) -> tuple[int, ...]: ...

    def is_valid(self, table_id: int) -> bool: ...

    def get(self, table_id: int) -> Table:
        """
        Raises:
            NotFoundError: table_id is outside the registered set
        """
        ...

    def lock(self, table_id: int) -> Lock:
        """Per-table mutual exclusion for read-modify-write sequences"""
        ...

    def reserve(self, table_id: int, name: str) -> None:
        """Mark RESERVED by name; does not check who held the table before"""
        ...

    def free(self, table_id: int) -> None:
        """Reset to FREE, clearing reserved_by and order"""
        ...

    def list(self) -> list[tuple[int, Table]]:
        """All tables ordered by table id"""
        ...
