"""
Unit tests for TableRegistryImpl

Test coverage:
1. Fixed table set: valid ids resolve, anything else is NotFoundError
2. reserve / free mutate in place and keep the FREE ⇒ no order invariant
3. list() is ordered by table id
"""

from datetime import datetime, timezone

from anyio import Lock
import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.restaurant.domain.entity.menu_item_entity import MenuItem
from src.service.restaurant.domain.entity.order_entity import Order
from src.service.restaurant.domain.enum.table_status import TableStatus
from src.service.restaurant.driven_adapter.state.table_registry_impl import TableRegistryImpl


def _order(table_id: int) -> Order:
    return Order.create(
        table_id=table_id,
        name='Anna',
        menu_item=MenuItem(id='2', name='Sauerbraten', description='', price=16.5),
    )


class TestTableRegistry:
    def test_all_tables_start_free(self, table_registry):
        for table_id in range(1, 11):
            table = table_registry.get(table_id)
            assert table.status == TableStatus.FREE
            assert table.reserved_by is None
            assert table.order is None

    @pytest.mark.parametrize('table_id', [0, 11, -1, 999])
    def test_get_outside_registered_set_raises(self, table_registry, table_id):
        with pytest.raises(NotFoundError) as exc_info:
            table_registry.get(table_id)

        assert str(table_id) in exc_info.value.message

    def test_reserve_marks_table_reserved(self, table_registry):
        table_registry.reserve(3, 'Anna')

        table = table_registry.get(3)
        assert table.status == TableStatus.RESERVED
        assert table.reserved_by == 'Anna'

    def test_reserve_keeps_existing_order(self, table_registry):
        table_registry.reserve(3, 'Anna')
        order = _order(3)
        table_registry.get(3).install_order(order)

        table_registry.reserve(3, 'Anna')

        assert table_registry.get(3).order == order

    def test_reserve_unknown_table_raises(self, table_registry):
        with pytest.raises(NotFoundError):
            table_registry.reserve(42, 'Anna')

    @pytest.mark.parametrize('table_id', list(range(1, 11)))
    def test_free_then_get_yields_clean_table(self, table_registry, table_id):
        table_registry.reserve(table_id, 'Anna')
        table_registry.get(table_id).install_order(_order(table_id))

        table_registry.free(table_id)

        table = table_registry.get(table_id)
        assert table.status == TableStatus.FREE
        assert table.reserved_by is None
        assert table.order is None

    def test_free_on_free_table_succeeds(self, table_registry):
        table_registry.free(5)

        assert table_registry.get(5).is_free

    def test_list_is_ordered_by_table_id(self):
        registry = TableRegistryImpl(table_ids=[7, 2, 9, 2, 1])

        assert [table_id for table_id, _ in registry.list()] == [1, 2, 7, 9]
        assert registry.table_ids() == (1, 2, 7, 9)

    def test_empty_table_set_is_rejected(self):
        with pytest.raises(ValueError):
            TableRegistryImpl(table_ids=[])

    def test_lock_is_per_table(self, table_registry):
        assert isinstance(table_registry.lock(1), Lock)
        assert table_registry.lock(1) is table_registry.lock(1)
        assert table_registry.lock(1) is not table_registry.lock(2)

    def test_lock_unknown_table_raises(self, table_registry):
        with pytest.raises(NotFoundError):
            table_registry.lock(11)

    def test_snapshot_is_decoupled_from_later_mutation(self, table_registry):
        table_registry.reserve(3, 'Anna')
        snapshot = table_registry.get(3).snapshot()

        table_registry.free(3)

        assert snapshot.status == TableStatus.RESERVED
        assert snapshot.reserved_by == 'Anna'

    def test_is_valid(self, table_registry):
        assert table_registry.is_valid(1)
        assert table_registry.is_valid(10)
        assert not table_registry.is_valid(11)


def test_order_created_at_is_timezone_aware():
    order = _order(1)

    assert order.created_at.tzinfo is not None
    assert order.created_at <= datetime.now(timezone.utc)
