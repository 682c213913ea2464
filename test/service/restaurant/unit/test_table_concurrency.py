"""
Concurrency tests for table actions

Actions on the same table run as concurrent tasks; each check-and-write holds
the table's lock, so the outcome must match some serial order.

Test coverage:
1. Reserve and order by different guests on one table: exactly one wins
2. Many guests reserving one table: exactly one wins
3. Status update racing free: the table ends FREE without an order
4. Concurrent updates: every success has reached the subscriber on return,
   in the order the table saw them
5. Different tables do not block each other
"""

import anyio
from anyio import WouldBlock, fail_after
import pytest

from src.platform.event.memory_stream_channel import MemoryStreamChannel
from src.service.restaurant.app.command.create_order_use_case import CreateOrderUseCase
from src.service.restaurant.app.command.free_table_use_case import FreeTableUseCase
from src.service.restaurant.app.command.reserve_table_use_case import ReserveTableUseCase
from src.service.restaurant.app.command.update_order_status_use_case import (
    UpdateOrderStatusUseCase,
)
from src.service.restaurant.domain.constant.error_message import ErrorMessage
from src.service.restaurant.domain.enum.order_status import OrderStatus
from src.service.restaurant.driven_adapter.sse.order_message_codec import OrderMessageCodec


@pytest.fixture
def reserve_use_case(table_registry):
    return ReserveTableUseCase(table_registry=table_registry)


@pytest.fixture
def create_order_use_case(table_registry, lifecycle_manager):
    return CreateOrderUseCase(
        table_registry=table_registry, order_lifecycle_manager=lifecycle_manager
    )


@pytest.fixture
def update_status_use_case(lifecycle_manager):
    return UpdateOrderStatusUseCase(order_lifecycle_manager=lifecycle_manager)


@pytest.fixture
def free_table_use_case(lifecycle_manager):
    return FreeTableUseCase(order_lifecycle_manager=lifecycle_manager)


def drain(channel: MemoryStreamChannel) -> list[dict]:
    messages = []
    while True:
        try:
            messages.append(OrderMessageCodec.decode(channel.receive_stream.receive_nowait()))
        except WouldBlock:
            return messages


class TestSameTableConflicts:
    @pytest.mark.asyncio
    @pytest.mark.parametrize('reserve_starts_first', [True, False])
    async def test_reserve_and_order_by_different_guests_have_one_winner(
        self, reserve_use_case, create_order_use_case, table_registry, reserve_starts_first
    ):
        results = {}

        async def reserve_ben():
            results['Ben'] = await reserve_use_case.execute(table_id=3, name='Ben')

        async def order_anna():
            results['Anna'] = await create_order_use_case.execute(
                table_id=3, name='Anna', menu_item_id='2'
            )

        tasks = (reserve_ben, order_anna) if reserve_starts_first else (order_anna, reserve_ben)
        with fail_after(1.0):
            async with anyio.create_task_group() as tg:
                for task in tasks:
                    tg.start_soon(task)

        winners = [name for name, result in results.items() if result.success]
        losers = [result for result in results.values() if not result.success]
        assert len(winners) == 1
        assert losers[0].error == ErrorMessage.TABLE_TAKEN

        table = table_registry.get(3)
        assert table.reserved_by == winners[0]
        if winners[0] == 'Ben':
            assert table.order is None
        else:
            assert table.order is not None
            assert table.order.name == 'Anna'

    @pytest.mark.asyncio
    async def test_many_guests_reserving_one_table(self, reserve_use_case, table_registry):
        guests = ['Anna', 'Ben', 'Clara', 'David', 'Emma']
        results = {}

        async def reserve(name: str):
            results[name] = await reserve_use_case.execute(table_id=5, name=name)

        with fail_after(1.0):
            async with anyio.create_task_group() as tg:
                for name in guests:
                    tg.start_soon(reserve, name)

        winners = [name for name, result in results.items() if result.success]
        assert len(winners) == 1
        assert table_registry.get(5).reserved_by == winners[0]

    @pytest.mark.asyncio
    async def test_update_racing_free_leaves_table_free(
        self, create_order_use_case, update_status_use_case, free_table_use_case, table_registry
    ):
        await create_order_use_case.execute(table_id=3, name='Anna', menu_item_id='2')
        results = {}

        async def update():
            results['update'] = await update_status_use_case.execute(
                table_id=3, status=OrderStatus.ORDER_SERVED
            )

        async def free():
            results['free'] = await free_table_use_case.execute(table_id=3)

        with fail_after(1.0):
            async with anyio.create_task_group() as tg:
                tg.start_soon(update)
                tg.start_soon(free)

        assert results['free'].success
        if not results['update'].success:
            assert results['update'].error == ErrorMessage.ORDER_NOT_FOUND

        table = table_registry.get(3)
        assert table.is_free
        assert table.reserved_by is None
        assert table.order is None


class TestBroadcastUnderConcurrency:
    @pytest.mark.asyncio
    async def test_subscriber_sees_every_update_in_table_order(
        self, lifecycle_manager, order_broadcaster, table_registry
    ):
        await lifecycle_manager.create_order(table_id=3, guest_name='Anna', menu_item_id='2')
        channel = MemoryStreamChannel(max_buffer_size=10)
        order_broadcaster.subscribe(table_id=3, channel=channel)
        statuses = [
            OrderStatus.ORDER_PREPARING,
            OrderStatus.ORDER_SERVED,
            OrderStatus.ORDER_PREPARING,
            OrderStatus.ORDER_SERVED,
        ]

        async def update(status: OrderStatus):
            await lifecycle_manager.update_order_status(table_id=3, status=status)

        with fail_after(1.0):
            async with anyio.create_task_group() as tg:
                for status in statuses:
                    tg.start_soon(update, status)

        # every call has returned, so every broadcast must already be buffered
        messages = drain(channel)
        assert len(messages) == len(statuses)
        assert sorted(m['status'] for m in messages) == sorted(s.value for s in statuses)
        assert messages[-1]['status'] == table_registry.get(3).order.status.value

    @pytest.mark.asyncio
    async def test_orders_on_different_tables_all_succeed(
        self, create_order_use_case, table_registry
    ):
        results = {}

        async def place(table_id: int, name: str):
            results[table_id] = await create_order_use_case.execute(
                table_id=table_id, name=name, menu_item_id='1'
            )

        with fail_after(1.0):
            async with anyio.create_task_group() as tg:
                tg.start_soon(place, 3, 'Anna')
                tg.start_soon(place, 4, 'Ben')
                tg.start_soon(place, 5, 'Clara')

        assert all(result.success for result in results.values())
        assert {table_registry.get(i).order.name for i in (3, 4, 5)} == {'Anna', 'Ben', 'Clara'}
