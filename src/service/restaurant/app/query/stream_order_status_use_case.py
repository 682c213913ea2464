"""
Stream Order Status Use Case

Live order updates for one table. The caller gets the current order first,
then one payload per order mutation until the client goes away.
"""

from collections.abc import AsyncGenerator
from typing import Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.event.memory_stream_channel import MemoryStreamChannel
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_order_broadcaster import IOrderBroadcaster
from src.service.restaurant.app.interface.i_table_registry import ITableRegistry
from src.service.restaurant.domain.constant.error_message import ErrorMessage
from src.service.restaurant.domain.entity.order_entity import Order


class StreamOrderStatusUseCase:
    def __init__(
        self,
        *,
        table_registry: ITableRegistry,
        order_broadcaster: IOrderBroadcaster,
        subscriber_buffer_size: int = 10,
    ) -> None:
        self.table_registry = table_registry
        self.order_broadcaster = order_broadcaster
        self.subscriber_buffer_size = subscriber_buffer_size

    @classmethod
    @inject
    def depends(
        cls,
        table_registry: ITableRegistry = Depends(Provide[Container.table_registry]),
        order_broadcaster: IOrderBroadcaster = Depends(Provide[Container.order_broadcaster]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            table_registry=table_registry,
            order_broadcaster=order_broadcaster,
            subscriber_buffer_size=settings.SUBSCRIBER_BUFFER_SIZE,
        )

    def is_valid_table(self, table_id: int) -> bool:
        return self.table_registry.is_valid(table_id)

    def table_ids(self) -> tuple[int, ...]:
        return self.table_registry.table_ids()

    @Logger.io
    def get_active_order(self, *, table_id: int) -> Order:
        """
        Raises:
            NotFoundError: unknown table, or the table has no order yet
        """
        order = self.table_registry.get(table_id).order
        if order is None:
            raise NotFoundError(ErrorMessage.ORDER_NOT_FOUND)
        return order

    async def stream(self, *, table_id: int) -> AsyncGenerator[str, None]:
        """
        Yields:
            JSON order snapshots (camelCase), the current one first
        """
        channel = MemoryStreamChannel(max_buffer_size=self.subscriber_buffer_size)

        # subscribe and snapshot with no await in between: no update can slip through
        self.order_broadcaster.subscribe(table_id=table_id, channel=channel)
        current = self.table_registry.get(table_id).order

        try:
            if current is not None:
                yield self.order_broadcaster.encode(current).decode()

            async for payload in channel.receive_stream:
                yield payload.decode()

            Logger.base.info(f'📡 [SSE] Channel for table {table_id} closed by server')

        except anyio.get_cancelled_exc_class():
            Logger.base.info(f'🔌 [SSE] Client disconnected from table {table_id}')
            raise
        except Exception as e:
            Logger.base.error(
                f'[SSE] Error in stream for table {table_id}: {type(e).__name__}: {e}'
            )
            raise
        finally:
            with anyio.CancelScope(shield=True):
                self.order_broadcaster.unsubscribe(table_id=table_id, channel=channel)
                channel.close_reader()
