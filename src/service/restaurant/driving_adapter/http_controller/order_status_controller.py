from collections.abc import AsyncGenerator
from contextlib import aclosing
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sse_starlette.sse import EventSourceResponse

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.query.stream_order_status_use_case import (
    StreamOrderStatusUseCase,
)
from src.service.restaurant.domain.constant.error_message import ErrorMessage


router = APIRouter()

SSE_HEADERS = {
    'Cache-Control': 'no-cache, no-transform',
    'X-Accel-Buffering': 'no',
}


# ============================ SSE Endpoint ============================


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def stream_order_status(
    table_id: Optional[str] = Query(default=None, alias='tableId'),
    use_case: StreamOrderStatusUseCase = Depends(StreamOrderStatusUseCase.depends),
) -> EventSourceResponse:
    """
    SSE real-time push of a table's order status

    - 400: tableId missing, non-numeric, or not a registered table
    - 404: the table has no order yet
    - otherwise: current order first, then one message per order change,
      with ping comments every SSE_HEARTBEAT_INTERVAL seconds
    """
    raw_table_id = (table_id or '').strip()
    # ASCII only: int() also accepts other Unicode decimal digits
    if not (raw_table_id.isascii() and raw_table_id.isdigit()):
        raise HTTPException(status_code=400, detail=ErrorMessage.TABLE_ID_REQUIRED)

    parsed_table_id = int(raw_table_id)
    if not use_case.is_valid_table(parsed_table_id):
        raise HTTPException(
            status_code=400,
            detail=ErrorMessage.invalid_table(parsed_table_id, use_case.table_ids()),
        )

    try:
        use_case.get_active_order(table_id=parsed_table_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

    Logger.base.info(f'📡 [SSE] Client subscribing to table {parsed_table_id}')

    async def event_generator() -> AsyncGenerator[dict[str, str], None]:
        # closing this generator must close the subscription with it
        async with aclosing(use_case.stream(table_id=parsed_table_id)) as stream:
            async for data in stream:
                yield {'data': data}

    return EventSourceResponse(
        event_generator(),
        ping=settings.SSE_HEARTBEAT_INTERVAL,
        headers=SSE_HEADERS,
    )
