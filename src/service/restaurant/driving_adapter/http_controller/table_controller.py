from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.create_order_use_case import CreateOrderUseCase
from src.service.restaurant.app.command.free_table_use_case import FreeTableUseCase
from src.service.restaurant.app.command.reserve_table_use_case import ReserveTableUseCase
from src.service.restaurant.app.command.update_order_status_use_case import (
    UpdateOrderStatusUseCase,
)
from src.service.restaurant.app.query.get_table_use_case import GetTableUseCase
from src.service.restaurant.app.query.list_tables_use_case import ListTablesUseCase
from src.service.restaurant.driving_adapter.http_controller.response_mapper import (
    to_action_result_response,
    to_table_response,
)
from src.service.restaurant.driving_adapter.schema.table_schema import (
    ActionResultResponse,
    CreateOrderRequest,
    ReserveTableRequest,
    TableIdsResponse,
    TableResponse,
    UpdateOrderStatusRequest,
)


router = APIRouter()


# ============================ Queries ============================


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_tables(
    use_case: ListTablesUseCase = Depends(ListTablesUseCase.depends),
) -> List[TableResponse]:
    return [to_table_response(table) for _, table in use_case.list_tables()]


@router.get('/ids', status_code=status.HTTP_200_OK)
async def list_table_ids(
    use_case: ListTablesUseCase = Depends(ListTablesUseCase.depends),
) -> TableIdsResponse:
    return TableIdsResponse(table_ids=use_case.table_ids())


@router.get('/{table_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_table(
    table_id: int,
    use_case: GetTableUseCase = Depends(GetTableUseCase.depends),
) -> TableResponse:
    # NotFoundError → 404 via the registered exception handler
    return to_table_response(use_case.get_table(table_id=table_id))


# ============================ Actions ============================
# Failures come back as {"success": false, "error": ...} with status 200


@router.post('/{table_id}/reserve', status_code=status.HTTP_200_OK, response_model_exclude_none=True)
@Logger.io
async def reserve_table(
    table_id: int,
    request: ReserveTableRequest,
    use_case: ReserveTableUseCase = Depends(ReserveTableUseCase.depends),
) -> ActionResultResponse:
    result = await use_case.execute(table_id=table_id, name=request.name)
    return to_action_result_response(result)


@router.post('/{table_id}/order', status_code=status.HTTP_200_OK, response_model_exclude_none=True)
@Logger.io
async def create_order(
    table_id: int,
    request: CreateOrderRequest,
    use_case: CreateOrderUseCase = Depends(CreateOrderUseCase.depends),
) -> ActionResultResponse:
    result = await use_case.execute(
        table_id=table_id, name=request.name, menu_item_id=request.menu_item_id
    )
    return to_action_result_response(result)


@router.patch(
    '/{table_id}/order/status', status_code=status.HTTP_200_OK, response_model_exclude_none=True
)
@Logger.io
async def update_order_status(
    table_id: int,
    request: UpdateOrderStatusRequest,
    use_case: UpdateOrderStatusUseCase = Depends(UpdateOrderStatusUseCase.depends),
) -> ActionResultResponse:
    result = await use_case.execute(table_id=table_id, status=request.status)
    return to_action_result_response(result)


@router.post('/{table_id}/free', status_code=status.HTTP_200_OK, response_model_exclude_none=True)
@Logger.io
async def free_table(
    table_id: int,
    use_case: FreeTableUseCase = Depends(FreeTableUseCase.depends),
) -> ActionResultResponse:
    result = await use_case.execute(table_id=table_id)
    return to_action_result_response(result)
