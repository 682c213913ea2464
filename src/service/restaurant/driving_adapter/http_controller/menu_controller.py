from typing import List

from fastapi import APIRouter, Depends, status

from src.service.restaurant.app.query.list_menu_use_case import ListMenuUseCase
from src.service.restaurant.driving_adapter.http_controller.response_mapper import (
    to_menu_item_response,
)
from src.service.restaurant.driving_adapter.schema.table_schema import MenuItemResponse


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
async def list_menu(
    use_case: ListMenuUseCase = Depends(ListMenuUseCase.depends),
) -> List[MenuItemResponse]:
    return [to_menu_item_response(item) for item in use_case.list_items()]
