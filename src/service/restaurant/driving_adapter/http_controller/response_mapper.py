"""Entity → response schema conversion shared by the HTTP controllers"""

from typing import Optional

from src.service.restaurant.app.dto.action_result import ActionResult
from src.service.restaurant.domain.entity.menu_item_entity import MenuItem
from src.service.restaurant.domain.entity.order_entity import Order
from src.service.restaurant.domain.entity.table_entity import Table
from src.service.restaurant.driving_adapter.schema.table_schema import (
    ActionResultResponse,
    MenuItemResponse,
    OrderItemResponse,
    OrderResponse,
    TableResponse,
)


def to_order_response(order: Optional[Order]) -> Optional[OrderResponse]:
    if order is None:
        return None
    return OrderResponse(
        id=order.id,
        table_id=order.table_id,
        name=order.name,
        item=OrderItemResponse(
            id=order.item.id,
            name=order.item.name,
            description=order.item.description,
            price=order.item.price,
        ),
        status=order.status.value,
        status_label=order.status.label,
        guest_message=order.status.guest_message,
        created_at=order.created_at,
    )


def to_table_response(table: Table) -> TableResponse:
    return TableResponse(
        table_id=table.table_id,
        status=table.status.value,
        status_label=table.status.label,
        reserved_by=table.reserved_by,
        order=to_order_response(table.order),
    )


def to_menu_item_response(item: MenuItem) -> MenuItemResponse:
    return MenuItemResponse(
        id=item.id,
        name=item.name,
        description=item.description,
        price=item.price,
        image=item.image,
    )


def to_action_result_response(result: ActionResult) -> ActionResultResponse:
    return ActionResultResponse(
        success=result.success,
        order=to_order_response(result.order),
        error=result.error,
    )
