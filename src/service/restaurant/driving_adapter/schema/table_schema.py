from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialized with camelCase keys, matching the live-update payloads"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderItemResponse(CamelModel):
    id: str
    name: str
    description: str
    price: float


class OrderResponse(CamelModel):
    id: str
    table_id: int
    name: str
    item: OrderItemResponse
    status: str
    status_label: str
    guest_message: str
    created_at: datetime


class TableResponse(CamelModel):
    table_id: int
    status: str
    status_label: str
    reserved_by: Optional[str] = None
    order: Optional[OrderResponse] = None


class TableIdsResponse(CamelModel):
    table_ids: List[int]


class MenuItemResponse(CamelModel):
    id: str
    name: str
    description: str
    price: float
    image: Optional[str] = None


class ReserveTableRequest(BaseModel):
    name: str

    class Config:
        json_schema_extra = {'example': {'name': 'Anna'}}


class CreateOrderRequest(BaseModel):
    name: str
    menu_item_id: Optional[str] = None

    class Config:
        json_schema_extra = {'example': {'name': 'Anna', 'menu_item_id': '2'}}


class UpdateOrderStatusRequest(BaseModel):
    status: str

    class Config:
        json_schema_extra = {'example': {'status': 'ORDER_PREPARING'}}


class ActionResultResponse(CamelModel):
    success: bool
    order: Optional[OrderResponse] = None
    error: Optional[str] = None
