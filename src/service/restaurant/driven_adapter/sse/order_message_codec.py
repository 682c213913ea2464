"""
Order Message Codec

Wire format of an order snapshot on the live-update stream. Keys are
camelCase because browser clients decode the payload as-is.
"""

from typing import Any, Dict

import orjson

from src.service.restaurant.domain.entity.order_entity import Order


class OrderMessageCodec:
    @staticmethod
    def to_dict(order: Order) -> Dict[str, Any]:
        return {
            'id': order.id,
            'tableId': order.table_id,
            'name': order.name,
            'item': {
                'id': order.item.id,
                'name': order.item.name,
                'description': order.item.description,
                'price': order.item.price,
            },
            'status': order.status.value,
            'createdAt': order.created_at,
        }

    @staticmethod
    def encode(order: Order) -> bytes:
        # orjson writes datetimes as RFC 3339 strings
        return orjson.dumps(OrderMessageCodec.to_dict(order))

    @staticmethod
    def decode(payload: bytes | str) -> Dict[str, Any]:
        return orjson.loads(payload)
