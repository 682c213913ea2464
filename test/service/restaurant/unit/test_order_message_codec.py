from datetime import datetime, timezone

from src.service.restaurant.domain.entity.order_entity import Order, OrderItem
from src.service.restaurant.domain.enum.order_status import OrderStatus
from src.service.restaurant.driven_adapter.sse.order_message_codec import OrderMessageCodec


def test_encoded_order_uses_camel_case_wire_format():
    order = Order(
        id='0193b0c1-0000-7000-8000-000000000001',
        table_id=3,
        name='Anna',
        item=OrderItem(
            id='2',
            name='Sauerbraten',
            description='Mariniertes Rindfleisch mit Rotkohl und Klößen',
            price=16.5,
        ),
        status=OrderStatus.ORDER_PREPARING,
        created_at=datetime(2024, 11, 3, 18, 30, tzinfo=timezone.utc),
    )

    decoded = OrderMessageCodec.decode(OrderMessageCodec.encode(order))

    assert decoded == {
        'id': '0193b0c1-0000-7000-8000-000000000001',
        'tableId': 3,
        'name': 'Anna',
        'item': {
            'id': '2',
            'name': 'Sauerbraten',
            'description': 'Mariniertes Rindfleisch mit Rotkohl und Klößen',
            'price': 16.5,
        },
        'status': 'ORDER_PREPARING',
        'createdAt': '2024-11-03T18:30:00+00:00',
    }
