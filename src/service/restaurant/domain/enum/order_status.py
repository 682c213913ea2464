"""
Order Status Enum - Domain Value Object

Kitchen-to-table lifecycle of a single order. The member order is the
lifecycle order; IDLE is a placeholder that no real order ever holds.
"""

from enum import StrEnum


class OrderStatus(StrEnum):
    IDLE = 'IDLE'
    ORDER_RECEIVED = 'ORDER_RECEIVED'
    ORDER_PREPARING = 'ORDER_PREPARING'
    ORDER_ON_THEY_WAY_TO_TABLE = 'ORDER_ON_THEY_WAY_TO_TABLE'
    ORDER_SERVED = 'ORDER_SERVED'

    @property
    def rank(self) -> int:
        return list(OrderStatus).index(self)

    @property
    def is_active(self) -> bool:
        return self is not OrderStatus.IDLE

    @property
    def is_terminal(self) -> bool:
        return self is OrderStatus.ORDER_SERVED

    @property
    def label(self) -> str:
        """Short German label used by the admin view"""
        return _ORDER_STATUS_LABELS[self]

    @property
    def guest_message(self) -> str:
        """German status line shown to the guest"""
        return _ORDER_STATUS_GUEST_MESSAGES[self]


_ORDER_STATUS_LABELS = {
    OrderStatus.IDLE: 'Keine Bestellung',
    OrderStatus.ORDER_RECEIVED: 'Erhalten',
    OrderStatus.ORDER_PREPARING: 'In Zubereitung',
    OrderStatus.ORDER_ON_THEY_WAY_TO_TABLE: 'Unterwegs',
    OrderStatus.ORDER_SERVED: 'Serviert',
}

_ORDER_STATUS_GUEST_MESSAGES = {
    OrderStatus.IDLE: '',
    OrderStatus.ORDER_RECEIVED: 'Bestellung erhalten',
    OrderStatus.ORDER_PREPARING: 'Dein Essen ist bald fertig',
    OrderStatus.ORDER_ON_THEY_WAY_TO_TABLE: 'Dein Essen ist auf dem Weg',
    OrderStatus.ORDER_SERVED: 'Dein Essen wurde serviert',
}
