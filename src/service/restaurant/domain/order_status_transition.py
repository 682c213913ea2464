"""
Order status transitions

The lifecycle is IDLE → ORDER_RECEIVED → ORDER_PREPARING →
ORDER_ON_THEY_WAY_TO_TABLE → ORDER_SERVED. Which jumps between the active
statuses are allowed depends on the configured policy:

- FREE: any active status may replace any other, so staff can correct a
  misclick from the admin view
- FORWARD: only the same status or a later one
"""

from enum import StrEnum
from typing import Final, Mapping

from src.platform.exception.exceptions import InvalidInputError, InvalidStateError
from src.service.restaurant.domain.constant.error_message import ErrorMessage
from src.service.restaurant.domain.enum.order_status import OrderStatus


class TransitionPolicy(StrEnum):
    FREE = 'free'
    FORWARD = 'forward'


ACTIVE_ORDER_STATUSES: Final[tuple[OrderStatus, ...]] = tuple(
    status for status in OrderStatus if status.is_active
)

ORDER_STATUS_TRANSITIONS: Final[Mapping[TransitionPolicy, Mapping[OrderStatus, frozenset]]] = {
    TransitionPolicy.FREE: {
        current: frozenset(ACTIVE_ORDER_STATUSES) for current in ACTIVE_ORDER_STATUSES
    },
    TransitionPolicy.FORWARD: {
        current: frozenset(s for s in ACTIVE_ORDER_STATUSES if s.rank >= current.rank)
        for current in ACTIVE_ORDER_STATUSES
    },
}


def parse_order_status(value: str | OrderStatus) -> OrderStatus:
    """Accept only statuses a real order can hold"""
    try:
        status = OrderStatus(value)
    except ValueError:
        raise InvalidInputError(ErrorMessage.INVALID_STATUS)
    if not status.is_active:
        raise InvalidInputError(ErrorMessage.INVALID_STATUS)
    return status


def validate_transition(
    *, current: OrderStatus, target: OrderStatus, policy: TransitionPolicy
) -> None:
    if not target.is_active:
        raise InvalidInputError(ErrorMessage.INVALID_STATUS)
    allowed = ORDER_STATUS_TRANSITIONS[policy].get(current, frozenset())
    if target not in allowed:
        raise InvalidStateError(ErrorMessage.STATUS_BACKWARDS)
