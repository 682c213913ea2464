import pytest

from src.platform.exception.exceptions import InvalidInputError, InvalidStateError
from src.service.restaurant.domain.enum.order_status import OrderStatus
from src.service.restaurant.domain.order_status_transition import (
    ACTIVE_ORDER_STATUSES,
    TransitionPolicy,
    parse_order_status,
    validate_transition,
)


class TestParseOrderStatus:
    @pytest.mark.parametrize('status', list(ACTIVE_ORDER_STATUSES))
    def test_active_statuses_are_accepted(self, status):
        assert parse_order_status(status.value) is status

    @pytest.mark.parametrize('value', ['IDLE', 'order_served', 'COOKING', ''])
    def test_idle_and_unknown_values_are_rejected(self, value):
        with pytest.raises(InvalidInputError):
            parse_order_status(value)


class TestValidateTransition:
    @pytest.mark.parametrize('current', list(ACTIVE_ORDER_STATUSES))
    @pytest.mark.parametrize('target', list(ACTIVE_ORDER_STATUSES))
    def test_free_policy_allows_any_jump(self, current, target):
        validate_transition(current=current, target=target, policy=TransitionPolicy.FREE)

    def test_forward_policy_allows_same_and_later(self):
        validate_transition(
            current=OrderStatus.ORDER_PREPARING,
            target=OrderStatus.ORDER_PREPARING,
            policy=TransitionPolicy.FORWARD,
        )
        validate_transition(
            current=OrderStatus.ORDER_RECEIVED,
            target=OrderStatus.ORDER_SERVED,
            policy=TransitionPolicy.FORWARD,
        )

    def test_forward_policy_rejects_going_back(self):
        with pytest.raises(InvalidStateError):
            validate_transition(
                current=OrderStatus.ORDER_SERVED,
                target=OrderStatus.ORDER_PREPARING,
                policy=TransitionPolicy.FORWARD,
            )

    @pytest.mark.parametrize('policy', list(TransitionPolicy))
    def test_idle_is_never_a_target(self, policy):
        with pytest.raises(InvalidInputError):
            validate_transition(
                current=OrderStatus.ORDER_RECEIVED, target=OrderStatus.IDLE, policy=policy
            )


def test_lifecycle_order():
    assert [s.rank for s in OrderStatus] == [0, 1, 2, 3, 4]
    assert OrderStatus.ORDER_SERVED.is_terminal
    assert not OrderStatus.IDLE.is_active
    assert OrderStatus.ORDER_PREPARING.label == 'In Zubereitung'
