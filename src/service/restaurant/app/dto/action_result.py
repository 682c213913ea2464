"""
Action Result DTO

Tagged success/failure value returned by every guest/admin action.
Exceptions never cross this boundary.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Optional, ParamSpec

import attrs

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.domain.constant.error_message import ErrorMessage
from src.service.restaurant.domain.entity.order_entity import Order


@attrs.frozen
class ActionResult:
    success: bool
    order: Optional[Order] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, order: Optional[Order] = None) -> 'ActionResult':
        return cls(success=True, order=order)

    @classmethod
    def fail(cls, error: str) -> 'ActionResult':
        return cls(success=False, error=error)


_P = ParamSpec('_P')


def action_boundary(
    func: Callable[_P, Awaitable[ActionResult]],
) -> Callable[_P, Awaitable[ActionResult]]:
    """
    Convert raised errors into ActionResult.fail

    Domain errors keep their (localized) message; anything else is logged
    and replaced by the generic message.
    """

    @wraps(func)
    async def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> ActionResult:
        try:
            return await func(*args, **kwargs)
        except CustomBaseError as e:
            return ActionResult.fail(e.message)
        except Exception as e:
            Logger.base.exception(f'❌ [ACTION] {func.__qualname__} failed: {type(e).__name__}: {e}')
            return ActionResult.fail(ErrorMessage.GENERIC)

    return wrapper
