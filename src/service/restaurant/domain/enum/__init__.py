"""Restaurant Domain Enums"""

from src.service.restaurant.domain.enum.order_status import OrderStatus
from src.service.restaurant.domain.enum.table_status import TableStatus

__all__ = ['OrderStatus', 'TableStatus']
