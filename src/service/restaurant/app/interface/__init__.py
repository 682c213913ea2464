"""Application layer interfaces (Ports)"""

from src.service.restaurant.app.interface.i_menu_catalog import IMenuCatalog
from src.service.restaurant.app.interface.i_order_broadcaster import IOrderBroadcaster
from src.service.restaurant.app.interface.i_order_lifecycle_manager import (
    IOrderLifecycleManager,
)
from src.service.restaurant.app.interface.i_table_registry import ITableRegistry

__all__ = [
    'IMenuCatalog',
    'IOrderBroadcaster',
    'IOrderLifecycleManager',
    'ITableRegistry',
]
