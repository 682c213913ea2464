"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.restaurant.app.command import (
    create_order_use_case,
    free_table_use_case,
    reserve_table_use_case,
    update_order_status_use_case,
)
from src.service.restaurant.app.query import (
    get_table_use_case,
    list_menu_use_case,
    list_tables_use_case,
    stream_order_status_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    reserve_table_use_case,
    create_order_use_case,
    update_order_status_use_case,
    free_table_use_case,
    get_table_use_case,
    list_tables_use_case,
    list_menu_use_case,
    stream_order_status_use_case,
]
