"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.event.in_memory_broadcaster import InMemoryBroadcasterImpl
from src.service.restaurant.driven_adapter.menu.menu_catalog_impl import MenuCatalogImpl
from src.service.restaurant.driven_adapter.sse.order_sse_broadcaster_impl import (
    OrderSSEBroadcasterImpl,
)
from src.service.restaurant.driven_adapter.state.order_lifecycle_manager_impl import (
    OrderLifecycleManagerImpl,
)
from src.service.restaurant.driven_adapter.state.table_registry_impl import TableRegistryImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Static reference data
    menu_catalog = providers.Singleton(
        MenuCatalogImpl.from_json_file,
        path=config_service.provided.MENU_DATA_PATH,
    )

    # Shared state store: one instance per process, created in lifespan
    table_registry = providers.Singleton(
        TableRegistryImpl,
        table_ids=config_service.provided.TABLE_IDS,
    )

    # Live-update fan-out
    in_memory_broadcaster = providers.Singleton(InMemoryBroadcasterImpl)
    order_broadcaster = providers.Singleton(
        OrderSSEBroadcasterImpl,
        broadcaster=in_memory_broadcaster,
        table_registry=table_registry,
    )

    order_lifecycle_manager = providers.Singleton(
        OrderLifecycleManagerImpl,
        table_registry=table_registry,
        menu_catalog=menu_catalog,
        order_broadcaster=order_broadcaster,
        transition_policy=config_service.provided.ORDER_STATUS_TRANSITION_POLICY,
    )


container = Container()


def setup() -> None:
    """Eagerly build the process-wide state so the first request does not pay for it"""
    container.config_service()
    container.menu_catalog()
    container.table_registry()
    container.order_lifecycle_manager()


def cleanup() -> None:
    container.in_memory_broadcaster().close_all()
    container.reset_singletons()
