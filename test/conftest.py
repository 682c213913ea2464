"""
Test Configuration and Fixtures

This module provides:
- Test log directory setup (before any application module is imported)
- A TestClient per test, so every test starts from fresh in-memory tables
- Shared builders for menu items, registries and broadcasters

Architecture:
- Unit tests (test/**/unit/): build the components directly, mocks where needed
- Integration tests: run the real app through its lifespan
"""

# =============================================================================
# Environment setup MUST happen before any other imports
# (the logging config reads TEST_LOG_DIR at import time)
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Deterministic table set regardless of a developer's .env
    os.environ['TABLE_IDS'] = '1,2,3,4,5,6,7,8,9,10'
    os.environ['ORDER_STATUS_TRANSITION_POLICY'] = 'free'


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.event.in_memory_broadcaster import InMemoryBroadcasterImpl  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.service.restaurant.domain.entity.menu_item_entity import MenuItem  # noqa: E402
from src.service.restaurant.driven_adapter.menu.menu_catalog_impl import (  # noqa: E402
    MenuCatalogImpl,
)
from src.service.restaurant.driven_adapter.sse.order_sse_broadcaster_impl import (  # noqa: E402
    OrderSSEBroadcasterImpl,
)
from src.service.restaurant.driven_adapter.state.order_lifecycle_manager_impl import (  # noqa: E402
    OrderLifecycleManagerImpl,
)
from src.service.restaurant.driven_adapter.state.table_registry_impl import (  # noqa: E402
    TableRegistryImpl,
)


TABLE_IDS = tuple(range(1, 11))


# =============================================================================
# HTTP
# =============================================================================
@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Real app; the lifespan builds and tears down the container per test"""
    from src.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_container() -> Generator[None, None, None]:
    yield
    container.reset_singletons()


# =============================================================================
# Components
# =============================================================================
@pytest.fixture
def menu_items() -> list[MenuItem]:
    return [
        MenuItem(
            id='1',
            name='Wiener Schnitzel',
            description='Klassisches paniertes Kalbsschnitzel mit Pommes',
            price=18.9,
        ),
        MenuItem(
            id='2',
            name='Sauerbraten',
            description='Mariniertes Rindfleisch mit Rotkohl und Klößen',
            price=16.5,
        ),
    ]


@pytest.fixture
def menu_catalog(menu_items: list[MenuItem]) -> MenuCatalogImpl:
    return MenuCatalogImpl(items=menu_items)


@pytest.fixture
def table_registry() -> TableRegistryImpl:
    return TableRegistryImpl(table_ids=TABLE_IDS)


@pytest.fixture
def in_memory_broadcaster() -> InMemoryBroadcasterImpl:
    return InMemoryBroadcasterImpl()


@pytest.fixture
def order_broadcaster(
    in_memory_broadcaster: InMemoryBroadcasterImpl, table_registry: TableRegistryImpl
) -> OrderSSEBroadcasterImpl:
    return OrderSSEBroadcasterImpl(broadcaster=in_memory_broadcaster, table_registry=table_registry)


@pytest.fixture
def lifecycle_manager(
    table_registry: TableRegistryImpl,
    menu_catalog: MenuCatalogImpl,
    order_broadcaster: OrderSSEBroadcasterImpl,
) -> OrderLifecycleManagerImpl:
    return OrderLifecycleManagerImpl(
        table_registry=table_registry,
        menu_catalog=menu_catalog,
        order_broadcaster=order_broadcaster,
    )


@pytest.fixture
def action_body() -> Any:
    """Pull the JSON body of an action response, asserting the HTTP layer succeeded"""

    def _body(response: Any) -> dict[str, Any]:
        assert response.status_code == 200, response.text
        return response.json()

    return _body
