from typing import Optional, Protocol

from src.service.restaurant.domain.entity.menu_item_entity import MenuItem


class IMenuCatalog(Protocol):
    """Read-only menu lookup"""

    def list_items(self) -> list[MenuItem]: ...

    def find(self, item_id: str) -> Optional[MenuItem]: ...
