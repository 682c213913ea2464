"""
Static JSON Menu Catalog

Loads the menu once at construction; entries are immutable afterwards.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import orjson

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.domain.entity.menu_item_entity import MenuItem


class MenuCatalogImpl:
    def __init__(self, *, items: Iterable[MenuItem]) -> None:
        self._items: Dict[str, MenuItem] = {}
        for item in items:
            if item.id in self._items:
                raise ValueError(f'Duplicate menu item id: {item.id}')
            self._items[item.id] = item

    @classmethod
    def from_json_file(cls, path: Path | str) -> 'MenuCatalogImpl':
        raw: list[Dict[str, Any]] = orjson.loads(Path(path).read_bytes())
        catalog = cls(
            items=(
                MenuItem(
                    id=str(entry['id']),
                    name=entry['name'],
                    description=entry.get('description', ''),
                    price=float(entry['price']),
                    image=entry.get('image'),
                )
                for entry in raw
            )
        )
        Logger.base.info(f'📖 [MENU] Loaded {len(catalog._items)} menu items from {path}')
        return catalog

    def list_items(self) -> list[MenuItem]:
        return list(self._items.values())

    def find(self, item_id: str) -> Optional[MenuItem]:
        return self._items.get(item_id)
