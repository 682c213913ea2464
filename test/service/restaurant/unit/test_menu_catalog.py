import pytest

from src.platform.constant.path import DEFAULT_MENU_DATA_PATH
from src.service.restaurant.domain.entity.menu_item_entity import MenuItem
from src.service.restaurant.driven_adapter.menu.menu_catalog_impl import MenuCatalogImpl


class TestMenuCatalog:
    def test_bundled_menu_loads(self):
        catalog = MenuCatalogImpl.from_json_file(DEFAULT_MENU_DATA_PATH)

        items = catalog.list_items()
        assert len(items) == 10
        sauerbraten = catalog.find('2')
        assert sauerbraten is not None
        assert sauerbraten.name == 'Sauerbraten'
        assert sauerbraten.price == 16.5

    def test_find_unknown_item_returns_none(self, menu_catalog):
        assert menu_catalog.find('999') is None

    def test_duplicate_ids_are_rejected(self):
        item = MenuItem(id='1', name='Wiener Schnitzel', description='', price=18.9)

        with pytest.raises(ValueError):
            MenuCatalogImpl(items=[item, item])

    def test_from_json_file_normalizes_ids_and_prices(self, tmp_path):
        path = tmp_path / 'menu.json'
        path.write_text('[{"id": 7, "name": "Brezel", "price": 3}]', encoding='utf-8')

        catalog = MenuCatalogImpl.from_json_file(path)

        item = catalog.find('7')
        assert item == MenuItem(id='7', name='Brezel', description='', price=3.0)
