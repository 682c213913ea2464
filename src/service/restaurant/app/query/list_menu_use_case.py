from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.service.restaurant.app.interface.i_menu_catalog import IMenuCatalog
from src.service.restaurant.domain.entity.menu_item_entity import MenuItem


class ListMenuUseCase:
    def __init__(self, *, menu_catalog: IMenuCatalog) -> None:
        self.menu_catalog = menu_catalog

    @classmethod
    @inject
    def depends(
        cls,
        menu_catalog: IMenuCatalog = Depends(Provide[Container.menu_catalog]),
    ) -> Self:
        return cls(menu_catalog=menu_catalog)

    def list_items(self) -> List[MenuItem]:
        return list(self.menu_catalog.list_items())
