"""User-facing (German) error messages of the restaurant service."""

from typing import Final


class ErrorMessage:
    GENERIC: Final[str] = 'Ein Fehler ist aufgetreten.'
    TABLE_TAKEN: Final[str] = 'Dieser Tisch ist bereits von einem anderen Gast reserviert.'
    MENU_ITEM_NOT_FOUND: Final[str] = 'Gericht nicht gefunden.'
    ORDER_NOT_FOUND: Final[str] = 'Keine Bestellung für diesen Tisch gefunden.'
    NAME_REQUIRED: Final[str] = 'Bitte gib deinen Namen ein.'
    INVALID_STATUS: Final[str] = 'Ungültiger Bestellstatus.'
    STATUS_BACKWARDS: Final[str] = 'Der Bestellstatus kann nicht zurückgesetzt werden.'
    TABLE_ID_REQUIRED: Final[str] = 'Bitte gib eine gültige Tischnummer an.'

    @staticmethod
    def invalid_table(table_id: object, valid_ids: tuple[int, ...]) -> str:
        return f'Ungültige Tischnummer: {table_id}. Gültige Tische: {", ".join(map(str, valid_ids))}'
