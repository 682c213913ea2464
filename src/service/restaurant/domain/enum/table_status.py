from enum import StrEnum


class TableStatus(StrEnum):
    FREE = 'FREE'
    RESERVED = 'RESERVED'

    @property
    def label(self) -> str:
        """German display label used by the admin overview"""
        return _TABLE_STATUS_LABELS[self]


_TABLE_STATUS_LABELS = {
    TableStatus.FREE: 'Frei',
    TableStatus.RESERVED: 'Reserviert',
}
