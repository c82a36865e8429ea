"""
Sorted views over stat records.
"""
import unicodedata
from typing import Iterable, List, Tuple
from src.models.stat_record import StatRecord

SORT_KEYS = ("name", "date", "hits")
ASC = "asc"
DESC = "desc"


def _hits_value(hits: str) -> int:
    # blank or non-integer hits sort as 0
    try:
        return int(hits.strip() or 0)
    except (AttributeError, ValueError):
        return 0


def _collation_key(value: str) -> Tuple[str, str, str]:
    """
    Multi-level string key: base letters, then accents, then case.
    
    Case and accents only break ties, and lowercase sorts before uppercase,
    so "apple" < "banana" < "Banana" < "Cherry".
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), value.swapcase()


def _sort_value(record: StatRecord, key: str):
    if key == "hits":
        return _hits_value(record.hits)
    return _collation_key(getattr(record, key))


def indexed_view(records: Iterable[StatRecord], key: str, order: str) -> List[Tuple[int, StatRecord]]:
    """
    Return (index, record) pairs ordered by key.
    
    Hits compare as integers, name and date as locale-aware strings. The
    sort is stable in both directions, so records with equal keys keep
    their relative order. The input is not modified.
    """
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {key}")
    if order not in (ASC, DESC):
        raise ValueError(f"Unknown sort order: {order}")
    
    return sorted(
        enumerate(records),
        key=lambda pair: _sort_value(pair[1], key),
        reverse=order == DESC
    )


def view(records: Iterable[StatRecord], key: str, order: str) -> List[StatRecord]:
    """Return records ordered by key; see indexed_view."""
    return [record for _, record in indexed_view(records, key, order)]


class SortSelection:
    """Header-click sort policy of the stats table."""
    
    def __init__(self, key: str = "date", order: str = DESC):
        self.key = key
        self.order = order
    
    def toggle(self, key: str) -> None:
        """Flip the order for the active key, or switch to key ascending."""
        if key == self.key:
            self.order = ASC if self.order == DESC else DESC
        else:
            self.key = key
            self.order = ASC
    
    def apply(self, records: Iterable[StatRecord]) -> List[Tuple[int, StatRecord]]:
        return indexed_view(records, self.key, self.order)
