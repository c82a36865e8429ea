"""
Client-side domain models for baseball stat records.
Database-agnostic representation of one player's hits on a given date.
"""
from typing import Optional

FIELDS = ("name", "date", "hits")


class StatRecord:
    """One row of the client-side stats table."""
    
    def __init__(self, name: str, date: str, hits: str):
        self.name = name
        self.date = date
        self.hits = hits
    
    @classmethod
    def from_dict(cls, data: dict) -> "StatRecord":
        return cls(**{field: str(data.get(field, "")) for field in FIELDS})
    
    def to_dict(self) -> dict:
        return {"name": self.name, "date": self.date, "hits": self.hits}
    
    def __eq__(self, other):
        if not isinstance(other, StatRecord):
            return NotImplemented
        return self.to_dict() == other.to_dict()
    
    def __repr__(self):
        return f"StatRecord(name={self.name}, date={self.date}, hits={self.hits})"


class DraftRecord:
    """
    Edit buffer for the record being composed or edited.
    
    edit_index is None in add-mode and the targeted store index in edit-mode.
    """
    
    def __init__(self, name: str = "", date: str = "", hits: str = "", edit_index: Optional[int] = None):
        self.name = name
        self.date = date
        self.hits = hits
        self.edit_index = edit_index
    
    @property
    def is_editing(self) -> bool:
        return self.edit_index is not None
    
    def is_complete(self) -> bool:
        return all(isinstance(getattr(self, field), str) and getattr(self, field) for field in FIELDS)
    
    def to_record(self) -> StatRecord:
        return StatRecord(name=self.name, date=self.date, hits=self.hits)
    
    def __repr__(self):
        return (
            f"DraftRecord(name={self.name}, date={self.date}, hits={self.hits}, "
            f"edit_index={self.edit_index})"
        )
