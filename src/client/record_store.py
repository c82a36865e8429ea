"""
Client-side store for baseball stat records.

Holds the ordered record list and the draft being composed or edited.
Every mutation rewrites the whole list to local storage. Operations whose
preconditions do not hold (incomplete draft, out-of-range index, no edit
in progress) do nothing instead of raising.
"""
import json
from typing import List
from src.client.local_storage import LocalStorage
from src.core.logger import get_logger
from src.models.stat_record import FIELDS, DraftRecord, StatRecord

logger = get_logger(__name__)

STORAGE_KEY = "baseball_stats_data"


class RecordStore:
    """Ordered stat records with add/edit/delete and write-through persistence."""
    
    def __init__(self, storage: LocalStorage, storage_key: str = STORAGE_KEY):
        self.storage = storage
        self.storage_key = storage_key
        self._records = self._rehydrate()
        self.draft = DraftRecord()
    
    @property
    def records(self) -> List[StatRecord]:
        """
        Copies of the records in insertion order.
        
        Changing a returned record does not change the store; use
        begin_edit and apply_edit instead.
        """
        return [StatRecord.from_dict(record.to_dict()) for record in self._records]
    
    @property
    def is_editing(self) -> bool:
        return self.draft.is_editing
    
    def __len__(self):
        return len(self._records)
    
    def _rehydrate(self) -> List[StatRecord]:
        try:
            saved = self.storage.get_item(self.storage_key)
            if saved is None:
                return []
            return [StatRecord.from_dict(item) for item in json.loads(saved)]
        except Exception as e:
            logger.warning("Ignoring unreadable saved records under %s: %s", self.storage_key, e)
            return []
    
    def _persist(self) -> None:
        try:
            payload = json.dumps([record.to_dict() for record in self._records])
            self.storage.set_item(self.storage_key, payload)
        except Exception as e:
            logger.warning("Failed to save records under %s: %s", self.storage_key, e)
    
    def _in_range(self, index: int) -> bool:
        return isinstance(index, int) and 0 <= index < len(self._records)
    
    def update_draft(self, field: str, value: str) -> None:
        if field not in FIELDS:
            return
        setattr(self.draft, field, value)
    
    def add(self) -> None:
        """Append the draft as a new record if all fields are filled in."""
        if not self.draft.is_complete():
            return
        self._records.append(self.draft.to_record())
        self._persist()
        self.draft = DraftRecord()
    
    def begin_edit(self, index: int) -> None:
        """Load the record at index into the draft and target it for editing."""
        if not self._in_range(index):
            return
        record = self._records[index]
        self.draft = DraftRecord(record.name, record.date, record.hits, edit_index=index)
    
    def apply_edit(self) -> None:
        """
        Overwrite the targeted record with the draft as is.
        
        Unlike add(), empty fields are not rejected here.
        """
        if not self.is_editing:
            return
        self._records[self.draft.edit_index] = self.draft.to_record()
        self._persist()
        self.draft = DraftRecord()
    
    def cancel_edit(self) -> None:
        self.draft = DraftRecord()
    
    def delete(self, index: int) -> None:
        if not self._in_range(index):
            return
        del self._records[index]
        self._persist()
        
        if not self.is_editing:
            return
        if self.draft.edit_index == index:
            self.draft = DraftRecord()
        elif self.draft.edit_index > index:
            self.draft.edit_index -= 1
