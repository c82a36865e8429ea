"""
Key-value storage backing the client-side record store.
Mirrors the browser storage contract: string keys to string values.
"""
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional


class LocalStorage(ABC):
    """Abstract durable key-value storage."""
    
    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None."""
        pass
    
    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass


class InMemoryLocalStorage(LocalStorage):
    """Storage held in a dict; lost when the process exits."""
    
    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items = dict(items or {})
    
    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)
    
    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class JsonFileLocalStorage(LocalStorage):
    """Storage kept as one JSON object in a file on disk."""
    
    def __init__(self, path: Path):
        self.path = Path(path)
    
    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            items = json.load(f)
        return items if isinstance(items, dict) else {}
    
    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)
    
    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(items, f)
