"""
Unit tests for the client-side key-value storage.
"""
from src.client.local_storage import InMemoryLocalStorage, JsonFileLocalStorage
from src.client.record_store import RecordStore


class TestJsonFileLocalStorage:
    """Test suite for JsonFileLocalStorage."""
    
    def test_missing_file_reads_none(self, tmp_path):
        assert JsonFileLocalStorage(tmp_path / "storage.json").get_item("key") is None
    
    def test_set_and_get(self, tmp_path):
        storage = JsonFileLocalStorage(tmp_path / "nested" / "storage.json")
        
        storage.set_item("key", "value")
        
        assert storage.get_item("key") == "value"
        assert JsonFileLocalStorage(tmp_path / "nested" / "storage.json").get_item("key") == "value"
    
    def test_keys_are_independent(self, tmp_path):
        storage = JsonFileLocalStorage(tmp_path / "storage.json")
        
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        storage.set_item("a", "3")
        
        assert storage.get_item("a") == "3"
        assert storage.get_item("b") == "2"
    
    def test_record_store_survives_restart(self, tmp_path):
        """Test records written through a file survive a new store instance."""
        path = tmp_path / "storage.json"
        store = RecordStore(JsonFileLocalStorage(path))
        store.update_draft("name", "Kim")
        store.update_draft("date", "2024-01-01")
        store.update_draft("hits", "2")
        store.add()
        
        reloaded = RecordStore(JsonFileLocalStorage(path))
        
        assert [record.to_dict() for record in reloaded.records] == [
            {"name": "Kim", "date": "2024-01-01", "hits": "2"}
        ]


class TestInMemoryLocalStorage:
    
    def test_initial_items_are_copied(self):
        items = {"key": "value"}
        storage = InMemoryLocalStorage(items)
        storage.set_item("key", "other")
        assert items["key"] == "value"
