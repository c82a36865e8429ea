"""
Unit tests for the sort engine and header toggle policy.
"""
import pytest
from src.client.sort_engine import SortSelection, indexed_view, view
from src.models.stat_record import StatRecord


def _hits(*values):
    return [StatRecord(f"p{i}", "2024-01-01", value) for i, value in enumerate(values)]


class TestView:
    """Test suite for view and indexed_view."""
    
    def test_hits_sort_numerically_desc(self):
        """Test hits compare as integers, not strings."""
        result = view(_hits("2", "10", "1"), "hits", "desc")
        assert [record.hits for record in result] == ["10", "2", "1"]
    
    def test_hits_sort_numerically_asc(self):
        result = view(_hits("2", "10", "1"), "hits", "asc")
        assert [record.hits for record in result] == ["1", "2", "10"]
    
    def test_blank_hits_sort_as_zero(self):
        """Test a blanked hits value does not break sorting."""
        result = view(_hits("3", "", "1"), "hits", "asc")
        assert [record.hits for record in result] == ["", "1", "3"]
    
    def test_name_sort(self):
        records = [StatRecord(name, "2024-01-01", "1") for name in ("Lee", "Kim", "Park")]
        assert [r.name for r in view(records, "name", "asc")] == ["Kim", "Lee", "Park"]
        assert [r.name for r in view(records, "name", "desc")] == ["Park", "Lee", "Kim"]
    
    def test_name_sort_ignores_case_first(self):
        """Test mixed-case names interleave alphabetically."""
        records = [StatRecord(name, "2024-01-01", "1") for name in ("Banana", "apple", "Cherry")]
        assert [r.name for r in view(records, "name", "asc")] == ["apple", "Banana", "Cherry"]
        assert [r.name for r in view(records, "name", "desc")] == ["Cherry", "Banana", "apple"]
    
    def test_name_sort_case_breaks_ties_lowercase_first(self):
        records = [StatRecord(name, "2024-01-01", "1") for name in ("Kim", "kim", "Lee")]
        assert [r.name for r in view(records, "name", "asc")] == ["kim", "Kim", "Lee"]
    
    def test_name_sort_accents_sort_with_base_letter(self):
        """Test accented letters sort next to their base letter."""
        records = [StatRecord(name, "2024-01-01", "1") for name in ("Zed", "\u00c9mile", "Eve", "Adam")]
        assert [r.name for r in view(records, "name", "asc")] == ["Adam", "\u00c9mile", "Eve", "Zed"]
    
    def test_date_sort(self):
        records = [StatRecord("Kim", date, "1") for date in ("2024-03-01", "2023-12-31", "2024-01-15")]
        result = view(records, "date", "asc")
        assert [r.date for r in result] == ["2023-12-31", "2024-01-15", "2024-03-01"]
    
    @pytest.mark.parametrize("order", ["asc", "desc"])
    def test_sort_is_stable(self, order):
        """Test equal keys keep their original relative order."""
        records = [
            StatRecord("first", "2024-01-01", "5"),
            StatRecord("other", "2024-01-02", "9"),
            StatRecord("second", "2024-01-01", "5"),
        ]
        
        result = view(records, "hits", order)
        
        tied = [record.name for record in result if record.hits == "5"]
        assert tied == ["first", "second"]
    
    def test_view_does_not_mutate_input(self):
        records = _hits("2", "10", "1")
        view(records, "hits", "desc")
        assert [record.hits for record in records] == ["2", "10", "1"]
    
    def test_indexed_view_reports_store_indexes(self):
        """Test sorted rows carry the index of the underlying record."""
        pairs = indexed_view(_hits("2", "10", "1"), "hits", "desc")
        assert [index for index, _ in pairs] == [1, 0, 2]
    
    def test_unknown_key(self):
        with pytest.raises(ValueError):
            view(_hits("1"), "team", "asc")
    
    def test_unknown_order(self):
        with pytest.raises(ValueError):
            view(_hits("1"), "hits", "up")


class TestSortSelection:
    """Test suite for SortSelection."""
    
    def test_defaults_to_date_desc(self):
        selection = SortSelection()
        assert (selection.key, selection.order) == ("date", "desc")
    
    def test_same_key_flips_order(self):
        selection = SortSelection()
        selection.toggle("date")
        assert (selection.key, selection.order) == ("date", "asc")
        selection.toggle("date")
        assert selection.order == "desc"
    
    def test_new_key_resets_to_ascending(self):
        selection = SortSelection(key="name", order="desc")
        selection.toggle("hits")
        assert (selection.key, selection.order) == ("hits", "asc")
    
    def test_apply(self):
        selection = SortSelection(key="hits", order="desc")
        pairs = selection.apply(_hits("2", "10", "1"))
        assert [record.hits for _, record in pairs] == ["10", "2", "1"]
