# ==============================================
# Tests for Persistence Module
# ==============================================

from pathlib import Path

import pytest

from rabbit.errors import PersistenceError
from rabbit.persistence import ItemFile
from rabbit.store import ItemStore, Record


class TestLoad:
    """Tests for ItemFile.load."""

    def test_missing_file_raises(self, item_file, store):
        assert not item_file.exists()
        with pytest.raises(PersistenceError):
            item_file.load(store)
        assert store.is_empty

    def test_directory_path_raises(self, tmp_path, store):
        with pytest.raises(PersistenceError):
            ItemFile(tmp_path).load(store)

    def test_mixed_file(self, write_data, item_file, store):
        write_data("Widget,10\nGizmo,-3\nbadline\n,5\nGadget,xx\n")

        loaded = item_file.load(store)

        assert loaded == 2
        assert list(store) == [Record("Widget", 10), Record("Gizmo", -3)]
        assert item_file.truncated is False

    def test_skips_line_without_comma(self, write_data, item_file, store):
        write_data("Widget,10\nno comma here\n")
        assert item_file.load(store) == 1
        assert len(store) == 1

    def test_skips_blank_name(self, write_data, item_file, store):
        write_data("   ,5\nWidget,10\n")
        assert item_file.load(store) == 1
        assert list(store) == [Record("Widget", 10)]

    def test_skips_non_numeric_value(self, write_data, item_file, store):
        write_data("Widget,ten\nGizmo,4\n")
        assert item_file.load(store) == 1
        assert list(store) == [Record("Gizmo", 4)]

    def test_value_with_leading_space_skipped(self, write_data, item_file, store):
        write_data("Widget, 10\n")
        assert item_file.load(store) == 0

    def test_value_with_trailing_space_accepted(self, write_data, item_file, store):
        write_data("Widget,10  \n")
        assert item_file.load(store) == 1
        assert list(store) == [Record("Widget", 10)]

    def test_crlf_line_endings(self, write_data, item_file, store):
        write_data("Widget,10\r\nGizmo,-3\r\n")
        assert item_file.load(store) == 2

    def test_last_line_without_newline(self, write_data, item_file, store):
        write_data("Widget,10\nGizmo,-3")
        assert item_file.load(store) == 2

    def test_empty_file(self, write_data, item_file, store):
        write_data("")
        assert item_file.load(store) == 0
        assert store.is_empty

    def test_name_blank_within_width_skipped(self, write_data, item_file, store):
        write_data(" " * 49 + "x,1\nWidget,10\n")
        assert item_file.load(store) == 1
        assert list(store) == [Record("Widget", 10)]

    def test_out_of_range_value_skipped(self, write_data, item_file, store):
        write_data("big,2147483648\nWidget,10\n")
        assert item_file.load(store) == 1
        assert list(store) == [Record("Widget", 10)]

    def test_default_path(self):
        assert ItemFile().path == Path("items.csv")

    def test_long_name_truncated(self, write_data, item_file, store):
        write_data("L" * 70 + ",1\n")
        item_file.load(store)
        assert list(store)[0].name == "L" * 49

    def test_appends_to_existing_store(self, write_data, item_file, store):
        store.add("Existing", 0)
        write_data("Widget,10\n")
        assert item_file.load(store) == 1
        assert [r.name for r in store] == ["Existing", "Widget"]

    def test_stops_at_capacity_and_flags_truncation(self, write_data, item_file, small_store):
        write_data("a,1\nb,2\nc,3\nd,4\ne,5\n")

        loaded = item_file.load(small_store)

        assert loaded == 3
        assert len(small_store) == 3
        assert [r.name for r in small_store] == ["a", "b", "c"]
        assert item_file.truncated is True

    def test_exact_capacity_not_truncated(self, write_data, item_file, small_store):
        write_data("a,1\nb,2\nc,3\n")
        assert item_file.load(small_store) == 3
        assert item_file.truncated is False

    def test_invalid_lines_after_full_still_flag_truncation(self, write_data, item_file, small_store):
        write_data("a,1\nb,2\nc,3\nbadline\n")
        item_file.load(small_store)
        assert item_file.truncated is True


class TestSave:
    """Tests for ItemFile.save."""

    def test_writes_one_line_per_record(self, item_file, data_path, store):
        store.add("Widget", 10)
        store.add("Gizmo", -3)

        item_file.save(store)

        assert data_path.read_text(encoding="utf-8") == "Widget,10\nGizmo,-3\n"

    def test_empty_store_writes_empty_file(self, item_file, data_path, store):
        item_file.save(store)
        assert data_path.exists()
        assert data_path.read_text(encoding="utf-8") == ""

    def test_overwrites_previous_contents(self, write_data, item_file, data_path, store):
        write_data("Old,1\nOlder,2\nOldest,3\n")
        store.add("New", 4)

        item_file.save(store)

        assert data_path.read_text(encoding="utf-8") == "New,4\n"

    def test_unwritable_path_raises(self, tmp_path, store):
        store.add("Widget", 10)
        bad = ItemFile(tmp_path / "missing_dir" / "items.csv")
        with pytest.raises(PersistenceError):
            bad.save(store)


class TestRoundTrip:
    """save then load reproduces the same records in the same order."""

    def test_round_trip(self, item_file):
        original = ItemStore()
        for name, value in [("Widget", 10), ("Gizmo", -3), ("Big Widget", 0), ("Widget", 10)]:
            original.add(name, value)

        item_file.save(original)
        restored = ItemStore()
        loaded = item_file.load(restored)

        assert loaded == len(original)
        assert list(restored.entries()) == list(original.entries())

    def test_round_trip_extreme_values(self, item_file):
        original = ItemStore()
        original.add("min", -2147483648)
        original.add("max", 2147483647)

        item_file.save(original)
        restored = ItemStore()
        item_file.load(restored)

        assert list(restored) == list(original)
