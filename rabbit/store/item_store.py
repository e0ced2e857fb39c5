# ==============================================
# ItemStore
# ==============================================
#
# PURPOSE:
#   Hold the ordered, bounded collection of Records that the
#   CLI works on. Persistence fills it at startup and writes
#   it back out; the "add" menu action is the only mutation.
#
# CLASS: ItemStore
# ----------------
#   Stateful: owns the list of records.
#
#   Constructor:
#   ------------
#   - __init__(capacity: int = 100, name_width: int = 49)
#
#   Methods:
#   --------
#   - add(name: str, value: int) -> Record
#       Append a record. Raises CapacityError when full
#       (store unchanged), ValidationError for a blank name.
#
#   - add_record(record: Record) -> Record
#       Append an already-built record (used by the loader).
#
#   - entries() -> Iterator[tuple[int, Record]]
#       Lazy (index, record) pairs, 1-based, insertion order.
#       Each call starts again from the current contents.
#
#   - is_empty / is_full / capacity / __len__ / __iter__
#
# INVARIANTS:
# -----------
#   0 <= len(store) <= capacity
#   Records are never removed or reordered.
#   Duplicate names/values are allowed.
#
# ==============================================

from typing import Iterator, List, Tuple

from rabbit.config import DEFAULT_MAX_ITEMS, DEFAULT_NAME_WIDTH
from rabbit.errors import CapacityError, ValidationError
from rabbit.store.record import Record
from rabbit.validation import validate_name


class ItemStore:
    """
    Bounded, append-only, insertion-ordered collection of Records.
    """

    def __init__(self, capacity: int = DEFAULT_MAX_ITEMS, name_width: int = DEFAULT_NAME_WIDTH):
        """
        Initialize an empty store.

        Args:
            capacity: Maximum number of records
            name_width: Maximum name size in bytes
        """
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._name_width = name_width
        self._records: List[Record] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def name_width(self) -> int:
        return self._name_width

    @property
    def is_empty(self) -> bool:
        return not self._records

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self._capacity

    def add(self, name: str, value: int) -> Record:
        """
        Validate and append a new record.

        Args:
            name: Item name (trailing newline and overlong tail are dropped)
            value: Integer value

        Returns:
            The Record that was appended

        Raises:
            CapacityError: If the store already holds `capacity` records
            ValidationError: If the name is blank or the value does not
                fit a signed 32-bit integer
        """
        if self.is_full:
            raise CapacityError(self._capacity)
        return self.add_record(Record(name=validate_name(name, self._name_width), value=value))

    def add_record(self, record: Record) -> Record:
        if self.is_full:
            raise CapacityError(self._capacity)
        if len(record.name.encode("utf-8")) > self._name_width:
            raise ValidationError(f"Name longer than {self._name_width} bytes")
        self._records.append(record)
        return record

    def entries(self) -> Iterator[Tuple[int, Record]]:
        """
        Yield (index, record) pairs starting at 1.

        An empty store yields nothing; callers check `is_empty`
        to report "nothing to display".
        """
        for index, record in enumerate(self._records, start=1):
            yield index, record

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"ItemStore({len(self._records)}/{self._capacity})"
