from pathlib import Path
from typing import Union

from rabbit.config import DEFAULT_DATA_FILE
from rabbit.errors import PersistenceError, ValidationError
from rabbit.store.item_store import ItemStore
from rabbit.store.record import Record


# ==============================================
# ItemFile
# ==============================================
#
# PURPOSE:
#   Persist the item store to a flat text file so that items
#   survive between runs of the CLI.
#
# FILE FORMAT:
#   One record per line, "<name>,<value>\n". No header, no quoting.
#
#     Widget,10
#     Gizmo,-3
#
# LOADING RULES (per line):
#   1. Strip the trailing newline
#   2. No comma            → skip
#   3. Blank name          → skip
#   4. Value not a strict
#      integer             → skip
#   5. Name too long       → truncate to the store's name width
#   6. Store full          → stop; if lines remain, set `truncated`
#
# Skipped lines are not errors and are not counted.
#
# CLASS: ItemFile
# ---------------
#   Stateful: holds the path and the outcome of the last load.
#
#   Constructor:
#   ------------
#   - __init__(path: str | Path = DEFAULT_DATA_FILE)
#
class ItemFile:
    """
    Loads and saves an ItemStore as "name,value" lines.

    Attributes:
        path: Location of the data file
        truncated: True if the last load stopped at the store's
            capacity with lines left unread
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_DATA_FILE):
        """
        Initialize the item file.

        Args:
            path: Data file location (created on first save)
        """
        self.path = Path(path)
        self.truncated = False
#   Methods:
#   --------
#   - load(store: ItemStore) -> int
#       Append every valid line to the store. Returns the number
#       of records added. Raises PersistenceError if the file is
#       missing or unreadable.
#
#   - save(store: ItemStore) -> None
#       Truncate the file and write every record in order.
#       Raises PersistenceError if it cannot be opened.
#
    def load(self, store: ItemStore) -> int:
        """
        Load records from disk into the store.

        Args:
            store: Store to append to (may already hold records)

        Returns:
            Number of records added by this call

        Raises:
            PersistenceError: If the file cannot be opened
        """
        self.truncated = False
        loaded = 0

        try:
            with open(self.path, 'r', encoding='utf-8', errors='replace') as f:
                for line in f:
                    if store.is_full:
                        self.truncated = True
                        break
                    try:
                        record = Record.from_line(line, store.name_width)
                    except ValidationError:
                        continue
                    store.add_record(record)
                    loaded += 1
        except OSError as e:
            raise PersistenceError(self.path, "load items from") from e

        return loaded

    def save(self, store: ItemStore) -> None:
        """
        Write every record to disk, replacing the previous contents.

        Args:
            store: Store to persist

        Raises:
            PersistenceError: If the file cannot be opened for writing
        """
        try:
            with open(self.path, 'w', encoding='utf-8', newline='\n') as f:
                for record in store:
                    f.write(record.to_line() + "\n")
        except OSError as e:
            raise PersistenceError(self.path, "save items to") from e
#   UTILITY:
#   - exists() -> bool
#       Check if the data file is present (i.e., is this a restart?).
#
    def exists(self) -> bool:
        return self.path.exists()
