# ==============================================
# CLI: Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Interactive menu loop. This is how users interact with
#   the item store.
#
# USAGE:
# ------
#   python -m rabbit.cli
#   rabbit                       (console script)
#
# No flags or arguments. The data file and bounds come from
# rabbit.config (RABBIT_DATA_FILE, RABBIT_MAX_ITEMS, ...).
#
# MENU:
# -----
#   1.) Add Item     → prompt name + value, append, save
#   2.) View Items   → numbered list of all items
#   3.) Exit         → save, print farewell, exit code 0
#
# ERRORS:
# -------
#   Every RabbitError is reported and the current action is
#   aborted; the loop itself always continues. An invalid name
#   or value aborts the add without re-prompting.
#   End of input at the menu prompt behaves like "3.) Exit".
#
# ==============================================

import sys
from typing import Optional, TextIO

from rabbit.config import AppConfig, get_config
from rabbit.errors import CapacityError, ParseError, PersistenceError, ValidationError
from rabbit.persistence.item_file import ItemFile
from rabbit.store.item_store import ItemStore
from rabbit.validation import parse_strict_integer, validate_name


MENU = """
Rabbit Hole--------
Data that goes deeper.
1.) Add Item
2.) View Items
3.) Exit"""

ADD_ITEM = 1
VIEW_ITEMS = 2
EXIT = 3


class RabbitHole:
    """
    Menu loop tying the item store to its data file and the user.
    """

    def __init__(
        self,
        store: ItemStore,
        item_file: ItemFile,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self._store = store
        self._item_file = item_file
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._running = False

    @property
    def store(self) -> ItemStore:
        return self._store

    def _print(self, message: str = "") -> None:
        print(message, file=self._out)

    def _prompt(self, prompt: str) -> Optional[str]:
        """Print a prompt and read one line. None at end of input."""
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            return None
        return line

    def _save(self) -> bool:
        try:
            self._item_file.save(self._store)
        except PersistenceError:
            return False
        return True

    def start(self) -> int:
        """
        Load the data file into the store before the first menu.

        Returns:
            Number of items loaded, or -1 if the file could not be read
        """
        path = self._item_file.path
        try:
            loaded = self._item_file.load(self._store)
        except PersistenceError:
            self._print(f"Warning: Unable to load items from {path}. Starting with an empty list.")
            return -1

        if self._item_file.truncated:
            self._print("Warning: Maximum item limit reached while loading. Some items were not loaded.")
        if loaded > 0:
            self._print(f"Loaded {loaded} item(s) from {path}.")
        return loaded

    def show_menu(self) -> None:
        self._print(MENU)

    def add_item(self) -> bool:
        """
        Prompt for a name and value and append the item.

        Returns:
            True if the item was added, False if it was rejected
        """
        if self._store.is_full:
            self._print("Cannot add more items. Maximum reached.")
            return False

        try:
            name = validate_name(self._prompt("Enter item name: ") or "", self._store.name_width)
        except ValidationError:
            self._print("Name cannot be empty.")
            return False

        value_text = self._prompt("Enter item value (integer): ")
        try:
            if value_text is None:
                raise ParseError("", "end of input")
            self._store.add(name, parse_strict_integer(value_text))
        except ValidationError:
            self._print("Invalid integer. Item not added.")
            return False
        except CapacityError:
            self._print("Cannot add more items. Maximum reached.")
            return False

        self._print("Item added successfully!")

        if not self._save():
            self._print(f"Warning: Item added but failed to save to {self._item_file.path}.")
        return True

    def view_items(self) -> bool:
        """
        Print every item with its 1-based position.

        Returns:
            True if items were shown, False if the store is empty
        """
        if self._store.is_empty:
            self._print("No items to display.")
            return False

        self._print()
        self._print("Item List")
        for index, record in self._store.entries():
            self._print(f"Item {index}: Name: {record.name}, Value: {record.value}")
        return True

    def exit(self) -> None:
        if not self._save():
            self._print(f"Error saving items to {self._item_file.path}. Changes may not persist.")
        self._print("Exiting...")
        self._running = False

    def handle_choice(self, choice: int) -> None:
        if choice == ADD_ITEM:
            self.add_item()
        elif choice == VIEW_ITEMS:
            self.view_items()
        elif choice == EXIT:
            self.exit()
        else:
            self._print("Invalid choice. Please try again.")

    def run(self) -> int:
        """
        Load items, then loop on the menu until the user exits.

        Returns:
            Process exit code (always 0)
        """
        self.start()
        self._running = True

        while self._running:
            self.show_menu()
            line = self._prompt("Enter your choice: ")
            if line is None:
                self._print()
                self.exit()
                break

            try:
                choice = parse_strict_integer(line)
            except ParseError:
                self._print("Invalid input. Please enter a number.")
                continue

            self.handle_choice(choice)

        return 0


def build_app(config: Optional[AppConfig] = None) -> RabbitHole:
    """
    Wire a RabbitHole from configuration.

    Args:
        config: Application configuration. If None, loads from environment.
    """
    config = config or get_config()
    store = ItemStore(
        capacity=config.store.max_items,
        name_width=config.store.name_width
    )
    return RabbitHole(store, ItemFile(config.data_file))


def main() -> int:
    return build_app().run()


if __name__ == "__main__":
    sys.exit(main())
