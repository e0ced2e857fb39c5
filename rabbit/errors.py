# ==============================================
# Errors
# ==============================================
#
# Library layers (validation, store, persistence) raise these;
# the interactive loop catches them, prints the message and
# carries on with the next menu iteration.
#
#   RabbitError
#   ├── CapacityError      → store already holds max_items records
#   ├── ValidationError    → blank name / unusable field
#   │   └── ParseError     → not a well-formed integer
#   └── PersistenceError   → data file cannot be opened for read/write
#
# ==============================================


class RabbitError(Exception):
    """Base class for all Rabbit Hole errors."""


class CapacityError(RabbitError):
    """Raised when adding to a store that is already full."""

    def __init__(self, capacity: int):
        super().__init__(f"Store is full ({capacity} items)")
        self.capacity = capacity


class ValidationError(RabbitError):
    """Raised when a record field fails validation."""


class ParseError(ValidationError):
    """Raised when text is not a strict integer."""

    def __init__(self, text: str, reason: str = "not an integer"):
        super().__init__(f"{text!r}: {reason}")
        self.text = text
        self.reason = reason


class PersistenceError(RabbitError):
    """Raised when the data file cannot be opened."""

    def __init__(self, path, action: str):
        super().__init__(f"Unable to {action} {path}")
        self.path = path
        self.action = action
