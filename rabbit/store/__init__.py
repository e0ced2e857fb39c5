# ==============================================
# STORE (In-memory records)
# ==============================================
#
# This package holds the record type and the bounded,
# append-only collection the CLI operates on.
#
# Modules:
# --------
# - record.py      → Record dataclass + line (de)serialization
# - item_store.py  → ItemStore: add / entries
#
# ==============================================

from .record import Record
from .item_store import ItemStore

__all__ = ["Record", "ItemStore"]
