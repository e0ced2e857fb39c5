# ==============================================
# Rabbit Hole: Data that goes deeper
# ==============================================
#
# Package Structure:
#
# rabbit/
# ├── store/           # In-memory record collection
# ├── persistence/     # Flat-file load/save of the collection
# ├── validation.py    # Trim, blank-check, strict integer parsing
# ├── errors.py        # Error kinds
# ├── config.py        # Configuration management
# └── cli.py           # Interactive menu loop / entry point
#
# ==============================================

__version__ = "0.1.0"
