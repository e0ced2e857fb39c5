# ==============================================
# PERSISTENCE (Items across restarts)
# ==============================================
#
# This package saves and loads the item store so that
# items added in one run are available in the next.
#
# Modules:
# --------
# - item_file.py  → Load/save records as "name,value" lines
#
# ==============================================

from .item_file import ItemFile

__all__ = ["ItemFile"]
