"""
switch_table: split a command line into switches and their arguments.
"""

from switch_table.config_defaults import DUPLICATE_POLICIES
from switch_table.errors import NotFound
from switch_table.table import ArgumentTable, is_switch

__version__ = "0.1.0"

__all__ = [
    "ArgumentTable",
    "DUPLICATE_POLICIES",
    "NotFound",
    "is_switch",
]
