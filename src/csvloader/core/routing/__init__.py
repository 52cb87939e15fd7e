"""
Record validation and field routing.
"""

from .row_router import MISSING_NAME_REASON, RowRouter

__all__ = ["RowRouter", "MISSING_NAME_REASON"]
