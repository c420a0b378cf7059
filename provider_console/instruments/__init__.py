"""
Instrument browser: filtering, pagination and selection for provider detail.

The stages always run in the order filter -> paginate -> resync, each
consuming the previous stage's output.
"""

from .filtering import filter_instruments
from .paging import PAGE_SIZE, PageView, paginate
from .selection import resync
from .view import InstrumentViewState, recompute

__all__ = [
    "filter_instruments",
    "PAGE_SIZE",
    "PageView",
    "paginate",
    "resync",
    "InstrumentViewState",
    "recompute",
]
