"""Fixed-size pagination of a filtered instrument sequence."""

import math
from dataclasses import dataclass
from typing import Sequence

from ..data.models import Instrument

PAGE_SIZE = 120


@dataclass(frozen=True)
class PageView:
    """One page of instruments plus the counters shown around it."""
    effective_page: int
    items: tuple[Instrument, ...]
    total_pages: int
    display_start: int                  # 1-based, 0 when nothing to show
    display_end: int                    # 1-based inclusive, 0 when nothing to show
    total_count: int

    @property
    def has_previous(self) -> bool:
        return self.effective_page > 0

    @property
    def has_next(self) -> bool:
        return self.total_pages > 0 and self.effective_page < self.total_pages - 1

    @property
    def is_paginated(self) -> bool:
        """Pager controls are only shown when there is more than one page."""
        return self.total_pages > 1


def total_pages_for(count: int, page_size: int = PAGE_SIZE) -> int:
    if count <= 0:
        return 0
    return math.ceil(count / page_size)


def clamp_page(requested_page: int, total_pages: int) -> int:
    """Clamp a requested page into [0, total_pages - 1], 0 when there are no pages."""
    if total_pages == 0:
        return 0
    return min(max(requested_page, 0), total_pages - 1)


def paginate(filtered: Sequence[Instrument], requested_page: int,
             page_size: int = PAGE_SIZE) -> PageView:
    """
    Slice the current page out of the filtered instruments.

    Out-of-range pages are clamped silently; this never raises.
    """
    total_count = len(filtered)
    total_pages = total_pages_for(total_count, page_size)
    effective_page = clamp_page(requested_page, total_pages)

    start = effective_page * page_size
    items = tuple(filtered[start:start + page_size])

    if total_count == 0:
        display_start = display_end = 0
    else:
        display_start = start + 1
        display_end = start + len(items)

    return PageView(
        effective_page=effective_page,
        items=items,
        total_pages=total_pages,
        display_start=display_start,
        display_end=display_end,
        total_count=total_count,
    )
