"""
Immutable instrument browser state.

Query, page and selection are coupled: a query change moves the page, a
page change moves the selection, a new instrument set moves both. Rather
than reacting to each field separately, every change produces a new
InstrumentViewState from the single `recompute` pipeline.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

from ..data.models import Instrument
from .filtering import filter_instruments
from .paging import PAGE_SIZE, PageView, paginate
from .selection import resync


@dataclass(frozen=True)
class InstrumentViewState:
    """Snapshot of the instrument browser for one provider."""
    instruments: tuple[Instrument, ...]
    query: str
    page: int                           # Always the clamped, effective page
    selected: Optional[Instrument]
    filtered: tuple[Instrument, ...] = field(repr=False)
    page_view: PageView = field(repr=False)
    page_size: int = PAGE_SIZE

    @classmethod
    def empty(cls, page_size: int = PAGE_SIZE) -> "InstrumentViewState":
        return recompute((), "", 0, None, page_size)

    @classmethod
    def for_instruments(cls, instruments: Sequence[Instrument],
                        page_size: int = PAGE_SIZE) -> "InstrumentViewState":
        """Fresh state for a newly viewed provider: no query, first page."""
        return recompute(instruments, "", 0, None, page_size)

    @property
    def total_count(self) -> int:
        return len(self.instruments)

    @property
    def filtered_count(self) -> int:
        return len(self.filtered)

    @property
    def is_filtered(self) -> bool:
        return self.filtered_count != self.total_count

    def with_instruments(self, instruments: Sequence[Instrument]) -> "InstrumentViewState":
        """Replace the instrument set, keeping query, page and selection where still valid."""
        return recompute(instruments, self.query, self.page, self.selected, self.page_size)

    def with_query(self, query: str) -> "InstrumentViewState":
        """Apply a new search query; a new query always starts from the first page."""
        if query == self.query:
            return self
        return recompute(self.instruments, query, 0, self.selected, self.page_size)

    def with_page(self, page: int) -> "InstrumentViewState":
        return recompute(self.instruments, self.query, page, self.selected, self.page_size)

    def next_page(self) -> "InstrumentViewState":
        if not self.page_view.has_next:
            return self
        return self.with_page(self.page + 1)

    def previous_page(self) -> "InstrumentViewState":
        if not self.page_view.has_previous:
            return self
        return self.with_page(self.page - 1)

    def select(self, symbol: str) -> "InstrumentViewState":
        """Select an instrument on the current page; unknown symbols are ignored."""
        for instrument in self.page_view.items:
            if instrument.symbol == symbol:
                return replace(self, selected=instrument)
        return self

    def cleared(self) -> "InstrumentViewState":
        """Empty state used once the detail view closes."""
        return InstrumentViewState.empty(self.page_size)


def recompute(
    instruments: Sequence[Instrument],
    query: str,
    page: int,
    previous_selection: Optional[Instrument],
    page_size: int = PAGE_SIZE
) -> InstrumentViewState:
    """
    Derive the complete browser state from its inputs.

    Runs filter, then paginate, then resync. The stored page is the clamped
    effective page, so a shrinking result set never leaves the browser on a
    page that no longer exists.
    """
    instruments = tuple(instruments)
    filtered = tuple(filter_instruments(instruments, query))
    page_view = paginate(filtered, page, page_size)
    selected = resync(page_view.items, previous_selection)
    return InstrumentViewState(
        instruments=instruments,
        query=query,
        page=page_view.effective_page,
        selected=selected,
        filtered=filtered,
        page_view=page_view,
        page_size=page_size,
    )
