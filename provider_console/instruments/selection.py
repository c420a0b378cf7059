"""Selection resynchronisation against the visible page."""

from typing import Optional, Sequence

from ..data.models import Instrument


def resync(page_items: Sequence[Instrument],
           previous: Optional[Instrument]) -> Optional[Instrument]:
    """
    Resolve the selected instrument for a freshly computed page.

    The result is None only when the page is empty; otherwise it is always an
    element of `page_items`. A previous selection still visible is re-anchored
    to the page's element with the same symbol so the freshest snapshot is
    shown; one no longer visible falls back to the first item.
    """
    if not page_items:
        return None
    if previous is None:
        return page_items[0]
    for instrument in page_items:
        if instrument.symbol == previous.symbol:
            return instrument
    return page_items[0]
