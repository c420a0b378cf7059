"""Free-text instrument filtering over symbol, base and quote assets."""

from typing import Sequence

from ..data.models import Instrument


def matches_query(instrument: Instrument, query: str) -> bool:
    """True when the lowercase query occurs in the symbol, base or quote asset."""
    return (
        query in instrument.symbol.lower()
        or query in instrument.base_asset.lower()
        or query in instrument.quote_asset.lower()
    )


def filter_instruments(instruments: Sequence[Instrument], query: str) -> Sequence[Instrument]:
    """
    Filter instruments by a free-text query.

    A blank query returns the input sequence itself, which callers must treat
    as read-only. Otherwise the matching instruments are returned in their
    original order.
    """
    needle = query.strip().lower()
    if not needle:
        return instruments
    return tuple(instrument for instrument in instruments if matches_query(instrument, needle))
