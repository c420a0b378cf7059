"""Display formatting for instrument lists and the instrument detail panel."""

from dataclasses import dataclass
from typing import Any

from ..data.models import Instrument
from .paging import PageView

PLACEHOLDER = "—"


def format_instrument_metric(value: Any) -> str:
    if value is None:
        return PLACEHOLDER
    if isinstance(value, str):
        trimmed = value.strip()
        return trimmed if trimmed else PLACEHOLDER
    return str(value)


@dataclass(frozen=True)
class InstrumentDisplay:
    """Formatted fields of the selected instrument."""
    symbol: str
    type: str
    base: str
    quote: str
    price_precision: str
    quantity_precision: str
    price_increment: str
    quantity_increment: str
    min_quantity: str
    max_quantity: str
    notional_precision: str

    def rows(self) -> list[tuple[str, str]]:
        """Label/value pairs in panel order."""
        return [
            ("Symbol", self.symbol),
            ("Type", self.type),
            ("Base asset", self.base),
            ("Quote asset", self.quote),
            ("Price precision", self.price_precision),
            ("Quantity precision", self.quantity_precision),
            ("Price increment", self.price_increment),
            ("Quantity increment", self.quantity_increment),
            ("Min quantity", self.min_quantity),
            ("Max quantity", self.max_quantity),
            ("Notional precision", self.notional_precision),
        ]


def describe_instrument(instrument: Instrument) -> InstrumentDisplay:
    return InstrumentDisplay(
        symbol=instrument.symbol or PLACEHOLDER,
        type=instrument.type or PLACEHOLDER,
        base=instrument.base_asset or PLACEHOLDER,
        quote=instrument.quote_asset or PLACEHOLDER,
        price_precision=format_instrument_metric(instrument.price_precision),
        quantity_precision=format_instrument_metric(instrument.quantity_precision),
        price_increment=format_instrument_metric(instrument.metric("price_increment")),
        quantity_increment=format_instrument_metric(instrument.metric("quantity_increment")),
        min_quantity=format_instrument_metric(instrument.metric("min_quantity")),
        max_quantity=format_instrument_metric(instrument.metric("max_quantity")),
        notional_precision=format_instrument_metric(instrument.metric("notional_precision")),
    )


def instrument_label(instrument: Instrument) -> str:
    """List entry label, e.g. "BTCUSDT (BTC/USDT)"."""
    base = instrument.base_asset or PLACEHOLDER
    quote = instrument.quote_asset or PLACEHOLDER
    return f"{instrument.symbol or PLACEHOLDER} ({base}/{quote})"


def instrument_count_label(filtered_count: int, total_count: int) -> str:
    if filtered_count != total_count:
        return f"{filtered_count} of {total_count}"
    return str(filtered_count)


def page_range_label(page_view: PageView) -> str:
    return (
        f"Showing {page_view.display_start:,}–{page_view.display_end:,} "
        f"of {page_view.total_count:,}"
    )
