"""
Canonical data models for provider administration.

This module defines immutable data structures for adapter metadata, setting
schemas, instruments and providers after parsing from the admin API.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class FieldKind(str, Enum):
    """Closed set of value kinds a settings field can be coerced into."""
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    TEXT = "text"


# Type tags as adapters declare them, lowercased. Anything else is TEXT.
TYPE_TAGS: dict[str, FieldKind] = {
    "int": FieldKind.INT,
    "integer": FieldKind.INT,
    "float": FieldKind.FLOAT,
    "double": FieldKind.FLOAT,
    "number": FieldKind.FLOAT,
    "bool": FieldKind.BOOL,
    "boolean": FieldKind.BOOL,
}


def classify_type_tag(type_tag: Optional[str]) -> FieldKind:
    """Map a free-text type tag onto its FieldKind, case-insensitively."""
    if not type_tag:
        return FieldKind.TEXT
    return TYPE_TAGS.get(type_tag.strip().lower(), FieldKind.TEXT)


@dataclass(frozen=True)
class SettingField:
    """One declared adapter setting."""
    name: str
    type: str = "string"                # Type tag exactly as the adapter declared it
    default: Any = None
    required: bool = False

    @property
    def kind(self) -> FieldKind:
        return classify_type_tag(self.type)

    @property
    def is_numeric(self) -> bool:
        """Numeric fields get a numeric input in the form."""
        return self.kind in (FieldKind.INT, FieldKind.FLOAT)

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass(frozen=True)
class AdapterMetadata:
    """Reference data describing one adapter type."""
    identifier: str
    display_name: str
    description: Optional[str] = None
    venue: Optional[str] = None
    capabilities: tuple[str, ...] = ()
    settings_schema: tuple[SettingField, ...] = ()

    @property
    def label(self) -> str:
        """Display label used in provider cards: "Binance Spot (binance-spot)"."""
        return f"{self.display_name} ({self.identifier})"

    def get_field(self, name: str) -> Optional[SettingField]:
        for setting in self.settings_schema:
            if setting.name == name:
                return setting
        return None


@dataclass(frozen=True)
class Instrument:
    """Snapshot of a tradable instrument exposed by a provider.

    Base/quote assets and precisions are published under a primary key and a
    legacy key depending on the adapter; the accessors below resolve them in
    that order.
    """
    symbol: str
    type: Optional[str] = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def _resolve(self, primary: str, legacy: str) -> Any:
        value = self.raw.get(primary)
        if value is None:
            value = self.raw.get(legacy)
        return value

    @property
    def base_asset(self) -> str:
        value = self._resolve("baseAsset", "base_currency")
        return "" if value is None else str(value)

    @property
    def quote_asset(self) -> str:
        value = self._resolve("quoteAsset", "quote_currency")
        return "" if value is None else str(value)

    @property
    def price_precision(self) -> Any:
        return self._resolve("pricePrecision", "price_precision")

    @property
    def quantity_precision(self) -> Any:
        return self._resolve("quantityPrecision", "quantity_precision")

    def metric(self, key: str) -> Any:
        """Raw value of a numeric metric field, None when absent."""
        return self.raw.get(key)


@dataclass(frozen=True)
class ProviderSummary:
    """Provider entry as listed by the admin API."""
    name: str
    adapter: str                        # Adapter identifier
    identifier: str
    instrument_count: int = 0
    settings: dict[str, Any] = field(default_factory=dict)
    running: bool = False


@dataclass(frozen=True)
class ProviderDetail:
    """Full provider view including adapter metadata and instruments."""
    name: str
    adapter: AdapterMetadata
    identifier: str
    instrument_count: int = 0
    settings: dict[str, Any] = field(default_factory=dict)
    running: bool = False
    instruments: tuple[Instrument, ...] = ()


@dataclass(frozen=True)
class ProviderRequest:
    """Create/update request body for a provider."""
    name: str
    adapter_identifier: str
    config: dict[str, Any]
    enabled: bool = True

    def to_payload(self) -> dict[str, Any]:
        """Wire shape expected by the admin API."""
        return {
            "name": self.name,
            "adapter": {
                "identifier": self.adapter_identifier,
                "config": dict(self.config),
            },
            "enabled": self.enabled,
        }
