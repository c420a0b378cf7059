"""
Admin API payload parsers for converting JSON responses to typed models.

This module handles parsing of adapter metadata, provider listings and
provider details into canonical data structures, with explicit errors for
payloads missing required keys.
"""

import re
from typing import Any

import orjson

from ..errors import MalformedPayloadError
from .models import (
    AdapterMetadata,
    Instrument,
    ProviderDetail,
    ProviderSummary,
    SettingField,
)


_COUNT_RE = re.compile(r"[0-9]{1,18}")


class ParseError(MalformedPayloadError):
    """Raised when an admin API payload cannot be interpreted."""
    pass


def _require(payload: Any, key: str, kind: str) -> Any:
    if not isinstance(payload, dict):
        raise ParseError(f"{kind} must be an object", raw_data=payload, expected_format=kind)
    value = payload.get(key)
    if value is None or value == "":
        raise ParseError(f"{kind} is missing '{key}'", raw_data=payload, expected_format=kind)
    return value


def _as_list(payload: Any, key: str, kind: str) -> list[Any]:
    value = payload.get(key) if isinstance(payload, dict) else None
    if value is None:
        return []
    if not isinstance(value, list):
        raise ParseError(f"{kind} '{key}' must be a list", raw_data=value, expected_format="list")
    return value


def _as_count(payload: dict[str, Any], key: str, kind: str, default: int = 0) -> int:
    """Non-negative integer field; integral floats and digit strings are accepted."""
    value = payload.get(key)
    if value is None:
        return default
    if isinstance(value, str) and _COUNT_RE.fullmatch(value.strip()):
        return int(value.strip())
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ParseError(f"{kind} '{key}' must be a non-negative integer",
                         raw_data=payload, expected_format="integer")
    return value


def _as_flag(payload: dict[str, Any], key: str, kind: str) -> bool:
    """Boolean field; "true"/"false" strings and 0/1 are accepted, absent is False."""
    value = payload.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ParseError(f"{kind} '{key}' must be a boolean",
                     raw_data=payload, expected_format="boolean")


def parse_setting_field(payload: dict[str, Any]) -> SettingField:
    """Parse one settings schema entry."""
    name = _require(payload, "name", "setting")
    return SettingField(
        name=str(name),
        type=str(payload.get("type") or "string"),
        default=payload.get("default"),
        required=_as_flag(payload, "required", "setting"),
    )


def parse_adapter_metadata(payload: dict[str, Any]) -> AdapterMetadata:
    """
    Parse adapter metadata.

    Expected format:
    {
        "identifier": "binance-spot",
        "displayName": "Binance Spot",
        "venue": "BINANCE",
        "description": "...",
        "capabilities": ["trades", "ticker"],
        "settingsSchema": [{"name": "apiKey", "type": "string", "required": true}]
    }
    """
    identifier = str(_require(payload, "identifier", "adapter"))
    schema = tuple(
        parse_setting_field(entry)
        for entry in _as_list(payload, "settingsSchema", "adapter")
    )
    return AdapterMetadata(
        identifier=identifier,
        display_name=str(payload.get("displayName") or identifier),
        description=payload.get("description") or None,
        venue=payload.get("venue") or None,
        capabilities=tuple(str(c) for c in _as_list(payload, "capabilities", "adapter")),
        settings_schema=schema,
    )


def parse_instrument(payload: dict[str, Any]) -> Instrument:
    """Parse one instrument, keeping every published field."""
    symbol = _require(payload, "symbol", "instrument")
    return Instrument(
        symbol=str(symbol),
        type=payload.get("type"),
        raw=dict(payload),
    )


def _parse_settings(payload: dict[str, Any]) -> dict[str, Any]:
    settings = payload.get("settings")
    if settings is None:
        return {}
    if not isinstance(settings, dict):
        raise ParseError("provider 'settings' must be an object", raw_data=settings)
    return dict(settings)


def parse_provider_summary(payload: dict[str, Any]) -> ProviderSummary:
    """Parse a provider list entry."""
    name = str(_require(payload, "name", "provider"))
    adapter = payload.get("adapter")
    if isinstance(adapter, dict):
        adapter = adapter.get("identifier")
    return ProviderSummary(
        name=name,
        adapter=str(adapter or ""),
        identifier=str(payload.get("identifier") or adapter or ""),
        instrument_count=_as_count(payload, "instrumentCount", "provider"),
        settings=_parse_settings(payload),
        running=_as_flag(payload, "running", "provider"),
    )


def parse_provider_list(payload: dict[str, Any]) -> list[ProviderSummary]:
    """Parse a {"providers": [...]} response."""
    return [parse_provider_summary(entry) for entry in _as_list(payload, "providers", "response")]


def parse_adapter_list(payload: dict[str, Any]) -> list[AdapterMetadata]:
    """Parse an {"adapters": [...]} response."""
    return [parse_adapter_metadata(entry) for entry in _as_list(payload, "adapters", "response")]


def parse_provider_detail(payload: dict[str, Any]) -> ProviderDetail:
    """Parse a provider detail response with full adapter metadata."""
    name = str(_require(payload, "name", "provider"))
    adapter = parse_adapter_metadata(_require(payload, "adapter", "provider"))
    instruments = tuple(
        parse_instrument(entry)
        for entry in _as_list(payload, "instruments", "provider")
    )
    return ProviderDetail(
        name=name,
        adapter=adapter,
        identifier=str(payload.get("identifier") or adapter.identifier),
        instrument_count=_as_count(payload, "instrumentCount", "provider", len(instruments)),
        settings=_parse_settings(payload),
        running=_as_flag(payload, "running", "provider"),
        instruments=instruments,
    )


def parse_json_payload(raw_data: bytes | str) -> Any:
    """
    Parse raw JSON text into Python objects.

    Raises:
        ParseError: If JSON parsing fails
    """
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}", raw_data=raw_data, expected_format="json")
