"""Pytest configuration and shared fixtures."""

import pytest
from typing import Dict, Any, List

from provider_console.data.models import (
    AdapterMetadata,
    Instrument,
    ProviderDetail,
    SettingField,
)


def make_instrument(symbol: str, base: str = None, quote: str = None,
                    legacy: bool = False, **extra) -> Instrument:
    """Build an instrument, optionally publishing assets under the legacy keys."""
    raw: Dict[str, Any] = {"symbol": symbol, **extra}
    if legacy:
        raw["base_currency"] = base
        raw["quote_currency"] = quote
    else:
        raw["baseAsset"] = base
        raw["quoteAsset"] = quote
    return Instrument(symbol=symbol, type=extra.get("type"), raw=raw)


def make_instruments(count: int, prefix: str = "SYM") -> List[Instrument]:
    return [make_instrument(f"{prefix}{i:04d}USDT", f"{prefix}{i:04d}", "USDT")
            for i in range(count)]


@pytest.fixture
def binance_adapter() -> AdapterMetadata:
    """Adapter with one field of every kind."""
    return AdapterMetadata(
        identifier="binance-spot",
        display_name="Binance Spot",
        description="Binance spot market data",
        venue="BINANCE",
        capabilities=("trades", "ticker"),
        settings_schema=(
            SettingField(name="apiKey", type="string", required=True),
            SettingField(name="depthLevels", type="int", default=20, required=True),
            SettingField(name="snapshotInterval", type="float", default=1.5),
            SettingField(name="testnet", type="bool", default=False),
            SettingField(name="symbols", type="string", default=["BTCUSDT", "ETHUSDT"]),
        ),
    )


@pytest.fixture
def okx_adapter() -> AdapterMetadata:
    return AdapterMetadata(
        identifier="okx-swap",
        display_name="OKX Swap",
        settings_schema=(
            SettingField(name="passphrase", type="string", required=True),
            SettingField(name="instType", type="string", default="SWAP"),
        ),
    )


@pytest.fixture
def sample_instruments() -> List[Instrument]:
    return [
        make_instrument("BTCUSDT", "BTC", "USDT", type="spot", pricePrecision=2),
        make_instrument("ETHUSDT", "ETH", "USDT", type="spot"),
        make_instrument("XBTUSD", "BTC", "USD", legacy=True, type="perp"),
        make_instrument("SOLBTC", "SOL", "BTC", type="spot"),
        make_instrument("XRPUSDT", "XRP", "USDT", type="spot"),
    ]


@pytest.fixture
def provider_detail(binance_adapter, sample_instruments) -> ProviderDetail:
    return ProviderDetail(
        name="binance-main",
        adapter=binance_adapter,
        identifier="binance-spot",
        instrument_count=len(sample_instruments),
        settings={"apiKey": "abc123", "depthLevels": 50, "testnet": True},
        running=True,
        instruments=tuple(sample_instruments),
    )


@pytest.fixture
def adapter_payload() -> Dict[str, Any]:
    """Adapter metadata as served by the admin API."""
    return {
        "identifier": "binance-spot",
        "displayName": "Binance Spot",
        "venue": "BINANCE",
        "description": "Binance spot market data",
        "capabilities": ["trades", "ticker"],
        "settingsSchema": [
            {"name": "apiKey", "type": "string", "required": True},
            {"name": "depthLevels", "type": "INTEGER", "default": 20, "required": False},
        ],
    }


@pytest.fixture
def provider_detail_payload(adapter_payload) -> Dict[str, Any]:
    return {
        "name": "binance-main",
        "adapter": adapter_payload,
        "identifier": "binance-spot",
        "instrumentCount": 2,
        "settings": {"apiKey": "abc123"},
        "running": True,
        "instruments": [
            {"symbol": "BTCUSDT", "type": "spot", "baseAsset": "BTC", "quoteAsset": "USDT",
             "pricePrecision": 2, "price_increment": "0.01"},
            {"symbol": "ETHUSDT", "type": "spot", "base_currency": "ETH",
             "quote_currency": "USDT"},
        ],
    }
