#!/usr/bin/env python3
"""Print providers, or one provider's instruments, from the admin API.

Usage:
    python scripts/inspect_provider.py                      # list providers
    python scripts/inspect_provider.py binance-spot         # first page of instruments
    python scripts/inspect_provider.py binance-spot btc 1   # filtered, second page
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from provider_console.client.api_client import ProviderAdminClient
from provider_console.config.loader import ConfigLoader
from provider_console.console.controller import ProvidersConsole
from provider_console.errors import ConfigurationError
from provider_console.instruments.display import (
    instrument_count_label,
    instrument_label,
    page_range_label,
)
from provider_console.logging.config import configure_logging


def print_providers(console: ProvidersConsole) -> None:
    if not console.providers:
        print("No providers configured yet. Create one to begin streaming market data.")
        return
    for provider in console.providers:
        status = "Running" if provider.running else "Stopped"
        print(f"• {provider.name} [{status}] {console.adapter_label(provider)}"
              f" - {provider.instrument_count} instruments")


def print_instruments(console: ProvidersConsole, name: str, query: str, page: int) -> int:
    if not console.open_detail(name):
        print(f"❌ {console.banners.detail_error}")
        return 1

    view = console.set_instrument_query(query)
    view = console.set_instrument_page(page)
    print(f"📊 {name}: instruments ({instrument_count_label(view.filtered_count, view.total_count)})")
    for instrument in view.page_view.items:
        marker = "›" if view.selected is instrument else " "
        print(f" {marker} {instrument_label(instrument)}")
    if view.page_view.is_paginated:
        print(page_range_label(view.page_view))

    display = console.selected_instrument_display
    if display is not None:
        print("\nInstrument details")
        for label, value in display.rows():
            print(f"  {label:<20} {value}")
    return 0


def main():
    try:
        config = ConfigLoader.create().load()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    configure_logging(level=config.logging.level, format_json=config.logging.format_json)
    console = ProvidersConsole(ProviderAdminClient.from_config(config.api), config)

    try:
        if not console.load():
            print(f"❌ {console.banners.load_error}")
            sys.exit(1)

        args = sys.argv[1:]
        if not args:
            print_providers(console)
            sys.exit(0)

        query = args[1] if len(args) > 1 else ""
        page = int(args[2]) if len(args) > 2 else 0
        sys.exit(print_instruments(console, args[0], query, page))
    finally:
        console.close()


if __name__ == "__main__":
    main()
