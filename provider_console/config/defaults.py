"""Default configuration parameters for the provider console."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ApiParams:
    """Provider admin API connection parameters."""
    base_url: str = "http://localhost:8080/api/v1"
    timeout_seconds: float = 10.0
    headers: Optional[dict[str, str]] = None      # Extra headers on every request


@dataclass(frozen=True)
class InstrumentBrowserParams:
    """Instrument browser parameters."""
    page_size: int = 120                          # Instruments per page


@dataclass(frozen=True)
class NoticeParams:
    """Transient notice parameters."""
    dismiss_after_seconds: float = 4.0            # Success notice lifetime


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class ConsoleConfig:
    """Complete console configuration."""
    api: ApiParams
    instruments: InstrumentBrowserParams
    notices: NoticeParams
    logging: LoggingParams


def get_default_config() -> ConsoleConfig:
    """Get the default configuration instance."""
    return ConsoleConfig(
        api=ApiParams(),
        instruments=InstrumentBrowserParams(),
        notices=NoticeParams(),
        logging=LoggingParams(),
    )
