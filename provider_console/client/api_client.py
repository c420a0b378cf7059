"""HTTP client for the provider admin API."""

import socket
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote, urlparse
from urllib.request import Request, urlopen

import orjson
import structlog

from ..config.defaults import ApiParams
from ..data.models import AdapterMetadata, ProviderDetail, ProviderRequest, ProviderSummary
from ..data.parsers import (
    ParseError,
    parse_adapter_list,
    parse_json_payload,
    parse_provider_detail,
    parse_provider_list,
)
from ..errors import RemoteCallError

logger = structlog.get_logger(__name__)


def extract_error_message(body: bytes, fallback: str) -> str:
    """
    Pull the display string out of an API error body.

    Error responses look like {"status": "error", "error": "provider exists"};
    anything else yields the fallback.
    """
    if not body:
        return fallback
    try:
        payload = orjson.loads(body)
    except orjson.JSONDecodeError:
        return fallback
    if isinstance(payload, dict):
        message = payload.get("error") or payload.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return fallback


class ProviderAdminClient:
    """Provider admin REST API client."""

    def __init__(self, base_url: str, timeout_seconds: float = 10.0,
                 headers: Optional[dict[str, str]] = None):
        parsed = urlparse(base_url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"Invalid URL: {base_url}")

        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.headers = dict(headers or {})
        self.logger = logger.bind(base_url=self.base_url)

    @classmethod
    def from_config(cls, params: ApiParams) -> "ProviderAdminClient":
        return cls(params.base_url, params.timeout_seconds, params.headers)

    def list_providers(self) -> list[ProviderSummary]:
        payload = self._request("GET", "/providers", operation="list_providers")
        return self._parse(parse_provider_list, payload, "list_providers")

    def get_provider(self, name: str) -> ProviderDetail:
        payload = self._request("GET", self._provider_path(name), operation="get_provider")
        return self._parse(parse_provider_detail, payload, "get_provider")

    def list_adapters(self) -> list[AdapterMetadata]:
        payload = self._request("GET", "/adapters", operation="list_adapters")
        return self._parse(parse_adapter_list, payload, "list_adapters")

    def create_provider(self, request: ProviderRequest) -> None:
        self._request("POST", "/providers", body=request.to_payload(),
                      operation="create_provider")

    def update_provider(self, name: str, request: ProviderRequest) -> None:
        self._request("PUT", self._provider_path(name), body=request.to_payload(),
                      operation="update_provider")

    def start_provider(self, name: str) -> None:
        self._request("POST", self._provider_path(name, "start"), operation="start_provider")

    def stop_provider(self, name: str) -> None:
        self._request("POST", self._provider_path(name, "stop"), operation="stop_provider")

    def delete_provider(self, name: str) -> None:
        self._request("DELETE", self._provider_path(name), operation="delete_provider")

    def _provider_path(self, name: str, action: Optional[str] = None) -> str:
        path = f"/providers/{quote(name, safe='')}"
        if action:
            path = f"{path}/{action}"
        return path

    def _parse(self, parser, payload: Any, operation: str):
        try:
            return parser(payload)
        except ParseError as e:
            self.logger.error("Unexpected admin API response", operation=operation, error=str(e))
            raise RemoteCallError(f"Unexpected response: {e}", operation=operation)

    def _request(self, method: str, path: str, body: Optional[dict[str, Any]] = None,
                 operation: Optional[str] = None) -> Any:
        """Send one request and return the decoded JSON body (None when empty)."""
        url = f"{self.base_url}{path}"
        headers = {
            'Accept': 'application/json',
            'User-Agent': 'provider-console/0.1',
        }
        data = None
        if body is not None:
            try:
                data = orjson.dumps(body)
            except orjson.JSONEncodeError as e:
                self.logger.error("Request body cannot be encoded", operation=operation,
                                  method=method, path=path, error=str(e))
                raise RemoteCallError(f"Invalid request: {e}", operation=operation)
            headers['Content-Type'] = 'application/json'
            headers['Content-Length'] = str(len(data))
        headers.update(self.headers)

        req = Request(url, data=data, headers=headers, method=method)

        try:
            with urlopen(req, timeout=self.timeout_seconds) as response:
                response_code = response.getcode()
                response_data = response.read()

        except HTTPError as e:
            error_body = e.read() if e.fp is not None else b""
            message = extract_error_message(error_body, f"HTTP {e.code}: {e.reason}")
            self.logger.warning(
                "Admin API HTTP error",
                operation=operation,
                method=method,
                path=path,
                error_code=e.code,
                error=message
            )
            raise RemoteCallError(message, operation=operation, status_code=e.code)

        except (OSError, URLError, socket.timeout) as e:
            message = f"Network error: {getattr(e, 'reason', e)}"
            self.logger.warning(
                "Admin API network error",
                operation=operation,
                method=method,
                path=path,
                error=str(e)
            )
            raise RemoteCallError(message, operation=operation)

        self.logger.debug("Admin API call completed", operation=operation,
                          method=method, path=path, response_code=response_code)

        if not response_data or not response_data.strip():
            return None
        try:
            return parse_json_payload(response_data)
        except ParseError as e:
            raise RemoteCallError(str(e), operation=operation, status_code=response_code)
