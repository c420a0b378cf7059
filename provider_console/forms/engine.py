"""
Configuration form engine for provider create/edit dialogs.

Builds the editable, string-keyed value map shown to the operator from an
adapter's settings schema, and interprets it back into a typed configuration
payload on submit. A submission either produces a complete request or fails
with the first blocking error; nothing is ever partially submitted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Sequence

import orjson

from ..data.models import AdapterMetadata, ProviderDetail, ProviderRequest, SettingField
from ..errors import FieldError, FormValidationError, PreconditionError
from ..logging.config import get_form_logger
from .coercion import coerce

logger = get_form_logger(__name__)


def value_to_string(value: Any) -> str:
    """Render a setting value as editable text.

    Objects and arrays use compact JSON, booleans their JSON spelling,
    None the empty string. Integral floats drop the fractional part so a
    stored 50.0 stays valid input for an integer field.
    """
    if value is None:
        return ""
    if isinstance(value, (dict, list, tuple, bool)):
        return orjson.dumps(value).decode("utf-8")
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def field_placeholder(setting: SettingField) -> Optional[str]:
    """Placeholder hint for an input, naming the adapter default if any."""
    if not setting.has_default:
        return None
    return f"Default: {value_to_string(setting.default)}"


def build_values(
    metadata: Optional[AdapterMetadata],
    existing: Optional[Mapping[str, Any]] = None
) -> dict[str, str]:
    """
    Build the initial editable value map for an adapter's settings.

    Every schema field gets an entry, in schema order: the existing value when
    the provider already has one (even if null), else the declared default,
    else the empty string. The map is always built from scratch.
    """
    if metadata is None:
        return {}

    values: dict[str, str] = {}
    for setting in metadata.settings_schema:
        if existing is not None and setting.name in existing:
            values[setting.name] = value_to_string(existing[setting.name])
        elif setting.has_default:
            values[setting.name] = value_to_string(setting.default)
        else:
            values[setting.name] = ""
    return values


def collect_payload(metadata: AdapterMetadata, values: Mapping[str, str]) -> dict[str, Any]:
    """
    Coerce and validate edited values into the adapter config payload.

    Fields are evaluated in schema order and the first failure wins. Blank
    optional fields are left out of the payload; keys in `values` that the
    schema does not declare are ignored.

    Raises:
        FieldError: For a blank required field or a value that fails coercion
    """
    config: dict[str, Any] = {}
    for setting in metadata.settings_schema:
        raw_value = values.get(setting.name) or ""
        if raw_value.strip() == "":
            if setting.required:
                raise FieldError(f"{setting.name} is required",
                                 field_name=setting.name, raw_value=raw_value)
            continue
        config[setting.name] = coerce(setting, raw_value)
    return config


def build_request(
    name: str,
    metadata: Optional[AdapterMetadata],
    values: Mapping[str, str],
    enabled: bool = True
) -> ProviderRequest:
    """
    Validate submission preconditions and build the provider request.

    Preconditions are checked before any field: the trimmed provider name must
    be non-empty, then an adapter must be selected.

    Raises:
        PreconditionError: Missing provider name or adapter
        FieldError: First invalid settings field
    """
    trimmed_name = name.strip()
    if not trimmed_name:
        raise PreconditionError("Provider name is required", precondition="name")
    if metadata is None:
        raise PreconditionError("Adapter selection is required", precondition="adapter")

    config = collect_payload(metadata, values)
    return ProviderRequest(
        name=trimmed_name,
        adapter_identifier=metadata.identifier,
        config=config,
        enabled=enabled,
    )


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclass
class ConfigFormState:
    """Editable state of one open provider form."""
    name: str = ""
    adapter_identifier: str = ""
    values: dict[str, str] = field(default_factory=dict)
    enabled: bool = True


class ConfigFormSession:
    """An open create/edit dialog bound to the known adapter catalogue."""

    def __init__(self, adapters: Sequence[AdapterMetadata], mode: FormMode = FormMode.CREATE):
        self.adapters = {adapter.identifier: adapter for adapter in adapters}
        self.mode = mode
        self.state = ConfigFormState()
        self.error: Optional[str] = None
        self.loading = False

    @property
    def selected_adapter(self) -> Optional[AdapterMetadata]:
        return self.adapters.get(self.state.adapter_identifier)

    @property
    def title(self) -> str:
        if self.mode == FormMode.CREATE:
            return "Create provider"
        return f"Edit provider {self.state.name}"

    @property
    def fields(self) -> tuple[SettingField, ...]:
        adapter = self.selected_adapter
        return adapter.settings_schema if adapter else ()

    def reset(self) -> None:
        """Discard all edits and errors."""
        self.state = ConfigFormState()
        self.error = None
        self.loading = False

    def set_name(self, name: str) -> None:
        if self.mode == FormMode.EDIT:
            logger.warning("Provider name is fixed while editing",
                           provider=self.state.name, attempted=name)
            return
        self.state.name = name

    def select_adapter(self, identifier: str) -> None:
        """Switch adapters, rebuilding the value map for the new schema."""
        metadata = self.adapters.get(identifier)
        self.state.adapter_identifier = identifier
        self.state.values = build_values(metadata)
        logger.debug("Adapter selected", adapter=identifier,
                     known=metadata is not None, fields=len(self.state.values))

    def set_value(self, field_name: str, raw: str) -> None:
        self.state.values[field_name] = raw

    def set_enabled(self, enabled: bool) -> None:
        self.state.enabled = enabled

    def load_detail(self, detail: ProviderDetail) -> None:
        """Populate the form from an existing provider for editing."""
        self.adapters.setdefault(detail.adapter.identifier, detail.adapter)
        self.state = ConfigFormState(
            name=detail.name,
            adapter_identifier=detail.adapter.identifier,
            values=build_values(detail.adapter, detail.settings),
            enabled=detail.running,
        )

    def build_request(self) -> ProviderRequest:
        """
        Validate the form and produce the request to send.

        The error message of a failed validation is kept on `error` for
        inline display; the edited values are left untouched.
        """
        self.error = None
        try:
            request = build_request(
                self.state.name,
                self.selected_adapter,
                self.state.values,
                self.state.enabled,
            )
        except FormValidationError as e:
            self.error = e.message
            logger.info("Form submission blocked", mode=self.mode.value,
                        provider=self.state.name.strip(), reason=e.message)
            raise
        return request
