"""
Provider console coordinator.

Owns all console state and exposes one method per operator gesture:
loading the provider list, the create/edit form, lifecycle actions and the
provider detail view with its instrument browser. Remote failures are
caught here and turned into the banner for the action that triggered them;
they never propagate to the caller.
"""

from typing import Callable, Optional, Protocol, Sequence

import structlog

from ..config.defaults import ConsoleConfig, get_default_config
from ..data.models import (
    AdapterMetadata,
    Instrument,
    ProviderDetail,
    ProviderRequest,
    ProviderSummary,
)
from ..errors import ActionInFlightError, FormValidationError, RemoteCallError
from ..forms.engine import ConfigFormSession, FormMode
from ..instruments.display import InstrumentDisplay, describe_instrument
from ..instruments.view import InstrumentViewState
from ..logging.config import get_action_logger, log_provider_action
from .notices import ErrorBanners, NoticeBoard
from .pending import InFlightActions

logger = structlog.get_logger(__name__)
action_logger = get_action_logger(__name__)


class ProviderAdminFacade(Protocol):
    """Remote operations the console depends on."""

    def list_providers(self) -> Sequence[ProviderSummary]: ...

    def get_provider(self, name: str) -> ProviderDetail: ...

    def list_adapters(self) -> Sequence[AdapterMetadata]: ...

    def create_provider(self, request: ProviderRequest) -> None: ...

    def update_provider(self, name: str, request: ProviderRequest) -> None: ...

    def start_provider(self, name: str) -> None: ...

    def stop_provider(self, name: str) -> None: ...

    def delete_provider(self, name: str) -> None: ...


def _message(error: Exception, fallback: str) -> str:
    text = str(error).strip()
    return text or fallback


class ProvidersConsole:
    """Headless controller for the providers screen."""

    def __init__(
        self,
        facade: ProviderAdminFacade,
        config: Optional[ConsoleConfig] = None,
        confirm: Optional[Callable[[str], bool]] = None
    ) -> None:
        self.facade = facade
        self.config = config or get_default_config()
        self.confirm = confirm
        self.logger = logger

        self.providers: list[ProviderSummary] = []
        self.adapters: list[AdapterMetadata] = []
        self.loading = False

        self.banners = ErrorBanners()
        self.notices = NoticeBoard(self.config.notices.dismiss_after_seconds)
        self.pending = InFlightActions()

        self.form: Optional[ConfigFormSession] = None
        self.submitting = False

        self.detail: Optional[ProviderDetail] = None
        self.detail_open = False
        self.detail_loading = False
        self.instrument_view = InstrumentViewState.empty(self.config.instruments.page_size)
        self._detail_token = 0

    # Provider list

    def load(self) -> bool:
        """Initial load of providers and adapters."""
        self.loading = True
        self.banners.load_error = None
        try:
            providers = list(self.facade.list_providers())
            adapters = list(self.facade.list_adapters())
        except RemoteCallError as e:
            self.banners.load_error = _message(e, "Failed to load providers")
            self.logger.error("Initial load failed", error=self.banners.load_error)
            return False
        finally:
            self.loading = False

        self.providers = providers
        self.adapters = adapters
        self.logger.info("Console loaded", providers=len(providers), adapters=len(adapters))
        return True

    def refresh_providers(self) -> bool:
        try:
            self.providers = list(self.facade.list_providers())
        except RemoteCallError as e:
            self.banners.action_error = _message(e, "Failed to refresh providers")
            self.logger.warning("Provider refresh failed", error=self.banners.action_error)
            return False
        return True

    def adapter_for(self, identifier: str) -> Optional[AdapterMetadata]:
        for adapter in self.adapters:
            if adapter.identifier == identifier:
                return adapter
        return None

    def adapter_label(self, provider: ProviderSummary) -> str:
        """Card subtitle: adapter display label, or the bare identifier if unknown."""
        adapter = self.adapter_for(provider.adapter)
        return adapter.label if adapter else provider.adapter

    # Notices

    @property
    def notice(self) -> Optional[str]:
        return self.notices.notice

    def dismiss_notice(self) -> None:
        self.notices.dismiss()

    def dismiss_action_error(self) -> None:
        self.banners.action_error = None

    # Create / edit form

    def open_create_form(self) -> ConfigFormSession:
        self.form = ConfigFormSession(self.adapters, FormMode.CREATE)
        self.banners.form_error = None
        return self.form

    def open_edit_form(self, name: str) -> ConfigFormSession:
        """Open the edit dialog and populate it from the provider's current settings."""
        form = ConfigFormSession(self.adapters, FormMode.EDIT)
        form.loading = True
        self.form = form
        self.banners.form_error = None
        try:
            detail = self.facade.get_provider(name)
        except RemoteCallError as e:
            form.error = _message(e, "Failed to load provider")
            self.banners.form_error = form.error
            self.logger.warning("Loading provider for edit failed", provider=name,
                                error=form.error)
        else:
            if self.form is form:
                form.load_detail(detail)
        finally:
            form.loading = False
        return form

    def close_form(self) -> None:
        if self.form is not None:
            self.form.reset()
        self.form = None
        self.banners.form_error = None

    def submit_form(self) -> bool:
        """
        Validate and save the open form.

        Validation failures block the submission without any remote call.
        A failed save leaves the form open with the operator's edits intact.

        Returns:
            True when the provider was saved and the form closed
        """
        form = self.form
        if form is None or form.loading or self.submitting:
            return False

        self.banners.form_error = None
        self.notices.dismiss()

        try:
            request = form.build_request()
        except FormValidationError:
            self.banners.form_error = form.error
            return False

        action = "create" if form.mode == FormMode.CREATE else "update"
        self.submitting = True
        try:
            with self.pending.track(request.name, action):
                if form.mode == FormMode.CREATE:
                    self.facade.create_provider(request)
                else:
                    self.facade.update_provider(request.name, request)
        except ActionInFlightError as e:
            form.error = str(e)
            self.banners.form_error = form.error
            log_provider_action(action_logger, request.name, action, "rejected", reason=str(e))
            return False
        except RemoteCallError as e:
            form.error = _message(e, "Failed to save provider")
            self.banners.form_error = form.error
            log_provider_action(action_logger, request.name, action, "failed", reason=form.error)
            return False
        finally:
            self.submitting = False

        log_provider_action(action_logger, request.name, action, "success",
                            context={"adapter": request.adapter_identifier,
                                     "fields": sorted(request.config)})
        self.refresh_providers()
        verb = "created" if action == "create" else "updated"
        self.notices.post(f"Provider {request.name} {verb} successfully")
        self.close_form()
        return True

    # Lifecycle actions

    def start_provider(self, name: str) -> bool:
        return self._run_action(name, "start", self.facade.start_provider,
                                f"Provider {name} started", f"Failed to start {name}")

    def stop_provider(self, name: str) -> bool:
        return self._run_action(name, "stop", self.facade.stop_provider,
                                f"Provider {name} stopped", f"Failed to stop {name}")

    def delete_provider(self, name: str) -> bool:
        if self.confirm is not None and not self.confirm(f"Delete provider {name}?"):
            self.logger.info("Delete cancelled by operator", provider=name)
            return False
        return self._run_action(name, "delete", self.facade.delete_provider,
                                f"Provider {name} deleted", f"Failed to delete {name}")

    def is_pending(self, name: str) -> bool:
        return self.pending.is_pending(name)

    def _run_action(
        self,
        name: str,
        action: str,
        call: Callable[[str], None],
        notice: str,
        fallback: str
    ) -> bool:
        try:
            self.pending.begin(name, action)
        except ActionInFlightError as e:
            self.banners.action_error = str(e)
            log_provider_action(action_logger, name, action, "rejected", reason=str(e))
            return False

        self.banners.action_error = None
        self.notices.dismiss()
        try:
            call(name)
        except RemoteCallError as e:
            self.banners.action_error = _message(e, fallback)
            log_provider_action(action_logger, name, action, "failed",
                                reason=self.banners.action_error)
            return False
        finally:
            self.pending.finish(name)

        log_provider_action(action_logger, name, action, "success")
        self.refresh_providers()
        self.notices.post(notice)
        return True

    # Detail view

    def begin_detail(self, name: str) -> int:
        """Open the detail view for a provider and return its freshness token."""
        self._detail_token += 1
        self.detail_open = True
        self.detail_loading = True
        self.banners.detail_error = None
        self.detail = None
        self.instrument_view = self.instrument_view.cleared()
        self.logger.debug("Detail requested", provider=name, token=self._detail_token)
        return self._detail_token

    def apply_detail(self, token: int, detail: ProviderDetail) -> bool:
        """Install a fetched detail unless the view has moved on since it was requested."""
        if token != self._detail_token:
            self.logger.debug("Discarding stale provider detail", provider=detail.name,
                              token=token, current=self._detail_token)
            return False
        self.detail = detail
        self.detail_loading = False
        self.instrument_view = InstrumentViewState.for_instruments(
            detail.instruments, self.config.instruments.page_size
        )
        return True

    def apply_detail_error(self, token: int, error: RemoteCallError) -> bool:
        if token != self._detail_token:
            self.logger.debug("Discarding stale detail error", token=token,
                              current=self._detail_token, error=str(error))
            return False
        self.detail_loading = False
        self.banners.detail_error = _message(error, "Failed to load provider details")
        return True

    def open_detail(self, name: str) -> bool:
        token = self.begin_detail(name)
        try:
            detail = self.facade.get_provider(name)
        except RemoteCallError as e:
            self.apply_detail_error(token, e)
            return False
        return self.apply_detail(token, detail)

    def close_detail(self) -> None:
        """Close the detail view; any outstanding response becomes stale."""
        self._detail_token += 1
        self.detail_open = False
        self.detail_loading = False
        self.detail = None
        self.banners.detail_error = None
        self.instrument_view = self.instrument_view.cleared()

    # Instrument browser

    @property
    def selected_instrument(self) -> Optional[Instrument]:
        return self.instrument_view.selected

    @property
    def selected_instrument_display(self) -> Optional[InstrumentDisplay]:
        selected = self.instrument_view.selected
        return describe_instrument(selected) if selected else None

    def set_instrument_query(self, query: str) -> InstrumentViewState:
        self.instrument_view = self.instrument_view.with_query(query)
        return self.instrument_view

    def set_instrument_page(self, page: int) -> InstrumentViewState:
        self.instrument_view = self.instrument_view.with_page(page)
        return self.instrument_view

    def next_instrument_page(self) -> InstrumentViewState:
        self.instrument_view = self.instrument_view.next_page()
        return self.instrument_view

    def previous_instrument_page(self) -> InstrumentViewState:
        self.instrument_view = self.instrument_view.previous_page()
        return self.instrument_view

    def select_instrument(self, symbol: str) -> InstrumentViewState:
        self.instrument_view = self.instrument_view.select(symbol)
        return self.instrument_view

    def close(self) -> None:
        """Release timers held by the console."""
        self.notices.close()
