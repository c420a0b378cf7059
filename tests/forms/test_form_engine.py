"""Tests for the configuration form engine."""

import pytest

from provider_console.data.models import AdapterMetadata, SettingField
from provider_console.errors import FieldError, PreconditionError
from provider_console.forms.engine import (
    ConfigFormSession,
    FormMode,
    build_request,
    build_values,
    collect_payload,
    field_placeholder,
    value_to_string,
)


class TestValueToString:
    """Test stringification of existing values and defaults."""

    def test_none_is_empty(self):
        assert value_to_string(None) == ""

    def test_objects_use_compact_json(self):
        assert value_to_string({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'
        assert value_to_string(["BTCUSDT", "ETHUSDT"]) == '["BTCUSDT","ETHUSDT"]'

    def test_scalars(self):
        assert value_to_string(20) == "20"
        assert value_to_string(1.5) == "1.5"
        assert value_to_string("abc") == "abc"
        assert value_to_string(True) == "true"
        assert value_to_string(False) == "false"

    def test_integral_floats_render_as_integers(self):
        assert value_to_string(50.0) == "50"
        assert value_to_string(-3.0) == "-3"
        assert value_to_string(2.5) == "2.5"

    def test_integral_float_setting_resubmits_as_integer(self, binance_adapter):
        values = build_values(binance_adapter, {"apiKey": "k", "depthLevels": 50.0})

        assert collect_payload(binance_adapter, values)["depthLevels"] == 50

    def test_placeholder_names_default(self):
        assert field_placeholder(SettingField(name="x", default=20)) == "Default: 20"
        assert field_placeholder(SettingField(name="x")) is None


class TestBuildValues:
    """Test construction of the editable value map."""

    def test_defaults_and_blanks_in_schema_order(self, binance_adapter):
        values = build_values(binance_adapter)

        assert list(values) == ["apiKey", "depthLevels", "snapshotInterval", "testnet", "symbols"]
        assert values == {
            "apiKey": "",
            "depthLevels": "20",
            "snapshotInterval": "1.5",
            "testnet": "false",
            "symbols": '["BTCUSDT","ETHUSDT"]',
        }

    def test_existing_values_take_precedence(self, binance_adapter):
        values = build_values(binance_adapter, {"apiKey": "k", "depthLevels": 50, "testnet": None})

        assert values["apiKey"] == "k"
        assert values["depthLevels"] == "50"
        # Present but null in existing settings wins over the default
        assert values["testnet"] == ""
        assert values["snapshotInterval"] == "1.5"

    def test_existing_keys_outside_schema_are_ignored(self, okx_adapter):
        values = build_values(okx_adapter, {"passphrase": "p", "apiKey": "from-binance"})

        assert values == {"passphrase": "p", "instType": "SWAP"}

    def test_no_metadata_gives_empty_map(self):
        assert build_values(None) == {}

    def test_switching_adapters_never_carries_values(self, binance_adapter, okx_adapter):
        session = ConfigFormSession([binance_adapter, okx_adapter])
        session.select_adapter("binance-spot")
        session.set_value("apiKey", "secret")
        session.set_value("depthLevels", "99")

        session.select_adapter("okx-swap")

        assert session.state.values == {"passphrase": "", "instType": "SWAP"}

        session.select_adapter("binance-spot")
        assert session.state.values["apiKey"] == ""
        assert session.state.values["depthLevels"] == "20"


class TestCollectPayload:
    """Test coercion and validation of edited values."""

    def test_typed_payload(self, binance_adapter):
        values = {
            "apiKey": "k",
            "depthLevels": " 25 ",
            "snapshotInterval": "0.5",
            "testnet": "yes",
            "symbols": "BTCUSDT",
        }

        payload = collect_payload(binance_adapter, values)

        assert payload == {
            "apiKey": "k",
            "depthLevels": 25,
            "snapshotInterval": 0.5,
            "testnet": True,
            "symbols": "BTCUSDT",
        }

    def test_blank_optional_fields_are_omitted(self, binance_adapter):
        values = {"apiKey": "k", "depthLevels": "5", "snapshotInterval": "  ", "testnet": ""}

        payload = collect_payload(binance_adapter, values)

        assert payload == {"apiKey": "k", "depthLevels": 5}
        assert "snapshotInterval" not in payload
        assert "symbols" not in payload

    @pytest.mark.parametrize("b_value", ["", "valid", "not-a-number"])
    def test_first_required_blank_wins(self, b_value):
        metadata = AdapterMetadata(
            identifier="x",
            display_name="X",
            settings_schema=(
                SettingField(name="a", type="string", required=True),
                SettingField(name="b", type="int", required=False),
            ),
        )

        with pytest.raises(FieldError) as exc_info:
            collect_payload(metadata, {"a": "  ", "b": b_value})

        assert str(exc_info.value) == "a is required"
        assert exc_info.value.field_name == "a"

    def test_coercion_error_propagates_verbatim(self, binance_adapter):
        values = {"apiKey": "k", "depthLevels": "1.5"}

        with pytest.raises(FieldError, match="^depthLevels must be an integer$"):
            collect_payload(binance_adapter, values)

    def test_keys_outside_schema_never_reach_payload(self, okx_adapter):
        payload = collect_payload(okx_adapter, {"passphrase": "p", "rogue": "1"})

        assert payload == {"passphrase": "p"}


class TestBuildRequest:
    """Test submission preconditions and request shape."""

    def test_name_checked_first(self, binance_adapter):
        with pytest.raises(PreconditionError, match="^Provider name is required$"):
            build_request("   ", None, {})

    def test_adapter_checked_second(self):
        with pytest.raises(PreconditionError, match="^Adapter selection is required$"):
            build_request("main", None, {})

    def test_preconditions_before_fields(self, binance_adapter):
        with pytest.raises(PreconditionError):
            build_request("", binance_adapter, {})

    def test_request_payload_shape(self, binance_adapter):
        request = build_request(" main ", binance_adapter,
                                {"apiKey": "k", "depthLevels": "3"}, enabled=False)

        assert request.to_payload() == {
            "name": "main",
            "adapter": {"identifier": "binance-spot", "config": {"apiKey": "k", "depthLevels": 3}},
            "enabled": False,
        }


class TestConfigFormSession:
    """Test the open dialog state."""

    def test_validation_error_kept_for_display(self, binance_adapter):
        session = ConfigFormSession([binance_adapter])
        session.set_name("main")
        session.select_adapter("binance-spot")

        with pytest.raises(FieldError):
            session.build_request()

        assert session.error == "apiKey is required"
        # Edits are left as entered
        assert session.state.values["depthLevels"] == "20"

    def test_unknown_adapter_is_not_selected(self, binance_adapter):
        session = ConfigFormSession([binance_adapter])
        session.set_name("main")
        session.select_adapter("missing")

        assert session.state.values == {}
        with pytest.raises(PreconditionError):
            session.build_request()
        assert session.error == "Adapter selection is required"

    def test_error_cleared_on_next_submit(self, binance_adapter):
        session = ConfigFormSession([binance_adapter])
        with pytest.raises(PreconditionError):
            session.build_request()

        session.set_name("main")
        session.select_adapter("binance-spot")
        session.set_value("apiKey", "k")
        request = session.build_request()

        assert session.error is None
        assert request.config["depthLevels"] == 20

    def test_load_detail_for_edit(self, provider_detail):
        session = ConfigFormSession([], FormMode.EDIT)
        session.load_detail(provider_detail)

        assert session.state.name == "binance-main"
        assert session.state.adapter_identifier == "binance-spot"
        assert session.state.enabled is True
        assert session.state.values["depthLevels"] == "50"
        assert session.state.values["testnet"] == "true"
        assert session.selected_adapter is provider_detail.adapter
        assert session.title == "Edit provider binance-main"

    def test_name_fixed_while_editing(self, provider_detail):
        session = ConfigFormSession([], FormMode.EDIT)
        session.load_detail(provider_detail)
        session.set_name("renamed")

        assert session.state.name == "binance-main"

    def test_reset(self, binance_adapter):
        session = ConfigFormSession([binance_adapter])
        session.set_name("main")
        session.select_adapter("binance-spot")
        session.set_enabled(False)
        session.reset()

        assert session.state.name == ""
        assert session.state.adapter_identifier == ""
        assert session.state.values == {}
        assert session.state.enabled is True
        assert session.error is None
