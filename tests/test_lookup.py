"""Tests for enum translation, defaults and monitoring lookups."""

from __future__ import annotations

import pytest

from pythinq import DeviceModel

VALUE_BACKED: dict = {
    "Value": {
        "State": {"type": "Enum", "option": {"0": "OFF", "1": "ON", "2": "PAUSE"}, "default": "0"},
        "Temp": {"type": "Range", "option": {"min": 0, "max": 10}},
        "Broken": {"type": "foo"},
        "Duplicate": {"type": "enum", "option": {"0": "OFF", "1": "OFF", "2": "ON"}},
    },
    "MonitoringValue": {
        "LegacyOnly": {"dataType": "enum", "valueMapping": {"7": {"index": "7", "label": "LEGACY"}}},
    },
}

LEGACY: dict = {
    "MonitoringValue": {
        "State": {
            "dataType": "enum",
            "valueMapping": {
                "0": {"index": "0", "label": "OFF"},
                "1": {"index": "1", "label": "ON"},
                "2": {"index": "2", "label": "PAUSE"},
            },
        },
        "Unmapped": {"dataType": "range"},
    },
}


@pytest.fixture
def modern() -> DeviceModel:
    return DeviceModel(VALUE_BACKED)


@pytest.fixture
def legacy() -> DeviceModel:
    return DeviceModel(LEGACY)


# ------------------------------------------------------------------
# default / enum_value / enum_name
# ------------------------------------------------------------------


class TestDefault:
    def test_default_present(self, modern: DeviceModel) -> None:
        assert modern.default("State") == "0"

    def test_default_absent(self, modern: DeviceModel) -> None:
        assert modern.default("Temp") is None
        assert modern.default("Missing") is None

    def test_default_without_value_section(self, legacy: DeviceModel) -> None:
        assert legacy.default("State") is None


class TestEnumTranslation:
    def test_enum_name(self, modern: DeviceModel) -> None:
        assert modern.enum_name("State", "1") == "ON"
        assert modern.enum_name("State", 2) == "PAUSE"
        assert modern.enum_name("State", "9") is None

    def test_enum_value(self, modern: DeviceModel) -> None:
        assert modern.enum_value("State", "PAUSE") == "2"
        assert modern.enum_value("State", "NOPE") is None

    def test_enum_value_duplicate_label_keeps_last_code(self, modern: DeviceModel) -> None:
        assert modern.enum_value("Duplicate", "OFF") == "1"

    @pytest.mark.parametrize("code", ["0", "1", "2"])
    def test_round_trip(self, modern: DeviceModel, code: str) -> None:
        assert modern.enum_value("State", modern.enum_name("State", code)) == code

    def test_non_enum_key(self, modern: DeviceModel) -> None:
        assert modern.enum_name("Temp", "1") is None
        assert modern.enum_value("Temp", "ON") is None

    def test_unsupported_type_does_not_raise(self, modern: DeviceModel) -> None:
        assert modern.enum_name("Broken", "1") is None
        assert modern.enum_value("Broken", "ON") is None

    def test_unhashable_label(self, modern: DeviceModel) -> None:
        assert modern.enum_value("State", ["OFF"]) is None


# ------------------------------------------------------------------
# Monitoring lookups
# ------------------------------------------------------------------


class TestMonitoringValueMapping:
    def test_value_backed(self, modern: DeviceModel) -> None:
        assert modern.monitoring_value_mapping("State") == {"0": "OFF", "1": "ON", "2": "PAUSE"}

    def test_falls_back_to_legacy_section(self, modern: DeviceModel) -> None:
        assert modern.monitoring_value_mapping("LegacyOnly") == {"7": {"index": "7", "label": "LEGACY"}}

    def test_legacy(self, legacy: DeviceModel) -> None:
        mapping = legacy.monitoring_value_mapping("State")
        assert mapping is not None
        assert mapping["1"] == {"index": "1", "label": "ON"}

    def test_missing(self, modern: DeviceModel, legacy: DeviceModel) -> None:
        assert modern.monitoring_value_mapping("Temp") is None
        assert modern.monitoring_value_mapping("Broken") is None
        assert legacy.monitoring_value_mapping("Missing") is None
        assert legacy.monitoring_value_mapping("Unmapped") is None

    def test_returned_mapping_is_a_copy(self, modern: DeviceModel, legacy: DeviceModel) -> None:
        legacy.monitoring_value_mapping("State")["1"]["label"] = "CHANGED"
        modern.monitoring_value_mapping("State")["1"] = "CHANGED"
        legacy.monitoring_value["State"]["dataType"] = "CHANGED"
        assert legacy.lookup_monitor_value("State", "1") == "ON"
        assert modern.lookup_monitor_value("State", "1") == "ON"
        assert LEGACY["MonitoringValue"]["State"]["dataType"] == "enum"

    def test_monitoring_value_property(self, modern: DeviceModel, legacy: DeviceModel) -> None:
        assert set(legacy.monitoring_value) == {"State", "Unmapped"}
        assert DeviceModel({}).monitoring_value == {}


class TestLookupMonitor:
    @pytest.mark.parametrize(("code", "label"), [("0", "OFF"), ("1", "ON"), ("2", "PAUSE")])
    def test_both_representations_agree(
        self,
        modern: DeviceModel,
        legacy: DeviceModel,
        code: str,
        label: str,
    ) -> None:
        assert modern.lookup_monitor_value("State", code) == legacy.lookup_monitor_value("State", code) == label
        assert modern.lookup_monitor_name("State", label) == legacy.lookup_monitor_name("State", label) == code

    def test_value_default(self, modern: DeviceModel, legacy: DeviceModel) -> None:
        assert modern.lookup_monitor_value("State", "9", "UNKNOWN") == "UNKNOWN"
        assert legacy.lookup_monitor_value("State", "9", "UNKNOWN") == "UNKNOWN"
        assert legacy.lookup_monitor_value("Missing", "0", "UNKNOWN") == "UNKNOWN"
        assert legacy.lookup_monitor_value("Unmapped", "0") is None

    def test_value_backed_ignores_legacy_section(self, modern: DeviceModel) -> None:
        assert modern.lookup_monitor_value("LegacyOnly", "7") is None
        assert modern.lookup_monitor_name("LegacyOnly", "LEGACY") is None

    def test_name_missing(self, modern: DeviceModel, legacy: DeviceModel) -> None:
        assert modern.lookup_monitor_name("State", "NOPE") is None
        assert legacy.lookup_monitor_name("State", "NOPE") is None
        assert legacy.lookup_monitor_name("Missing", "ON") is None

    def test_integer_code(self, legacy: DeviceModel) -> None:
        assert legacy.lookup_monitor_value("State", 1) == "ON"

    def test_lookup_through_thinq2_alias(self) -> None:
        model = DeviceModel(
            {
                "Monitoring": {"type": "THINQ2", "protocol": {"state": "State"}},
                "Value": {"State": {"type": "enum", "option": {"0": "OFF", "1": "ON"}}},
            }
        )
        assert model.lookup_monitor_value("state", "1") == "ON"
        assert model.lookup_monitor_name("state", "OFF") == "0"
