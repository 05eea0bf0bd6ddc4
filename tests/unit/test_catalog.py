"""Tests for the tool catalog."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from tool_rental.catalog import DEFAULT_TOOLS, ToolCatalog, default_catalog


class TestDefaultCatalog:
    """The standard catalog holds the four rental tools."""

    def test_codes(self, catalog):
        assert [t.code for t in catalog.list_tools()] == ["LADW", "CHNS", "JAKD", "JAKR"]
        assert len(catalog) == 4

    @pytest.mark.parametrize("code,tool_type,brand,charge,weekday,weekend,holiday", [
        ("LADW", "Ladder", "Werner", "1.99", True, True, False),
        ("CHNS", "Chainsaw", "Stihl", "1.49", True, False, True),
        ("JAKD", "Jackhammer", "DeWalt", "2.99", True, False, False),
        ("JAKR", "Jackhammer", "Ridgid", "2.99", True, False, False),
    ])
    def test_tool_records(self, catalog, code, tool_type, brand, charge, weekday, weekend, holiday):
        tool = catalog.lookup(code)
        assert tool.type == tool_type
        assert tool.brand == brand
        assert tool.daily_charge == Decimal(charge)
        assert tool.weekday_charge is weekday
        assert tool.weekend_charge is weekend
        assert tool.holiday_charge is holiday

    def test_lookup_unknown_returns_none(self, catalog):
        assert catalog.lookup("NOPE") is None
        assert catalog.lookup("ladw") is None

    def test_contains(self, catalog):
        assert "LADW" in catalog
        assert "NOPE" not in catalog

    def test_each_call_builds_equal_catalog(self):
        assert default_catalog().list_tools() == list(DEFAULT_TOOLS)


class TestCustomCatalog:
    """Catalogs can be built from any set of tools."""

    def test_custom_tools(self, everyday_tool):
        catalog = ToolCatalog([everyday_tool])
        assert catalog.lookup("TEST") is everyday_tool
        assert catalog.lookup("LADW") is None

    def test_duplicate_code_rejected(self, everyday_tool):
        with pytest.raises(ValueError, match="Duplicate tool code"):
            ToolCatalog([everyday_tool, everyday_tool])

    def test_catalog_is_read_only(self, catalog):
        with pytest.raises(TypeError):
            catalog._tools["NEW"] = DEFAULT_TOOLS[0]

    def test_tool_is_frozen(self):
        tool = DEFAULT_TOOLS[0]
        with pytest.raises(FrozenInstanceError):
            tool.daily_charge = Decimal("0.01")

    def test_list_tools_returns_copy(self, catalog):
        tools = catalog.list_tools()
        tools.clear()
        assert len(catalog) == 4

    def test_empty_catalog(self):
        catalog = ToolCatalog([])
        assert len(catalog) == 0
        assert catalog.lookup("LADW") is None
