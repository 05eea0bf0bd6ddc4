"""Tool catalog: read-only mapping from tool code to tool record."""

import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, List, Optional

from .models.tool import Tool

logger = logging.getLogger(__name__)


DEFAULT_TOOLS = (
    Tool("LADW", "Ladder", "Werner", Decimal("1.99"), True, True, False),
    Tool("CHNS", "Chainsaw", "Stihl", Decimal("1.49"), True, False, True),
    Tool("JAKD", "Jackhammer", "DeWalt", Decimal("2.99"), True, False, False),
    Tool("JAKR", "Jackhammer", "Ridgid", Decimal("2.99"), True, False, False),
)


class ToolCatalog:
    """Immutable set of rentable tools keyed by code.

    Built once and never mutated afterwards, so a single instance can be
    shared by any number of callers.
    """

    def __init__(self, tools: Iterable[Tool]):
        by_code = {}
        for tool in tools:
            if tool.code in by_code:
                raise ValueError(f"Duplicate tool code in catalog: {tool.code}")
            by_code[tool.code] = tool
        self._tools = MappingProxyType(by_code)
        logger.debug("Tool catalog built with %d tools", len(by_code))

    def lookup(self, code: str) -> Optional[Tool]:
        """Get a tool by code, or None when the code is not in the catalog."""
        return self._tools.get(code)

    def list_tools(self) -> List[Tool]:
        """List tools in insertion order."""
        return list(self._tools.values())

    def __contains__(self, code: object) -> bool:
        return code in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def default_catalog() -> ToolCatalog:
    """Catalog of the standard rental tools."""
    return ToolCatalog(DEFAULT_TOOLS)
