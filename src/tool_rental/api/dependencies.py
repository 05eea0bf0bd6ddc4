"""Request-scoped accessors for objects installed on app.state."""

from fastapi import Request

from ..catalog import ToolCatalog
from ..engine import CheckoutEngine


def get_catalog(request: Request) -> ToolCatalog:
    return request.app.state.catalog


def get_engine(request: Request) -> CheckoutEngine:
    return request.app.state.engine
