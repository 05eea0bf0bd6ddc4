"""Main API routes for Tool Rental."""

from fastapi import APIRouter

from .checkout import router as checkout_router
from .tools import router as tools_router

# Main API router
router = APIRouter()

# Include sub-routers
router.include_router(tools_router, tags=["tools"])
router.include_router(checkout_router, tags=["checkout"])
