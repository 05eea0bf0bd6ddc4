"""Tool catalog endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..catalog import ToolCatalog
from ..models.tool import Tool
from .dependencies import get_catalog

router = APIRouter()


class ToolResponse(BaseModel):
    code: str
    type: str
    brand: str
    daily_charge: str
    weekday_charge: bool
    weekend_charge: bool
    holiday_charge: bool

    @classmethod
    def from_tool(cls, tool: Tool) -> "ToolResponse":
        return cls(
            code=tool.code,
            type=tool.type,
            brand=tool.brand,
            daily_charge=f"{tool.daily_charge:.2f}",
            weekday_charge=tool.weekday_charge,
            weekend_charge=tool.weekend_charge,
            holiday_charge=tool.holiday_charge,
        )


@router.get("/tools", response_model=List[ToolResponse])
async def list_tools(catalog: ToolCatalog = Depends(get_catalog)):
    """List all rentable tools."""
    return [ToolResponse.from_tool(tool) for tool in catalog.list_tools()]


@router.get("/tools/{code}", response_model=ToolResponse)
async def get_tool(code: str, catalog: ToolCatalog = Depends(get_catalog)):
    """Get a single tool by code."""
    tool = catalog.lookup(code)
    if tool is None:
        raise HTTPException(status_code=404, detail=f"Tool not found: {code}")
    return ToolResponse.from_tool(tool)
