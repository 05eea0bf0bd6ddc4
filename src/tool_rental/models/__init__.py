"""Domain models for Tool Rental."""

from .tool import Tool
from .agreement import RentalAgreement

__all__ = [
    "Tool",
    "RentalAgreement",
]
