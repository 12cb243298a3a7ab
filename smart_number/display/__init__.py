"""Display package."""

from smart_number.display.number_display import (
    NumberDisplay,
    NumberDisplayModel,
    TooltipInfo,
)

__all__ = [
    "NumberDisplay",
    "NumberDisplayModel",
    "TooltipInfo",
]
