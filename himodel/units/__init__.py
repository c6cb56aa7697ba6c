"""Units and enumerations.

This module provides:
    - Precision: Ordered temporal precision scale
    - DataType: Data-type tags reported by values
    - Timezone: Fixed UTC offset
"""

from __future__ import annotations

from himodel.units.datatype import DataType
from himodel.units.precision import Precision
from himodel.units.timezone import Timezone

__all__: list[str] = [
    "DataType",
    "Precision",
    "Timezone",
]
