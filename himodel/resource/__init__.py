"""Resource containers.

This module provides:
    - DynamicResource: A resource backed by an untyped mapping
"""

from __future__ import annotations

from himodel.resource.dynamic import RESOURCE_TYPE_KEY, DynamicResource

__all__: list[str] = [
    "DynamicResource",
    "RESOURCE_TYPE_KEY",
]
