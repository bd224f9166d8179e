"""
数据模型模块
"""

from .fragment import (
    DEFAULT_CMD,
    DEFAULT_TYPE,
    PASSTHROUGH_ATTRIBUTES,
    Fragment,
    RenderRequest,
    RenderResult,
)
from .pipeline import FilterStep

__all__ = [
    "DEFAULT_CMD",
    "DEFAULT_TYPE",
    "PASSTHROUGH_ATTRIBUTES",
    "Fragment",
    "RenderRequest",
    "RenderResult",
    "FilterStep",
]
