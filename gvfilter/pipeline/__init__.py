"""
过滤器链模块
"""

from .executor import FilterChain
from .steps import CallableStep, GraphvizStep

__all__ = [
    "FilterChain",
    "CallableStep",
    "GraphvizStep",
]
