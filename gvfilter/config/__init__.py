"""
配置模块
"""

from .settings import FilterConfig, load_config

__all__ = [
    "FilterConfig",
    "load_config",
]
