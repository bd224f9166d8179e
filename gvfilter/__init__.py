"""
gvfilter: Graphviz HTML 过滤器
将网页中 <graphviz>...</graphviz> 标签内的 DOT 脚本渲染为图片和 image map
"""

__version__ = "0.1.0"

from .errors import (
    GraphvizFilterError,
    MalformedGraphSource,
    RenderFailed,
    RendererNotFound,
    RenderTimeout,
)
from .models import Fragment, RenderRequest, RenderResult, FilterStep
from .config import load_config, FilterConfig
from .render import GraphvizTranspiler, ProcessInvoker, register_guard
from .pipeline import FilterChain, GraphvizStep, CallableStep

__all__ = [
    # 版本
    "__version__",
    # 异常
    "GraphvizFilterError",
    "MalformedGraphSource",
    "RenderFailed",
    "RendererNotFound",
    "RenderTimeout",
    # 模型
    "Fragment",
    "RenderRequest",
    "RenderResult",
    "FilterStep",
    # 配置
    "load_config",
    "FilterConfig",
    # 渲染
    "GraphvizTranspiler",
    "ProcessInvoker",
    "register_guard",
    # 过滤器链
    "FilterChain",
    "GraphvizStep",
    "CallableStep",
]
