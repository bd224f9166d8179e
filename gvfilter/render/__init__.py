"""
渲染模块

负责调用 Graphviz 渲染 DOT 片段并替换 HTML 中的标签
"""

from .graphviz import (
    GraphvizTranspiler,
    build_img_tag,
    extract_graph_name,
    image_filename,
    needs_image_map,
)
from .guards import apply_guards, register_guard, unregister_guard
from .process import ProcessInvoker

__all__ = [
    "GraphvizTranspiler",
    "ProcessInvoker",
    "build_img_tag",
    "extract_graph_name",
    "image_filename",
    "needs_image_map",
    "apply_guards",
    "register_guard",
    "unregister_guard",
]
