"""
过滤器步骤实现
"""

from __future__ import annotations

from typing import Callable

from ..models import FilterStep
from ..render import GraphvizTranspiler


class GraphvizStep(FilterStep):
    """
    Graphviz 过滤器步骤

    将后续过滤器的名称作为活动过滤器传给渲染器，
    以便在 textile 等过滤器之前为生成的 HTML 加上保护标记。
    """

    def __init__(self, transpiler: GraphvizTranspiler):
        self.transpiler = transpiler

    @property
    def name(self) -> str:
        return "graphviz"

    @property
    def description(self) -> str:
        return "渲染 Graphviz 图片"

    def apply(self, text: str, remaining: list[str]) -> str:
        return self.transpiler.transpile(text, remaining)


class CallableStep(FilterStep):
    """用普通函数实现的过滤器；func 为 None 时原样返回文本"""

    def __init__(self, name: str, func: Callable[[str], str] | None = None):
        self._name = name
        self.func = func

    @property
    def name(self) -> str:
        return self._name

    def apply(self, text: str, remaining: list[str]) -> str:
        if self.func is None:
            return text
        return self.func(text)
