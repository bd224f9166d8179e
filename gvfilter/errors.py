"""
异常定义

所有失败都以类型化异常向上传递，携带图名称、命令行和诊断输出
"""

from __future__ import annotations


class GraphvizFilterError(Exception):
    """Graphviz 过滤器错误基类"""

    def __init__(
        self,
        message: str,
        fragment: str | None = None,
        command: list[str] | None = None,
        diagnostics: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.fragment = fragment
        self.command = command
        self.diagnostics = diagnostics

    def __str__(self) -> str:
        return self.message


class RendererNotFound(GraphvizFilterError):
    """渲染命令不可用（-V 探测返回非零状态）"""


class MalformedGraphSource(GraphvizFilterError):
    """无法从 DOT 脚本中解析出图名称"""


class RenderFailed(GraphvizFilterError):
    """渲染器在诊断流中输出了内容"""


class RenderTimeout(RenderFailed):
    """渲染器超时未结束"""
