"""
数据模型定义：Fragment, RenderRequest, RenderResult
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


# 透传到 <img /> 标签的属性，顺序固定；第二项表示缺省时是否输出
PASSTHROUGH_ATTRIBUTES: tuple[tuple[str, bool], ...] = (
    ("class", False),
    ("style", False),
    ("id", False),
    ("alt", False),
)

DEFAULT_CMD = "dot"
DEFAULT_TYPE = "png"


class Fragment(BaseModel):
    """文档中的一个 <graphviz> 片段"""
    source: str = Field(..., description="DOT 脚本（已去除首尾空白）")
    path: str | None = Field(default=None, description="图片输出子目录")
    cmd: str = Field(default=DEFAULT_CMD, description="Graphviz 命令：dot, neato, twopi, circo, fdp")
    type: str = Field(default=DEFAULT_TYPE, description="图片格式：png, jpeg, gif")
    attributes: dict[str, str] = Field(default_factory=dict, description="透传到 <img /> 的属性")

    @classmethod
    def from_tag(cls, tag: Any) -> "Fragment":
        """
        从解析后的标签构造片段

        Args:
            tag: BeautifulSoup 标签对象

        Returns:
            Fragment 实例
        """
        attributes: dict[str, str] = {}
        for name, always in PASSTHROUGH_ATTRIBUTES:
            value = _attr(tag, name)
            if value is None and not always:
                continue
            attributes[name] = value or ""

        return cls(
            source=tag.decode_contents(formatter=None).strip(),
            path=_attr(tag, "path"),
            cmd=_attr(tag, "cmd") or DEFAULT_CMD,
            type=_attr(tag, "type") or DEFAULT_TYPE,
            attributes=attributes,
        )


def _attr(tag: Any, name: str) -> str | None:
    # class 是多值属性，会被解析成列表
    value = tag.get(name)
    if isinstance(value, list):
        return " ".join(value)
    return value


class RenderRequest(BaseModel):
    """单个片段的渲染请求"""
    name: str = Field(..., description="图名称")
    image_filename: str = Field(..., description="文档中引用的相对图片路径")
    output_file: Path = Field(..., description="渲染器实际写入的文件")
    needs_map: bool = Field(default=False, description="是否需要生成 image map")


class RenderResult(BaseModel):
    """替换原片段的 HTML"""
    request: RenderRequest
    img_tag: str
    map_markup: str | None = None

    @property
    def markup(self) -> str:
        if self.map_markup is None:
            return self.img_tag
        return self.img_tag + "\n" + self.map_markup
