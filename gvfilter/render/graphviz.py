"""
Graphviz 渲染器

处理网页中的 DOT 脚本，替换为生成的图片。<graphviz>...</graphviz>
标签标出页面中包含 DOT 脚本的区域，选项通过标签属性传入：

    <graphviz path="images" type="gif" cmd="dot">
    digraph graph_1 {
      graph [URL="default.html"]
      a [URL="a.html"]
      b [URL="b.html"]
      a -> b
    }
    </graphviz>

如果 DOT 脚本中包含 URL= 或 href=，会同时生成 image map，
图片在页面中可以点击；否则只插入普通的 <img /> 标签。
"""

from __future__ import annotations

import html
import logging
import posixpath
import re
import shlex
from pathlib import Path
from typing import Iterable, Mapping

from bs4 import BeautifulSoup

from ..errors import MalformedGraphSource, RenderFailed, RendererNotFound
from ..models import Fragment, RenderRequest, RenderResult
from .guards import FILTER_GUARDS, apply_guards
from .process import ProcessInvoker


logger = logging.getLogger(__name__)

DEFAULT_TAG = "graphviz"

# [strict] [di]graph <name> {
GRAPH_NAME_RE = re.compile(r"\A\s*(?:strict\s+)?(?:di)?graph\s+([A-Za-z_][A-Za-z0-9_]*)\s+\{")

# 纯文本匹配，不区分是否位于引号或注释中
IMAGE_MAP_TOKENS = ("URL=", "href=")


def extract_graph_name(source: str) -> str:
    """
    从 DOT 脚本中取出 graph/digraph 的名称

    Raises:
        MalformedGraphSource: 脚本开头不是 `[strict] [di]graph <name> {`
    """
    match = GRAPH_NAME_RE.match(source)
    if match is None:
        raise MalformedGraphSource(
            f"无法从 DOT 脚本中解析图名称: {source[:60]!r}",
            diagnostics=source,
        )
    return match.group(1)


def needs_image_map(source: str) -> bool:
    """DOT 脚本中出现 URL= 或 href= 时需要生成 image map"""
    return any(token in source for token in IMAGE_MAP_TOKENS)


def image_filename(name: str, image_type: str, path: str | None = None) -> str:
    """生成文档中引用的图片路径：[path/]name.type"""
    stem = name if path is None else posixpath.join(path, name)
    return f"{stem}.{image_type}"


def build_img_tag(
    filename: str,
    attributes: Mapping[str, str],
    usemap: str | None = None,
) -> str:
    """组装自闭合的 <img /> 标签"""
    parts = [f'<img src="{_quote(filename)}"']
    for name, value in attributes.items():
        parts.append(f'{name}="{_quote(value)}"')
    if usemap is not None:
        parts.append(f'usemap="{_quote(usemap)}"')
    parts.append("/>")
    return " ".join(parts)


def _quote(value: str) -> str:
    return html.escape(value, quote=False).replace("\"", "&quot;")


def _line_offsets(text: str) -> list[int]:
    # html.parser 的 sourceline 从 1 开始，按 "\n" 计行
    offsets = [0]
    for line in text.split("\n")[:-1]:
        offsets.append(offsets[-1] + len(line) + 1)
    return offsets


class GraphvizTranspiler:
    """
    Graphviz 过滤器

    解析 HTML，逐个渲染 <graphviz> 片段，并用生成的 <img /> 与 <map> 替换。
    任何片段失败都会中止整个文档的处理。
    """

    def __init__(
        self,
        output_dir: str | Path,
        invoker: ProcessInvoker | None = None,
        tag: str = DEFAULT_TAG,
        log: logging.Logger | None = None,
        guards: Mapping[str, tuple[str, str]] | None = None,
    ):
        """
        初始化过滤器

        Args:
            output_dir: 站点输出根目录，图片路径相对于此目录写入
            invoker: 渲染进程调用器
            tag: 片段标签名
            log: 接收渲染错误的 logger
            guards: 过滤器保护标记，默认使用全局注册表
        """
        self.output_dir = Path(output_dir)
        self.invoker = invoker or ProcessInvoker()
        self.tag = tag.lower()
        self.log = log or logger
        self.guards = guards if guards is not None else FILTER_GUARDS
        self._end_tag_re = re.compile(rf"</{re.escape(self.tag)}\s*>", re.IGNORECASE)

    def transpile(self, text: str, filters: Iterable[str] | None = None) -> str:
        """
        处理 HTML 文本，将所有片段替换为渲染结果

        Args:
            text: 原始 HTML
            filters: 后续会处理输出的过滤器名称，用于决定是否加保护标记

        Returns:
            处理后的 HTML
        """
        filters = list(filters) if filters is not None else []
        soup = BeautifulSoup(text, "html.parser")
        line_offsets = _line_offsets(text)

        # 先渲染全部片段，全部成功后再按源码位置拼接，片段以外的文本保持原样
        replacements: list[tuple[int, int, str]] = []
        for tag in soup.find_all(self.tag):
            if tag.find_parent(self.tag) is not None:
                continue
            result = self.render(Fragment.from_tag(tag))
            start, end = self._source_span(text, line_offsets, tag)
            replacements.append((start, end, apply_guards(result.markup, filters, self.guards)))

        parts: list[str] = []
        position = 0
        for start, end, markup in replacements:
            parts.append(text[position:start])
            parts.append(markup)
            position = end
        parts.append(text[position:])
        return "".join(parts)

    def _source_span(self, text: str, line_offsets: list[int], tag) -> tuple[int, int]:
        """片段标签在原文中的 [起始, 结束) 偏移；缺少结束标签时延伸到文末"""
        start = line_offsets[tag.sourceline - 1] + tag.sourcepos
        match = self._end_tag_re.search(text, start)
        return start, match.end() if match else len(text)

    def transpile_to_file(
        self,
        text: str,
        output_path: str | Path,
        filters: Iterable[str] | None = None,
    ) -> Path:
        """
        处理 HTML 并保存到文件

        Returns:
            输出文件路径
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        content = self.transpile(text, filters)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)

        return output_path

    def build_request(self, fragment: Fragment) -> RenderRequest:
        """根据片段计算图名称、图片路径以及是否需要 image map"""
        name = extract_graph_name(fragment.source)
        filename = image_filename(name, fragment.type, fragment.path)
        return RenderRequest(
            name=name,
            image_filename=filename,
            # 以 / 开头的 path 仍写入输出根目录之下
            output_file=self.output_dir / filename.lstrip("/"),
            needs_map=needs_image_map(fragment.source),
        )

    def render(self, fragment: Fragment) -> RenderResult:
        """
        渲染单个片段

        Args:
            fragment: 片段

        Returns:
            渲染结果（<img /> 标签以及可选的 <map>）
        """
        try:
            command = shlex.split(fragment.cmd)
        except ValueError as e:
            raise RendererNotFound(f"无效的命令: {fragment.cmd!r}") from e
        if not command or self.invoker.probe(command) != 0:
            raise RendererNotFound(f"'{fragment.cmd}' not found on the path", command=command)

        try:
            request = self.build_request(fragment)
        except MalformedGraphSource as e:
            e.command = command
            raise

        img_tag = build_img_tag(
            request.image_filename,
            fragment.attributes,
            usemap=request.name if request.needs_map else None,
        )

        map_markup = None
        if request.needs_map:
            map_command = [*command, "-Tcmapx"]
            map_markup, diagnostics = self.invoker.run_capturing_stdout(map_command, fragment.source)
            self._error_check(request.name, map_command, diagnostics)

        request.output_file.parent.mkdir(parents=True, exist_ok=True)
        image_command = [*command, f"-T{fragment.type}", "-o", str(request.output_file.resolve())]
        diagnostics = self.invoker.run_writing_file(image_command, fragment.source)
        self._error_check(request.name, image_command, diagnostics)

        return RenderResult(request=request, img_tag=img_tag, map_markup=map_markup)

    def _error_check(self, name: str, command: list[str], diagnostics: str) -> None:
        """诊断输出非空即视为失败，与退出状态无关"""
        if not diagnostics:
            return
        message = diagnostics.strip()
        self.log.error(message)
        raise RenderFailed(
            f"Graphviz 渲染 '{name}' 失败: {message}",
            fragment=name,
            command=command,
            diagnostics=message,
        )
