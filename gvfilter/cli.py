"""
gvfilter CLI 命令行入口

提供两个命令：
- render: 渲染 HTML 文件中的 <graphviz> 片段
- check: 检查 Graphviz 命令是否可用
"""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from .config import load_config
from .errors import GraphvizFilterError
from .pipeline import CallableStep, FilterChain, GraphvizStep
from .render import GraphvizTranspiler, ProcessInvoker


app = typer.Typer(
    name="gvfilter",
    help="gvfilter - 将 HTML 中的 Graphviz DOT 脚本渲染为图片",
    add_completion=False,
)

console = Console(stderr=True)


@app.command("render")
def render(
    input_file: Path = typer.Argument(
        ...,
        help="输入的 HTML 文件路径",
        exists=True,
    ),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="输出 HTML 文件路径（默认输出到标准输出）",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir", "-d",
        help="图片输出根目录（覆盖配置）",
    ),
    filters: Optional[List[str]] = typer.Option(
        None,
        "--filter", "-f",
        help="之后会处理输出的过滤器名称，可重复，如 textile",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="单次渲染超时时间（秒）",
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env", "-e",
        help=".env 配置文件路径",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="YAML 配置文件路径",
        exists=True,
    ),
) -> None:
    """
    渲染 HTML 文件中的全部 <graphviz> 片段

    示例:
        gvfilter render page.html -o site/page.html -d site -f textile
    """
    config = load_config(env_file, config_file)
    if output_dir is not None:
        config.output_dir = output_dir
    if timeout is not None:
        config.timeout = timeout
    if filters:
        config.filters = list(filters)

    transpiler = GraphvizTranspiler(
        config.output_dir,
        invoker=ProcessInvoker(timeout=config.timeout),
        tag=config.tag,
    )
    chain = FilterChain([GraphvizStep(transpiler)])
    for name in config.filters:
        # 下游过滤器由外部实现，这里只占位以便生成保护标记
        chain.add_step(CallableStep(name))

    text = input_file.read_text(encoding="utf-8")

    try:
        result = chain.run(text)
    except GraphvizFilterError as e:
        console.print(f"\n[red]错误: {e}[/red]")
        if e.command:
            console.print(f"[dim]命令: {shlex.join(e.command)}[/dim]")
        raise typer.Exit(code=1)

    if output_file is None:
        typer.echo(result, nl=False)
        return

    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(result, encoding="utf-8")
    console.print(Panel(
        f"[bold green]✓ 渲染完成[/bold green]\n\n"
        f"HTML 文件: {output_file}\n"
        f"图片目录: {config.output_dir}",
        border_style="green",
    ))


@app.command("check")
def check(
    cmd: str = typer.Option(
        "dot",
        "--cmd",
        help="Graphviz 命令：dot, neato, twopi, circo, fdp",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="探测超时时间（秒）",
    ),
) -> None:
    """
    检查 Graphviz 命令是否可用
    """
    try:
        command = shlex.split(cmd)
    except ValueError as e:
        console.print(f"[red]错误: 无效的命令 {cmd!r}: {e}[/red]")
        raise typer.Exit(code=1)

    invoker = ProcessInvoker(timeout=timeout)
    try:
        status = invoker.probe(command)
    except GraphvizFilterError as e:
        console.print(f"[red]错误: {e}[/red]")
        raise typer.Exit(code=1)

    if status != 0:
        console.print(f"[red]✗ '{cmd}' not found on the path (退出状态 {status})[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]✓ '{cmd}' 可用[/green]")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="输出调试日志",
    ),
) -> None:
    """
    gvfilter - 将 HTML 中的 Graphviz DOT 脚本渲染为图片
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
