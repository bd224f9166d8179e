"""
过滤器链执行器
"""

from __future__ import annotations

from rich.console import Console

from ..models import FilterStep


console = Console(stderr=True)


class FilterChain:
    """
    过滤器链

    按顺序执行多个 FilterStep，每个步骤都能看到之后还有哪些过滤器。
    任一步骤失败时整个文档的处理中止。
    """

    def __init__(self, steps: list[FilterStep] | None = None):
        self.steps: list[FilterStep] = steps or []

    def add_step(self, step: FilterStep) -> "FilterChain":
        """添加步骤"""
        self.steps.append(step)
        return self

    @property
    def names(self) -> list[str]:
        return [step.name for step in self.steps]

    def run(self, text: str) -> str:
        """
        依次执行全部过滤器

        Args:
            text: 输入文本

        Returns:
            处理后的文本
        """
        for i, step in enumerate(self.steps):
            remaining = self.names[i + 1:]
            try:
                text = step.apply(text, remaining)
            except Exception as e:
                console.print(f"[bold red]✗ 过滤器 {step.description} 执行失败: {e}[/bold red]")
                raise
        return text
