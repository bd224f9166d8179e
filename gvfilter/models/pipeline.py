"""
过滤器链相关数据模型
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class FilterStep(ABC):
    """文档过滤器抽象基类"""

    @property
    @abstractmethod
    def name(self) -> str:
        """过滤器名称"""
        pass

    @property
    def description(self) -> str:
        """过滤器描述（可选覆盖）"""
        return self.name

    @abstractmethod
    def apply(self, text: str, remaining: list[str]) -> str:
        """
        处理文本，返回处理结果

        Args:
            text: 输入文本
            remaining: 之后还会执行的过滤器名称

        Returns:
            处理后的文本
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.name}>"
