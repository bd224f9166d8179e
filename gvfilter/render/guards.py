"""
下游过滤器保护

某些轻量标记语言（如 textile）会重新解释生成的 HTML，
需要用该语言的"原样输出"标记包裹。
"""

from __future__ import annotations

from typing import Iterable, Mapping


# 过滤器名称 -> (前缀, 后缀)
FILTER_GUARDS: dict[str, tuple[str, str]] = {
    "textile": ("<notextile>\n", "\n</notextile>"),
}


def register_guard(name: str, prefix: str, suffix: str) -> None:
    """注册（或覆盖）过滤器的保护标记"""
    FILTER_GUARDS[name] = (prefix, suffix)


def unregister_guard(name: str) -> None:
    """移除过滤器的保护标记"""
    FILTER_GUARDS.pop(name, None)


def apply_guards(
    markup: str,
    filters: Iterable[str] | None,
    guards: Mapping[str, tuple[str, str]] | None = None,
) -> str:
    """
    按过滤器顺序包裹生成的 HTML

    Args:
        markup: 生成的 HTML
        filters: 后续会处理输出的过滤器名称
        guards: 保护标记表，默认使用 FILTER_GUARDS

    Returns:
        包裹后的 HTML
    """
    if not filters:
        return markup
    if guards is None:
        guards = FILTER_GUARDS
    for name in filters:
        guard = guards.get(name)
        if guard is None:
            continue
        prefix, suffix = guard
        markup = prefix + markup + suffix
    return markup
