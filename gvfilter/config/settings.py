"""
配置管理模块
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class FilterConfig(BaseModel):
    """过滤器配置"""
    output_dir: Path = Field(default=Path("output"), description="站点输出根目录")
    tag: str = Field(default="graphviz", description="DOT 片段的标签名")
    timeout: float | None = Field(default=None, description="单次渲染超时时间（秒），默认不限制")
    filters: list[str] = Field(default_factory=list, description="后续过滤器名称，如 textile")


def load_config(
    env_file: str | Path | None = None,
    config_file: str | Path | None = None,
) -> FilterConfig:
    """
    从环境变量和 YAML 文件加载配置

    Args:
        env_file: .env 文件路径，默认为当前目录的 .env
        config_file: YAML 配置文件，其中 `gvfilter` 段覆盖环境变量

    Returns:
        FilterConfig 实例
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    data: dict[str, Any] = {
        "output_dir": os.getenv("GVFILTER_OUTPUT_DIR", "output"),
        "tag": os.getenv("GVFILTER_TAG", "graphviz"),
    }

    timeout = os.getenv("GVFILTER_TIMEOUT")
    if timeout:
        data["timeout"] = float(timeout)

    filters = os.getenv("GVFILTER_FILTERS")
    if filters:
        data["filters"] = [f.strip() for f in filters.split(",") if f.strip()]

    if config_file:
        data.update(_load_yaml_section(config_file))

    return FilterConfig(**data)


def _load_yaml_section(file_path: str | Path) -> dict[str, Any]:
    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    section = data.get("gvfilter", {})
    if not isinstance(section, dict):
        raise ValueError(f"配置文件格式错误，gvfilter 段应为映射: {file_path}")
    return section
