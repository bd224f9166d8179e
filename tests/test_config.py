"""
测试配置加载
"""
from __future__ import annotations

from pathlib import Path

import pytest

from gvfilter.config import FilterConfig, load_config


ENV_VARS = ["GVFILTER_OUTPUT_DIR", "GVFILTER_TAG", "GVFILTER_TIMEOUT", "GVFILTER_FILTERS"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # 先 setenv 再 delenv，测试结束后 .env 写入的变量也会被清除
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults(tmp_path):
    config = load_config(env_file=tmp_path / "missing.env")

    assert config == FilterConfig()
    assert config.output_dir == Path("output")
    assert config.tag == "graphviz"
    assert config.timeout is None
    assert config.filters == []


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "GVFILTER_OUTPUT_DIR=site\n"
        "GVFILTER_TIMEOUT=12.5\n"
        "GVFILTER_FILTERS=erb, textile\n",
        encoding="utf-8",
    )

    config = load_config(env_file=env_file)

    assert config.output_dir == Path("site")
    assert config.timeout == 12.5
    assert config.filters == ["erb", "textile"]


def test_yaml_overrides_env(tmp_path, monkeypatch):
    monkeypatch.setenv("GVFILTER_OUTPUT_DIR", "from-env")
    monkeypatch.setenv("GVFILTER_TAG", "dot")
    config_file = tmp_path / "gvfilter.yaml"
    config_file.write_text(
        "gvfilter:\n"
        "  output_dir: public\n"
        "  filters:\n"
        "    - textile\n",
        encoding="utf-8",
    )

    config = load_config(env_file=tmp_path / "missing.env", config_file=config_file)

    assert config.output_dir == Path("public")
    assert config.tag == "dot"
    assert config.filters == ["textile"]


def test_yaml_bad_section(tmp_path):
    config_file = tmp_path / "gvfilter.yaml"
    config_file.write_text("gvfilter: [1, 2]\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(env_file=tmp_path / "missing.env", config_file=config_file)
