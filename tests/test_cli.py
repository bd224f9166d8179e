"""
测试命令行入口
"""
from __future__ import annotations

from typer.testing import CliRunner

from gvfilter import cli

from conftest import FakeInvoker


runner = CliRunner()


def _use_invoker(monkeypatch, invoker):
    monkeypatch.setattr(cli, "ProcessInvoker", lambda timeout=None: invoker)


def test_render_to_file(tmp_path, monkeypatch, fake_invoker):
    _use_invoker(monkeypatch, fake_invoker)
    page = tmp_path / "page.html"
    page.write_text('<p>Hi</p><graphviz path="images">digraph g { a }</graphviz>', encoding="utf-8")
    output = tmp_path / "site" / "page.html"

    result = runner.invoke(cli.app, [
        "render", str(page),
        "-o", str(output),
        "-d", str(tmp_path / "site"),
        "-f", "textile",
        "--env", str(tmp_path / "missing.env"),
    ])

    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8") == (
        '<p>Hi</p><notextile>\n<img src="images/g.png" />\n</notextile>'
    )
    assert (tmp_path / "site" / "images" / "g.png").exists()


def test_render_to_stdout(tmp_path, monkeypatch, fake_invoker):
    _use_invoker(monkeypatch, fake_invoker)
    page = tmp_path / "page.html"
    page.write_text("<graphviz>graph g { a }</graphviz>", encoding="utf-8")

    result = runner.invoke(cli.app, [
        "render", str(page),
        "-d", str(tmp_path),
        "--env", str(tmp_path / "missing.env"),
    ])

    assert result.exit_code == 0, result.output
    assert '<img src="g.png" />' in result.stdout


def test_render_failure_exit_code(tmp_path, monkeypatch):
    _use_invoker(monkeypatch, FakeInvoker(image_diagnostics="Error: syntax error in line 1"))
    page = tmp_path / "page.html"
    page.write_text("<graphviz>digraph g { a }</graphviz>", encoding="utf-8")

    result = runner.invoke(cli.app, [
        "render", str(page),
        "-d", str(tmp_path),
        "--env", str(tmp_path / "missing.env"),
    ])

    assert result.exit_code == 1
    assert "syntax error" in result.output


def test_check_missing_renderer(monkeypatch):
    _use_invoker(monkeypatch, FakeInvoker(probe_status=127))

    result = runner.invoke(cli.app, ["check", "--cmd", "fdp"])

    assert result.exit_code == 1


def test_check_available_renderer(monkeypatch, fake_invoker):
    _use_invoker(monkeypatch, fake_invoker)

    result = runner.invoke(cli.app, ["check"])

    assert result.exit_code == 0
    assert fake_invoker.calls == [("probe", ["dot"])]


def test_check_unbalanced_quote():
    result = runner.invoke(cli.app, ["check", "--cmd", '"dot'])

    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
