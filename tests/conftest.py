"""
测试公共夹具
"""
from __future__ import annotations

from pathlib import Path

import pytest


MAP_MARKUP = '<map id="g1" name="g1">\n<area shape="poly" href="a.html" coords="1,2,3,4"/>\n</map>\n'


class FakeInvoker:
    """代替真实 Graphviz 的调用器，记录每次调用"""

    def __init__(
        self,
        probe_status: int = 0,
        map_output: str = MAP_MARKUP,
        map_diagnostics: str = "",
        image_diagnostics: str = "",
    ):
        self.probe_status = probe_status
        self.map_output = map_output
        self.map_diagnostics = map_diagnostics
        self.image_diagnostics = image_diagnostics
        self.calls: list[tuple] = []

    def probe(self, command):
        self.calls.append(("probe", command))
        return self.probe_status

    def run_capturing_stdout(self, command, stdin):
        self.calls.append(("map", command, stdin))
        return self.map_output, self.map_diagnostics

    def run_writing_file(self, command, stdin):
        self.calls.append(("image", command, stdin))
        output = Path(command[command.index("-o") + 1])
        output.write_bytes(b"GIF89a")
        return self.image_diagnostics

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_invoker() -> FakeInvoker:
    return FakeInvoker()
