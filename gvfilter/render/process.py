"""
渲染进程调用

封装对外部 Graphviz 命令的调用。诊断流（stderr）重定向到临时文件，
调用方只看到捕获的文本，不接触文件句柄。
"""

from __future__ import annotations

import subprocess
import tempfile
from typing import IO

from ..errors import RenderFailed, RenderTimeout


# 无法启动可执行文件时 probe 返回的状态码，与 shell 的 "command not found" 一致
NOT_FOUND_STATUS = 127


class ProcessInvoker:
    """
    外部渲染进程调用器

    每次调用都使用新的临时文件捕获诊断流，前一次调用的输出不会影响下一次检查。
    不检查退出状态：诊断流是否为空是唯一的错误信号。
    """

    def __init__(self, timeout: float | None = None):
        """
        初始化调用器

        Args:
            timeout: 单次调用超时时间（秒），None 表示不限制
        """
        self.timeout = timeout

    def probe(self, command: list[str]) -> int:
        """执行 `<command> -V`，只返回退出状态"""
        try:
            result = subprocess.run(
                [*command, "-V"],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
                check=False,
            )
        except OSError:
            return NOT_FOUND_STATUS
        except subprocess.TimeoutExpired as e:
            raise RenderTimeout(
                f"'{command[0]}' -V 超时 ({self.timeout}s)",
                command=[*command, "-V"],
            ) from e
        return result.returncode

    def run_capturing_stdout(self, command: list[str], stdin: str) -> tuple[str, str]:
        """
        运行命令并读取全部标准输出

        Args:
            command: 命令行参数列表
            stdin: 写入标准输入的文本

        Returns:
            (标准输出, 诊断输出)
        """
        with tempfile.TemporaryFile(prefix="graphviz_err") as err:
            result = self._run(command, stdin, stdout=subprocess.PIPE, stderr=err)
            return result.stdout.decode("utf-8", errors="replace"), _read_diagnostics(err)

    def run_writing_file(self, command: list[str], stdin: str) -> str:
        """
        运行命令（输出文件由命令行参数指定），返回诊断输出
        """
        with tempfile.TemporaryFile(prefix="graphviz_err") as err:
            self._run(command, stdin, stdout=subprocess.DEVNULL, stderr=err)
            return _read_diagnostics(err)

    def _run(
        self,
        command: list[str],
        stdin: str,
        stdout: int,
        stderr: IO[bytes],
    ) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(
                command,
                input=stdin.encode("utf-8"),
                stdout=stdout,
                stderr=stderr,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise RenderTimeout(
                f"渲染超时 ({self.timeout}s): {' '.join(command)}",
                command=command,
            ) from e
        except OSError as e:
            raise RenderFailed(
                f"无法执行渲染命令: {' '.join(command)}: {e}",
                command=command,
                diagnostics=str(e),
            ) from e


def _read_diagnostics(err: IO[bytes]) -> str:
    err.seek(0)
    return err.read().decode("utf-8", errors="replace")
