"""cowsay CLI 调用封装（通过 STDIN 传递消息，并发读写避免管道死锁）。"""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import sys
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterator

from .models import CowsayErrorType, Failure, InvocationResult, Success

DEFAULT_COWSAY_BIN = "cowsay"
DEFAULT_TIMEOUT_MS = 5_000

# 不在 PATH 中时的常见安装目录（Debian 的 /usr/games、Homebrew 等）
WELL_KNOWN_DIRS = ("/usr/games", "/opt/homebrew/bin", "/usr/local/bin")

# 超时 kill 之后等待读线程收尾的时间（秒）
_TEARDOWN_GRACE_S = 2.0

# Windows 上不弹出控制台窗口
_CREATION_FLAGS = getattr(subprocess, "CREATE_NO_WINDOW", 0)

# POSIX 上子进程独占一个进程组，超时时连同其后代一起结束
_NEW_SESSION = os.name != "nt"


class CowsayNotFoundError(Exception):
    """cowsay 可执行文件不存在。"""

    def __init__(self, cowsay_bin: str) -> None:
        super().__init__(f"未找到 cowsay：{cowsay_bin}")
        self.cowsay_bin = cowsay_bin


def _warn(message: str) -> None:
    print(f"[cowsay-wrapper] warning: {message}", file=sys.stderr, flush=True)


def resolve_cowsay_bin(name: str) -> str:
    """解析 cowsay 可执行文件的完整路径。

    带路径分隔符的值按文件路径检查；纯名称先在 PATH 中查找，
    再查找 WELL_KNOWN_DIRS（/usr/games 通常不在普通用户的 PATH 中）。

    Args:
        name: 可执行文件名或路径（如 "cowsay"、"/usr/games/cowsay"）

    Returns:
        可执行文件的完整路径

    Raises:
        CowsayNotFoundError: 找不到可执行文件
    """
    value = name.strip()
    if not value:
        raise CowsayNotFoundError(name)

    if os.sep in value or (os.altsep and os.altsep in value):
        candidate = Path(value).expanduser()
        if candidate.is_file():
            return str(candidate)
        raise CowsayNotFoundError(value)

    resolved = shutil.which(value)
    if resolved:
        return resolved

    for directory in WELL_KNOWN_DIRS:
        candidate = Path(directory) / value
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return str(candidate)

    raise CowsayNotFoundError(value)


def _remaining(deadline: float) -> float:
    return max(0.0, deadline - time.monotonic())


def _kill(process: subprocess.Popen[str]) -> None:
    """强制结束子进程；POSIX 上结束整个进程组（包括仍占用管道的后代进程）。"""
    try:
        if _NEW_SESSION:
            os.killpg(process.pid, signal.SIGKILL)
        elif process.poll() is None:
            process.kill()
    except ProcessLookupError:
        pass
    except OSError as e:
        _warn(f"failed to kill cowsay process (pid {process.pid}): {e}")


@contextmanager
def _managed(process: subprocess.Popen[str]) -> Iterator[subprocess.Popen[str]]:
    """持有进程句柄；任何退出路径上都结束仍在运行的子进程并回收。

    stdout/stderr 由读线程负责关闭，这里只处理 stdin。
    """
    try:
        yield process
    finally:
        if process.poll() is None:
            _kill(process)
        if process.stdin is not None and not process.stdin.closed:
            try:
                process.stdin.close()
            except (OSError, ValueError):
                pass
        try:
            process.wait(timeout=_TEARDOWN_GRACE_S)
        except subprocess.TimeoutExpired:
            _warn(f"cowsay process (pid {process.pid}) did not exit after kill")


def _write_stdin(stream: IO[str], message: str) -> None:
    """写入消息并关闭 stdin，让 cowsay 读到 EOF。

    写入失败只记录警告，不抛出：stdout/stderr 的读取和进程等待需要继续进行。
    """
    try:
        stream.write(message + "\n")
        stream.flush()
    except (OSError, ValueError) as e:
        _warn(f"stdin write error: {e}")
    finally:
        try:
            stream.close()
        except (OSError, ValueError):
            pass


def _drain(stream: IO[str], sink: list[str]) -> None:
    try:
        with stream:
            sink.append(stream.read())
    except (OSError, ValueError) as e:
        _warn(f"stream read error: {e}")


def classify(exit_code: int, stdout: str, stderr: str) -> InvocationResult:
    """根据退出码和输出内容判定调用结果。"""
    if exit_code != 0:
        if stderr:
            return Failure(
                f"进程执行失败（退出码 {exit_code}）: {stderr.strip()}",
                CowsayErrorType.EXEC_FAILED,
                exit_code=exit_code,
            )
        return Failure(
            f"进程执行失败，退出码 {exit_code}",
            CowsayErrorType.EXEC_FAILED,
            exit_code=exit_code,
        )

    if not stdout:
        return Failure("进程已结束但没有任何输出", CowsayErrorType.NO_OUTPUT)

    return Success(stdout, exit_code)


@dataclass(frozen=True)
class CowsayClient:
    cowsay_bin: str = DEFAULT_COWSAY_BIN
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    extra_args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")

    @property
    def command(self) -> list[str]:
        return [self.cowsay_bin, *self.extra_args]

    def say(self, message: str) -> InvocationResult:
        """调用一次 cowsay，消息通过 STDIN 传入。

        所有失败都转换为 Failure 返回，不会抛出异常。
        """
        try:
            return self._run(message)
        except Exception as e:
            return Failure(f"进程执行错误: {e}", CowsayErrorType.UNEXPECTED)

    def _run(self, message: str) -> InvocationResult:
        try:
            process = subprocess.Popen(
                self.command,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                creationflags=_CREATION_FLAGS,
                start_new_session=_NEW_SESSION,
            )
        except OSError as e:
            return Failure(f"无法启动 cowsay 进程: {e}", CowsayErrorType.START_FAILED)

        with _managed(process):
            return self._communicate(process, message)

    def _communicate(self, process: subprocess.Popen[str], message: str) -> InvocationResult:
        # 三个线程各自独占一个流，主线程等待进程退出；四者共享同一个截止时间
        deadline = time.monotonic() + self.timeout_ms / 1000.0
        stdout_chunks: list[str] = []
        stderr_chunks: list[str] = []

        assert process.stdin is not None
        assert process.stdout is not None
        assert process.stderr is not None

        stdout_thread = threading.Thread(
            target=_drain, args=(process.stdout, stdout_chunks), daemon=True
        )
        stderr_thread = threading.Thread(
            target=_drain, args=(process.stderr, stderr_chunks), daemon=True
        )
        stdin_thread = threading.Thread(
            target=_write_stdin, args=(process.stdin, message), daemon=True
        )
        threads = (stdout_thread, stderr_thread, stdin_thread)
        for thread in threads:
            thread.start()

        timed_out = False
        try:
            process.wait(timeout=_remaining(deadline))
        except subprocess.TimeoutExpired:
            timed_out = True
        else:
            for thread in threads:
                thread.join(timeout=_remaining(deadline))
            timed_out = any(thread.is_alive() for thread in threads)

        if timed_out:
            _kill(process)
            teardown = time.monotonic() + _TEARDOWN_GRACE_S
            for thread in threads:
                thread.join(timeout=_remaining(teardown))
            return Failure(f"进程在 {self.timeout_ms}ms 后超时", CowsayErrorType.TIMEOUT)

        return classify(
            process.returncode,
            "".join(stdout_chunks),
            "".join(stderr_chunks),
        )
