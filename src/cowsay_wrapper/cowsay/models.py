"""cowsay 调用结果与数据模型。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

# 失败时的退出码占位值（无意义）
NO_EXIT_CODE = -1


class CowsayErrorType(str, Enum):
    """cowsay 调用错误类型。"""

    NONE = "none"  # 执行成功，无错误
    START_FAILED = "start_failed"  # 进程无法启动
    TIMEOUT = "timeout"  # 执行超时
    EXEC_FAILED = "exec_failed"  # 执行失败（非零退出码）
    NO_OUTPUT = "no_output"  # 退出码为 0 但没有输出
    UNEXPECTED = "unexpected"  # 其他未预期的异常


@dataclass(frozen=True)
class Success:
    output: str
    exit_code: int = 0

    @property
    def error_type(self) -> CowsayErrorType:
        return CowsayErrorType.NONE


@dataclass(frozen=True)
class Failure:
    """一次失败的调用。

    exit_code 只在 EXEC_FAILED（子进程非零退出）时是子进程的真实退出码，
    其他失败类型一律为 NO_EXIT_CODE，没有意义。
    """

    reason: str
    error_type: CowsayErrorType = CowsayErrorType.UNEXPECTED
    exit_code: int = NO_EXIT_CODE


InvocationResult = Union[Success, Failure]
