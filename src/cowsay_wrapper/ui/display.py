"""基于 Rich 的调用结果展示。"""

from __future__ import annotations

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

from cowsay_wrapper.cowsay.models import Failure, InvocationResult, Success

# 主题配置
THEME = {
    "success": "green",
    "error": "red",
    "info": "blue",
    "dim": "dim",
}

OUTPUT_TITLE = "Cowsay 输出"


def print_error(console: Console, message: str) -> None:
    """以红色单行输出错误消息（不解析 Rich markup，不自动换行）。"""
    console.print(Text(message, style=THEME["error"]), soft_wrap=True)


def show_result(console: Console, result: InvocationResult) -> None:
    """展示一次 cowsay 调用的结果。

    参数：
        console: Rich 控制台实例
        result: Success 或 Failure
    """
    console.print()

    if isinstance(result, Success):
        console.print(Rule(OUTPUT_TITLE, style=THEME["info"]))
        # cowsay 输出中的方括号、反斜杠不能被当作 markup
        console.print(Text(result.output.rstrip("\n")), highlight=False, soft_wrap=True)
        console.print(f"[{THEME['dim']}]进程执行成功（退出码: {result.exit_code}）[/{THEME['dim']}]")
    elif isinstance(result, Failure):
        print_error(console, f"错误: {result.reason}")
    else:
        raise TypeError(f"unknown invocation result: {result!r}")
