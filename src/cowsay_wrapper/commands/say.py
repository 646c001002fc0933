"""cowsay-wrapper say: 逐行读取消息并交给 cowsay 显示。"""

from __future__ import annotations

from typing import Callable, Optional

import typer
from rich.console import Console

from cowsay_wrapper.core.config import load_config
from cowsay_wrapper.cowsay.client import CowsayClient, CowsayNotFoundError, resolve_cowsay_bin
from cowsay_wrapper.cowsay.models import Success
from cowsay_wrapper.ui.banner import EXIT_KEYWORD, show_banner
from cowsay_wrapper.ui.display import print_error, show_result
from cowsay_wrapper.version import PACKAGE_VERSION

console = Console()

PROMPT = f"\n[bold green]输入消息[/bold green]（输入 '{EXIT_KEYWORD}' 退出）"
FAREWELL = "再见！"


def is_exit_input(text: str | None) -> bool:
    """空输入、EOF 或 quit（不区分大小写）都表示退出。"""
    if not text:
        return True
    return text.casefold() == EXIT_KEYWORD


def _ask() -> str:
    # 原样返回整行，不去除首尾空白
    return console.input(PROMPT + ": ")


def run_loop(
    client: CowsayClient,
    read_line: Callable[[], str | None] = _ask,
    out: Console | None = None,
) -> int:
    """交互循环：每行输入调用一次 cowsay 并显示结果。

    同一时间最多只有一个 cowsay 进程；上一条结果显示完之后才读取下一行。

    参数：
        client: cowsay 调用客户端
        read_line: 读取一行输入；返回 None 或抛出 EOFError 表示输入结束
        out: 输出控制台，默认使用模块级 console

    返回：
        实际发起的调用次数
    """
    out = out or console
    invocations = 0

    while True:
        try:
            user_input = read_line()
        except (KeyboardInterrupt, EOFError):
            out.print()
            break

        if is_exit_input(user_input):
            break

        invocations += 1
        try:
            result = client.say(user_input)
        except Exception as e:
            print_error(out, f"错误: {e}")
            continue

        show_result(out, result)

    out.print(FAREWELL)
    return invocations


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]cowsay-wrapper[/bold] 版本 {PACKAGE_VERSION}")
        raise typer.Exit()


def say_command(
    message: str = typer.Option(
        "",
        "--message",
        "-m",
        help="单次消息模式（发送一条消息后退出）",
    ),
    cowsay_bin: Optional[str] = typer.Option(
        None,
        "--cowsay-bin",
        "-b",
        help="cowsay 可执行文件名或路径（默认读取 COWSAY_BIN，否则为 cowsay）",
    ),
    timeout: Optional[int] = typer.Option(
        None,
        "--timeout",
        "-t",
        min=1,
        help="单次调用超时（毫秒，默认读取 COWSAY_TIMEOUT，否则为 5000）",
    ),
    cow: Optional[str] = typer.Option(
        None,
        "--cow",
        "-f",
        help="cowsay 角色（传给 cowsay -f）",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="显示版本信息",
    ),
) -> None:
    """把输入的每一行交给 cowsay 显示。

    交互模式：直接运行，空行、quit 或 Ctrl+C 退出。
    单次模式：使用 -m 参数发送单条消息（失败时退出码为 1）。

    示例：
        cowsay-wrapper                          # 交互模式
        cowsay-wrapper -m "你好"                 # 单次消息
        cowsay-wrapper -f tux -t 2000           # 指定角色和超时
        COWSAY_BIN=/usr/games/cowsay cowsay-wrapper
    """
    try:
        config = load_config(cowsay_bin=cowsay_bin, timeout_ms=timeout, cow=cow)
        resolved_bin = resolve_cowsay_bin(config.cowsay_bin)
    except (CowsayNotFoundError, ValueError) as e:
        print_error(console, str(e))
        raise typer.Exit(1)

    client = CowsayClient(
        cowsay_bin=resolved_bin,
        timeout_ms=config.timeout_ms,
        extra_args=config.extra_args,
    )

    # 单次消息模式（-m 参数）
    if message:
        result = client.say(message)
        show_result(console, result)
        if not isinstance(result, Success):
            raise typer.Exit(1)
        return

    show_banner(console, cowsay_bin=resolved_bin, timeout_ms=config.timeout_ms)
    run_loop(client)
