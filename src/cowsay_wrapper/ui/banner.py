"""cowsay-wrapper 启动标题显示。"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from cowsay_wrapper.version import UI_VERSION_INFO

TITLE = "Cowsay Program"
EXIT_KEYWORD = "quit"


def show_banner(
    console: Console | None = None,
    cowsay_bin: str = "",
    timeout_ms: int | None = None,
) -> None:
    """显示启动面板。

    参数：
        console: Rich Console 实例，如果为 None 则创建新实例
        cowsay_bin: 已解析的 cowsay 路径
        timeout_ms: 单次调用超时（毫秒）
    """
    if console is None:
        console = Console()

    lines = [f"[bold]{TITLE}[/bold] [dim]{UI_VERSION_INFO}[/dim]"]
    if cowsay_bin:
        lines.append(f"cowsay: [cyan]{escape(cowsay_bin)}[/cyan]")
    if timeout_ms is not None:
        lines.append(f"超时: [cyan]{timeout_ms}ms[/cyan]")
    lines.append(f"\n输入消息开始，空行、[dim]{EXIT_KEYWORD}[/dim] 或 [dim]Ctrl+C[/dim] 退出")

    console.print(
        Panel(
            "\n".join(lines),
            title="[bold blue]cowsay-wrapper[/bold blue]",
            border_style="blue",
        )
    )


__all__ = ["show_banner", "TITLE", "EXIT_KEYWORD"]
