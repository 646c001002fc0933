"""cowsay-wrapper: 通过 STDIN 调用 cowsay 的交互式命令行工具。"""

import typer

from cowsay_wrapper.commands import say as say_cmd
from cowsay_wrapper.version import PACKAGE_VERSION

__version__ = PACKAGE_VERSION

app = typer.Typer(
    name="cowsay-wrapper",
    help="通过 STDIN 调用 cowsay 的交互式命令行工具",
    rich_markup_mode="rich",
)

# 只有一个命令：直接运行即进入交互循环
app.command(name="say", help="逐行读取消息并交给 cowsay 显示")(say_cmd.say_command)


def main() -> None:
    """CLI 入口。"""
    app()


if __name__ == "__main__":
    main()
