"""基于 Rich 的终端 UI 组件。"""

from cowsay_wrapper.ui.banner import EXIT_KEYWORD, show_banner
from cowsay_wrapper.ui.display import (
    OUTPUT_TITLE,
    THEME,
    print_error,
    show_result,
)

__all__ = [
    # 主题与常量
    "THEME",
    "OUTPUT_TITLE",
    "EXIT_KEYWORD",
    # 展示函数
    "show_banner",
    "show_result",
    "print_error",
]
