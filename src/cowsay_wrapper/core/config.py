"""cowsay-wrapper 的运行配置。

配置只来自命令行选项与环境变量（不读取配置文件），优先级：
命令行选项 > 环境变量 > 默认值。

环境变量：
    COWSAY_BIN：cowsay 可执行文件名或路径
    COWSAY_TIMEOUT：单次调用超时（毫秒）
    COWSAY_COW：cowsay 使用的角色（传给 cowsay -f）
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from cowsay_wrapper.cowsay.client import DEFAULT_COWSAY_BIN, DEFAULT_TIMEOUT_MS

ENV_COWSAY_BIN = "COWSAY_BIN"
ENV_COWSAY_TIMEOUT = "COWSAY_TIMEOUT"
ENV_COWSAY_COW = "COWSAY_COW"


def _env_str(name: str) -> str | None:
    raw = (os.environ.get(name) or "").strip()
    return raw or None


def _env_timeout_ms(default_ms: int) -> int:
    raw = _env_str(ENV_COWSAY_TIMEOUT)
    if raw is None:
        return default_ms
    try:
        value = int(raw)
    except ValueError:
        return default_ms
    return value if value > 0 else default_ms


@dataclass
class WrapperConfig:
    """cowsay-wrapper 配置。

    属性：
        cowsay_bin：cowsay 可执行文件名或路径
        timeout_ms：单次调用超时（毫秒）
        cow：cowsay 角色名；None 表示使用 cowsay 默认角色
    """

    cowsay_bin: str = DEFAULT_COWSAY_BIN
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    cow: str | None = None

    @property
    def extra_args(self) -> tuple[str, ...]:
        """传给 cowsay 的额外参数。"""
        if self.cow:
            return ("-f", self.cow)
        return ()


def load_config(
    cowsay_bin: str | None = None,
    timeout_ms: int | None = None,
    cow: str | None = None,
) -> WrapperConfig:
    """合并命令行选项、环境变量与默认值。

    参数：
        cowsay_bin：命令行指定的可执行文件
        timeout_ms：命令行指定的超时（毫秒）
        cow：命令行指定的角色

    返回：
        WrapperConfig 实例

    异常：
        ValueError：显式指定的超时不是正数
    """
    if timeout_ms is not None and timeout_ms <= 0:
        raise ValueError(f"超时必须为正数（毫秒），当前为 {timeout_ms}")

    return WrapperConfig(
        cowsay_bin=cowsay_bin or _env_str(ENV_COWSAY_BIN) or DEFAULT_COWSAY_BIN,
        timeout_ms=timeout_ms if timeout_ms is not None else _env_timeout_ms(DEFAULT_TIMEOUT_MS),
        cow=cow or _env_str(ENV_COWSAY_COW),
    )
