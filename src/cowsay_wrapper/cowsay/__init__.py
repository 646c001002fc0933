"""cowsay 子进程调用封装。"""

from cowsay_wrapper.cowsay.client import (
    DEFAULT_TIMEOUT_MS,
    CowsayClient,
    CowsayNotFoundError,
    resolve_cowsay_bin,
)
from cowsay_wrapper.cowsay.models import (
    NO_EXIT_CODE,
    CowsayErrorType,
    Failure,
    InvocationResult,
    Success,
)

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "NO_EXIT_CODE",
    "CowsayClient",
    "CowsayErrorType",
    "CowsayNotFoundError",
    "Failure",
    "InvocationResult",
    "Success",
    "resolve_cowsay_bin",
]
