"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path
from typing import Callable

import pytest
from typer.testing import CliRunner

from cowsay_wrapper import app
from cowsay_wrapper.cowsay.client import CowsayClient

# Make tests/helpers.py importable
tests_path = Path(__file__).parent
sys.path.insert(0, str(tests_path))


# Stand-in for cowsay: echoes stdin inside a bubble, logs every message it
# receives, and fails with stderr output when the message is "fail".
FAKE_COWSAY_SOURCE = '''\
import sys
from pathlib import Path

log = Path(__file__).with_name("invocations.log")
text = sys.stdin.read().rstrip("\\n")
with log.open("a", encoding="utf-8") as f:
    f.write(text + "\\n")

if text == "fail":
    sys.stderr.write("  the cow is sick  \\n")
    sys.exit(3)

args = sys.argv[1:]
if args:
    print("args: " + " ".join(args))
print("< " + text + " >")
print("        \\\\   ^__^")
'''


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def invoke(cli_runner: CliRunner):
    def _invoke(args: list[str], input: str | None = None):
        return cli_runner.invoke(app, args, input=input)

    return _invoke


@pytest.fixture
def python_client() -> Callable[..., CowsayClient]:
    """Build a client whose child process is the current interpreter running a script."""

    def _factory(script: str, timeout_ms: int = 5_000) -> CowsayClient:
        return CowsayClient(
            cowsay_bin=sys.executable,
            timeout_ms=timeout_ms,
            extra_args=("-c", script),
        )

    return _factory


@pytest.fixture
def fake_cowsay(tmp_path: Path) -> Path:
    """Write an executable fake cowsay script and return its path."""
    if os.name == "nt":
        pytest.skip("shebang scripts are not executable on Windows")
    script = tmp_path / "cowsay"
    script.write_text(f"#!{sys.executable}\n{FAKE_COWSAY_SOURCE}", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture(autouse=True)
def _clean_cowsay_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("COWSAY_BIN", "COWSAY_TIMEOUT", "COWSAY_COW"):
        monkeypatch.delenv(name, raising=False)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    del config
    for item in items:
        path = Path(str(item.fspath))
        if "tests" not in path.parts:
            continue
        try:
            tests_index = path.parts.index("tests")
        except ValueError:
            continue
        if len(path.parts) <= tests_index + 1:
            continue
        group = path.parts[tests_index + 1]
        if group in {"unit", "cli", "cowsay"}:
            item.add_marker(getattr(pytest.mark, group))
