"""Test helper utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


def assert_contains_any(text: str, candidates: Iterable[str]) -> None:
    """Assert that at least one candidate substring exists in text."""
    candidates = list(candidates)
    if not any(candidate in text for candidate in candidates):
        raise AssertionError(f"Expected one of {candidates} to be in text, got: {text}")


def read_invocations(fake_cowsay: Path) -> list[str]:
    """Return the messages the fake cowsay script received, one per invocation."""
    log = fake_cowsay.with_name("invocations.log")
    if not log.exists():
        return []
    return log.read_text(encoding="utf-8").splitlines()
