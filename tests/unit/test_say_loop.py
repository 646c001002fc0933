"""Unit tests for the interactive say loop."""

import io
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from cowsay_wrapper.commands.say import FAREWELL, is_exit_input, run_loop
from cowsay_wrapper.cowsay.client import CowsayClient
from cowsay_wrapper.cowsay.models import Failure, Success


@pytest.fixture
def console():
    return Console(file=io.StringIO(), force_terminal=False, width=120)


@pytest.fixture
def client():
    mock = MagicMock(spec=CowsayClient)
    mock.say.side_effect = lambda message: Success(f"< {message} >\n", 0)
    return mock


def _reader(*lines):
    it = iter(lines)

    def _read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return _read


class TestIsExitInput:
    """Tests for exit detection."""

    @pytest.mark.parametrize("text", ["", None, "quit", "QUIT", "Quit", "qUiT"])
    def test_exit_inputs(self, text):
        assert is_exit_input(text) is True

    @pytest.mark.parametrize("text", ["hello", " quit", "quit ", "quitter", "exit", " "])
    def test_non_exit_inputs(self, text):
        assert is_exit_input(text) is False


class TestRunLoop:
    """Tests for run_loop."""

    def test_one_invocation_per_line(self, client, console):
        count = run_loop(client, _reader("a", "b", "quit", "c"), console)

        assert count == 2
        assert [call.args[0] for call in client.say.call_args_list] == ["a", "b"]
        output = console.file.getvalue()
        assert "< a >" in output
        assert "< b >" in output
        assert "< c >" not in output
        assert FAREWELL in output

    def test_empty_line_stops_loop(self, client, console):
        count = run_loop(client, _reader("", "hello"), console)

        assert count == 0
        client.say.assert_not_called()
        assert FAREWELL in console.file.getvalue()

    def test_quit_is_case_insensitive(self, client, console):
        assert run_loop(client, _reader("QuIt", "hello"), console) == 0
        client.say.assert_not_called()

    def test_eof_stops_loop(self, client, console):
        assert run_loop(client, _reader("hello"), console) == 1
        assert FAREWELL in console.file.getvalue()

    def test_keyboard_interrupt_stops_loop(self, client, console):
        def _interrupt():
            raise KeyboardInterrupt

        assert run_loop(client, _interrupt, console) == 0
        assert FAREWELL in console.file.getvalue()

    def test_none_stops_loop(self, client, console):
        assert run_loop(client, lambda: None, console) == 0

    def test_loop_continues_after_failure(self, client, console):
        client.say.side_effect = [Failure("进程在 5000ms 后超时"), Success("moo\n", 0)]

        count = run_loop(client, _reader("first", "second", "quit"), console)

        assert count == 2
        output = console.file.getvalue()
        assert "错误: 进程在 5000ms 后超时" in output
        assert "moo" in output

    def test_loop_continues_after_unexpected_exception(self, client, console):
        client.say.side_effect = [RuntimeError("boom"), Success("moo\n", 0)]

        count = run_loop(client, _reader("first", "second", "quit"), console)

        assert count == 2
        output = console.file.getvalue()
        assert "boom" in output
        assert "moo" in output

    def test_input_is_passed_unmodified(self, client, console):
        run_loop(client, _reader("  spaced out  ", "quit"), console)

        client.say.assert_called_once_with("  spaced out  ")
