"""Tests for the history builtin."""

import pytest
from myshell import Shell


class TestHistoryBuiltin:
    """Test listing history."""

    @pytest.mark.asyncio
    async def test_empty_history(self):
        shell = Shell()
        result = await shell.exec("history")
        assert result.stdout == ""
        assert result.exit_code == 0

    @pytest.mark.asyncio
    async def test_lists_previous_lines(self):
        shell = Shell()
        await shell.exec("echo a")
        await shell.exec("echo b")
        result = await shell.exec("history")
        assert result.stdout == "1  echo a\n2  echo b\n"

    @pytest.mark.asyncio
    async def test_history_line_itself_is_recorded(self):
        shell = Shell()
        await shell.exec("history")
        result = await shell.exec("history")
        assert result.stdout == "1  history\n"

    @pytest.mark.asyncio
    async def test_last_n_entries(self):
        shell = Shell()
        for word in ["a", "b", "c"]:
            await shell.exec(f"echo {word}")
        result = await shell.exec("history 2")
        assert result.stdout == "2  echo b\n3  echo c\n"

    @pytest.mark.asyncio
    async def test_numbers_are_aligned(self):
        shell = Shell()
        for n in range(10):
            await shell.exec(f"echo {n}")
        result = await shell.exec("history 2")
        assert result.stdout == " 9  echo 8\n10  echo 9\n"

    @pytest.mark.asyncio
    async def test_invalid_count(self):
        shell = Shell()
        result = await shell.exec("history many")
        assert result.exit_code == 1
        assert "numeric argument required" in result.stderr
