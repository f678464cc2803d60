"""Tests for the env command."""

import pytest
from myshell import Shell


class TestEnv:
    """Test listing and reading variables."""

    @pytest.mark.asyncio
    async def test_lists_sorted_variables(self):
        shell = Shell(env={"b": "2", "a": "1"})
        result = await shell.exec("env")
        assert result.stdout == "MORELINES=\\\nMULTILINE=|\nPROMPT=>\na=1\nb=2\n"
        assert result.exit_code == 0

    @pytest.mark.asyncio
    async def test_named_variables(self):
        shell = Shell(env={"a": "1", "b": "2"})
        result = await shell.exec("env b a")
        assert result.stdout == "2\n1\n"

    @pytest.mark.asyncio
    async def test_assignment_shows_up(self):
        shell = Shell()
        await shell.exec("greeting=hi")
        result = await shell.exec("env greeting")
        assert result.stdout == "hi\n"

    @pytest.mark.asyncio
    async def test_unset_variable(self):
        shell = Shell()
        result = await shell.exec("env myshell_not_set")
        assert result.stdout == ""
        assert result.exit_code == 1

    @pytest.mark.asyncio
    async def test_process_environment_fallback(self, monkeypatch):
        monkeypatch.setenv("MYSHELL_TEST_VARIABLE", "from-env")
        shell = Shell()
        result = await shell.exec("env MYSHELL_TEST_VARIABLE")
        assert result.stdout == "from-env\n"

    @pytest.mark.asyncio
    async def test_help(self):
        shell = Shell()
        result = await shell.exec("env --help")
        assert "Usage: env" in result.stdout
