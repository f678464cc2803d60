"""Tests for the help builtin."""

import pytest
from myshell import Shell


class TestHelp:
    """Test listing commands."""

    @pytest.mark.asyncio
    async def test_lists_all_names(self):
        shell = Shell()
        result = await shell.exec("help")
        assert result.stdout == "echo\nenv\nexit\nhelp\nhistory\npwd\nsymbol\n"

    @pytest.mark.asyncio
    async def test_builtin(self):
        shell = Shell()
        result = await shell.exec("help EXIT")
        assert result.stdout == "exit is a shell builtin\n"

    @pytest.mark.asyncio
    async def test_command(self):
        shell = Shell()
        result = await shell.exec("help echo")
        assert result.stdout == "echo is a command\n"

    @pytest.mark.asyncio
    async def test_unknown_topic(self):
        shell = Shell()
        result = await shell.exec("help frobnicate")
        assert result.exit_code == 1
        assert "no help topics match" in result.stderr

    @pytest.mark.asyncio
    async def test_custom_registry(self):
        from myshell.commands import EchoCommand

        shell = Shell(commands={"echo": EchoCommand()})
        result = await shell.exec("help")
        assert result.stdout == "echo\nexit\nhelp\nhistory\nsymbol\n"
