"""Tests for the symbol builtin."""

import pytest
from myshell import Shell


class TestSymbol:
    """Test showing and changing prompt symbols."""

    @pytest.mark.asyncio
    async def test_lists_symbols(self):
        shell = Shell()
        result = await shell.exec("symbol")
        assert result.stdout == "PROMPT = '>'\nMORELINES = '\\'\nMULTILINE = '|'\n"

    @pytest.mark.asyncio
    async def test_shows_one_symbol(self):
        shell = Shell()
        result = await shell.exec("symbol multiline")
        assert result.stdout == "MULTILINE = '|'\n"

    @pytest.mark.asyncio
    async def test_changes_symbol(self):
        shell = Shell(cwd="/home/user")
        result = await shell.exec("symbol PROMPT #")
        assert result.stdout == "Symbol for PROMPT changed from '>' to '#'\n"
        assert shell.options.prompt_symbol == "#"
        assert shell.env["PROMPT"] == "#"
        assert shell.prompt() == "$user# "

    @pytest.mark.asyncio
    async def test_changed_symbol_is_a_variable(self):
        shell = Shell()
        await shell.exec("symbol MORELINES +")
        result = await shell.exec("echo $MORELINES")
        assert result.stdout == "+\n"
        assert shell.options.morelines_symbol == "+"

    @pytest.mark.asyncio
    async def test_unknown_name(self):
        shell = Shell()
        result = await shell.exec("symbol COLOR x")
        assert result.exit_code == 1
        assert "unknown symbol name" in result.stderr

    @pytest.mark.asyncio
    async def test_symbol_must_be_one_character(self):
        shell = Shell()
        result = await shell.exec("symbol PROMPT >>")
        assert result.exit_code == 1
        assert shell.options.prompt_symbol == ">"
