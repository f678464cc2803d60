"""Input Expansion System.

Turns one raw input line into one or more command lines. Expansions are
performed in this order:

- Brace expansion {a,b,c}, {1..5}, {a..e} (the only one producing more lines)
- History expansion !! (last input line)
- Variable expansion $VAR, ${VAR}, ${VAR:-default}, ${VAR:=default}
- Arithmetic expansion $((...)), innermost first

Every construct can be escaped with a backslash. Escapes stay in the text
while the passes run, so that a construct protected from one pass is still
recognizable as protected by the next one; the backslashes are removed by
strip_escapes() at the very end. A malformed construct is never an error, it
is simply left in the line as it was typed.
"""

import itertools
import logging
import re
from typing import TYPE_CHECKING, Optional

from .arithmetic import try_evaluate

if TYPE_CHECKING:
    from .types import InterpreterState, VariableStore

logger = logging.getLogger(__name__)

LAST_INPUT = "!!"
"""Shorthand for the last line of input."""

MAX_SEQUENCE_LENGTH = 65536
"""Longest {low..high} sequence that is expanded; longer ones stay literal."""

MAX_BRACE_RESULTS = 65536
"""Most lines brace expansion may produce; a line that would give more is kept as is."""

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_NAME_RE = re.compile(r"[^\W\d]\w*")
_DEFAULT_OPERATOR_RE = re.compile(r":[-=]")


def backslash_run(text: str, pos: int) -> int:
    """Count the consecutive backslashes immediately before ``pos``."""
    count = 0
    i = pos - 1
    while i >= 0 and text[i] == "\\":
        count += 1
        i -= 1
    return count


def escaped_at(text: str, pos: int) -> bool:
    """Check if the character at ``pos`` is escaped.

    A character is escaped when it is preceded by an odd number of
    backslashes; an even number only escapes the backslashes themselves.
    """
    return backslash_run(text, pos) % 2 == 1


def strip_escapes(text: str) -> str:
    """Remove the escapes left in front of unexpanded triggers.

    A run of backslashes in front of ``{``, ``$`` or ``!!`` is halved: pairs
    collapse into one backslash and a lone escaping backslash disappears.
    Backslashes anywhere else are left alone.
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        if text[i] != "\\":
            out.append(text[i])
            i += 1
            continue
        j = i
        while j < len(text) and text[j] == "\\":
            j += 1
        run = j - i
        if text.startswith(("{", "$", LAST_INPUT), j):
            run //= 2
        out.append("\\" * run)
        i = j
    return "".join(out)


# --------------------------------------------------------------------------
# Brace expansion
# --------------------------------------------------------------------------


def _inclusive_range(start: int, end: int) -> range:
    step = 1 if end >= start else -1
    return range(start, end + step, step)


def _expand_sequence(item: str) -> Optional[list[str]]:
    """Expand a sequence like 1..10 or a..z, or return None if it is invalid."""
    parts = item.split("..")
    if len(parts) != 2:
        return None
    low, high = parts

    if _INTEGER_RE.fullmatch(low) and _INTEGER_RE.fullmatch(high):
        start, end = int(low), int(high)
        if abs(end - start) >= MAX_SEQUENCE_LENGTH:
            return None
        return [str(n) for n in _inclusive_range(start, end)]

    if len(low) == 1 and len(high) == 1 and low.isalpha() and high.isalpha():
        if abs(ord(high) - ord(low)) >= MAX_SEQUENCE_LENGTH:
            return None
        return [chr(n) for n in _inclusive_range(ord(low), ord(high))]

    return None


def _expand_brace_group(content: str) -> Optional[list[str]]:
    """Expand the content inside braces.

    Comma separated items are concatenated into one flat list, sequences
    included: ``1..3,A..C`` gives 1 2 3 A B C. Returns None if the group is
    not a valid brace expression.
    """
    items = content.split(",")
    if len(items) == 1 and ".." not in content:
        # {word} and {} are not brace expressions
        return None

    result: list[str] = []
    for item in items:
        if ".." in item:
            sequence = _expand_sequence(item)
            if sequence is None:
                return None
            result.extend(sequence)
        else:
            result.append(item)
    return result


def _find_group_end(text: str, start: int) -> Optional[int]:
    """Find the '}' closing the group opened at ``start``.

    Returns None if the text ends first, or if another unescaped '{' opens
    before the group closes (nested groups are not supported, the outer
    brace is then literal text).
    """
    for j in range(start + 1, len(text)):
        c = text[j]
        if c == "}":
            return j
        if c == "{" and not escaped_at(text, j):
            return None
    return None


def _is_parameter_brace(text: str, pos: int) -> bool:
    """Check if the '{' at ``pos`` opens a ${...} variable reference."""
    return pos > 0 and text[pos - 1] == "$" and not escaped_at(text, pos - 1)


def expand_braces(text: str) -> list[str]:
    """Expand brace patterns in a string.

    Handles:
    - Comma lists: {a,b,c} -> a b c
    - Numeric sequences: {1..5} -> 1 2 3 4 5, {5..1} -> 5 4 3 2 1
    - Alpha sequences: {a..e} -> a b c d e
    - Mixed lists: {1..3,x} -> 1 2 3 x
    - Prefix/suffix: pre{a,b}suf -> preasuf prebsuf
    - Several groups: {1,2}{a,b} -> 1a 1b 2a 2b

    Invalid groups are kept literally and do not stop other groups in the
    same string from expanding. A '{' that is never closed leaves the whole
    string unchanged.
    """
    segments: list[list[str]] = []
    literal: list[str] = []
    expanded = False
    count = 1

    i = 0
    while i < len(text):
        c = text[i]
        if c != "{" or escaped_at(text, i) or _is_parameter_brace(text, i):
            literal.append(c)
            i += 1
            continue

        end = _find_group_end(text, i)
        if end is None:
            if "}" not in text[i + 1:]:
                # An unbalanced brace disables brace expansion for the whole line
                logger.debug("unbalanced brace at %d in %r", i, text)
                return [text]
            literal.append(c)
            i += 1
            continue

        alternatives = _expand_brace_group(text[i + 1:end])
        if alternatives is None:
            logger.debug("leaving brace group %r literal", text[i:end + 1])
            literal.append(text[i:end + 1])
            i = end + 1
            continue

        count *= len(alternatives)
        if count > MAX_BRACE_RESULTS:
            logger.debug("brace expansion of %r exceeds %d lines", text, MAX_BRACE_RESULTS)
            return [text]

        # Collapse the (even) run of backslashes in front of the group
        prefix = "".join(literal)
        prefix = prefix[:len(prefix) - backslash_run(text, i) // 2]
        segments.append([prefix])
        segments.append(alternatives)
        literal = []
        expanded = True
        i = end + 1

    if not expanded:
        return [text]

    segments.append(["".join(literal)])
    return ["".join(combination) for combination in itertools.product(*segments)]


# --------------------------------------------------------------------------
# History expansion
# --------------------------------------------------------------------------


def expand_history(text: str, history: list[str]) -> str:
    """Replace unescaped !! with the last entry of ``history``.

    After a replacement the scan continues behind the pair, so ``!!!`` is the
    last input followed by a literal '!'. An escaped pair is skipped one
    character at a time, which makes ``\\!!!`` keep ``\\!`` and expand the
    following pair.
    """
    last = history[-1] if history else ""
    out: list[str] = []
    start = 0

    i = text.find(LAST_INPUT)
    while i != -1:
        if escaped_at(text, i):
            i = text.find(LAST_INPUT, i + 1)
            continue
        run = backslash_run(text, i)
        out.append(text[start:max(start, i - run // 2)])
        out.append(last)
        start = i + len(LAST_INPUT)
        i = text.find(LAST_INPUT, start)

    out.append(text[start:])
    return "".join(out)


# --------------------------------------------------------------------------
# Variable expansion
# --------------------------------------------------------------------------


def _expand_braced_variable(body: str, env: "VariableStore") -> Optional[str]:
    """Resolve the body of a ${...} reference, or return None to keep it literal.

    Without a default operator the whole body is the variable name, whatever
    characters it contains. With ``:-`` or ``:=`` the name must be a valid
    identifier; ``:=`` also stores the default when the name was unset.
    """
    operator = _DEFAULT_OPERATOR_RE.search(body)
    if operator is None:
        return env.resolve(body)

    name = body[:operator.start()]
    default = body[operator.end():]
    if not name.isidentifier():
        return None

    value = env.resolve(name)
    if value is not None:
        return value
    if operator.group() == ":=":
        logger.debug("assigning default %r to %s", default, name)
        env[name] = default
    return default


def _expand_variable_at(text: str, pos: int, env: "VariableStore") -> Optional[tuple[str, int]]:
    """Expand the variable reference starting with '$' at ``pos``.

    Returns the value and the index just past the reference, or None if the
    reference is malformed or its variable is not set.
    """
    if text.startswith("${", pos):
        close = text.find("}", pos + 2)
        if close == -1:
            return None
        value = _expand_braced_variable(text[pos + 2:close], env)
        return None if value is None else (value, close + 1)

    match = _NAME_RE.match(text, pos + 1)
    if match is None:
        return None
    value = env.resolve(match.group())
    return None if value is None else (value, match.end())


def expand_variables(text: str, env: "VariableStore") -> str:
    """Replace $name and ${...} references with variable values.

    Substituted values are not scanned again. References to unset variables
    stay literal.
    """
    out: list[str] = []
    start = 0

    i = text.find("$")
    while i != -1:
        if escaped_at(text, i):
            i = text.find("$", i + 1)
            continue
        expansion = _expand_variable_at(text, i, env)
        if expansion is None:
            i = text.find("$", i + 1)
            continue
        value, end = expansion
        run = backslash_run(text, i)
        out.append(text[start:max(start, i - run // 2)])
        out.append(value)
        start = end
        i = text.find("$", end)

    out.append(text[start:])
    return "".join(out)


# --------------------------------------------------------------------------
# Arithmetic expansion
# --------------------------------------------------------------------------


def _find_arithmetic_end(text: str, start: int) -> Optional[int]:
    """Find the closing '))' of an expression starting at ``start``.

    Parentheses inside the expression must balance. Returns the index of the
    first ')' of the closing pair, or None.
    """
    depth = 0
    for j in range(start, len(text)):
        c = text[j]
        if c == "(":
            depth += 1
        elif c == ")":
            if depth == 0:
                return j if text.startswith(")", j + 1) else None
            depth -= 1
    return None


def expand_arithmetic(text: str) -> str:
    """Replace $((expression)) with the value of the expression.

    Expressions are reduced from the rightmost one leftwards, so a nested
    $((...)) is evaluated before the expression that contains it and its
    result becomes a plain number in the outer expression. An expression that
    fails to evaluate stays literal.
    """
    pos = text.rfind("$((")
    while pos != -1:
        if escaped_at(text, pos):
            pos = text.rfind("$((", 0, pos + 2)
            continue

        end = _find_arithmetic_end(text, pos + 3)
        value = try_evaluate(text[pos + 3:end]) if end is not None else None
        if end is None or value is None:
            logger.debug("leaving arithmetic expression at %d literal in %r", pos, text)
            pos = text.rfind("$((", 0, pos + 2)
            continue

        cut = pos - backslash_run(text, pos) // 2
        text = text[:cut] + value + text[end + 2:]
        pos = text.rfind("$((", 0, cut + 2)

    return text


# --------------------------------------------------------------------------
# Pipeline
# --------------------------------------------------------------------------


def expand(state: "InterpreterState", line: str) -> list[str]:
    """Expand one raw input line into the command lines it stands for.

    Brace expansion runs once and may fan the line out; history, variable and
    arithmetic expansion then run in that order over every resulting line.
    Variables must come before arithmetic because $((...)) may contain $name
    references. History is read as it was before ``line`` was entered.

    Never raises; the result always holds at least one line.
    """
    lines = []
    for candidate in expand_braces(line):
        candidate = expand_history(candidate, state.history)
        candidate = expand_variables(candidate, state.env)
        candidate = expand_arithmetic(candidate)
        lines.append(strip_escapes(candidate))
    logger.debug("expanded %r into %r", line, lines)
    return lines
