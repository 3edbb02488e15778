"""Canonical formatting pass for rendered Go source.

The template is written in gofmt style, so the built-in pass only has to
check the syntax and normalize the blank lines and trailing whitespace
that template rendering leaves behind. Passing a gofmt executable pipes
the text through it instead.
"""

from __future__ import annotations

import subprocess

from .errors import FormatError
from .loader import first_error, new_parser

_OPENERS = ("{", "(")
_CLOSERS = ("}", ")")


def check_syntax(text: str, filename: str = "<generated>") -> None:
    """Raise FormatError if text does not parse as Go."""
    tree = new_parser().parse(text.encode())
    bad = first_error(tree.root_node)
    if bad is not None:
        line, column = bad.start_point
        raise FormatError(f"{filename}:{line + 1}:{column + 1}: syntax error in generated source")


def normalize_whitespace(text: str) -> str:
    """Normalize blank lines and line endings the way gofmt would."""
    lines: list[str] = []
    for raw in text.splitlines():
        line = raw.rstrip()
        if not line:
            # no leading blanks, no runs, none right after an opener
            if not lines or not lines[-1] or lines[-1].endswith(_OPENERS):
                continue
        elif line.lstrip().startswith(_CLOSERS) and lines and not lines[-1]:
            lines.pop()
        lines.append(line)
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines) + "\n"


def run_gofmt(text: str, gofmt: str) -> str:
    """Format text with an external gofmt executable."""
    try:
        proc = subprocess.run(
            [gofmt],
            input=text,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise FormatError(f"cannot run {gofmt}: {e}") from e
    if proc.returncode != 0:
        raise FormatError(proc.stderr.strip() or f"{gofmt} exited with status {proc.returncode}")
    return proc.stdout


def format_source(text: str, gofmt: str | None = None, filename: str = "<generated>") -> str:
    """Return the canonical form of rendered Go source."""
    if gofmt:
        return run_gofmt(text, gofmt)
    check_syntax(text, filename)
    return normalize_whitespace(text)
