"""Errors raised while generating field accessors.

Every error aborts the run. The CLI catches GenerationError, logs it and
exits non-zero.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all generator failures."""


class ParseError(GenerationError):
    """The target source file is not valid Go."""


class MalformedTagError(GenerationError):
    """A tagged string field whose tag has no key token."""


class FormatError(GenerationError):
    """Rendered output could not be canonicalized."""


class WriteError(GenerationError):
    """The output file could not be written."""
