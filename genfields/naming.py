"""Names derived from a struct field: accessors, helpers, output file.

Pattern: Get{FieldName} for the accessor, request{FieldName} for the
unexported helper that performs the HTTP call.

Examples:
  Hostname string `json:"hostname"`  -> GetHostname, key "hostname"
  Org      string `json:"org"`       -> GetOrg, key "org"
  package ipinfo                     -> ipinfo-fields.go
"""

from __future__ import annotations

from itertools import groupby

from .errors import MalformedTagError

FILE_SUFFIX = "-fields.go"
GETTER_PREFIX = "Get"
REQUEST_PREFIX = "request"


def _is_word_char(c: str) -> bool:
    return c.isalpha() or c.isnumeric()


def tag_tokens(tag: str) -> list[str]:
    """Split a raw tag literal on every non-letter, non-number character.

    `json:"hostname"` -> ["json", "hostname"]
    """
    return ["".join(run) for is_word, run in groupby(tag, key=_is_word_char) if is_word]


def tag_key(tag: str) -> str:
    """Return the lookup key of a struct tag: its second token."""
    tokens = tag_tokens(tag)
    if len(tokens) < 2:
        raise MalformedTagError(f"struct tag {tag} has no key")
    return tokens[1]


def getter_name(field_name: str) -> str:
    """Build the exported accessor name for a field."""
    return GETTER_PREFIX + field_name


def request_name(field_name: str) -> str:
    """Build the unexported request helper name for a field."""
    return REQUEST_PREFIX + field_name


def output_filename(package: str) -> str:
    """Return the generated file name for a package."""
    return package + FILE_SUFFIX
