"""Build the Jinja2 template context for one package.

Extracts the fields of every parsed file of the package and turns each
into a getter definition for fields.go.j2.
"""

from __future__ import annotations

import datetime
from typing import Any, Iterable

from .extractor import FieldDescriptor, collect_fields
from .loader import ParsedFile
from .naming import getter_name, output_filename, request_name


def build_getter(field: FieldDescriptor) -> dict[str, str]:
    """Build one getter definition from a field descriptor."""
    return {
        "field_name": field.name,
        "field_tag": field.key,
        "func_name": getter_name(field.name),
        "request_name": request_name(field.name),
    }


def build_context(
    package: str,
    files: Iterable[ParsedFile],
    year: int | None = None,
) -> dict[str, Any]:
    """Build the full template context for a package."""
    getters = [build_getter(field) for field in collect_fields(files)]
    return {
        "package": package,
        "year": year if year is not None else datetime.date.today().year,
        "filename": output_filename(package),
        "getters": getters,
        "getter_count": len(getters),
    }
