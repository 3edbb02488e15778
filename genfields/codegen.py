"""Render the getter template and write the generated Go file.

Takes a context from context_builder and produces <package>-fields.go.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from .errors import WriteError
from .formatter import format_source

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "fields.go.j2"

logger = logging.getLogger(__name__)


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render(context: dict[str, Any]) -> str:
    """Render fields.go.j2 with the given context, unformatted."""
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(**context)


def generate(
    context: dict[str, Any],
    output_dir: Path | str = ".",
    gofmt: str | None = None,
) -> Path | None:
    """Render, format and write <package>-fields.go.

    Returns the written path, or None when the package has no getters.
    """
    filename = context["filename"]
    if context["getter_count"] == 0:
        logger.info("No getters for %s; skipping.", filename)
        return None

    clean = format_source(render(context), gofmt=gofmt, filename=filename)

    output_path = Path(output_dir) / filename
    logger.info("Writing %s...", output_path)
    try:
        output_path.write_text(clean, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"cannot write {output_path}: {e}") from e
    return output_path
