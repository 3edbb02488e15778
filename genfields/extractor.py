"""Extract tagged string fields from top-level struct declarations.

A field is selected when it has a name, a tag, and the plain `string` type.
Pointer, slice, qualified and named string types are skipped, as are
embedded fields. For `A, B string` only A is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from tree_sitter import Node

from .loader import ParsedFile
from .naming import tag_key

STRING_TYPE = "string"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """A struct field and the API key its accessor fetches."""

    name: str
    key: str


def _type_specs(root: Node) -> Iterator[Node]:
    """Yield type_spec and type_alias nodes of top-level type declarations."""
    for decl in root.named_children:
        if decl.type != "type_declaration":
            continue
        for spec in decl.named_children:
            if spec.type in ("type_spec", "type_alias"):
                yield spec


def _struct_fields(spec: Node) -> Iterator[Node]:
    struct = spec.child_by_field_name("type")
    if struct is None or struct.type != "struct_type":
        return
    for field_list in struct.named_children:
        if field_list.type != "field_declaration_list":
            continue
        for field in field_list.named_children:
            if field.type == "field_declaration":
                yield field


def _is_plain_string(type_node: Node | None) -> bool:
    return (
        type_node is not None
        and type_node.type == "type_identifier"
        and type_node.text.decode() == STRING_TYPE
    )


def field_descriptor(field: Node) -> FieldDescriptor | None:
    """Return the descriptor for a field_declaration node, or None if skipped."""
    names = field.children_by_field_name("name")
    tag = field.child_by_field_name("tag")
    if not names or tag is None:
        return None
    if not _is_plain_string(field.child_by_field_name("type")):
        return None
    return FieldDescriptor(name=names[0].text.decode(), key=tag_key(tag.text.decode()))


def extract_fields(parsed: ParsedFile) -> list[FieldDescriptor]:
    """Return the descriptors of one file in declaration order."""
    fields: list[FieldDescriptor] = []
    for spec in _type_specs(parsed.root):
        for field in _struct_fields(spec):
            descriptor = field_descriptor(field)
            if descriptor is None:
                continue
            logger.debug("%s: field %s -> %r", parsed.filename, descriptor.name, descriptor.key)
            fields.append(descriptor)
    return fields


def collect_fields(files: Iterable[ParsedFile]) -> list[FieldDescriptor]:
    """Accumulate descriptors across the files of one package."""
    fields: list[FieldDescriptor] = []
    for parsed in files:
        fields.extend(extract_fields(parsed))
    return fields
