from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Literal

from graphql import (
    DocumentNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InputValueDefinitionNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
)

from dgs_codegen import log
from dgs_codegen.errors import DuplicateFieldError, DuplicateTypeError
from dgs_codegen.generators.utils.graphql_type import is_root_operation_type

TypeKind = Literal["object", "input"]
ObjectLikeNode = ObjectTypeDefinitionNode | ObjectTypeExtensionNode


@dataclass
class CollectedType:
    """A named object or input type with the fields gathered from its definition and same-file extensions."""

    name: str
    kind: TypeKind
    fields: list[FieldDefinitionNode | InputValueDefinitionNode] = field(default_factory=list)

    @property
    def is_input(self) -> bool:
        return self.kind == "input"

    def add_fields(self, fields: tuple[FieldDefinitionNode | InputValueDefinitionNode, ...] | None) -> None:
        seen = {existing.name.value for existing in self.fields}
        for field_node in fields or ():
            field_name = field_node.name.value
            if field_name in seen:
                raise DuplicateFieldError(self.name, field_name)
            seen.add(field_name)
            self.fields.append(field_node)


def _kind_of(node: object) -> TypeKind | None:
    if isinstance(node, ObjectTypeDefinitionNode | ObjectTypeExtensionNode):
        return "object"
    if isinstance(node, InputObjectTypeDefinitionNode | InputObjectTypeExtensionNode):
        return "input"
    return None


def collect_data_types(document: DocumentNode) -> list[CollectedType]:
    """
    Collects the object and input types of one document that become data classes.

    Types named Query or Mutation are skipped. Extensions (``extend type X``) are merged
    into a definition of ``X`` in the same document; an extension whose base type lives
    elsewhere is skipped, so it never replaces the class generated for the real type.
    Every other definition kind is ignored.

    Args:
        document: Parsed schema document.
    Returns:
        list[CollectedType]: Types in order of their definition in the document.
    Raises:
        DuplicateFieldError: If a field name repeats within one type.
        DuplicateTypeError: If a name is defined as both an object type and an input type.
    """
    collected: dict[str, CollectedType] = {}

    for definition in document.definitions:
        kind = _kind_of(definition)
        if kind is None or isinstance(definition, ObjectTypeExtensionNode | InputObjectTypeExtensionNode):
            continue
        name = definition.name.value
        if is_root_operation_type(name):
            continue
        target = collected.setdefault(name, CollectedType(name, kind))
        if target.kind != kind:
            raise DuplicateTypeError(name, (target.kind, kind))
        target.add_fields(definition.fields)

    for extension in document.definitions:
        if not isinstance(extension, ObjectTypeExtensionNode | InputObjectTypeExtensionNode):
            continue
        name = extension.name.value
        if is_root_operation_type(name):
            continue
        target = collected.get(name)
        if target is None or target.kind != _kind_of(extension):
            log.debug(f"Skipping extension of '{name}': no matching definition in this file")
            continue
        target.add_fields(extension.fields)

    return list(collected.values())


def iter_root_operation_types(document: DocumentNode) -> Iterator[ObjectLikeNode]:
    """Yield every ``type Query``/``type Mutation`` definition or extension, in document order."""
    for definition in document.definitions:
        if isinstance(definition, ObjectTypeDefinitionNode | ObjectTypeExtensionNode) and is_root_operation_type(
            definition.name.value
        ):
            yield definition
