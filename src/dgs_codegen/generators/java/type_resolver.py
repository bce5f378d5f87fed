from dataclasses import dataclass

from graphql import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode

from dgs_codegen.config import TYPES_SUBPACKAGE
from dgs_codegen.errors import ErrorMessages, UnknownTypeShapeError
from dgs_codegen.generators.java.models import JavaTypeRef
from dgs_codegen.generators.java.naming import ensure_java_identifier
from dgs_codegen.generators.utils.graphql_type import is_builtin_scalar_type

JAVA_STRING = JavaTypeRef(simple_name="String", package="java.lang")
JAVA_INT = JavaTypeRef(simple_name="int")
JAVA_DOUBLE = JavaTypeRef(simple_name="double")
JAVA_BOOLEAN = JavaTypeRef(simple_name="boolean")

GRAPHQL_SCALAR_TO_JAVA = {
    "String": JAVA_STRING,
    "ID": JAVA_STRING,
    "Int": JAVA_INT,
    "Float": JAVA_DOUBLE,
    "Boolean": JAVA_BOOLEAN,
}


@dataclass(frozen=True)
class ResolvedType:
    """The innermost named type of a reference and whether the reference itself is non-null."""

    name: str
    non_null: bool


def unwrap_type_name(type_node: TypeNode) -> str:
    """Strip every ``!`` and ``[...]`` wrapper and return the named type at the bottom.

    Raises:
        UnknownTypeShapeError: If the chain ends in anything but a named type
    """
    if isinstance(type_node, NonNullTypeNode | ListTypeNode):
        return unwrap_type_name(type_node.type)
    if isinstance(type_node, NamedTypeNode):
        return type_node.name.value
    raise UnknownTypeShapeError(f"{ErrorMessages.UNKNOWN_TYPE_SHAPE}: {type_node!r}")


def resolve(type_node: TypeNode) -> ResolvedType:
    """
    Resolve a type reference to its base name and required-ness.

    Only the outermost wrapper decides ``non_null``: ``String!`` and ``[String]!`` are
    non-null, ``[String!]`` is not.

    Args:
        type_node: Declared type of a field or argument.
    Returns:
        ResolvedType: Base type name and outer non-null flag.
    """
    return ResolvedType(unwrap_type_name(type_node), isinstance(type_node, NonNullTypeNode))


def map_to_target_type(base_name: str, base_package: str) -> JavaTypeRef:
    """Map a GraphQL base type name to the Java type used in generated code.

    Built-in scalars map to fixed Java types. Any other name refers to a class in the
    generated ``{base_package}.types`` package; whether that class exists is left to the Java compiler.
    """
    if is_builtin_scalar_type(base_name):
        return GRAPHQL_SCALAR_TO_JAVA[base_name]
    return JavaTypeRef(
        simple_name=ensure_java_identifier(base_name, "type"), package=f"{base_package}.{TYPES_SUBPACKAGE}"
    )


def resolve_java_type(type_node: TypeNode, base_package: str) -> tuple[JavaTypeRef, bool]:
    """Resolve a declared type straight to ``(java type, non_null)``."""
    resolved = resolve(type_node)
    return map_to_target_type(resolved.name, base_package), resolved.non_null
