import re
from pathlib import Path

from dgs_codegen.errors import ErrorMessages, InvalidJavaNameError

JAVA_RESERVED_KEYWORDS = {
    "_",
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "true",
    "try",
    "void",
    "volatile",
    "while",
}

_JAVA_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_java_identifier(name: str) -> bool:
    return bool(_JAVA_IDENTIFIER_RE.match(name)) and name not in JAVA_RESERVED_KEYWORDS


def ensure_java_identifier(name: str, element: str) -> str:
    """Return the name unchanged, or raise if Java would reject it.

    Args:
        name: Candidate identifier
        element: What is being named (class, field, parameter, method), for the error message

    Raises:
        InvalidJavaNameError: If the name is empty, malformed or a reserved keyword
    """
    if not is_java_identifier(name):
        raise InvalidJavaNameError(f"{ErrorMessages.INVALID_JAVA_NAME} for {element}: '{name}'")
    return name


def is_java_package_name(name: str) -> bool:
    return all(is_java_identifier(segment) for segment in name.split("."))


def capitalize(name: str) -> str:
    """Upper-case the first character and leave the rest untouched (``userProfile`` -> ``UserProfile``)."""
    return name[:1].upper() + name[1:]


def package_to_path(package: str) -> Path:
    return Path(*package.split("."))
