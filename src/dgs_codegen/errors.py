from pathlib import Path


class CodegenError(Exception):
    """Base class for every error raised by the DGS code generator.

    The CLI catches this type, reports the message and exits with a non-zero
    status. Anything else escaping the pipeline is a bug.
    """


class ConfigurationError(CodegenError):
    """Raised when invocation parameters are missing or invalid, or the schema directory is unusable."""


class SchemaParseError(CodegenError):
    """Raised when a schema file is not valid GraphQL SDL."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{ErrorMessages.INVALID_SDL} '{path}': {message}")


class UnknownTypeShapeError(CodegenError):
    """Raised when a GraphQL type reference does not unwrap to a named type."""


class DuplicateFieldError(CodegenError):
    """Raised when a field name appears more than once within one type."""

    def __init__(self, type_name: str, field_name: str) -> None:
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(f"{ErrorMessages.DUPLICATE_FIELD}: '{type_name}.{field_name}'")


class DuplicateTypeError(CodegenError):
    """Raised when one name is defined as both an object type and an input type."""

    def __init__(self, type_name: str, kinds: tuple[str, str]) -> None:
        self.type_name = type_name
        super().__init__(f"{ErrorMessages.DUPLICATE_TYPE}: '{type_name}' is defined as {kinds[0]} and {kinds[1]}")


class InvalidJavaNameError(CodegenError):
    """Raised when a generated class, member or package name is not a legal Java identifier."""


class GeneratorIOError(CodegenError):
    """Raised when reading a schema file or writing a generated file fails."""


# Error message constants for consistent messaging and testability
class ErrorMessages:
    """Standard error messages for generator exceptions."""

    MISSING_PARAMETER = "Missing required parameter"
    SCHEMA_DIR_NOT_FOUND = "Schema directory does not exist"
    SCHEMA_DIR_NOT_A_DIRECTORY = "Schema directory is not a directory"
    INVALID_CONFIG_FILE = "Invalid configuration file"
    INVALID_SDL = "Invalid GraphQL SDL in"
    UNKNOWN_TYPE_SHAPE = "Unknown type"
    DUPLICATE_FIELD = "Duplicate field"
    DUPLICATE_TYPE = "Conflicting type definitions"
    INVALID_JAVA_NAME = "Not a valid Java identifier"
    INVALID_PACKAGE_NAME = "Not a valid Java package name"
    READ_FAILED = "Failed to read schema file"
    WRITE_FAILED = "Failed to write generated file"
