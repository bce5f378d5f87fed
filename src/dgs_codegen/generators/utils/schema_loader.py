from collections.abc import Collection
from pathlib import Path

from ariadne import load_schema_from_path
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import DocumentNode, Source, parse

from dgs_codegen import log
from dgs_codegen.config import SCHEMA_FILE_EXTENSION
from dgs_codegen.errors import ConfigurationError, ErrorMessages, GeneratorIOError, SchemaParseError


def ensure_schema_dir(schema_dir: Path) -> None:
    """Raise ConfigurationError unless ``schema_dir`` is an existing directory."""
    if not schema_dir.exists():
        raise ConfigurationError(f"{ErrorMessages.SCHEMA_DIR_NOT_FOUND}: {schema_dir}")
    if not schema_dir.is_dir():
        raise ConfigurationError(f"{ErrorMessages.SCHEMA_DIR_NOT_A_DIRECTORY}: {schema_dir}")


def resolve_schema_files(schema_dir: Path, exclude_files: Collection[str]) -> list[Path]:
    """Find the schema files to generate from under a directory tree.

    Args:
        schema_dir: Root directory, searched recursively
        exclude_files: File names (not paths) to skip

    Returns:
        Regular files ending in ``.graphqls`` whose name is not excluded, sorted by
        their path relative to ``schema_dir``
    """
    ensure_schema_dir(schema_dir)

    schema_files: list[Path] = []
    for path in schema_dir.rglob(f"*{SCHEMA_FILE_EXTENSION}"):
        if not path.is_file():
            continue
        if path.name in exclude_files:
            log.debug(f"Excluding {path}")
            continue
        schema_files.append(path)

    return sorted(schema_files, key=lambda path: path.relative_to(schema_dir).as_posix())


def load_schema_document(schema_file: Path) -> DocumentNode:
    """Read one schema file and parse it into a document.

    Raises:
        SchemaParseError: If the file is not valid SDL
        GeneratorIOError: If the file cannot be read
    """
    try:
        content = load_schema_from_path(schema_file)
    except GraphQLFileSyntaxError as e:
        raise SchemaParseError(schema_file, str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise GeneratorIOError(f"{ErrorMessages.READ_FAILED} '{schema_file}': {e}") from e

    # syntax already validated by the loader
    document = parse(Source(content, str(schema_file)))

    log.debug(f"Parsed {len(document.definitions)} definitions from {schema_file}")
    return document
