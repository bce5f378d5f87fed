from pathlib import Path

from dgs_codegen import log
from dgs_codegen.config import BOOTSTRAP_SCHEMA_FILE
from dgs_codegen.errors import ErrorMessages, GeneratorIOError

BOOTSTRAP_TEMPLATE_PATH = Path(__file__).parent / "resources" / "codegen.graphqls.template"


def create_bootstrap_schema(schema_dir: Path) -> tuple[Path, bool]:
    """Create the base ``codegen.graphqls`` in the schema directory unless it already exists.

    The file only declares the empty root types that other schema files extend. It is
    excluded from generation by default.

    Args:
        schema_dir: Schema directory, created if missing

    Returns:
        The path of the bootstrap file and whether it was created by this call
    """
    target_file = schema_dir / BOOTSTRAP_SCHEMA_FILE
    if target_file.exists():
        log.info(f"Base GraphQL schema file already exists at: {target_file}")
        return target_file, False

    try:
        template = BOOTSTRAP_TEMPLATE_PATH.read_text(encoding="utf-8")
        schema_dir.mkdir(parents=True, exist_ok=True)
        target_file.write_text(template, encoding="utf-8")
    except OSError as e:
        raise GeneratorIOError(f"{ErrorMessages.WRITE_FAILED} '{target_file}': {e}") from e

    log.info(f"Created base GraphQL schema file at: {target_file}")
    return target_file, True
