from pathlib import Path

from dgs_codegen import log
from dgs_codegen.errors import ErrorMessages, GeneratorIOError
from dgs_codegen.generators.java.models import GeneratedArtifact
from dgs_codegen.generators.java.naming import package_to_path
from dgs_codegen.generators.java.renderer import JavaRenderer

JAVA_FILE_EXTENSION = ".java"


def artifact_path(artifact: GeneratedArtifact, output_dir: Path) -> Path:
    """``com.example.types.User`` under ``out`` -> ``out/com/example/types/User.java``."""
    return output_dir / package_to_path(artifact.package) / f"{artifact.name}{JAVA_FILE_EXTENSION}"


class JavaFileWriter:
    """Writes rendered artifacts below an output directory, one file per artifact.

    Package directories are created on demand and existing files are overwritten.
    """

    def __init__(self, output_dir: Path, renderer: JavaRenderer | None = None):
        self.output_dir = output_dir
        self.renderer = renderer or JavaRenderer()

    def write(self, artifact: GeneratedArtifact) -> Path:
        target_file = artifact_path(artifact, self.output_dir)
        content = self.renderer.render(artifact)

        try:
            target_file.parent.mkdir(parents=True, exist_ok=True)
            target_file.write_text(content, encoding="utf-8")
        except OSError as e:
            raise GeneratorIOError(f"{ErrorMessages.WRITE_FAILED} '{target_file}': {e}") from e

        log.debug(f"Wrote {target_file}")
        return target_file
