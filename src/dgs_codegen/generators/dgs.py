from dataclasses import dataclass, field
from pathlib import Path

from dgs_codegen import log
from dgs_codegen.config import GeneratorConfig
from dgs_codegen.generators.java.fetcher_emitter import FetcherEmitter
from dgs_codegen.generators.java.type_emitter import TypeEmitter
from dgs_codegen.generators.java.writer import JavaFileWriter
from dgs_codegen.generators.utils.schema_loader import load_schema_document, resolve_schema_files


@dataclass
class GenerationResult:
    schema_files: list[Path] = field(default_factory=list)
    written_files: list[Path] = field(default_factory=list)


def generate_for_schema_file(schema_file: Path, config: GeneratorConfig, writer: JavaFileWriter) -> list[Path]:
    """
    Run the pipeline for one schema file: data classes first, then the fetcher interface.

    Each artifact is written as soon as it is built.

    Args:
        schema_file: The ``.graphqls`` file to process
        config: Run configuration
        writer: Writer bound to the output directory

    Returns:
        list[Path]: Files written for this schema file
    """
    log.info(f"Processing {schema_file}")
    document = load_schema_document(schema_file)

    written = [writer.write(java_class) for java_class in TypeEmitter(config).emit(document, schema_file.name)]
    written.append(writer.write(FetcherEmitter(config).emit(document, schema_file.name)))
    return written


def generate_dgs_sources(config: GeneratorConfig) -> GenerationResult:
    """
    Generate DGS data classes and fetcher interfaces for every schema file under ``config.schema_dir``.

    Files are processed one after another in sorted order; the first error aborts the run.

    Args:
        config: Run configuration

    Returns:
        GenerationResult: The schema files processed and the Java files written

    Raises:
        ConfigurationError: If the schema directory is missing or not a directory
        SchemaParseError: If a schema file is not valid SDL
        GeneratorIOError: If a file cannot be read or written
    """
    schema_files = resolve_schema_files(config.schema_dir, config.exclude_files)
    log.info(f"Found {len(schema_files)} schema files in {config.schema_dir}")

    writer = JavaFileWriter(config.output_dir)
    result = GenerationResult(schema_files=schema_files)
    written_by: dict[Path, Path] = {}

    for schema_file in schema_files:
        for written_file in generate_for_schema_file(schema_file, config, writer):
            previous = written_by.get(written_file)
            if previous is not None and previous != schema_file:
                log.warning(f"{written_file} from {schema_file} overwrites the one generated from {previous}")
            written_by[written_file] = schema_file
            if written_file not in result.written_files:
                result.written_files.append(written_file)

    log.info(f"Generated {len(result.written_files)} Java files in {config.output_dir}")
    return result
