import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import rich_click as click
from rich.traceback import install

from dgs_codegen import __version__, log
from dgs_codegen.config import DEFAULT_SCHEMA_DIR, GeneratorConfig, build_config, load_config_file, parse_key_value_args
from dgs_codegen.errors import CodegenError
from dgs_codegen.generators.dgs import GenerationResult, generate_dgs_sources
from dgs_codegen.scaffold import create_bootstrap_schema

schema_dir_option = click.option(
    "--schemaDir",
    "schema_dir",
    type=click.Path(path_type=Path),
    help="Directory containing GraphQL schema files (*.graphqls), searched recursively.",
)


def run_generation(config: GeneratorConfig) -> GenerationResult:
    log.rule("DGS code generation")
    log.key_value("Schema directory", config.schema_dir)
    log.key_value("Output directory", config.output_dir)
    log.key_value("Package", config.package_name)

    result = generate_dgs_sources(config)

    for written_file in result.written_files:
        log.list_item(str(written_file))
    log.success(f"Generated {len(result.written_files)} Java files from {len(result.schema_files)} schema files")
    return result


def main_from_args(args: Sequence[str]) -> int:
    """Run the generator from raw ``--key=value`` arguments.

    Args:
        args: Arguments such as ``["--schemaDir=src/main/resources/schema", "--outputDir=build/gen",
            "--packageName=com.example"]``; ``--excludeFiles=a.graphqls,b.graphqls`` is optional

    Returns:
        Process exit code: 0 on success, 1 on any generator error
    """
    try:
        run_generation(build_config(parse_key_value_args(args)))
    except CodegenError as e:
        log.error(str(e))
        return 1
    return 0


@click.group(context_settings={"auto_envvar_prefix": "DGS_CODEGEN"})
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(log_level: str, log_file: Path | None) -> None:
    """Generate Netflix DGS data fetcher interfaces and data classes from GraphQL schema files."""
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


@click.command()
@schema_dir_option
@click.option(
    "--outputDir",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory where generated Java files are written.",
)
@click.option(
    "--packageName",
    "package_name",
    type=str,
    help="Base package; classes go to <package>.types and fetchers to <package>.fetchers.",
)
@click.option(
    "--excludeFiles",
    "exclude_files",
    type=str,
    help="Comma-separated schema file names to skip.",
    show_default="codegen.graphqls",
)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with schemaDir, outputDir, packageName and excludeFiles; options given here win.",
)
def generate(
    schema_dir: Path | None,
    output_dir: Path | None,
    package_name: str | None,
    exclude_files: str | None,
    config_file: Path | None,
) -> None:
    """Generate DGS Java sources from every schema file in the schema directory."""
    options: dict[str, Any] = {
        "schemaDir": schema_dir,
        "outputDir": output_dir,
        "packageName": package_name,
        "excludeFiles": exclude_files,
    }
    try:
        values = load_config_file(config_file) if config_file else {}
        values.update({key: value for key, value in options.items() if value is not None})
        run_generation(build_config(values))
    except CodegenError as e:
        log.error(str(e))
        sys.exit(1)


@click.command()
@click.option(
    "--schemaDir",
    "schema_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_SCHEMA_DIR,
    help="Directory to create the base schema file in.",
    show_default=True,
)
def init(schema_dir: Path) -> None:
    """Create the base codegen.graphqls schema file declaring the root Query and Mutation types."""
    try:
        target_file, created = create_bootstrap_schema(schema_dir)
    except CodegenError as e:
        log.error(str(e))
        sys.exit(1)

    if created:
        log.success(f"Created {target_file}")
    else:
        log.hint(f"{target_file} already exists, left unchanged")


cli.add_command(generate)
cli.add_command(init)

if __name__ == "__main__":
    cli()
