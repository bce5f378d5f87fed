from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dgs_codegen import log
from dgs_codegen.errors import ConfigurationError, ErrorMessages
from dgs_codegen.generators.java.naming import is_java_package_name

SCHEMA_FILE_EXTENSION = ".graphqls"
DEFAULT_SCHEMA_DIR = Path("src/main/resources/schema")
BOOTSTRAP_SCHEMA_FILE = "codegen.graphqls"
DEFAULT_EXCLUDE_FILES = frozenset({BOOTSTRAP_SCHEMA_FILE})

TYPES_SUBPACKAGE = "types"
FETCHERS_SUBPACKAGE = "fetchers"


class GeneratorConfig(BaseModel):
    """Settings for one generator run, shared read-only by every pipeline stage.

    Field aliases match the invocation keys (``--schemaDir=...``), so the model can be
    populated straight from parsed key=value arguments or from a YAML file.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    schema_dir: Path = Field(alias="schemaDir")
    output_dir: Path = Field(alias="outputDir")
    package_name: str = Field(alias="packageName")
    exclude_files: frozenset[str] = Field(default=DEFAULT_EXCLUDE_FILES, alias="excludeFiles")

    @field_validator("schema_dir", "output_dir", mode="before")
    @classmethod
    def reject_blank_path(cls, path: Any) -> Any:
        # Path("") would silently mean the current directory
        if isinstance(path, str) and not path.strip():
            raise ValueError(ErrorMessages.MISSING_PARAMETER)
        return path

    @field_validator("package_name")
    @classmethod
    def validate_package_name(cls, package_name: str) -> str:
        package_name = package_name.strip()
        if not is_java_package_name(package_name):
            raise ValueError(f"{ErrorMessages.INVALID_PACKAGE_NAME}: '{package_name}'")
        return package_name

    @field_validator("exclude_files", mode="before")
    @classmethod
    def split_exclude_files(cls, exclude_files: Any) -> Any:
        if exclude_files is None:
            return DEFAULT_EXCLUDE_FILES
        if isinstance(exclude_files, str):
            exclude_files = exclude_files.split(",")
        if isinstance(exclude_files, Iterable):
            names = {str(name).strip() for name in exclude_files} - {""}
            return frozenset(names) if names else DEFAULT_EXCLUDE_FILES
        return exclude_files

    @property
    def types_package(self) -> str:
        return f"{self.package_name}.{TYPES_SUBPACKAGE}"

    @property
    def fetchers_package(self) -> str:
        return f"{self.package_name}.{FETCHERS_SUBPACKAGE}"


def parse_key_value_args(args: Iterable[str]) -> dict[str, str]:
    """Extract ``--key=value`` pairs from raw command line arguments.

    Arguments without ``=`` are ignored, leading dashes are stripped from the key
    and only the first ``=`` separates key from value.

    Args:
        args: Raw arguments, e.g. ``["--schemaDir=src/schema", "--packageName=com.example"]``

    Returns:
        Mapping of key to value; a repeated key keeps its last value
    """
    values: dict[str, str] = {}
    for arg in args:
        if "=" not in arg:
            continue
        key, value = arg.split("=", 1)
        values[key.lstrip("-")] = value
    return values


def load_config_file(config_path: Path) -> dict[str, Any]:
    """Load generator settings from a YAML file using the invocation keys."""
    try:
        with open(config_path, encoding="utf-8") as config_file:
            content = yaml.safe_load(config_file)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"{ErrorMessages.INVALID_CONFIG_FILE} '{config_path}': {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"{ErrorMessages.INVALID_CONFIG_FILE} '{config_path}': expected a mapping")

    log.debug(f"Loaded configuration from {config_path}")
    return content


def build_config(values: dict[str, Any]) -> GeneratorConfig:
    """Validate raw settings into a GeneratorConfig.

    Args:
        values: Settings keyed by invocation key (schemaDir, outputDir, packageName, excludeFiles)

    Returns:
        The immutable configuration for the run

    Raises:
        ConfigurationError: If a required key is missing or a value is invalid
    """
    try:
        config = GeneratorConfig.model_validate(values)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            key = ".".join(str(part) for part in error["loc"])
            if error["type"] == "missing":
                problems.append(f"{ErrorMessages.MISSING_PARAMETER}: {key}")
            else:
                problems.append(f"{key}: {error['msg']}")
        raise ConfigurationError("; ".join(problems)) from e

    log.debug(f"Excluding files: {sorted(config.exclude_files)}")
    return config
