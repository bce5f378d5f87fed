from pathlib import Path

import pytest

from dgs_codegen.config import GeneratorConfig

PACKAGE_NAME = "com.example.demo"


class TestSchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    SCHEMA_DIR: Path = TESTS_DATA_DIR / "schema"
    USER_SCHEMA: Path = SCHEMA_DIR / "user.graphqls"
    ORDER_SCHEMA: Path = SCHEMA_DIR / "orders" / "order.graphqls"
    BOOTSTRAP_SCHEMA: Path = SCHEMA_DIR / "codegen.graphqls"

    # Expected Java sources for user.graphqls with package com.example.demo
    EXPECTED_DIR: Path = TESTS_DATA_DIR / "expected"


@pytest.fixture
def config(tmp_path: Path) -> GeneratorConfig:
    return GeneratorConfig(
        schema_dir=TestSchemaData.SCHEMA_DIR,
        output_dir=tmp_path / "generated",
        package_name=PACKAGE_NAME,
    )


@pytest.fixture
def schema_dir(tmp_path: Path) -> Path:
    """An empty schema directory that tests fill with their own files."""
    directory = tmp_path / "schema"
    directory.mkdir()
    return directory

