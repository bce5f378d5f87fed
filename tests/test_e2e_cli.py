import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from dgs_codegen import __version__
from dgs_codegen.cli import cli, main_from_args
from tests.conftest import TestSchemaData

EXPECTED_FILES = ["User.java", "UserCreateInput.java", "UserFetcher.java"]


@pytest.fixture(scope="module")
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def user_schema_dir(schema_dir: Path) -> Path:
    shutil.copy(TestSchemaData.USER_SCHEMA, schema_dir)
    shutil.copy(TestSchemaData.BOOTSTRAP_SCHEMA, schema_dir)
    return schema_dir


def generated_java_files(output_dir: Path) -> dict[str, str]:
    return {path.name: path.read_text(encoding="utf-8") for path in output_dir.rglob("*.java")}


def assert_expected_sources(output_dir: Path) -> None:
    generated = generated_java_files(output_dir)
    assert sorted(generated) == EXPECTED_FILES
    for name in EXPECTED_FILES:
        assert generated[name] == (TestSchemaData.EXPECTED_DIR / name).read_text(encoding="utf-8"), name


def test_generate(runner: CliRunner, user_schema_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    result = runner.invoke(
        cli,
        ["generate", "--schemaDir", str(user_schema_dir), "--outputDir", str(out), "--packageName", "com.example.demo"],
    )
    assert result.exit_code == 0, result.output
    assert "Generated 3 Java files from 1 schema files" in result.output
    assert_expected_sources(out)


def test_generate_with_config_file(runner: CliRunner, user_schema_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    config_file = tmp_path / "codegen.yaml"
    config_file.write_text(
        f"schemaDir: {user_schema_dir}\noutputDir: {tmp_path / 'ignored'}\npackageName: com.example.demo\n",
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["generate", "-c", str(config_file), "--outputDir", str(out)])

    assert result.exit_code == 0, result.output
    assert_expected_sources(out)
    assert not (tmp_path / "ignored").exists()


def test_generate_exclude_files(runner: CliRunner, user_schema_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    result = runner.invoke(
        cli,
        [
            "generate",
            "--schemaDir",
            str(user_schema_dir),
            "--outputDir",
            str(out),
            "--packageName",
            "com.example.demo",
            "--excludeFiles",
            "codegen.graphqls,user.graphqls",
        ],
    )
    assert result.exit_code == 0, result.output
    assert generated_java_files(out) == {}


def test_generate_missing_schema_dir(runner: CliRunner, tmp_path: Path) -> None:
    out = tmp_path / "out"
    result = runner.invoke(
        cli,
        [
            "generate",
            "--schemaDir",
            str(tmp_path / "absent"),
            "--outputDir",
            str(out),
            "--packageName",
            "com.example.demo",
        ],
    )
    assert result.exit_code == 1
    assert "Schema directory does not exist" in result.output
    assert not out.exists()


def test_generate_missing_parameter(runner: CliRunner, user_schema_dir: Path) -> None:
    result = runner.invoke(cli, ["generate", "--schemaDir", str(user_schema_dir), "--packageName", "com.example"])

    assert result.exit_code == 1
    assert "Missing required parameter: outputDir" in result.output


def test_generate_invalid_schema(runner: CliRunner, schema_dir: Path, tmp_path: Path) -> None:
    (schema_dir / "broken.graphqls").write_text("type User {\n", encoding="utf-8")

    result = runner.invoke(
        cli,
        ["generate", "--schemaDir", str(schema_dir), "--outputDir", str(tmp_path / "out"), "--packageName", "a.b"],
    )
    assert result.exit_code == 1
    assert "Invalid GraphQL SDL" in result.output


def test_init(runner: CliRunner, tmp_path: Path) -> None:
    schema_dir = tmp_path / "src" / "main" / "resources" / "schema"

    result = runner.invoke(cli, ["init", "--schemaDir", str(schema_dir)])
    assert result.exit_code == 0, result.output
    assert (schema_dir / "codegen.graphqls").read_text(encoding="utf-8") == "type Query {}\n\ntype Mutation {}\n"

    (schema_dir / "codegen.graphqls").write_text("type Query { custom: Int }\n", encoding="utf-8")
    result = runner.invoke(cli, ["init", "--schemaDir", str(schema_dir)])
    assert result.exit_code == 0, result.output
    assert (schema_dir / "codegen.graphqls").read_text(encoding="utf-8") == "type Query { custom: Int }\n"


def test_init_then_generate(runner: CliRunner, tmp_path: Path) -> None:
    schema_dir = tmp_path / "schema"
    out = tmp_path / "out"
    assert runner.invoke(cli, ["init", "--schemaDir", str(schema_dir)]).exit_code == 0
    shutil.copy(TestSchemaData.USER_SCHEMA, schema_dir)

    result = runner.invoke(
        cli, ["generate", "--schemaDir", str(schema_dir), "--outputDir", str(out), "--packageName", "com.example.demo"]
    )
    assert result.exit_code == 0, result.output
    assert_expected_sources(out)


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_main_from_args(user_schema_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    exit_code = main_from_args(
        [f"--schemaDir={user_schema_dir}", f"--outputDir={out}", "--packageName=com.example.demo", "ignored"]
    )

    assert exit_code == 0
    assert_expected_sources(out)


def test_main_from_args_is_idempotent(user_schema_dir: Path, tmp_path: Path) -> None:
    args = [f"--schemaDir={user_schema_dir}", f"--outputDir={tmp_path / 'out'}", "--packageName=com.example.demo"]

    assert main_from_args(args) == 0
    first = generated_java_files(tmp_path / "out")
    assert main_from_args(args) == 0
    assert generated_java_files(tmp_path / "out") == first


def test_main_from_args_missing_parameter(tmp_path: Path) -> None:
    assert main_from_args([f"--schemaDir={tmp_path}", "--packageName=com.example.demo"]) == 1


def test_main_from_args_missing_schema_dir(tmp_path: Path) -> None:
    out = tmp_path / "out"
    exit_code = main_from_args([f"--schemaDir={tmp_path / 'absent'}", f"--outputDir={out}", "--packageName=a.b"])

    assert exit_code == 1
    assert not out.exists()


def test_main_from_args_non_utf8_schema(schema_dir: Path, tmp_path: Path) -> None:
    (schema_dir / "latin1.graphqls").write_bytes(b"type A { x: Int } # \xff\xfe\n")

    exit_code = main_from_args([f"--schemaDir={schema_dir}", f"--outputDir={tmp_path / 'out'}", "--packageName=a.b"])

    assert exit_code == 1
