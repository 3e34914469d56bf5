"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from astgen.cli import app
from astgen.generator.hierarchy import emit_schema
from astgen.schema.lox import LoxSchemaSource

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate tests from ASTGEN_* variables and any local .env file."""
    for name in ("TARGET", "OUTPUT_DIR", "PACKAGE", "INDENT_WIDTH", "STRICT", "LOG_LEVEL"):
        monkeypatch.delenv(f"ASTGEN_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def python_schema(tmp_path):
    """Write a small schema with Python type descriptors."""
    path = tmp_path / "calc.json"
    path.write_text(
        json.dumps(
            {
                "base_types": {
                    "Expr": {
                        "Number": ["float value"],
                        "Add": ["Expr left", "Expr right"],
                    }
                }
            }
        )
    )
    return path


def test_generate_builtin_schema(tmp_path):
    """Test generating the Lox hierarchy into a new directory."""
    out = tmp_path / "lox"

    result = runner.invoke(app, ["generate", str(out)])

    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in out.iterdir()) == ["Expr.java", "Stmt.java"]
    assert (out / "Expr.java").read_text() == emit_schema(LoxSchemaSource().load())["Expr.java"]
    assert "Generated Stmt" in result.output
    assert "Generated Expr" in result.output


def test_generate_overwrites_existing_files(tmp_path):
    """Test that previous output is replaced wholesale."""
    out = tmp_path / "lox"
    out.mkdir()
    (out / "Stmt.java").write_text("stale")

    result = runner.invoke(app, ["generate", str(out)])

    assert result.exit_code == 0, result.output
    assert (out / "Stmt.java").read_text().startswith("package lox;")


def test_generate_python_target(tmp_path, python_schema):
    """Test generating a Python module from a schema file."""
    out = tmp_path / "ast"

    result = runner.invoke(
        app, ["generate", str(out), "--schema", str(python_schema), "--target", "python"]
    )

    assert result.exit_code == 0, result.output
    text = (out / "expr.py").read_text()
    assert "class Add(Expr):\n    left: Expr\n    right: Expr\n" in text


def test_generate_uses_output_dir_from_environment(monkeypatch, tmp_path):
    """Test that ASTGEN_OUTPUT_DIR supplies the destination."""
    monkeypatch.setenv("ASTGEN_OUTPUT_DIR", str(tmp_path / "env-out"))

    result = runner.invoke(app, ["generate", "--package", "interp"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "env-out" / "Expr.java").read_text().startswith("package interp;\n")


def test_generate_requires_output_dir():
    """Test that a missing destination is an error."""
    result = runner.invoke(app, ["generate"])

    assert result.exit_code == 1
    assert "No output directory given" in result.output


def test_generate_malformed_schema_writes_nothing(tmp_path):
    """Test that a malformed field aborts the run before any file is written."""
    schema = tmp_path / "bad.json"
    schema.write_text(
        json.dumps(
            {
                "base_types": {
                    "Stmt": {"Expression": ["Expr expression"]},
                    "Expr": {"Literal": ["value"]},
                }
            }
        )
    )
    out = tmp_path / "out"

    result = runner.invoke(app, ["generate", str(out), "--schema", str(schema)])

    assert result.exit_code == 1
    assert "Malformed field" in result.output
    assert "Generated" not in result.output
    assert not out.exists()


def test_generate_strict_rejects_unknown_variant(tmp_path):
    """Test that --strict turns unmatched table entries into errors."""
    schema = tmp_path / "strict.json"
    schema.write_text(
        json.dumps(
            {
                "base_types": {"Expr": {"Literal": ["Object value"]}},
                "extra_members": {"Lambda": "  int x;"},
            }
        )
    )
    out = tmp_path / "out"

    lenient = runner.invoke(app, ["generate", str(out), "--schema", str(schema)])
    strict = runner.invoke(app, ["generate", str(tmp_path / "strict"), "--schema", str(schema), "--strict"])

    assert lenient.exit_code == 0, lenient.output
    assert strict.exit_code == 1
    assert not (tmp_path / "strict").exists()


def test_generate_unknown_target(tmp_path):
    """Test that an unknown target fails cleanly."""
    result = runner.invoke(app, ["generate", str(tmp_path / "out"), "--target", "cobol"])

    assert result.exit_code == 1
    assert "Unknown target" in result.output


def test_preview():
    """Test printing a single base type to stdout."""
    result = runner.invoke(app, ["preview", "Stmt"])

    assert result.exit_code == 0, result.output
    assert result.output == emit_schema(LoxSchemaSource().load())["Stmt.java"]


def test_preview_unknown_base_type():
    """Test that previewing a missing base type is an error."""
    result = runner.invoke(app, ["preview", "Decl"])

    assert result.exit_code == 1
    assert "Unknown base type" in result.output


def test_show_schema(python_schema):
    """Test rendering the schema table."""
    result = runner.invoke(app, ["show-schema", "--schema", str(python_schema)])

    assert result.exit_code == 0, result.output
    assert "Number" in result.output
    assert "Add" in result.output


def test_show_schema_missing_file(tmp_path):
    """Test that a missing schema file is reported."""
    result = runner.invoke(app, ["show-schema", "--schema", str(tmp_path / "nope.json")])

    assert result.exit_code == 1
    assert "Cannot read schema file" in result.output
