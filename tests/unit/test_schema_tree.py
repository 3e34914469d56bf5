"""Unit tests for the schema tree module.

These tests cover building the schema model from raw declarations: field
parsing, order preservation, folding side tables into variants, and the one
checked failure, malformed field declarations.
"""

import logging

import pytest
from pydantic import ValidationError

from astgen.errors import MalformedFieldError, UnknownVariantError
from astgen.schema.base import SchemaDocument
from astgen.schema_tree.builder import SchemaTreeBuilder
from astgen.schema_tree.nodes import BaseTypeSpec, FieldSpec, VariantSpec
from astgen.schema_tree.visitor import SchemaVisitor


class TestParseField:
    """Test suite for SchemaTreeBuilder.parse_field."""

    def test_simple_declaration(self) -> None:
        """Test splitting a plain '<type> <identifier>' declaration."""
        field = SchemaTreeBuilder.parse_field("Binary", "Expr left")

        assert field.type_descriptor == "Expr"
        assert field.identifier == "left"

    def test_parameterized_type(self) -> None:
        """Test that container descriptors are kept whole."""
        field = SchemaTreeBuilder.parse_field("Block", "List<Stmt> statements")

        assert field.type_descriptor == "List<Stmt>"
        assert field.identifier == "statements"

    def test_descriptor_with_spaces(self) -> None:
        """Test that the split happens at the last whitespace boundary."""
        field = SchemaTreeBuilder.parse_field("Env", "Map<String, Object>  values")

        assert field.type_descriptor == "Map<String, Object>"
        assert field.identifier == "values"

    def test_pair_declaration(self) -> None:
        """Test (type, identifier) pairs."""
        assert SchemaTreeBuilder.parse_field("Var", ("Token", "name")) == FieldSpec(
            type_descriptor="Token", identifier="name"
        )
        assert SchemaTreeBuilder.parse_field("Var", ["Expr", "initializer"]).identifier == "initializer"

    def test_field_spec_passes_through(self) -> None:
        """Test that an already built FieldSpec is accepted."""
        spec = FieldSpec(type_descriptor="int", identifier="maxLevels")
        assert SchemaTreeBuilder.parse_field("Break", spec) == spec

    def test_opaque_descriptors_accepted(self) -> None:
        """Test that unknown and self-referential descriptors are not validated."""
        assert SchemaTreeBuilder.parse_field("Class", "Expr.Variable superclass").type_descriptor == (
            "Expr.Variable"
        )
        assert SchemaTreeBuilder.parse_field("X", "NoSuchType<<< thing").type_descriptor == "NoSuchType<<<"

    @pytest.mark.parametrize(
        "raw",
        [
            "statements",
            "List<Stmt>statements",
            "",
            "   ",
            "Expr left,",
            "Expr 1left",
            ("Token",),
            ("Token", "name", "extra"),
            ("", "name"),
            ("Token", 3),
            42,
        ],
    )
    def test_malformed_declarations(self, raw) -> None:
        """Test that declarations without a type/identifier pair are rejected."""
        with pytest.raises(MalformedFieldError) as excinfo:
            SchemaTreeBuilder.parse_field("Block", raw)

        assert excinfo.value.variant == "Block"
        assert excinfo.value.raw_field == raw

    def test_malformed_error_is_value_error(self) -> None:
        """Test that callers catching ValueError also catch malformed fields."""
        with pytest.raises(ValueError, match="Malformed field 'statements' in variant 'Block'"):
            SchemaTreeBuilder.parse_field("Block", "statements")


def test_build_variant_preserves_order():
    """Test that field order is preserved verbatim."""
    variant = SchemaTreeBuilder.build_variant(
        "Ternary",
        ["Expr left", "Token leftOperator", "Expr middle", "Token rightOperator", "Expr right"],
    )

    assert variant.field_names() == ["left", "leftOperator", "middle", "rightOperator", "right"]
    assert variant.capabilities == []
    assert variant.extra_members is None


def test_build_variant_without_fields():
    """Test that a marker variant with no fields is legal."""
    variant = SchemaTreeBuilder.build_variant("Nil", [])

    assert variant.name == "Nil"
    assert variant.fields == []


def test_build_variant_rejects_duplicate_identifiers():
    """Test that identifiers must be unique within a variant."""
    with pytest.raises(MalformedFieldError, match="duplicate identifier 'left'"):
        SchemaTreeBuilder.build_variant("Binary", ["Expr left", "Token operator", "Expr left"])


def test_build_variant_deduplicates_capabilities():
    """Test that repeated capabilities collapse, keeping first-seen order."""
    variant = SchemaTreeBuilder.build_variant(
        "Function", ["Token name"], capabilities=["CallableNode", "Named", "CallableNode"]
    )

    assert variant.capabilities == ["CallableNode", "Named"]


def test_build_variant_sorts_capability_sets():
    """Test that unordered capability sets are emitted in sorted order."""
    variant = SchemaTreeBuilder.build_variant(
        "Binary", ["Expr left"], capabilities={"Gamma", "Alpha", "Delta", "Beta"}
    )

    assert variant.capabilities == ["Alpha", "Beta", "Delta", "Gamma"]


def test_build_base_type_folds_side_tables():
    """Test that capabilities and extra members attach to the named variants only."""
    base = SchemaTreeBuilder.build_base_type(
        "Expr",
        {
            "Lambda": ["Token name", "List<Token> params", "List<Stmt> body"],
            "Literal": ["Object value"],
        },
        capabilities={"Lambda": ["CallableNode"]},
        extra_members={"Lambda": "    public Token getName() { return name; }\n"},
    )

    assert base.variant_names() == ["Lambda", "Literal"]
    lambda_variant = base.get_variant("Lambda")
    assert lambda_variant.capabilities == ["CallableNode"]
    assert lambda_variant.extra_members == "    public Token getName() { return name; }\n"
    literal = base.get_variant("Literal")
    assert literal.capabilities == []
    assert literal.extra_members is None
    assert base.get_variant("Missing") is None


def test_build_base_type_ignores_unknown_variant_entries(caplog):
    """Test that table entries for missing variants are ignored with a warning."""
    with caplog.at_level(logging.WARNING, logger="astgen"):
        base = SchemaTreeBuilder.build_base_type(
            "Expr",
            {"Literal": ["Object value"]},
            capabilities={"Lambda": ["CallableNode"]},
        )

    assert base.variant_names() == ["Literal"]
    assert "unknown variant 'Lambda'" in caplog.text


def test_build_base_type_strict_rejects_unknown_variant_entries():
    """Test that strict mode turns unmatched entries into errors."""
    with pytest.raises(UnknownVariantError) as excinfo:
        SchemaTreeBuilder.build_base_type(
            "Expr",
            {"Literal": ["Object value"]},
            extra_members={"Lambda": "..."},
            strict=True,
        )

    assert excinfo.value.table == "extra_members"
    assert excinfo.value.variant == "Lambda"


def test_build_base_type_malformed_field_names_variant():
    """Test that the error reports which variant declared the bad field."""
    with pytest.raises(MalformedFieldError) as excinfo:
        SchemaTreeBuilder.build_base_type(
            "Stmt",
            {"Expression": ["Expr expression"], "Block": ["statements"]},
        )

    assert excinfo.value.variant == "Block"
    assert excinfo.value.raw_field == "statements"


def test_build_from_document_shares_tables_across_base_types():
    """Test that a table entry matching a variant of any base type is accepted in strict mode."""
    document = SchemaDocument(
        base_types={
            "Stmt": {"Function": ["Token name"]},
            "Expr": {"Lambda": ["Token name"]},
        },
        capabilities={"Function": ["CallableNode"], "Lambda": ["CallableNode"]},
    )

    stmt, expr = SchemaTreeBuilder.build_from_document(document, strict=True)

    assert stmt.name == "Stmt"
    assert expr.name == "Expr"
    assert stmt.get_variant("Function").capabilities == ["CallableNode"]
    assert expr.get_variant("Lambda").capabilities == ["CallableNode"]


def test_build_from_document_strict_unknown_variant():
    """Test that strict document builds reject entries no base type defines."""
    document = SchemaDocument(
        base_types={"Expr": {"Literal": ["Object value"]}},
        capabilities={"Ghost": ["Haunting"]},
    )

    with pytest.raises(UnknownVariantError, match="capabilities entry for unknown variant 'Ghost'"):
        SchemaTreeBuilder.build_from_document(document, strict=True)


def test_nodes_are_immutable():
    """Test that schema nodes cannot be modified after construction."""
    field = FieldSpec(type_descriptor="Expr", identifier="left")

    with pytest.raises(ValidationError):
        field.identifier = "right"


def test_nodes_dispatch_to_visitor():
    """Test that every node kind calls its own visit method."""

    class NameVisitor(SchemaVisitor):
        def visit_base_type(self, node: BaseTypeSpec) -> str:
            return f"base:{node.name}"

        def visit_variant(self, node: VariantSpec) -> str:
            return f"variant:{node.name}"

        def visit_field(self, node: FieldSpec) -> str:
            return f"field:{node.identifier}"

    visitor = NameVisitor()
    field = FieldSpec(type_descriptor="Object", identifier="value")
    variant = VariantSpec(name="Literal", fields=[field])
    base = BaseTypeSpec(name="Expr", variants=[variant])

    assert base.accept(visitor) == "base:Expr"
    assert variant.accept(visitor) == "variant:Literal"
    assert field.accept(visitor) == "field:value"
