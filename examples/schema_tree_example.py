#!/usr/bin/env python3
"""Example demonstrating the schema tree and hierarchy emitters.

This example builds the Lox expression family, prints its Java hierarchy, and
walks the same schema tree with a custom visitor.
"""

from astgen.generator.hierarchy import emit, get_emitter
from astgen.schema.lox import EXPR_VARIANTS
from astgen.schema_tree.builder import SchemaTreeBuilder
from astgen.schema_tree.visitor import SchemaVisitor


class RecursionAnalyzerVisitor(SchemaVisitor):
    """Custom visitor that reports which fields make the tree recursive."""

    def __init__(self, base_name=""):
        self.base_name = base_name

    def visit_base_type(self, node):
        variant_visitor = RecursionAnalyzerVisitor(node.name)
        return "\n".join(variant.accept(variant_visitor) for variant in node.variants)

    def visit_variant(self, node):
        recursive = [field.accept(self) for field in node.fields]
        recursive = [name for name in recursive if name]
        if not recursive:
            return f"  {node.name}: leaf"
        return f"  {node.name}: recursive through {', '.join(recursive)}"

    def visit_field(self, node):
        # Self-referential fields mention the base type somewhere in their descriptor
        return node.identifier if self.base_name in node.type_descriptor else ""


def main():
    """Demonstrate schema tree usage."""
    print("=" * 70)
    print("1. Generate the Java hierarchy for a two-variant family:")
    print("-" * 70)
    print(
        emit(
            "Expr",
            {"Binary": ["Expr left", "Token operator", "Expr right"], "Literal": ["Object value"]},
        )
    )

    print("2. Generate the same family as a Python module:")
    print("-" * 70)
    print(
        emit(
            "Expr",
            {"Binary": ["Expr left", "Token operator", "Expr right"], "Literal": ["object value"]},
            target="python",
            imports=["from lox.tokens import Token"],
        )
    )

    print("3. Analyze recursion in the Lox expression family:")
    print("-" * 70)
    tree = SchemaTreeBuilder.build_base_type("Expr", EXPR_VARIANTS)
    print(tree.accept(RecursionAnalyzerVisitor()))
    print()
    print(f"Java unit name: {get_emitter('java').output_filename(tree.name)}")


if __name__ == "__main__":
    main()
