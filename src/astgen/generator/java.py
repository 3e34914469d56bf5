"""Java hierarchy emitter.

Produces one ``<Base>.java`` unit per base type: an abstract class holding a
generic ``Visitor<R>`` interface and one static nested class per variant.
"""

from typing import List

from astgen.generator.base import HierarchyEmitter
from astgen.schema_tree.nodes import BaseTypeSpec, FieldSpec, VariantSpec


class JavaHierarchyEmitter(HierarchyEmitter):
    """Schema tree visitor that generates Java source.

    Example output for ``Expr`` with a single ``Literal`` variant::

        abstract class Expr {
          interface Visitor<R> {
            R visitLiteralExpr(Literal expr);
          }

          abstract <R> R accept(Visitor<R> visitor);

          static class Literal extends Expr {
            final Object value;

            Literal(Object value) {
              this.value = value;
            }

            @Override
            <R> R accept(Visitor<R> visitor) {
              return visitor.visitLiteralExpr(this);
            }
          }
        }
    """

    target = "java"
    default_indent_width = 2

    def output_filename(self, base_name: str) -> str:
        return f"{base_name}.java"

    def visit_base_type(self, node: BaseTypeSpec) -> str:
        """Visit a base type node and generate the whole compilation unit.

        Args:
            node: The base type node

        Returns:
            Java source for the abstract base and all of its variants
        """
        sections = []
        if self.package:
            sections.append(f"package {self.package};")
        if self.imports:
            sections.append("\n".join(self.imports))

        body = [f"abstract class {node.name} {{"]
        body.extend(self._visitor_interface(node))
        body.append("")
        body.append(f"{self.indent(1)}abstract <R> R accept(Visitor<R> visitor);")
        for variant_text in self.emit_variants(node):
            body.append("")
            body.append(variant_text)
        body.append("}")
        sections.append("\n".join(body))

        return "\n\n".join(sections) + "\n"

    def visit_variant(self, node: VariantSpec) -> str:
        """Visit a variant node and generate its static nested class.

        Args:
            node: The variant node

        Returns:
            Java source for the variant class, without a trailing newline
        """
        implements = f" implements {', '.join(node.capabilities)}" if node.capabilities else ""
        lines = [f"static class {node.name} extends {self.base_name}{implements} {{"]

        if node.fields:
            lines.extend(self.indent_lines([field.accept(self) for field in node.fields], 1))
            lines.append("")

        lines.extend(self.indent_lines(self._constructor(node), 1))
        lines.append("")

        indented = self.indent_lines(lines, 1)

        # Extra members are spliced in as written, without re-indenting
        extra = self.extra_member_lines(node)
        if extra:
            indented.extend(extra)
            indented.append("")

        accept = [
            "@Override",
            "<R> R accept(Visitor<R> visitor) {",
            f"{self.indent(1)}return visitor.{self.dispatch_method_name(node.name, self.base_name)}(this);",
            "}",
        ]
        indented.extend(self.indent_lines(accept, 2))
        indented.append(f"{self.indent(1)}}}")

        return "\n".join(indented)

    def visit_field(self, node: FieldSpec) -> str:
        """Visit a field node and generate its final member declaration."""
        return f"final {node.type_descriptor} {node.identifier};"

    def _visitor_interface(self, node: BaseTypeSpec) -> List[str]:
        parameter = node.name.lower()
        methods = [
            f"R {self.dispatch_method_name(variant.name, node.name)}({variant.name} {parameter});"
            for variant in node.variants
        ]
        lines = ["interface Visitor<R> {"]
        lines.extend(self.indent_lines(methods, 1))
        lines.append("}")
        return self.indent_lines(lines, 1)

    def _constructor(self, node: VariantSpec) -> List[str]:
        parameters = ", ".join(f"{field.type_descriptor} {field.identifier}" for field in node.fields)
        if not node.fields:
            return [f"{node.name}() {{}}"]

        assignments = [f"this.{field.identifier} = {field.identifier};" for field in node.fields]
        return [f"{node.name}({parameters}) {{", *self.indent_lines(assignments, 1), "}"]
