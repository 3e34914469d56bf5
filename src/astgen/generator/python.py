"""Python hierarchy emitter.

Produces one ``<base>.py`` module per base type. The base is an ABC with a
nested generic ``Visitor`` class; each variant is a frozen dataclass, so the
generated ``__init__`` takes the fields in declaration order and the members
cannot be reassigned.

Variants live at module level rather than inside the base class, since a
class body cannot subclass the class it is defining. The support names the
module needs are imported under private aliases so that variants named
``dataclass`` or ``R`` cannot shadow them.
"""

from typing import List

from astgen.generator.base import HierarchyEmitter
from astgen.schema_tree.nodes import BaseTypeSpec, FieldSpec, VariantSpec

PREAMBLE = """\
from __future__ import annotations

import abc as _abc
import dataclasses as _dataclasses
import typing as _typing"""


class PythonHierarchyEmitter(HierarchyEmitter):
    """Schema tree visitor that generates a Python module."""

    target = "python"
    default_indent_width = 4

    def output_filename(self, base_name: str) -> str:
        return f"{base_name.lower()}.py"

    def visit_base_type(self, node: BaseTypeSpec) -> str:
        """Visit a base type node and generate the whole module.

        Args:
            node: The base type node

        Returns:
            Python source for the abstract base and all of its variants
        """
        header = [f'"""{node.name} syntax tree nodes. Generated by astgen; do not edit."""', PREAMBLE]
        if self.imports:
            header.append("\n".join(self.imports))
        header.append('_R = _typing.TypeVar("_R")')

        # Top-level definitions are separated by two blank lines
        sections = ["\n\n".join(header), "\n".join(self._base_class(node))]
        sections.extend(self.emit_variants(node))
        return "\n\n\n".join(sections) + "\n"

    def visit_variant(self, node: VariantSpec) -> str:
        """Visit a variant node and generate its dataclass.

        Args:
            node: The variant node

        Returns:
            Python source for the variant class, without a trailing newline
        """
        bases = ", ".join([self.base_name, *node.capabilities])
        lines = ["@_dataclasses.dataclass(frozen=True)", f"class {node.name}({bases}):"]

        body: List[str] = [field.accept(self) for field in node.fields]
        if body:
            body.append("")
        lines.extend(self.indent_lines(body, 1))

        # Extra members are spliced in as written, without re-indenting
        extra = self.extra_member_lines(node)
        if extra:
            lines.extend(extra)
            lines.append("")

        accept = [
            f"def accept(self, visitor: {self.base_name}.Visitor[_R]) -> _R:",
            f"{self.indent(1)}return visitor.{self.dispatch_method_name(node.name, self.base_name)}(self)",
        ]
        lines.extend(self.indent_lines(accept, 1))

        return "\n".join(lines)

    def visit_field(self, node: FieldSpec) -> str:
        """Visit a field node and generate its dataclass field annotation."""
        return f"{node.identifier}: {node.type_descriptor}"

    def _base_class(self, node: BaseTypeSpec) -> List[str]:
        parameter = node.name.lower()
        methods: List[str] = []
        for variant in node.variants:
            if methods:
                methods.append("")
            methods.extend(
                [
                    "@_abc.abstractmethod",
                    f"def {self.dispatch_method_name(variant.name, node.name)}"
                    f"(self, {parameter}: {variant.name}) -> _R:",
                    f"{self.indent(1)}...",
                ]
            )
        if not methods:
            methods = ["pass"]

        lines = [f"class {node.name}(_abc.ABC):"]
        lines.extend(self.indent_lines(["class Visitor(_abc.ABC, _typing.Generic[_R]):"], 1))
        lines.extend(self.indent_lines(methods, 2))
        lines.append("")
        lines.extend(
            self.indent_lines(
                [
                    "@_abc.abstractmethod",
                    f"def accept(self, visitor: {node.name}.Visitor[_R]) -> _R:",
                    f"{self.indent(1)}...",
                ],
                1,
            )
        )
        return lines
