"""Shared machinery for hierarchy emitters.

An emitter is a schema tree visitor that expands one base type into the source
text of a closed node hierarchy: an abstract base with an ``accept`` entry
point, a visitor interface with one method per variant, and one concrete type
per variant. Subclasses supply the target language's syntax.
"""

import logging
from abc import abstractmethod
from typing import Iterable, List, Optional, Sequence

from astgen.schema_tree.nodes import BaseTypeSpec, VariantSpec
from astgen.schema_tree.visitor import SchemaVisitor

logger = logging.getLogger(__name__)


class HierarchyEmitter(SchemaVisitor):
    """Base class for target-language emitters.

    An emitter instance is configured once and may be reused for any number
    of base types; it keeps no state between calls. While a base type is being
    expanded, its variants are visited by a child emitter that knows the
    base type's name.

    Attributes:
        package: Package/namespace declaration, for targets that have one
        imports: Lines emitted verbatim at the top of the unit
        indent_width: Spaces per indentation level
        base_name: Name of the base type whose variants this emitter visits
    """

    target: str = ""
    default_indent_width: int = 4

    def __init__(
        self,
        package: Optional[str] = None,
        imports: Sequence[str] = (),
        indent_width: Optional[int] = None,
        base_name: str = "",
    ):
        self.package = package
        self.imports = list(imports)
        self.indent_width = indent_width or self.default_indent_width
        self.base_name = base_name

    def emit(self, base_type: BaseTypeSpec) -> str:
        """Expand a base type into complete source text.

        Args:
            base_type: The schema tree of the node family

        Returns:
            The complete, ready-to-persist source text
        """
        logger.debug(
            "Emitting %s hierarchy for %s (%d variants)",
            self.target,
            base_type.name,
            len(base_type.variants),
        )
        return base_type.accept(self)

    @abstractmethod
    def output_filename(self, base_name: str) -> str:
        """Get the file name the unit for a base type is written to."""
        pass

    def for_base_type(self, base_name: str) -> "HierarchyEmitter":
        """Create a child emitter that visits the variants of one base type."""
        return type(self)(
            package=self.package,
            imports=self.imports,
            indent_width=self.indent_width,
            base_name=base_name,
        )

    def emit_variants(self, node: BaseTypeSpec) -> List[str]:
        """Emit every variant of a base type, in declaration order."""
        variant_emitter = self.for_base_type(node.name)
        return [variant.accept(variant_emitter) for variant in node.variants]

    @staticmethod
    def dispatch_method_name(variant_name: str, base_name: str) -> str:
        """Get the visitor method name for a variant, e.g. ``visitBinaryExpr``.

        The name is derived purely syntactically; collisions are not checked.
        """
        return f"visit{variant_name}{base_name}"

    def indent(self, level: int) -> str:
        """Get the indentation prefix for a nesting level."""
        return " " * (self.indent_width * level)

    def indent_lines(self, lines: Iterable[str], level: int) -> List[str]:
        """Indent each non-empty line to the given level."""
        prefix = self.indent(level)
        return [f"{prefix}{line}" if line else "" for line in lines]

    @staticmethod
    def extra_member_lines(node: VariantSpec) -> List[str]:
        """Get the variant's extra member block as lines ready to join.

        The block is kept verbatim: only the single line terminator that
        joining with newlines puts back is dropped. An empty block counts as
        no block.
        """
        if not node.extra_members:
            return []
        block = node.extra_members
        if block.endswith("\n"):
            block = block[:-1]
        return [block]
