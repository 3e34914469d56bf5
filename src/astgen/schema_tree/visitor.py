"""Visitor pattern for traversing schema tree nodes.

Emitters implement this interface to turn a schema tree into source text for
a particular target language.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from astgen.schema_tree.nodes import BaseTypeSpec, FieldSpec, VariantSpec


class SchemaVisitor(ABC):
    """Abstract base class for schema tree visitors."""

    @abstractmethod
    def visit_base_type(self, node: "BaseTypeSpec") -> str:
        """Visit a base type node.

        Args:
            node: The base type node to visit

        Returns:
            Text produced for the whole node family
        """
        pass

    @abstractmethod
    def visit_variant(self, node: "VariantSpec") -> str:
        """Visit a variant node.

        Args:
            node: The variant node to visit

        Returns:
            Text produced for the variant's concrete type
        """
        pass

    @abstractmethod
    def visit_field(self, node: "FieldSpec") -> str:
        """Visit a field node.

        Args:
            node: The field node to visit

        Returns:
            Text produced for the field's member declaration
        """
        pass
