"""Schema tree node definitions for describing a family of AST node variants.

A schema is a tree three levels deep: a base type owns its variants, and a
variant owns its fields. Every level is an immutable, order-preserving model
that emitters walk through the visitor pattern.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from astgen.schema_tree.visitor import SchemaVisitor


class SchemaNode(ABC, BaseModel):
    """Base class for all schema tree nodes."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def accept(self, visitor: "SchemaVisitor") -> str:
        """Accept a visitor for the visitor pattern.

        Args:
            visitor: The visitor to accept

        Returns:
            Result of the visitor's visit operation
        """
        pass


class FieldSpec(SchemaNode):
    """A single typed field of a variant.

    The type descriptor is opaque: it may name a primitive, the base type
    itself, a container such as ``List<Stmt>``, or an external type such as
    ``Token``. It is emitted exactly as written.

    Attributes:
        type_descriptor: The field's type, as it should appear in the output
        identifier: The member name, unique within its variant
    """

    type_descriptor: str = Field(..., description="Opaque type descriptor")
    identifier: str = Field(..., description="Member name of the field")

    def accept(self, visitor: "SchemaVisitor") -> str:
        """Accept a visitor for field nodes."""
        return visitor.visit_field(self)


class VariantSpec(SchemaNode):
    """One concrete node kind of a base type.

    Attributes:
        name: Variant name, unique within its base type
        fields: Fields in declaration order (may be empty)
        capabilities: Extra interfaces the generated type declares, in order
        extra_members: Block of member declarations spliced in verbatim
    """

    name: str = Field(..., description="The variant name")
    fields: List[FieldSpec] = Field(default_factory=list, description="Fields in declared order")
    capabilities: List[str] = Field(
        default_factory=list, description="Interfaces the variant additionally conforms to"
    )
    extra_members: Optional[str] = Field(
        default=None, description="Member declarations spliced into the generated type"
    )

    def accept(self, visitor: "SchemaVisitor") -> str:
        """Accept a visitor for variant nodes."""
        return visitor.visit_variant(self)

    def field_names(self) -> List[str]:
        """Get the field identifiers in declaration order."""
        return [field.identifier for field in self.fields]


class BaseTypeSpec(SchemaNode):
    """The root of one node family, e.g. ``Stmt`` or ``Expr``.

    Attributes:
        name: The base type name
        variants: Variants in emission order
    """

    name: str = Field(..., description="The base type name")
    variants: List[VariantSpec] = Field(default_factory=list, description="Variants in order")

    def accept(self, visitor: "SchemaVisitor") -> str:
        """Accept a visitor for base type nodes."""
        return visitor.visit_base_type(self)

    def variant_names(self) -> List[str]:
        """Get the variant names in declaration order."""
        return [variant.name for variant in self.variants]

    def get_variant(self, name: str) -> Optional[VariantSpec]:
        """Look up a variant by name.

        Returns:
            The variant, or None if the base type has no variant of that name
        """
        for variant in self.variants:
            if variant.name == name:
                return variant
        return None
