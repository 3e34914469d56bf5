"""Base schema classes for astgen.

This module defines the raw schema document callers supply and the abstract
interface for the sources that produce it.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from astgen.schema_tree.nodes import BaseTypeSpec

# A field is declared either as "<type> <identifier>" or as a [type, identifier] pair.
FieldDeclaration = Union[str, List[str]]


class SchemaDocument(BaseModel):
    """A complete, undigested schema: every node family plus its side tables.

    Mapping order is preserved everywhere and determines emission order.

    Attributes:
        base_types: Base type name to an ordered mapping of variant name to field declarations.
        capabilities: Variant name to the interfaces its generated type declares.
        extra_members: Variant name to a block of member declarations spliced in verbatim.
        package: Optional package/namespace declaration for targets that have one.
        imports: Import lines emitted verbatim at the top of every unit.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_types: Dict[str, Dict[str, List[FieldDeclaration]]] = Field(
        ..., description="Node families keyed by base type name"
    )
    capabilities: Dict[str, List[str]] = Field(
        default_factory=dict, description="Extra interfaces per variant name"
    )
    extra_members: Dict[str, str] = Field(
        default_factory=dict, description="Verbatim member blocks per variant name"
    )
    package: Optional[str] = Field(default=None, description="Package declaration")
    imports: List[str] = Field(default_factory=list, description="Verbatim import lines")


class SchemaSource(ABC):
    """Abstract base class for anything that supplies a schema document.

    Implementations decide where the definitions come from (a built-in table,
    a file on disk, etc.).
    """

    @abstractmethod
    def load(self) -> SchemaDocument:
        """Load the raw schema document.

        Returns:
            The SchemaDocument describing every node family.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.
            SchemaLoadError: If the source exists but cannot be read.
        """
        raise NotImplementedError("Subclasses must implement load")

    def load_tree(self, strict: bool = False) -> List["BaseTypeSpec"]:
        """Load the schema and convert it to schema trees, one per base type.

        This is the method application code should use: field declarations
        are parsed and the side tables folded into their variants.

        Args:
            strict: Reject side-table entries for variants the schema does not define.

        Returns:
            One BaseTypeSpec per base type, in document order.

        Raises:
            MalformedFieldError: If any field declaration cannot be parsed.
            UnknownVariantError: In strict mode, for unmatched side-table entries.
        """
        from astgen.schema_tree.builder import SchemaTreeBuilder

        return SchemaTreeBuilder.build_from_document(self.load(), strict=strict)
