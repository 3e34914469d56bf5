"""Builder for converting raw field declarations into schema tree nodes.

This is the only place astgen validates its input: a field declaration must
split into a type descriptor and an identifier. Everything else (type
descriptors, capability names, extra member text) is accepted as opaque text.
"""

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from astgen.errors import MalformedFieldError, UnknownVariantError
from astgen.schema.base import SchemaDocument
from astgen.schema_tree.nodes import BaseTypeSpec, FieldSpec, VariantSpec

logger = logging.getLogger(__name__)

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class SchemaTreeBuilder:
    """Builds schema tree nodes from raw declarations.

    Raw declarations are what callers write by hand: ``"List<Stmt> statements"``
    strings or ``(type, identifier)`` pairs, plus side tables keyed by variant
    name. The builder folds those side tables into the variants they name.
    """

    @staticmethod
    def parse_field(variant: str, raw: Any) -> FieldSpec:
        """Parse one raw field declaration.

        Strings split at their last whitespace boundary so that descriptors
        containing spaces (``Map<String, Object> values``) stay intact.

        Args:
            variant: Name of the declaring variant, used in error reports
            raw: A declaration string, a (type, identifier) pair, or a FieldSpec

        Returns:
            The parsed FieldSpec

        Raises:
            MalformedFieldError: If the declaration has no type/identifier boundary,
                either part is empty, or the identifier is not a valid member name
        """
        if isinstance(raw, FieldSpec):
            type_descriptor, identifier = raw.type_descriptor, raw.identifier
        elif isinstance(raw, str):
            parts = raw.strip().rsplit(None, 1)
            if len(parts) != 2:
                raise MalformedFieldError(variant, raw, "no boundary between type and identifier")
            type_descriptor, identifier = parts
        elif isinstance(raw, (list, tuple)):
            if len(raw) != 2 or not all(isinstance(part, str) for part in raw):
                raise MalformedFieldError(variant, raw, "expected a (type, identifier) pair")
            type_descriptor, identifier = raw[0].strip(), raw[1].strip()
        else:
            raise MalformedFieldError(variant, raw, f"unsupported declaration of type {type(raw).__name__}")

        if not type_descriptor:
            raise MalformedFieldError(variant, raw, "missing type descriptor")
        if not IDENTIFIER_PATTERN.match(identifier):
            raise MalformedFieldError(variant, raw, f"invalid identifier {identifier!r}")

        return FieldSpec(type_descriptor=type_descriptor, identifier=identifier)

    @staticmethod
    def build_variant(
        name: str,
        raw_fields: Iterable[Any],
        capabilities: Iterable[str] = (),
        extra_members: Optional[str] = None,
    ) -> VariantSpec:
        """Build a variant node from its raw field declarations.

        Args:
            name: The variant name
            raw_fields: Field declarations in order
            capabilities: Interfaces the variant's type declares; a set is sorted,
                any other iterable keeps its order
            extra_members: Member block spliced into the variant's type

        Returns:
            The VariantSpec

        Raises:
            MalformedFieldError: If a declaration is malformed or an identifier repeats
        """
        fields: List[FieldSpec] = []
        seen = set()
        for raw in raw_fields:
            field = SchemaTreeBuilder.parse_field(name, raw)
            if field.identifier in seen:
                raise MalformedFieldError(name, raw, f"duplicate identifier {field.identifier!r}")
            seen.add(field.identifier)
            fields.append(field)

        # Sets have no stable order across interpreter runs; sequences keep first occurrence
        if isinstance(capabilities, (set, frozenset)):
            unique_capabilities = sorted(capabilities)
        else:
            unique_capabilities = list(dict.fromkeys(capabilities))

        return VariantSpec(
            name=name,
            fields=fields,
            capabilities=unique_capabilities,
            extra_members=extra_members,
        )

    @staticmethod
    def build_base_type(
        name: str,
        variants: Mapping[str, Sequence[Any]],
        capabilities: Optional[Mapping[str, Iterable[str]]] = None,
        extra_members: Optional[Mapping[str, str]] = None,
        strict: bool = False,
    ) -> BaseTypeSpec:
        """Build the schema tree for one base type.

        Args:
            name: The base type name
            variants: Variant name to field declarations, in emission order
            capabilities: Optional variant name to capability names table
            extra_members: Optional variant name to member block table
            strict: Reject table entries that name no variant of this base type

        Returns:
            The BaseTypeSpec

        Raises:
            MalformedFieldError: If any field declaration is malformed
            UnknownVariantError: In strict mode, for unmatched table entries
        """
        capabilities = capabilities or {}
        extra_members = extra_members or {}
        SchemaTreeBuilder._check_side_tables(set(variants), capabilities, extra_members, strict)
        return SchemaTreeBuilder._build_base_type(name, variants, capabilities, extra_members)

    @staticmethod
    def build_from_document(document: SchemaDocument, strict: bool = False) -> List[BaseTypeSpec]:
        """Convert a SchemaDocument into one schema tree per base type.

        The side tables are shared by every base type in the document, so an
        entry is unmatched only when no base type defines that variant.

        Args:
            document: The raw schema document
            strict: Reject table entries that name no variant in the document

        Returns:
            BaseTypeSpecs in document order

        Raises:
            MalformedFieldError: If any field declaration is malformed
            UnknownVariantError: In strict mode, for unmatched table entries
        """
        known = {variant for variants in document.base_types.values() for variant in variants}
        SchemaTreeBuilder._check_side_tables(
            known, document.capabilities, document.extra_members, strict
        )

        return [
            SchemaTreeBuilder._build_base_type(
                name, variants, document.capabilities, document.extra_members
            )
            for name, variants in document.base_types.items()
        ]

    @staticmethod
    def _build_base_type(
        name: str,
        variants: Mapping[str, Sequence[Any]],
        capabilities: Mapping[str, Iterable[str]],
        extra_members: Mapping[str, str],
    ) -> BaseTypeSpec:
        variant_nodes = [
            SchemaTreeBuilder.build_variant(
                variant_name,
                raw_fields,
                capabilities=capabilities.get(variant_name, ()),
                extra_members=extra_members.get(variant_name),
            )
            for variant_name, raw_fields in variants.items()
        ]
        return BaseTypeSpec(name=name, variants=variant_nodes)

    @staticmethod
    def _check_side_tables(
        known_variants: set,
        capabilities: Mapping[str, Iterable[str]],
        extra_members: Mapping[str, str],
        strict: bool,
    ) -> None:
        for table_name, table in (("capabilities", capabilities), ("extra_members", extra_members)):
            for variant in table:
                if variant in known_variants:
                    continue
                if strict:
                    raise UnknownVariantError(table_name, variant)
                logger.warning("Ignoring %s entry for unknown variant %r", table_name, variant)
