"""Entry points for emitting node hierarchies.

``emit`` expands one base type from plain mappings; ``emit_schema`` expands
every base type of a schema document. Both are pure: they return text and
never touch the file system.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Type

from astgen.generator.base import HierarchyEmitter
from astgen.generator.java import JavaHierarchyEmitter
from astgen.generator.python import PythonHierarchyEmitter
from astgen.schema.base import SchemaDocument
from astgen.schema_tree.builder import SchemaTreeBuilder

logger = logging.getLogger(__name__)

EMITTERS: Dict[str, Type[HierarchyEmitter]] = {
    JavaHierarchyEmitter.target: JavaHierarchyEmitter,
    PythonHierarchyEmitter.target: PythonHierarchyEmitter,
}


def get_emitter(
    target: str = "java",
    package: Optional[str] = None,
    imports: Sequence[str] = (),
    indent_width: Optional[int] = None,
) -> HierarchyEmitter:
    """Create an emitter for a target language.

    Args:
        target: Target name, one of the keys of EMITTERS
        package: Package declaration, for targets that have one
        imports: Import lines emitted verbatim
        indent_width: Spaces per indentation level (target default if None)

    Returns:
        A configured HierarchyEmitter

    Raises:
        ValueError: If the target is unknown
    """
    try:
        emitter_class = EMITTERS[target]
    except KeyError:
        raise ValueError(
            f"Unknown target {target!r}. Expected one of: {', '.join(EMITTERS)}"
        ) from None
    return emitter_class(package=package, imports=imports, indent_width=indent_width)


def emit(
    base_type_name: str,
    variants: Mapping[str, Sequence[Any]],
    capabilities: Optional[Mapping[str, Iterable[str]]] = None,
    extra_members: Optional[Mapping[str, str]] = None,
    *,
    target: str = "java",
    package: Optional[str] = None,
    imports: Sequence[str] = (),
    indent_width: Optional[int] = None,
    strict: bool = False,
) -> str:
    """Generate the complete source text of one base type's hierarchy.

    Args:
        base_type_name: Name of the base type, e.g. "Expr"
        variants: Variant name to field declarations, in emission order
        capabilities: Optional variant name to extra interfaces table
        extra_members: Optional variant name to verbatim member block table
        target: Target language
        package: Package declaration, for targets that have one
        imports: Import lines emitted verbatim
        indent_width: Spaces per indentation level
        strict: Reject table entries that name no variant of this base type

    Returns:
        The ready-to-persist source text

    Raises:
        MalformedFieldError: If a field declaration cannot be split into type and identifier
        UnknownVariantError: In strict mode, for unmatched table entries

    Example:
        >>> text = emit("Expr", {"Literal": ["Object value"]})
        >>> "R visitLiteralExpr(Literal expr);" in text
        True
    """
    emitter = get_emitter(target, package=package, imports=imports, indent_width=indent_width)
    base_type = SchemaTreeBuilder.build_base_type(
        base_type_name, variants, capabilities, extra_members, strict=strict
    )
    return emitter.emit(base_type)


def emit_schema(
    document: SchemaDocument,
    target: str = "java",
    package: Optional[str] = None,
    indent_width: Optional[int] = None,
    strict: bool = False,
) -> Dict[str, str]:
    """Generate source text for every base type in a schema document.

    All base types are built before any text is produced, so a malformed
    field anywhere in the document yields no output at all.

    Args:
        document: The schema document
        target: Target language
        package: Package declaration overriding the document's own
        indent_width: Spaces per indentation level
        strict: Reject side-table entries that name no variant in the document

    Returns:
        Output file name to source text, in document order
    """
    emitter = get_emitter(
        target,
        package=package or document.package,
        imports=document.imports,
        indent_width=indent_width,
    )
    base_types = SchemaTreeBuilder.build_from_document(document, strict=strict)

    sources = {}
    for base_type in base_types:
        sources[emitter.output_filename(base_type.name)] = emitter.emit(base_type)
    logger.info("Generated %d %s unit(s)", len(sources), target)
    return sources
