"""Schema tree module for describing node families as a tree structure.

This module provides the schema model (base type, variant, field) that
emitters walk to produce a node hierarchy.
"""

from astgen.schema_tree.nodes import (
    BaseTypeSpec,
    FieldSpec,
    SchemaNode,
    VariantSpec,
)
from astgen.schema_tree.visitor import SchemaVisitor

__all__ = [
    "SchemaNode",
    "FieldSpec",
    "VariantSpec",
    "BaseTypeSpec",
    "SchemaVisitor",
]
