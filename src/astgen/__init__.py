"""astgen - Generate AST node hierarchies with visitor support from a declarative schema."""

from astgen.config import Config, load_config
from astgen.errors import AstgenError, MalformedFieldError, SchemaLoadError, UnknownVariantError
from astgen.generator.hierarchy import emit, emit_schema, get_emitter
from astgen.schema.base import SchemaDocument
from astgen.schema_tree.builder import SchemaTreeBuilder
from astgen.schema_tree.nodes import BaseTypeSpec, FieldSpec, VariantSpec

__version__ = "0.1.0"

__all__ = [
    "Config",
    "load_config",
    "emit",
    "emit_schema",
    "get_emitter",
    "SchemaDocument",
    "SchemaTreeBuilder",
    "BaseTypeSpec",
    "VariantSpec",
    "FieldSpec",
    "AstgenError",
    "MalformedFieldError",
    "UnknownVariantError",
    "SchemaLoadError",
]
