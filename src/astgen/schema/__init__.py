"""Schema source modules."""

from astgen.schema.base import SchemaDocument, SchemaSource
from astgen.schema.file import JsonSchemaSource
from astgen.schema.lox import LoxSchemaSource

__all__ = ["SchemaDocument", "SchemaSource", "JsonSchemaSource", "LoxSchemaSource"]
