"""Exceptions raised by astgen."""

from typing import Any


class AstgenError(Exception):
    """Base class for all astgen errors."""


class MalformedFieldError(AstgenError, ValueError):
    """A field declaration could not be split into a type descriptor and an identifier.

    Attributes:
        variant: Name of the variant that declared the field.
        raw_field: The declaration exactly as the caller supplied it.
        reason: Short description of what is wrong with it.
    """

    def __init__(self, variant: str, raw_field: Any, reason: str = "expected '<type> <identifier>'"):
        self.variant = variant
        self.raw_field = raw_field
        self.reason = reason
        super().__init__(f"Malformed field {raw_field!r} in variant {variant!r}: {reason}")


class UnknownVariantError(AstgenError, ValueError):
    """A side-table entry names a variant that the schema does not define.

    Only raised when strict validation is enabled.
    """

    def __init__(self, table: str, variant: str):
        self.table = table
        self.variant = variant
        super().__init__(f"{table} entry for unknown variant {variant!r}")


class SchemaLoadError(AstgenError, ValueError):
    """A schema document could not be read or has the wrong shape."""
