"""JSON file schema source.

A schema file is a JSON object with the same shape as SchemaDocument::

    {
      "package": "lox",
      "imports": ["import java.util.List;"],
      "base_types": {
        "Expr": {
          "Binary": ["Expr left", "Token operator", "Expr right"],
          "Literal": ["Object value"]
        }
      },
      "capabilities": {"Lambda": ["CallableNode"]},
      "extra_members": {"Lambda": "    public Token getName() { return name; }\\n"}
    }

Object key order is preserved and determines emission order.
"""

from pathlib import Path
from typing import Union

from pydantic import ValidationError

from astgen.errors import SchemaLoadError
from astgen.schema.base import SchemaDocument, SchemaSource


class JsonSchemaSource(SchemaSource):
    """Loads a schema document from a JSON file.

    Attributes:
        path: Location of the schema file.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> SchemaDocument:
        """Read and validate the schema file.

        Returns:
            The parsed SchemaDocument.

        Raises:
            SchemaLoadError: If the file cannot be read or does not describe a schema.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise SchemaLoadError(f"Cannot read schema file {self.path}: {e}") from e

        try:
            return SchemaDocument.model_validate_json(text)
        except ValidationError as e:
            raise SchemaLoadError(f"Invalid schema file {self.path}: {e}") from e

    def __repr__(self) -> str:
        return f"JsonSchemaSource(path={str(self.path)!r})"
