"""Built-in schema for the Lox tree-walking interpreter.

These are the statement and expression families of a Lox interpreter written
in Java, including break-with-levels, ternaries, lambdas and static methods.
The ``Function`` statement and ``Lambda`` expression both implement
``CallableNode`` so the interpreter can call either one the same way.
"""

from astgen.schema.base import SchemaDocument, SchemaSource

CALLABLE_NODE_MEMBERS = """\
    public List<Token> getParams() {
      return this.params;
    }

    public List<Stmt> getBody() {
      return this.body;
    }

    public Token getName() {
      return this.name;
    }
"""

STMT_VARIANTS = {
    "Block": ["List<Stmt> statements"],
    "Break": ["Token token", "Expr levels", "int maxLevels"],
    "Class": [
        "Token name",
        "Expr.Variable superclass",
        "List<Stmt.Function> methods",
        "List<Stmt.Function> staticMethods",
    ],
    "Expression": ["Expr expression"],
    "Function": ["Token name", "List<Token> params", "List<Stmt> body"],
    "If": ["Expr condition", "Stmt thenBranch", "Stmt elseBranch"],
    "Let": ["Token name", "Expr initializer"],
    "Return": ["Token keyword", "Expr value"],
    "While": ["Expr condition", "Stmt body"],
}

EXPR_VARIANTS = {
    "Assign": ["Token name", "Expr value"],
    "Call": ["Expr callee", "Token paren", "List<Expr> arguments"],
    "Binary": ["Expr left", "Token operator", "Expr right"],
    "Get": ["Expr object", "Token name"],
    "Grouping": ["Expr expression"],
    "Lambda": ["Token name", "List<Token> params", "List<Stmt> body"],
    "Literal": ["Object value"],
    "Logical": ["Expr left", "Token operator", "Expr right"],
    "Set": ["Expr object", "Token name", "Expr value"],
    "Super": ["Token keyword", "Token method"],
    "Ternary": [
        "Expr left",
        "Token leftOperator",
        "Expr middle",
        "Token rightOperator",
        "Expr right",
    ],
    "This": ["Token keyword"],
    "Unary": ["Token operator", "Expr right"],
    "Variable": ["Token name"],
}


class LoxSchemaSource(SchemaSource):
    """Supplies the built-in Lox schema (``Stmt`` then ``Expr``)."""

    def load(self) -> SchemaDocument:
        """Return the Lox schema document."""
        return SchemaDocument(
            package="lox",
            imports=["import java.util.List;"],
            base_types={"Stmt": STMT_VARIANTS, "Expr": EXPR_VARIANTS},
            capabilities={"Function": ["CallableNode"], "Lambda": ["CallableNode"]},
            extra_members={"Function": CALLABLE_NODE_MEMBERS, "Lambda": CALLABLE_NODE_MEMBERS},
        )
