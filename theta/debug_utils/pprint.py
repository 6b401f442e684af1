from __future__ import annotations

from theta import ThetaValue
from theta.reader.parser import DEFINITION_KEYWORD
from theta.types.ast import ASTNode, Defun, Identifier, Program, SExpr, Terminal
from theta.types.unit import UnitType
from theta.types.value import runtime_to_str, is_callable

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
}


def _terminal_source(node: Terminal) -> str:
    if node.token.kind == "string":
        return f'"{node.token.value}"'
    return str(node.token.value)


# ----------------- Single-line source -----------------
def format_ast(node: ASTNode) -> str:
    """Render a node back to source text on one line."""
    match node:
        case Terminal():
            return _terminal_source(node)
        case Identifier(name=name):
            return name
        case SExpr(children=children):
            return "(" + " ".join(format_ast(c) for c in children) + ")"
        case Defun(name=name, params=params, body=body):
            parts = [DEFINITION_KEYWORD, name, "(" + " ".join(params) + ")"]
            parts.extend(format_ast(b) for b in body)
            return "(" + " ".join(parts) + ")"
        case Program(statements=statements):
            return "\n".join(format_ast(s) for s in statements)
    return repr(node)


# ----------------- Pretty printer -----------------
def pprint_ast(node: ASTNode, indent: int = 0, options: dict = DEFAULT_OPTIONS) -> str:
    """Render a node as source, breaking calls that do not fit on one line."""
    if isinstance(node, Program):
        return "\n".join(pprint_ast(s, indent, options) for s in node.statements)

    single_line = format_ast(node)
    if len(single_line) + indent * 2 <= options.get("max_line_length", 80):
        return single_line

    pad = "  " * (indent + 1)
    if isinstance(node, Defun):
        head = f"({DEFINITION_KEYWORD} {node.name} ({' '.join(node.params)})"
        parts = [pprint_ast(b, indent + 1, options) for b in node.body]
    elif isinstance(node, SExpr) and node.children:
        head = "(" + pprint_ast(node.children[0], indent + 1, options)
        parts = [pprint_ast(c, indent + 1, options) for c in node.operands]
    else:
        return single_line

    aligned_lines = [head] + [pad + part for part in parts]
    aligned_lines[-1] += ")"
    return "\n".join(aligned_lines)


def format_value(value: ThetaValue) -> str:
    """Describe any runtime value, including those `write` cannot print."""
    if isinstance(value, UnitType) or is_callable(value):
        return repr(value)
    if isinstance(value, tuple):
        return "(" + " ".join(format_value(v) for v in value) + ")"
    if isinstance(value, str):
        return f'"{value}"'
    return runtime_to_str(value)
