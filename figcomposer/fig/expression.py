"""
Parse, validate and evaluate the function expression f(x) of a function node.

Expressions are Python-like math over the single variable ``x``:
``"2*sin(pi*x) + x^2"``. ``^`` is accepted as a power operator.
"""

import ast

import numpy as np

from .errors import ParseError, ValidationError

# name -> (numpy callable, argument count)
FUNCTIONS = {
    "sin": (np.sin, 1),
    "cos": (np.cos, 1),
    "tan": (np.tan, 1),
    "asin": (np.arcsin, 1),
    "acos": (np.arccos, 1),
    "atan": (np.arctan, 1),
    "sinh": (np.sinh, 1),
    "cosh": (np.cosh, 1),
    "tanh": (np.tanh, 1),
    "exp": (np.exp, 1),
    "ln": (np.log, 1),
    "log": (np.log10, 1),
    "sqrt": (np.sqrt, 1),
    "abs": (np.abs, 1),
    "ceil": (np.ceil, 1),
    "floor": (np.floor, 1),
    "round": (np.round, 1),
    "pow": (np.power, 2),
    "mod": (np.mod, 2),
}

CONSTANTS = {"pi": float(np.pi), "e": float(np.e)}

VARIABLE = "x"

_BINOPS = {
    ast.Add: np.add,
    ast.Sub: np.subtract,
    ast.Mult: np.multiply,
    ast.Div: np.divide,
    ast.Pow: np.power,
    ast.Mod: np.mod,
}
_UNARYOPS = {ast.USub: np.negative, ast.UAdd: np.positive}


class _Validator(ast.NodeVisitor):
    """Reject anything but numbers, x, constants, arithmetic and known functions."""

    def __init__(self, max_nodes=200):
        self.max_nodes = max_nodes
        self.count = 0

    def visit(self, node):
        self.count += 1
        if self.count > self.max_nodes:
            raise ValidationError(f"Expression exceeds {self.max_nodes} terms")
        return super().visit(node)

    def visit_Expression(self, node):
        self.visit(node.body)

    def visit_Constant(self, node):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise ValidationError(f"Only numeric constants allowed, got {node.value!r}")
        try:
            float(node.value)
        except OverflowError:
            raise ValidationError("Numeric constant too large")

    def visit_Name(self, node):
        if node.id != VARIABLE and node.id not in CONSTANTS:
            raise ValidationError(f"Unknown variable: {node.id}")

    def visit_BinOp(self, node):
        if type(node.op) not in _BINOPS:
            raise ValidationError(f"Operator {type(node.op).__name__} not allowed")
        self.visit(node.left)
        self.visit(node.right)

    def visit_UnaryOp(self, node):
        if type(node.op) not in _UNARYOPS:
            raise ValidationError(f"Unary operator {type(node.op).__name__} not allowed")
        self.visit(node.operand)

    def visit_Call(self, node):
        if not isinstance(node.func, ast.Name) or node.keywords:
            raise ValidationError("Only plain function calls allowed")
        name = node.func.id
        if name not in FUNCTIONS:
            raise ValidationError(f"Unknown function: {name}")
        expected = FUNCTIONS[name][1]
        if len(node.args) != expected:
            raise ValidationError(f"{name} expects {expected} args, got {len(node.args)}")
        for arg in node.args:
            self.visit(arg)

    def generic_visit(self, node):
        raise ValidationError(f"Construct not allowed: {type(node).__name__}")


def parse(expr):
    """
    Parse and validate an expression string.

    Raises
    ------
    ParseError
        On a syntax error or an empty expression.
    ValidationError
        If the expression uses disallowed constructs or unknown names.
    """
    text = str(expr).strip().replace("^", "**")
    if not text:
        raise ParseError("Empty expression")
    try:
        tree = ast.parse(text, mode="eval")
    except SyntaxError as e:
        raise ParseError(f"Syntax error: {e.msg}")
    _Validator().visit(tree)
    return tree


def _evaluate(node, x):
    if isinstance(node, ast.Expression):
        return _evaluate(node.body, x)
    if isinstance(node, ast.Constant):
        return float(node.value)
    if isinstance(node, ast.Name):
        return x if node.id == VARIABLE else CONSTANTS[node.id]
    if isinstance(node, ast.BinOp):
        return _BINOPS[type(node.op)](_evaluate(node.left, x), _evaluate(node.right, x))
    if isinstance(node, ast.UnaryOp):
        return _UNARYOPS[type(node.op)](_evaluate(node.operand, x))
    fn = FUNCTIONS[node.func.id][0]
    return fn(*[_evaluate(arg, x) for arg in node.args])


def evaluate(tree, x):
    """Evaluate a parsed expression over ``x`` (scalar or array); invalid points give NaN."""
    with np.errstate(all="ignore"):
        result = _evaluate(tree, np.asarray(x, dtype=float))
    return np.broadcast_to(np.asarray(result, dtype=float), np.shape(x)).copy()
