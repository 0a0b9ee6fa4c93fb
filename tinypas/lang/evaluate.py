import logging
import math
import operator
from .visit import Visitor
from .error import EvalError
from . import ast

logger = logging.getLogger(__name__)


def int_div(left, right):
    """``DIV``: integer division truncating toward zero."""
    if isinstance(left, float) or isinstance(right, float):
        return math.trunc(left / right)
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def float_div(left, right):
    return float(left) / float(right)


BINARY_OPERATORS = {
    'PLUS': operator.add,
    'MINUS': operator.sub,
    'MUL': operator.mul,
    'INTEGER_DIV': int_div,
    'FLOAT_DIV': float_div,
}

UNARY_OPERATORS = {
    'PLUS': operator.pos,
    'MINUS': operator.neg,
}


class Interpreter(Visitor):
    """Executes a checked program, keeping variable values in ``memory``.

    Values are Python ``int`` or ``float``: integer literals and the ``+ - *
    DIV`` operators on integers stay ``int``, while real literals and ``/``
    produce ``float``. Nothing is converted to the declared type on
    assignment.
    """

    def __init__(self, filename, text):
        super().__init__(filename, text)
        self.memory = {}

    def interpret(self, node):
        self.visit(node)
        logger.debug("global memory: %r", self.memory)
        return self.memory

    @_(list)
    def visit(self, node):
        for subnode in node:
            self.visit(subnode)

    @_(ast.Program)
    def visit(self, node):
        self.visit(node.block)

    @_(ast.Block)
    def visit(self, node):
        self.visit(node.declarations)
        self.visit(node.compound)

    @_(ast.VarDecl, ast.ProcedureDecl, ast.Type, ast.NoOp)
    def visit(self, node):
        pass

    @_(ast.Compound)
    def visit(self, node):
        self.visit(node.children)

    @_(ast.Assign)
    def visit(self, node):
        self.memory[node.left.name] = self.visit(node.right)

    @_(ast.Var)
    def visit(self, node):
        try:
            return self.memory[node.name]
        except KeyError:
            self.error(node, f"Variable {node.name!r} is not defined", EvalError)

    @_(ast.Num)
    def visit(self, node):
        if node.is_real:
            return float(node.value)
        return int(node.value)

    @_(ast.BinOp)
    def visit(self, node):
        left = self.visit(node.left)
        right = self.visit(node.right)
        try:
            return BINARY_OPERATORS[node.op](left, right)
        except ZeroDivisionError:
            self.error(node, "Division by zero", EvalError)
        except (OverflowError, ValueError):
            self.error(node, "Numeric overflow", EvalError)

    @_(ast.UnaryOp)
    def visit(self, node):
        return UNARY_OPERATORS[node.op](self.visit(node.operand))
