from .lang import parse, analyze, run
from .lang.error import TinypasError, LexError, ParseError, SemanticError, EvalError


def format_memory(memory):
    return "{" + ", ".join(f"{name}: {value}" for name, value in memory.items()) + "}"
