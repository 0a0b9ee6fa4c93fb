import logging
from .lex import Lexer
from .parse import Parser
from .scope import ScopeVisitor
from .symbol import SymbolTable
from .evaluate import Interpreter

logger = logging.getLogger(__name__)

def parse(text, filename="<string>"):
    try:
        lexer = Lexer(filename)
        parser = Parser(filename, text)
        return parser.parse(lexer.tokenize(text))
    except SyntaxError as e:
        raise e.with_traceback(None)

def analyze(text, filename="<string>"):
    node = parse(text, filename)
    try:
        scope = ScopeVisitor(filename, text)
        symtable = scope.visit(node, SymbolTable())
    except SyntaxError as e:
        raise e.with_traceback(None)
    logger.debug("%s", symtable)
    return node, symtable

def run(text, filename="<string>"):
    node, symtable = analyze(text, filename)
    interpreter = Interpreter(filename, text)
    return interpreter.interpret(node)
