import sly
from sly.lex import Token
from .error import Error, LexError


class Lexer(Error, sly.Lexer):

    tokens = {
        ASSIGN,
        BEGIN,
        COLON,
        COMMA,
        DOT,
        END,
        FLOAT_DIV,
        ID,
        INTEGER,
        INTEGER_CONST,
        INTEGER_DIV,
        LPAREN,
        MINUS,
        MUL,
        PLUS,
        PROCEDURE,
        PROGRAM,
        REAL,
        REAL_CONST,
        RPAREN,
        SEMI,
        VAR,
    }

    REAL_CONST = r'[0-9]+\.[0-9]*'
    INTEGER_CONST = r'[0-9]+'

    ID = r'[a-zA-Z][a-zA-Z0-9]*'
    ID['PROGRAM'] = PROGRAM
    ID['VAR'] = VAR
    ID['DIV'] = INTEGER_DIV
    ID['INTEGER'] = INTEGER
    ID['REAL'] = REAL
    ID['BEGIN'] = BEGIN
    ID['END'] = END
    ID['PROCEDURE'] = PROCEDURE

    ASSIGN = r':='
    COLON = r':'
    PLUS = r'\+'
    MINUS = r'-'
    MUL = r'\*'
    FLOAT_DIV = r'/'
    LPAREN = r'\('
    RPAREN = r'\)'
    SEMI = r';'
    DOT = r'\.'
    COMMA = r','

    ignore = ' \t\r\f\v'

    @_(r'\{[^}]*\}')
    def ignore_comment(self, t):
        self.lineno += t.value.count('\n')

    @_(r'\n+')
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    def __init__(self, filename):
        super().__init__()
        self.filename = filename

    def tokenize(self, text, lineno=1, index=0):
        yield from super().tokenize(text, lineno, index)
        yield self.eof()

    def eof(self):
        t = Token()
        t.type = 'EOF'
        t.value = ''
        t.lineno = self.lineno
        t.index = t.end = self.index
        return t

    def error(self, t):
        if t.value[0] == '{':
            super().error(t, "Unterminated comment", LexError)
        super().error(t, f"Bad character {t.value[0]!r}", LexError)
