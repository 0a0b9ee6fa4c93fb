
class TinypasError(Exception):
    pass


class LexError(TinypasError, SyntaxError):
    pass


class ParseError(TinypasError, SyntaxError):
    pass


class SemanticError(TinypasError, SyntaxError):
    pass


class EvalError(TinypasError, RuntimeError):

    def __init__(self, msg, details=None):
        super().__init__(msg)
        self.msg = msg
        self.filename, self.lineno, self.offset, self.text = details or (None, None, None, None)

    def __str__(self):
        if self.lineno is None:
            return self.msg
        return f"{self.msg} ({self.filename}, line {self.lineno})"


class Error:

    def line_of(self, t):
        last_cr = self.text.rfind('\n', 0, t.index)
        next_cr = self.text.find('\n', t.index)
        if next_cr < 0:
            next_cr = None
        return self.text[last_cr+1: next_cr]

    def col_offset(self, t):
        return t.index - self.text.rfind('\n', 0, t.index)

    def error(self, t, msg, exc=ParseError):
        raise exc(
            msg,
            ( self.filename,
              t.lineno,
              self.col_offset(t),
              self.line_of(t)
            ))
