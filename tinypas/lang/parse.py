from .error import Error
from .ast import (
    Program, Block, VarDecl, ProcedureDecl, Type, Compound, Assign, NoOp,
    BinOp, UnaryOp, Num, Var)


class Parser(Error):
    """Recursive-descent parser producing a :class:`Program`.

    Every rule looks at one token (``self.current``) and either consumes it
    with :meth:`eat` or fails. There is no error recovery: the first mismatch
    raises :class:`ParseError`.
    """

    def __init__(self, filename, text):
        self.filename = filename
        self.text = text
        self.tokens = None
        self.current = None

    def error(self, t, msg=None):
        if t.type == 'EOF':
            super().error(t, "Unexpected end of input")
        super().error(t, msg or f"Invalid token {t.value!r}")

    def advance(self):
        self.current = next(self.tokens)

    def eat(self, type):
        t = self.current
        if t.type != type:
            self.error(t, f"Expected {type}, got {t.type} {t.value!r}")
        if type != 'EOF':
            self.advance()
        return t

    def parse(self, tokens):
        self.tokens = iter(tokens)
        self.advance()
        node = self.program()
        self.eat('EOF')
        return node

    def program(self):
        """program : PROGRAM variable SEMI block DOT"""
        t = self.eat('PROGRAM')
        name = self.variable().name
        self.eat('SEMI')
        block = self.block()
        self.eat('DOT')
        return Program(t, name=name, block=block)

    def block(self):
        """block : declarations compound_statement"""
        t = self.current
        declarations = self.declarations()
        return Block(t, declarations=declarations, compound=self.compound_statement())

    def declarations(self):
        """declarations : (VAR (variable_declaration SEMI)+)?
                          (PROCEDURE ID SEMI block SEMI)*
        """
        declarations = []
        if self.current.type == 'VAR':
            self.eat('VAR')
            declarations.extend(self.variable_declaration())
            self.eat('SEMI')
            while self.current.type == 'ID':
                declarations.extend(self.variable_declaration())
                self.eat('SEMI')

        while self.current.type == 'PROCEDURE':
            t = self.eat('PROCEDURE')
            name = self.eat('ID').value
            self.eat('SEMI')
            block = self.block()
            self.eat('SEMI')
            declarations.append(ProcedureDecl(t, name=name, block=block))
        return declarations

    def variable_declaration(self):
        """variable_declaration : ID (COMMA ID)* COLON type_spec"""
        names = [self.eat('ID')]
        while self.current.type == 'COMMA':
            self.eat('COMMA')
            names.append(self.eat('ID'))
        self.eat('COLON')
        type = self.type_spec()
        return [VarDecl(t, name=t.value, type=type) for t in names]

    def type_spec(self):
        """type_spec : INTEGER | REAL"""
        t = self.current
        if t.type == 'INTEGER':
            self.eat('INTEGER')
        else:
            self.eat('REAL')
        return Type(t, name=t.value)

    def compound_statement(self):
        """compound_statement : BEGIN statement_list END"""
        t = self.eat('BEGIN')
        children = self.statement_list()
        self.eat('END')
        return Compound(t, children=children)

    def statement_list(self):
        """statement_list : statement (SEMI statement)*"""
        statements = [self.statement()]
        while self.current.type == 'SEMI':
            self.eat('SEMI')
            statements.append(self.statement())

        # an identifier here means a ';' is missing before it
        if self.current.type == 'ID':
            self.error(self.current, f"Missing ';' before {self.current.value!r}")
        return statements

    def statement(self):
        """statement : compound_statement | assignment_statement | empty"""
        if self.current.type == 'BEGIN':
            return self.compound_statement()
        elif self.current.type == 'ID':
            return self.assignment_statement()
        return self.empty()

    def assignment_statement(self):
        """assignment_statement : variable ASSIGN expr"""
        left = self.variable()
        t = self.eat('ASSIGN')
        return Assign(t, left=left, right=self.expr())

    def variable(self):
        """variable : ID"""
        t = self.eat('ID')
        return Var(t, name=t.value)

    def empty(self):
        return NoOp(self.current)

    def expr(self):
        """expr : term ((PLUS | MINUS) term)*"""
        node = self.term()
        while self.current.type in ('PLUS', 'MINUS'):
            t = self.eat(self.current.type)
            node = BinOp(t, left=node, op=t.type, right=self.term())
        return node

    def term(self):
        """term : factor ((MUL | INTEGER_DIV | FLOAT_DIV) factor)*"""
        node = self.factor()
        while self.current.type in ('MUL', 'INTEGER_DIV', 'FLOAT_DIV'):
            t = self.eat(self.current.type)
            node = BinOp(t, left=node, op=t.type, right=self.factor())
        return node

    def factor(self):
        """factor : (PLUS | MINUS) factor
                  | INTEGER_CONST
                  | REAL_CONST
                  | LPAREN expr RPAREN
                  | variable
        """
        t = self.current
        if t.type in ('PLUS', 'MINUS'):
            self.eat(t.type)
            return UnaryOp(t, op=t.type, operand=self.factor())
        elif t.type == 'INTEGER_CONST':
            self.eat('INTEGER_CONST')
            return Num(t, value=t.value, is_real=False)
        elif t.type == 'REAL_CONST':
            self.eat('REAL_CONST')
            return Num(t, value=t.value, is_real=True)
        elif t.type == 'LPAREN':
            self.eat('LPAREN')
            node = self.expr()
            self.eat('RPAREN')
            return node
        elif t.type == 'ID':
            return self.variable()
        self.error(t)
