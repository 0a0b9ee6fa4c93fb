import unittest
from ..lang.lex import Lexer
from ..lang.error import LexError


def tokenize(text):
    return [(t.type, t.value) for t in Lexer("<test>").tokenize(text)]


class TestCase(unittest.TestCase):

    def assertTokens(self, text, expected):
        with self.subTest(text):
            self.assertEqual(tokenize(text), expected + [('EOF', '')])


class NumberTest(TestCase):

    def test_integer(self):
        self.assertTokens("42", [('INTEGER_CONST', '42')])

    def test_real(self):
        self.assertTokens("3.14", [('REAL_CONST', '3.14')])
        self.assertTokens("3.", [('REAL_CONST', '3.')])

    def test_real_then_dot(self):
        self.assertTokens("1.5.", [('REAL_CONST', '1.5'), ('DOT', '.')])


class WordTest(TestCase):

    def test_reserved(self):
        self.assertTokens(
            "PROGRAM VAR BEGIN END PROCEDURE INTEGER REAL DIV",
            [('PROGRAM', 'PROGRAM'),
             ('VAR', 'VAR'),
             ('BEGIN', 'BEGIN'),
             ('END', 'END'),
             ('PROCEDURE', 'PROCEDURE'),
             ('INTEGER', 'INTEGER'),
             ('REAL', 'REAL'),
             ('INTEGER_DIV', 'DIV')])

    def test_case_sensitive(self):
        self.assertTokens("begin Begin", [('ID', 'begin'), ('ID', 'Begin')])

    def test_identifier(self):
        self.assertTokens("x1 BEGINNER", [('ID', 'x1'), ('ID', 'BEGINNER')])


class SymbolTest(TestCase):

    def test_assign_and_colon(self):
        self.assertTokens("a := b : c", [
            ('ID', 'a'), ('ASSIGN', ':='), ('ID', 'b'), ('COLON', ':'), ('ID', 'c')])
        self.assertTokens("::=", [('COLON', ':'), ('ASSIGN', ':=')])

    def test_single(self):
        self.assertTokens("+-*/();.,", [
            ('PLUS', '+'),
            ('MINUS', '-'),
            ('MUL', '*'),
            ('FLOAT_DIV', '/'),
            ('LPAREN', '('),
            ('RPAREN', ')'),
            ('SEMI', ';'),
            ('DOT', '.'),
            ('COMMA', ',')])


class SkipTest(TestCase):

    def test_whitespace(self):
        self.assertTokens(" \t\r\n x \n", [('ID', 'x')])

    def test_comment(self):
        self.assertTokens("{ a comment } x { another\n one }", [('ID', 'x')])

    def test_empty(self):
        self.assertTokens("", [])
        self.assertTokens("{}", [])

    def test_lineno(self):
        tokens = list(Lexer("<test>").tokenize("a\n{\n}\nb"))
        self.assertEqual([t.lineno for t in tokens[:2]], [1, 4])

    def test_single_eof(self):
        tokens = Lexer("<test>").tokenize("x")
        self.assertEqual(next(tokens).type, 'ID')
        self.assertEqual(next(tokens).type, 'EOF')
        with self.assertRaises(StopIteration):
            next(tokens)


class ErrorTest(TestCase):

    def test_bad_character(self):
        with self.assertRaises(LexError) as cm:
            tokenize("x := 1 ? 2")
        self.assertIn("'?'", cm.exception.msg)
        self.assertEqual(cm.exception.lineno, 1)
        self.assertEqual(cm.exception.offset, 8)

    def test_underscore(self):
        with self.assertRaises(LexError):
            tokenize("a_b")

    def test_unterminated_comment(self):
        with self.assertRaises(LexError) as cm:
            tokenize("x { never closed")
        self.assertEqual(cm.exception.msg, "Unterminated comment")

    def test_error_is_syntax_error(self):
        with self.assertRaises(SyntaxError):
            tokenize("!")

    def test_lazy(self):
        tokens = Lexer("<test>").tokenize("a b !")
        self.assertEqual(next(tokens).value, 'a')
        self.assertEqual(next(tokens).value, 'b')
        with self.assertRaises(LexError):
            next(tokens)
