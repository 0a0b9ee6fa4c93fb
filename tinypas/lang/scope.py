from .visit import Visitor
from .symbol import Symbol, VarSymbol
from .error import SemanticError
from . import ast

class ScopeVisitor(Visitor):

    def lookup_var(self, node, symtable):
        if symtable.lookup(node.name) is None:
            self.error(node, f"Undeclared variable {node.name!r}", SemanticError)

    @_(list)
    def visit(self, node, symtable):
        for subnode in node:
            self.visit(subnode, symtable)

    @_(ast.Program)
    def visit(self, node, symtable):
        self.visit(node.block, symtable)
        return symtable

    @_(ast.Block)
    def visit(self, node, symtable):
        self.visit(node.declarations, symtable)
        self.visit(node.compound, symtable)

    @_(ast.VarDecl)
    def visit(self, node, symtable):
        type_symbol = symtable.lookup(node.type.name)
        if type_symbol is None:
            self.error(node.type, f"Unknown type {node.type.name!r}", SemanticError)
        symtable.define(VarSymbol(node.name, type_symbol))

    @_(ast.ProcedureDecl)
    def visit(self, node, symtable):
        symtable.define(Symbol(node.name))
        self.visit(node.block, symtable)

    @_(ast.Type, ast.NoOp, ast.Num)
    def visit(self, node, symtable):
        pass

    @_(ast.Compound)
    def visit(self, node, symtable):
        self.visit(node.children, symtable)

    @_(ast.Assign)
    def visit(self, node, symtable):
        self.lookup_var(node.left, symtable)
        self.visit(node.right, symtable)

    @_(ast.Var)
    def visit(self, node, symtable):
        self.lookup_var(node, symtable)

    @_(ast.BinOp)
    def visit(self, node, symtable):
        self.visit(node.left, symtable)
        self.visit(node.right, symtable)

    @_(ast.UnaryOp)
    def visit(self, node, symtable):
        self.visit(node.operand, symtable)
