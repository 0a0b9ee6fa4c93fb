import typing


class Node:

    def __init__(self, *args, **kwargs):
        if args:
            p = args[0]
            self.lineno = p.lineno
            self.index = p.index
        self.__dict__.update(kwargs)

    def __str__(self):
        return "<{} {}>".format(
            self.__class__.__name__,
            ", ".join(
                f"{key}={getattr(self, key)}"
                for key in fields(self.__class__)
                if hasattr(self, key))
        )

    __repr__ = __str__

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(
            getattr(self, key, None) == getattr(other, key, None)
            for key in fields(self.__class__))

    __hash__ = object.__hash__


def fields(cls):
    return typing.get_type_hints(cls)


class Statement(Node):
    pass

class Expression(Node):
    pass

class Declaration(Node):
    pass

class Type(Node):
    name: str

class Var(Expression):
    name: str

class Num(Expression):
    value: str
    is_real: bool

class BinOp(Expression):
    left: Expression
    op: str
    right: Expression

class UnaryOp(Expression):
    op: str
    operand: Expression

class Compound(Statement):
    children: typing.List[Statement]

class Assign(Statement):
    left: Var
    right: Expression

class NoOp(Statement):
    pass

class VarDecl(Declaration):
    name: str
    type: Type

class Block(Node):
    declarations: typing.List[Declaration]
    compound: Compound

class ProcedureDecl(Declaration):
    name: str
    block: Block

class Program(Node):
    name: str
    block: Block
