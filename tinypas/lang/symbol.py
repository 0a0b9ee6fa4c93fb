import logging

logger = logging.getLogger(__name__)


class Symbol:

    def __init__(self, name, type=None):
        self.name = name
        self.type = type

    def __repr__(self):
        return f"<{self.__class__.__name__}(name={self.name!r})>"


class BuiltinTypeSymbol(Symbol):

    def __str__(self):
        return self.name

    def __eq__(self, other):
        return other.__class__ is BuiltinTypeSymbol and self.name == other.name

    __hash__ = Symbol.__hash__


class VarSymbol(Symbol):

    def __repr__(self):
        return f"<{self.__class__.__name__}(name={self.name!r}, type={self.type!r})>"


class SymbolTable:
    """Flat name -> symbol mapping.

    There is only one table per program: procedure blocks are analyzed
    against the same table as the program block, so their declarations are
    visible everywhere after the point of declaration.
    """

    BUILTIN_TYPES = ('INTEGER', 'REAL')

    def __init__(self):
        self.table = {}
        for name in self.BUILTIN_TYPES:
            self.define(BuiltinTypeSymbol(name))

    def define(self, symbol):
        logger.debug("Define: %r", symbol)
        self.table[symbol.name] = symbol
        return symbol

    def lookup(self, name):
        logger.debug("Lookup: %s", name)
        return self.table.get(name)

    def __contains__(self, name):
        return name in self.table

    def __getitem__(self, name):
        return self.table[name]

    def __iter__(self):
        return iter(self.table.values())

    def __len__(self):
        return len(self.table)

    def __str__(self):
        return "Symbols: [{}]".format(", ".join(repr(symbol) for symbol in self))
