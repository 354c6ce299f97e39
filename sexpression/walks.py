from sexpression._exports import *
from sexpression.symbols import StringSymbol


class Walk:
    """ Rebuild a tree by dispatching on node type. The base walk is
        the identity on atoms and rebuilds lists with walked children. """

    _type_funs = (
        (List, 'listp'),
        (Symbol, 'symbol'),
        (Str, 'string'),
        (Number, 'number'),
        (Bool, 'boolean'),
        (Null, 'null'),
    )

    def __call__(self, ast):
        for cls, attr in self._type_funs:
            if isinstance(ast, cls):
                fun = getattr(self, attr)
                wlk = fun(ast)
                if wlk is not ast:
                    self._loc(wlk, ast)
                return wlk

        raise NotImplementedError(f'missed something {ast!r}')

    @staticmethod
    def _loc(wlk, ast):
        wlk._point_beg = ast._point_beg
        wlk._point_end = ast._point_end
        return wlk

    def listp(self, ast):
        return ast.__class__([self(_) for _ in ast.collect])

    def symbol  (self, ast): return ast
    def string  (self, ast): return ast
    def number  (self, ast): return ast
    def boolean (self, ast): return ast
    def null    (self, ast): return ast


class WalkOwned(Walk):
    """ Borrowed tree to owned tree. Every symbol in the tree, nested
        or not, goes through symbol_cls.from_str. Every node is new,
        nothing is shared with the borrowed tree. """

    def __init__(self, symbol_cls=None):
        self.symbol_cls = StringSymbol if symbol_cls is None else symbol_cls

    def listp(self, ast):
        return OList([self(_) for _ in ast.collect])

    def symbol(self, ast):
        return OSymbol(self.symbol_cls.from_str(ast.value))

    def string(self, ast):
        return OStr(ast.value)

    def number  (self, ast): return Number(ast.value)
    def boolean (self, ast): return Bool(ast.value)
    def null    (self, ast): return Null()


def to_owned(expression, symbol_cls=None):
    return WalkOwned(symbol_cls)(expression)


_counterparts = {
    List: OList,
    Symbol: OSymbol,
    Str: OStr,
    Number: Number,
    Bool: Bool,
    Null: Null,
}


def same_structure(expression, owned):
    """ True if owned has the same variant as expression at every node,
        the same values and the same list lengths and order. An owned
        symbol matches if its own class reads the borrowed text to an
        equal symbol. """
    if _counterparts.get(type(expression)) is not type(owned):
        return False

    if isinstance(expression, List):
        return (len(expression.collect) == len(owned.collect) and
                all(same_structure(e, o)
                    for e, o in zip(expression.collect, owned.collect)))

    elif isinstance(expression, Symbol):
        return type(owned.value).from_str(expression.value) == owned.value

    elif isinstance(expression, Str):
        return expression.value == owned.value

    # nan never equals itself
    nan = expression.value != expression.value and owned.value != owned.value
    return nan or expression == owned
