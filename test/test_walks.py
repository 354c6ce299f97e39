import pytest
from sexpression._exports import *
from sexpression.walks import Walk, WalkOwned, to_owned, same_structure

sources = (
    '(define x 42)',
    '(define (factorial n) (if (= n 0) 1 (* n (factorial (- n 1)))))',
    '(1 symbol "string" true false null (1.5 ()))',
    '(std::vector 1 2 3)',
    '(fn:map var:xs (type:List (macro:when x)))',
    'atom',
    '"just a"',
    '-7',
)


class UpperSymbol(OwnedSymbol):
    """ upper cases every symbol it reads """

    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        return type(self) == type(other) and self.name == other.name

    @classmethod
    def from_str(cls, text):
        return cls(text.upper())

    def display(self):
        return self.name


def test_to_owned():
    expr = read('(define x 42)')
    owned = to_owned(expr)
    assert owned == OList([
        OSymbol(StringSymbol('define')),
        OSymbol(StringSymbol('x')),
        Number(42),
    ])
    assert expr.to_owned() == owned
    assert isinstance(owned, OwnedExpression)
    assert not isinstance(owned, Expression)


def test_to_owned_atoms():
    assert to_owned(Symbol('hello')) == OSymbol(StringSymbol('hello'))
    assert to_owned(Str('text')) == OStr('text')
    assert to_owned(Number(1.5)) == Number(1.5)
    assert to_owned(Bool(False)) == Bool(False)
    assert to_owned(Null()) == Null()
    assert to_owned(List([])) == OList([])


def test_owned_is_independent():
    source = '(sym "text" 12)'
    owned = read(source).to_owned()
    sym, text, num = owned
    assert type(sym.value) is StringSymbol
    assert type(text.value) is str
    assert not hasattr(sym, '_source')
    assert not hasattr(text, '_source')


def test_atoms_copied_and_bounds():
    expr = read(' (a 1 true null "s")')
    owned = to_owned(expr)
    for e, o in zip(expr, owned):
        assert (e._point_beg, e._point_end) == (o._point_beg, o._point_end)

    assert (owned._point_beg, owned._point_end) == (1, 20)
    for i in (1, 2, 3):
        assert owned[i] == expr[i]
        assert owned[i] is not expr[i]

    owned[1].value = 2.0
    owned[2]._set_bounds(0, 0)
    assert expr[1] == Number(1)
    assert (expr[2]._point_beg, expr[2]._point_end) == (6, 10)

    nan = read('+nan')
    assert to_owned(nan) is not nan
    assert same_structure(nan, to_owned(nan))


def test_same_structure():
    for source in sources:
        expr = read(source)
        assert same_structure(expr, to_owned(expr)), source
        for symbol_cls in (NamespacedSymbol, CategorizedSymbol, UpperSymbol):
            owned = to_owned(expr, symbol_cls=symbol_cls)
            assert same_structure(expr, owned), (source, symbol_cls)


def test_same_structure_mismatch():
    assert not same_structure(read('(a b)'), to_owned(read('(a)')))
    assert not same_structure(read('(a b)'), to_owned(read('(b a)')))
    assert not same_structure(read('a'), OStr('a'))
    assert not same_structure(read('"a"'), to_owned(read('a')))
    assert not same_structure(read('1'), Number(2))
    assert not same_structure(read('(a)'), to_owned(read('((a))')))
    assert not same_structure(read('a'), OSymbol(NamespacedSymbol('b')))


def test_render_owned():
    for source in sources[:4] + ('atom', '-7'):
        expr = read(source)
        assert str(to_owned(expr)) == str(expr) == source
        assert str(to_owned(expr, NamespacedSymbol)) == source

    categorized = to_owned(read('(fn:map xs)'), CategorizedSymbol)
    assert str(categorized) == '(fn:map var:xs)'


def test_string_symbol():
    sym = StringSymbol.from_str('abc')
    assert sym == 'abc'
    assert sym.display() == 'abc'
    assert type(sym.display()) is str
    assert str(sym) == 'abc'
    assert isinstance(sym, OwnedSymbol)


def test_namespaced_symbol():
    sym = NamespacedSymbol.from_str('std::vector')
    assert sym.namespace == 'std'
    assert sym.name == 'vector'
    assert sym.display() == 'std::vector'

    sym = NamespacedSymbol.from_str('main')
    assert sym.namespace is None
    assert sym.name == 'main'
    assert str(sym) == 'main'

    sym = NamespacedSymbol.from_str('a::b::c')
    assert (sym.namespace, sym.name) == ('a', 'b::c')

    assert NamespacedSymbol('x', 'n') == NamespacedSymbol.from_str('n::x')
    assert NamespacedSymbol('x') != NamespacedSymbol('x', 'n')
    assert len({NamespacedSymbol('x', 'n'), NamespacedSymbol.from_str('n::x')}) == 1


def test_categorized_symbol():
    cases = (
        ('fn:factorial', CategorizedSymbol.FUNCTION, 'factorial'),
        ('var:count', CategorizedSymbol.VARIABLE, 'count'),
        ('type:Result', CategorizedSymbol.TYPE, 'Result'),
        ('macro:when', CategorizedSymbol.MACRO, 'when'),
        ('count', CategorizedSymbol.VARIABLE, 'count'),
        ('weird:x', CategorizedSymbol.VARIABLE, 'x'),
        ('std::vector', CategorizedSymbol.VARIABLE, ':vector'),
    )
    for text, category, name in cases:
        sym = CategorizedSymbol.from_str(text)
        assert sym.category == category, text
        assert sym.name == name, text

    assert CategorizedSymbol.from_str('type:Result').display() == 'type:Result'
    assert CategorizedSymbol.from_str('count').display() == 'var:count'

    with pytest.raises(ValueError):
        CategorizedSymbol('x', 'constant')


def test_symbol_cls_nested():
    owned = to_owned(read('(a (b (c::d)) e)'), symbol_cls=UpperSymbol)
    assert owned == OList([
        OSymbol(UpperSymbol('A')),
        OList([OSymbol(UpperSymbol('B')),
               OList([OSymbol(UpperSymbol('C::D'))])]),
        OSymbol(UpperSymbol('E')),
    ])

    owned = read('(a (b (c::d)))').to_owned(NamespacedSymbol)
    assert owned[1][1][0].value.namespace == 'c'
    assert owned[0].value.namespace is None


def test_walk_unknown():
    with pytest.raises(NotImplementedError):
        to_owned(OList([]))

    with pytest.raises(NotImplementedError):
        to_owned('not a node')

    with pytest.raises(NotImplementedError):
        to_owned(Symbol('x'), symbol_cls=OwnedSymbol)


def test_walk_identity():
    expr = read('(a (b "c") 1)')
    walked = Walk()(expr)
    assert walked == expr
    assert walked is not expr
    assert walked[0] is expr[0]
    assert (walked._point_beg, walked._point_end) == (0, 13)

    assert isinstance(WalkOwned()(expr), OList)
