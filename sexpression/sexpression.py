# tokenize
# parse
# walk

__version__ = '0.1.0'

import re

debug = False

# \s without \x1c-\x1f, which str.isspace counts but unicode White_Space does not
_space = r'(?:(?![\x1c-\x1f])\s)'
_space_re = re.compile(f'{_space}*')


class SexpressionError(Exception): pass


class ParseError(SexpressionError, SyntaxError):
    """ Base for every reader failure. The kind of failure is the
        class, the only payload is the optional point, the character
        offset into the source where the failure was detected. """

    message = 'parse error'

    def __init__(self, point=None):
        self.point = point
        msg = self.message if point is None else f'{self.message} at {point}'
        super().__init__(msg)


class UnexpectedEOF(ParseError):
    message = 'unexpected EOF'


class MissingClosingParen(ParseError):
    message = 'missing closing parenthesis'


class UnexpectedClosingParen(ParseError):
    message = 'unexpected closing parenthesis'


class TrailingTokens(ParseError):
    """ only raised by readers configured with allow_trailing=False """
    message = 'trailing tokens after expression'


class _m:
    """ helper methods"""

    def eq_value(self, other):
        return type(self) == type(other) and self.value == other.value

    def eq_collect(self, other):
        return type(self) == type(other) and self.collect == other.collect


def _print_number(value):
    # shortest form that reads back as the same float, numbers are only
    # tried for atoms starting with a digit or a sign
    if value != value:
        return '+nan'

    if value == float('inf'):
        return '+inf'

    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))

    return repr(value)


# tree node types

class Node:

    _point_beg = None
    _point_end = None

    def _set_bounds(self, beg=None, end=None):
        self._point_beg = beg
        self._point_end = end
        return self

    def __hash__(self):
        return hash((self.__class__, self.value))

    def __repr__(self):
        pb, pe = self._point_beg, self._point_end
        pts = f' ::{pb}:{pe}' if debug else ''
        return f'<{self.__class__.__name__} {self.value!r}{pts}>'

    def __str__(self):
        return self._print()


class Expression(Node):
    """ A node of the borrowed tree. Str and Symbol nodes reference
        spans of the source they were read from instead of copying
        them, every other node carries no text at all. """

    def to_owned(self, symbol_cls=None):
        from sexpression.walks import to_owned
        return to_owned(self, symbol_cls=symbol_cls)


class OwnedExpression(Node):
    """ A node of the owned tree, independent of any source text. """


class Number(Expression, OwnedExpression):

    __eq__ = _m.eq_value
    __hash__ = Node.__hash__

    def __init__(self, value):
        self.value = float(value)

    def _print(self):
        return _print_number(self.value)


class Bool(Expression, OwnedExpression):

    __eq__ = _m.eq_value
    __hash__ = Node.__hash__

    def __init__(self, value):
        self.value = bool(value)

    def _print(self):
        return 'true' if self.value else 'false'


class Null(Expression, OwnedExpression):

    __eq__ = _m.eq_value
    __hash__ = Node.__hash__

    value = None

    def __repr__(self):
        return '<Null>'

    def _print(self):
        return 'null'


class Borrowed(Expression):
    """ Text payload that is a span of the source, sliced on access.
        Str('abc') and Symbol('abc') with no offsets cover all of
        the text they are given. """

    __eq__ = _m.eq_value
    __hash__ = Node.__hash__

    def __init__(self, source, beg=0, end=None):
        self._source = source
        self._beg = beg
        self._end = len(source) if end is None else end

    @property
    def value(self):
        return self._source[self._beg:self._end]


class Str(Borrowed):
    """ String literal without its quotes, no escapes are processed """

    def _print(self):
        return f'"{self.value}"'


class Symbol(Borrowed):

    def _print(self):
        return self.value


class ListAbstract(Node):

    __eq__ = _m.eq_collect
    __hash__ = None

    _o, _c = '()'

    @classmethod
    def from_elements(cls, *elements):
        return cls(list(elements))

    def __init__(self, collect):
        self.collect = collect

    def __repr__(self):
        pb, pe = self._point_beg, self._point_end
        pts = f' ::{pb}:{pe}' if debug else ''
        return f'<{self._o} {repr(self.collect)[1:-1]} {self._c}{pts}>'

    def __len__(self):
        return len(self.collect)

    def __iter__(self):
        return iter(self.collect)

    def __getitem__(self, index):
        return self.collect[index]

    @property
    def value(self):
        return self.collect

    def _print(self):
        return self._o + ' '.join(c._print() for c in self.collect) + self._c


class List(ListAbstract, Expression):
    """ Owns its children, which are borrowed nodes. """


class OStr(OwnedExpression):

    __eq__ = _m.eq_value
    __hash__ = Node.__hash__

    def __init__(self, value):
        self.value = value

    def _print(self):
        return f'"{self.value}"'


class OSymbol(OwnedExpression):
    """ The value is an OwnedSymbol, see sexpression.symbols """

    __eq__ = _m.eq_value
    __hash__ = Node.__hash__

    def __init__(self, value):
        self.value = value

    def _print(self):
        return self.value.display()


class OList(ListAbstract, OwnedExpression):
    pass


# tokenizer

def make_tokenizer(structural="()'"):
    """ Return a function mapping source text to a list of (beg, end)
        token spans. Each structural char is always a token of its own,
        everything else is split on whitespace. """
    delims = re.escape(structural)
    token_re = re.compile(f'[{delims}]|(?:(?!{_space}|[{delims}]).)+', re.DOTALL)

    def tokenize_spans(source):
        return [m.span() for m in token_re.finditer(source)]

    return tokenize_spans


_tokenize_spans = make_tokenizer()


def tokenize(source):
    return [source[beg:end] for beg, end in _tokenize_spans(source)]


# atom classifier

_number_starts = frozenset('0123456789+-')
_keywords = (
    ('true', lambda: Bool(True)),
    ('false', lambda: Bool(False)),
    ('null', Null),
)


def parse_atom(source, beg=0, end=None, single_char_symbol=False):
    """ Classify source[beg:end] as Number, Bool, Null, Str or Symbol.
        Never fails, anything unrecognized is a Symbol. """
    if end is None:
        end = len(source)

    length = end - beg
    if length == 0 or single_char_symbol and length == 1:
        return Symbol(source, beg, end)

    if source[beg] in _number_starts:
        text = source[beg:end]
        # float() is more permissive than a plain decimal literal
        if text.isascii() and '_' not in text and not text[-1].isspace():
            try:
                return Number(float(text))
            except ValueError:
                pass

    for keyword, make in _keywords:
        if length == len(keyword) and source.startswith(keyword, beg, end):
            return make()

    if length >= 2 and source[beg] == '"' and source[end - 1] == '"':
        return Str(source, beg + 1, end - 1)

    return Symbol(source, beg, end)


# parser

def configure(single_char_symbol=False,
              t_beg_list='(',
              t_end_list=')',
              t_to_quote="'",):
    """ Return parse, a generator function that yields every top level
        expression in a source string, left to right.

        single_char_symbol: classify every one char atom as a Symbol,
        even digits, instead of trying to read it as a number first.

        The quote char is split out as its own token but has no
        meaning beyond that, it reads as the Symbol "'". """

    toks = t_beg_list, t_end_list, t_to_quote
    for tok in toks:
        if not isinstance(tok, str) or len(tok) != 1 or tok.isspace():
            raise ValueError(f'structural tokens must be single non whitespace chars, got {tok!r}')

    if len(set(toks)) != len(toks):
        raise ValueError(f'structural tokens must be distinct, got {toks!r}')

    tokenize_spans = make_tokenizer(''.join(toks))

    def parse_expression(source, spans, index):
        """ parse the expression starting at spans[index]
            returns the expression and the index after it """
        if index >= len(spans):
            raise UnexpectedEOF(len(source))

        beg, end = spans[index]
        index += 1
        char = source[beg]
        # structural chars never share a token so the first char is enough
        if char == t_beg_list:
            collect = []
            while True:
                if index >= len(spans):
                    raise MissingClosingParen(beg)

                next_beg, next_end = spans[index]
                if source[next_beg] == t_end_list:
                    return List(collect)._set_bounds(beg, next_end), index + 1

                expression, index = parse_expression(source, spans, index)
                collect.append(expression)

        elif char == t_end_list:
            raise UnexpectedClosingParen(beg)

        atom = parse_atom(source, beg, end, single_char_symbol=single_char_symbol)
        return atom._set_bounds(beg, end), index

    def parse(source):
        spans = tokenize_spans(source)
        if debug:
            print('tokens:', spans)

        index = 0
        while index < len(spans):
            expression, index = parse_expression(source, spans, index)
            yield expression

    return parse


def conf_read(parse, allow_trailing=True):
    """ Return read, which returns the first expression from parse.
        By default anything after that expression is never looked at,
        not even to check that it is well formed. """

    def read(source):
        expression = next(parse(source), None)
        if expression is None:
            raise UnexpectedEOF(len(source))

        if not allow_trailing:
            point = _space_re.match(source, expression._point_end).end()
            if point < len(source):
                raise TrailingTokens(point)

        if debug:
            print('read:', repr(expression))

        return expression

    return read


# reader configs

conf_default = {}

conf_fast_path = {
    # every one char atom is a symbol, so "5" is not a number
    'single_char_symbol': True,
}

conf_strict = {
    # for conf_read, not configure
    'allow_trailing': False,
}


parse_default = configure(**conf_default)
read = conf_read(parse_default)


def read_all(source):
    """ every top level expression in source, [] if there are none """
    return list(parse_default(source))


def read_unchecked(source):
    """ Like read but a parse failure is a RuntimeError that is not
        meant to be handled. Only for trusted input and tests. """
    try:
        return read(source)
    except ParseError as e:
        raise RuntimeError(f'failed to parse s-expression: {e}') from e
