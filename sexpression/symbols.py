# symbol representations for owned trees

from sexpression.sexpression import _m


class OwnedSymbol:
    """ Base for symbol representations in owned trees.

        A subclass must provide from_str, which constructs a symbol
        from the text of a borrowed Symbol, and display, which renders
        it back to text. Rendering from_str(text) does not have to give
        back text exactly, see CategorizedSymbol. """

    @classmethod
    def from_str(cls, text):
        raise NotImplementedError

    def display(self):
        raise NotImplementedError

    def __str__(self):
        return self.display()


class StringSymbol(str, OwnedSymbol):
    """ Plain text passthrough, the default. """

    @classmethod
    def from_str(cls, text):
        return cls(text)

    def display(self):
        return str.__str__(self)


class NamespacedSymbol(OwnedSymbol):
    """ std::vector -> namespace std, name vector """

    separator = '::'

    __eq__ = _m.eq_value

    def __init__(self, name, namespace=None):
        self.name = name
        self.namespace = namespace

    @classmethod
    def from_str(cls, text):
        namespace, sep, name = text.partition(cls.separator)
        if not sep:
            return cls(text)

        return cls(name, namespace)

    @property
    def value(self):
        return self.namespace, self.name

    def __hash__(self):
        return hash((self.__class__, self.value))

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.display()}>'

    def display(self):
        if self.namespace is None:
            return self.name

        return f'{self.namespace}{self.separator}{self.name}'


class CategorizedSymbol(OwnedSymbol):
    """ fn:factorial -> category function, name factorial

        Symbols without a known prefix are variables. An unknown
        prefix is dropped, the text after the first colon is the name.
        Rendering always writes the prefix, so count displays as
        var:count. """

    FUNCTION = 'function'
    VARIABLE = 'variable'
    TYPE = 'type'
    MACRO = 'macro'

    prefixes = {
        'fn': FUNCTION,
        'var': VARIABLE,
        'type': TYPE,
        'macro': MACRO,
    }

    __eq__ = _m.eq_value

    def __init__(self, name, category=VARIABLE):
        if category not in self.prefixes.values():
            raise ValueError(f'unknown symbol category {category!r}')

        self.name = name
        self.category = category

    @classmethod
    def from_str(cls, text):
        prefix, sep, name = text.partition(':')
        if not sep:
            return cls(text)

        return cls(name, cls.prefixes.get(prefix, cls.VARIABLE))

    @property
    def value(self):
        return self.category, self.name

    def __hash__(self):
        return hash((self.__class__, self.value))

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.display()}>'

    def display(self):
        prefix = [p for p, c in self.prefixes.items() if c == self.category][0]
        return f'{prefix}:{self.name}'
