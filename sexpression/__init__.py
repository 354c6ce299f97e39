from .sexpression import (
    configure,
    conf_read,
    tokenize,
    parse_atom,
    read,
    read_all,
    read_unchecked,
    __version__)

# errors
from .sexpression import (
    SexpressionError,
    ParseError,
    UnexpectedEOF,
    MissingClosingParen,
    UnexpectedClosingParen,
    TrailingTokens,)

# tree nodes
from .sexpression import (
    Expression,
    OwnedExpression,
    Number,
    Bool,
    Null,
    Str,
    Symbol,
    List,
    OStr,
    OSymbol,
    OList,)

# symbol representations
from .symbols import (
    OwnedSymbol,
    StringSymbol,
    NamespacedSymbol,
    CategorizedSymbol,)

# conversion
from .walks import (
    to_owned,
    same_structure,)

# reader configs
from .sexpression import (
    conf_default,
    conf_fast_path,
    conf_strict,)
