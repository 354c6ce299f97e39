from .sexpression import (
    configure,
    conf_read,
    make_tokenizer,
    tokenize,
    parse_atom,
    read,
    read_all,
    read_unchecked,
    parse_default,
    __version__)

# errors
from .sexpression import (
    SexpressionError,
    ParseError,
    UnexpectedEOF,
    MissingClosingParen,
    UnexpectedClosingParen,
    TrailingTokens,)

# borrowed tree
from .sexpression import (
    Expression,
    Number,
    Bool,
    Null,
    Str,
    Symbol,
    List,)

# owned tree
from .sexpression import (
    OwnedExpression,
    OStr,
    OSymbol,
    OList,)

# symbol representations
from .symbols import (
    OwnedSymbol,
    StringSymbol,
    NamespacedSymbol,
    CategorizedSymbol,)

# reader configs
from .sexpression import (
    conf_default,
    conf_fast_path,
    conf_strict,)
