from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Union

class TokenId(Enum):
    DIGIT = auto()
    OP_PLUS = auto()
    OP_MINUS = auto()
    OP_MUL = auto()
    OP_DIV = auto()
    RBRACE_LEFT = auto()
    RBRACE_RIGHT = auto()

class Token:
    def __init__(self, token_id: TokenId, value: str, pos: int = 0) -> None:
        self.token_id = token_id
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f'Token({self.token_id}, {self.value!r}, {self.pos})'

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.token_id, self.value, self.pos) == (other.token_id, other.value, other.pos)

    def __hash__(self) -> int:
        return hash((self.token_id, self.value, self.pos))

# Characters kept by the tokenizer, and the token each one becomes
token_map = {
    '+': TokenId.OP_PLUS,
    '-': TokenId.OP_MINUS,
    '*': TokenId.OP_MUL,
    '/': TokenId.OP_DIV,
    '(': TokenId.RBRACE_LEFT,
    ')': TokenId.RBRACE_RIGHT,
}
token_map.update({digit: TokenId.DIGIT for digit in '0123456789'})

op_symbols = {
    TokenId.OP_PLUS: '+',
    TokenId.OP_MINUS: '-',
    TokenId.OP_MUL: '*',
    TokenId.OP_DIV: '/',
}

class CalcError(Exception):
    pass

class CalcSyntaxError(CalcError):
    """Raised by the parser on malformed input.

    @pos is the index of the offending character in the raw input, or None
    when the error was found at the end of the token stream.
    """
    def __init__(self, message: str, pos: int|None = None) -> None:
        self.message = message
        self.pos = pos
        if pos is not None:
            message = f'{message} at position {pos}'
        super().__init__(message)

class CalcArithmeticError(CalcError, ArithmeticError):
    pass

class InputTooLongError(CalcError, ValueError):
    def __init__(self, length: int, max_size: int) -> None:
        self.length = length
        self.max_size = max_size
        super().__init__(f'input too long ({length} characters, at most {max_size} allowed)')

class ExpressionTooDeepError(CalcError):
    """Nesting or operator chain deeper than the interpreter stack allows."""
    def __init__(self) -> None:
        super().__init__('expression too deep')

@dataclass(frozen=True)
class Number:
    value: int

@dataclass(frozen=True)
class BinaryOp:
    op: TokenId
    left: Expr
    right: Expr

Expr = Union[Number, BinaryOp]

def dump_node(tree: Expr, level=0) -> str:
    if isinstance(tree, Number):
        return "\t" * level + str(tree.value) + "\n"
    ret = "\t" * level + op_symbols[tree.op] + "\n"
    for child in [tree.left, tree.right]:
        ret += dump_node(child, level + 1)
    return ret

def dump_tree(tree: Expr) -> str:
    """Indented dump of @tree, one node per line, children one tab deeper."""
    try:
        return dump_node(tree)
    except RecursionError:
        raise ExpressionTooDeepError() from None

class ParserState:
    """Cursor over a token stream, owned by a single parse() call."""
    tokens: List[Token]
    pos: int

    def __init__(self, tokens: List[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

def look(state: ParserState) -> TokenId|None:
    return state.tokens[state.pos].token_id if not state.at_end() else None

def match(state: ParserState, token_id: TokenId|List[TokenId], message: str) -> Token:
    tok = look(state)
    token_id = token_id if isinstance(token_id, list) else [token_id]
    if tok is None:
        raise CalcSyntaxError(f'{message}, got end of input')
    if not (tok in token_id):
        current = state.tokens[state.pos]
        raise CalcSyntaxError(f"{message}, got '{current.value}'", current.pos)
    state.pos += 1
    return state.tokens[state.pos - 1]
