#!/usr/bin/env python3

from __future__ import annotations
from typing import List
from arith.frontend.utils import *
from arith.frontend.tokenizer import tokenize, MAX_INPUT_SIZE

# Grammar:
# add_expr    = mult_expr, { add_op, mult_expr } ;
# mult_expr   = atomic_expr, { mul_op, atomic_expr } ;
# atomic_expr = number | "(", add_expr, ")" ;
# add_op      = "+" | "-" ;
# mul_op      = "*" | "/" ;
# number      = digit, { digit } ;
# digit       = ? regex [0-9] ? ;

add_ops = [TokenId.OP_PLUS, TokenId.OP_MINUS]
mul_ops = [TokenId.OP_MUL, TokenId.OP_DIV]

def add_expression(state: ParserState) -> Expr:
    tree = mult_expression(state)
    while look(state) in add_ops:
        op = match(state, add_ops, 'expected operator')
        rhs = mult_expression(state)
        tree = BinaryOp(op.token_id, tree, rhs)
    return tree

def mult_expression(state: ParserState) -> Expr:
    tree = atomic_expression(state)
    while look(state) in mul_ops:
        op = match(state, mul_ops, 'expected operator')
        rhs = atomic_expression(state)
        tree = BinaryOp(op.token_id, tree, rhs)
    return tree

def atomic_expression(state: ParserState) -> Expr:
    if look(state) == TokenId.RBRACE_LEFT:
        match(state, TokenId.RBRACE_LEFT, 'expected operand')
        tree = add_expression(state)
        match(state, TokenId.RBRACE_RIGHT, 'unbalanced parentheses')
    else:
        tree = number(state)
    return tree

def number(state: ParserState) -> Number:
    first = match(state, TokenId.DIGIT, 'expected operand')
    digits = first.value
    while look(state) == TokenId.DIGIT:
        digits += match(state, TokenId.DIGIT, 'expected digit').value
    try:
        return Number(int(digits))
    except ValueError: # Over the interpreter's int string conversion limit
        raise CalcSyntaxError(f'number too long ({len(digits)} digits)', first.pos) from None

def parse(tokens: List[Token]) -> Expr:
    """Builds the expression tree for @tokens.

    The whole stream must be consumed: "2+3)" is rejected instead of being
    read as "2+3".
    """
    state = ParserState(tokens)
    try:
        tree = add_expression(state)
    except RecursionError:
        raise ExpressionTooDeepError() from None
    if not state.at_end():
        extra = tokens[state.pos]
        raise CalcSyntaxError(f"trailing input '{extra.value}'", extra.pos)
    return tree

def parse_source(src: str, max_size: int|None = MAX_INPUT_SIZE) -> Expr:
    return parse(tokenize(src, max_size))
