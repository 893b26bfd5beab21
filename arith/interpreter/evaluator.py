#!/usr/bin/env python3

from __future__ import annotations
from arith.frontend.utils import Expr, Number, BinaryOp, TokenId, CalcArithmeticError, ExpressionTooDeepError
from arith.frontend.tokenizer import MAX_INPUT_SIZE
from arith.frontend.parser import parse_source

def divide(x: int, y: int) -> int:
    """Integer division truncating toward zero, unlike Python's //."""
    if y == 0:
        raise CalcArithmeticError('division by zero')
    quotient = abs(x) // abs(y)
    return -quotient if (x < 0) != (y < 0) else quotient

op_map = {
    TokenId.OP_PLUS: lambda x, y: x + y,
    TokenId.OP_MINUS: lambda x, y: x - y,
    TokenId.OP_MUL: lambda x, y: x * y,
    TokenId.OP_DIV: divide
}

def evaluate_node(tree: Expr) -> int:
    if isinstance(tree, Number):
        return tree.value
    return op_map[tree.op](evaluate_node(tree.left), evaluate_node(tree.right))

def evaluate(tree: Expr) -> int:
    try:
        return evaluate_node(tree)
    except RecursionError:
        raise ExpressionTooDeepError() from None

def calculate(src: str, max_size: int|None = MAX_INPUT_SIZE) -> int:
    return evaluate(parse_source(src, max_size))
