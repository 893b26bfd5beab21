#!/usr/bin/env python3

import argparse as arg
import sys
import arith.frontend.tokenizer as tokenizer
import arith.frontend.parser as parser
import arith.interpreter.evaluator as evaluator
from arith.frontend.utils import CalcError, dump_tree

def run_line(src: str, args) -> int:
    """Runs one line through the pipeline, printing the diagnostics asked for in @args."""
    max_size = args.max_input if args.max_input > 0 else None
    tokens = tokenizer.tokenize(src, max_size)
    if args.tokens:
        print('tokens:', ' '.join(str(tok) for tok in tokens))
    tree = parser.parse(tokens)
    if args.ast:
        print('ast:')
        print(dump_tree(tree), end='')
    return evaluator.evaluate(tree)

def input_bound(value: str) -> int:
    bound = int(value)
    if bound < 0:
        raise arg.ArgumentTypeError(f'must be 0 or more, got {bound}')
    return bound

def report(err: CalcError):
    print(f'Error: {err}', file=sys.stderr)

def repl(args) -> int:
    try:
        import readline
    except ImportError:
        pass

    try:
        while (src := input(args.prompt)):
            try:
                value = run_line(src, args)
            except CalcError as err:
                report(err) # Only this line is lost
                continue
            print(f'The result is: {value}')
    except (EOFError, KeyboardInterrupt):
        print()
    return 0

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='arith',
        description='Evaluates integer arithmetic expressions',
        epilog='Version 0.1.0')

    parser.add_argument('-e', '--expr', dest='expr', default=None,
                        help='evaluate EXPR and exit instead of reading lines')
    parser.add_argument('-m', '--max-input', dest='max_input', type=input_bound,
                        default=tokenizer.MAX_INPUT_SIZE,
                        help='longest accepted input line, 0 for no limit')
    parser.add_argument('-p', '--prompt', dest='prompt', default='expr: ')
    parser.add_argument('-t', '--tokens', dest='tokens', action='store_true', default=False,
                        help='print the token stream')
    parser.add_argument('-a', '--ast', dest='ast', action='store_true', default=False,
                        help='print the expression tree')
    args = parser.parse_args(argv)

    if args.expr is None:
        return repl(args)

    try:
        print(run_line(args.expr, args))
    except CalcError as err:
        report(err)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
