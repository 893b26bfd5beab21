import io
import unittest
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock
import arith_repl

class TestRepl(unittest.TestCase):
    def run_main(self, argv, stdin=None):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            if stdin is None:
                code = arith_repl.main(argv)
            else:
                lines = iter(stdin)
                def fake_input(prompt=''):
                    try:
                        return next(lines)
                    except StopIteration:
                        raise EOFError
                with mock.patch('builtins.input', fake_input):
                    code = arith_repl.main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_expr(self):
        code, out, err = self.run_main(['-e', '2+3*4'])
        self.assertEqual((code, out, err), (0, '14\n', ''))

    def test_expr_error(self):
        code, out, err = self.run_main(['-e', '5/0'])
        self.assertEqual(code, 1)
        self.assertEqual(err, 'Error: division by zero\n')

    def test_tokens_and_ast(self):
        code, out, _ = self.run_main(['-t', '-a', '-e', '1 + 2'])
        self.assertEqual(code, 0)
        self.assertEqual(out, 'tokens: 1 + 2\nast:\n+\n\t1\n\t2\n3\n')

    def test_max_input(self):
        code, _, err = self.run_main(['-m', '3', '-e', '1 + 2'])
        self.assertEqual(code, 1)
        self.assertIn('input too long', err)
        code, out, _ = self.run_main(['-m', '0', '-e', '1 + 2'])
        self.assertEqual((code, out), (0, '3\n'))

    def test_negative_max_input(self):
        with self.assertRaises(SystemExit) as cm:
            self.run_main(['-m', '-5', '-e', '1+2'])
        self.assertEqual(cm.exception.code, 2)

    def test_unbounded_loop_survives_deep_input(self):
        lines = ['1+' * 10000 + '1', '(' * 10000 + '1' + ')' * 10000, '2+2']
        code, out, err = self.run_main(['-m', '0'], lines)
        self.assertEqual(code, 0)
        self.assertEqual(err.count('Error: expression too deep'), 2)
        self.assertIn('The result is: 4', out)

    def test_unbounded_ast_of_deep_chain(self):
        code, out, err = self.run_main(['-m', '0', '-a', '-e', '1+' * 10000 + '1'])
        self.assertEqual(code, 1)
        self.assertEqual(err, 'Error: expression too deep\n')

    def test_loop_survives_errors(self):
        code, out, err = self.run_main([], ['2+', '(2+3)*4', '5/0', '10-2-3'])
        self.assertEqual(code, 0)
        self.assertEqual(out.count('The result is:'), 2)
        self.assertIn('The result is: 20', out)
        self.assertIn('The result is: 5', out)
        self.assertEqual(err.count('Error:'), 2)

    def test_empty_line_stops(self):
        code, out, _ = self.run_main([], ['1+1', '', '2+2'])
        self.assertEqual(code, 0)
        self.assertIn('The result is: 2', out)
        self.assertNotIn('The result is: 4', out)

if __name__ == '__main__':
    unittest.main()
