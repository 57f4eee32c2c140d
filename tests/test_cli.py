# This library is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation; either version 3 of the
# License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, see
# <http://www.gnu.org/licenses/>.


"""
unittest for quasi.cli and quasi.repl

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from io import StringIO
from unittest import TestCase

from quasi.builtins import standard_environment
from quasi.cli import (
    CLIException, cli, cli_option_parser, main, parse_binding,
)
from quasi.lib import UnboundName
from quasi.node import Call, Symbol
from quasi.repl import PROMPT, read_eval, repl


def run_cli(*args):
    out = StringIO()
    options = cli_option_parser("quasi").parse_args(list(args))
    env = cli(options, stdout=out)
    return out.getvalue(), env


class CLITest(TestCase):


    def test_eval(self):
        out, env = run_cli("1 + 2")
        self.assertEqual(out, "3\n")


    def test_quote(self):
        out, env = run_cli("-q", "f(a + 1)")
        self.assertEqual(out, "f(a + 1)\n")

        out, env = run_cli("--quote", "f(~~a)")
        self.assertEqual(out, "f(~(~a))\n")


    def test_expand(self):
        out, env = run_cli("-b", "n=3", "-x", "f(~~n, ~~~xs)",
                           "-b", "xs=['a', 2]")
        self.assertEqual(out, "f(3, 'a', 2)\n")


    def test_bindings(self):
        out, env = run_cli("-b", "a=2", "-b", "b=a * 5", "b + 1")

        self.assertEqual(out, "11\n")
        self.assertEqual(env.lookup("a"), 2)
        self.assertEqual(env.lookup("b"), 10)


    def test_none_result(self):
        out, env = run_cli("None")
        self.assertEqual(out, "")


    def test_parse_binding(self):
        self.assertEqual(parse_binding("a=1"), ("a", "1"))
        self.assertEqual(parse_binding(" a = b == c"), ("a", " b == c"))

        for bad in ("a", "=1", "a=", "1a=2", "a b=1"):
            with self.assertRaises(CLIException, msg=bad):
                parse_binding(bad)


    def test_options(self):
        parser = cli_option_parser("/usr/bin/quasi")
        self.assertEqual(parser.prog, "quasi")

        options = parser.parse_args([])
        self.assertIsNone(options.expression)
        self.assertEqual(options.mode, "eval")
        self.assertEqual(options.bindings, [])
        self.assertFalse(options.interactive)
        self.assertFalse(options.verbose)

        with self.assertRaises(SystemExit):
            parser.parse_args(["-q", "-x", "1"])


    def test_main(self):
        self.assertEqual(main(["quasi", "None"]), 0)
        self.assertEqual(main(["quasi", "undefined_name"]), 1)
        self.assertEqual(main(["quasi", "-x", "f(~~nope)"]), 1)


class REPLTest(TestCase):


    def test_read_eval(self):
        env = standard_environment()

        self.assertIsNone(read_eval("a = 2", env))
        self.assertEqual(env.lookup("a"), 2)

        self.assertEqual(read_eval("a * 3", env), 6)
        self.assertEqual(env.lookup("_"), 6)

        self.assertEqual(read_eval(":q f(a)", env),
                         Call(Symbol("f"), [Symbol("a")]))
        self.assertEqual(read_eval(":x f(~~a)", env),
                         Call(Symbol("f"), [2]))

        # comparisons are not assignments
        self.assertEqual(read_eval("a == 2", env), True)

        with self.assertRaises(UnboundName):
            read_eval("nope", env)


    def test_repl(self):
        stdin = StringIO("a = 2\n"
                         "\n"
                         "a * 3\n"
                         ":q f(x)\n"
                         ":x f(~~a)\n"
                         "undefined\n"
                         "1 +\n"
                         "len(5)\n"
                         "_ + 1\n")
        stdout = StringIO()
        stderr = StringIO()

        env = repl(standard_environment(), stdin, stdout, stderr)

        out = stdout.getvalue()
        self.assertTrue(out.startswith(PROMPT))
        self.assertIn("6\n", out)
        self.assertIn("f(x)\n", out)
        self.assertIn("f(2)\n", out)
        self.assertIn("7\n", out)

        err = stderr.getvalue()
        self.assertIn("UnboundName", err)
        self.assertIn("QuoteSyntaxError", err)
        self.assertIn("TypeError", err)

        self.assertEqual(env.lookup("a"), 2)
        self.assertEqual(env.lookup("_"), 7)


#
# The end.
