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
unittest for quasi.builder

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from unittest import TestCase

from quasi.builder import build_call
from quasi.builtins import standard_environment
from quasi.deparse import deparse
from quasi.evaluator import evaluate
from quasi.lib import (
    InvalidHead, InvalidSymbol, InvalidDefinitionName, UnquoteTypeError,
)
from quasi.node import (
    Constant, Symbol, Call, Argument, Single, Splice, Define,
    contains_markers,
)


foo = Symbol("foo")


class BuildCallTest(TestCase):


    def test_define(self):
        built = build_call("foo", [Argument(Define("x"), Constant(10))])

        self.assertEqual(built, Call(foo, [Argument("x", Constant(10))]))
        self.assertEqual(deparse(built), "foo(x = 10)")
        self.assertEqual(str(built), "foo(x = 10)")

        self.assertEqual(evaluate(built, {"foo": lambda x: x * 2}), 20)


    def test_define_pair(self):
        built = build_call("foo", [Define("x", 10)])
        arg = built.args[0]

        self.assertEqual(arg.name, "x")
        self.assertEqual(arg.value, Constant(10))


    def test_define_none_value(self):
        built = build_call("foo", [Define("x", None)])

        self.assertEqual(built, Call(foo, [Argument("x", Constant(None))]))
        self.assertEqual(str(built), "foo(x = None)")


    def test_pairs(self):
        built = build_call("foo", [("x", 1),
                                   (None, Symbol("y")),
                                   (Define(Symbol("nm")), 2),
                                   ("", "s")],
                           {"nm": "k"})

        self.assertEqual(built, Call(foo, [Argument("x", 1),
                                           Symbol("y"),
                                           Argument("k", 2),
                                           Constant("s")]))

        # a tuple which isn't a pair is just an unliftable value
        with self.assertRaises(UnquoteTypeError):
            build_call("foo", [(1, 2)])


    def test_define_empty(self):
        with self.assertRaises(InvalidDefinitionName):
            build_call("foo", [Define("", 10)])


    def test_string_head(self):
        built = build_call("foo", ["bar", 1])

        self.assertEqual(built.head, foo)
        self.assertEqual(built.args[0].value, Constant("bar"))
        self.assertEqual(built.args[1].value, Constant(1))


    def test_node_head(self):
        head = Call(Symbol("make"), [])
        built = build_call(head, [1])

        self.assertIs(built.head, head)

        env = {"make": lambda: (lambda n: n + 1)}
        self.assertEqual(evaluate(built, env), 2)


    def test_callable_head(self):
        built = build_call(len, ["abc"])

        self.assertEqual(built.head, Constant(len))
        self.assertEqual(evaluate(built), 3)


    def test_single_head(self):
        built = build_call(Single(Symbol("fn")), [1], {"fn": foo})
        self.assertEqual(built, Call(foo, [1]))


    def test_invalid_head(self):
        with self.assertRaises(InvalidHead):
            build_call(5)

        with self.assertRaises(InvalidHead):
            build_call(Constant(5))

        with self.assertRaises(InvalidSymbol):
            build_call("")


    def test_markers(self):
        built = build_call("foo", [Single(Symbol("v")),
                                   Splice(Symbol("xs")),
                                   Argument("z", 3)],
                           {"v": Symbol("w"), "xs": [1, 2]})

        self.assertEqual(built, Call(foo, [Symbol("w"), 1, 2,
                                           Argument("z", 3)]))
        self.assertFalse(contains_markers(built))


    def test_splice_mapping(self):
        built = build_call("dict", [Splice({"a": 1, "b": 2})])

        self.assertEqual(str(built), "dict(a = 1, b = 2)")
        self.assertEqual(evaluate(built, standard_environment()),
                         {"a": 1, "b": 2})


#
# The end.
