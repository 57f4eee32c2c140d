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
unittest for quasi.context and quasi.lib

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from unittest import TestCase

from quasi.capture import quote_explicit
from quasi.context import CallContext, Promise, QuotingFunction, quoting
from quasi.environment import Environment
from quasi.lib import (
    QuasiException, UnboundName, NotEvaluable, format_path,
    is_atomic, is_mapping, is_sequence_like, iterate,
)
from quasi.node import Symbol, Call, Argument, missing_symbol

from . import make_accumulator


class PromiseTest(TestCase):


    def test_force_once(self):
        accu, accumulate = make_accumulator()
        env = Environment({"acc": accumulate})

        promise = Promise(Call(Symbol("acc"), [1]), env)
        self.assertEqual(accu, [])

        self.assertEqual(promise.force(), 1)
        self.assertEqual(promise.value, 1)
        self.assertEqual(accu, [1])


    def test_failure(self):
        promise = Promise(Symbol("nope"), Environment())

        with self.assertRaises(UnboundName):
            promise.force()


class QuotingFunctionTest(TestCase):


    def test_signature(self):
        @quoting
        def q(context, a, b=2, *rest):
            return context, a, b, rest

        self.assertIsInstance(q, QuotingFunction)
        self.assertEqual(q.__name__, "q")
        self.assertEqual(list(q.signature.parameters), ["a", "b", "rest"])

        # called directly, there is no context and values are plain
        self.assertEqual(q(1), (None, 1, 2, ()))


    def test_needs_context(self):
        with self.assertRaises(TypeError):
            quoting(lambda: None)

        with self.assertRaises(TypeError):
            quoting(lambda *args: None)


class CallContextTest(TestCase):


    def test_bind(self):
        @quoting
        def q(context, a, b=None, *rest, **named):
            return context

        node = quote_explicit("q(x, y + 1, z, k = w)")
        env = Environment()
        context = CallContext.bind(q, node, env)

        self.assertIs(context.call, node)
        self.assertIs(context.env, env)
        self.assertEqual(context.parameters, ("a", "b", "rest", "named"))
        self.assertEqual(context.variadic, ("rest", "named"))

        self.assertEqual(context.argument("a"), Symbol("x"))
        self.assertEqual([name for name, node in context.tail()],
                         [None, "k"])
        self.assertEqual(len(context.promises), 4)


    def test_missing_skipped(self):
        @quoting
        def q(context, a, b="default"):
            return b

        node = Call(Symbol("q"), [1, Argument("b", missing_symbol())])
        context = CallContext.bind(q, node, Environment())

        self.assertIs(context.argument("b"), missing_symbol())
        self.assertEqual(q.invoke(context), "default")


    def test_positional_hole(self):
        @quoting
        def q(context, a, b=2, c=3):
            return a, b, c

        node = Call(Symbol("q"), [1, missing_symbol(), 5])

        with self.assertRaises(NotEvaluable) as cm:
            CallContext.bind(q, node, Environment())

        self.assertEqual(cm.exception.path, ("args[1]", ))

        # a named argument may follow the hole
        node = Call(Symbol("q"), [1, missing_symbol(), Argument("c", 5)])
        context = CallContext.bind(q, node, Environment())

        self.assertIs(context.argument("b"), missing_symbol())
        self.assertEqual(context.argument("c").value, 5)


    def test_duplicate_names(self):
        @quoting
        def q(context, **named):
            return named

        node = Call(Symbol("q"), [Argument("a", 1), Argument("a", 2)])

        with self.assertRaises(TypeError):
            CallContext.bind(q, node, Environment())


class LibTest(TestCase):


    def test_type_predicates(self):
        self.assertTrue(is_atomic(None))
        self.assertTrue(is_atomic(1))
        self.assertTrue(is_atomic("s"))
        self.assertTrue(is_atomic(...))
        self.assertFalse(is_atomic([]))
        self.assertFalse(is_atomic(len))

        self.assertTrue(is_mapping({}))
        self.assertFalse(is_mapping([]))

        self.assertEqual(repr(is_atomic),
                         "<builtin type predicate atomic?>")


    def test_format_path(self):
        self.assertEqual(format_path(()), "")
        self.assertEqual(format_path(("args[1]", "value")),
                         "args[1].value")


    def test_exception(self):
        err = QuasiException("bad", ["head"])

        self.assertEqual(err.message, "bad")
        self.assertEqual(err.path, ("head", ))
        self.assertEqual(str(err), "bad (at head)")
        self.assertEqual(str(QuasiException("bad")), "bad")


    def test_sequences(self):
        self.assertTrue(is_sequence_like([1]))
        self.assertTrue(is_sequence_like((1, )))
        self.assertTrue(is_sequence_like({"a": 1}))
        self.assertTrue(is_sequence_like(x for x in ()))
        self.assertFalse(is_sequence_like("abc"))
        self.assertFalse(is_sequence_like(b"abc"))
        self.assertFalse(is_sequence_like(5))

        self.assertEqual(list(iterate([1, 2])), [(None, 1), (None, 2)])
        self.assertEqual(list(iterate({"a": 1})), [("a", 1)])


#
# The end.
