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
Evaluation of marker-free quasi nodes against an environment

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from .context import CallContext, QuotingFunction, check_positional_holes
from .environment import NotFound, as_environment
from .lib import UnboundName, NotCallable, NotEvaluable
from .node import is_missing
from .visitor import Visitor


__all__ = ( "Evaluator", "evaluate" )


class Evaluator(Visitor):
    """
    Dispatches on node kind. Anything beyond that, such as argument
    matching and laziness, belongs to the callable being invoked.
    """


    def __init__(self, env=None):
        self.env = as_environment(env)


    def evaluate(self, node, path=()):
        return self.visit(node, path)


    def visitConstant(self, node, path):
        return node.value


    def visitSymbol(self, node, path):
        try:
            return self.env.lookup(node.name)
        except NotFound:
            raise UnboundName(node.name, path) from None


    def visitMissing(self, node, path):
        raise NotEvaluable("the missing argument has no value", path)


    def visitCall(self, node, path):
        fun = self.visit(node.head, path + ("head", ))

        if not callable(fun):
            raise NotCallable("%r evaluated to non-callable %s" %
                              (node.head, type(fun).__name__), path)

        check_positional_holes(node.args, path)

        if isinstance(fun, QuotingFunction):
            context = CallContext.bind(fun, node, self.env, evaluate)
            return fun.invoke(context)

        args = []
        kwds = {}

        for index, arg in enumerate(node.args):
            if is_missing(arg.value):
                continue

            value = self.visit(arg.value, path + ("args[%i]" % index, ))

            if arg.name is None:
                args.append(value)
            elif arg.name in kwds:
                raise TypeError("got multiple values for argument %r" %
                                arg.name)
            else:
                kwds[arg.name] = value

        return fun(*args, **kwds)


    def visitPairlist(self, node, path):
        raise NotEvaluable("a pairlist has no value outside of a call",
                           path)


    def visitMarker(self, node, path):
        raise NotEvaluable("unexpanded %r" % node, path)


    def default(self, obj, path):
        raise NotEvaluable("%s is not a node" % type(obj).__name__, path)


def evaluate(node, env=None):
    """
    Evaluate `node` against `env`, an Environment (or any object
    offering `lookup` and `bind`), a mapping of names to values, or
    None for an empty environment.
    """

    return Evaluator(env).evaluate(node)


#
# The end.
