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
quasi.quasiquote

Template expansion. A single top-down pass over a template replaces
every unquote marker with the value of its source, producing a new
marker-free tree. Subtrees without markers are shared with the
template rather than copied. Marker sources are evaluated, never
expanded, and every nesting level is resolved against the same
environment.

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from logging import getLogger

from .environment import as_environment
from .evaluator import Evaluator
from .lib import (
    MarkerPlacementError, UnquoteTypeError, SpliceTypeError,
    InvalidDefinitionName, is_sequence_like, iterate,
)
from .node import (
    Node, Symbol, Call, Pairlist, Argument, Define, Splice,
    lift, contains_markers, is_missing,
)
from .visitor import Visitor


__all__ = ( "Quasiquoter", "expand" )


_log = getLogger(__name__)


class Quasiquoter(Visitor):
    """
    Expands templates against `env`. Node marker sources are handed to
    the evaluator, anything else is taken as an already computed host
    value.
    """


    def __init__(self, env=None):
        self.env = as_environment(env)
        self.evaluator = Evaluator(self.env)


    def expand(self, template):
        """
        A marker-free rendition of template. Raises on the first
        marker which cannot be resolved, discarding the partial tree.
        """

        return self.visit(template, ())


    def visitNode(self, node, path):
        # constants and symbols, including the missing symbol
        return node


    def visitCall(self, node, path):
        if not contains_markers(node):
            return node

        head = self.visit(node.head, path + ("head", ))
        return Call(head, self.expand_arguments(node.args, path))


    def visitPairlist(self, node, path):
        if not contains_markers(node):
            return node

        return Pairlist(self.expand_arguments(node.args, path))


    def visitSingle(self, marker, path):
        value = self.resolve(marker, UnquoteTypeError, path)

        try:
            node = lift(value)
        except UnquoteTypeError as ute:
            raise UnquoteTypeError(ute.message, path) from None

        if contains_markers(node):
            raise UnquoteTypeError("unquoted node %r still contains"
                                   " markers" % node, path)
        return node


    def visitSplice(self, marker, path):
        raise MarkerPlacementError("splice outside of an argument list",
                                   path)


    def visitDefine(self, marker, path):
        raise MarkerPlacementError("definition marker outside of an"
                                   " argument name", path)


    def default(self, obj, path):
        try:
            return lift(obj)
        except UnquoteTypeError as ute:
            raise UnquoteTypeError(ute.message, path) from None


    def expand_arguments(self, args, path):
        result = []

        for index, arg in enumerate(args):
            where = path + ("args[%i]" % index, )

            if isinstance(arg.value, Splice):
                result.extend(self.splice(arg.value, where))
                continue

            name = arg.name
            if isinstance(name, Define):
                name = self.define_name(name, where + ("name", ))

            value = self.visit(arg.value, where + ("value", ))
            result.append(Argument(name, value))

        return result


    def splice(self, marker, path):
        """
        The arguments produced by a splice marker, one per element of
        its sequence-like value. Mapping keys and Pairlist names become
        argument names.
        """

        value = self.resolve(marker, SpliceTypeError, path)

        if isinstance(value, Pairlist):
            entries = value.items()
        elif isinstance(value, Node) or not is_sequence_like(value):
            raise SpliceTypeError("cannot splice %s value, expected a"
                                  " sequence" % type(value).__name__,
                                  path)
        else:
            entries = iterate(value)

        spliced = []
        for index, (name, item) in enumerate(entries):
            where = path + ("[%i]" % index, )

            if name is not None and not isinstance(name, str):
                raise SpliceTypeError("spliced argument names must be"
                                      " strings, not %s" %
                                      type(name).__name__, where)
            try:
                node = lift(item)
            except UnquoteTypeError as ute:
                raise SpliceTypeError(ute.message, where) from None

            if contains_markers(node):
                raise SpliceTypeError("spliced node %r still contains"
                                      " markers" % node, where)

            spliced.append(Argument(name, node))

        _log.debug("splice at %r produced %i arguments", path,
                   len(spliced))
        return spliced


    def define_name(self, marker, path):
        value = self.resolve(marker, InvalidDefinitionName, path)

        if isinstance(value, Symbol) and not is_missing(value):
            value = value.name

        if not (isinstance(value, str) and value):
            raise InvalidDefinitionName("definition name must be a"
                                        " non-empty string, not %r" %
                                        (value, ), path)
        return value


    def resolve(self, marker, error, path):
        source = marker.source

        if isinstance(source, Node):
            try:
                value = self.evaluator.evaluate(source)
            except Exception as exc:
                raise error("evaluating %r failed: %s" % (source, exc),
                            path) from exc
        else:
            value = source

        _log.debug("resolved %s at %r to %r", type(marker).__name__,
                   path, value)
        return value


def expand(template, env=None):
    """
    Expand the unquote markers of template against env
    """

    return Quasiquoter(env).expand(template)


#
# The end.
