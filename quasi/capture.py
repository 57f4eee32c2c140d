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
quasi.capture

Quoting. Host syntax, meaning Python expression source or an already
parsed `ast` tree, is translated into quasi nodes without being
evaluated.

When expanding, `~~expr` marks a single unquote, `~~~expr` an
unquote-splice, and `f(**{~~name: value})` an argument whose name is
computed from `name`.

The host parser does not keep parentheses, so `~~(~x)` reads the same
as `~~~x` and is a splice. To single-unquote an inverted value, bind
it to a name first. More than three `~` in a row is rejected as
ambiguous.

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


import ast

from .builtins import standard_environment
from .lib import NoCallingContext, QuoteSyntaxError, is_mapping
from .node import (
    Node, Constant, Symbol, Call, Pairlist, Argument,
    Single, Splice, Define,
)
from .operators import (
    binary_operators, unary_operators, comparison_operators,
    boolean_operators,
)
from .quasiquote import expand
from .visitor import Visitor


__all__ = (
    "SyntaxTranslator",
    "quote_explicit", "quote_with_expansion",
    "capture_caller_argument", "capture_all_arguments",
)


_symbol_and = Symbol("and")
_symbol_attr = Symbol("attr")
_symbol_if = Symbol("if")
_symbol_item = Symbol("item")
_symbol_list = Symbol("#list")
_symbol_slice = Symbol("#slice")
_symbol_tuple = Symbol("#tuple")

_none = Constant(None)


def _is_invert(node):
    return isinstance(node, ast.UnaryOp) and isinstance(node.op, ast.Invert)


def _is_number(node):
    return isinstance(node, ast.Constant) and \
        type(node.value) in (int, float, complex)


class SyntaxTranslator(Visitor):
    """
    Translates the host's ast into nodes. With `markers` enabled the
    unquote syntax produces markers, otherwise it is quoted like any
    other operator.
    """


    def __init__(self, markers=False):
        self.markers = markers


    def translate(self, syntax):
        if isinstance(syntax, Node):
            return syntax

        elif isinstance(syntax, str):
            try:
                syntax = ast.parse(syntax.strip(), mode="eval")
            except SyntaxError as se:
                raise QuoteSyntaxError("cannot parse %r: %s" %
                                       (syntax, se.msg)) from se

        elif not isinstance(syntax, ast.AST):
            raise QuoteSyntaxError("%s is not host syntax" %
                                   type(syntax).__name__)

        return self.visit(syntax)


    def source(self, node):
        # marker sources are ordinary expressions, never templates
        return SyntaxTranslator().visit(node)


    def default(self, node, *args, **kwds):
        raise QuoteSyntaxError("unsupported syntax: %s" %
                               type(node).__name__)


    def visitExpression(self, node):
        return self.visit(node.body)


    def visitExpr(self, node):
        return self.visit(node.value)


    def visitConstant(self, node):
        return Constant(node.value)


    def visitName(self, node):
        return Symbol(node.id)


    def visitBinOp(self, node):
        op = Symbol(binary_operators[type(node.op).__name__])
        return Call(op, [self.visit(node.left), self.visit(node.right)])


    def visitUnaryOp(self, node):
        if self.markers and _is_invert(node) and _is_invert(node.operand):
            inner = node.operand.operand
            if _is_invert(inner):
                if _is_invert(inner.operand):
                    raise QuoteSyntaxError("ambiguous unquote: more than"
                                           " three ~ in a row")
                return Splice(self.source(inner.operand))
            else:
                return Single(self.source(inner))

        if isinstance(node.op, ast.USub) and _is_number(node.operand):
            return Constant(-node.operand.value)

        op = Symbol(unary_operators[type(node.op).__name__])
        return Call(op, [self.visit(node.operand)])


    def visitBoolOp(self, node):
        op = Symbol(boolean_operators[type(node.op).__name__])
        return Call(op, list(map(self.visit, node.values)))


    def visitCompare(self, node):
        operands = [self.visit(node.left)]
        operands.extend(map(self.visit, node.comparators))

        tests = []
        for index, op in enumerate(node.ops):
            op = Symbol(comparison_operators[type(op).__name__])
            tests.append(Call(op, operands[index:index + 2]))

        if len(tests) == 1:
            return tests[0]
        else:
            return Call(_symbol_and, tests)


    def visitCall(self, node):
        args = []

        for arg in node.args:
            if isinstance(arg, ast.Starred):
                raise QuoteSyntaxError("unsupported syntax: *%s in call" %
                                       type(arg.value).__name__)
            args.append(self.visit(arg))

        for kwd in node.keywords:
            if kwd.arg is None:
                args.extend(self.double_star(kwd.value))
            else:
                args.append(Argument(kwd.arg, self.visit(kwd.value)))

        return Call(self.visit(node.func), args)


    def double_star(self, node):
        """
        arguments from a **{...} display. String keys name their
        argument, and when expanding, a ~~expr key computes the name.
        """

        if not isinstance(node, ast.Dict):
            raise QuoteSyntaxError("unsupported syntax: ** of %s" %
                                   type(node).__name__)

        for key, value in zip(node.keys, node.values):
            if (self.markers and _is_invert(key) and
                    _is_invert(key.operand)):
                name = Define(self.source(key.operand.operand))

            elif (isinstance(key, ast.Constant) and
                  isinstance(key.value, str) and key.value):
                name = key.value

            else:
                raise QuoteSyntaxError("unsupported syntax: ** key %s" %
                                       type(key).__name__)

            yield Argument(name, self.visit(value))


    def visitAttribute(self, node):
        return Call(_symbol_attr, [self.visit(node.value),
                                   Constant(node.attr)])


    def visitSubscript(self, node):
        return Call(_symbol_item, [self.visit(node.value),
                                   self.visit(node.slice)])


    def visitIndex(self, node):
        # python 3.8 wraps simple subscripts
        return self.visit(node.value)


    def visitExtSlice(self, node):
        return Call(_symbol_tuple, list(map(self.visit, node.dims)))


    def visitSlice(self, node):
        parts = (node.lower, node.upper, node.step)
        return Call(_symbol_slice, [_none if part is None
                                    else self.visit(part)
                                    for part in parts])


    def visitTuple(self, node):
        return Call(_symbol_tuple, list(map(self.visit, node.elts)))


    def visitList(self, node):
        return Call(_symbol_list, list(map(self.visit, node.elts)))


    def visitStarred(self, node):
        raise QuoteSyntaxError("unsupported syntax: *%s" %
                               type(node.value).__name__)


    def visitIfExp(self, node):
        return Call(_symbol_if, [self.visit(node.test),
                                 self.visit(node.body),
                                 self.visit(node.orelse)])


def quote_explicit(syntax):
    """
    The node for syntax, exactly as written. Nothing is evaluated and
    no unquoting takes place.
    """

    return SyntaxTranslator().translate(syntax)


def _as_bindings(bindings):
    if bindings is None or is_mapping(bindings):
        return standard_environment(bindings)
    else:
        return bindings


def quote_with_expansion(syntax, bindings=None):
    """
    The node for syntax, with each unquote resolved against bindings.
    Bindings may be an environment, or a mapping of names to values
    which will be layered over the standard environment.
    """

    template = SyntaxTranslator(markers=True).translate(syntax)
    return expand(template, _as_bindings(bindings))


def capture_caller_argument(parameter_name, calling_context):
    """
    The unevaluated expression supplied by the caller for the named
    parameter of the currently invoked quoting function
    """

    if calling_context is None:
        raise NoCallingContext("cannot capture %r without a calling"
                               " context" % parameter_name)

    return calling_context.argument(parameter_name)


def capture_all_arguments(calling_context, explicit=None, bindings=None):
    """
    A Pairlist of the expressions in `explicit`, each quoted with
    expansion against `bindings` (by default the caller's
    environment), followed by the verbatim expressions the caller
    supplied for the variadic parameters, in call order.
    """

    if calling_context is None:
        raise NoCallingContext("cannot capture arguments without a"
                               " calling context")

    if bindings is None:
        bindings = calling_context.env

    if explicit is None:
        explicit = ()
    elif is_mapping(explicit):
        explicit = explicit.items()

    entries = [Argument(name, quote_with_expansion(syntax, bindings))
               for name, syntax in explicit]

    entries.extend(Argument(name, node)
                   for name, node in calling_context.tail())

    return Pairlist(entries)


#
# The end.
