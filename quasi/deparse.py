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
quasi.deparse

Renders nodes back into Python-like source text. Operator calls are
written infix with nested operator operands parenthesized, so that
quoting the output reproduces the same tree.

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from io import StringIO
from keyword import iskeyword

from .node import Node, Constant, Symbol, Call, Splice, Define
from .operators import infix_text, prefix_text
from .visitor import Visitor


__all__ = ( "Printer", "deparse" )


_boolean = ("and", "or")


def _is_name(name):
    return name.isidentifier() and not iskeyword(name)


def _negative(node):
    value = node.value if isinstance(node, Constant) else None
    return type(value) in (int, float) and value < 0


def _positional(args):
    return all(arg.name is None and not isinstance(arg.value, Splice)
               for arg in args)


def _rendering(node):
    """
    which source form a node prints in, or None for leaves and
    ordinary calls
    """

    if not (isinstance(node, Call) and isinstance(node.head, Symbol)):
        return None

    args = node.args
    if not _positional(args):
        return None

    name = node.head.name
    count = len(args)

    if name in _boolean and count >= 2:
        return "infix"
    elif name in infix_text and name not in _boolean and count == 2:
        return "infix"
    elif name in prefix_text and count == 1:
        return "prefix"
    elif name == "if" and count == 3:
        return "if"
    elif name == "attr" and count == 2:
        attr = args[1].value
        if (isinstance(attr, Constant) and isinstance(attr.value, str)
                and _is_name(attr.value)):
            return "attr"
    elif name == "item" and count == 2:
        return "item"
    elif name == "#list":
        return "list"
    elif name == "#tuple":
        return "tuple"

    return None


class Printer(Visitor):


    def __init__(self, outstream):
        self.out = outstream


    def write(self, s):
        self.out.write(s)


    def emitOperand(self, node):
        """
        writes node, parenthesized if it would otherwise bind wrongly
        as the operand of an operator
        """

        if _rendering(node) in ("infix", "prefix", "if") or _negative(node):
            self.write("(")
            self.visit(node)
            self.write(")")
        else:
            self.visit(node)


    def emitPrimary(self, node):
        # the object of an attribute or item access
        if isinstance(node, Symbol) or \
           (isinstance(node, Call) and
            _rendering(node) in (None, "attr", "item", "list", "tuple")):
            self.visit(node)
        else:
            self.write("(")
            self.visit(node)
            self.write(")")


    def emitSource(self, prefix, source):
        self.write(prefix)
        if isinstance(source, Symbol):
            self.visit(source)
        else:
            self.write("(")
            if isinstance(source, Node):
                self.visit(source)
            else:
                self.write(repr(source))
            self.write(")")


    def emitArguments(self, args):
        for index, arg in enumerate(args):
            if index:
                self.write(", ")
            self.emitArgument(arg)


    def emitArgument(self, arg):
        name = arg.name

        if name is None:
            self.visit(arg.value)

        elif isinstance(name, Define):
            self.write("**{")
            self.emitSource("~~", name.source)
            self.write(": ")
            self.visit(arg.value)
            self.write("}")

        elif _is_name(name):
            self.write(name)
            self.write(" = ")
            self.visit(arg.value)

        else:
            self.write("**{%r: " % name)
            self.visit(arg.value)
            self.write("}")


    def visitConstant(self, node):
        self.write(repr(node.value))


    def visitSymbol(self, node):
        name = node.name
        self.write(name if _is_name(name) else "`%s`" % name)


    def visitMissing(self, node):
        pass


    def visitCall(self, node):
        form = _rendering(node)
        values = [arg.value for arg in node.args]

        if form == "infix":
            text = " %s " % infix_text[node.head.name]
            for index, value in enumerate(values):
                if index:
                    self.write(text)
                self.emitOperand(value)

        elif form == "prefix":
            self.write(prefix_text[node.head.name])
            self.emitOperand(values[0])

        elif form == "if":
            test, body, orelse = values
            self.emitOperand(body)
            self.write(" if ")
            self.emitOperand(test)
            self.write(" else ")
            self.emitOperand(orelse)

        elif form == "attr":
            self.emitPrimary(values[0])
            self.write(".")
            self.write(values[1].value)

        elif form == "item":
            self.emitPrimary(values[0])
            self.write("[")
            self.emitSubscript(values[1])
            self.write("]")

        elif form == "list":
            self.write("[")
            self.emitArguments(node.args)
            self.write("]")

        elif form == "tuple":
            self.write("(")
            self.emitArguments(node.args)
            if len(node.args) == 1:
                self.write(",")
            self.write(")")

        else:
            head = node.head
            if isinstance(head, Call) and \
               _rendering(head) not in (None, "attr", "item"):
                self.write("(")
                self.visit(head)
                self.write(")")
            else:
                self.visit(head)

            self.write("(")
            self.emitArguments(node.args)
            self.write(")")


    def emitSubscript(self, index):
        if isinstance(index, Call) and isinstance(index.head, Symbol) \
           and index.head.name == "#slice" and len(index.args) == 3 \
           and _positional(index.args):

            lower, upper, step = (arg.value for arg in index.args)
            for position, part in enumerate((lower, upper, step)):
                if position:
                    self.write(":")
                if not (isinstance(part, Constant) and part.value is None):
                    self.emitOperand(part)
        else:
            self.visit(index)


    def visitPairlist(self, node):
        self.write("pairlist(")
        self.emitArguments(node.args)
        self.write(")")


    def visitSingle(self, marker):
        self.emitSource("~~", marker.source)


    def visitSplice(self, marker):
        self.emitSource("~~~", marker.source)


    def visitDefine(self, marker):
        self.write("**{")
        self.emitSource("~~", marker.source)
        self.write(": ")
        if marker.has_value:
            if isinstance(marker.value_source, Node):
                self.visit(marker.value_source)
            else:
                self.write(repr(marker.value_source))
        self.write("}")


def deparse(node):
    """
    Python-like source text for node
    """

    out = StringIO()
    Printer(out).visit(node)
    return out.getvalue()


#
# The end.
