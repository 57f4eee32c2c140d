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
quasi, quasiquotation for Python expression trees

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from .lib import (
    QuasiException,
    InvalidSymbol, InvalidHead, MarkerPlacementError,
    QuoteSyntaxError, NoCallingContext,
    ExpansionError, UnquoteTypeError, SpliceTypeError,
    InvalidDefinitionName,
    EvaluationError, UnboundName, NotCallable, NotEvaluable,
)

from .node import (
    Node, Constant, Symbol, Call, Pairlist, Argument,
    Single, Splice, Define,
    constant, symbol, missing_symbol, call, pairlist,
    lift, identical, contains_markers,
)

from .environment import Environment, NotFound
from .context import CallContext, Promise, quoting
from .evaluator import evaluate
from .quasiquote import expand
from .builtins import standard_environment
from .capture import (
    quote_explicit, quote_with_expansion,
    capture_caller_argument, capture_all_arguments,
)
from .builder import build_call
from .deparse import deparse


__all__ = (
    "QuasiException",
    "InvalidSymbol", "InvalidHead", "MarkerPlacementError",
    "QuoteSyntaxError", "NoCallingContext",
    "ExpansionError", "UnquoteTypeError", "SpliceTypeError",
    "InvalidDefinitionName",
    "EvaluationError", "UnboundName", "NotCallable", "NotEvaluable",

    "Node", "Constant", "Symbol", "Call", "Pairlist", "Argument",
    "Single", "Splice", "Define",
    "constant", "symbol", "missing_symbol", "call", "pairlist",
    "lift", "identical", "contains_markers",

    "Environment", "NotFound",
    "CallContext", "Promise", "quoting",
    "evaluate", "expand", "standard_environment",

    "quote_explicit", "quote_with_expansion",
    "capture_caller_argument", "capture_all_arguments",

    "build_call", "deparse",
)


#
# The end.
