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
quasi.context

Calling contexts for quoting functions. Rather than inspecting the
interpreter's frames, a function which wants the unevaluated
expressions of its caller is handed a `CallContext` explicitly.

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from functools import update_wrapper
from inspect import Parameter, signature

from .lib import NoCallingContext, NotEvaluable
from .node import Argument, Pairlist, is_missing, missing_symbol


__all__ = ( "Promise", "CallContext", "QuotingFunction", "quoting",
            "check_positional_holes" )


_VARIADIC = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)


class Promise(object):
    """
    An unevaluated argument expression paired with the environment it
    was written in. Forcing evaluates it once and caches the value.
    """

    __slots__ = ("node", "env", "name", "_evaluate", "_value", "_forced")


    def __init__(self, node, env, evaluate=None, name=None):
        self.node = node
        self.env = env
        self.name = name
        self._evaluate = evaluate
        self._value = None
        self._forced = False


    def force(self):
        if not self._forced:
            evaluate = self._evaluate
            if evaluate is None:
                from .evaluator import evaluate

            self._value = evaluate(self.node, self.env)
            self._forced = True

        return self._value


    @property
    def value(self):
        return self.force()


    def __repr__(self):
        state = "forced" if self._forced else "pending"
        return "<Promise %r %s>" % (self.node, state)


class QuotingFunction(object):
    """
    Wraps a function whose first parameter receives a `CallContext`.
    The remaining parameters define the signature the caller's
    arguments are matched against.
    """


    def __init__(self, function):
        params = list(signature(function).parameters.values())
        if not params or params[0].kind in _VARIADIC:
            raise TypeError("quoting function %r needs a leading context"
                            " parameter" % function)

        self.function = function
        self.signature = signature(function).replace(parameters=params[1:])
        update_wrapper(self, function)


    def __call__(self, *args, **kwds):
        # called directly from Python, there is no calling context
        return self.function(None, *args, **kwds)


    def invoke(self, context):
        bound = context.bound
        return self.function(context, *bound.args, **bound.kwargs)


    def __repr__(self):
        return "<quoting function %s>" % self.__name__


def quoting(function):
    """
    decorator creating a `QuotingFunction`. When the evaluator invokes
    it, each parameter receives a `Promise` and the leading parameter
    receives the `CallContext`.
    """

    return QuotingFunction(function)


def check_positional_holes(args, path=()):
    """
    Only trailing positional arguments may be missing. Raises
    `NotEvaluable` for a missing positional argument which is followed
    by a supplied positional argument.
    """

    hole = None
    for index, arg in enumerate(args):
        if arg.name is not None:
            continue

        elif is_missing(arg.value):
            if hole is None:
                hole = index

        elif hole is not None:
            raise NotEvaluable("missing positional argument followed by"
                               " argument %i" % index,
                               path + ("args[%i]" % hole, ))


class CallContext(object):
    """
    What a quoting function knows about its invocation: the function
    itself, the call node, the caller's environment, and one `Promise`
    per supplied argument.
    """


    def __init__(self, function, call, env, sig, bound, promises):
        self.function = function
        self.call = call
        self.env = env
        self.signature = sig
        self.bound = bound
        self.promises = tuple(promises)


    @classmethod
    def bind(cls, function, call, env, evaluate=None):
        """
        Match the arguments of `call` against the parameters of
        `function` using the host's own argument matching. Arguments
        whose value is the missing symbol are left unbound, so
        parameter defaults apply, but a missing positional argument
        may not precede a supplied one. Matching failures raise
        TypeError.
        """

        if isinstance(function, QuotingFunction):
            sig = function.signature
        else:
            sig = signature(function)

        check_positional_holes(call.args)

        promises = []
        positional = []
        named = {}

        for arg in call.args:
            if is_missing(arg.value):
                continue

            promise = Promise(arg.value, env, evaluate, arg.name)
            promises.append(promise)

            if arg.name is None:
                positional.append(promise)
            elif arg.name in named:
                raise TypeError("%s() got multiple values for argument"
                                " %r" % (getattr(function, "__name__",
                                                 "function"),
                                         arg.name))
            else:
                named[arg.name] = promise

        bound = sig.bind(*positional, **named)
        return cls(function, call, env, sig, bound, promises)


    @property
    def parameters(self):
        return tuple(self.signature.parameters)


    @property
    def variadic(self):
        return tuple(name for name, param in
                     self.signature.parameters.items()
                     if param.kind in _VARIADIC)


    def argument(self, name):
        """
        The unevaluated node supplied for parameter `name`. The missing
        symbol if nothing was supplied, and a Pairlist of the captured
        nodes for a variadic parameter.
        """

        params = self.signature.parameters
        if name not in params:
            raise NoCallingContext("%r is not a parameter of %r" %
                                   (name, self.function))

        found = self.bound.arguments.get(name)
        kind = params[name].kind

        if kind is Parameter.VAR_POSITIONAL:
            return Pairlist(Argument(None, p.node) for p in found or ())

        elif kind is Parameter.VAR_KEYWORD:
            found = found or {}
            return Pairlist(Argument(key, p.node)
                            for key, p in found.items())

        elif found is None:
            return missing_symbol()

        else:
            return found.node


    def tail(self):
        """
        (name, node) pairs for each argument bound to a variadic
        parameter, in call order
        """

        tail = set()
        for name in self.variadic:
            found = self.bound.arguments.get(name)
            if found is None:
                continue
            elif isinstance(found, dict):
                tail.update(map(id, found.values()))
            else:
                tail.update(map(id, found))

        return [(p.name, p.node) for p in self.promises if id(p) in tail]


    def __repr__(self):
        return "<CallContext %r>" % self.call


#
# The end.
