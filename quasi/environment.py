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
quasi.environment

Lexically chained name lookup. The evaluator only ever calls `lookup`
and `bind`, so any object offering those two methods may stand in for
an Environment.

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from collections.abc import Mapping


__all__ = ( "NotFound", "Environment", "as_environment" )


class NotFound(LookupError):
    pass


class Environment(object):


    def __init__(self, bindings=None, parent=None):
        self.bindings = dict(bindings) if bindings else {}
        self.parent = parent


    def lookup(self, name):
        """
        the value bound to name in this frame or the nearest parent
        frame binding it. Raises `NotFound` otherwise.
        """

        env = self
        while env is not None:
            frame = env.bindings
            if name in frame:
                return frame[name]
            env = env.parent

        raise NotFound(name)


    def bind(self, name, value):
        self.bindings[name] = value


    def child(self, bindings=None):
        return type(self)(bindings, self)


    def __contains__(self, name):
        try:
            self.lookup(name)
        except NotFound:
            return False
        else:
            return True


    def __repr__(self):
        depth = 0
        env = self.parent
        while env is not None:
            depth += 1
            env = getattr(env, "parent", None)

        return "<Environment %i bindings, depth %i>" % (len(self.bindings),
                                                         depth)


def as_environment(env, parent=None):
    """
    coerce env into something offering lookup and bind. A Mapping is
    copied into a fresh Environment whose parent is `parent`, None
    becomes an empty Environment with that parent.
    """

    if env is None:
        return Environment(None, parent)
    elif isinstance(env, Mapping):
        return Environment(env, parent)
    else:
        return env


#
# The end.
