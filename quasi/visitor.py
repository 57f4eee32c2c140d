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
MRO dispatch utility class for quasi

Used to walk both quasi nodes and the host's `ast` trees.

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


__all__ = ( "NoVisitMethod", "Visitor" )


class NoVisitMethod(Exception):
    pass


class Visitor(object):

    _visit_prefix = "visit"


    def visit(self, obj, *args, **kwds):
        """
        Finds a `visit<Type>` method and calls it with `obj` and
        `*args`

        If no `visit<Type>` for the type of `obj` is found, then the
        next type (by MRO) is checked, and so on. If there is no
        matching visit method for any type in the MRO of the object's
        class, the `default` method will be called.
        """

        klass = type(obj)

        # the cache is per visitor class, methods are bound on lookup
        cache = type(self).__dict__.get("_visit_k_cache")
        if cache is None:
            cache = {}
            setattr(type(self), "_visit_k_cache", cache)

        name = cache.get(klass)
        if name is None:
            name = "default"
            for k in klass.mro():
                nom = self._visit_prefix + k.__name__
                if hasattr(self, nom):
                    name = nom
                    break
            cache[klass] = name

        return getattr(self, name)(obj, *args, **kwds)


    def default(self, obj, *args, **kwds):
        """
        Raises a `NoVisitMethod`
        """

        raise NoVisitMethod(type(obj))


#
# The end.
