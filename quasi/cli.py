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
quasi.cli

Command-line interface for quoting, expanding, or evaluating a single
expression, or for invoking the quasi repl

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


import atexit
import logging
import sys

from appdirs import AppDirs
from argparse import ArgumentParser
from os import makedirs
from os.path import basename, dirname, join

from .builtins import standard_environment
from .capture import quote_explicit, quote_with_expansion
from .evaluator import evaluate
from .lib import QuasiException
from .repl import repl


_APPDIR = AppDirs("quasi")

DEFAULT_HISTFILE = join(_APPDIR.user_config_dir, "history")

MODE_EVAL = "eval"
MODE_QUOTE = "quote"
MODE_EXPAND = "expand"


_log = logging.getLogger(__name__)


class CLIException(Exception):
    pass


def parse_binding(text):
    """
    split a NAME=EXPR option into its name and expression source
    """

    name, sep, expr = text.partition("=")
    name = name.strip()

    if not (sep and name.isidentifier() and expr.strip()):
        raise CLIException("binding %r should be NAME=EXPR" % text)

    return name, expr


def setup_history(histfile):
    """
    load, and arrange to save at exit, the repl history in histfile.
    Without readline support there is no history to keep.
    """

    try:
        import readline
    except ImportError:
        _log.debug("readline unavailable, not keeping history")
        return False

    makedirs(dirname(histfile) or ".", exist_ok=True)

    try:
        readline.read_history_file(histfile)
    except FileNotFoundError:
        pass

    atexit.register(readline.write_history_file, histfile)
    return True


def cli(options, stdout=sys.stdout):
    """
    Run as from the command line, with the given options argument
    """

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG)

    env = standard_environment()

    for text in options.bindings:
        name, expr = parse_binding(text)
        env.bind(name, evaluate(quote_explicit(expr), env))
        _log.debug("bound %s", name)

    expr = options.expression
    if expr:
        if options.mode == MODE_QUOTE:
            print(quote_explicit(expr), file=stdout)

        elif options.mode == MODE_EXPAND:
            print(quote_with_expansion(expr, env), file=stdout)

        else:
            result = evaluate(quote_explicit(expr), env)
            if result is not None:
                print(result, file=stdout)

        if not options.interactive:
            return env

    setup_history(options.histfile)
    return repl(env)


def cli_option_parser(name):
    """
    Create an `ArgumentParser` instance with the options requested by
    the `cli` function
    """

    parser = ArgumentParser(prog=basename(name))

    parser.add_argument("expression", nargs="?", default=None)

    parser.add_argument("-b", "--bind", dest="bindings",
                        action="append", default=[],
                        metavar="NAME=EXPR",
                        help="Bind NAME to the value of EXPR before"
                        " anything else is evaluated")

    parser.add_argument("--histfile", dest="histfile",
                        action="store", default=DEFAULT_HISTFILE,
                        help="REPL history file")

    parser.add_argument("-i", "--interactive", dest="interactive",
                        action="store_true", default=False,
                        help="Enter interactive mode after handling the"
                        " given expression")

    parser.add_argument("-v", "--verbose", dest="verbose",
                        action="store_true", default=False,
                        help="Log debugging output")

    g = parser.add_mutually_exclusive_group()

    g.add_argument("-q", "--quote", dest="mode",
                   action="store_const", const=MODE_QUOTE,
                   default=MODE_EVAL,
                   help="Print the quoted expression rather than"
                   " evaluating it")

    g.add_argument("-x", "--expand", dest="mode",
                   action="store_const", const=MODE_EXPAND,
                   help="Print the expression with its unquotes"
                   " expanded rather than evaluating it")

    return parser


def main(args=sys.argv):
    """
    Entry point for the quasi command
    """

    name, *args = args

    parser = cli_option_parser(name)
    options = parser.parse_args(args)

    try:
        cli(options)

    except CLIException as ce:
        parser.error(str(ce))

    except QuasiException as qe:
        print("%s: %s" % (type(qe).__name__, qe), file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130

    else:
        return 0


if __name__ == "__main__":
    sys.exit(main())


#
# The end.
