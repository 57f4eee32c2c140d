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
Read-Eval-Print-Loop for quasi

Each line is a Python expression, quoted and then evaluated against
the session environment. `NAME = EXPR` binds a name, `:q EXPR` shows
the quoted form of EXPR and `:x EXPR` its expansion.

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


import ast
import sys

from traceback import format_exception, format_exception_only

from .capture import quote_explicit, quote_with_expansion
from .evaluator import evaluate
from .lib import QuasiException


__all__ = ( "repl", "read_eval" )


PROMPT = "quasi > "


def _assignment(line):
    # NAME = EXPR, or None if line is anything else
    try:
        tree = ast.parse(line, mode="exec")
    except SyntaxError:
        return None

    if len(tree.body) != 1:
        return None

    stmt = tree.body[0]
    if isinstance(stmt, ast.Assign) and len(stmt.targets) == 1 and \
       isinstance(stmt.targets[0], ast.Name):
        return stmt.targets[0].id, stmt.value
    else:
        return None


def read_eval(line, env):
    """
    the result of a single line of repl input. Raises whatever the
    line raises.
    """

    if line.startswith(":q "):
        return quote_explicit(line[3:])

    elif line.startswith(":x "):
        return quote_with_expansion(line[3:], env)

    assignment = _assignment(line)
    if assignment:
        name, expr = assignment
        env.bind(name, evaluate(quote_explicit(expr), env))
        return None

    result = evaluate(quote_explicit(line), env)
    env.bind("_", result)
    return result


def _stream_reader(stdin, stdout):
    def read(prompt):
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise EOFError()
        return line

    return read


def repl(env, stdin=None, stdout=sys.stdout, stderr=sys.stderr):
    """
    enter into a read-eval-print-loop, using stdin, stdout, and stderr
    for user I/O, evaluating against env. With no stdin the builtin
    `input` is used, so readline history applies.

    returns env when the repl completes.
    """

    read = input if stdin is None else _stream_reader(stdin, stdout)

    while True:
        try:
            line = read(PROMPT).strip()
            if not line:
                continue

            result = read_eval(line, env)
            if result is not None:
                print(result, file=stdout)

        except KeyboardInterrupt as ki:
            print(ki, file=stderr)
            stderr.flush()
            break

        except EOFError:
            print(file=stderr)
            stderr.flush()
            break

        except (QuasiException, SyntaxError):
            show_error(file=stderr)
            stderr.flush()

        except Exception:
            show_traceback(file=stderr)
            stderr.flush()

        stdout.flush()

    print(file=stdout)
    return env


def show_error(file=sys.stderr):
    type_, value, tb = sys.exc_info()
    sys.last_type = type_
    sys.last_value = value
    sys.last_traceback = tb

    lines = format_exception_only(type_, value)
    print(''.join(lines), file=file)


def show_traceback(skip=1, file=sys.stderr):
    sys.last_type, sys.last_value, last_tb = ei = sys.exc_info()
    sys.last_traceback = last_tb

    while skip > 0 and last_tb.tb_next is not None:
        last_tb = last_tb.tb_next
        skip -= 1

    try:
        lines = format_exception(ei[0], ei[1], last_tb)
        print(''.join(lines), file=file)

    finally:
        last_tb = ei = None


#
# The end.
