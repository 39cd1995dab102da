"""Conversion of infix expressions to postfix and to a toy assembly."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from linearstructs.stack import Stack

_DIRECTIVES = {
    "+": "\tADD ",
    "-": "\tSUB ",
    "*": "\tMUL ",
    "/": "\tDIV ",
    "%": "\tMOD ",
    "^": "\tEXP ",
}

_PRIORITIES = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def _is_operand_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch == "."


def op_priority(op: str) -> int:
    """Return the precedence of an operator; anything else has priority 0."""
    return _PRIORITIES.get(op, 0)


def convert_infix_to_postfix(infix: str) -> str:
    """Convert an infix expression such as "5 + 2" into postfix " 5 2 +".

    The result always begins with a space. A closing parenthesis without a
    matching opening one raises ValueError.
    """
    postfix = [" "]
    operators: Stack[str] = Stack()

    def ensure_space() -> None:
        if postfix[-1] != " ":
            postfix.append(" ")

    for position, ch in enumerate(infix):
        if _is_operand_char(ch):
            if position != 0 and op_priority(postfix[-1]) != 0:
                postfix.append(" ")
            postfix.append(ch)
        elif ch == " ":
            continue
        elif ch == "(":
            operators.push(ch)
        elif ch == ")":
            ensure_space()
            try:
                while operators.top() != "(":
                    postfix.append(operators.top())
                    operators.pop()
            except IndexError:
                raise ValueError(f"unbalanced parentheses in {infix!r}") from None
            operators.pop()
        else:
            while operators and op_priority(ch) <= op_priority(operators.top()):
                ensure_space()
                postfix.append(operators.top())
                operators.pop()
            operators.push(ch)
            postfix.append(" ")

    while operators:
        ensure_space()
        postfix.append(operators.top())
        operators.pop()

    return "".join(postfix)


def convert_postfix_to_assembly(postfix: str) -> str:
    """Translate a postfix expression into SET/LOD, operation and SAV lines.

    Each operator stores its result in a fresh one-letter variable, starting
    at "A". An operator without two operands raises ValueError.
    """
    lines: list[str] = []
    operands: Stack[str] = Stack()
    variable = "A"

    for token in postfix.split():
        if _is_operand_char(token[0]):
            operands.push(token)
            continue

        directive = _DIRECTIVES.get(token[0], "")
        try:
            rhs = operands.top()
            operands.pop()
            lhs = operands.top()
            operands.pop()
        except IndexError:
            raise ValueError(f"missing operand for {token!r} in {postfix!r}") from None

        load = "LOD" if lhs[0].isascii() and lhs[0].isalpha() else "SET"
        lines.append(f"\t{load} {lhs}\n")
        lines.append(f"{directive}{rhs}\n")
        lines.append(f"\tSAV {variable}\n")
        operands.push(variable)
        variable = chr(ord(variable) + 1)

    return "".join(lines)


def _session(source: TextIO, out: TextIO, assembly: bool) -> None:
    out.write('Enter an infix equation.  Type "quit" when done.\n')
    while True:
        out.write("infix > ")
        line = source.readline()
        if not line:
            break
        text = line.rstrip("\n")
        if text == "quit":
            break
        try:
            postfix = convert_infix_to_postfix(text)
            if assembly:
                out.write(convert_postfix_to_assembly(postfix))
            else:
                out.write(f"\tpostfix: {postfix}\n\n")
        except ValueError as error:
            out.write(f"\tERROR: {error}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Read infix expressions from standard input and print their conversion."""
    parser = argparse.ArgumentParser(
        description="Convert infix expressions to postfix or assembly."
    )
    parser.add_argument(
        "-a",
        "--assembly",
        action="store_true",
        help="print assembly instructions instead of postfix",
    )
    args = parser.parse_args(argv)
    _session(sys.stdin, sys.stdout, args.assembly)
    return 0


if __name__ == "__main__":
    sys.exit(main())