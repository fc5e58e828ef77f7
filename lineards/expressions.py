"""Bracket matching and conversion and evaluation of arithmetic expressions.

Expressions are read one character at a time.  The characters ``+ - * /``
are operators, ``( [ {`` and their closing partners group sub-expressions,
and every other character is an operand.
"""

from __future__ import annotations

import operator
import string
from collections.abc import Callable, Iterable, Mapping

from lineards.stack import BoundedStack, StackEmptyError

__all__ = [
    "precedence",
    "is_balanced",
    "infix_to_postfix",
    "infix_to_prefix",
    "evaluate_postfix",
]

OPERATORS = "+-*/"
OPENING = "([{"
CLOSING = ")]}"

_PRECEDENCE = {
    "*": 2,
    "/": 2,
    "+": 1,
    "-": 1,
    "(": 0,
    "[": 0,
    "{": 0,
}

_OPENER_FOR = dict(zip(CLOSING, OPENING))
_CLOSER_FOR = dict(zip(OPENING, CLOSING))


def precedence(char: str) -> int:
    """Return the binding strength of ``char``.

    Multiplication and division bind tighter than addition and subtraction;
    opening brackets rank lowest of the known symbols and anything else is -1.
    """
    return _PRECEDENCE.get(char, -1)


def is_balanced(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed in the right order."""
    stack: BoundedStack[str] = BoundedStack(len(text))
    for ch in text:
        if ch in OPENING:
            stack.push(ch)
        elif ch in CLOSING:
            if stack.is_empty() or stack.peek() != _OPENER_FOR[ch]:
                return False
            stack.pop()
    return stack.is_empty()


def _convert(chars: str, pushed: Iterable[str], matching: Mapping[str, str]) -> str:
    """Run the operator-stack conversion over ``chars``.

    ``pushed`` are the brackets that start a group; ``matching`` maps each
    bracket that ends a group to the one that started it.
    """
    pushed = frozenset(pushed)
    stack: BoundedStack[str] = BoundedStack(len(chars))
    output: list[str] = []
    for ch in chars:
        if ch in pushed:
            stack.push(ch)
        elif ch in matching:
            while not stack.is_empty():
                top = stack.pop()
                if top == matching[ch]:
                    break
                output.append(top)
        elif ch in OPERATORS:
            while not stack.is_empty() and precedence(stack.peek()) >= precedence(ch):
                output.append(stack.pop())
            stack.push(ch)
        else:
            output.append(ch)
    output.extend(stack)
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Rewrite an infix expression with each operator after its operands."""
    return _convert(expression, OPENING, _OPENER_FOR)


def infix_to_prefix(expression: str) -> str:
    """Rewrite an infix expression with each operator before its operands."""
    reversed_postfix = _convert(expression[::-1], CLOSING, _CLOSER_FOR)
    return reversed_postfix[::-1]


def _truncating_div(dividend: int, divisor: int) -> int:
    """Integer division that rounds toward zero."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


_APPLY: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression whose operands are single digits.

    Whitespace is ignored.  Division truncates toward zero.  Raises
    ValueError for a malformed expression and ZeroDivisionError when
    dividing by zero.
    """
    stack: BoundedStack[int] = BoundedStack(len(expression))
    for ch in expression:
        if ch.isspace():
            continue
        if ch in _APPLY:
            try:
                right = stack.pop()
                left = stack.pop()
            except StackEmptyError:
                raise ValueError(f"operator {ch!r} is missing an operand") from None
            stack.push(_APPLY[ch](left, right))
        elif ch in string.digits:
            stack.push(int(ch))
        else:
            raise ValueError(f"unexpected character {ch!r} in expression")
    if len(stack) != 1:
        raise ValueError(f"malformed expression {expression!r}")
    return stack.pop()