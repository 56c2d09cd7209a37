"""Infix to postfix conversion and evaluation of single-digit arithmetic expressions."""

from __future__ import annotations

OPERATORS = frozenset("*-+/()")

_PRECEDENCE = {"*": 3, "+": 1, "-": 2, "/": 4, "(": 0}
_DIGITS = frozenset("0123456789")


def is_operator(char: str) -> bool:
    """Whether the character is one of ``* - + / ( )``."""
    return char in OPERATORS


def operator_precedence(char: str) -> int:
    """The binding rank of an operator on the stack: ``/`` > ``*`` > ``-`` > ``+`` > ``(``."""
    try:
        return _PRECEDENCE[char]
    except KeyError:
        raise ValueError(f"{char!r} has no precedence") from None


def infix_to_postfix(expression: str) -> str:
    """Rewrite an infix expression in postfix form.

    Every character that is not an operator is an operand and is copied
    through unchanged. An operator pops only operators of strictly higher
    precedence before it is stacked.
    """
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if not is_operator(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')'")
            stack.pop()
        else:
            rank = operator_precedence(char)
            while stack and operator_precedence(stack[-1]) > rank:
                output.append(stack.pop())
            stack.append(char)
    while stack:
        operator = stack.pop()
        if operator == "(":
            raise ValueError("unmatched '('")
        output.append(operator)
    return "".join(output)


def _digit(char: str) -> int:
    if char not in _DIGITS:
        raise ValueError(f"operand {char!r} is not a decimal digit")
    return ord(char) - ord("0")


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        if right == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    raise ValueError(f"{operator!r} is not a binary operator")


def evaluate_postfix(expression: str) -> int:
    """Value of a postfix expression of single-digit operands; division truncates toward zero."""
    stack: list[int] = []
    for char in expression:
        if char in "()":
            raise ValueError("parentheses are not allowed in postfix")
        if is_operator(char):
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(_apply(char, left, right))
        else:
            stack.append(_digit(char))
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]


def _reduce(operands: list[int], operators: list[str]) -> None:
    operator = operators.pop()
    if len(operands) < 2:
        raise ValueError(f"operator {operator!r} lacks operands")
    right = operands.pop()
    left = operands.pop()
    operands.append(_apply(operator, left, right))


def evaluate_infix(expression: str) -> int:
    """Value of an infix expression of single-digit operands, in one pass with two stacks."""
    operands: list[int] = []
    operators: list[str] = []
    for char in expression:
        if not is_operator(char):
            operands.append(_digit(char))
        elif char == "(":
            operators.append(char)
        elif char == ")":
            while operators and operators[-1] != "(":
                _reduce(operands, operators)
            if not operators:
                raise ValueError("unmatched ')'")
            operators.pop()
        else:
            rank = operator_precedence(char)
            while operators and operator_precedence(operators[-1]) > rank:
                _reduce(operands, operators)
            operators.append(char)
    while operators:
        if operators[-1] == "(":
            raise ValueError("unmatched '('")
        _reduce(operands, operators)
    if len(operands) != 1:
        raise ValueError("malformed infix expression")
    return operands[0]