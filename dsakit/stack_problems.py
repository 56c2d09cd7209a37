"""Classic problems solved with a stack: brackets, permutations, spans, histograms and more."""

from __future__ import annotations

from typing import Any, Optional, Sequence

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())

PUSH = "S"
POP = "X"


def first_unbalanced_index(text: str) -> Optional[int]:
    """Where the brackets of ``text`` first go wrong, or None if they balance.

    A closing bracket with no opener, or one that closes the wrong kind of
    bracket, is reported at its own index. If the text ends with openers
    still unclosed, the index of the outermost unclosed opener is reported.
    Characters other than ``()[]{}`` are ignored.
    """
    open_positions: list[int] = []
    for index, char in enumerate(text):
        if char in _OPENERS:
            open_positions.append(index)
        elif char in _PAIRS:
            if not open_positions or text[open_positions[-1]] != _PAIRS[char]:
                return index
            open_positions.pop()
    if open_positions:
        return open_positions[0]
    return None


def is_balanced(text: str) -> bool:
    """Whether every bracket in ``text`` is closed by its matching kind, in order."""
    return first_unbalanced_index(text) is None


def stack_permutation(given: Sequence[Any], required: Sequence[Any]) -> Optional[str]:
    """The push/pop sequence that turns ``given`` into ``required`` through one stack.

    Pushes are written as ``S`` and pops as ``X``. Each value is pushed in the
    order of ``given`` and popped as soon as it is the next value wanted.
    Returns None when no such sequence exists.
    """
    stack: list[Any] = []
    operations: list[str] = []
    wanted = 0
    for value in given:
        stack.append(value)
        operations.append(PUSH)
        while stack and wanted < len(required) and stack[-1] == required[wanted]:
            stack.pop()
            operations.append(POP)
            wanted += 1
    if stack or wanted != len(required):
        return None
    return "".join(operations)


def spans_naive(values: Sequence[Any]) -> list[int]:
    """Span of each element by scanning back over every earlier element.

    The span of ``values[i]`` counts ``values[i]`` itself plus the consecutive
    elements immediately before it that are strictly smaller.
    """
    result = []
    for index, value in enumerate(values):
        span = 1
        while span <= index and value > values[index - span]:
            span += 1
        result.append(span)
    return result


def spans(values: Sequence[Any]) -> list[int]:
    """Span of each element in linear time, using a stack of indices."""
    result = []
    stack: list[int] = []
    for index, value in enumerate(values):
        while stack and value > values[stack[-1]]:
            stack.pop()
        previous = stack[-1] if stack else -1
        result.append(index - previous)
        stack.append(index)
    return result


def largest_rectangle(heights: Sequence[int]) -> int:
    """Area of the largest rectangle under a histogram of unit-width bars.

    An empty histogram has area 0.
    """
    best = 0
    stack: list[int] = []
    for index in range(len(heights) + 1):
        current = heights[index] if index < len(heights) else None
        while stack and (current is None or heights[stack[-1]] > current):
            height = heights[stack.pop()]
            left = stack[-1] if stack else -1
            best = max(best, height * (index - left - 1))
        stack.append(index)
    return best


def remove_adjacent_duplicates(text: str) -> str:
    """Repeatedly remove pairs of equal neighbouring characters until none remain."""
    kept: list[str] = []
    for char in text:
        if kept and kept[-1] == char:
            kept.pop()
        else:
            kept.append(char)
    return "".join(kept)


def next_greater(values: Sequence[Any]) -> list[Any]:
    """Replace each element by the nearest strictly greater element to its right.

    An element with nothing greater to its right keeps its own value.
    """
    result = list(values)
    waiting: list[int] = []
    for index, value in enumerate(values):
        while waiting and values[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(index)
    return result


def is_marked_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same from both ends, such as ``abXba``."""
    left, right = 0, len(text) - 1
    while left < right and text[left] == text[right]:
        left += 1
        right -= 1
    return left >= right