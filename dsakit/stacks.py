"""Stack problems. A stack is a list whose last element is the top."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())
_OPERATORS = frozenset("+-*/")


def is_balanced(text: str) -> bool:
    """Return True if every bracket closes its own opener; other characters count as mismatches."""
    pending: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            pending.append(ch)
        elif not pending or _CLOSERS.get(ch) != pending[-1]:
            return False
        else:
            pending.pop()
    return not pending


def delete_middle(stack: Sequence[T], size: int) -> list[T]:
    """Return the stack without the element `size // 2` places below the top."""
    depth = size // 2
    if not 0 <= depth < len(stack):
        raise ValueError(f"no middle element at depth {depth} in a stack of {len(stack)}")
    result = list(stack)
    del result[len(result) - 1 - depth]
    return result


def insert_at_bottom(stack: Sequence[T], item: T) -> list[T]:
    """Return the stack with item placed beneath every existing element."""
    return [item, *stack]


def has_redundant_brackets(expression: str) -> bool:
    """Return True if some pair of parentheses encloses no operator."""
    pending: list[str] = []
    for ch in expression:
        if ch == "(" or ch in _OPERATORS:
            pending.append(ch)
        elif ch == ")":
            has_operator = False
            while True:
                if not pending:
                    raise ValueError("unmatched ')' in expression")
                top = pending.pop()
                if top == "(":
                    break
                has_operator = True
            if not has_operator:
                return True
    return False


def next_greater(values: Sequence[int]) -> list[int]:
    """For each element, the first larger element to its right, or -1 if there is none."""
    result = [-1] * len(values)
    waiting: list[int] = []
    for index, value in enumerate(values):
        while waiting and values[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(index)
    return result


def reverse_stack(stack: Sequence[T]) -> list[T]:
    """Return the stack with its order reversed, old top at the bottom."""
    return list(reversed(stack))


def reverse_string(text: str) -> str:
    """Reverse text by pushing every character and popping them back off."""
    pending = list(text)
    return "".join(pending.pop() for _ in text)