"""String helpers: in-place character reversal and a tour of common string operations."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def reverse_chars(chars: MutableSequence[Any]) -> None:
    """Reverse a mutable sequence of characters in place."""
    chars[:] = list(reversed(chars))


def string_demo() -> list[str]:
    """Return the lines produced by a walk through construction, slicing, search and editing."""
    str1 = "first string"
    str2 = str1
    str3 = "#" * 5
    str4 = str1[6:12]
    str5 = str2[:5]
    lines = [str1, str2, str3, str4, str5]

    str6 = str4
    str4 = ""
    lines.append(f"Length of string is : {len(str6)}")
    lines.append(f"third character of string is : {str6[2]}")
    lines.append(f"First char is : {str6[0]}, Last char is : {str6[-1]}")
    lines.append(str6)

    str6 += " extension"
    str4 += str6[:6]
    lines += [str6, str4]

    position = str6.find(str4)
    if position != -1:
        lines.append(f"str4 found in str6 at {position} pos")
    else:
        lines.append("str4 not found in str6")

    lines.append(str6[7:10])
    lines.append(str6[7:])

    str6 = str6[:7] + str6[11:]
    lines.append(str6)
    str6 = str6[:5] + str6[-3:]
    lines.append(str6)

    str6 = "This is a examples"
    str6 = str6[:2] + "ese are test" + str6[9:]
    lines.append(str6)
    return lines