"""
rest_data.rest.naming

Default path derivation for resources.
"""

from __future__ import annotations

import re

_SUFFIXES = ("resource", "controller")

# Acronym runs ("HTTP" in "HTTPLog"), capitalized/lower words, digit runs.
_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z]|\d|\b)|[A-Z]?[a-z]+|[A-Z]+|\d+")


def resource_path(name: str) -> str:
    """
    `MemberResource` -> `member`, `PeopleController` -> `people`,
    `MemberAddressResource` -> `member-address`.
    """

    lowered = name.lower()
    for suffix in _SUFFIXES:
        if lowered.endswith(suffix) and len(name) > len(suffix):
            name = name[: -len(suffix)]
            break
    return "-".join(word.lower() for word in _WORD.findall(name))
