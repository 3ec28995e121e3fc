"""Identifier helpers for vehicle display names."""

import re


_WHITESPACE = re.compile(r"\s+")


def slugify(name: str) -> str:
    return _WHITESPACE.sub("-", name.lower())  # "3 Ton Truck" -> "3-ton-truck"
