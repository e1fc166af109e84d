from __future__ import annotations
import re
import sys


# Identifier grammar shared by the reader, define and lambda
SYMBOL_RE = re.compile(r"^[a-zA-Z+\-!/*_][a-zA-Z0-9+\-!?*_']*$")


def is_valid_name(name: str) -> bool:
    return isinstance(name, str) and SYMBOL_RE.fullmatch(name) is not None


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def is_valid(self) -> bool:
        return is_valid_name(self.id)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


DEFINE = Symbol("define")
BEGIN = Symbol("begin")
LAMBDA = Symbol("lambda")
