from __future__ import annotations


class ParseError(ValueError):
    """Base class for problems found while scanning one source unit."""


class StructuralError(ParseError):
    """A class body whose braces never balance before the end of the source."""

    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(f"Unmatched braces in class '{class_name}'")


class EmptyInputError(ParseError):
    def __init__(self) -> None:
        super().__init__("No class declarations found")


class MalformedMemberError(ParseError):
    """A member or parameter fragment that does not fit the expected token shape."""
