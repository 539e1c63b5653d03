from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple, Union

Modifier = Literal["public", "private", "protected", "default"]
Severity = Literal["added", "removed", "countMismatchHigh", "countMismatchLow", "ok"]
ColorClass = Literal["match", "mismatch", "partial"]

ACCESS_MODIFIERS: Tuple[str, ...] = ("public", "private", "protected")


@dataclass(frozen=True)
class AttributeSignature:
    modifier: Modifier
    type_name: str

    @property
    def key(self) -> str:
        return f"{self.modifier}|{self.type_name}"

    @property
    def label(self) -> str:
        return f"{self.modifier} {self.type_name}"


@dataclass(frozen=True)
class MethodSignature:
    modifier: Modifier
    return_type: str
    param_types: Tuple[str, ...] = ()

    @property
    def key(self) -> str:
        return f"{self.modifier}|{self.return_type}|{','.join(self.param_types)}"

    @property
    def label(self) -> str:
        return f"{self.modifier} {self.return_type}({','.join(self.param_types)})"


Signature = Union[AttributeSignature, MethodSignature]


@dataclass(frozen=True)
class Attribute:
    modifier: Modifier
    type_name: str
    name: str                 # kept for display, never compared

    def signature(self) -> AttributeSignature:
        return AttributeSignature(self.modifier, self.type_name)


@dataclass(frozen=True)
class Parameter:
    type_name: str            # may contain spaces, e.g. "Map<String, Integer>"
    name: str


@dataclass(frozen=True)
class Method:
    modifier: Modifier
    return_type: str
    name: str                 # kept for display, never compared
    parameters: Tuple[Parameter, ...] = ()

    def signature(self) -> MethodSignature:
        return MethodSignature(
            self.modifier,
            self.return_type,
            tuple(p.type_name for p in self.parameters),
        )


@dataclass(frozen=True)
class ClassDecl:
    name: str
    extends: Optional[str] = None
    attributes: Tuple[Attribute, ...] = ()
    methods: Tuple[Method, ...] = ()


@dataclass(frozen=True)
class ParseResult:
    classes: Tuple[ClassDecl, ...] = ()
    errors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DiffEntry:
    message: str
    severity: Severity
    count: Optional[int] = None


@dataclass(frozen=True)
class ClassDiff:
    """
    Comparison result for one reference class.
    children is reserved for nested classes; the current comparator
    always leaves it empty. note is set when the class has no counterpart
    in the candidate set; inheritance only ever describes an extends mismatch.
    """
    class_name: str
    color: ColorClass
    extends: Optional[str] = None
    inheritance: Optional[DiffEntry] = None
    note: Optional[DiffEntry] = None
    attributes: Tuple[DiffEntry, ...] = ()
    methods: Tuple[DiffEntry, ...] = ()
    children: Tuple["ClassDiff", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ComparisonReport:
    classes: Tuple[ClassDiff, ...] = ()
    summary: Optional[DiffEntry] = None

    @property
    def identical(self) -> bool:
        return self.summary is None and all(c.color == "match" for c in self.classes)
