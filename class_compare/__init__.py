from __future__ import annotations

from typing import Iterable, Mapping, Tuple, Union

from class_compare import config
from class_compare.adapters.java_adapter import JavaAdapter
from class_compare.cir.model import ClassDecl, ClassDiff, ComparisonReport, ParseResult
from class_compare.compare.comparator import compare, compare_report
from class_compare.compare.signatures import reduce_signatures

java_adapter = JavaAdapter()


def parse(source: str) -> ParseResult:
    return java_adapter.parse(source)


def parse_units(units: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> ParseResult:
    return java_adapter.parse_units(units)


__all__ = [
    "ClassDecl",
    "ClassDiff",
    "ComparisonReport",
    "JavaAdapter",
    "ParseResult",
    "compare",
    "compare_report",
    "config",
    "parse",
    "parse_units",
    "reduce_signatures",
]
