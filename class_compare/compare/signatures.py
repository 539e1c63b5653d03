from __future__ import annotations

from typing import Dict, Iterable, Union

from class_compare.cir.model import Attribute, Method, Signature


def reduce_signatures(members: Iterable[Union[Attribute, Method]]) -> Dict[Signature, int]:
    """
    Collapse members into signature -> occurrence count.
    Keys keep first-occurrence order; comparator output mirrors it.
    """
    counts: Dict[Signature, int] = {}
    for member in members:
        sig = member.signature()
        counts[sig] = counts.get(sig, 0) + 1
    return counts
