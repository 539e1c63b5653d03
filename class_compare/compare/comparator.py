from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple, Union

from class_compare import config
from class_compare.cir.model import (
    Attribute,
    ClassDecl,
    ClassDiff,
    ComparisonReport,
    DiffEntry,
    Method,
)
from class_compare.compare.signatures import reduce_signatures

logger = logging.getLogger(__name__)


def _index_by_name(classes: Sequence[ClassDecl]) -> Dict[str, ClassDecl]:
    # first occurrence of a name wins when units were pooled
    index: Dict[str, ClassDecl] = {}
    for cls in classes:
        index.setdefault(cls.name, cls)
    return index


def _inheritance_note(
    ref: ClassDecl,
    cand: ClassDecl,
    ref_label: str,
    cand_label: str,
) -> Optional[DiffEntry]:
    if ref.extends == cand.extends:
        return None

    ref_side = f"{ref_label} extends '{ref.extends}'" if ref.extends else f"{ref_label} didn't extend"
    cand_side = f"{cand_label} extends '{cand.extends}'" if cand.extends else f"{cand_label} didn't extend"
    return DiffEntry(message=f"{ref_side} but {cand_side}", severity="removed")


def _diff_members(
    kind: str,
    ref_members: Sequence[Union[Attribute, Method]],
    cand_members: Sequence[Union[Attribute, Method]],
    ref_label: str,
    cand_label: str,
) -> Tuple[DiffEntry, ...]:
    """
    Grade the candidate's members against the reference's signatures.
    Signatures only the candidate has are not reported.
    """
    ref_counts = reduce_signatures(ref_members)
    cand_counts = reduce_signatures(cand_members)
    entries: List[DiffEntry] = []

    for sig, count in ref_counts.items():
        text = f"{kind} '{sig.label}'"
        other = cand_counts.get(sig)

        if other is None:
            entries.append(DiffEntry(f"{text} missing in {cand_label}", "removed"))
        elif other == count:
            entries.append(DiffEntry(f"{text} x{count}", "ok", count))
        else:
            severity = "countMismatchLow" if other < count else "countMismatchHigh"
            entries.append(
                DiffEntry(
                    f"{text} count mismatch {ref_label}:[{count}] {cand_label}:[{other}]",
                    severity,
                    count,
                )
            )

    return tuple(entries)


def _missing_class(cls: ClassDecl, ref_label: str, cand_label: str) -> ClassDiff:
    def added(kind: str, members: Sequence[Union[Attribute, Method]]) -> Tuple[DiffEntry, ...]:
        return tuple(
            DiffEntry(
                f"{kind} '{sig.label}' x{count} expected by {ref_label}, class missing in {cand_label}",
                "added",
                count,
            )
            for sig, count in reduce_signatures(members).items()
        )

    return ClassDiff(
        class_name=cls.name,
        color="mismatch",
        extends=cls.extends,
        note=DiffEntry(f"Class '{cls.name}' not found in {cand_label}", "removed"),
        attributes=added("Attribute", cls.attributes),
        methods=added("Method", cls.methods),
    )


def compare_class(
    ref: ClassDecl,
    cand: Optional[ClassDecl],
    *,
    reference_label: str = config.REFERENCE_LABEL,
    candidate_label: str = config.CANDIDATE_LABEL,
) -> ClassDiff:
    if cand is None:
        return _missing_class(ref, reference_label, candidate_label)

    inheritance = _inheritance_note(ref, cand, reference_label, candidate_label)
    attributes = _diff_members("Attribute", ref.attributes, cand.attributes, reference_label, candidate_label)
    methods = _diff_members("Method", ref.methods, cand.methods, reference_label, candidate_label)

    clean = inheritance is None and all(e.severity == "ok" for e in attributes + methods)
    return ClassDiff(
        class_name=ref.name,
        color="match" if clean else "mismatch",
        extends=ref.extends,
        inheritance=inheritance,
        attributes=attributes,
        methods=methods,
    )


def compare(
    reference: Sequence[ClassDecl],
    candidate: Sequence[ClassDecl],
    *,
    reference_label: str = config.REFERENCE_LABEL,
    candidate_label: str = config.CANDIDATE_LABEL,
) -> List[ClassDiff]:
    """
    One ClassDiff per distinct reference class name, in the order the
    names first appear in the reference set.
    """
    ref_index = _index_by_name(reference)
    cand_index = _index_by_name(candidate)

    return [
        compare_class(
            ref,
            cand_index.get(name),
            reference_label=reference_label,
            candidate_label=candidate_label,
        )
        for name, ref in ref_index.items()
    ]


def class_count_summary(
    reference: Sequence[ClassDecl],
    candidate: Sequence[ClassDecl],
    *,
    reference_label: str = config.REFERENCE_LABEL,
    candidate_label: str = config.CANDIDATE_LABEL,
) -> Optional[DiffEntry]:
    if len(reference) == len(candidate):
        return None
    severity = "countMismatchLow" if len(candidate) < len(reference) else "countMismatchHigh"
    return DiffEntry(
        f"Class number mismatch {reference_label}:[{len(reference)}] {candidate_label}:[{len(candidate)}]",
        severity,
        len(reference),
    )


def compare_report(
    reference: Sequence[ClassDecl],
    candidate: Sequence[ClassDecl],
    *,
    reference_label: str = config.REFERENCE_LABEL,
    candidate_label: str = config.CANDIDATE_LABEL,
) -> ComparisonReport:
    labels = {"reference_label": reference_label, "candidate_label": candidate_label}
    report = ComparisonReport(
        classes=tuple(compare(reference, candidate, **labels)),
        summary=class_count_summary(reference, candidate, **labels),
    )
    logger.debug(
        "Compared %d reference class(es) against %d candidate class(es), identical=%s",
        len(reference),
        len(candidate),
        report.identical,
    )
    return report
