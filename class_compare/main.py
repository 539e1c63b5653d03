# class_compare/main.py
from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException  # type: ignore
from fastapi.middleware.cors import CORSMiddleware  # type: ignore
from pydantic import BaseModel  # type: ignore

from class_compare import config
from class_compare.adapters.java_adapter import JavaAdapter
from class_compare.cir.graph import ClassGraph
from class_compare.cir.model import ParseResult
from class_compare.compare.comparator import compare_report

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title=config.API_TITLE, version=config.API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

java_adapter = JavaAdapter()


# ==============================================================================
# Models
# ==============================================================================
class ParseRequest(BaseModel):
    code: str
    filename: Optional[str] = None
    include_graph: bool = False


class SourceUnit(BaseModel):
    filename: str
    content: str


class CompareRequest(BaseModel):
    reference: List[SourceUnit]
    candidate: List[SourceUnit]
    reference_label: str = config.REFERENCE_LABEL
    candidate_label: str = config.CANDIDATE_LABEL


# ==============================================================================
# Helpers
# ==============================================================================
def _parse_side(units: List[SourceUnit]) -> Tuple[ParseResult, List[str]]:
    """Pool one side's units; non-source files are skipped with an advisory."""
    sources: List[Tuple[str, str]] = []
    skipped: List[str] = []
    for unit in units:
        if not unit.filename.endswith(config.SOURCE_SUFFIX):
            skipped.append(f"{unit.filename}: skipped, not a {config.SOURCE_SUFFIX} file")
            continue
        sources.append((unit.filename, unit.content))
    return java_adapter.parse_units(sources), skipped


# ==============================================================================
# Routes
# ==============================================================================
@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/parse")
def parse(req: ParseRequest):
    result = java_adapter.parse(req.code)
    body: Dict[str, Any] = {
        "filename": req.filename,
        "classes": [asdict(c) for c in result.classes],
        "errors": list(result.errors),
    }
    if req.include_graph:
        body["graph"] = ClassGraph.from_classes(result.classes).to_debug_json()
    return body


@app.post("/compare")
def compare(req: CompareRequest):
    if not req.reference or not req.candidate:
        raise HTTPException(status_code=400, detail="Both reference and candidate need at least one file")

    ref_result, ref_skipped = _parse_side(req.reference)
    cand_result, cand_skipped = _parse_side(req.candidate)

    report = compare_report(
        ref_result.classes,
        cand_result.classes,
        reference_label=req.reference_label,
        candidate_label=req.candidate_label,
    )
    logger.info(
        "Compared %s (%d classes) with %s (%d classes): identical=%s",
        req.reference_label,
        len(ref_result.classes),
        req.candidate_label,
        len(cand_result.classes),
        report.identical,
    )

    return {
        "identical": report.identical,
        "summary": asdict(report.summary) if report.summary else None,
        "classes": [asdict(c) for c in report.classes],
        "reference_errors": ref_skipped + list(ref_result.errors),
        "candidate_errors": cand_skipped + list(cand_result.errors),
    }
