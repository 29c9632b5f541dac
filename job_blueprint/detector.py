# job_blueprint/detector.py
from __future__ import annotations

from typing import Dict, List, Sequence

from job_blueprint.models import DetectionResult, Seniority
from job_blueprint.rules import BUCKETS, DEFAULT_TABLE, KeywordTable
from job_blueprint.utils import search_text


def detect_seniority(text: str, table: KeywordTable = DEFAULT_TABLE) -> Seniority:
    """Senior indicators win over junior ones; neither means mid."""
    t = text or ""
    if any(kw in t for kw in table.senior_keywords):
        return "senior"
    if any(kw in t for kw in table.junior_keywords):
        return "junior"
    return "mid"


def detect_stack(
    description: str,
    requirements: Sequence[str] | None = None,
    table: KeywordTable = DEFAULT_TABLE,
) -> DetectionResult:
    """
    Classify a posting into bucketed category keys.

    Every key in the table is checked in insertion order. The first of its
    patterns found in the text records the key; the rest of that key's
    patterns are skipped.
    """
    full_text = search_text(description or "", " ".join(r for r in (requirements or []) if r))

    found: Dict[str, List[str]] = {b: [] for b in BUCKETS}

    for key, patterns in table.patterns.items():
        for pattern in patterns:
            if pattern in full_text:
                bucket = table.bucket_of(key)
                if bucket and key not in found[bucket]:
                    found[bucket].append(key)
                break

    return DetectionResult(
        languages=tuple(found["languages"]),
        frameworks=tuple(found["frameworks"]),
        databases=tuple(found["databases"]),
        platforms=tuple(found["platforms"]),
        domains=tuple(found["domains"]),
        specializations=tuple(found["specializations"]),
        estimated_seniority=detect_seniority(full_text, table),
    )
