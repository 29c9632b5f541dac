# job_blueprint/main.py
from __future__ import annotations

import json
import random
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from job_blueprint.blueprint import generate_blueprint
from job_blueprint.config import Config
from job_blueprint.detector import detect_stack
from job_blueprint.errors import BlueprintError, InputError
from job_blueprint.formatters import tickets_to_csv, to_json, to_markdown
from job_blueprint.models import DetectionResult, JobPosting, ProjectBlueprint
from job_blueprint.rules import DEFAULT_TABLE, KeywordTable, load_keyword_table
from job_blueprint.sources import PostingSource, TextPostingSource, UrlPostingSource


def _posting_source(cfg: Config) -> PostingSource:
    inp = cfg.input
    if inp.url:
        return UrlPostingSource(inp.url, timeout=cfg.fetch.timeout, user_agent=cfg.fetch.user_agent)

    text = inp.text
    if not text and inp.text_file:
        p = Path(inp.text_file).expanduser().resolve()
        if not p.exists():
            raise InputError(f"Posting text file not found: {p}")
        text = p.read_text(encoding="utf-8")

    if not text:
        raise InputError("Either a posting URL or posting text must be provided")
    return TextPostingSource(text, title=inp.job_title)


def load_posting(cfg: Config) -> JobPosting:
    posting = _posting_source(cfg).fetch_posting()

    updates: Dict[str, Any] = {}
    if cfg.input.company_name:
        updates["company"] = cfg.input.company_name
    if cfg.input.job_title:
        updates["title"] = cfg.input.job_title
    return posting.model_copy(update=updates) if updates else posting


def _keyword_table(cfg: Config) -> KeywordTable:
    if cfg.rules.patterns_file:
        try:
            return load_keyword_table(cfg.rules.patterns_file)
        except (OSError, ValueError) as e:
            raise InputError(f"Invalid patterns file {cfg.rules.patterns_file}: {e}") from e
    return DEFAULT_TABLE


def build_summary(posting: JobPosting, bp: ProjectBlueprint) -> Dict[str, Any]:
    return {
        "job_title": posting.title,
        "company": posting.company,
        "seniority": bp.metadata.seniority,
        "technologies": bp.summary.key_technologies,
        "challenges": bp.summary.main_challenges,
        "success_criteria": bp.summary.success_criteria,
        "estimated_duration": bp.metadata.estimated_duration,
        "total_tickets": len(bp.all_tickets()),
        "learning_hours": bp.learning_plan.estimated_total_hours,
    }


def _print_detection(stack: DetectionResult) -> None:
    tags = stack.all_tags()
    if not tags:
        print("[INFO] No known technologies detected")
    else:
        print(f"[INFO] Detected {len(tags)} technologies:")
    print(f"[INFO] - Languages: {', '.join(stack.languages)}")
    print(f"[INFO] - Frameworks: {', '.join(stack.frameworks)}")
    print(f"[INFO] - Databases: {', '.join(stack.databases)}")
    print(f"[INFO] - Platforms: {', '.join(stack.platforms)}")
    print(f"[INFO] - Domains: {', '.join(stack.domains)}")
    print(f"[INFO] - Specializations: {', '.join(stack.specializations)}")
    print(f"[INFO] - Seniority: {stack.estimated_seniority}")


def _write_outputs(posting: JobPosting, bp: ProjectBlueprint, cfg: Config, out_dir: Path) -> Dict[str, Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}
    fmt = cfg.output.format

    if fmt in ("json", "both"):
        p = out_dir / "blueprint.json"
        p.write_text(to_json(bp, pretty=cfg.output.pretty_json), encoding="utf-8")
        written["json"] = p

    if fmt in ("markdown", "both"):
        p = out_dir / "blueprint.md"
        p.write_text(to_markdown(bp), encoding="utf-8")
        written["markdown"] = p

    if cfg.output.write_csv:
        p = out_dir / "tickets.csv"
        p.write_text(tickets_to_csv(bp), encoding="utf-8")
        written["csv"] = p

    if cfg.output.write_summary:
        p = out_dir / "summary.json"
        p.write_text(json.dumps(build_summary(posting, bp), indent=2), encoding="utf-8")
        written["summary"] = p

    for kind, p in written.items():
        print(f"Wrote {kind} → {p}")
    return written


def _write_error(out_dir: Path, message: str) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    err_file = out_dir / "error.json"
    err_file.write_text(
        json.dumps(
            {"type": "error", "error": message, "timestamp": datetime.now(timezone.utc).isoformat()},
            indent=2,
        ),
        encoding="utf-8",
    )
    return err_file


def run(
    cfg: Config,
    *,
    verbose: bool = False,
    rng: Optional[random.Random] = None,
) -> ProjectBlueprint:
    out_dir = Path(cfg.output.dir).expanduser().resolve()
    if verbose:
        print(f"[DEBUG] Output directory: {out_dir}")

    try:
        print("[INFO] Extracting job posting data...")
        posting = load_posting(cfg)
        print(f"[INFO] Processing job: {posting.title} @ {posting.company}")

        table = _keyword_table(cfg)
        if verbose and cfg.rules.patterns_file:
            print(f"[DEBUG] Using patterns file: {cfg.rules.patterns_file} ({len(table.patterns)} categories)")

        print("[INFO] Analyzing technology stack and requirements...")
        stack = detect_stack(posting.description, posting.requirements, table)
        _print_detection(stack)

        gen = cfg.generation
        print("[INFO] Generating project blueprint...")
        bp = generate_blueprint(
            posting.title,
            posting.company,
            posting.description,
            stack,
            duration_days=gen.duration_days,
            include_architecture=gen.include_architecture,
            include_test_plan=gen.include_test_plan,
            include_learning_plan=gen.include_learning_plan,
            rng=rng,
        )
    except BlueprintError as e:
        err_file = _write_error(out_dir, str(e))
        print(f"[ERROR] {e} (wrote {err_file.name})")
        raise

    _write_outputs(posting, bp, cfg, out_dir)

    print("[INFO] Blueprint generation completed")
    print(f"[INFO] - Generated {len(bp.roadmap.epics)} epics")
    print(f"[INFO] - Created {len(bp.all_tickets())} tickets")
    print(f"[INFO] - Learning plan: {bp.learning_plan.estimated_total_hours} hours")
    return bp
