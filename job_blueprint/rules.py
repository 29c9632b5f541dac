# job_blueprint/rules.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

import yaml


BUCKETS: Tuple[str, ...] = (
    "languages",
    "frameworks",
    "databases",
    "platforms",
    "domains",
    "specializations",
)

# Patterns are raw lowercase substrings. Trailing spaces are deliberate:
# "java " must not fire on "javascript", "go " must not fire on "google".
_PATTERNS: Dict[str, Tuple[str, ...]] = {
    # Languages
    "python": ("python", "py"),
    "typescript": ("typescript", "ts", "tsx"),
    "javascript": ("javascript", "js", "nodejs", "node.js"),
    "kotlin": ("kotlin", "kt"),
    "java": ("java ", "jvm"),
    "csharp": ("c#", "csharp", ".net"),
    "swift": ("swift", "ios", "macos"),
    "rust": ("rust", "cargo"),
    "golang": ("golang", "go ", "goland"),
    "cpp": ("c++", "cpp"),
    "cppbuild": ("cmake", "make"),

    # Frameworks
    "react": ("react", "reactjs"),
    "vue": ("vue", "vuejs"),
    "angular": ("angular",),
    "nextjs": ("next.js", "nextjs"),
    "fastapi": ("fastapi",),
    "django": ("django",),
    "springboot": ("spring boot", "springboot"),
    "express": ("express.js", "expressjs"),
    "nestjs": ("nestjs", "nest.js"),
    "flutter": ("flutter", "dart"),

    # Databases
    "postgres": ("postgres", "postgresql"),
    "mysql": ("mysql", "mariadb"),
    "mongodb": ("mongodb", "mongo"),
    "redis": ("redis",),
    "elasticsearch": ("elasticsearch",),
    "dynamodb": ("dynamodb", "dynamodb "),
    "firestore": ("firestore",),
    "graphql": ("graphql",),

    # Platforms
    "aws": ("aws ", "amazon web", "ec2", "s3", "lambda", "sqs"),
    "gcp": ("google cloud", "gcp"),
    "azure": ("azure", "microsoft azure"),
    "docker": ("docker",),
    "kubernetes": ("kubernetes", "k8s"),
    "android": ("android",),
    "ios": ("ios", "iphone"),
    "webdev": ("web development", "frontend", "backend"),

    # Domains
    "fintech": ("fintech", "financial", "banking", "crypto", "blockchain"),
    "healthcare": ("healthcare", "medical", "health", "hipaa"),
    "ecommerce": ("ecommerce", "e-commerce", "marketplace"),
    "ml": ("machine learning", "ml", "ai", "nlp", "deep learning", "neural"),
    "iot": ("iot", "internet of things", "embedded"),
    "ble": ("ble", "bluetooth low energy"),
    "realtime": ("real-time", "realtime", "websocket"),
    "security": ("security", "encryption", "auth"),
    "devops": ("devops", "ci/cd", "infrastructure"),
    "analytics": ("analytics", "data engineering", "etl"),

    # Specializations
    "microservices": ("microservices", "microservice architecture"),
    "distributed": ("distributed", "distributed systems", "consensus"),
    "scaling": ("scaling", "scalable", "high availability"),
    "performance": ("performance", "optimization", "latency"),
}

# cppbuild is a toolchain, not a language, so it lands under platforms.
_BUCKET_OF: Dict[str, str] = {
    "python": "languages",
    "typescript": "languages",
    "javascript": "languages",
    "kotlin": "languages",
    "java": "languages",
    "csharp": "languages",
    "swift": "languages",
    "rust": "languages",
    "golang": "languages",
    "cpp": "languages",
    "cppbuild": "platforms",
    "react": "frameworks",
    "vue": "frameworks",
    "angular": "frameworks",
    "nextjs": "frameworks",
    "fastapi": "frameworks",
    "django": "frameworks",
    "springboot": "frameworks",
    "express": "frameworks",
    "nestjs": "frameworks",
    "flutter": "frameworks",
    "postgres": "databases",
    "mysql": "databases",
    "mongodb": "databases",
    "redis": "databases",
    "elasticsearch": "databases",
    "dynamodb": "databases",
    "firestore": "databases",
    "graphql": "databases",
    "aws": "platforms",
    "gcp": "platforms",
    "azure": "platforms",
    "docker": "platforms",
    "kubernetes": "platforms",
    "android": "platforms",
    "ios": "platforms",
    "webdev": "platforms",
    "fintech": "domains",
    "healthcare": "domains",
    "ecommerce": "domains",
    "ml": "domains",
    "iot": "domains",
    "ble": "domains",
    "realtime": "domains",
    "security": "domains",
    "devops": "domains",
    "analytics": "domains",
    "microservices": "specializations",
    "distributed": "specializations",
    "scaling": "specializations",
    "performance": "specializations",
}

JUNIOR_KEYWORDS: Tuple[str, ...] = (
    "entry-level",
    "junior",
    "graduate",
    "newly",
    "less than 2 years",
)

SENIOR_KEYWORDS: Tuple[str, ...] = (
    "senior",
    "5+ years",
    "7+ years",
    "principal",
    "lead",
    "architect",
    "expert",
)


@dataclass(frozen=True)
class KeywordTable:
    """
    Read-only keyword registry consumed by the stack detector.

    `patterns` maps category key -> substrings (evaluated in insertion order),
    `buckets` maps category key -> one of BUCKETS.
    """
    patterns: Mapping[str, Tuple[str, ...]]
    buckets: Mapping[str, str]
    junior_keywords: Tuple[str, ...] = JUNIOR_KEYWORDS
    senior_keywords: Tuple[str, ...] = SENIOR_KEYWORDS

    def bucket_of(self, key: str) -> str | None:
        bucket = self.buckets.get(key)
        return bucket if bucket in BUCKETS else None


def build_table(
    patterns: Mapping[str, Any],
    buckets: Mapping[str, str],
    junior_keywords: Tuple[str, ...] = JUNIOR_KEYWORDS,
    senior_keywords: Tuple[str, ...] = SENIOR_KEYWORDS,
) -> KeywordTable:
    """
    Validate and freeze a pattern table.
    Raises ValueError if any key lacks a known bucket or has no patterns.
    """
    frozen_patterns: Dict[str, Tuple[str, ...]] = {}
    for key, pats in patterns.items():
        k = str(key).strip().lower()
        if not k:
            raise ValueError("Pattern table contains an empty category key")
        bucket = buckets.get(key)
        if bucket not in BUCKETS:
            raise ValueError(f"Category '{key}' has no valid bucket (got {bucket!r})")
        cleaned = tuple(str(p).lower() for p in (pats or []) if str(p))
        if not cleaned:
            raise ValueError(f"Category '{key}' has no patterns")
        frozen_patterns[k] = cleaned

    frozen_buckets = {str(k).strip().lower(): v for k, v in buckets.items() if k in patterns}

    return KeywordTable(
        patterns=MappingProxyType(frozen_patterns),
        buckets=MappingProxyType(frozen_buckets),
        junior_keywords=tuple(kw.lower() for kw in junior_keywords),
        senior_keywords=tuple(kw.lower() for kw in senior_keywords),
    )


DEFAULT_TABLE = build_table(_PATTERNS, _BUCKET_OF)


def load_keyword_table(path: str) -> KeywordTable:
    """
    Load a replacement table from YAML:

        categories:
          python: {bucket: languages, patterns: ["python", "py"]}
        junior_keywords: [...]   # optional
        senior_keywords: [...]   # optional
    """
    p = Path(path).expanduser().resolve()
    if not p.exists():
        raise FileNotFoundError(f"Patterns file not found: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Patterns file is not valid YAML: {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Patterns file must be a YAML mapping: {p}")

    categories = raw.get("categories") or {}
    if not isinstance(categories, dict) or not categories:
        raise ValueError(f"Patterns file has no 'categories' mapping: {p}")

    patterns: Dict[str, List[str]] = {}
    buckets: Dict[str, str] = {}
    for key, entry in categories.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Category '{key}' must be a mapping with bucket + patterns")
        patterns[key] = list(entry.get("patterns") or [])
        buckets[key] = str(entry.get("bucket") or "").strip().lower()

    return build_table(
        patterns,
        buckets,
        junior_keywords=tuple(raw.get("junior_keywords") or JUNIOR_KEYWORDS),
        senior_keywords=tuple(raw.get("senior_keywords") or SENIOR_KEYWORDS),
    )
