from __future__ import annotations

from typing import Literal, Optional
import yaml
from pydantic import BaseModel, Field, ValidationError


class InputCfg(BaseModel):
    # Exactly one of url / text is needed; url wins if both are set.
    url: Optional[str] = None
    text: Optional[str] = None
    text_file: Optional[str] = None

    # Overrides for whatever the extractor finds
    company_name: Optional[str] = None
    job_title: Optional[str] = None


class GenerationCfg(BaseModel):
    duration_days: int = Field(default=60, ge=1)
    include_architecture: bool = True
    include_test_plan: bool = True
    include_learning_plan: bool = True


class FetchCfg(BaseModel):
    timeout: float = Field(default=10, gt=0)
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class OutputCfg(BaseModel):
    format: Literal["json", "markdown", "both"] = "both"
    dir: str = "data/blueprints"
    pretty_json: bool = True
    write_csv: bool = True
    write_summary: bool = True


class RulesCfg(BaseModel):
    patterns_file: Optional[str] = None


class Config(BaseModel):
    version: int = 1
    input: InputCfg = Field(default_factory=InputCfg)
    generation: GenerationCfg = Field(default_factory=GenerationCfg)
    fetch: FetchCfg = Field(default_factory=FetchCfg)
    output: OutputCfg = Field(default_factory=OutputCfg)
    rules: RulesCfg = Field(default_factory=RulesCfg)


def load_config(path: Optional[str]) -> Config:
    """Read a YAML config; no path means all defaults."""
    if not path:
        return Config()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a YAML mapping (dict). Got: {type(raw)}")

    try:
        return Config(**raw)
    except ValidationError as e:
        raise ValueError(f"Invalid config {path}: {e}") from e
