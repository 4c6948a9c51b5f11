from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

_RULES_PATH = Path(__file__).with_name("career_rules.yaml")
_EXPECTED_TAGS = (
    "frontend",
    "backend",
    "fullstack",
    "data",
    "marketing",
    "design",
    "content",
    "video",
    "python",
    "java",
)
DEFAULT_TAG = "default"


@dataclass(frozen=True)
class CareerRule:
    tag: str
    career: str
    salary_range: str
    base_probability: int
    required_skills: tuple[str, ...]


@dataclass(frozen=True)
class RuleTable:
    default: CareerRule
    rules: dict[str, CareerRule]
    probability_ceiling: int

    def get(self, tag: str) -> CareerRule:
        if tag == DEFAULT_TAG:
            return self.default
        return self.rules[tag]


def _parse_rule(tag: str, raw: Any, path: Path) -> CareerRule:
    if not isinstance(raw, dict):
        raise RuntimeError(f"Invalid career rule '{tag}' in '{path}': expected a mapping.")
    try:
        career = str(raw["career"]).strip()
        salary_range = str(raw["salary_range"]).strip()
        probability = int(raw["probability"])
        required = tuple(str(skill).strip() for skill in raw["required_skills"])
    except (KeyError, TypeError, ValueError) as exc:
        raise RuntimeError(f"Invalid career rule '{tag}' in '{path}': {exc}") from exc

    if not 0 <= probability <= 100:
        raise RuntimeError(f"Career rule '{tag}' probability must be within 0-100, got {probability}.")
    if len(required) < 2:
        raise RuntimeError(f"Career rule '{tag}' needs at least two required skills.")
    return CareerRule(
        tag=tag,
        career=career,
        salary_range=salary_range,
        base_probability=probability,
        required_skills=required,
    )


def parse_rule_table(raw: Any, path: Path = _RULES_PATH) -> RuleTable:
    if not isinstance(raw, dict):
        raise RuntimeError(f"Invalid career rules '{path}': expected a top-level mapping.")

    raw_rules = raw.get("rules")
    if not isinstance(raw_rules, dict):
        raise RuntimeError(f"Invalid career rules '{path}': 'rules' must be a mapping.")
    missing_tags = [tag for tag in _EXPECTED_TAGS if tag not in raw_rules]
    if missing_tags:
        raise RuntimeError(f"Career rules '{path}' are missing tags: {', '.join(missing_tags)}")

    rules = {str(tag): _parse_rule(str(tag), body, path) for tag, body in raw_rules.items()}
    return RuleTable(
        default=_parse_rule(DEFAULT_TAG, raw.get("default"), path),
        rules=rules,
        probability_ceiling=int(raw.get("probability_ceiling", 75)),
    )


@lru_cache(maxsize=1)
def load_rule_table() -> RuleTable:
    """Load the packaged rule table once per process."""
    try:
        text = _RULES_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read career rules '{_RULES_PATH}': {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in career rules '{_RULES_PATH}': {exc}") from exc

    return parse_rule_table(parsed)
