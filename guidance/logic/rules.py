"""
Rule Table Loader

Loads the static eligibility rule table once per process.
The table is configuration: a missing or malformed file is a startup error.
"""

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from pydantic import ValidationError
from dotenv import load_dotenv

from .contracts import EligibilityRule

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).resolve().parent.parent / "data" / "education_rules.json"


class RuleTableError(RuntimeError):
    """Raised when the rule table cannot be read or validated."""


def resolve_rules_path(path: Optional[str] = None) -> Path:
    """Explicit path, else GUIDANCE_RULES_PATH, else the bundled table."""
    configured = path or os.getenv("GUIDANCE_RULES_PATH")
    return Path(configured) if configured else DEFAULT_RULES_PATH


def read_rules(path: Path) -> Tuple[EligibilityRule, ...]:
    """Read and validate a rule table file."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        raise RuleTableError(f"Cannot read rule table {path}: {e}") from e

    if not isinstance(raw, list):
        raise RuleTableError(f"Rule table {path} must be a JSON array")

    try:
        rules = tuple(EligibilityRule.model_validate(entry) for entry in raw)
    except ValidationError as e:
        raise RuleTableError(f"Invalid rule in {path}: {e}") from e

    ids = [rule.id for rule in rules]
    if len(ids) != len(set(ids)):
        raise RuleTableError(f"Duplicate rule ids in {path}")

    logger.info("Loaded %d eligibility rules from %s", len(rules), path)
    return rules


@lru_cache(maxsize=None)
def _cached_rules(path: str) -> Tuple[EligibilityRule, ...]:
    return read_rules(Path(path))


def load_rules(path: Optional[str] = None) -> Tuple[EligibilityRule, ...]:
    """
    Return the rule table, reading it on first use.

    Args:
        path: Optional override of the rule table location

    Returns:
        Immutable tuple of EligibilityRule
    """
    return _cached_rules(str(resolve_rules_path(path)))
