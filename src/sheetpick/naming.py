"""
Worksheet title normalization: length limits and collision suffixes.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Set

from .config import DEFAULT_LIMITS, INVALID_SHEET_CHARS, SheetLimits


@dataclass
class NameRegistry:
    """
    Collision counters for the titles handed out during one operation.

    ``counts`` maps each normalized base to the number of times it has been
    reused; ``issued`` holds every title returned so far. Titles are compared
    case-insensitively, as Excel does.
    """
    counts: Dict[str, int] = field(default_factory=dict)
    issued: Set[str] = field(default_factory=set)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self.issued

    def __len__(self) -> int:
        return len(self.issued)

    def collisions(self, base: str) -> Optional[int]:
        """Return how often ``base`` has been reused, or None if it is new."""
        return self.counts.get(base.lower())

    def record(self, base: str, count: int, name: str) -> None:
        self.counts[base.lower()] = count
        self.issued.add(name.lower())


def shorten_sheet_name(name: str, limits: SheetLimits = DEFAULT_LIMITS) -> str:
    """
    Cut a title that exceeds the length limit and mark it with an ellipsis.

    Lengths are counted in characters, so multi-byte text is not penalised.
    """
    if len(name) <= limits.max_name_length:
        return name
    return name[:limits.truncated_length] + limits.ellipsis


def normalize_sheet_name(
    candidate: str,
    registry: NameRegistry,
    limits: SheetLimits = DEFAULT_LIMITS
) -> str:
    """
    Turn a candidate title into one that fits the limit and is new to ``registry``.

    The first use of a base comes back unchanged (after shortening). Every
    later use gets ``_1``, ``_2``, ... appended, trimming the base from the
    end so the result still fits.

    The registry is keyed by the shortened base, so two long titles that share
    their first 28 characters are treated as the same base and suffixed.

    Args:
        candidate: Desired title, any length
        registry: Registry for the current operation (mutated)
        limits: Title constraints

    Returns:
        Title guaranteed to be within the limit and unused in this registry
    """
    base = shorten_sheet_name(candidate, limits)

    count = registry.collisions(base)
    if count is None and base not in registry:
        registry.record(base, 0, base)
        return base

    count = count or 0
    while True:
        count += 1
        suffix = f"_{count}"
        room = limits.max_name_length - len(suffix)
        name = base[:room] + suffix
        if name not in registry:
            break

    registry.record(base, count, name)
    return name


def sanitize_sheet_name(text: str, limits: SheetLimits = DEFAULT_LIMITS) -> str:
    """
    Replace characters Excel rejects in sheet titles.

    Args:
        text: Raw text, e.g. a file stem
        limits: Supplies the placeholder for blank input

    Returns:
        Text safe to embed in a worksheet title
    """
    if not text or not text.strip():
        return limits.stem_placeholder

    sanitized = re.sub(INVALID_SHEET_CHARS, '_', text.strip())

    # Excel also refuses titles wrapped in apostrophes
    sanitized = sanitized.strip("'")

    if not sanitized:
        return limits.stem_placeholder

    return sanitized
