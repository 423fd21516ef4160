"""
Basic-info extraction — "Label: value" lines pulled straight from the CV text.

Best-effort only: CVs that don't label their contact lines get "Not found".
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

logger = logging.getLogger(__name__)

NOT_FOUND = "Not found"

FIELD_PATTERNS: dict[str, re.Pattern[str]] = {
    "name": re.compile(r"Name:\s*(.*)", re.IGNORECASE),
    "email": re.compile(r"Email:\s*(.*)", re.IGNORECASE),
    "phone": re.compile(r"Phone:\s*(.*)", re.IGNORECASE),
}


def extract_basic_info(text: str, elements: Iterable[object]) -> dict[str, str]:
    """Return the first labelled value for each requested field, or NOT_FOUND."""
    requested = {str(e).strip().lower() for e in elements}

    unknown = requested - FIELD_PATTERNS.keys()
    if unknown:
        logger.debug(f"Ignoring unsupported basic-info fields: {sorted(unknown)}")

    info: dict[str, str] = {}
    for field, pattern in FIELD_PATTERNS.items():
        if field not in requested:
            continue
        match = pattern.search(text)
        value = match.group(1).strip() if match else ""
        info[field] = value or NOT_FOUND
    return info
