"""
Text cleanup for pdfplumber output before it is sent to the model.
"""

from __future__ import annotations

import re
import unicodedata

_REPLACEMENTS = {
    "\u2019": "'",   # right single quote
    "\u2018": "'",   # left single quote
    "\u201c": '"',   # left double quote
    "\u201d": '"',   # right double quote
    "\u2013": "-",   # en-dash
    "\u2014": "-",   # em-dash
    "\u2022": "-",   # bullet
    "\u25cf": "-",   # black circle bullet
    "\u25aa": "-",   # small square bullet
    "\u2026": "...", # ellipsis
    "\u00a0": " ",   # non-breaking space
    "\u00ad": "",    # soft hyphen
    "\u200b": "",    # zero-width space
    "\ufeff": "",    # BOM
    "\f": "\n",      # page break
}

# pdfminer emits "(cid:123)" for glyphs it cannot map to unicode
_CID_ARTEFACT = re.compile(r"\(cid:\d+\)")
_INLINE_SPACE = re.compile(r"[ \t]+")
_BLANK_RUN = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """Fold unicode look-alikes, drop PDF artefacts and tidy whitespace.

    Line breaks are preserved so "Label: value" lines stay matchable.
    """
    text = unicodedata.normalize("NFKC", text)

    for old, new in _REPLACEMENTS.items():
        text = text.replace(old, new)
    text = _CID_ARTEFACT.sub("", text)

    text = _INLINE_SPACE.sub(" ", text)
    text = "\n".join(line.strip() for line in text.splitlines())
    text = _BLANK_RUN.sub("\n\n", text)

    return text.strip()
