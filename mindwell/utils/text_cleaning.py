from __future__ import annotations

import re

_PUNCT_RE = re.compile(r"[’‘]")


def normalize_punctuation(text: str) -> str:
    return _PUNCT_RE.sub("'", text)


def normalize_for_matching(text: str | None) -> str:
    """Lower-case text for keyword containment checks.

    Curly apostrophes from mobile keyboards are folded to ``'`` so phrases
    such as "can't sleep" still match. Whitespace is left untouched because
    keyword phrases are matched as raw substrings.
    """
    if not text:
        return ""
    return normalize_punctuation(text.lower())
