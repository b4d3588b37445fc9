"""Display cleanup for rendered names.

Runs a fixed sequence of passes over a rendered string: whitespace
normalization, removal of empty or punctuation-only bracket groups, spacing
around punctuation, leading separators, and unwrapping of a bracket or quote
pair that encloses the whole string. Each pass assumes the previous ones ran.
"""
from __future__ import annotations

import re
from typing import Tuple

_NBSP_RE = re.compile(r"[\u00a0\u2007\u202f]")
_SPACES_RE = re.compile(r"\s+")

# A same-character quote pair is empty only when its opening quote starts a token,
# so the closing and opening quotes of two quoted names are left alone
_EMPTY_PAIRS_RE = re.compile(
    r"\(\s*\)|\[\s*\]|\{\s*\}|«\s*»"
    r"|(?<![^\s(\[{«])\"\s*\"(?!\w)"
    r"|(?<![^\s(\[{«])'\s*'(?!\w)"
)
_BRACKET_GROUP_RE = re.compile(r"\(([^()]*)\)|\[([^\[\]]*)\]|\{([^{}]*)\}")

_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([,.;:!?])")
_SPACE_AFTER_OPEN_RE = re.compile(r"([(\[{«])\s+")
_SPACE_BEFORE_CLOSE_RE = re.compile(r"\s+([)\]}»])")

# ; , · • and hyphen/dash variants
_LEADING_SEPARATORS_RE = re.compile(r"^(?:[;,\u00b7\u2022\-\u2010-\u2015\u2212]\s*)+")

ENCLOSING_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("«", "»"),
    ('"', '"'),
    ("'", "'"),
    ("(", ")"),
    ("[", "]"),
    ("{", "}"),
)


def collapse_whitespace(text: str) -> str:
    """Turn non-breaking spaces into spaces and squeeze whitespace runs."""
    return _SPACES_RE.sub(" ", _NBSP_RE.sub(" ", text))


def _drop_punctuation_groups(text: str) -> str:
    def _replace(match: re.Match) -> str:
        interior = next(g for g in match.groups() if g is not None)
        if any(ch.isalnum() for ch in interior):
            return match.group(0)
        return ""

    # Вкладені групи на кшталт "([ - ])" зникають за кілька проходів
    while True:
        updated = _BRACKET_GROUP_RE.sub(_replace, text)
        if updated == text:
            return updated
        text = updated


def _wraps_whole(text: str, opener: str, closer: str) -> bool:
    if len(text) < 2 or text[0] != opener or text[-1] != closer:
        return False
    interior = text[1:-1]
    if opener == closer:
        return opener not in interior
    depth = 0
    for ch in interior:
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth < 0:
                # дужка з початку закрилась раніше кінця рядка
                return False
    return depth == 0


def unwrap_enclosing(text: str) -> str:
    """
    Strip bracket/quote pairs that enclose the entire string.

    '"(Jane)"' -> 'Jane'. A pair with nothing inside yields ''.
    """
    while True:
        for opener, closer in ENCLOSING_PAIRS:
            if _wraps_whole(text, opener, closer):
                text = text[1:-1].strip()
                if not text:
                    return ""
                break
        else:
            return text


def clean_display(text: str) -> str:
    """Return the minimal clean form of a rendered name."""
    text = collapse_whitespace(text)
    text = _EMPTY_PAIRS_RE.sub("", text)
    text = _drop_punctuation_groups(text)

    text = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    text = _SPACE_AFTER_OPEN_RE.sub(r"\1", text)
    text = _SPACE_BEFORE_CLOSE_RE.sub(r"\1", text)

    text = collapse_whitespace(text).strip()
    if not text:
        return ""

    text = _LEADING_SEPARATORS_RE.sub("", text)
    text = unwrap_enclosing(text)
    return collapse_whitespace(text).strip()
