"""Template normalization: bring every placeholder to the ``{field}`` form."""
from __future__ import annotations

import re
from typing import List, Optional

from alternatename.domain.fullname.fields import ALIASES, PersonRecord, resolve_field_name

# Braced tokens come first in the alternation, so a word inside a
# recognised brace pair is never visited again as a bare word.
_TOKEN_RE = re.compile(
    r"\{\s*(?P<braced>[A-Za-z0-9_]+)\s*\}"
    r"|\b(?P<bare>[A-Za-z][A-Za-z0-9_]*)\b"
)

PLACEHOLDER_RE = re.compile(r"\{([A-Za-z0-9_]+)\}")


def normalize_template(template: str, record: Optional[PersonRecord] = None) -> str:
    """
    Rewrite aliases and bare field names in ``template`` as ``{field}``.

    'A (firstname lastname)' becomes '{alternatename} ({firstname} {lastname})'.
    Tokens that name no supported field keep their original text. Bare
    aliases must be uppercase, so 'a.k.a.' stays literal; braced aliases
    like '{a}' match in any case.
    """

    def _replace(match: re.Match) -> str:
        bare = match.group("bare")
        if bare is not None and bare.upper() in ALIASES and bare != bare.upper():
            return bare
        token = match.group("braced") or bare
        field = resolve_field_name(token, record)
        if field is None:
            return match.group(0)
        return "{" + field + "}"

    return _TOKEN_RE.sub(_replace, template)


def placeholder_fields(template: str) -> List[str]:
    """Placeholder names in ``template`` in order of first appearance."""
    seen: List[str] = []
    for name in PLACEHOLDER_RE.findall(template):
        if name not in seen:
            seen.append(name)
    return seen


def split_templates(format_string: str) -> List[str]:
    """
    Split a packed format on ';' into trimmed, non-empty candidates.

    When nothing survives the whole string is the only candidate.
    """
    candidates = [part.strip() for part in format_string.split(";")]
    candidates = [part for part in candidates if part]
    if not candidates:
        return [format_string]
    return candidates
