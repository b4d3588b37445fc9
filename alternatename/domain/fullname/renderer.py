"""Template rendering: placeholder substitution with local decoration cleanup."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from alternatename.domain.fullname.cleanup import clean_display
from alternatename.domain.fullname.fields import PersonRecord, field_value
from alternatename.domain.fullname.normalizer import PLACEHOLDER_RE

PAIRS = {"(": ")", "[": "]", "{": "}", "«": "»", '"': '"', "'": "'"}
BRACKETS = frozenset(PAIRS) | frozenset(PAIRS.values())


@dataclass
class _Field:
    name: str
    value: str


Part = Union[str, _Field]


def _is_decoration(ch: str) -> bool:
    return not ch.isalnum()


def _is_separator(ch: str) -> bool:
    return _is_decoration(ch) and not ch.isspace() and ch not in BRACKETS


def _has_content(part: Part) -> bool:
    if isinstance(part, _Field):
        return bool(part.value)
    return any(ch.isalnum() for ch in part)


def _split_trailing(text: str) -> Tuple[str, str]:
    i = len(text)
    while i > 0 and _is_decoration(text[i - 1]):
        i -= 1
    return text[:i], text[i:]


def _split_leading(text: str) -> Tuple[str, str]:
    i = 0
    while i < len(text) and _is_decoration(text[i]):
        i += 1
    return text[:i], text[i:]


def _drop_enclosing_pairs(left: str, right: str) -> Tuple[str, str]:
    """Remove bracket pairs that wrap only the empty placeholder."""
    lchars, rchars = list(left), list(right)
    while True:
        li = next((i for i in range(len(lchars) - 1, -1, -1) if not lchars[i].isspace()), None)
        ri = next((i for i, ch in enumerate(rchars) if not ch.isspace()), None)
        if li is None or ri is None:
            break
        if PAIRS.get(lchars[li]) != rchars[ri]:
            break
        del lchars[li]
        del rchars[ri]
    return "".join(lchars), "".join(rchars)


def _without_separators(text: str) -> str:
    return "".join(ch for ch in text if not _is_separator(ch))


def _joint(left: str, right: str, keep_right_separators: bool) -> str:
    left, right = _drop_enclosing_pairs(left, right)
    left = _without_separators(left)
    if not keep_right_separators:
        right = _without_separators(right)
    joint = left + right
    # Пробіли всередині "шва" зводимо до одного
    out: List[str] = []
    for ch in joint:
        if ch.isspace():
            if out and out[-1] == " ":
                continue
            out.append(" ")
        else:
            out.append(ch)
    return "".join(out)


def _parts(template: str, record: PersonRecord) -> List[Part]:
    parts: List[Part] = []
    pos = 0
    for match in PLACEHOLDER_RE.finditer(template):
        parts.append(template[pos:match.start()])
        parts.append(_Field(match.group(1), field_value(match.group(1), record)))
        pos = match.end()
    parts.append(template[pos:])
    return parts


def _remove_empty(parts: List[Part]) -> List[Part]:
    """
    Drop empty placeholders together with their own decoration.

    Only literal text next to the placeholder is touched; substituted values
    keep their punctuation. Bracket pairs that enclose nothing but the
    placeholder go away, other brackets stay. Separators survive only when
    both neighbours have content and both sides carried one, in which case
    the right-hand separator is kept.
    """
    i = 0
    while i < len(parts):
        part = parts[i]
        if not isinstance(part, _Field) or part.value:
            i += 1
            continue
        # parts alternate text/field, so neighbours of a field are text
        left_text = parts[i - 1]
        right_text = parts[i + 1]
        left_body, left_deco = _split_trailing(left_text)
        right_deco, right_body = _split_leading(right_text)

        has_before = any(ch.isalnum() for ch in left_body) or any(
            _has_content(p) for p in parts[:i - 1]
        )
        has_after = any(ch.isalnum() for ch in right_body) or any(
            _has_content(p) for p in parts[i + 2:]
        )
        both_separated = any(map(_is_separator, left_deco)) and any(map(_is_separator, right_deco))
        keep_right = has_before and has_after and both_separated

        merged = left_body + _joint(left_deco, right_deco, keep_right) + right_body
        parts[i - 1:i + 2] = [merged]
        i -= 1
    return parts


def render_raw(template: str, record: PersonRecord) -> str:
    """Substitute placeholders of a normalized template, without the global cleanup."""
    if not PLACEHOLDER_RE.search(template):
        return template.strip()
    parts = _remove_empty(_parts(template, record))
    return "".join(p.value if isinstance(p, _Field) else p for p in parts)


def render_template(template: str, record: PersonRecord) -> str:
    """
    Render one normalized template candidate against ``record``.

    A template without placeholders is literal text and is returned trimmed.
    """
    if not PLACEHOLDER_RE.search(template):
        return template.strip()
    return clean_display(render_raw(template, record))
