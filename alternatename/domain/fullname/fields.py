"""Field resolution: template tokens to values of a person record."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Tuple

from alternatename.shared.registry import Registry

PersonRecord = Mapping[str, Any]
DerivedField = Callable[[PersonRecord], str]

# Single-letter shorthand accepted in templates, e.g. "{A} ({B} {C})".
ALIASES: Mapping[str, str] = MappingProxyType({
    "A": "alternatename",
    "B": "firstname",
    "C": "lastname",
    "D": "middlename",
    "E": "alternatenameprefix",
})

# Порядок важливий: за ним шукаємо перше непорожнє поле в кінці fallback-ланцюжка
NAME_FIELDS: Tuple[str, ...] = (
    "firstnamephonetic",
    "lastnamephonetic",
    "middlename",
    "alternatename",
    "firstname",
    "lastname",
)

EXTRA_FIELDS: FrozenSet[str] = frozenset({
    "alternatename",
    "alternatenameprefix",
    "fullname",
    "firstnamephonetic",
    "lastnamephonetic",
    "middlename",
    "prefix",
    "suffix",
    "title",
    "username",
    "email",
    "idnumber",
})

BASE_FIELDS: FrozenSet[str] = frozenset(NAME_FIELDS) | EXTRA_FIELDS


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def record_value(record: PersonRecord, field: str) -> str:
    """Trimmed raw value of ``field`` with a case-insensitive key lookup."""
    if field in record:
        return _text(record[field])
    wanted = field.lower()
    for key, value in record.items():
        if isinstance(key, str) and key.lower() == wanted:
            return _text(value)
    return ""


def _alternatename_prefix(record: PersonRecord) -> str:
    # Префікс належить нікнейму: без alternatename він зникає
    if not record_value(record, "alternatename"):
        return ""
    return record_value(record, "prefix")


derived_fields: Registry[DerivedField] = Registry(name="DerivedFieldRegistry")
derived_fields.register("alternatenameprefix", _alternatename_prefix)


def supported_fields(record: Optional[PersonRecord] = None) -> FrozenSet[str]:
    """Fixed field set plus every key present on ``record``."""
    if not record:
        return BASE_FIELDS
    extra = {key.lower() for key in record if isinstance(key, str) and key}
    return BASE_FIELDS | extra


def resolve_field_name(token: str, record: Optional[PersonRecord] = None) -> Optional[str]:
    """
    Map a template token to its canonical field name.

    Aliases are checked first ("a" and "A" both mean alternatename), then
    the supported-field set. Returns None for tokens that are plain text.
    """
    name = token.strip()
    if not name:
        return None
    alias = ALIASES.get(name.upper())
    if alias:
        return alias
    lowered = name.lower()
    if lowered in supported_fields(record):
        return lowered
    return None


def field_value(token: str, record: PersonRecord) -> str:
    """
    Trimmed value denoted by ``token`` or an empty string.

    Unknown tokens resolve to an empty string as well, so a braced
    placeholder that names no field renders as empty.
    """
    name = resolve_field_name(token, record)
    if name is None:
        return ""
    derived = derived_fields.get(name)
    if derived is not None:
        return derived(record)
    return record_value(record, name)


def snapshot(record: PersonRecord, overrides: Optional[Mapping[str, Any]] = None) -> Mapping[str, Any]:
    """
    Read-only copy of ``record`` with ``overrides`` applied.

    The caller's mapping is never touched; empty override values are skipped.
    """
    data: Dict[str, Any] = dict(record)
    for key, value in (overrides or {}).items():
        if _text(value):
            data[key] = value
    return MappingProxyType(data)
