"""Common enumerations used across the application."""
from enum import Enum


class TemplateSource(str, Enum):
    """Where the format string for a fullname came from."""
    SESSION = "session"      # per-session display override
    DEFAULT = "default"      # default fullname template
    ALTERNATE = "alternate"  # alternate/override template
    LANGUAGE = "language"    # language pack, template engine bypassed


class FallbackStage(str, Enum):
    """Which step of the fallback chain produced the final string."""

    TEMPLATE = "template"              # a template candidate rendered non-empty
    LANGUAGE = "language"              # delegated to the language pack
    SHORT_CIRCUIT = "short_circuit"    # every referenced field was empty
    FIELD_VALUES = "field_values"      # referenced field values joined
    FIRST_LAST = "first_last"          # "firstname lastname"
    NAME_FIELD = "name_field"          # first non-empty name field
    EMPTY = "empty"
