"""Tests for template rendering."""
import pytest

from alternatename.domain.fullname.normalizer import normalize_template
from alternatename.domain.fullname.renderer import render_raw, render_template


def test_render_simple(jane):
    assert render_template("{firstname} {lastname}", jane) == "Jane Doe"


def test_empty_first_placeholder_keeps_bracket_group(jane_without_nickname):
    template = "{alternatename} ({firstname} {lastname})"
    assert render_template(template, jane_without_nickname) == "Jane Doe"


def test_render_raw_keeps_group_for_cleanup(jane_without_nickname):
    template = "{alternatename} ({firstname} {lastname})"
    assert render_raw(template, jane_without_nickname) == " (Jane Doe)"


def test_filled_alternate_template(jane):
    assert render_template("{alternatename} ({firstname} {lastname})", jane) == "Janey (Jane Doe)"


@pytest.mark.parametrize("template,expected", [
    ("{firstname} ({alternatename}) {lastname}", "Jane Doe"),
    ("{firstname} «{alternatename}» {lastname}", "Jane Doe"),
    ('"{alternatename}" {firstname}', "Jane"),
    ("{lastname} [{alternatename}]", "Doe"),
    ("{firstname} {lastname}, {alternatename}", "Jane Doe"),
    ("{alternatename} - {firstname}", "Jane"),
    ("{firstname}, {middlename}, {lastname}", "Jane, Doe"),
    ("{firstname} ({alternatename}, {middlename}) {lastname}", "Jane Doe"),
    ("{alternatenameprefix} {alternatename} ({firstname} {lastname})", "Jane Doe"),
])
def test_empty_placeholder_decoration_removed(template, expected):
    record = {"firstname": "Jane", "lastname": "Doe", "alternatename": "", "prefix": "Dr."}
    assert render_template(template, record) == expected


def test_punctuation_inside_values_is_kept():
    record = {"prefix": "Dr.", "firstname": "Jane", "alternatename": ""}
    assert render_template("{prefix} {alternatename} {firstname}", record) == "Dr. Jane"


def test_alternatename_prefix_with_nickname(jane):
    template = "{alternatenameprefix} {alternatename} ({firstname} {lastname})"
    assert render_template(template, jane) == "Dr. Janey (Jane Doe)"


def test_unknown_braced_placeholder_renders_empty(jane):
    assert render_template("{nonexistentfield}", jane) == ""


def test_all_placeholders_empty():
    assert render_template("{alternatename} ({firstname} {lastname})", {}) == ""


def test_literal_template_returned_trimmed(jane):
    assert render_template("  Guest user  ", jane) == "Guest user"


def test_two_quoted_placeholders(jane):
    template = normalize_template('"{alternatename}" "{firstname}"', jane)
    assert render_template(template, jane) == '"Janey" "Jane"'


def test_two_quoted_placeholders_first_empty(jane_without_nickname):
    template = normalize_template('"{alternatename}" "{firstname}"', jane_without_nickname)
    assert render_template(template, jane_without_nickname) == "Jane"
