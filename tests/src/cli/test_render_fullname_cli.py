"""Tests for the developer CLI."""
import json

import pytest

from tools.render_fullname import main, parse_fields


def test_parse_fields():
    assert parse_fields(["firstname=Jane", "note=a=b"]) == {"firstname": "Jane", "note": "a=b"}
    assert parse_fields(None) == {}
    with pytest.raises(ValueError):
        parse_fields(["oops"])


def test_render_command(capsys, clean_env):  # noqa: ARG001
    code = main([
        "render", "--field", "firstname=Jane", "--field", "lastname=Doe",
        "--template", "{lastname} {firstname}",
    ])
    assert code == 0
    assert capsys.readouterr().out.strip() == "Doe Jane"


def test_render_command_json_override(capsys, clean_env):  # noqa: ARG001
    code = main([
        "render", "--field", "firstname=Jane", "--field", "lastname=Doe",
        "--field", "alternatename=Janey", "--override", "--json",
    ])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["fullname"] == "Janey (Jane Doe)"
    assert data["source"] == "alternate"


def test_preview_command(capsys):
    code = main(["preview", "--template", "A (firstname lastname)", "--field", "firstname=Jane"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["normalized"] == "{alternatename} ({firstname} {lastname})"
    assert data["display"] == "Jane"


def test_describe_command(capsys):
    assert main(["describe", "--lang", "uk"]) == 0
    assert "Формат відображення імені" in capsys.readouterr().out


def test_bad_field_reports_error(capsys):
    assert main(["render", "--field", "oops"]) == 2
    assert "[ERROR]" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
