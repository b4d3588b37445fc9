"""Developer CLI for trying fullname templates against a person record."""
import argparse
import json
import sys
from typing import Dict, List, Optional

from alternatename.domain.fullname.language import get_language_pack, placeholders_hint
from alternatename.domain.fullname.orchestrator import (
    FullnameConfig,
    preview_template,
    resolve_fullname,
)
from alternatename.shared.errors import ConfigurationError
from alternatename.shared.logging import setup_logging


def parse_fields(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Turn repeated ``name=value`` arguments into a record."""
    record: Dict[str, str] = {}
    for pair in pairs or []:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Expected name=value, got {pair!r}")
        record[name.strip()] = value
    return record


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Developer CLI for fullname display templates.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: render
    render_parser = subparsers.add_parser("render", help="Render the display name of a record")
    render_parser.add_argument(
        "--field", action="append", metavar="NAME=VALUE",
        help="Record field, repeatable, e.g. --field firstname=Jane",
    )
    render_parser.add_argument("--override", action="store_true", help="Use the alternate template")
    render_parser.add_argument("--template", help="Default template (';' separates candidates)")
    render_parser.add_argument("--alternate-template", help="Alternate template")
    render_parser.add_argument("--session-format", help="Per-session format override")
    render_parser.add_argument("--language", help="Language pack for the 'language' format")
    render_parser.add_argument("--json", action="store_true", help="Print result details as JSON")

    # Command: preview
    preview_parser = subparsers.add_parser("preview", help="Show how one template is processed")
    preview_parser.add_argument("--template", required=True, help="Template to preview")
    preview_parser.add_argument("--field", action="append", metavar="NAME=VALUE", help="Record field")

    # Command: describe
    describe_parser = subparsers.add_parser("describe", help="Describe the fullname settings")
    describe_parser.add_argument("--lang", default="en", help="Language code, e.g. 'uk'")

    return parser


def _render(args: argparse.Namespace) -> int:
    record = parse_fields(args.field)
    overrides = {
        "defaultTemplate": args.template,
        "alternateTemplate": args.alternate_template,
        "sessionFormatOverride": args.session_format,
        "language": args.language,
    }
    config = FullnameConfig.from_mapping(
        {key: value for key, value in overrides.items() if value is not None},
        base=FullnameConfig.from_settings(),
    )
    result = resolve_fullname(record, override=args.override, config=config)
    if args.json:
        print(json.dumps({
            "fullname": result.text,
            "source": result.source.value,
            "template": result.template,
            "stage": result.stage.value,
        }, ensure_ascii=False))
    else:
        print(result.text)
    return 0


def _preview(args: argparse.Namespace) -> int:
    preview = preview_template(args.template, parse_fields(args.field))
    print(json.dumps(preview, ensure_ascii=False, indent=2))
    return 0


def _describe(args: argparse.Namespace) -> int:
    pack = get_language_pack(args.lang)
    hint = placeholders_hint()
    print(pack.get_string("settingspagetitle"))
    print(f"- {pack.get_string('setting_fullname_label')}: "
          f"{pack.get_string('setting_fullname_desc', placeholders=hint)}")
    print(f"- {pack.get_string('setting_alternative_label')}: "
          f"{pack.get_string('setting_alternative_desc', placeholders=hint)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the fullname CLI."""
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    handlers = {"render": _render, "preview": _preview, "describe": _describe}
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    try:
        return handler(args)
    except (ConfigurationError, ValueError) as e:
        print(f"[ERROR] Error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
