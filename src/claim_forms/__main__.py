#!/usr/bin/env python3
"""
Command line entry point: ``python -m claim_forms``.

Commands:
    render  Fill a template from a JSON data file
    fields  List the fields of a template PDF
    serve   Run the HTTP API
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from .config import Config
from .exceptions import ClaimFormsError
from .logging_config import setup_logging
from .main import render_form_data
from .renderers.template_loader import list_template_fields
from .schemas.base import FormType

logger = logging.getLogger(__name__)

OUTPUT_DIR = Path("generated")


def _render(args: argparse.Namespace) -> int:
    data = json.loads(Path(args.data).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        print(f"❌ {args.data} must contain a JSON object", file=sys.stderr)
        return 2

    pdf_bytes = render_form_data(
        args.form_id,
        data,
        signature=data.get("signature"),
        forms_dir=Path(args.forms_dir) if args.forms_dir else None,
    )

    output = Path(args.output) if args.output else OUTPUT_DIR / f"{args.form_id}_{int(time.time())}.pdf"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(pdf_bytes)
    print(f"✅ PDF written to {output} ({len(pdf_bytes)} bytes)")
    return 0


def _fields(args: argparse.Namespace) -> int:
    fields = list_template_fields(Path(args.template))
    if not fields:
        print(f"{args.template} has no form fields")
        return 0
    width = max(len(name) for name in fields)
    for name, kind in sorted(fields.items()):
        print(f"{name.ljust(width)}  {kind}")
    print(f"\n{len(fields)} fields")
    return 0


def _serve(args: argparse.Namespace) -> int:
    Config.validate()

    import uvicorn

    from .api import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port, log_level=args.log_level.lower())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="claim-forms",
        description="Fill insurer certificates and job forms as flattened PDFs",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from config)")
    commands = parser.add_subparsers(dest="command", required=True)

    render = commands.add_parser("render", help="Fill a template from a JSON data file")
    render.add_argument(
        "--form-id",
        required=True,
        choices=[form_type.value for form_type in FormType],
        help="Form to render",
    )
    render.add_argument("--data", required=True, help="JSON file with the submitted field values")
    render.add_argument("--output", "-o", help="Output PDF path (default: generated/<form>_<ts>.pdf)")
    render.add_argument("--forms-dir", help="Template directory (default from config)")
    render.set_defaults(handler=_render)

    fields = commands.add_parser("fields", help="List the fields of a template PDF")
    fields.add_argument("template", help="Template PDF path")
    fields.set_defaults(handler=_fields)

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8080)
    serve.set_defaults(handler=_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    args.log_level = logging.getLevelName(logging.getLogger("claim_forms").level)

    try:
        return args.handler(args)
    except ClaimFormsError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
