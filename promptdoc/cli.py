"""CLI entrypoints for promptdoc commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import ConfigError, PromptDocConfig, load_config
from .errors import PromptDocError
from .logging import configure_logging, get_logger
from .schema import (
    DOC_FORMATS,
    SCHEMA_FORMATS,
    DocGenerator,
    TypeRegistry,
    build_default_registry,
    count_fields,
    resolve_formatter,
)
from .schema.registry import qualified_name
from .template import BUNDLED_PROMPTS_DIR, DEFAULT_TEMPLATE_DIR, TemplateEngine

logger = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptdoc",
        description="Document prompt data types and render prompt templates.",
    )
    parser.add_argument("--version", action="version", version=f"promptdoc {__version__}")
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .promptdoc.yml or the directory holding it (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    schema_parser = subparsers.add_parser(
        "schema",
        help="Export the field schema of a registered type as Markdown.",
    )
    _add_verbose_option(schema_parser, suppress_default=True)
    schema_parser.add_argument("type_name", help="Registered type name, e.g. SystemPromptData.")
    schema_parser.add_argument(
        "-o",
        "--output",
        default="-",
        help="Output file path ('-' writes to stdout).",
    )
    schema_parser.add_argument(
        "-f",
        "--format",
        default=None,
        help="Output format (markdown).",
    )

    doc_parser = subparsers.add_parser(
        "doc",
        help="Show the fields of a registered type in the terminal.",
    )
    _add_verbose_option(doc_parser, suppress_default=True)
    doc_parser.add_argument("type_name", help="Registered type name, e.g. UserPromptData.")
    doc_parser.add_argument(
        "-f",
        "--format",
        default=None,
        help="Output format (table, simple).",
    )

    list_parser = subparsers.add_parser("list", help="List the registered types.")
    _add_verbose_option(list_parser, suppress_default=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Render a template against JSON data.",
    )
    _add_verbose_option(render_parser, suppress_default=True)
    render_parser.add_argument("template", help="Template path relative to the template directory.")
    render_parser.add_argument(
        "--data",
        default=None,
        help="JSON file holding the template data ('-' reads stdin).",
    )
    source_group = render_parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--template-dir",
        default=None,
        help=f"Template directory (defaults to {DEFAULT_TEMPLATE_DIR}).",
    )
    source_group.add_argument(
        "--bundled",
        action="store_true",
        help="Render one of the prompt templates shipped with promptdoc.",
    )
    render_parser.add_argument(
        "--dev",
        action="store_true",
        help="Development mode: skip the compiled-template cache.",
    )

    return parser


def main(argv: list[str] | None = None, *, registry: TypeRegistry | None = None) -> None:
    """CLI entrypoint for promptdoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    try:
        configure_logging(verbose=bool(args.verbose), log_file=log_file)
    except OSError as exc:
        parser.exit(1, f"cannot open log file: {exc}\n")

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if registry is None:
        registry = build_default_registry()

    try:
        if args.command == "schema":
            _run_schema(args, config, registry)
        elif args.command == "doc":
            _run_doc(args, config, registry)
        elif args.command == "list":
            _run_list(registry)
        elif args.command == "render":
            _run_render(args, config)
    except PromptDocError as exc:
        parser.exit(1, f"promptdoc {args.command} failed: {exc}\n")
    except json.JSONDecodeError as exc:
        parser.exit(1, f"invalid JSON data: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"promptdoc {args.command} failed: {exc}\n")


def _run_schema(args: argparse.Namespace, config: PromptDocConfig, registry: TypeRegistry) -> None:
    fmt = args.format or config.schema_format or "markdown"
    formatter = resolve_formatter(fmt, SCHEMA_FORMATS)
    manifest = DocGenerator().generate(registry.get(args.type_name))
    content = formatter(manifest)

    if args.output == "-":
        sys.stdout.write(content)
        return

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    logger.info("Schema written to: %s", output)


def _run_doc(args: argparse.Namespace, config: PromptDocConfig, registry: TypeRegistry) -> None:
    fmt = args.format or config.doc_format or "table"
    formatter = resolve_formatter(fmt, DOC_FORMATS)
    manifest = DocGenerator().generate(registry.get(args.type_name))
    sys.stdout.write(formatter(manifest))


def _run_list(registry: TypeRegistry) -> None:
    if not len(registry):
        print("No types registered.")
        return

    print("Available types:")
    print()
    for name, record_type in registry.items():
        print(f"  {name}")
        print(f"    Type: {qualified_name(record_type)}")
        print(f"    Fields: {count_fields(record_type)}")
        print()
    print("Usage:")
    print("  promptdoc schema <type-name> -o output.md")
    print("  promptdoc doc <type-name>")


def _run_render(args: argparse.Namespace, config: PromptDocConfig) -> None:
    if args.bundled:
        template_dir = BUNDLED_PROMPTS_DIR
    elif args.template_dir:
        template_dir = Path(args.template_dir)
    else:
        template_dir = config.templates_dir or DEFAULT_TEMPLATE_DIR

    engine = TemplateEngine(
        template_dir,
        development_mode=bool(args.dev) or config.development_mode,
    )
    template = engine.load(args.template)
    sys.stdout.write(engine.render(template, _read_data(args.data)))


def _read_data(data_arg: str | None) -> Any:
    if data_arg is None:
        return {}
    if data_arg == "-":
        return json.load(sys.stdin)
    with Path(data_arg).open(encoding="utf-8") as handle:
        return json.load(handle)


if __name__ == "__main__":
    main()
