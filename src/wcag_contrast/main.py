"""CLI entry point for the WCAG contrast tools."""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Any

from .config import settings
from .tools import ToolRegistry, ToolResult, default_registry
from .conformance import CONTENT_TYPES, LEVELS, PRESERVE_OPTIONS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    """Send log records to stderr so stdout only carries JSON output."""
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_wcag_cli", False):
            root.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler._wcag_cli = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level.upper())


def _emit(result: ToolResult) -> int:
    print(json.dumps(result.payload, indent=2, ensure_ascii=False))
    return 1 if result.is_error else 0


def cmd_contrast(args: argparse.Namespace, registry: ToolRegistry) -> int:
    return _emit(
        registry.call(
            "calculate_contrast_ratio",
            {"foreground": args.foreground, "background": args.background},
        )
    )


def cmd_analyze(args: argparse.Namespace, registry: ToolRegistry) -> int:
    return _emit(
        registry.call(
            "analyze_color_pair",
            {
                "foreground": args.foreground,
                "background": args.background,
                "contentType": args.content_type,
                "level": args.level,
            },
        )
    )


def cmd_suggest(args: argparse.Namespace, registry: ToolRegistry) -> int:
    return _emit(
        registry.call(
            "suggest_accessible_color",
            {
                "foreground": args.foreground,
                "background": args.background,
                "targetRatio": args.target,
                "preserve": args.preserve,
            },
        )
    )


def cmd_list_tools(args: argparse.Namespace, registry: ToolRegistry) -> int:
    print(json.dumps({"tools": registry.catalog()}, indent=2, ensure_ascii=False))
    return 0


def cmd_call(args: argparse.Namespace, registry: ToolRegistry) -> int:
    try:
        arguments: Any = json.loads(args.args)
    except json.JSONDecodeError as exc:
        return _emit(ToolResult({"error": f"Invalid JSON arguments: {exc}"}, is_error=True))
    return _emit(registry.call(args.tool, arguments))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="wcag-contrast")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.LOG_LEVEL if settings.LOG_LEVEL in LOG_LEVELS else "WARNING",
        help="Logging level (default: %(default)s)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    contrast = sub.add_parser("contrast", help="Contrast ratio between two colors")
    contrast.add_argument("foreground", help="Foreground color (#RGB, #RRGGBB, rgb(), rgba())")
    contrast.add_argument("background", help="Background color")
    contrast.set_defaults(func=cmd_contrast)

    analyze = sub.add_parser("analyze", help="WCAG conformance analysis of a color pair")
    analyze.add_argument("foreground", help="Foreground color")
    analyze.add_argument("background", help="Background color")
    analyze.add_argument(
        "--content-type", choices=CONTENT_TYPES, default=settings.DEFAULT_CONTENT_TYPE
    )
    analyze.add_argument("--level", choices=LEVELS, default=settings.DEFAULT_LEVEL)
    analyze.set_defaults(func=cmd_analyze)

    suggest = sub.add_parser("suggest", help="Suggest colors reaching a target ratio")
    suggest.add_argument("foreground", help="Foreground color")
    suggest.add_argument("background", help="Background color")
    suggest.add_argument("--target", type=float, required=True, help="Target contrast ratio")
    suggest.add_argument("--preserve", choices=PRESERVE_OPTIONS, default=settings.DEFAULT_PRESERVE)
    suggest.set_defaults(func=cmd_suggest)

    list_tools = sub.add_parser("list-tools", help="Print the tool catalog")
    list_tools.set_defaults(func=cmd_list_tools)

    call = sub.add_parser("call", help="Invoke a tool by name with JSON arguments")
    call.add_argument("tool", help="Tool name")
    call.add_argument("--args", default="{}", help="JSON object of tool arguments")
    call.set_defaults(func=cmd_call)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    return args.func(args, default_registry())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
