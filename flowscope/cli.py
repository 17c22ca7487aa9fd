"""
flowscope CLI: command-line interface for flow metrics analysis.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from flowscope.analysis import analyze_flow
from flowscope.report import format_report_text, report_to_dict


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code: 0 on success, 1 on errors
    """
    parser = argparse.ArgumentParser(
        description="flowscope: size, structural and complexity metrics for flow exports"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a flow export")
    analyze_parser.add_argument("path", help="Path to the flow export JSON file")
    analyze_parser.add_argument(
        "--config",
        help="Analyzer config YAML file path (default: built-in decision types, all metrics)",
    )
    analyze_parser.add_argument(
        "--output",
        help="Output file path (default: print to stdout)",
    )
    analyze_parser.add_argument(
        "--format",
        choices=("json", "text"),
        default="json",
        help="Output format (default: json)",
    )
    analyze_parser.add_argument(
        "-p", "--pretty", action="store_true", help="Indent JSON output"
    )
    analyze_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug details to stderr"
    )

    args = parser.parse_args(argv)

    if args.command == "analyze":
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        return _run_analyze(args.path, args.config, args.output, args.format, args.pretty)
    else:
        parser.print_help()
        return 1


def _run_analyze(
    path: str,
    config: str | None,
    output: str | None,
    output_format: str,
    pretty: bool,
) -> int:
    """
    Run the analyze command.

    Returns:
        Exit code: 0 on success, 1 on errors
    """
    try:
        path_obj = Path(path)
        if not path_obj.is_file():
            print(f"Error: File does not exist: {path}", file=sys.stderr)
            return 1

        report = analyze_flow(path_obj.read_text(encoding="utf-8"), config)

        if output_format == "text":
            rendered = format_report_text(report)
        else:
            rendered = json.dumps(
                report_to_dict(report), indent=2 if pretty else None, sort_keys=True
            )

        if output:
            Path(output).write_text(rendered, encoding="utf-8")
        else:
            print(rendered)

        print(
            f"Analysis complete: {report.summary.total_components} components found",
            file=sys.stderr,
        )
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
