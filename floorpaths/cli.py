"""Command-line interface for floorpaths."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import jsonschema
import yaml

from floorpaths.algorithms.prune import prune, verify_edges
from floorpaths.errors import InvalidInputError, NoPathError
from floorpaths.io import parse_location
from floorpaths.logging import get_logger, set_global_log_level
from floorpaths.model.path import Path as EdgePath
from floorpaths.observer import LoggingObserver
from floorpaths.scenario import Scenario
from floorpaths.solver import SearchResult
from floorpaths.types.base import SearchStrategy

logger = get_logger(__name__)

#: Exit code when no path connects start and end.
EXIT_NO_PATH = 1
#: Exit code for invalid input: missing file, duplicate ids, malformed edges, bad scenario.
EXIT_INVALID_INPUT = 2


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 4,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + [[str(item) for item in row] for row in rows]
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in all_data[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_weight(value: Any) -> str:
    """Return a weight with up to three decimals, trailing zeros trimmed.

    Examples:
        2 -> "2"; 0.5 -> "0.5"; 1.23456 -> "1.235".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_duration(seconds: float) -> str:
    """Return a concise duration string ("12.3 ms" or "1.23 s")."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    if n == 1:
        return singular
    return plural or (singular + "s")


def _path_rows(paths: List[EdgePath]) -> List[List[Any]]:
    return [
        [
            idx,
            _format_weight(path.weight),
            " -> ".join(str(edge.id) for edge in path.edges),
            " -> ".join(
                [str(path.first_edge.entry)] + [str(edge.exit) for edge in path.edges]
            ),
        ]
        for idx, path in enumerate(paths, start=1)
    ]


def format_report(scenario: Scenario, result: SearchResult) -> str:
    """Render a human-readable report of a search result."""
    lines: List[str] = []
    lines.append(f"Scenario: {scenario.name}")
    lines.append(
        f"Start: {result.start}   End: {result.end}   "
        f"Strategy: {result.strategy.name.lower()}"
    )

    lines.append(f"\nEdges ({len(scenario.edges)}):")
    lines.append(
        _format_table(
            ["ID", "Entry", "Exit", "Weight"],
            [
                [e.id, e.entry, e.exit, _format_weight(e.weight)]
                for e in scenario.edges
            ],
        )
    )

    if result.pruned:
        lines.append(f"\nPruned {len(result.pruned)} {_plural(len(result.pruned), 'edge')}:")
        lines.append(
            _format_table(
                ["ID", "Entry", "Exit", "Reason"],
                [[e.id, e.entry, e.exit, reason.value] for e, reason in result.pruned],
            )
        )

    headers = ["#", "Weight", "Edges", "Locations"]
    lines.append(
        f"\nPaths reaching {result.end} ({len(result.reached)}, "
        f"{result.generations} {_plural(result.generations, 'generation')}):"
    )
    lines.append(_format_table(headers, _path_rows(result.reached)))

    lines.append(
        f"\nMinimum-weight {_plural(len(result.paths), 'path')} from {result.start} "
        f"to {result.end} (weight {_format_weight(result.weight)}):"
    )
    lines.append(_format_table(headers, _path_rows(result.paths)))
    return "\n".join(lines)


def _load_scenario(
    path: Path, start: Optional[str], end: Optional[str]
) -> Scenario:
    scenario = Scenario.from_file(path)
    if start is not None:
        scenario.start = parse_location(start)
    if end is not None:
        scenario.end = parse_location(end)
    return scenario


def _fail(message: str, code: int) -> None:
    print(f"ERROR: {message}")
    sys.exit(code)


def _run_scenario(
    path: Path,
    strategy: Optional[str],
    start: Optional[str],
    end: Optional[str],
    as_json: bool,
    output: Optional[Path],
    narrate: bool,
) -> None:
    """Solve a scenario file and print the report.

    Exits with ``EXIT_NO_PATH`` or ``EXIT_INVALID_INPUT`` on failure.
    """
    _start_time = perf_counter()
    logger.info(f"Loading scenario from: {path}")

    try:
        scenario = _load_scenario(path, start, end)
        override = SearchStrategy.from_string(strategy) if strategy else None
        observer = LoggingObserver() if narrate else None
        result = scenario.run(observer=observer, strategy=override)
    except FileNotFoundError:
        _fail(f"Scenario file not found: {path}", EXIT_INVALID_INPUT)
        return
    except NoPathError as e:
        _fail(f"No path found: {e}", EXIT_NO_PATH)
        return
    except InvalidInputError as e:
        _fail(f"Invalid input: {e}", EXIT_INVALID_INPUT)
        return
    except (ValueError, jsonschema.ValidationError, yaml.YAMLError) as e:
        _fail(f"Invalid scenario: {type(e).__name__}: {e}", EXIT_INVALID_INPUT)
        return

    payload = result.to_dict()
    payload["scenario"] = scenario.name
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
        logger.info(f"Results written to: {output}")

    if as_json:
        print(json.dumps(payload, indent=2, default=str))
    else:
        print(format_report(scenario, result))

    logger.info(
        f"Scenario run completed successfully in "
        f"{_format_duration(perf_counter() - _start_time)}"
    )


def _inspect_scenario(path: Path, start: Optional[str], end: Optional[str]) -> None:
    """Validate a scenario file and print its edge and pruning summary."""
    try:
        scenario = _load_scenario(path, start, end)
        verify_edges(scenario.edges)
    except FileNotFoundError:
        _fail(f"Scenario file not found: {path}", EXIT_INVALID_INPUT)
        return
    except InvalidInputError as e:
        _fail(f"Invalid input: {e}", EXIT_INVALID_INPUT)
        return
    except (ValueError, jsonschema.ValidationError, yaml.YAMLError) as e:
        _fail(f"Invalid scenario: {type(e).__name__}: {e}", EXIT_INVALID_INPUT)
        return

    report = prune(scenario.edges, scenario.start, scenario.end)
    locations = {e.entry for e in scenario.edges} | {e.exit for e in scenario.edges}
    seeds = [e for e in report.edges if e.entry == scenario.start]

    print(f"Scenario: {scenario.name}")
    print(f"Start: {scenario.start}   End: {scenario.end}")
    print(
        f"Edges: {len(scenario.edges)}   Locations: {len(locations)}   "
        f"Pruning passes: {report.passes}"
    )
    if report.removed:
        print(f"\nPruned {len(report.removed)} {_plural(len(report.removed), 'edge')}:")
        print(
            _format_table(
                ["ID", "Entry", "Exit", "Reason"],
                [[e.id, e.entry, e.exit, reason.value] for e, reason in report.removed],
            )
        )
    print(f"\nRemaining edges ({len(report.edges)}):")
    print(
        _format_table(
            ["ID", "Entry", "Exit", "Weight"],
            [[e.id, e.entry, e.exit, _format_weight(e.weight)] for e in report.edges],
        )
    )
    if not report.edges or not seeds:
        print("\nNo viable path skeleton remains after pruning.")
    else:
        print(f"\nReady to search from {len(seeds)} starting {_plural(len(seeds), 'edge')}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``floorpaths`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="floorpaths",
        description="Find all minimum-weight paths between two locations of an edge list.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Search a scenario")
    run_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")
    run_parser.add_argument(
        "--strategy",
        "-s",
        choices=[s.name.lower() for s in SearchStrategy],
        default=None,
        help="Override the scenario's search strategy",
    )
    run_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Also write the JSON result to this file",
    )
    run_parser.add_argument(
        "--narrate",
        action="store_true",
        help="Log pruning and search progress",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a scenario and show pruning"
    )
    inspect_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")

    for p in (run_parser, inspect_parser):
        p.add_argument("--start", default=None, help="Override the start location")
        p.add_argument("--end", default=None, help="Override the end location")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet or (args.command == "run" and args.json):
        # stdout carries only the JSON document
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_scenario(
            path=args.scenario,
            strategy=args.strategy,
            start=args.start,
            end=args.end,
            as_json=args.json,
            output=args.output,
            narrate=args.narrate,
        )
    elif args.command == "inspect":
        _inspect_scenario(args.scenario, args.start, args.end)


if __name__ == "__main__":
    main()
