"""Run a handful of small edge sets with narration enabled.

Usage:
    python examples/narrate.py
"""

from floorpaths import (
    Edge,
    LoggingObserver,
    NoPathError,
    SearchStrategy,
    find_min_weight_paths,
)

SAMPLES = {
    "fork": ([(1, 0, 5), (2, 5, 10), (3, 5, 7), (4, 7, 10)], 0, 10),
    "parallel": ([(1, 0, 3), (2, 5, 10), (3, 3, 8), (4, 8, 12), (5, 8, 12)], 0, 12),
    "pass-through": ([(1, 0, 3), (2, 7, 10), (3, 3, 7), (4, 3, 10), (5, 10, 15)], 0, 15),
    "disconnected": ([(1, 0, 5), (2, 6, 10)], 0, 10),
}


def main() -> None:
    observer = LoggingObserver()
    for name, (triples, start, end) in SAMPLES.items():
        edges = [Edge(*t) for t in triples]
        for strategy in SearchStrategy:
            print(f"\n=== {name} ({strategy.name.lower()}) ===")
            try:
                result = find_min_weight_paths(
                    edges, start, end, strategy=strategy, observer=observer
                )
            except NoPathError as exc:
                print(f"no path: {exc}")
                continue
            for path in result.paths:
                print(path)


if __name__ == "__main__":
    main()
