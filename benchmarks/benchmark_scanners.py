"""Benchmark mdscan scanners and entity codec by operation.

Identifies which operations are slowest on representative inputs.

Run with:
    uv run python benchmarks/benchmark_scanners.py
"""

import time
from collections.abc import Callable
from dataclasses import dataclass

from mdscan import Cursor, escape, extract_before, match_link, match_literal, unescape


@dataclass
class OperationTiming:
    """Timing data for one scanner operation."""

    name: str
    avg_time_us: float
    input_count: int


LINK_INPUTS = [
    "[Title](path)",
    "[Title](path 'quoted title')",
    "[Guide](<docs/getting started.md> \"Start here\")",
    "  [a\\]b](c\\ d)",
    "[unterminated](path",
]

LITERAL_INPUTS = ["[!include[Title](a.md)]", ":::image type=\"content\"", "nothing here"]

EXTRACT_INPUTS = ["abc\\}def} rest", "key=value} tail", "no terminator at all " * 4]

ENTITY_INPUTS = [
    "<a href=\"x\">'quoted' & more</a>",
    "&amp; &lt; &#65; &#x41; &colon; &unknown; &#xZZ;",
    "plain text without entities " * 4,
]


def _time(fn: Callable[[str], object], inputs: list[str], iterations: int) -> float:
    """Average µs per call of fn over inputs."""
    for text in inputs:
        fn(text)

    start = time.perf_counter()
    for _ in range(iterations):
        for text in inputs:
            fn(text)
    elapsed = time.perf_counter() - start
    return (elapsed / (iterations * len(inputs))) * 1_000_000


def main() -> None:
    """Run per-operation benchmarks."""
    import sys

    print("mdscan Operation Benchmark")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}\n")

    iterations = 10_000
    operations: list[tuple[str, Callable[[str], object], list[str]]] = [
        ("match_link", lambda s: match_link(Cursor(s)), LINK_INPUTS),
        ("match_literal", lambda s: match_literal(Cursor(s), "[!include", False), LITERAL_INPUTS),
        ("extract_before", lambda s: extract_before("}", Cursor(s)), EXTRACT_INPUTS),
        ("escape", escape, ENTITY_INPUTS),
        ("escape(encode)", lambda s: escape(s, encode=True), ENTITY_INPUTS),
        ("unescape", unescape, ENTITY_INPUTS),
    ]

    results = [
        OperationTiming(name=name, avg_time_us=_time(fn, inputs, iterations), input_count=len(inputs))
        for name, fn, inputs in operations
    ]
    results.sort(key=lambda x: x.avg_time_us, reverse=True)

    for r in results:
        print(f"  {r.name:20} {r.avg_time_us:6.2f}µs/call ({r.input_count} inputs)")


if __name__ == "__main__":
    main()
