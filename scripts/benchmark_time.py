#!/usr/bin/env python
"""Benchmark hiragana context analysis throughput.

Times ``feed()`` over the given files (or a synthetic Japanese sample when
none are given) for every supported encoding, with an optional chunk size to
exercise the chunk-boundary path.

Can be run standalone for human-readable output, or with ``--json-only`` for
machine-readable JSON.
"""

from __future__ import annotations

import argparse
import json
import statistics
import sys
import time
from pathlib import Path

_SAMPLE_TEXT = (
    "わたしはきのうともだちといっしょにこうえんへいきました。"
    "日本語の文章には、ひらがなとカタカナと漢字がまざっています。"
)


def _load_inputs(paths: list[Path]) -> list[tuple[str, bytes]]:
    if not paths:
        return [
            (f"<sample:{enc}>", (_SAMPLE_TEXT * 400).encode(enc))
            for enc in ("shift_jis", "euc-jp")
        ]
    inputs = []
    for path in paths:
        try:
            inputs.append((str(path), path.read_bytes()))
        except OSError as e:
            print(f"ERROR: {path}: {e}", file=sys.stderr)
            sys.exit(1)
    return inputs


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark hiragana context analysis (timing only).",
    )
    parser.add_argument("files", nargs="*", type=Path, help="Files to analyse")
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=0,
        help="Feed input in chunks of this many bytes (default: whole input)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=20,
        help="Timed repetitions per input and encoding (default: 20)",
    )
    parser.add_argument(
        "--max-relations",
        type=int,
        default=None,
        help="Override the relation cutoff (default: library default)",
    )
    parser.add_argument(
        "--json-only",
        action="store_true",
        default=False,
        help="Print only JSON output (for consumption by other scripts)",
    )
    args = parser.parse_args()

    t0 = time.perf_counter()
    from jpcontext.registry import ANALYSES, create_analysis

    import_time = time.perf_counter() - t0

    kwargs = {}
    if args.max_relations is not None:
        kwargs["max_relations"] = args.max_relations

    inputs = _load_inputs(args.files)
    chunk_size = args.chunk_size

    timings: dict[str, list[float]] = {name: [] for name in ANALYSES}
    t_total_start = time.perf_counter()
    for label, data in inputs:
        for name in ANALYSES:
            analysis = create_analysis(name, **kwargs)
            for _ in range(args.iterations):
                analysis.reset()
                ft0 = time.perf_counter()
                if chunk_size > 0:
                    for start in range(0, len(data), chunk_size):
                        analysis.feed(data[start : start + chunk_size])
                else:
                    analysis.feed(data)
                timings[name].append(time.perf_counter() - ft0)

            if args.json_only:
                print(
                    json.dumps(
                        {
                            "path": label,
                            "encoding": analysis.charset_name,
                            "bytes": len(data),
                            "relations": analysis.total_relations,
                            "confidence": analysis.get_confidence(),
                            "mean": statistics.mean(timings[name][-args.iterations :]),
                        }
                    )
                )
    total_elapsed = time.perf_counter() - t_total_start

    if args.json_only:
        print(json.dumps({"__timing__": total_elapsed, "import_time": import_time}))
        return

    total_bytes = sum(len(data) for _, data in inputs) * args.iterations
    print(f"Inputs:       {len(inputs)}")
    print(f"Chunk size:   {chunk_size or 'whole input'}")
    print()
    print("Timing:")
    print(f"  Import:     {import_time:.3f}s")
    for name, times in timings.items():
        if not times:
            continue
        mean_ms = statistics.mean(times) * 1000
        median_ms = statistics.median(times) * 1000
        mb_per_s = total_bytes / sum(times) / 1_000_000 if sum(times) else 0.0
        print(
            f"  {name:<10}  mean={mean_ms:.2f}ms  median={median_ms:.2f}ms"
            f"  throughput={mb_per_s:.1f}MB/s"
        )


if __name__ == "__main__":
    main()
