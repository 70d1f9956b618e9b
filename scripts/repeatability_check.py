#!/usr/bin/env python3
"""
Repeatability harness: resolve every possible answer combination of a quiz
variant N times; assert identical results and tally conservation.
Exits 0 if stable, 1 if unstable. Prints the track distribution.

Usage: python scripts/repeatability_check.py [--runs 10] [--variant classic]
"""

import argparse
import itertools
import sys
from collections import Counter
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from learning_track import TRACK_ORDER, list_variants, questions_of, recommend

DEFAULT_RUNS = 10


def check_variant(variant: str, runs: int) -> tuple[Counter, list[str]]:
    questions = questions_of(variant)
    distribution: Counter = Counter()
    failures = []

    for combo in itertools.product(*(range(len(q.options)) for q in questions)):
        answers = list(combo)
        results = [recommend(answers, variant) for _ in range(runs)]
        first = results[0]
        if any(r.track != first.track or r.tally != first.tally for r in results[1:]):
            failures.append(f"{answers}: unstable track/tally across {runs} runs")

        expected_total = sum(sum(q.options[i].weights.values()) for q, i in zip(questions, answers))
        if sum(first.tally.values()) != expected_total:
            failures.append(f"{answers}: tally sum {sum(first.tally.values())} != weights sum {expected_total}")

        distribution[first.track] += 1

    return distribution, failures


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--variant", choices=list_variants(), action="append",
                        help="Variant to check (repeatable; default: all)")
    args = parser.parse_args()

    unstable = False
    for variant in args.variant or list_variants():
        distribution, failures = check_variant(variant, args.runs)
        total = sum(distribution.values())
        print(f"=== {variant}: {total} combinations x {args.runs} runs ===")
        for track in TRACK_ORDER:
            count = distribution[track]
            print(f"  {track.display_name:<10} {count:>4} ({count / total * 100:.1f}%)")
        if failures:
            unstable = True
            print(f"  UNSTABLE: {len(failures)} combination(s)")
            for f in failures[:20]:
                print(f"    {f}")

    sys.exit(1 if unstable else 0)


if __name__ == "__main__":
    main()
