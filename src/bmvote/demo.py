"""
CLI for ``bmvote-demo``: runs the majority vote on a few literal inputs.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from bmvote.engine.majority import MajorityVoteEngine
from bmvote.foundation.logging import configure_bmvote_logging

EXAMPLES: tuple[tuple[str, str, list[int]], ...] = (
    ("Array with majority element", "demo-with-majority", [3, 2, 3, 4, 3, 3, 3]),
    ("Array without majority element", "demo-no-majority", [1, 2, 3, 4, 5]),
    ("Edge case - single element", "demo-single-element", [42]),
)


def run_examples(engine: MajorityVoteEngine, examples: Sequence[tuple[str, str, list[int]]] = EXAMPLES) -> list[object]:
    logger = logging.getLogger(__name__)
    results: list[object] = []
    for index, (title, input_type, data) in enumerate(examples, start=1):
        vote = engine.run(data, input_type=input_type)
        logger.info("Example %d: %s", index, title)
        logger.info("Input: %s", data)
        logger.info("Majority element: %s", vote.value if vote.found else "None")
        logger.info("Performance: %s", vote.record.summary())
        logger.info("")
        results.append(vote.value)
    return results


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bmvote-demo", description="Show the Boyer-Moore majority vote on sample inputs.")
    parser.parse_args(argv)
    configure_bmvote_logging()

    engine = MajorityVoteEngine()
    run_examples(engine)
    logging.getLogger(__name__).info("%s", engine.complexity_analysis())
    return 0


if __name__ == "__main__":
    sys.exit(main())
