"""Command line for fibmatrix: print F(n) for a non-negative index n.

Exit codes: 0 on success, 2 on invalid input.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from src.core.contracts import validate_fibonacci_result
from src.engine import EngineConfig, PowerStrategy, fibonacci, fibonacci_with_stats


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fibmatrix",
        description="Compute the n-th Fibonacci number via symmetric matrix power.",
    )
    parser.add_argument("n", type=int, help="non-negative index")
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in PowerStrategy],
        default=PowerStrategy.ITERATIVE.value,
    )
    parser.add_argument("--max-index", type=int, default=None)
    parser.add_argument(
        "--json", action="store_true", help="print the result with statistics as JSON"
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = EngineConfig(strategy=args.strategy, max_index=args.max_index)
        if args.json:
            data = fibonacci_with_stats(args.n, config).model_dump(mode="json")
            validate_fibonacci_result(data)
            print(json.dumps(data))
        else:
            print(fibonacci(args.n, config))
    except ValueError as e:  # включая InvalidArgument
        print(f"fibmatrix: error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
