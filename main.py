#!/usr/bin/env python3
"""
RIQ Scoring

Computes the RIQ ranking index of a set of intuitionistic fuzzy values
(name, membership mu, non-membership nu) and prints the scores.

Usage:
    python main.py [options]

Options:
    --input FILE            IFV JSON file (default: sample_ifvs.json in data/)
    --sort                  Rank results by RIQ instead of input order
    --json                  Print results as JSON
    --decimal-places N      Fractional digits kept in each score (default: 4)
    --verbose               Enable verbose logging
"""

import argparse
import sys
import logging
from typing import List, Optional

from riq import Config, ScoringParams, setup_logging
from riq.utils import load_ifvs, results_to_json, IFVSetValidator
from riq.scoring import calculate_riq
from riq.reporters import print_results, rank_results


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="RIQ scoring for intuitionistic fuzzy values"
    )
    parser.add_argument(
        "--input",
        type=str,
        default="sample_ifvs.json",
        help="IFV JSON file (relative paths resolve against data/)"
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Rank results by RIQ, highest first"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )
    parser.add_argument(
        "--decimal-places",
        type=int,
        default=4,
        help="Fractional digits kept in each score"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logging(level=log_level)

    try:
        config = Config(
            input_file=args.input,
            scoring_params=ScoringParams(decimal_places=args.decimal_places),
            sort_results=args.sort,
            output_format="json" if args.json else "table",
            log_level=log_level
        )

        logger.info(f"Loading IFVs from {config.input_file}")
        ifvs = load_ifvs(config.input_file)
        logger.info(f"Loaded {len(ifvs)} IFVs")

        validation = IFVSetValidator().inspect(ifvs)
        for message in validation.messages:
            logger.warning(message)

        results = calculate_riq(
            ifvs, decimal_places=config.scoring_params.decimal_places
        )

        if config.output_format == "json":
            rows = rank_results(results) if config.sort_results else results
            print(results_to_json(rows, validation.messages))
        else:
            print_results(
                results,
                validation=validation,
                ranked=config.sort_results,
                decimal_places=config.scoring_params.decimal_places
            )

        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Data error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
