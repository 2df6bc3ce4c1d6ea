#!/usr/bin/env python3
"""
Main script for running the response surface tutorial.
"""

# Pipeline overview (README-style):
# 1) Simulate 1000 couples: both partners' extroversion (1-7) and relationship
#    happiness (1-5) under a discrepancy-sensitive mixture rule.
# 2) Describe the raw columns and screen the partners for discrepancy on the
#    standardized scale (a sanity check; it never stops the run).
# 3) Center both ratings at the scale midpoint and add squared and
#    interaction terms.
# 4) Fit the second-order polynomial regression by OLS and export the
#    coefficients and covariance matrix.
# 5) Evaluate the surface along the congruence and incongruence lines and
#    render the line and 3-D surface figures.

import argparse
import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("rsurf_analysis.log", mode="w"),
    ],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from rsurf.analysis import run_analysis
from rsurf.config import (
    DEFAULT_LINE_POINTS,
    DEFAULT_N,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SEED,
    DEFAULT_THRESHOLD,
    RNG_KINDS,
    SCALE_MIDPOINT,
    AnalysisConfig,
)
from rsurf.reporting import print_report


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for the tutorial run."""
    parser = argparse.ArgumentParser(
        description=(
            "Polynomial regression and response surface analysis on simulated couples."
        )
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Random seed (default: {DEFAULT_SEED}).",
    )
    parser.add_argument(
        "--n",
        type=int,
        default=DEFAULT_N,
        help=f"Number of couples (default: {DEFAULT_N}).",
    )
    parser.add_argument(
        "--center",
        type=float,
        default=SCALE_MIDPOINT,
        help=f"Centering constant for both ratings (default: {SCALE_MIDPOINT}).",
    )
    parser.add_argument(
        "--rng",
        choices=RNG_KINDS,
        default="r",
        help="Random stream: R-compatible Mersenne-Twister or NumPy default_rng.",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_THRESHOLD,
        help=f"Discrepancy screen cutoff in SD units (default: {DEFAULT_THRESHOLD}).",
    )
    parser.add_argument(
        "--points",
        type=int,
        default=DEFAULT_LINE_POINTS,
        help=f"Points per surface line (default: {DEFAULT_LINE_POINTS}).",
    )
    parser.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--no-plots", action="store_true", help="Skip figure rendering."
    )
    return parser


def main(argv=None):
    """Main execution function with stage timing logs."""
    args = _build_arg_parser().parse_args(argv)

    start_time = time.time()
    logging.info("Initializing response surface pipeline")

    try:
        config = AnalysisConfig(
            seed=args.seed,
            n=args.n,
            centering_constant=args.center,
            rng=args.rng,
            threshold=args.threshold,
            n_points=args.points,
            output_dir=args.outdir,
        )
    except ValueError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1
    logging.info(
        "Configured seed=%d, n=%d, centering constant=%.2f, rng=%s",
        config.seed,
        config.n,
        config.centering_constant,
        config.rng,
    )

    step_start = time.time()
    try:
        results = run_analysis(config, make_plots=not args.no_plots)
    except ValueError as exc:
        logging.error("Analysis aborted: %s", exc)
        return 1
    logging.info("Pipeline completed in %.2f seconds", time.time() - step_start)

    print_report(
        results["descriptives"],
        results["screen"],
        results["fit"],
        results["parameters"],
    )

    total_duration = time.time() - start_time
    logging.info(f"Total execution time: {total_duration:.2f} seconds")
    logging.info("Generated output files:")
    for name, path in results["tables"].items():
        logging.info("  - Table (%s): %s", name, path)
    for name, path in results["figures"].items():
        logging.info("  - Figure (%s): %s", name, path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
