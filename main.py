#!/usr/bin/env python3
"""
Main script for running the slope-band visualization.
"""

# Overview:
# 1) Validate the three inputs (observations, Var(X), Var(error)).
# 2) Compute v = sqrt(Var(X)) and se = sqrt(Var(error) / (n Var(X))).
# 3) Either open the interactive window, or run one sweep headlessly and
#    export the tick trace and a snapshot of the band.

import argparse
import logging
import os
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from slopeband.config import (
    DEFAULT_ANIMATION,
    DEFAULT_NUM_OBSERVATIONS,
    DEFAULT_VARIANCE_ERROR,
    DEFAULT_VARIANCE_X,
    AnimationConfig,
)
from slopeband.validation import InvalidParameterError, validate_parameters


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for script execution."""
    parser = argparse.ArgumentParser(
        description="Animate OLS slope sampling variability within +/- 2 SE."
    )
    parser.add_argument(
        "--n", default=str(DEFAULT_NUM_OBSERVATIONS), help="Number of observations (> 2)."
    )
    parser.add_argument(
        "--vx", default=str(DEFAULT_VARIANCE_X), help="Variance of X, in (0, 6)."
    )
    parser.add_argument(
        "--ve", default=str(DEFAULT_VARIANCE_ERROR), help="Variance of the error term (> 0)."
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=DEFAULT_ANIMATION.steps_per_phase,
        help="Ticks per animation phase.",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=DEFAULT_ANIMATION.tick_interval_ms,
        help="Tick period in milliseconds.",
    )
    parser.add_argument(
        "--no-band", action="store_true", help="Do not shade the confidence band."
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run one sweep without a window and export trace and snapshot.",
    )
    parser.add_argument(
        "--export-dir", default="output", help="Output directory for headless exports."
    )
    parser.add_argument("--log-file", default=None, help="Optional log file path.")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    return parser


def _configure_logging(log_file=None, verbose=False):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def main(argv=None):
    """Main execution function."""
    args = _build_arg_parser().parse_args(argv)
    _configure_logging(args.log_file, args.verbose)

    try:
        params = validate_parameters(args.n, args.vx, args.ve)
    except InvalidParameterError as exc:
        logging.error("%s", exc)
        return 2

    if args.steps < 1 or args.interval <= 0:
        logging.error("--steps must be >= 1 and --interval must be > 0")
        return 2

    config = AnimationConfig(
        steps_per_phase=args.steps,
        tick_interval_ms=args.interval,
        show_band=not args.no_band,
    )
    logging.info(
        "Parameters: n=%d, Var(X)=%g, Var(error)=%g",
        params.num_observations,
        params.variance_x,
        params.variance_error,
    )

    if not args.headless:
        from slopeband.app import SlopeBandApp

        SlopeBandApp(config=config, params=params).show()
        return 0

    import matplotlib

    matplotlib.use("Agg")
    from slopeband.output import (
        animation_trace,
        phase_summary,
        plot_session_snapshot,
        save_trace_to_csv,
    )

    start_time = time.time()
    trace = animation_trace(params, config)
    logging.info("Recorded %d animation ticks", len(trace))
    for _, row in phase_summary(trace).iterrows():
        logging.info(
            "  - %s: %d ticks, slope range [%.4f, %.4f]",
            row["phase"],
            row["ticks"],
            row["slope_min"],
            row["slope_max"],
        )

    trace_path = save_trace_to_csv(trace, args.export_dir)
    snapshot_path = plot_session_snapshot(params, args.export_dir, config=config)

    total_duration = time.time() - start_time
    logging.info(f"Total execution time: {total_duration:.2f} seconds")
    logging.info("Generated output files:")
    logging.info("  - Animation trace: %s", trace_path)
    logging.info("  - Snapshot: %s", snapshot_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
