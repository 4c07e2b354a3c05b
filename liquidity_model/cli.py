"""Command-line interface for the liquidity buffer model.

Orchestrates config loading, parameter overrides, point evaluation, curve
sampling, and optional artifact generation.
"""

import argparse
import sys
from pathlib import Path

import structlog

from liquidity_model.config.loader import load_config
from liquidity_model.config.schema import ModelConfig
from liquidity_model.config.settings import settings
from liquidity_model.engine.evaluation import evaluate
from liquidity_model.engine.sampler import curve_to_frame, sample_curve
from liquidity_model.log_config import configure_logging
from liquidity_model.model import get_model
from liquidity_model.report.artifacts import write_artifacts
from liquidity_model.units import bp_to_percent

logger = structlog.get_logger()

# CLI flag -> parameter field
PARAM_FLAGS = {
    "min_ratio_bp": "--min-ratio-bp",
    "tvl_factor_bp": "--tvl-factor-bp",
    "tvl_exponent_bp": "--tvl-exponent-bp",
    "low_offset_bp": "--low-offset-bp",
    "high_offset_bp": "--high-offset-bp",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="liquidity-model",
        description="Compute target liquidity ratios and rebalancing triggers by vault TVL",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=str,
        default=settings.config_path,
        help="Path to configuration YAML file (defaults apply if it is missing)",
    )
    parser.add_argument(
        "--tvl",
        type=float,
        help="Simulated vault TVL in USD (overrides config default)",
    )
    parser.add_argument(
        "--max-tvl",
        type=float,
        help="Upper end of the sampled TVL domain in USD (overrides config default)",
    )
    parser.add_argument(
        "--min-tvl",
        type=float,
        help="Lower end of the sampled TVL domain in USD (overrides config default)",
    )
    parser.add_argument(
        "--points",
        type=int,
        help="Number of curve samples (overrides config default)",
    )
    parser.add_argument(
        "--linear",
        action="store_true",
        help="Space curve samples linearly instead of logarithmically",
    )
    for field, flag in PARAM_FLAGS.items():
        parser.add_argument(
            flag,
            dest=field,
            type=float,
            help=f"Override {field} (clamped to its validation bounds)",
        )
    parser.add_argument(
        "--current-ratio-bp",
        type=float,
        help="Observed buffer ratio in bp; reports the rebalance action it calls for",
    )
    parser.add_argument(
        "--outdir",
        type=str,
        help="Write curve.csv and summary.json to this directory",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.logging.level,
        help="Log level",
    )
    return parser


def resolve_config(config_path: str | Path) -> ModelConfig:
    """Load the config file, or fall back to defaults when it is absent."""
    if Path(config_path).exists():
        return load_config(config_path)
    logger.info("config_not_found_using_defaults", path=str(config_path))
    return ModelConfig()


def main(argv: list[str] | None = None) -> int:
    """Run the liquidity model CLI."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, settings.logging.json_output)

    config = resolve_config(args.config)

    # Apply CLI overrides, clamped like any other edit
    overrides = {
        field: getattr(args, field)
        for field in PARAM_FLAGS
        if getattr(args, field) is not None
    }
    params = config.params.with_updates(**overrides)

    sim = config.simulation
    tvl = args.tvl if args.tvl is not None else sim.tvl
    max_tvl = args.max_tvl if args.max_tvl is not None else sim.max_tvl
    min_tvl = args.min_tvl if args.min_tvl is not None else sim.min_tvl
    point_count = args.points if args.points is not None else sim.point_count
    logarithmic = sim.logarithmic and not args.linear

    logger.info("params_resolved", model=config.model, **params.model_dump())

    ratio_fn = get_model(config.model)

    try:
        curve = sample_curve(
            params,
            max_tvl=max_tvl,
            point_count=point_count,
            logarithmic=logarithmic,
            min_tvl=min_tvl,
            ratio_fn=ratio_fn,
        )
    except ValueError as e:
        logger.error("invalid_sampling_request", error=str(e))
        return 2

    evaluation = evaluate(params, tvl, args.current_ratio_bp, ratio_fn=ratio_fn)
    frame = curve_to_frame(curve)

    print(f"For TVL = ${evaluation.tvl:,.0f}:")
    print(f"  Low:    {bp_to_percent(evaluation.low):.2f}%")
    print(f"  Target: {bp_to_percent(evaluation.target):.2f}%")
    print(f"  High:   {bp_to_percent(evaluation.high):.2f}%")
    if evaluation.action is not None:
        print(f"  Action: {evaluation.action.value}")
    print()
    print(frame.to_string(index=False, float_format=lambda v: f"{v:,.2f}"))

    if args.outdir:
        write_artifacts(frame, evaluation, params, args.outdir)

    return 0


if __name__ == "__main__":
    sys.exit(main())
