"""Write CLI run artifacts: the sampled curve and a summary."""

import json
from dataclasses import asdict
from pathlib import Path

import pandas as pd
import structlog

from liquidity_model.config.schema import LiquidityModelParams
from liquidity_model.engine.evaluation import LiquidityEvaluation

logger = structlog.get_logger()


def write_artifacts(
    curve: pd.DataFrame,
    evaluation: LiquidityEvaluation,
    params: LiquidityModelParams,
    outdir: str | Path,
) -> dict[str, Path]:
    """Write ``curve.csv`` and ``summary.json`` into an output directory.

    Args:
        curve: Sampled curve with columns tvl, low, target, high
        evaluation: Point-in-time evaluation at the simulated TVL
        params: Parameters the curve was computed with
        outdir: Output directory, created if missing

    Returns:
        Mapping of artifact name to written path
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    curve_path = outdir / "curve.csv"
    curve.to_csv(curve_path, index=False)

    summary = asdict(evaluation)
    if evaluation.action is not None:
        summary["action"] = evaluation.action.value
    summary_path = outdir / "summary.json"
    with open(summary_path, "w") as f:
        json.dump(
            {
                "params": params.model_dump(by_alias=True),
                "evaluation": summary,
                "curve_points": len(curve),
            },
            f,
            indent=2,
        )

    logger.info("artifacts_written", outdir=str(outdir), curve_points=len(curve))
    return {"curve": curve_path, "summary": summary_path}
