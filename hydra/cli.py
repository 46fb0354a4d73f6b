"""Command-line interface for the Hydra curve.

Amounts are given in whole tokens (decimal strings) and converted to
18-decimal fixed-point; results are printed as JSON with both the raw
fixed-point integer and its decimal rendering.

Usage:
    hydra-curve price 1000 1000 --preset standard
    hydra-curve liquidity 1000 1000 --current 1.05 --target 1
    hydra-curve quote 1000 10 --preset volatile
    hydra-curve select --metrics '{"marketCap": 0, "volume24h": 5, "holderCount": 50, "ageSeconds": 0}'
    hydra-curve validate --steepness 15 --width 0.2 --power 4 --weights 0.5 0.3 0.2

Exit codes:
    0 - Success
    1 - The engine rejected the input (error printed as JSON)
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from decimal import InvalidOperation
from typing import Any

import structlog
from pydantic import ValidationError

from hydra.curve.config import CurveConfig, config_violations
from hydra.curve.engine import LiquidityEngine
from hydra.curve.presets import CurvePreset, preset_config
from hydra.curve.selector import score_market
from hydra.errors import HydraError
from hydra.math.fixed_point import from_fixed, to_fixed
from hydra.models.metrics import MarketMetrics
from hydra.settings import EngineSettings

logger = structlog.get_logger()


def _fixed(value: int) -> dict[str, str]:
    return {"raw": str(value), "decimal": str(from_fixed(value))}


def _cmd_price(engine: LiquidityEngine, args: argparse.Namespace) -> dict[str, Any]:
    price = engine.calculate_price(to_fixed(args.x), to_fixed(args.y), preset_config(args.preset))
    return {"preset": args.preset, "price": _fixed(price)}


def _cmd_liquidity(engine: LiquidityEngine, args: argparse.Namespace) -> dict[str, Any]:
    liquidity = engine.calculate_liquidity(
        to_fixed(args.x),
        to_fixed(args.y),
        to_fixed(args.current),
        to_fixed(args.target),
        preset_config(args.preset),
    )
    return {"preset": args.preset, "liquidity": _fixed(liquidity)}


def _cmd_quote(engine: LiquidityEngine, args: argparse.Namespace) -> dict[str, Any]:
    quote = engine.quote_trade(to_fixed(args.supply), to_fixed(args.delta), preset_config(args.preset))
    return {
        "preset": args.preset,
        "expected_amount": _fixed(quote.expected_amount),
        "price_impact_bps": quote.price_impact_bps,
    }


def _cmd_select(_engine: LiquidityEngine, args: argparse.Namespace) -> dict[str, Any]:
    metrics = MarketMetrics.model_validate(json.loads(args.metrics))
    score = score_market(metrics)
    result = asdict(score)
    result["preset"] = score.preset.value
    return result


def _cmd_validate(_engine: LiquidityEngine, args: argparse.Namespace) -> dict[str, Any]:
    sigmoid_w, gaussian_w, rational_w = (to_fixed(w) for w in args.weights)
    config = CurveConfig(
        sigmoid_steepness=args.steepness,
        sigmoid_weight=sigmoid_w,
        gaussian_width=to_fixed(args.width),
        gaussian_weight=gaussian_w,
        rational_power=args.power,
        rational_weight=rational_w,
    )
    violations = config_violations(config)
    return {"valid": not violations, "violations": violations}


COMMANDS = {
    "price": _cmd_price,
    "liquidity": _cmd_liquidity,
    "quote": _cmd_quote,
    "select": _cmd_select,
    "validate": _cmd_validate,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hydra-curve",
        description="Evaluate the Hydra blended bonding curve",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    presets = [p.value for p in CurvePreset]
    sub = parser.add_subparsers(dest="command", required=True)

    price = sub.add_parser("price", help="Curve price of a reserve pair")
    price.add_argument("x", help="Numerator reserve (whole tokens)")
    price.add_argument("y", help="Denominator reserve (whole tokens)")
    price.add_argument("--preset", choices=presets, default="standard")

    liquidity = sub.add_parser("liquidity", help="Effective liquidity at current vs target price")
    liquidity.add_argument("x", help="First reserve (whole tokens)")
    liquidity.add_argument("y", help="Second reserve (whole tokens)")
    liquidity.add_argument("--current", required=True, help="Current price")
    liquidity.add_argument("--target", required=True, help="Target price")
    liquidity.add_argument("--preset", choices=presets, default="standard")

    quote = sub.add_parser("quote", help="Cost and impact of a supply change")
    quote.add_argument("supply", help="Current supply (whole tokens)")
    quote.add_argument("delta", help="Trade size (whole tokens)")
    quote.add_argument("--preset", choices=presets, default="standard")

    select = sub.add_parser("select", help="Score market metrics and pick a preset")
    select.add_argument("--metrics", required=True, help="MarketMetrics as JSON")

    validate = sub.add_parser("validate", help="Validate a custom curve config")
    validate.add_argument("--steepness", type=int, required=True)
    validate.add_argument("--width", required=True, help="Gaussian width (e.g. 0.2)")
    validate.add_argument("--power", type=int, required=True)
    validate.add_argument(
        "--weights",
        nargs=3,
        required=True,
        metavar=("SIGMOID", "GAUSSIAN", "RATIONAL"),
        help="Blend weights, must sum to 1",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    try:
        engine = LiquidityEngine(EngineSettings.from_env())
        result = COMMANDS[args.command](engine, args)
    except (HydraError, ValidationError, ValueError, InvalidOperation) as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(json.dumps({"error": type(e).__name__, "detail": str(e)}))
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
