"""Generate excuses (and optional proof) from the command line."""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from excuse_engine.config import load_config
from excuse_engine.exporters import render_excuse_document
from excuse_engine.explain import explain_score
from excuse_engine.generator import generate_batch
from excuse_engine.logging import setup_logging
from excuse_engine.proof import generate_proof, render_proof_document
from excuse_engine.schema import AUDIENCES, CATEGORIES, RELATIONSHIPS, SUPPORTED_LANGUAGES, TIMEFRAMES, URGENCIES
from excuse_engine.schema import ExcuseContext


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a believable excuse")
    parser.add_argument("--situation", required=True, choices=CATEGORIES)
    parser.add_argument("--urgency", default="medium", choices=URGENCIES)
    parser.add_argument("--audience", default="work", choices=AUDIENCES)
    parser.add_argument("--timeframe", default="immediate", choices=TIMEFRAMES)
    parser.add_argument("--relationship", default="professional", choices=RELATIONSHIPS)
    parser.add_argument("--language", choices=SUPPORTED_LANGUAGES, help="Defaults to the configured language")
    parser.add_argument("--count", type=int, default=1, help="Number of ranked excuses to generate")
    parser.add_argument("--proof", action="store_true", help="Attach a proof for the best excuse")
    parser.add_argument("--seed", type=int, help="Overrides EXCUSE_ENGINE_SEED")
    parser.add_argument("--format", choices=("json", "text"), default="json")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    setup_logging(config.log_level, config.log_format)

    seed = args.seed if args.seed is not None else config.seed
    rng = random.Random(seed)
    context = ExcuseContext(
        situation=args.situation,
        urgency=args.urgency,
        audience=args.audience,
        timeframe=args.timeframe,
        relationship=args.relationship,
    )
    language = args.language or config.default_language

    try:
        excuses = generate_batch(context, args.count, language=language, rng=rng)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    proof = generate_proof(excuses[0].category, excuses[0].content, rng=rng) if args.proof else None

    if args.format == "text":
        print("\n\n".join(render_excuse_document(excuse) for excuse in excuses))
        if proof is not None:
            print("\n\n" + render_proof_document(proof))
        return 0

    report = {
        "excuses": [excuse.to_dict() for excuse in excuses],
        "explanation": explain_score(context),
    }
    if proof is not None:
        report["proof"] = {key: value for key, value in vars(proof).items() if value is not None}
    print(json.dumps(report, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
