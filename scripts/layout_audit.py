# ruff: noqa: E402
from __future__ import annotations

import argparse
import json
import sys
import time
from dataclasses import asdict
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from screengrid.config import GeneratorConfig
from screengrid.constants import REQUIRED_BLOCK_COUNT
from screengrid.gen.bias import BIASES, generate_layout_with_bias, input_matches_bias, is_input_away_from_edges
from screengrid.gen.recipe import build_recipe
from screengrid.gen.validator import validate_layout
from screengrid.screen import OccupancyGrid


def badness_score(entry: dict) -> float:
    # Higher is worse. Keep simple and tunable.
    score = 0.0
    score += float(REQUIRED_BLOCK_COUNT - entry.get("blocks", 0)) * 1_000.0
    score += float(len(entry.get("problems", []))) * 10_000.0
    density = float(entry.get("density", 0.0))
    if density < 0.75:
        score += (0.75 - density) * 200.0
    if not entry.get("input_away", False):
        score += 5.0
    return score


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--seeds", type=int, default=1000)
    parser.add_argument("--seed-start", type=int, default=0)
    parser.add_argument("--bias", type=str, default="any", choices=list(BIASES))
    parser.add_argument("--out", type=str, default="runs/layout_audit.json")
    parser.add_argument("--topk", type=int, default=20)
    args = parser.parse_args()

    gen_cfg = GeneratorConfig()
    entries: list[dict] = []
    t0 = time.time()
    for i in range(args.seeds):
        seed = args.seed_start + i
        layout = generate_layout_with_bias(seed, args.bias, config=gen_cfg)
        grid = OccupancyGrid.from_blocks(layout.blocks)
        block = layout.get("input")
        recipe = build_recipe(layout, seed=seed, bias=args.bias)

        entry = {
            "seed": int(seed),
            "blocks": int(len(layout.blocks)),
            "density": grid.density(),
            "input": block.to_dict() if block is not None else None,
            "input_away": is_input_away_from_edges(layout),
            "bias_hit": bool(block is not None and input_matches_bias(block, args.bias)),
            "problems": validate_layout(layout),
            "hashes": recipe.get("hashes", {}),
        }
        entry["badness"] = badness_score(entry)
        entries.append(entry)

    elapsed = time.time() - t0
    entries_sorted = sorted(entries, key=lambda e: float(e.get("badness", 0.0)), reverse=True)
    worst = entries_sorted[: max(1, int(args.topk))]

    degraded = [e for e in entries if e["blocks"] < REQUIRED_BLOCK_COUNT]
    summary = {
        "generator_config": asdict(gen_cfg),
        "bias": args.bias,
        "count": int(len(entries)),
        "elapsed_s": float(elapsed),
        "degraded": int(len(degraded)),
        "degraded_rate": float(len(degraded) / max(1, len(entries))),
        "invalid": int(sum(1 for e in entries if e["problems"])),
        "density_mean": float(np.mean([e["density"] for e in entries])) if entries else 0.0,
        "density_p05": float(np.percentile([e["density"] for e in entries], 5)) if entries else 0.0,
        "input_away_rate": float(np.mean([e["input_away"] for e in entries])) if entries else 0.0,
        "bias_hit_rate": float(np.mean([e["bias_hit"] for e in entries])) if entries else 0.0,
        "badness_max": float(worst[0]["badness"]) if worst else 0.0,
    }

    out = {"summary": summary, "worst": worst}
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(out, indent=2), encoding="utf-8")

    print(json.dumps(summary, indent=2))
    print(f"wrote {out_path} (worst={len(worst)})")


if __name__ == "__main__":
    main()
