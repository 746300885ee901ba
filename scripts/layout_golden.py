# ruff: noqa: E402
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from screengrid.gen.bias import BIASES, generate_layout_with_bias
from screengrid.gen.layout import GENERATOR_ID, GENERATOR_VERSION
from screengrid.gen.recipe import build_recipe


def generate_hashes(seed: int, bias: str) -> dict:
    layout = generate_layout_with_bias(seed, bias)
    recipe = build_recipe(layout, seed=seed, bias=bias)
    return {
        "seed": int(seed),
        "bias": bias,
        "blocks": int(len(layout.blocks)),
        "hashes": dict(recipe.get("hashes", {})),
    }


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--golden", type=str, default="runs/layout_golden.json")
    parser.add_argument(
        "--write", action="store_true", help="Write/update the golden file instead of checking it"
    )
    parser.add_argument("--seeds", type=str, default="1,2,3,42,12345,99991")
    parser.add_argument("--bias", type=str, default="any", choices=list(BIASES))
    args = parser.parse_args()

    seeds = [int(s.strip()) for s in args.seeds.split(",") if s.strip()]
    if not seeds:
        raise SystemExit("No seeds provided")

    out_path = Path(args.golden)
    if not args.write and not out_path.exists():
        raise SystemExit(f"Golden file not found: {out_path} (run with --write to create)")

    generated = [generate_hashes(s, args.bias) for s in seeds]
    payload = {
        "generator": {"id": GENERATOR_ID, "version": GENERATOR_VERSION},
        "entries": generated,
    }

    if args.write:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"wrote {out_path}")
        return

    golden = json.loads(out_path.read_text(encoding="utf-8"))
    golden_entries = {(int(e["seed"]), e.get("bias", "any")): e for e in golden.get("entries", [])}

    ok = True
    for e in generated:
        key = (int(e["seed"]), e["bias"])
        g = golden_entries.get(key)
        if g is None:
            ok = False
            print(f"missing seed in golden: {key[0]} ({key[1]})")
            continue

        exp = g.get("hashes") or {}
        got = e.get("hashes") or {}
        for name in ("cells", "recipe"):
            if exp.get(name) != got.get(name):
                ok = False
                print(f"seed {key[0]}: {name} hash mismatch expected={exp.get(name)} got={got.get(name)}")

    if ok:
        print("ok: all golden hashes match")
        return
    raise SystemExit(1)


if __name__ == "__main__":
    main()
