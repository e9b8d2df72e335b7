# src/growarray/experiments/run_from_config.py
from __future__ import annotations
import argparse, sys, yaml

def run(demo: str, outputs_dir: str, **kwargs):
    if demo == "int":
        from growarray.demos.int_demo import main as fn
        return fn(values=kwargs.get("values"), index=kwargs.get("index"))
    if demo == "char":
        from growarray.demos.char_demo import main as fn
        return fn(chars=kwargs.get("chars", "ABC"))
    if demo == "growth":
        from growarray.demos.growth_demo import main as fn
        return fn(
            n=kwargs.get("n", 64),
            outputs_dir=outputs_dir,
            plot=kwargs.get("plot", True),
        )
    raise SystemExit(f"Unknown demo: {demo}")

def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="Run a growarray demo from YAML config")
    ap.add_argument("--config", required=True, help="Path to YAML config")
    args = ap.parse_args(argv or sys.argv[1:])

    with open(args.config, "r", encoding="utf-8") as fh:
        cfg = yaml.safe_load(fh)

    outputs_dir = cfg.get("outputs_dir", "outputs")
    demo = cfg["demo"]
    extras = {k: v for k, v in cfg.items() if k not in {"outputs_dir", "demo"}}
    return run(demo=demo, outputs_dir=outputs_dir, **extras)

if __name__ == "__main__":
    main()
