# scripts/generate_blueprint.py
import argparse
import sys

from job_blueprint.config import load_config
from job_blueprint.errors import BlueprintError
from job_blueprint.main import run


def main():
    parser = argparse.ArgumentParser(
        description="Turn a job posting (URL or pasted text) into a project blueprint."
    )
    parser.add_argument("--config", default=None, help="YAML config (see config/config.yaml)")
    parser.add_argument("--url", default=None, help="Job posting URL")
    parser.add_argument("--text-file", default=None, help="File with the pasted posting text")
    parser.add_argument("--company", default=None)
    parser.add_argument("--title", default=None)
    parser.add_argument("--days", type=int, default=None, help="Roadmap duration in days")
    parser.add_argument("--format", choices=["json", "markdown", "both"], default=None)
    parser.add_argument("--out", default=None, help="Output directory")
    parser.add_argument("--no-architecture", action="store_true")
    parser.add_argument("--no-test-plan", action="store_true")
    parser.add_argument("--no-learning-plan", action="store_true")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}")
        sys.exit(2)

    if args.days is not None and args.days < 1:
        print("[ERROR] --days must be >= 1")
        sys.exit(2)

    inp = cfg.input.model_copy(
        update={
            k: v
            for k, v in {
                "url": args.url,
                "text_file": args.text_file,
                "company_name": args.company,
                "job_title": args.title,
            }.items()
            if v is not None
        }
    )
    gen = cfg.generation.model_copy(
        update={
            k: v
            for k, v in {
                "duration_days": args.days,
                "include_architecture": False if args.no_architecture else None,
                "include_test_plan": False if args.no_test_plan else None,
                "include_learning_plan": False if args.no_learning_plan else None,
            }.items()
            if v is not None
        }
    )
    out = cfg.output.model_copy(
        update={k: v for k, v in {"format": args.format, "dir": args.out}.items() if v is not None}
    )
    cfg = cfg.model_copy(update={"input": inp, "generation": gen, "output": out})

    try:
        run(cfg, verbose=args.verbose)
    except BlueprintError:
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
