"""Permet `python -m ros_ci_pipeline`."""

from ros_ci_pipeline.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
