"""Run every closure lesson in order: ``python -m closure_lessons``."""

from .tour import run_tour


def main() -> int:
    run_tour()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
