from __future__ import annotations

import sys

from .cli.analyze_csv import figures_main, summary_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default behavior: summary if no subcommand
    if not argv:
        return summary_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"summary", "analyze"}:
        return summary_main(rest)

    if cmd in {"figures", "plots"}:
        return figures_main(rest)

    # flags without a subcommand mean summary
    if cmd.startswith("-"):
        return summary_main(argv)

    print("Usage:")
    print("  python -m dropfour_analysis summary [--csv ...]")
    print("  python -m dropfour_analysis figures [--csv ...] [--outdir figures]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
