"""Module entry point for `python -m ape.cli`."""
import sys

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")

    from ape.cli import cli

    cli()
