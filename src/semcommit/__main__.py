"""
Allow running the commit composer with ``python -m semcommit``.

This is equivalent to running the ``semcommit`` console script
installed via ``pyproject.toml``.
"""

from semcommit.cli import main


if __name__ == "__main__":
    main(prog_name="semcommit")
