"""Module entrypoint for ``python -m dutop``.

All argument parsing and output happen in ``dutop.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
