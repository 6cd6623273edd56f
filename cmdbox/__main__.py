"""Module entrypoint for ``python -m cmdbox``.

All argument parsing and runtime setup happen in ``cmdbox.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
