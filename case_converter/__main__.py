"""Package entry point for ``python -m case_converter``.

Delegates to the CLI; ``--serve`` inside the CLI launches the HTTP API.
"""

from case_converter.cli import main

if __name__ == "__main__":
    main()
