"""Allow ``python -m templatize``."""

from templatize.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
