"""Allow ``python -m complexity_insight``."""

from .cli import main

if __name__ == "__main__":
    main()
