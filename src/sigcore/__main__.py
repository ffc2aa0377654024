"""Allow ``python -m sigcore``."""

from .cli import main

raise SystemExit(main())
