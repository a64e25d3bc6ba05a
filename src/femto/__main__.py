"""Allow ``python -m femto``."""

import sys

from femto.adapters.textual.app import main

if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
