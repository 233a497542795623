"""Development server entry point.

Usage:
    python run.py

Environment variables:
    PORT      - Port to listen on (default: 3000)
    NAME      - Name to greet (default: World)
    APP_ENV   - development (default), test or production
"""

import sys

from greeter_service.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
