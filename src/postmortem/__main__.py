"""
Enable running the package with: python -m postmortem

- __main__.py  -> runs when someone does `python -m postmortem`
- main.py      -> contains the actual main() function and CLI logic
"""

from .main import main

# raise SystemExit is equivalent to sys.exit() without importing sys
raise SystemExit(main())
