"""Entry point for python -m websubcheck."""

import sys

from websubcheck.presentation.cli import main

sys.exit(main())
