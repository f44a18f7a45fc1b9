"""Allow running tinysh with python -m tinysh"""

import sys

from .cli import main

sys.exit(main())
