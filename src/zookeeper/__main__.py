"""Allow ``python -m src.zookeeper``."""

import sys

from .pipeline import main

sys.exit(main())
