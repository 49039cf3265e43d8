"""Allow ``python -m song_lookup`` execution."""

import sys

from song_lookup.cli import main

sys.exit(main())
