import sys

from .ingest_cli import main

sys.exit(main())
