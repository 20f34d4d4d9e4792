import sys

from session_notes.cli import main

sys.exit(main())
