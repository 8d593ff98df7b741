import sys

from epoch_calendar.cli import main

sys.exit(main())
