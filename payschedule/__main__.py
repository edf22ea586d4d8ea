import sys

from payschedule.cli import main

sys.exit(main())
