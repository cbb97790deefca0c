import sys

from .run_solver import main

sys.exit(main())
