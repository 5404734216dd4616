import sys

from mdl_render.cli import main

sys.exit(main())
