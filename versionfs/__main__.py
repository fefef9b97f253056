import sys

from versionfs.main import main

sys.exit(main())
