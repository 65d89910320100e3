import sys

from xlsxreader.cli.main import main

sys.exit(main())
