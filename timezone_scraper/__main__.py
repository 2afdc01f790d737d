import sys

from timezone_scraper.cli import main

sys.exit(main())
