import sys

from wordindex.client.cli import main

sys.exit(main())
