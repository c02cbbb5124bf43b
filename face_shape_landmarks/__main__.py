import sys

from .batch_extract import main

sys.exit(main())
