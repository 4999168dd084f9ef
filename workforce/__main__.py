import sys

from workforce.main_app import main

sys.exit(main())
