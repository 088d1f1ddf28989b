import sys

from studiosg.app.batch import main

sys.exit(main())
