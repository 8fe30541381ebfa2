import sys

from spacecurves.demo import main

sys.exit(main())
