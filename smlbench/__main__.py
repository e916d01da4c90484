# coding: UTF-8

import sys

from .launcher import main

sys.exit(main())
