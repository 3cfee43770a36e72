# -*- coding: utf-8 -*-
import sys

from savedvars.cli.main import main

sys.exit(main())
