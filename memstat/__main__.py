import sys

from memstat.shell import memstat

sys.exit(memstat(sys.argv))
