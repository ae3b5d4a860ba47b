# python3

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Shell interface to the memory report.
"""

import sys

import docopt

from memstat import VERSION
from memstat import config
from memstat import logging
from memstat import report
from memstat.core.exceptions import UsageError, ConfigError
from memstat.os import meminfo


USAGE = r"""Shows detailed memory usage of all processes.

Version {version}

Usage:
    memstat [-hS] [-s <key>]

Options:
    -h, --help        Show this help screen.
    -S, --swap        Show swap usage.
    -s, --sort <key>  Sort by shared, private, rss, swap or name.

Values are in KiB. Any other sort key leaves the processes in PID order.
""".format(version=VERSION)


class ShellInterface:
    """Implement the shell command interface."""

    def __init__(self, argv):
        try:
            args = docopt.docopt(USAGE, argv=argv[1:], help=False)
        except docopt.DocoptExit as exc:
            _usage(exc)
        self.config = cf = config.get_config()
        # Adjust the configuration with the commandline options.
        cf.flags.help = args["--help"]
        cf.flags.swap = args["--swap"]
        cf.flags.sort = args["--sort"] or "none"

    def run(self):
        cf = self.config
        if cf.flags.help:
            print(USAGE)
            return 0
        config.validate(cf)
        processes = meminfo.collect(cf.procroot)
        processes = report.sort_records(processes, cf.flags.sort)
        lines = report.format_table(processes, swap=cf.flags.swap,
                                    padding=cf.report.padding,
                                    unit=cf.report.unit,
                                    rule=cf.report.rule)
        report.print_table(lines)
        logging.info("memstat: reported %d processes", len(processes))
        return 0


def _usage(err=None):
    if err is not None:
        print(err, file=sys.stderr)
    print(USAGE, file=sys.stderr)
    raise UsageError()


def memstat(argv):
    """Main function for shell interface."""
    try:
        intf = ShellInterface(argv)
        return intf.run()
    except UsageError:
        return 64  # EX_USAGE
    except ConfigError as err:
        logging.error("memstat: bad configuration: %s", err)
        print("Error: {}: {}".format(err.__class__.__name__, err), file=sys.stderr)
        return 78  # EX_CONFIG


if __name__ == "__main__":
    sys.exit(memstat(sys.argv))

# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab
