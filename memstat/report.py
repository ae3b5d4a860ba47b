# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Ordering and text rendering of process memory records.
"""

import sys
from operator import attrgetter

from memstat.core import constants
from memstat.core.constants import SortKey

PADDING = 5
UNIT = " KiB"
RULE = 81

BASE_COLUMNS = (
    (constants.SHARED_LABEL, "shared"),
    (constants.PRIVATE_LABEL, "private"),
    (constants.RSS_LABEL, "rss"),
)

SWAP_COLUMNS = (
    (constants.SWAP_LABEL, "swap"),
    (constants.SWAP_PSS_LABEL, "swap_pss"),
)


def sort_records(records, key=SortKey.NONE):
    """Return a new list of records ordered ascending by key.

    The key may be a SortKey or its name. Unknown names leave the order as
    given. Ties keep their original relative order.
    """
    field = SortKey.from_name(key).field
    if field is None:
        return list(records)
    return sorted(records, key=attrgetter(field))


def columns(swap=False):
    """Return the (label, field) pairs of the numeric columns to show."""
    if swap:
        return BASE_COLUMNS + SWAP_COLUMNS
    return BASE_COLUMNS


def column_width(records, field, padding=PADDING):
    """Width of a numeric column: the longest value's digit count plus padding."""
    return max((len(str(getattr(rec, field))) for rec in records), default=1) + padding


def format_table(records, swap=False, padding=PADDING, unit=UNIT, rule=RULE):
    """Render records as a list of text lines.

    The first line holds the column labels, the second a rule, then one line
    per record.
    """
    cols = [(label, field, column_width(records, field, padding))
            for label, field in columns(swap)]
    header = "".join(label.rjust(width + len(unit)) for label, _, width in cols)
    lines = [header + "  " + constants.NAME_LABEL, "-" * rule]
    for rec in records:
        cells = "".join(str(getattr(rec, field)).rjust(width) + unit
                        for _, field, width in cols)
        lines.append(cells + "  " + rec.name)
    return lines


def print_table(lines, file=None):
    out = file or sys.stdout
    for line in lines:
        print(line, file=out)


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab
