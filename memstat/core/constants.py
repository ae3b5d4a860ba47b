# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Universal constants and enumerations.
"""

from enum import Enum


class SortKey(Enum):
    """Field a process list may be ordered by."""
    NONE = "none"  # PID order, as discovered.
    SHARED = "shared"
    PRIVATE = "private"
    RSS = "rss"
    SWAP = "swap"
    NAME = "name"

    @classmethod
    def from_name(cls, name):
        """Return the key with the given name, or NONE if there is no such key.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return cls.NONE

    @property
    def field(self):
        """Name of the record attribute to sort on, or None."""
        if self is SortKey.NONE:
            return None
        return self.value


# Column headers, in display order.
SHARED_LABEL = "shared"
PRIVATE_LABEL = "private"
RSS_LABEL = "rss"
SWAP_LABEL = "swap"
SWAP_PSS_LABEL = "swappss"
NAME_LABEL = "name"

# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab
