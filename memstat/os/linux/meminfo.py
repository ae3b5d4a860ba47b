#!/usr/bin/env python3

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Information about process memory usage.

Memory figures are read from the per-process smaps_rollup file, or from the
full smaps listing where the rollup is not available. All values are in KiB,
as the kernel reports them.
"""

import os
from collections import namedtuple

from memstat import logging

PROCROOT = "/proc"

# Line prefixes that contribute to a total, and the field they add to. Matched
# exactly, at the start of a line. Note that "Shared" and "Private" cover the
# _Clean, _Dirty and _Hugetlb variants, and "Pss" also covers the Pss_* lines.
FIELD_PREFIXES = (
    (b"Shared", "shared"),
    (b"Private", "private"),
    (b"Rss", "rss"),
    (b"Pss", "pss"),
    (b"Swap:", "swap"),
    (b"SwapPss:", "swap_pss"),
)

MEMORY_FIELDS = ("private", "shared", "rss", "pss", "swap", "swap_pss")


def parse_summary(bytesblob):
    """Sum the recognized fields of smaps or smaps_rollup text.

    Returns a dict with every name in MEMORY_FIELDS, each the sum of all
    matching lines. Values that are not integers count as zero.
    """
    totals = dict.fromkeys(MEMORY_FIELDS, 0)
    for line in bytesblob.split(b"\n"):
        for prefix, field in FIELD_PREFIXES:
            if line.startswith(prefix):
                totals[field] += _value_of(line)
                break
    return totals


def _value_of(line):
    # Pss:                 123 kB
    parts = line.split()
    if len(parts) < 2 or not parts[1].isdigit():
        logging.debug("meminfo: unusable value in line %r", line)
        return 0
    return int(parts[1])


class ProcessMemory(namedtuple("ProcessMemory",
                               ["pid", "name", "private", "shared", "rss", "pss",
                                "swap", "swap_pss"])):
    """Memory usage totals of one process, in KiB.

    Attributes:
        pid: int
        name: str, the command name, or empty if it could not be read.
        private: int
        shared: int
        rss: int
        pss: int
        swap: int
        swap_pss: int
    """

    __slots__ = ()

    COMM = "{procroot}/{pid}/comm"
    SMAPS_ROLLUP = "{procroot}/{pid}/smaps_rollup"
    SMAPS = "{procroot}/{pid}/smaps"

    @classmethod
    def from_text(cls, pid, name, bytesblob):
        return cls(pid, name, **parse_summary(bytesblob))

    @classmethod
    def from_pid(cls, pid, procroot=PROCROOT):
        """Read the name and memory summary of a process.

        Unreadable files mean no data. The record may then have all zero
        values, but is still returned.
        """
        name = _read_name(cls.COMM.format(procroot=procroot, pid=pid))
        text = _read_file(cls.SMAPS_ROLLUP.format(procroot=procroot, pid=pid))
        if text is None:
            text = _read_file(cls.SMAPS.format(procroot=procroot, pid=pid))
        return cls.from_text(pid, name, text or b"")

    @classmethod
    def from_main(cls):
        return cls.from_pid(os.getpid())


def _read_file(path):
    try:
        with open(path, "rb") as fo:
            return fo.read()
    except OSError as err:
        logging.debug("meminfo: can't read %s: %s", path, err.strerror)
        return None


def _read_name(path):
    text = _read_file(path)
    if not text:
        return ""
    return text.split(b"\n", 1)[0].decode("utf-8", "replace")


def iter_pids(procroot=PROCROOT):
    """Yield the process IDs visible under procroot, in ascending order.

    Only directories with all-digit names count. Anything else, or anything
    that vanishes while being looked at, is skipped.
    """
    pids = []
    try:
        with os.scandir(procroot) as it:
            for entry in it:
                if not (entry.name.isascii() and entry.name.isdigit()):
                    continue
                try:
                    if entry.is_dir():
                        pids.append(int(entry.name))
                except OSError:
                    continue
    except OSError as err:
        logging.exception_warning("meminfo: can't list {}".format(procroot), err)
        return
    yield from sorted(pids)


def collect(procroot=PROCROOT):
    """Return a list of ProcessMemory for processes with resident memory.

    The list is in discovery (PID) order.
    """
    processes = []
    dropped = 0
    for pid in iter_pids(procroot):
        process = ProcessMemory.from_pid(pid, procroot)
        if process.rss:
            processes.append(process)
        else:
            dropped += 1
    logging.debug("meminfo: %d processes, %d without resident memory", len(processes), dropped)
    return processes


if __name__ == "__main__":
    me = ProcessMemory.from_main()
    print(me)
    assert me.rss > 0
    processes = collect()
    print("processes with resident memory:", len(processes))
    assert os.getpid() in [p.pid for p in processes]

# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab
