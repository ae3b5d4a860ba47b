"""Helper functions for unit tests. """


ROLLUP_TEMPLATE = """\
55d60111e000-7ffd8a5f6000 ---p 00000000 00:00 0                          [rollup]
Rss:                {rss} kB
Pss:                {pss} kB
Shared_Clean:       {shared} kB
Shared_Dirty:       0 kB
Private_Clean:      {private} kB
Private_Dirty:      0 kB
Referenced:         {rss} kB
Anonymous:          0 kB
LazyFree:           0 kB
AnonHugePages:      0 kB
Swap:               {swap} kB
SwapPss:            {swap_pss} kB
Locked:             0 kB
"""

MAPPING_TEMPLATE = """\
{start:x}-{end:x} r-xp 00000000 fd:03 389921                     /bin/cat
Size:                 32 kB
KernelPageSize:        4 kB
MMUPageSize:           4 kB
Rss:                {rss} kB
Pss:                {pss} kB
Shared_Clean:       {shared} kB
Shared_Dirty:          0 kB
Private_Clean:      {private} kB
Private_Dirty:         0 kB
Referenced:         {rss} kB
Anonymous:             0 kB
Swap:               {swap} kB
SwapPss:            {swap_pss} kB
Locked:                0 kB
VmFlags: rd ex mr mw me dw sd
"""


def rollup_text(rss=0, pss=0, shared=0, private=0, swap=0, swap_pss=0):
    """Text of a smaps_rollup file with the given totals."""
    return ROLLUP_TEMPLATE.format(rss=rss, pss=pss, shared=shared, private=private,
                                  swap=swap, swap_pss=swap_pss).encode("ascii")


def smaps_text(*mappings):
    """Text of a smaps file with one section per dict of values."""
    sections = []
    start = 0x55d60111e000
    for values in mappings:
        fields = dict(rss=0, pss=0, shared=0, private=0, swap=0, swap_pss=0)
        fields.update(values)
        sections.append(MAPPING_TEMPLATE.format(start=start, end=start + 0x8000, **fields))
        start += 0x8000
    return "".join(sections).encode("ascii")


class FakeProc:
    """A directory laid out like the process pseudo-filesystem."""

    def __init__(self, root):
        self.root = root

    def __str__(self):
        return str(self.root)

    def add(self, pid, name="", rollup=None, smaps=None):
        piddir = self.root / str(pid)
        piddir.mkdir()
        if name is not None:
            (piddir / "comm").write_bytes(name.encode("utf-8") + b"\n")
        if rollup is not None:
            (piddir / "smaps_rollup").write_bytes(rollup)
        if smaps is not None:
            (piddir / "smaps").write_bytes(smaps)
        return piddir
