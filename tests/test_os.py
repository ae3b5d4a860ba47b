# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Unit test memstat.os modules against the running system.
"""

import os
import sys
import subprocess
from pathlib import Path

import pytest

TOPDIR = Path(__file__).resolve().parent.parent

pytestmark = pytest.mark.skipif(
    not sys.platform.startswith("linux") or not os.path.exists("/proc/self/smaps"),
    reason="needs a Linux /proc")


def test_os_meminfo():
    cp = subprocess.run([sys.executable, "-m", "memstat.os.meminfo"], cwd=str(TOPDIR),
                        stdout=subprocess.PIPE, stderr=subprocess.PIPE, encoding="utf-8")
    assert cp.returncode == 0, cp.stderr
    assert "processes with resident memory:" in cp.stdout


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
