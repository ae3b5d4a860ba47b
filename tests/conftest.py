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
pytest configuration and common code lives here.
"""

import pytest

from memstat import config

from .util import FakeProc


@pytest.fixture
def procroot(tmp_path):
    """An empty, fake process root directory."""
    root = tmp_path / "proc"
    root.mkdir()
    return FakeProc(root)


@pytest.fixture
def cf(procroot):
    """Fresh configuration singleton pointing at the fake process root."""
    config._CONFIG = None
    cf = config.get_config(initdict={"procroot": str(procroot)})
    yield cf
    config._CONFIG = None

# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
