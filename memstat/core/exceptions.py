# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""All common exceptions."""


class MemstatError(Exception):
    """Base class for all memstat errors."""


class UsageError(MemstatError):
    """Bad command line options or arguments."""


# configuration errors
class ConfigError(MemstatError):
    """Base class for exceptions raised when querying a configuration.
    """


class ConfigValueError(ConfigError):
    """The value in the configuration is illegal."""


class ConfigTypeError(ConfigValueError):
    """The value in the configuration did not match the expected type.
    """


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab:fileencoding=utf-8
