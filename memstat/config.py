# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
r"""Configuration object and factory function.

Based on the confuse YAML configuration module.

The default values are embedded in the file config_default.yaml next to this
module. Only that file is read; a user configuration directory is never
consulted. Callers may override values with an initial dictionary or keyword
arguments, which take precedence over the defaults.
"""

from collections import ChainMap

import confuse

from memstat.core.exceptions import ConfigTypeError, ConfigValueError

_CONFIG = None  # singleton instance.


class Config(ChainMap):
    """Top-level configuration object.

    A Singleton configuration object.
    A subclass of :py:class:`collections.ChainMap`, it allows chaining other configurations later.
    """

    def __init__(self, *maps):
        self.__dict__["maps"] = list(maps) or [{}]

    def __getattr__(self, name):
        try:
            return self.__getitem__(name)
        except KeyError:
            raise AttributeError("Config: No attribute or key {!r}".format(name)) from None

    def __setattr__(self, name, val):
        self.__setitem__(name, val)


class ConfigDict(dict):
    """Configuration Dictionary.

    Provides both attribute style and normal mapping style syntax to access
    mapping values.

    Also features "reaching into" sub-containers using a dot-delimited syntax
    for the key:

        >>> cf = config.get_config()
        >>> print(cf.report.padding)
        5
        >>> cf["report.padding"]
        5
    """

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__, dict.__repr__(self))

    def __setitem__(self, name, value):
        d, name = self._get_subtree(name)
        return dict.__setitem__(d, name, value)

    def __getitem__(self, name):
        d, name = self._get_subtree(name)
        return dict.__getitem__(d, name)

    def _get_subtree(self, name):
        d = self
        parts = name.split(".")
        for part in parts[:-1]:
            d = d.setdefault(part, self.__class__())
        return d, parts[-1]

    __setattr__ = __setitem__

    def __getattr__(self, name):
        try:
            return self.__getitem__(name)
        except KeyError:
            raise AttributeError("AttrDict: No attribute or key {!r}".format(name)) from None


def _to_configdict(mapping):
    d = ConfigDict()
    for key, value in mapping.items():
        if isinstance(value, dict):
            value = _to_configdict(value)
        dict.__setitem__(d, key, value)
    return d


def get_config(initdict=None, **kwargs):
    """Get primary configuration.

    Returns a Configuration instance containing configuration parameters. An
    extra dictionary may be merged in with the 'initdict' parameter.  And
    finally, extra options may also be added with keyword parameters.

    There is only one Config object in the program, and this will return it. This is the primary
    interface to obtain it.

    Returns:
        A :class:`Config` instance.
    """
    global _CONFIG
    if _CONFIG is None:
        cf = confuse.Configuration("memstat", "memstat", read=False)
        cf.read(user=False)
        if isinstance(initdict, dict):
            cf.set(initdict)
        if kwargs:
            cf.set(kwargs)
        _CONFIG = Config(_to_configdict(cf.flatten()))
    return _CONFIG


def validate(cf):
    """Check the report settings for usable values.

    Raises:
        ConfigTypeError if a value has the wrong type.
        ConfigValueError if a value is out of range.
    """
    report = cf["report"]
    for name in ("padding", "rule"):
        value = report.get(name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigTypeError("report.{} should be an integer, not {!r}".format(name, value))
        if value < 0:
            raise ConfigValueError("report.{} may not be negative: {}".format(name, value))
    if not isinstance(report.get("unit"), str):
        raise ConfigTypeError("report.unit should be a string, not {!r}".format(report.get("unit")))
    if not isinstance(cf.get("procroot"), str):
        raise ConfigTypeError("procroot should be a path string, not {!r}".format(cf.get("procroot")))
    return cf


# vim:ts=4:sw=4:softtabstop=4:smarttab:expandtab
