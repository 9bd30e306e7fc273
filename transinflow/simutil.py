"""Provide some utilities for configuring time-series inflow boundaries.

.. autofunction:: configurate
.. autofunction:: check_step
"""

__copyright__ = """
Copyright (C) 2026 University of Illinois Board of Trustees
"""

__license__ = """
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

import logging

logger = logging.getLogger(__name__)


def configurate(config_key, config_object=None, default_value=None):
    """Return a configured item from a configuration object.

    *config_object* may be a :class:`dict` or any object whose attributes hold
    the configuration. If *default_value* is given, the configured value is
    converted to its type. Strings configuring a :class:`bool` item are
    parsed, so ``"false"`` or ``"0"`` turn it off.

    Raises
    ------
    ValueError
        If the configured value cannot be converted.
    """
    if config_object is not None:
        d = config_object if isinstance(config_object, dict) else\
            config_object.__dict__
        if config_key in d:
            value = d[config_key]
            if isinstance(default_value, bool) and isinstance(value, str):
                return _parse_bool(config_key, value)
            if default_value is not None:
                return type(default_value)(value)
            return value
    return default_value


_TRUE_STRINGS = ("true", "yes", "on", "1")
_FALSE_STRINGS = ("false", "no", "off", "0", "")


def _parse_bool(config_key, value):
    lowered = value.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise ValueError(f"Cannot interpret '{value}' for '{config_key}' "
                     "as true or false.")


def check_step(step, interval):
    """
    Check step number against a user-specified interval.

    - Negative numbers mean 'never'.
    - Zero means 'always'.

    Useful for deciding whether the current step reports inflow values,
    or anything else that occurs on fixed intervals.
    """
    if interval == 0:
        return True
    elif interval < 0:
        return False
    elif step % interval == 0:
        return True
    return False
