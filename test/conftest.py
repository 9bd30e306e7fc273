"""Common fixtures for all tests."""

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

import pytest

H2O2_SERIES = """\
2
H2 O2
2
0.0   1.0  300.0  0.5  0.5
10.0  2.0  350.0  0.2  0.8
"""


@pytest.fixture
def write_series(tmp_path):
    """Return a function writing time-series text to a file under *tmp_path*."""
    def _write(text, name="series.dat"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)

    return _write


@pytest.fixture
def h2o2_series_file(write_series):
    """Two records of an H2/O2 mixture at t = 0 and t = 10."""
    return write_series(H2O2_SERIES, name="h2o2.dat")


@pytest.fixture(autouse=True)
def mem_usage(capsys, pytestconfig):
    yield

    # {{{ Memory usage reporting

    if not pytestconfig.option.verbose:
        return

    import os
    if os.uname().sysname == "Linux":
        fac = 1024
    elif os.uname().sysname == "Darwin":
        fac = 1024*1024

    from resource import RUSAGE_SELF, getrusage
    res = getrusage(RUSAGE_SELF)

    with capsys.disabled():
        print(f" HWM={res.ru_maxrss / fac}")

    # }}}
