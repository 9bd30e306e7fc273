""":mod:`transinflow.interpolation` evaluates a time series at arbitrary times.

Values are blended linearly between the two records bracketing the query
time. Outside the recorded range the first or last record is returned
unchanged.

.. autofunction:: interpolate
.. autofunction:: find_interval
.. autoclass:: TimeSeriesInterpolator
.. autodata:: SEARCH_METHODS
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

from bisect import bisect_left

from transinflow.timeseries import TimeSeriesRecord

#: Interval search methods accepted by :func:`interpolate`.
SEARCH_METHODS = ("linear", "bisect")


def _find_interval_linear(store, t):
    for i in range(len(store) - 1):
        if store[i].time <= t <= store[i+1].time:
            return i
    return None


def _find_interval_bisect(store, t):
    times = [rec.time for rec in store]
    # first i+1 >= 1 with times[i+1] >= t
    upper = bisect_left(times, t, lo=1)
    if upper == len(times):
        return None
    return upper - 1


def find_interval(store, t, search="linear"):
    """Return *i* of the first record pair with ``store[i].time <= t <= store[i+1].time``.

    Returns *None* if no pair brackets *t*. The ``"bisect"`` search assumes
    non-decreasing times and then finds the same pair as the ``"linear"`` one.
    """
    if search == "linear":
        return _find_interval_linear(store, t)
    elif search == "bisect":
        if t < store[0].time:
            return None
        return _find_interval_bisect(store, t)
    raise ValueError(f"Unknown search method '{search}', "
                     f"expected one of {SEARCH_METHODS}.")


def interpolate(store, t, *, search="linear"):
    r"""Return the :class:`~transinflow.timeseries.TimeSeriesRecord` at time *t*.

    For $t_i \le t \le t_{i+1}$, every field is blended as $s a + w b$ with
    $w = (t - t_i)/(t_{i+1} - t_i)$ and $s = 1 - w$. The blended mass
    fractions are not normalized again, so their sum may be off by rounding.

    Below the first and above the last record time, that record object itself
    is returned. This also covers stores holding a single record.

    Parameters
    ----------
    store: :class:`~transinflow.timeseries.TimeSeriesStore`
        Non-empty store with non-decreasing record times.
    t: float
        Query time.
    search: str
        ``"linear"`` (default) or ``"bisect"``.
    """
    if t < store[0].time:
        return store[0]

    i = find_interval(store, t, search=search)
    if i is None:
        return store[-1]

    a = store[i]
    b = store[i+1]
    dt = b.time - a.time
    if dt == 0:
        return a

    w = (t - a.time) / dt
    s = 1 - w
    return TimeSeriesRecord(
        time=t,
        mass_quantity=s*a.mass_quantity + w*b.mass_quantity,
        stagnation_temperature=(s*a.stagnation_temperature
                                + w*b.stagnation_temperature),
        species_mass_fractions=(s*a.species_mass_fractions
                                + w*b.species_mass_fractions))


class TimeSeriesInterpolator:
    """Callable binding a store to :func:`interpolate`.

    .. automethod:: __init__
    .. automethod:: __call__
    """

    def __init__(self, store, search="linear"):
        """Bind *store*, using *search* to locate intervals."""
        if search not in SEARCH_METHODS:
            raise ValueError(f"Unknown search method '{search}', "
                             f"expected one of {SEARCH_METHODS}.")
        self.store = store
        self.search = search

    def __call__(self, t):
        """Return the interpolated record at time *t*."""
        return interpolate(self.store, t, search=self.search)
