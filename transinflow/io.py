"""I/O - related functions.

.. autofunction:: make_time_series_message
.. autofunction:: make_inflow_status_message
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


def make_time_series_message(*, store, mode, species_map=None):
    """Create a summary of a time series attached to an inflow boundary."""
    if species_map is None or species_map.active_count == 0:
        mapping = "composition ignored"
    else:
        mapping = ", ".join(
            f"{name}->{index}"
            for name, index in zip(store.species_names, species_map.indices))
    return (
        f"Time series inflow from '{store.path}'\n"
        f"===\n"
        f"Mass quantity:   {mode.value}\n"
        f"Num records:     {len(store)}\n"
        f"Time range:      [{store[0].time:g}, {store[-1].time:g}]\n"
        f"File species:    {' '.join(store.species_names) or '(none)'}\n"
        f"Species mapping: {mapping}\n"
    )


def make_inflow_status_message(*, t, values):
    """Make a one-line status message for inflow *values* at time *t*."""
    return (
        f"Inflow: {t=:.6e} {values.mode.value}={values.mass_quantity:.6g} "
        f"T0={values.stagnation_temperature:.6g}"
    )
