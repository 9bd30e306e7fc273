__copyright__ = """Copyright (C) 2026 University of Illinois Board of Trustees"""

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

import numpy as np
import pytest

from transinflow.interpolation import (
    TimeSeriesInterpolator,
    find_interval,
    interpolate
)
from transinflow.timeseries import (
    TimeSeriesRecord,
    TimeSeriesStore,
    normalize_mass_fractions,
    read_time_series
)

import logging
logger = logging.getLogger(__name__)


def _make_store(rows, species_names=("H2", "O2")):
    records = [
        TimeSeriesRecord(time=t, mass_quantity=m, stagnation_temperature=t0,
                         species_mass_fractions=normalize_mass_fractions(y))
        for t, m, t0, y in rows]
    return TimeSeriesStore(species_names=species_names, records=records)


def _assert_same_values(rec, expected):
    assert rec.time == expected.time
    assert rec.mass_quantity == expected.mass_quantity
    assert rec.stagnation_temperature == expected.stagnation_temperature
    assert np.array_equal(rec.species_mass_fractions,
                          expected.species_mass_fractions)


@pytest.fixture
def ramp_store():
    return _make_store([
        (-2.0, 0.5, 280.0, [0.9, 0.1]),
        (0.0, 1.0, 300.0, [0.5, 0.5]),
        (0.5, 4.0, 310.0, [0.25, 0.75]),
        (3.0, 2.0, 500.0, [0.6, 0.4]),
        (7.25, 2.5, 420.0, [0.1, 0.9]),
    ])


@pytest.mark.parametrize("search", ["linear", "bisect"])
def test_h2o2_scenario(h2o2_series_file, search):
    store = read_time_series(h2o2_series_file)

    mid = interpolate(store, 5.0, search=search)
    assert mid.time == 5.0
    assert mid.mass_quantity == pytest.approx(1.5)
    assert mid.stagnation_temperature == pytest.approx(325.0)
    assert np.allclose(mid.species_mass_fractions, [0.35, 0.65])

    assert interpolate(store, -1.0, search=search) is store[0]
    assert interpolate(store, 20.0, search=search) is store[-1]


@pytest.mark.parametrize("search", ["linear", "bisect"])
@pytest.mark.parametrize("dt", [1e-12, 1.0, 1e6, np.inf])
def test_flat_extrapolation(ramp_store, search, dt):
    assert interpolate(ramp_store, ramp_store[0].time - dt,
                       search=search) is ramp_store[0]
    assert interpolate(ramp_store, ramp_store[-1].time + dt,
                       search=search) is ramp_store[-1]


@pytest.mark.parametrize("search", ["linear", "bisect"])
def test_endpoint_continuity(ramp_store, search):
    for rec in ramp_store:
        _assert_same_values(interpolate(ramp_store, rec.time, search=search), rec)


@pytest.mark.parametrize("search", ["linear", "bisect"])
def test_interval_affine(ramp_store, search):
    """Inside an interval every field is the linear blend of its endpoints."""
    rng = np.random.default_rng(seed=17)

    for a, b in zip(ramp_store.records[:-1], ramp_store.records[1:]):
        for t in rng.uniform(a.time, b.time, size=10):
            rec = interpolate(ramp_store, t, search=search)
            w = (t - a.time) / (b.time - a.time)

            for field in ["mass_quantity", "stagnation_temperature"]:
                lo, hi = sorted([getattr(a, field), getattr(b, field)])
                value = getattr(rec, field)
                assert lo <= value <= hi
                assert value == pytest.approx(
                    (1 - w)*getattr(a, field) + w*getattr(b, field))

            assert np.allclose(
                rec.species_mass_fractions,
                (1 - w)*a.species_mass_fractions + w*b.species_mass_fractions)
            assert np.sum(rec.species_mass_fractions) == pytest.approx(1.0)


@pytest.mark.parametrize("t", [-1e30, -1.0, 0.0, 4.0, 4.0 + 1e-9, 1e30])
def test_single_record(t):
    store = _make_store([(4.0, 1.2, 310.0, [0.3, 0.7])])

    assert interpolate(store, t) is store[0]
    assert interpolate(store, t, search="bisect") is store[0]


def test_duplicate_times():
    """A repeated time acts as a jump; the earlier interval wins at the jump."""
    store = _make_store([
        (0.0, 1.0, 300.0, [0.5, 0.5]),
        (5.0, 2.0, 320.0, [0.4, 0.6]),
        (5.0, 3.0, 340.0, [0.3, 0.7]),
        (10.0, 4.0, 360.0, [0.2, 0.8]),
    ])

    _assert_same_values(interpolate(store, 5.0), store[1])
    assert interpolate(store, 7.5).mass_quantity == pytest.approx(3.5)

    leading = _make_store([
        (0.0, 1.0, 300.0, [0.5, 0.5]),
        (0.0, 2.0, 320.0, [0.4, 0.6]),
    ])
    assert interpolate(leading, 0.0) is leading[0]
    assert interpolate(leading, 0.0, search="bisect") is leading[0]


def test_bisect_matches_linear(ramp_store):
    rng = np.random.default_rng(seed=3)
    queries = np.concatenate([
        rng.uniform(-5, 10, size=200),
        ramp_store.times,
    ])

    for t in queries:
        assert (find_interval(ramp_store, t, search="linear")
                == find_interval(ramp_store, t, search="bisect"))
        _assert_same_values(interpolate(ramp_store, t, search="bisect"),
                            interpolate(ramp_store, t, search="linear"))


def test_find_interval(ramp_store):
    assert find_interval(ramp_store, -3.0) is None
    assert find_interval(ramp_store, -2.0) == 0
    assert find_interval(ramp_store, 0.0) == 0
    assert find_interval(ramp_store, 0.1) == 1
    assert find_interval(ramp_store, 7.25) == 3
    assert find_interval(ramp_store, 8.0) is None


def test_unknown_search(ramp_store):
    with pytest.raises(ValueError, match="Unknown search method"):
        interpolate(ramp_store, 1.0, search="spline")
    with pytest.raises(ValueError, match="Unknown search method"):
        TimeSeriesInterpolator(ramp_store, search="spline")


def test_interpolator_object(ramp_store):
    interpolator = TimeSeriesInterpolator(ramp_store, search="bisect")

    assert interpolator.store is ramp_store
    assert interpolator(-10.0) is ramp_store[0]
    _assert_same_values(interpolator(1.75), interpolate(ramp_store, 1.75))
