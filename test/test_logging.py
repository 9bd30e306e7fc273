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

import pytest

from logpyle import LogManager

from transinflow.boundary import MASS_FLUX_TIME_SERIES, TimeSeriesInflow
from transinflow.logging_quantities import (
    InflowQuantity,
    initialize_logmgr,
    logmgr_add_inflow_quantities,
    logmgr_set_inflow_time
)
from transinflow.species import make_species_lookup

SIM_SPECIES = ["N2", "O2", "H2"]


@pytest.fixture
def basic_logmgr(tmp_path):
    # setup
    filename = str(tmp_path / "THIS_LOG_SHOULD_BE_DELETED.sqlite")
    logmgr = LogManager(filename, "wo")

    # give obj to test
    yield logmgr

    # clean up object
    logmgr.close()


@pytest.fixture
def inflow(h2o2_series_file):
    return TimeSeriesInflow.from_options(
        {MASS_FLUX_TIME_SERIES: h2o2_series_file}, len(SIM_SPECIES),
        make_species_lookup(SIM_SPECIES))


def _inflow_quantities(logmgr):
    return {gd.quantity.name: gd.quantity
            for gd_lst in [logmgr.before_gather_descriptors,
                           logmgr.after_gather_descriptors]
            for gd in gd_lst
            if isinstance(gd.quantity, InflowQuantity)}


def test_initialize_logmgr_disabled():
    assert initialize_logmgr(False) is None


def test_logmgr_inflow_quantities(basic_logmgr, inflow):
    logmgr_add_inflow_quantities(basic_logmgr, inflow, species_names=SIM_SPECIES)

    quantities = _inflow_quantities(basic_logmgr)
    assert set(quantities) == {"inflow_mass_flux", "inflow_T0", "inflow_Y_N2",
                               "inflow_Y_O2", "inflow_Y_H2"}
    assert quantities["inflow_mass_flux"].unit == "kg/(m^2 s)"
    assert quantities["inflow_T0"].unit == "K"

    logmgr_set_inflow_time(basic_logmgr, 5.0)
    assert quantities["inflow_mass_flux"]() == pytest.approx(1.5)
    assert quantities["inflow_T0"]() == pytest.approx(325.0)
    assert quantities["inflow_Y_N2"]() == 0.0
    assert quantities["inflow_Y_O2"]() == pytest.approx(0.65)
    assert quantities["inflow_Y_H2"]() == pytest.approx(0.35)

    logmgr_set_inflow_time(basic_logmgr, 50.0)
    assert quantities["inflow_mass_flux"]() == 2.0


def test_logmgr_inflow_without_species(basic_logmgr, inflow):
    logmgr_add_inflow_quantities(basic_logmgr, inflow, prefix="inlet")
    assert set(_inflow_quantities(basic_logmgr)) == {"inlet_mass_flux",
                                                     "inlet_T0"}


def test_inflow_quantity_fields(inflow):
    with pytest.raises(ValueError, match="Unknown inflow field"):
        InflowQuantity(inflow, "velocity", "inflow_velocity")
    with pytest.raises(ValueError, match="species_index"):
        InflowQuantity(inflow, "species_mass_fractions", "inflow_Y")
