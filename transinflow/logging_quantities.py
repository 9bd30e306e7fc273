"""Support for time series logging of inflow boundary data."""

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

__doc__ = """
.. autoclass:: InflowQuantity
.. autofunction:: initialize_logmgr
.. autofunction:: logmgr_add_inflow_quantities
.. autofunction:: logmgr_set_inflow_time
"""

import logging
from typing import Optional

from logpyle import (LogManager, PostLogQuantity, add_run_info,
    add_general_quantities, add_simulation_quantities)

from transinflow.boundary import MassQuantityMode

logger = logging.getLogger(__name__)

_MASS_UNITS = {
    MassQuantityMode.FLOW_RATE: "kg/s",
    MassQuantityMode.FLUX: "kg/(m^2 s)",
}


def initialize_logmgr(enable_logmgr: bool,
                      filename: Optional[str] = None, mode: str = "wu",
                      mpi_comm=None) -> Optional[LogManager]:
    """Create and initialize a :class:`logpyle.LogManager` for an inflow run."""
    if not enable_logmgr:
        return None

    logmgr = LogManager(filename=filename, mode=mode, mpi_comm=mpi_comm)

    add_run_info(logmgr)
    add_general_quantities(logmgr)
    add_simulation_quantities(logmgr)

    return logmgr


class InflowQuantity(PostLogQuantity):
    """Logging support for one field of a time-series inflow.

    The inflow is evaluated at the time last passed to :meth:`set_time`,
    usually through :func:`logmgr_set_inflow_time`.

    .. automethod:: __init__
    .. automethod:: set_time
    """

    def __init__(self, inflow, field: str, name: str,
                 species_index: Optional[int] = None) -> None:
        """Log *field* of the :class:`~transinflow.boundary.InflowValues`.

        *field* is ``"mass_quantity"``, ``"stagnation_temperature"`` or
        ``"species_mass_fractions"``; the latter needs *species_index*.
        """
        if field == "mass_quantity":
            unit = _MASS_UNITS[inflow.mode]
            description = f"Inflow {inflow.mode.value.replace('_', ' ')}"
        elif field == "stagnation_temperature":
            unit = "K"
            description = "Inflow stagnation temperature"
        elif field == "species_mass_fractions":
            if species_index is None:
                raise ValueError("species_index is required for mass fractions")
            unit = "1"
            description = f"Inflow mass fraction of species {species_index}"
        else:
            raise ValueError(f"Unknown inflow field '{field}'")

        super().__init__(name, unit, description)

        self.inflow = inflow
        self.field = field
        self.species_index = species_index
        self.t = 0.

    def set_time(self, t: float) -> None:
        """Set the simulation time at which the inflow is evaluated."""
        self.t = t

    def __call__(self) -> float:
        """Return the inflow field at the current time."""
        value = getattr(self.inflow(self.t), self.field)
        if self.species_index is not None:
            return float(value[self.species_index])
        return float(value)


def logmgr_add_inflow_quantities(logmgr: LogManager, inflow,
                                 prefix: str = "inflow",
                                 species_names=None) -> None:
    """Add the mass quantity, stagnation temperature and mass fractions of *inflow*.

    *species_names* optionally labels the simulation species; mass fractions
    are only logged when it is given.
    """
    logmgr.add_quantity(InflowQuantity(
        inflow, "mass_quantity", f"{prefix}_{inflow.mode.value}"))
    logmgr.add_quantity(InflowQuantity(
        inflow, "stagnation_temperature", f"{prefix}_T0"))

    if species_names is not None:
        for i, name in enumerate(species_names):
            logmgr.add_quantity(InflowQuantity(
                inflow, "species_mass_fractions", f"{prefix}_Y_{name}",
                species_index=i))


def logmgr_set_inflow_time(mgr: LogManager, t: float) -> None:
    """Set the simulation time of every :class:`InflowQuantity` of *mgr*."""
    for gd_lst in [mgr.before_gather_descriptors,
            mgr.after_gather_descriptors]:
        for gd in gd_lst:
            if isinstance(gd.quantity, InflowQuantity):
                gd.quantity.set_time(t)
