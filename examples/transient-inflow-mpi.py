"""Drive a time-series inflow boundary through a mock time-stepping loop."""

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
import os

from transinflow.mpi import mpi_entry_point
from transinflow.boundary import (
    MASS_FLOW_RATE_TIME_SERIES,
    setup_time_series_inflow
)
from transinflow.species import make_species_lookup
from transinflow.simutil import check_step
from transinflow.io import make_inflow_status_message
from transinflow.logging_quantities import (
    initialize_logmgr,
    logmgr_add_inflow_quantities,
    logmgr_set_inflow_time
)

from logpyle import set_dt

logger = logging.getLogger(__name__)

# species of the uiuc ethylene mechanism, in mechanism order
SPECIES_NAMES = ["C2H4", "O2", "CO2", "CO", "H2O", "H2", "N2"]


@mpi_entry_point
def main(use_logmgr=True, casename="transient-inflow", data_filename=None,
         t_final=1.2e-3, dt=1e-5, nstatus=10):
    """Evaluate the inflow boundary once per step from 0 to *t_final*."""
    from mpi4py import MPI
    comm = MPI.COMM_WORLD
    rank = comm.Get_rank()

    if data_filename is None:
        data_filename = os.path.join(os.path.dirname(__file__), "data",
                                     "c2h4-inflow.dat")

    logmgr = initialize_logmgr(use_logmgr,
        filename=f"{casename}.sqlite", mode="wu", mpi_comm=comm)

    inflow_options = {
        MASS_FLOW_RATE_TIME_SERIES: data_filename,
        "check_time_series": True,
    }
    inflow = setup_time_series_inflow(
        inflow_options, len(SPECIES_NAMES), make_species_lookup(SPECIES_NAMES),
        comm=comm)

    if logmgr:
        logmgr_add_inflow_quantities(logmgr, inflow, species_names=SPECIES_NAMES)
        logmgr.add_watches([
            ("step.max", "step = {value}, "),
            ("t_sim.max", "sim time: {value:1.6e} s, "),
            ("inflow_mass_flow_rate.max", "mdot: {value:1.4e} kg/s, "),
            ("inflow_T0.max", "T0: {value:6.1f} K\n")
        ])

    step = 0
    t = 0.
    while t < t_final:
        if logmgr:
            logmgr_set_inflow_time(logmgr, t)
            logmgr.tick_before()

        values = inflow(t)
        if rank == 0 and check_step(step, nstatus):
            logger.info(make_inflow_status_message(t=t, values=values))

        step += 1
        t += dt

        if logmgr:
            set_dt(logmgr, dt)
            logmgr.tick_after()

    if logmgr:
        logmgr.close()


if __name__ == "__main__":
    import argparse
    casename = "transient-inflow"
    parser = argparse.ArgumentParser(description=f"Transinflow Example: {casename}")
    parser.add_argument("--log", action="store_true", default=True,
        help="turn on logging")
    parser.add_argument("--casename", help="casename to use for i/o")
    parser.add_argument("--data", help="time-series inflow data file")
    args = parser.parse_args()

    logging.basicConfig(format="%(message)s", level=logging.INFO)
    if args.casename:
        casename = args.casename

    main(use_logmgr=args.log, casename=casename, data_filename=args.data)

# vim: foldmethod=marker
