""":mod:`transinflow.boundary` connects time series to inflow boundary options.

An inflow boundary takes its data from a time series when its options carry
exactly one of two file-name keys. The key decides how the mass column of
the file is understood.

Boundary Options
^^^^^^^^^^^^^^^^

.. autoclass:: MassQuantityMode
.. autodata:: MASS_FLOW_RATE_TIME_SERIES
.. autodata:: MASS_FLUX_TIME_SERIES
.. autodata:: CONSTANT_INFLOW_OPTIONS
.. autoclass:: TimeSeriesOption
.. autofunction:: validate_time_series_options

Inflow Evaluation
^^^^^^^^^^^^^^^^^

.. autoclass:: InflowValues
.. autoclass:: TimeSeriesInflow
.. autofunction:: setup_time_series_inflow
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
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from transinflow.exceptions import BoundaryConfigurationError
from transinflow.interpolation import SEARCH_METHODS, TimeSeriesInterpolator
from transinflow.io import make_time_series_message
from transinflow.mpi import abort_on_fatal_error
from transinflow.simutil import configurate
from transinflow.species import resolve_species
from transinflow.timeseries import (
    MAX_SPECIES,
    get_time_series,
    check_time_series
)

logger = logging.getLogger(__name__)


class MassQuantityMode(Enum):
    """Meaning of the mass column of a time-series file."""

    FLOW_RATE = "mass_flow_rate"
    FLUX = "mass_flux"


#: Option naming a time series whose mass column is a mass flow rate.
MASS_FLOW_RATE_TIME_SERIES = "mass_flow_rate_time_series"

#: Option naming a time series whose mass column is a mass flux.
MASS_FLUX_TIME_SERIES = "mass_flux_time_series"

_TIME_SERIES_MODES = {
    MASS_FLOW_RATE_TIME_SERIES: MassQuantityMode.FLOW_RATE,
    MASS_FLUX_TIME_SERIES: MassQuantityMode.FLUX,
}

#: Constant-value inflow options that cannot be combined with a time series.
CONSTANT_INFLOW_OPTIONS = (
    "mass_flow_rate",
    "mass_flux",
    "velocity",
    "density",
    "pressure",
    "temperature",
    "stagnation_temperature",
    "mass_fractions",
)


@dataclass(frozen=True)
class TimeSeriesOption:
    """A validated time-series reference from a boundary's options.

    .. attribute:: key
    .. attribute:: mode

        The :class:`MassQuantityMode` selected by *key*.

    .. attribute:: path
    """

    key: str
    mode: MassQuantityMode
    path: str


def _as_dict(options):
    return options if isinstance(options, dict) else options.__dict__


def validate_time_series_options(options) -> Optional[TimeSeriesOption]:
    """Check the time-series options of one inflow boundary.

    Parameters
    ----------
    options:
        The boundary's options, as a :class:`dict` or an object with
        attributes.

    Returns
    -------
    TimeSeriesOption or None
        *None* if the boundary does not use a time series; other checks are
        then responsible for its options.

    Raises
    ------
    BoundaryConfigurationError
        If both time-series keys are given, if a time series is combined with
        constant inflow options, if the value is not a file name, or if the
        file cannot be opened.
    """
    d = _as_dict(options)
    present = [key for key in _TIME_SERIES_MODES if key in d]
    if not present:
        return None

    if len(present) > 1:
        raise BoundaryConfigurationError(
            f"options '{present[0]}' and '{present[1]}' are mutually exclusive")

    key, = present
    conflicts = [name for name in CONSTANT_INFLOW_OPTIONS if name in d]
    if conflicts:
        raise BoundaryConfigurationError(
            f"option '{key}' cannot be combined with {', '.join(conflicts)}")

    value = d[key]
    if not isinstance(value, (str, os.PathLike)):
        raise BoundaryConfigurationError(
            f"option '{key}' must be a file name, got {type(value).__name__}")
    path = os.fspath(value)

    try:
        with open(path):
            pass
    except OSError as err:
        raise BoundaryConfigurationError(
            f"cannot open file named by '{key}': {err.strerror}",
            path=path) from err

    return TimeSeriesOption(key=key, mode=_TIME_SERIES_MODES[key], path=path)


@dataclass(frozen=True, eq=False)
class InflowValues:
    """Inflow boundary data at one simulation time.

    .. attribute:: mode

        The :class:`MassQuantityMode` of :attr:`mass_quantity`.

    .. attribute:: time
    .. attribute:: mass_quantity
    .. attribute:: stagnation_temperature
    .. attribute:: species_mass_fractions

        :class:`numpy.ndarray` sized to the simulation's species, zero for
        species the file does not name.

    .. autoattribute:: mass_flow_rate
    .. autoattribute:: mass_flux
    """

    mode: MassQuantityMode
    time: float
    mass_quantity: float
    stagnation_temperature: float
    species_mass_fractions: np.ndarray

    @property
    def mass_flow_rate(self) -> Optional[float]:
        """Return the mass flow rate, or *None* for mass flux data."""
        if self.mode is MassQuantityMode.FLOW_RATE:
            return self.mass_quantity
        return None

    @property
    def mass_flux(self) -> Optional[float]:
        """Return the mass flux, or *None* for mass flow rate data."""
        if self.mode is MassQuantityMode.FLUX:
            return self.mass_quantity
        return None


class TimeSeriesInflow:
    """Evaluate inflow boundary data from a time series.

    .. automethod:: __init__
    .. automethod:: __call__
    .. automethod:: from_options
    """

    def __init__(self, store, species_map, mode, search="linear"):
        """Initialize the inflow data source.

        Parameters
        ----------
        store: :class:`~transinflow.timeseries.TimeSeriesStore`
            The time series.
        species_map: :class:`~transinflow.species.SpeciesIndexMap`
            Placement of the file species in the simulation.
        mode: :class:`MassQuantityMode`
            Meaning of the mass column.
        search: str
            Interval search passed to
            :class:`~transinflow.interpolation.TimeSeriesInterpolator`.
        """
        self.store = store
        self.species_map = species_map
        self.mode = mode
        self._interpolator = TimeSeriesInterpolator(store, search=search)

    def __call__(self, t) -> InflowValues:
        """Return the :class:`InflowValues` at simulation time *t*."""
        rec = self._interpolator(t)
        return InflowValues(
            mode=self.mode, time=t,
            mass_quantity=rec.mass_quantity,
            stagnation_temperature=rec.stagnation_temperature,
            species_mass_fractions=self.species_map.scatter(
                rec.species_mass_fractions))

    @classmethod
    def from_options(cls, options, nspecies, species_lookup):
        """Build the inflow for a boundary whose options name a time series.

        Besides the time-series key, *options* may set ``max_species``,
        ``check_time_series`` (run
        :func:`~transinflow.timeseries.check_time_series` on the data) and
        ``time_series_search`` (``"linear"`` or ``"bisect"``).

        Raises
        ------
        BoundaryConfigurationError
            If the options are invalid or name no time series.
        IngestError
            If the file cannot be parsed or fails the optional check.
        SpeciesMappingError
            If the file species cannot be placed in the simulation.
        """
        option = validate_time_series_options(options)
        if option is None:
            raise BoundaryConfigurationError(
                f"boundary options name neither '{MASS_FLOW_RATE_TIME_SERIES}' "
                f"nor '{MASS_FLUX_TIME_SERIES}'")

        max_species = _configurate_option("max_species", options, MAX_SPECIES)
        check = _configurate_option("check_time_series", options, False)
        search = _configurate_option("time_series_search", options, "linear")
        if search not in SEARCH_METHODS:
            raise BoundaryConfigurationError(
                f"option 'time_series_search' must be one of {SEARCH_METHODS}, "
                f"got '{search}'")

        store = get_time_series(option.path, max_species)
        if check:
            check_time_series(store)

        species_map = resolve_species(store.species_names, nspecies,
                                      species_lookup, path=store.path)
        return cls(store, species_map, option.mode, search=search)


def _configurate_option(key, options, default):
    try:
        return configurate(key, options, default)
    except (TypeError, ValueError) as err:
        raise BoundaryConfigurationError(
            f"invalid value for option '{key}': {err}") from err


def setup_time_series_inflow(options, nspecies, species_lookup, comm=None):
    """Set up time-series inflow data for one boundary, or return *None*.

    Returns *None* when *options* name no time series. Setup errors go
    through :func:`~transinflow.mpi.abort_on_fatal_error`, so with *comm*
    given they end the run on all ranks.
    """
    with abort_on_fatal_error(comm):
        if validate_time_series_options(options) is None:
            return None
        inflow = TimeSeriesInflow.from_options(options, nspecies, species_lookup)

    if comm is None or comm.Get_rank() == 0:
        logger.info(make_time_series_message(
            store=inflow.store, mode=inflow.mode,
            species_map=inflow.species_map))
    return inflow
