""":mod:`transinflow.timeseries` reads inflow time series from data files.

Data File Format
^^^^^^^^^^^^^^^^

The file is a stream of whitespace-separated ASCII tokens; line breaks carry
no meaning. All quantities are in SI units.

.. code-block:: none

    nspecies
    name_1 ... name_nspecies
    nrecords
    time mass_quantity T0 Y_1 ... Y_nspecies     (repeated nrecords times)

Whether *mass_quantity* is a mass flow rate or a mass flux is not part of
the file. It is decided by the boundary option that names the file, see
:mod:`transinflow.boundary`.

Records
^^^^^^^

.. autodata:: MAX_SPECIES
.. autoclass:: TimeSeriesRecord
.. autoclass:: TimeSeriesStore

Ingestion
^^^^^^^^^

.. autofunction:: read_time_series
.. autofunction:: get_time_series
.. autofunction:: parse_time_series
.. autofunction:: normalize_mass_fractions
.. autofunction:: check_time_series
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
from typing import Iterator, Optional, Tuple

import numpy as np
from pytools import ProcessLogger, memoize

from transinflow.exceptions import (
    IngestError,
    SpeciesCapacityError,
    DegenerateCompositionError
)

logger = logging.getLogger(__name__)

#: Default upper bound on the number of species a time-series file may declare.
MAX_SPECIES = 20


@dataclass(frozen=True, eq=False)
class TimeSeriesRecord:
    r"""One time-stamped row of inflow data.

    .. attribute:: time

        Simulation time of the sample.

    .. attribute:: mass_quantity

        Mass flow rate $\dot{m}$ or mass flux, depending on the boundary option.

    .. attribute:: stagnation_temperature

        Stagnation temperature $T_0$ of the incoming flow.

    .. attribute:: species_mass_fractions

        Read-only :class:`numpy.ndarray` of mass fractions, one per file species,
        normalized to sum to one. A file without species carries the single
        slot ``[1.0]``.

    .. autoattribute:: nspecies
    """

    time: float
    mass_quantity: float
    stagnation_temperature: float
    species_mass_fractions: np.ndarray

    @property
    def nspecies(self) -> int:
        """Return the number of mass fraction slots."""
        return len(self.species_mass_fractions)


@dataclass(frozen=True, eq=False)
class TimeSeriesStore:
    """Ordered, immutable sequence of :class:`TimeSeriesRecord`.

    Records are kept in file order. Interpolation assumes the times are
    non-decreasing; :func:`check_time_series` verifies that.

    .. attribute:: species_names

        Tuple of species names in the order of the mass fraction slots.

    .. attribute:: records

        Tuple of :class:`TimeSeriesRecord`, never empty.

    .. attribute:: path

        The file the records were read from, if any.

    .. autoattribute:: nspecies
    .. autoattribute:: times
    """

    species_names: Tuple[str, ...]
    records: Tuple[TimeSeriesRecord, ...]
    path: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "species_names", tuple(self.species_names))
        object.__setattr__(self, "records", tuple(self.records))

        if not self.records:
            raise IngestError("time series has no records", path=self.path)

        nslots = max(len(self.species_names), 1)
        for irec, rec in enumerate(self.records):
            if rec.nspecies != nslots:
                raise IngestError(
                    f"expected {nslots} mass fractions, got {rec.nspecies}",
                    path=self.path, record=irec)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index) -> TimeSeriesRecord:
        return self.records[index]

    def __iter__(self) -> Iterator[TimeSeriesRecord]:
        return iter(self.records)

    @property
    def nspecies(self) -> int:
        """Return the number of species declared by the file."""
        return len(self.species_names)

    @property
    def times(self) -> np.ndarray:
        """Return the record times as an array, in file order."""
        return np.array([rec.time for rec in self.records])


class _TokenReader:
    """Sequential consumer of whitespace-separated tokens."""

    def __init__(self, text, path=None):
        self._tokens = text.split()
        self._pos = 0
        self.path = path

    @property
    def remaining(self):
        return len(self._tokens) - self._pos

    def next_token(self, what, record=None):
        if self._pos >= len(self._tokens):
            raise IngestError(f"unexpected end of data while reading {what}",
                              path=self.path, record=record)
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def next_int(self, what, record=None):
        token = self.next_token(what, record)
        try:
            return int(token)
        except ValueError:
            raise IngestError(f"expected an integer for {what}, got '{token}'",
                              path=self.path, record=record) from None

    def next_float(self, what, record=None):
        token = self.next_token(what, record)
        try:
            return float(token)
        except ValueError:
            raise IngestError(f"expected a real number for {what}, got '{token}'",
                              path=self.path, record=record) from None


def normalize_mass_fractions(mass_fractions, path=None, record=None):
    """Return a read-only copy of *mass_fractions* scaled to sum to one.

    Raises
    ------
    DegenerateCompositionError
        If the fractions sum to zero.
    """
    y = np.array(mass_fractions, dtype=np.float64)
    total = np.sum(y)
    if total == 0:
        raise DegenerateCompositionError(
            "mass fractions sum to zero and cannot be normalized",
            path=path, record=record)
    y = y / total
    y.flags.writeable = False
    return y


def _read_record(reader, irec, nspecies):
    time = reader.next_float("time", irec)
    mass_quantity = reader.next_float("mass quantity", irec)
    stagnation_temperature = reader.next_float("stagnation temperature", irec)

    # slot 0 stays 1 when the file carries no species at all
    y = np.zeros(max(nspecies, 1))
    y[0] = 1.0
    for i in range(nspecies):
        y[i] = reader.next_float(f"mass fraction {i+1} of {nspecies}", irec)

    return TimeSeriesRecord(
        time=time, mass_quantity=mass_quantity,
        stagnation_temperature=stagnation_temperature,
        species_mass_fractions=normalize_mass_fractions(
            y, path=reader.path, record=irec))


def parse_time_series(text, max_species=MAX_SPECIES, path=None):
    """Parse time-series *text* into a :class:`TimeSeriesStore`.

    Parameters
    ----------
    text: str
        The file contents, see the format description above.
    max_species: int
        Largest number of species the data may declare.
    path: str
        File name used in diagnostics and recorded in the store.

    Raises
    ------
    IngestError
        If the data is short, has malformed tokens or counts, or has no
        records.
    SpeciesCapacityError
        If more than *max_species* species are declared.
    DegenerateCompositionError
        If a record's mass fractions sum to zero.
    """
    reader = _TokenReader(text, path=path)

    nspecies = reader.next_int("the number of species")
    if nspecies < 0:
        raise IngestError(f"number of species must not be negative, got {nspecies}",
                          path=path)
    if nspecies > max_species:
        raise SpeciesCapacityError(
            f"{nspecies} species declared, at most {max_species} are supported",
            path=path)

    species_names = tuple(
        reader.next_token(f"species name {i+1} of {nspecies}")
        for i in range(nspecies))

    nrecords = reader.next_int("the number of records")
    if nrecords < 1:
        raise IngestError(f"at least one record is required, got {nrecords}",
                          path=path)

    records = tuple(_read_record(reader, irec, nspecies)
                    for irec in range(nrecords))

    if reader.remaining:
        logger.warning(f"{path}: ignoring {reader.remaining} tokens after "
                       f"the last of {nrecords} records.")

    return TimeSeriesStore(species_names=species_names, records=records,
                           path=path)


def read_time_series(path, max_species=MAX_SPECIES):
    """Read the time-series file at *path* into a :class:`TimeSeriesStore`.

    The file is parsed every time this is called; use :func:`get_time_series`
    to share one store between boundaries naming the same file.

    Raises
    ------
    IngestError
        If the file cannot be opened or read, or for any of the reasons
        listed in :func:`parse_time_series`.
    """
    path = os.fspath(path)
    try:
        with open(path) as f:
            text = f.read()
    except OSError as err:
        raise IngestError(f"cannot open time series file: {err.strerror}",
                          path=path) from err
    except UnicodeDecodeError as err:
        raise IngestError("time series file is not a text file",
                          path=path) from err

    with ProcessLogger(logger, f"parsing time series '{path}'"):
        store = parse_time_series(text, max_species=max_species, path=path)

    logger.info(f"Time series '{path}': {len(store)} records, "
                f"{store.nspecies} species, "
                f"t = [{store[0].time:g}, {store[-1].time:g}]")
    return store


@memoize
def _get_time_series(path, max_species):
    return read_time_series(path, max_species)


def get_time_series(path, max_species=MAX_SPECIES):
    """Return the :class:`TimeSeriesStore` for *path*, parsing it at most once.

    Stores are cached by resolved file name and *max_species*. They are
    immutable, so boundaries and ranks' threads may share them freely.
    """
    return _get_time_series(os.path.realpath(os.fspath(path)), max_species)


def check_time_series(store):
    """Check *store* for data that interpolation cannot handle sensibly.

    This pass is optional and not part of ingestion. It verifies that all
    values are finite, that mass fractions are non-negative, that stagnation
    temperatures are positive and that times do not decrease.

    Raises
    ------
    IngestError
        Naming the first offending record.
    """
    previous_time = None
    for irec, rec in enumerate(store):
        values = np.concatenate(([rec.time, rec.mass_quantity,
                                  rec.stagnation_temperature],
                                 rec.species_mass_fractions))
        if not np.all(np.isfinite(values)):
            raise IngestError("record contains non-finite values",
                              path=store.path, record=irec)
        if np.any(rec.species_mass_fractions < 0):
            raise IngestError("record contains negative mass fractions",
                              path=store.path, record=irec)
        if rec.stagnation_temperature <= 0:
            raise IngestError(
                f"stagnation temperature must be positive, got "
                f"{rec.stagnation_temperature}", path=store.path, record=irec)
        if previous_time is not None and rec.time < previous_time:
            raise IngestError(f"time {rec.time} is before the preceding "
                              f"time {previous_time}",
                              path=store.path, record=irec)
        previous_time = rec.time
