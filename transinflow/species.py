""":mod:`transinflow.species` places file species into the simulation's species set.

.. autodata:: SPECIES_NOT_FOUND
.. autoclass:: SpeciesIndexMap
.. autofunction:: resolve_species
.. autofunction:: make_species_lookup
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
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from transinflow.exceptions import SpeciesMappingError

logger = logging.getLogger(__name__)

#: Returned by species lookups for names the simulation does not know.
SPECIES_NOT_FOUND = -1


@dataclass(frozen=True, eq=False)
class SpeciesIndexMap:
    """Map from file species slots to simulation species indices.

    .. attribute:: active_count

        Number of file species carried into the simulation. Zero when the
        simulation tracks at most one species and composition is ignored.

    .. attribute:: indices

        Read-only integer :class:`numpy.ndarray`; ``indices[k]`` is the
        simulation index of file species *k*.

    .. attribute:: nspecies

        Number of species in the simulation.

    .. automethod:: scatter
    """

    active_count: int
    indices: np.ndarray
    nspecies: int

    def scatter(self, mass_fractions):
        """Return the simulation-sized mass fraction vector for *mass_fractions*.

        The result always has :attr:`nspecies` entries. Simulation species
        absent from the file get zero. For single-species simulations the
        result is ``[1.0]``, and it is empty when no species are tracked.
        """
        if self.nspecies <= 1:
            return np.ones(self.nspecies)

        y = np.zeros(self.nspecies)
        y[self.indices] = np.asarray(mass_fractions)[:self.active_count]
        return y


def _is_not_found(index):
    return index is None or index < 0


def resolve_species(species_names, nspecies, species_lookup, path=None):
    """Resolve file *species_names* against the simulation's species.

    Parameters
    ----------
    species_names:
        Sequence of species names, in file order.
    nspecies: int
        Number of species in the simulation.
    species_lookup:
        Callable returning the simulation index for a species name, or a
        negative value (or *None*) if the name is unknown. Not called when
        *nspecies* is 0 or 1.
    path: str
        The time-series file, used in diagnostics.

    Raises
    ------
    SpeciesMappingError
        If any name cannot be placed, if two names land on the same index,
        or if the file names no species for a multi-species simulation.
    """
    if nspecies <= 1:
        logger.debug(f"{path}: simulation tracks {nspecies} species, "
                     "ignoring file composition.")
        indices = np.zeros(len(species_names), dtype=int)
        indices.flags.writeable = False
        return SpeciesIndexMap(active_count=0, indices=indices,
                               nspecies=nspecies)

    if not species_names:
        raise SpeciesMappingError(
            f"time series names no species, but the simulation has "
            f"{nspecies} species", species=None, path=path)

    indices = np.empty(len(species_names), dtype=int)
    owners = {}
    for k, name in enumerate(species_names):
        index = species_lookup(name)
        if _is_not_found(index):
            raise SpeciesMappingError(
                f"species '{name}' is not part of the simulation's mechanism",
                species=name, path=path)
        if index >= nspecies:
            raise SpeciesMappingError(
                f"species '{name}' resolved to index {index}, but the "
                f"simulation has only {nspecies} species",
                species=name, path=path)
        if index in owners:
            raise SpeciesMappingError(
                f"species '{name}' and '{owners[index]}' both map to "
                f"simulation species {index}", species=name, path=path)
        owners[index] = name
        indices[k] = index

    indices.flags.writeable = False
    return SpeciesIndexMap(active_count=len(species_names), indices=indices,
                           nspecies=nspecies)


def make_species_lookup(species_table):
    """Return a species lookup function for :func:`resolve_species`.

    *species_table* may be a sequence of species names in simulation order, a
    mapping from name to index, or a mechanism object with a
    ``species_index`` method (e.g. a :mod:`cantera` solution or a
    :mod:`pyrometheus` mechanism). Unknown names yield
    :data:`SPECIES_NOT_FOUND` instead of raising.
    """
    if hasattr(species_table, "species_index"):
        def lookup(name):
            try:
                return int(species_table.species_index(name))
            except (KeyError, ValueError):
                return SPECIES_NOT_FOUND
        return lookup

    if isinstance(species_table, Mapping):
        name_to_index = dict(species_table)
    else:
        name_to_index = {name: i for i, name in enumerate(species_table)}

    def lookup(name):
        return name_to_index.get(name, SPECIES_NOT_FOUND)

    return lookup
