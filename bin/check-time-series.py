#!/usr/bin/env python
"""Check a time-series inflow file before using it in a run."""

import logging
import sys

from transinflow.exceptions import TransientInflowError
from transinflow.timeseries import (
    MAX_SPECIES,
    check_time_series,
    read_time_series
)
from transinflow.species import make_species_lookup, resolve_species
from transinflow.boundary import MassQuantityMode
from transinflow.io import make_time_series_message

logger = logging.getLogger(__name__)


def main(filename, max_species=MAX_SPECIES, species_names=None, flux=False):
    """Read, check and optionally map the species of *filename*."""
    store = read_time_series(filename, max_species=max_species)
    check_time_series(store)

    species_map = None
    if species_names:
        species_map = resolve_species(store.species_names, len(species_names),
                                      make_species_lookup(species_names),
                                      path=filename)

    mode = MassQuantityMode.FLUX if flux else MassQuantityMode.FLOW_RATE
    print(make_time_series_message(store=store, mode=mode,
                                   species_map=species_map))


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Check a time-series inflow data file")
    parser.add_argument("filename", type=str)
    parser.add_argument("--max-species", type=int, default=MAX_SPECIES,
        help="largest number of species the file may declare")
    parser.add_argument("--species", nargs="+", metavar="NAME",
        help="simulation species names, in simulation order")
    parser.add_argument("--flux", action="store_true",
        help="read the mass column as a mass flux")
    args = parser.parse_args()

    logging.basicConfig(format="%(message)s", level=logging.INFO)

    try:
        main(args.filename, max_species=args.max_species,
             species_names=args.species, flux=args.flux)
    except TransientInflowError as err:
        logger.error(f"Time series check failed: {err}")
        sys.exit(1)
