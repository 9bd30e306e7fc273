"""MPI helper functionality.

.. autofunction:: mpi_entry_point
.. autofunction:: abort_on_fatal_error
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

from functools import wraps
import sys

from contextlib import contextmanager
from typing import Callable, Generator, Optional, TYPE_CHECKING

from transinflow.exceptions import TransientInflowError

import logging
logger = logging.getLogger(__name__)


if TYPE_CHECKING:
    from mpi4py.MPI import Comm


def _check_mpi4py_version() -> None:
    from mpi4py import MPI

    if MPI.COMM_WORLD.Get_rank() != 0:
        return

    import mpi4py

    mpi_ver = MPI.Get_version()

    logger.info(f"Using mpi4py version {mpi4py.__version__} with "
                f"'{MPI.Get_library_version().strip()}' "
                f"(MPI v{mpi_ver[0]}.{mpi_ver[1]}).")


def mpi_entry_point(func) -> Callable:
    """
    Return a decorator that designates a function as the "main" function for MPI.

    Declares that all MPI code that will be executed on the current process is
    contained within *func*. Calls `MPI_Init()`/`MPI_Init_thread()` and sets up a
    hook to call `MPI_Finalize()` on exit.
    """
    @wraps(func)
    def wrapped_func(*args, **kwargs) -> None:
        # We enforce this so that an exception raised on one rank terminates
        # all ranks.
        if "mpi4py.run" not in sys.modules:
            raise RuntimeError("Must run MPI scripts via mpi4py (i.e., 'python -m "
                        "mpi4py <args>').")

        if "mpi4py.MPI" in sys.modules:
            raise RuntimeError("mpi4py.MPI imported before designated MPI entry "
                        "point. Check for prior imports.")

        # Runs MPI_Init()/MPI_Init_thread() and sets up a hook for MPI_Finalize() on
        # exit
        from mpi4py import MPI  # noqa

        _check_mpi4py_version()

        func(*args, **kwargs)

    return wrapped_func


@contextmanager
def abort_on_fatal_error(comm: Optional["Comm"] = None,
                         errorcode: int = 1) -> Generator[None, None, None]:
    """Turn time-series setup errors into a run-wide abort.

    Any :class:`~transinflow.exceptions.TransientInflowError` raised in the
    managed block is logged with the rank that hit it. With a communicator,
    ``comm.Abort(errorcode)`` then ends every rank of the run. Without one,
    or if the abort returns, the error propagates to the caller.
    """
    try:
        yield
    except TransientInflowError as err:
        rank = comm.Get_rank() if comm is not None else 0
        logger.error(f"[{rank}] Fatal time series inflow error: {err}")
        if comm is not None:
            comm.Abort(errorcode)
        raise
