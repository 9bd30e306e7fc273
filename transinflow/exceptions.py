"""Provide the exceptions raised while setting up time-series inflow data.

None of these terminate the run by themselves. The host decides what to do
with them, see :func:`transinflow.mpi.abort_on_fatal_error`.

.. autoexception:: TransientInflowError
.. autoexception:: BoundaryConfigurationError
.. autoexception:: IngestError
.. autoexception:: SpeciesCapacityError
.. autoexception:: DegenerateCompositionError
.. autoexception:: SpeciesMappingError
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


class TransientInflowError(RuntimeError):
    """Exception base class for time-series inflow errors.

    .. attribute:: path

        The time-series file the error refers to, or *None* if the
        error is not tied to a file.

    .. attribute:: message

        A :class:`str` describing the error, without the file prefix.
    """

    def __init__(self, message, path=None):
        """Record the offending file on creation."""
        self.path = path
        self.message = message
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class BoundaryConfigurationError(TransientInflowError):
    """Boundary condition options are inconsistent or name an unusable file."""

    pass


class IngestError(TransientInflowError):
    """A time-series file could not be parsed into a valid store.

    .. attribute:: record

        Zero-based index of the offending record, or *None* if the error
        occurred outside of the record table.
    """

    def __init__(self, message, path=None, record=None):
        self.record = record
        if record is not None:
            message = f"record {record}: {message}"
        super().__init__(message, path=path)


class SpeciesCapacityError(IngestError):
    """The file declares more species than the configured maximum."""

    pass


class DegenerateCompositionError(IngestError):
    """A record's mass fractions sum to zero and cannot be normalized."""

    pass


class SpeciesMappingError(TransientInflowError):
    """A file species name has no counterpart in the simulation.

    .. attribute:: species

        The species name that could not be placed, or *None* when the file
        names no species at all.
    """

    def __init__(self, message, species, path=None):
        self.species = species
        super().__init__(message, path=path)
