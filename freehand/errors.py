from __future__ import annotations


class FreehandError(ValueError):
    """Base class for drawing precondition violations."""


class InvalidRadiusError(FreehandError):
    pass


class InvalidOctantError(FreehandError):
    pass
