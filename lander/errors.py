"""Exception types raised by the lander simulator.

Three families of failure are distinguished:

- DomainError: the physics cannot be evaluated (zero-length direction,
  non-positive mass, zero engine thrust). Raised instead of letting NaN/Inf
  propagate into the state.
- ScenarioError: an unknown or unpopulated scenario was requested.
- SequencingError: the step driver was used out of order, e.g. stepped
  before a scenario was loaded.

Example:
    >>> from lander.errors import DomainError
    >>> from lander.vector import Vector3D
    >>>
    >>> try:
    ...     Vector3D.zero().norm()
    ... except DomainError as err:
    ...     print(err)
"""


class LanderError(Exception):
    """Base class for all lander simulator errors."""


class DomainError(LanderError, ValueError):
    """A physically invalid state made a computation undefined."""


class ScenarioError(LanderError, ValueError):
    """An unknown or unpopulated scenario was selected."""


class SequencingError(LanderError, RuntimeError):
    """The simulation was driven in an invalid order."""
