"""Exception hierarchy for animation-validator.

Recovery outcomes are never exceptions: they are terminal ``FixState``
values on each binding. Exceptions are reserved for malformed input
documents and misuse of a closed session.
"""

from __future__ import annotations

__all__ = ["AnimationValidatorError", "SceneFormatError", "SessionClosedError"]


class AnimationValidatorError(Exception):
    """Base class for all errors raised by animation-validator."""


class SceneFormatError(AnimationValidatorError, ValueError):
    """A scene, hierarchy or clip document does not have the expected shape."""


class SessionClosedError(AnimationValidatorError, RuntimeError):
    """An operation was attempted on a ValidatorSession after ``close()``."""
