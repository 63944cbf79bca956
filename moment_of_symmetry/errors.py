"""Exceptions raised by the MOS arithmetic.

All of them derive from ValueError so callers that only care about
"bad arguments" can catch the builtin.
"""


class MosError(ValueError):
    """Base class for every failure raised by this package."""


class InvalidInputError(MosError):
    """Step counts that are negative, non-integral or non-finite."""


class NotCoprimeError(MosError):
    """An operation that needs coprime integers received a common factor."""


class IncompatibleParametersError(MosError):
    """Options that contradict each other, such as mismatched up and down."""


class InvalidRangeError(MosError):
    """A brightness offset outside the scale or not a multiple of the periods."""


class TooManyStepSizesError(MosError):
    """A generated scale has four or more distinct step sizes."""


class NoPatternFoundError(MosError):
    """No MOS shape in the priority list fits the requested EDO."""


class OutOfRangeSearchError(MosError):
    """Scale size bounds for an exhaustive EDO search are out of range."""


class UnableToClassifyError(MosError):
    """A step ratio fell outside every named hardness ratio and range."""
