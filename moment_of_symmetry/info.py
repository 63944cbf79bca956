"""Result records shared by the scale, family, ratio and EDO modules.

Name fields are optional enrichment from the name table and stay None
when a pattern has no entry.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional


@dataclass
class TamnamsInfo:
    """Naming information about a MOS pattern."""
    name: str
    prefix: Optional[str] = None
    abbreviation: Optional[str] = None
    family_prefix: Optional[str] = None
    subset: bool = False


@dataclass
class NamedPattern:
    """Mixin carrying the optional name fields of a MOS pattern."""
    name: Optional[str] = None
    prefix: Optional[str] = None
    abbreviation: Optional[str] = None
    family_prefix: Optional[str] = None
    subset: Optional[bool] = None

    def apply_names(self, info: Optional[TamnamsInfo]) -> None:
        """Copy the fields of a name table entry, if there is one."""
        if info is None:
            return
        self.name = info.name
        self.prefix = info.prefix
        self.abbreviation = info.abbreviation
        self.family_prefix = info.family_prefix
        self.subset = info.subset


@dataclass
class MosInfo(NamedPattern):
    """An abstract MOS pattern of a given size."""
    mos_pattern: str = ""
    number_of_large_steps: int = 0
    number_of_small_steps: int = 0
    size: int = 0


@dataclass
class ModeInfo:
    """A mode (rotation) of a MOS pattern."""
    period: int
    number_of_periods: int
    udp: str                      # "up|down" plus "(periods)" when multi-period
    mode: str                     # Step pattern such as "LLsLLLs"
    mode_name: Optional[str] = None


@dataclass
class MosScaleInfo(NamedPattern):
    """A MOS pattern realized with concrete step sizes."""
    mos_pattern: str = ""
    number_of_large_steps: int = 0
    number_of_small_steps: int = 0
    size_of_large_step: int = 0
    size_of_small_step: int = 0
    hardness: str = ""
    period: int = 0               # Size of one period in EDO steps
    number_of_periods: int = 1
    edo: int = 0
    bright_generator: int = 0
    dark_generator: int = 0
    period_monzo: tuple[int, int] = (0, 0)
    bright_generator_monzo: tuple[int, int] = (0, 0)


@dataclass
class ScaleInfo(NamedPattern):
    """A scale stacked from a generator / period ratio, MOS or not."""
    step_pattern: str = ""        # L = large, M = medium, s = small
    mos_pattern: Optional[str] = None
    mode_name: Optional[str] = None


@dataclass
class RangeInfo:
    """Generators (as fractions of the equave) that span a MOS pattern."""
    period: Fraction
    lower_bound: Fraction
    upper_bound: Fraction
    number_of_large_steps: int
    number_of_small_steps: int
    bright: bool
