"""Names for MOS patterns and their modes.

This is a lookup collaborator: every caller treats a missing name as a
normal outcome. Patterns without a table entry may still get a name
derived from their parent, grandparent or great-grandparent pattern.
"""

from typing import Optional

from .info import TamnamsInfo
from .pattern import StepCountPair, mos_pattern_string, parse_mos_pattern

# Partial TAMNAMS table keyed by MOS pattern
MOS_NAMES: dict[str, TamnamsInfo] = {
    "1L 1s": TamnamsInfo("trivial"),
    "1L 2s": TamnamsInfo("antrial", prefix="atri"),
    "2L 1s": TamnamsInfo("trial", prefix="tri"),
    "1L 3s": TamnamsInfo("antetric", prefix="atetra"),
    "2L 2s": TamnamsInfo("biwood", prefix="biwd"),
    "3L 1s": TamnamsInfo("tetric", prefix="tetra"),
    "1L 4s": TamnamsInfo("pedal", prefix="ped"),
    "2L 3s": TamnamsInfo("pentic", prefix="pent"),
    "3L 2s": TamnamsInfo("antipentic", prefix="apent"),
    "4L 1s": TamnamsInfo("manual", prefix="manu"),
    "1L 5s": TamnamsInfo("antimachinoid", prefix="amech"),
    "2L 4s": TamnamsInfo("malic", prefix="mal", abbreviation="alem"),
    "3L 3s": TamnamsInfo("triwood", prefix="trwd"),
    "4L 2s": TamnamsInfo("citric", prefix="citro", abbreviation="cit"),
    "5L 1s": TamnamsInfo("machinoid", prefix="mech"),
    "1L 6s": TamnamsInfo("onyx", prefix="on", subset=True),
    "2L 5s": TamnamsInfo("antidiatonic", prefix="pel"),
    "3L 4s": TamnamsInfo("mosh", prefix="mosh"),
    "4L 3s": TamnamsInfo("smitonic", prefix="smi"),
    "5L 2s": TamnamsInfo("diatonic", prefix="dia"),
    "6L 1s": TamnamsInfo("archeotonic", prefix="arch"),
    "1L 7s": TamnamsInfo("antipine", prefix="apine"),
    "2L 6s": TamnamsInfo("subaric", prefix="subar"),
    "3L 5s": TamnamsInfo("checkertonic", prefix="check"),
    "4L 4s": TamnamsInfo("tetrawood", prefix="tetwd"),
    "5L 3s": TamnamsInfo("oneirotonic", prefix="oneiro"),
    "6L 2s": TamnamsInfo("ekic", prefix="ek"),
    "7L 1s": TamnamsInfo("pine", prefix="pine"),
    "1L 8s": TamnamsInfo("antisubneutralic", prefix="ablu"),
    "2L 7s": TamnamsInfo("balzano", prefix="bal"),
    "3L 6s": TamnamsInfo("tcherepnin", prefix="tcher"),
    "4L 5s": TamnamsInfo("gramitonic", prefix="gram"),
    "5L 4s": TamnamsInfo("semiquartal", prefix="cthon"),
    "6L 3s": TamnamsInfo("hyrulic", prefix="hyru"),
    "7L 2s": TamnamsInfo("armotonic", prefix="arm"),
    "8L 1s": TamnamsInfo("subneutralic", prefix="blu"),
    "1L 9s": TamnamsInfo("antisinatonic", prefix="asina"),
    "2L 8s": TamnamsInfo("jaric", prefix="jara"),
    "3L 7s": TamnamsInfo("sephiroid", prefix="seph"),
    "4L 6s": TamnamsInfo("lime", prefix="lime"),
    "5L 5s": TamnamsInfo("pentawood", prefix="pwd"),
    "6L 4s": TamnamsInfo("lemon", prefix="lem"),
    "7L 3s": TamnamsInfo("dicoid", prefix="dico"),
    "8L 2s": TamnamsInfo("taric", prefix="tara"),
    "9L 1s": TamnamsInfo("sinatonic", prefix="sina"),
    "5L 7s": TamnamsInfo("p-chromatic", prefix="pychro"),
    "7L 5s": TamnamsInfo("m-chromatic", prefix="mechro"),
}

# Mode names keyed by step pattern
MODE_NAMES: dict[str, str] = {
    # 5L 2s
    "LLLsLLs": "Lydian",
    "LLsLLLs": "Ionian",
    "LLsLLsL": "Mixolydian",
    "LsLLLsL": "Dorian",
    "LsLLsLL": "Aeolian",
    "sLLLsLL": "Phrygian",
    "sLLsLLL": "Locrian",
    # 3L 3s
    "LsLsLs": "Tonic",
    # 3L 4s
    "LssLsLs": "Kleeth",
    # 6L 1s
    "LLLLLsL": "Karakalian",
}

EXTRA_MODE_NAMES: dict[str, str] = {
    "LLsLLLs": "Major",
    "LsLLsLL": "Minor",
}


def _is_prefixed(count_l: int, count_s: int) -> bool:
    """Whether a pattern's family prefix may be used to name descendants."""
    if count_l + count_s <= 10:
        return True
    if count_l == count_s and count_l <= 10:
        return True
    if count_l < count_s:
        count_l, count_s = count_s, count_l
    return (count_l, count_s) in {
        (7, 5),    # mellow / pychro
        (12, 5),   # pyen / supen
        (12, 7),   # flaen / meen
        (13, 1),   # tro / antro
        (15, 2),   # alisa / lisa
        (19, 3),   # kai / zheli
    }


class NameTable:
    """Pattern and mode names with ancestor-based fallbacks.

    Table entries that have a prefix but no abbreviation or family
    prefix inherit the prefix for both.
    """

    def __init__(
        self,
        mos_names: Optional[dict[str, TamnamsInfo]] = None,
        mode_names: Optional[dict[str, str]] = None,
    ):
        """Initialize the name table.

        Args:
            mos_names: Pattern string → naming info (default: built-in table)
            mode_names: Step pattern → mode name (default: built-in table)
        """
        self.mos_names = MOS_NAMES if mos_names is None else mos_names
        self.mode_names = MODE_NAMES if mode_names is None else mode_names

    def _entry(self, mos_pattern: str) -> Optional[TamnamsInfo]:
        entry = self.mos_names.get(mos_pattern)
        if entry is None:
            return None
        return TamnamsInfo(
            name=entry.name,
            prefix=entry.prefix,
            abbreviation=entry.abbreviation or entry.prefix,
            family_prefix=entry.family_prefix or entry.prefix,
            subset=entry.subset,
        )

    def _family_prefix(self, count_l: int, count_s: int) -> Optional[str]:
        if not _is_prefixed(count_l, count_s):
            return None
        info = self.lookup(count_l, count_s)
        if info is None:
            return None
        return info.family_prefix

    def lookup(self, number_of_large_steps: int, number_of_small_steps: int) -> Optional[TamnamsInfo]:
        """Name a MOS pattern given its step counts.

        Args:
            number_of_large_steps: Number of large steps
            number_of_small_steps: Number of small steps

        Returns:
            TamnamsInfo, or None if neither the table nor the ancestors name it
        """
        large, small = number_of_large_steps, number_of_small_steps
        if large < 1 or small < 1:
            return None

        entry = self._entry(mos_pattern_string(large, small))
        if entry is not None:
            return entry

        if large == small:
            return TamnamsInfo(f"{large}-wood")

        parent_l = min(large, small)
        parent_s = abs(large - small)
        prefix = self._family_prefix(parent_l, parent_s)
        if prefix:
            suffix = "mechromic" if large > small else "pechromic"
            return TamnamsInfo(prefix + suffix)

        grandparent_l = min(parent_l, parent_s)
        grandparent_s = abs(parent_l - parent_s)
        prefix = self._family_prefix(grandparent_l, grandparent_s)
        if prefix:
            if parent_l > parent_s:
                suffix = "fenharmic" if large > small else "menharmic"
            else:
                suffix = "penharmic" if large > small else "senharmic"
            return TamnamsInfo(prefix + suffix)

        great_l = min(grandparent_l, grandparent_s)
        great_s = abs(grandparent_l - grandparent_s)
        prefix = self._family_prefix(great_l, great_s)
        if prefix:
            hardness = "so" if grandparent_l > grandparent_s else "ha"
            if parent_l > parent_s:
                code = "qu" if large > small else "mi"
            else:
                code = "pa" if large > small else "u"
            return TamnamsInfo(f"{code}{hardness}-{prefix}tonic")

        return None

    def tamnams_info(self, mos_pattern: str) -> Optional[TamnamsInfo]:
        """Name a MOS pattern given as a string such as "5L 2s"."""
        counts = parse_mos_pattern(mos_pattern)
        return self.lookup(counts.number_of_large_steps, counts.number_of_small_steps)

    def mode_name(self, mode: str, extra: bool = False) -> Optional[str]:
        """Name a mode given in step pattern format such as "LLsLLLs".

        Args:
            mode: Step pattern of the mode
            extra: If True, append common names such as "(Major)"

        Returns:
            Name of the mode, or None if unknown
        """
        name = self.mode_names.get(mode)
        if name is not None and extra and mode in EXTRA_MODE_NAMES:
            name = f"{name} ({EXTRA_MODE_NAMES[mode]})"
        return name


DEFAULT_NAMES = NameTable()


def tamnams_info(mos_pattern: str) -> Optional[TamnamsInfo]:
    """Name a MOS pattern using the default table."""
    return DEFAULT_NAMES.tamnams_info(mos_pattern)


def names_for(counts: StepCountPair) -> Optional[TamnamsInfo]:
    """Name a StepCountPair using the default table."""
    return DEFAULT_NAMES.lookup(counts.number_of_large_steps, counts.number_of_small_steps)


def mode_name(mode: str, extra: bool = False) -> Optional[str]:
    """Name a mode using the default table."""
    return DEFAULT_NAMES.mode_name(mode, extra)
