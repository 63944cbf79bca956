"""Configuration constants for the MOS scale engine."""

# =============================================================================
# Scale Construction Defaults
# =============================================================================

# Step sizes in EDO steps when none are given (the "basic" 2:1 tuning)
DEFAULT_SIZE_OF_LARGE_STEP = 2
DEFAULT_SIZE_OF_SMALL_STEP = 1

# Accidental convention for parent/daughter overlays: "sharp", "flat" or "both"
DEFAULT_ACCIDENTALS = "sharp"

# =============================================================================
# Generator Ratios
# =============================================================================

# Floats are snapped to the simplest fraction within this absolute distance
# before any continued fraction work
FLOAT_SIMPLIFY_TOLERANCE = 1e-12

# =============================================================================
# EDO Map
# =============================================================================

# Largest MOS size included by make_edo_map() when none is given
DEFAULT_EDO_MAP_MAX_SIZE = 12

# One (large, small) step size pair per hardness class
EDO_MAP_STEP_SIZES: list[tuple[int, int]] = [
    (2, 1),  # basic
    (3, 2),  # soft
    (3, 1),  # hard
    (4, 3),  # supersoft
    (4, 1),  # superhard
    (5, 3),  # semisoft
    (5, 2),  # semihard

    (5, 4),  # ultrasoft
    (5, 1),  # ultrahard

    (7, 5),  # parasoft
    (7, 4),  # minisoft
    (7, 3),  # minihard
    (7, 2),  # parahard

    (8, 5),  # quasisoft
    (8, 3),  # quasihard
]

# =============================================================================
# EDO Search
# =============================================================================

# Shapes tried in order by any_for_edo(); the last few only matter for tiny EDOs
SEARCH_STEP_COUNTS: list[tuple[int, int]] = [
    (5, 2),  # diatonic
    (4, 3),  # smitonic
    (3, 4),  # mosh
    (2, 5),  # antidiatonic

    (3, 5),  # checkertonic
    (5, 3),  # oneirotonic
    (6, 2),  # ekic
    (2, 6),  # subaric

    (4, 2),  # citric
    (2, 4),  # malic
    (5, 1),  # machinoid

    (2, 3),  # pentic
    (3, 2),  # antipentic
    (1, 4),  # pedal

    (1, 3),  # antetric

    (1, 2),  # antrial
    (2, 1),  # trial

    (1, 1),  # trivial
]
