"""
Constants for day weights, target kinds and weekday names
"""
from decimal import Decimal

# Day weights (full-day equivalents)
WEIGHT_FULL = Decimal("1")
WEIGHT_HALF = Decimal("0.5")
WEIGHT_NONE = Decimal("0")

# Target kinds
TARGET_MIN = "min_goal"
TARGET_MAX = "max_goal"
TARGET_SINGLE = "goal"

# Monetary rounding unit
CENT = Decimal("0.01")

# Largest accepted monetary input: 13 integer digits plus cents
AMOUNT_MAX_DIGITS = 15
AMOUNT_DECIMAL_PLACES = 2
MAX_AMOUNT = Decimal("9999999999999.99")

# Projection status thresholds (percent of target)
PROJECTION_EXCEEDED_PCT = Decimal("100")
PROJECTION_ON_TRACK_PCT = Decimal("80")

# Weekday names keyed by locale, indexed by date.weekday() (Monday=0, Sunday=6)
DEFAULT_LOCALE = "en"

WEEKDAY_NAMES = {
    "en": (
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    ),
    "pt_BR": (
        "Segunda",
        "Terça",
        "Quarta",
        "Quinta",
        "Sexta",
        "Sábado",
        "Domingo",
    ),
}

WEEKDAY_SHORT_NAMES = {
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    "pt_BR": ("Seg", "Ter", "Qua", "Qui", "Sex", "Sáb", "Dom"),
}

SUPPORTED_LOCALES = tuple(WEEKDAY_NAMES.keys())
