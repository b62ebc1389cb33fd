DOMAIN = "siddurcal"

# Placeholder rendered for any time that cannot be shown
UNAVAILABLE_GLYPH = "—"

TRADITION_ASHKENAZ = "ashkenaz"
TRADITION_SEFARD = "sefard"
TRADITION_EDOT_HAMIZRACH = "edot_hamizrach"
ALL_TRADITIONS = (TRADITION_ASHKENAZ, TRADITION_SEFARD, TRADITION_EDOT_HAMIZRACH)

MODE_BASIC = "basic"
MODE_FULL = "full"
SIDDUR_MODES = (MODE_BASIC, MODE_FULL)

IMPORTANCE_CORE = "core"
IMPORTANCE_EXTENDED = "extended"
IMPORTANCE_LEVELS = (IMPORTANCE_CORE, IMPORTANCE_EXTENDED)

DIASPORA = "diaspora"
ISRAEL = "israel"
BOTH = "both"
LOCALITIES = (DIASPORA, ISRAEL)

DAY_LENGTH_GRA = "gra"
DAY_LENGTH_MA = "ma"
DAY_LENGTH_MODELS = (DAY_LENGTH_GRA, DAY_LENGTH_MA)

TWILIGHT_FIXED_MINUTES = "fixedMinutes"
TWILIGHT_DEGREES = "degrees"
TWILIGHT_TYPES = (TWILIGHT_FIXED_MINUTES, TWILIGHT_DEGREES)

ROUNDING_NEAREST_MINUTE = "nearestMinute"
ROUNDING_NONE = "none"
ROUNDING_MODES = (ROUNDING_NEAREST_MINUTE, ROUNDING_NONE)

TIME_FORMAT_12H = "12h"
TIME_FORMAT_24H = "24h"
TIME_FORMATS = (TIME_FORMAT_12H, TIME_FORMAT_24H)

# Weekday keys, Sunday first (index 0 .. 6)
WEEKDAY_KEYS = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

OMER_DAYS = 49
