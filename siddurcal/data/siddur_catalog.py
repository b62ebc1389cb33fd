# siddur_catalog.py
"""
Placeholder siddur catalog.

Four levels, each entry pointing at its parent by id:
- categories: top-level sections (Daily, Shabbat, Fast Days …)
- services:   prayer services inside a category          (category_id)
- buckets:    structural sections of a service           (service_id)
- items:      individual prayers and notes               (bucket_id)

Every entry carries id, title, description, order, and optionally
importance ("core" | "extended"), nusach (traditions, default all three),
applicability (see siddurcal.applicability.SiddurApplicability) and notes.
Items may also carry an outline and free-form tags.

The weekday Amidah buckets for Shacharit, Mincha and Ma'ariv are filled
by _weekday_amidah_items() with the nineteen blessings plus an opening and
a conclusion.
"""

# ══════════════════════════════════════════════════════════════════════════════
# CATEGORIES
# ══════════════════════════════════════════════════════════════════════════════

CATEGORIES: list[dict] = [
    {"id": "daily", "title": "Daily", "description": "Weekday services and shared daily additions.", "order": 1},
    {"id": "shabbat", "title": "Shabbat", "description": "Welcoming, praying, and departing Shabbat.", "order": 2, "applicability": {"shabbat": True}},
    {"id": "rosh_chodesh", "title": "Rosh Chodesh", "description": "New month services with Hallel and Musaf.", "order": 3, "applicability": {"rosh_chodesh": True}},
    {"id": "festivals_high_holidays", "title": "Festivals & High Holidays", "description": "Major festivals, Yamim Nora'im, and their unique prayers.", "order": 4},
    {"id": "fast_days", "title": "Fast Days", "description": "The six communal fasts and their liturgy.", "order": 5},
    {"id": "synagogue_flow", "title": "Synagogue Service Flow", "description": "Torah service flow, aliyot, and kaddish quick references.", "order": 6},
    {"id": "practice_specific", "title": "Practice-Specific Blessings", "description": "Daily routines, seasonal practices, and experiential brachot.", "order": 7},
    {"id": "meals", "title": "Meals & Food Blessings", "description": "Blessings before and after eating with meal rituals.", "order": 8},
    {"id": "bedtime_personal", "title": "Bedtime & Personal", "description": "Bedtime Shema, personal reflection, and travel prayers.", "order": 9},
    {"id": "life_cycle", "title": "Life-Cycle & Special Occasions", "description": "From birth and naming to mourning and milestones.", "order": 10},
    {"id": "seasonal_inserts", "title": "Additions & Seasonal Inserts", "description": "Reminders for text inserts and calendar-sensitive changes.", "order": 11},
]

# ══════════════════════════════════════════════════════════════════════════════
# SERVICES - (id, category_id, order, title, description[, applicability])
# ══════════════════════════════════════════════════════════════════════════════

SERVICE_ROWS: list[tuple] = [
    ("daily-shacharit", "daily", 10, "Shacharit (Weekday)", "Morning service for weekdays.", {"shabbat": False}),
    ("daily-mincha", "daily", 20, "Mincha", "Afternoon service."),
    ("daily-maariv", "daily", 30, "Ma'ariv", "Evening service for weekdays."),
    ("daily-musaf", "daily", 40, "Musaf (Weekdays on special days)", "Additional service for Rosh Chodesh and festivals that fall on weekdays.", {"rosh_chodesh": True}),
    ("daily-shared", "daily", 50, "Shared Daily Additions", "Common additions like Hallel, Torah readings, and seasonal notes."),
    ("shabbat-kabbalat", "shabbat", 10, "Kabbalat Shabbat", "Welcoming Shabbat with psalms and song.", {"shabbat": True}),
    ("shabbat-evening", "shabbat", 20, "Shabbat Evening", "Maariv of Shabbat with Kiddush guidance.", {"shabbat": True}),
    ("shabbat-morning", "shabbat", 30, "Shabbat Morning", "Shacharit, Torah service, and Musaf components.", {"shabbat": True}),
    ("shabbat-musaf", "shabbat", 40, "Shabbat Musaf", "Additional Amidah for Shabbat mornings.", {"shabbat": True}),
    ("shabbat-mincha", "shabbat", 50, "Shabbat Mincha", "Afternoon service with Torah reading.", {"shabbat": True}),
    ("shabbat-havdalah", "shabbat", 60, "Havdalah", "Closing Shabbat with wine, spices, and flame.", {"motzaei_shabbat": True}),
    ("rosh-chodesh-shacharit", "rosh_chodesh", 10, "Rosh Chodesh Shacharit", "Morning service with Ya'aleh V'yavo and partial Hallel.", {"rosh_chodesh": True}),
    ("rosh-chodesh-musaf", "rosh_chodesh", 20, "Rosh Chodesh Musaf", "Musaf Amidah for the new month.", {"rosh_chodesh": True}),
    ("rosh-chodesh-hallel", "rosh_chodesh", 30, "Rosh Chodesh Hallel", "Order of psalms for partial Hallel.", {"rosh_chodesh": True}),
    ("festival-rosh-hashanah", "festivals_high_holidays", 10, "Rosh Hashanah", "High Holiday structure with Malchuyot, Zichronot, and Shofarot.", {"holidays": ["rosh_hashanah"]}),
    ("festival-yom-kippur", "festivals_high_holidays", 20, "Yom Kippur", "Kol Nidrei through Ne'ilah.", {"holidays": ["yom_kippur"]}),
    ("festival-pesach", "festivals_high_holidays", 30, "Pesach", "Festival services including Chol HaMoed variations.", {"holidays": ["pesach"]}),
    ("festival-shavuot", "festivals_high_holidays", 40, "Shavuot", "Tikkun Leil Shavuot and Musaf additions.", {"holidays": ["shavuot"]}),
    ("festival-sukkot", "festivals_high_holidays", 50, "Sukkot", "Hoshana circuits and lulav blessings.", {"holidays": ["sukkot"]}),
    ("festival-shemini-atzeret", "festivals_high_holidays", 60, "Shemini Atzeret & Simchat Torah", "Musaf, Geshem, and Hakafot planning.", {"holidays": ["shemini_atzeret", "simchat_torah"]}),
    ("festival-chanukah", "festivals_high_holidays", 70, "Chanukah", "Candle lighting and Al HaNisim inserts.", {"holidays": ["chanukah"]}),
    ("festival-purim", "festivals_high_holidays", 80, "Purim", "Megillah, Mishloach Manot, and Seudah.", {"holidays": ["purim"]}),
    ("fast-gedaliah", "fast_days", 10, "Tzom Gedaliah", "Fast day schedule and readings.", {"fast_days": ["tzom_gedaliah"]}),
    ("fast-asara-btevet", "fast_days", 20, "Asara B'Tevet", "Morning and Mincha customs for the fast.", {"fast_days": ["asara_btevet"]}),
    ("fast-taanit-esther", "fast_days", 30, "Ta'anit Esther", "Fast preceding Purim.", {"fast_days": ["taanit_esther"]}),
    ("fast-shivah-asar", "fast_days", 40, "Shivah Asar B'Tammuz", "Summer fast liturgy.", {"fast_days": ["shivah_asar_btammuz"]}),
    ("fast-tisha-bav", "fast_days", 50, "Tisha B'Av", "Night and day services with kinot.", {"fast_days": ["tisha_bav"]}),
    ("fast-taanit-bechorot", "fast_days", 60, "Ta'anit Bechorot", "Fast of the firstborn before Pesach.", {"fast_days": ["taanit_bechorot"]}),
    ("flow-torah-service", "synagogue_flow", 10, "Torah Service", "Step-by-step aliyah and scroll handling.", {"requires_minyan": True}),
    ("flow-kaddish", "synagogue_flow", 20, "Kaddish Variants", "When to say each form of Kaddish.", {"requires_minyan": True}),
    ("flow-aliyot", "synagogue_flow", 30, "Aliyot & Blessings", "Blessings before and after Torah and Haftarah.", {"requires_minyan": True}),
    ("flow-special-readings", "synagogue_flow", 40, "Special Readings", "Maftir, Haftara introductions, and special cases."),
    ("practice-daily", "practice_specific", 10, "Daily Practices", "Blessings for routine actions."),
    ("practice-seasonal", "practice_specific", 20, "Seasonal Moments", "Seasonal mitzvot and experiences."),
    ("practice-phenomena", "practice_specific", 30, "Phenomena & Experiences", "Brachot for natural wonders and news."),
    ("meals-before", "meals", 10, "Before Eating", "Brachot over foods and drink."),
    ("meals-after", "meals", 20, "After Eating", "Birkat Hamazon and related blessings."),
    ("meals-special", "meals", 30, "Festive Meals", "Kiddush, Havdalah, and seudot mitzvah."),
    ("personal-bedtime", "bedtime_personal", 10, "Bedtime", "Kriat Shema al HaMitah and nighttime rituals."),
    ("personal-reflection", "bedtime_personal", 20, "Personal Reflection", "Daily accounting and gratitude practices."),
    ("personal-travel", "bedtime_personal", 30, "Travel & Safety", "Tefilat HaDerech and other protections."),
    ("lifecycle-birth", "life_cycle", 10, "Birth & Naming", "Welcoming a new baby."),
    ("lifecycle-coming-of-age", "life_cycle", 20, "Coming of Age", "Bar/Bat Mitzvah guidance."),
    ("lifecycle-wedding", "life_cycle", 30, "Wedding", "Erusin, nissuin, and Sheva Brachot."),
    ("lifecycle-mourning", "life_cycle", 40, "Mourning", "Shiva structure and comfort practices.", {"mourner_only": True}),
    ("lifecycle-home", "life_cycle", 50, "Home & Milestones", "Chanukat Bayit, anniversaries, and milestones."),
    ("seasonal-amidah", "seasonal_inserts", 10, "Amidah Inserts", "Seasonal swaps in the Amidah."),
    ("seasonal-guides", "seasonal_inserts", 20, "Seasonal Guides", "Quick references for added texts."),
    ("seasonal-special-days", "seasonal_inserts", 30, "Special Day Reminders", "What changes when certain days arrive."),
]

# ══════════════════════════════════════════════════════════════════════════════
# BUCKETS with their ITEMS
# ══════════════════════════════════════════════════════════════════════════════

BUCKET_DEFINITIONS: list[dict] = [
    {
        "id": "daily-shacharit-morning-prep",
        "title": "Awakening & Preparation",
        "description": "Morning blessings before formal prayer begins.",
        "service_id": "daily-shacharit",
        "order": 10,
        "items": [
            {"id": "daily-modeh-ani", "title": "Modeh Ani", "description": "Gratitude upon waking.", "order": 10},
            {"id": "daily-netilat-yadayim", "title": "Netilat Yadayim", "description": "Hand washing blessing to begin the day.", "order": 20},
            {
                "id": "daily-birchot-hashachar",
                "title": "Birchot HaShachar",
                "description": "Series of recognitions for daily abilities and freedoms.",
                "outline": ["Opening", "Fifteen blessings", "Closing passages"],
                "order": 30,
            },
            {
                "id": "daily-tallit",
                "title": "Blessing on the Tallit",
                "description": "Wrapping instructions and kavvanot for the tallit.",
                "order": 40,
            },
            {
                "id": "daily-tefillin",
                "title": "Blessings on Tefillin",
                "description": "Shel yad and shel rosh with placement notes.",
                "order": 50,
                "applicability": {"shabbat": False},
                "notes": "Omitted on Shabbat and festivals.",
            },
        ],
    },
    {
        "id": "daily-shacharit-pesukei",
        "title": "Pesukei D'Zimra",
        "description": "Psalms of praise building toward the Shema.",
        "service_id": "daily-shacharit",
        "order": 20,
        "items": [
            {"id": "daily-baruch-sheamar", "title": "Baruch She'amar", "description": "Opening blessing for the psalms section.", "order": 10},
            {"id": "daily-hodu", "title": "Hodu LaShem", "description": "Psalm celebrating divine kindness.", "order": 20},
            {"id": "daily-yehi-kavod", "title": "Yehi Kavod", "description": "Verses praising God's glory across generations.", "order": 30},
            {"id": "daily-ashrei", "title": "Ashrei", "description": "Alphabetic psalm anchoring the section.", "order": 40},
            {"id": "daily-psalms-146-150", "title": "Halleluyah Psalms", "description": "Final psalms crescendoing to Yishtabach.", "order": 50},
            {
                "id": "daily-nishmat",
                "title": "Nishmat Kol Chai",
                "description": "Shabbat and festival expansion of praise.",
                "order": 60,
                "importance": "extended",
                "applicability": {"shabbat": True},
                "notes": "Optional on weekdays.",
            },
            {"id": "daily-yishtabach", "title": "Yishtabach", "description": "Closing blessing sealing Pesukei D'Zimra.", "order": 70}
        ],
    },
    {
        "id": "daily-shacharit-shema",
        "title": "Shema and Blessings",
        "description": "From Barchu through redemption before the Amidah.",
        "service_id": "daily-shacharit",
        "order": 30,
        "items": [
            {"id": "daily-barchu", "title": "Barchu", "description": "Call to prayer inviting the minyan into the blessings.", "order": 10, "applicability": {"requires_minyan": True}},
            {"id": "daily-yotzer-or", "title": "Yotzer Or", "description": "Blessing praising the renewal of light.", "order": 20},
            {"id": "daily-ahavah-rabbah", "title": "Ahavah Rabbah", "description": "Love of Torah blessing preparing for Shema.", "order": 30},
            {
                "id": "daily-shema-paragraphs",
                "title": "Shema Paragraphs",
                "description": "Three paragraphs of the Shema with focus hints.",
                "outline": ["Shema/V'ahavta", "Vehaya Im Shamoa", "Vayomer"],
                "order": 40,
            },
            {"id": "daily-emet-veyatziv", "title": "Emet V'Yatziv", "description": "Blessing of redemption linking to the Amidah.", "order": 50}
        ],
    },
    {
        "id": "daily-shacharit-weekday-amidah",
        "title": "Weekday Amidah",
        "description": "Silent Amidah with nineteen blessings and concluding customs.",
        "service_id": "daily-shacharit",
        "order": 40,
        "applicability": {"shabbat": False},
        "items": []
    },
    {
        "id": "daily-shacharit-post",
        "title": "Post-Amidah Flow",
        "description": "Supplications, psalms, and concluding prayers after the silent Amidah.",
        "service_id": "daily-shacharit",
        "order": 50,
        "applicability": {"shabbat": False},
        "items": [
            {
                "id": "daily-tachanun-long",
                "title": "Tachanun (Long Form)",
                "description": "Monday/Thursday version including Vidui and the Thirteen Attributes.",
                "order": 10,
                "importance": "extended",
                "applicability": {"shabbat": False, "weekdays": ["mon", "thu"]},
                "notes": "Skipped on festivals, Rosh Chodesh, and joyous occasions.",
            },
            {
                "id": "daily-tachanun-short",
                "title": "Tachanun (Daily Form)",
                "description": "Standard weekday supplication recited seated.",
                "order": 20,
                "applicability": {"shabbat": False}
            },
            {"id": "daily-ashrei-repeat", "title": "Ashrei", "description": "Psalm bridging to concluding prayers.", "order": 30},
            {"id": "daily-uva-letzion", "title": "U'va Letzion", "description": "Kedusha with Aramaic translation.", "order": 40},
            {"id": "daily-shir-shel-yom", "title": "Shir Shel Yom", "description": "Daily psalm for each day of the week.", "order": 50},
            {"id": "daily-aleinu", "title": "Aleinu", "description": "Final declaration of hope and unity.", "order": 60}
        ],
    },
    {
        "id": "daily-shacharit-omer",
        "title": "Counting the Omer",
        "description": "Blessing and daily count between Pesach and Shavuot.",
        "service_id": "daily-shacharit",
        "order": 60,
        "applicability": {"omer": True},
        "items": [
            {"id": "daily-omer-intro", "title": "Omer Introduction", "description": "Preparatory verses such as Psalm 67 or Ana Bekoach.", "order": 10, "applicability": {"omer": True}},
            {"id": "daily-omer-count", "title": "Today's Count", "description": "Blessing and counting formula for the current day.", "order": 20, "applicability": {"omer": True}}
        ],
    },
    {
        "id": "daily-mincha-opening",
        "title": "Mincha Opening",
        "description": "Ashrei and Half Kaddish before the Amidah.",
        "service_id": "daily-mincha",
        "order": 10,
        "items": [
            {"id": "daily-mincha-ashrei", "title": "Ashrei", "description": "Psalm 145 before Mincha.", "order": 10},
            {
                "id": "daily-mincha-kaddish",
                "title": "Half Kaddish",
                "description": "Leader's Kaddish marking the transition to the Amidah.",
                "order": 20,
                "applicability": {"requires_minyan": True},
                "notes": "Requires a minyan.",
            },
        ],
    },
    {
        "id": "daily-mincha-amidah",
        "title": "Mincha Amidah",
        "description": "Weekday Amidah repeated in the afternoon service.",
        "service_id": "daily-mincha",
        "order": 20,
        "applicability": {"shabbat": False},
        "items": []
    },
    {
        "id": "daily-mincha-conclusion",
        "title": "Mincha Conclusion",
        "description": "Tachanun, Aleinu, and final Kaddishim.",
        "service_id": "daily-mincha",
        "order": 30,
        "applicability": {"shabbat": False},
        "items": [
            {"id": "daily-mincha-tachanun", "title": "Mincha Tachanun", "description": "Short supplication after the Amidah.", "order": 10, "applicability": {"shabbat": False}},
            {"id": "daily-mincha-aleinu", "title": "Aleinu", "description": "Closing prayer for Mincha.", "order": 20},
            {
                "id": "daily-mincha-kaddish-yatom",
                "title": "Mourner's Kaddish",
                "description": "Opportunity for mourners after Mincha.",
                "order": 30,
                "applicability": {"requires_minyan": True, "mourner_only": True, "kaddish_type": "yatom"}
            },
        ],
    },
    {
        "id": "daily-maariv-shema",
        "title": "Ma'ariv Shema and Blessings",
        "description": "Evening Shema with surrounding blessings.",
        "service_id": "daily-maariv",
        "order": 10,
        "items": [
            {"id": "daily-maaliv-barchu", "title": "Barchu", "description": "Evening call to prayer.", "order": 10, "applicability": {"requires_minyan": True}},
            {"id": "daily-maaliv-aravim", "title": "Ma'ariv Aravim", "description": "Blessing for the arrival of evening.", "order": 20},
            {"id": "daily-maaliv-ahavat-olam", "title": "Ahavat Olam", "description": "Evening expression of divine love.", "order": 30},
            {"id": "daily-maaliv-shema", "title": "Shema and V'ahavta", "description": "Recitation of the Shema at night.", "order": 40},
            {"id": "daily-maaliv-emet-veemuna", "title": "Emet V'Emunah", "description": "Blessing affirming redemption at night.", "order": 50},
            {"id": "daily-maaliv-hashkiveinu", "title": "Hashkiveinu", "description": "Prayer for peaceful sleep and protection.", "order": 60}
        ],
    },
    {
        "id": "daily-maariv-amidah",
        "title": "Ma'ariv Amidah",
        "description": "Weekday Amidah recited quietly at night.",
        "service_id": "daily-maariv",
        "order": 20,
        "applicability": {"shabbat": False},
        "items": []
    },
    {
        "id": "daily-maariv-conclusion",
        "title": "Ma'ariv Conclusion",
        "description": "Aleinu and Kaddishim closing the evening service.",
        "service_id": "daily-maariv",
        "order": 30,
        "items": [
            {"id": "daily-maaliv-aleinu", "title": "Aleinu", "description": "Final declaration before Kaddish.", "order": 10},
            {
                "id": "daily-maaliv-kaddish-titkabal",
                "title": "Kaddish Titkabal",
                "description": "Leader's Kaddish requesting acceptance of prayers.",
                "order": 20,
                "applicability": {"requires_minyan": True, "kaddish_type": "titkabal"}
            },
            {
                "id": "daily-maaliv-kaddish-yatom",
                "title": "Mourner's Kaddish",
                "description": "Final Kaddish for mourners at night.",
                "order": 30,
                "applicability": {"requires_minyan": True, "mourner_only": True, "kaddish_type": "yatom"}
            },
        ],
    },
    {
        "id": "daily-musaf-structure",
        "title": "Weekday Musaf Structure",
        "description": "Outline for Musaf on Rosh Chodesh and Chol HaMoed weekdays.",
        "service_id": "daily-musaf",
        "order": 10,
        "applicability": {"rosh_chodesh": True},
        "items": [
            {"id": "daily-musaf-intro", "title": "Musaf Intro", "description": "Hazarat HaShatz preparations and silent Amidah notes.", "order": 10, "applicability": {"rosh_chodesh": True}},
            {"id": "daily-musaf-kedusha", "title": "Musaf Kedusha", "description": "Differences in the Kedusha text for Musaf.", "order": 20, "applicability": {"rosh_chodesh": True}},
            {"id": "daily-musaf-yaaleh", "title": "Ya'aleh V'Yavo", "description": "Insert recited in Musaf for the new month.", "order": 30, "applicability": {"rosh_chodesh": True}}
        ],
    },
    {
        "id": "daily-shared-halel",
        "title": "Hallel Options",
        "description": "Full and partial Hallel structures for weekdays.",
        "service_id": "daily-shared",
        "order": 10,
        "items": [
            {"id": "daily-halel-intro", "title": "Hallel Introduction", "description": "Guidance for when to recite Hallel and how to begin.", "order": 10},
            {"id": "daily-halel-full", "title": "Full Hallel", "description": "Order of psalms for full recitation.", "order": 20, "applicability": {"holidays": ["pesach", "shavuot", "sukkot", "shemini_atzeret", "simchat_torah"]}},
            {"id": "daily-halel-partial", "title": "Partial Hallel", "description": "Weekday Hallel as practiced on Rosh Chodesh and last days of Pesach.", "order": 30, "applicability": {"rosh_chodesh": True}}
        ],
    },
    {
        "id": "daily-shared-torah",
        "title": "Weekday Torah Readings",
        "description": "Aliyah breakdown for Mondays, Thursdays, and fast days.",
        "service_id": "daily-shared",
        "order": 20,
        "applicability": {"requires_minyan": True},
        "items": [
            {"id": "daily-torah-mon-thu", "title": "Monday/Thursday Torah", "description": "Three aliyot structure with blessing reminders.", "order": 10, "applicability": {"weekdays": ["mon", "thu"], "requires_minyan": True}},
            {"id": "daily-torah-fast-day", "title": "Fast Day Torah", "description": "Special readings for communal fasts.", "order": 20, "applicability": {"fast_days": ["tzom_gedaliah", "asara_btevet", "taanit_esther", "shivah_asar_btammuz"]}},
            {"id": "daily-torah-rosh-chodesh", "title": "Rosh Chodesh Torah", "description": "Aliyah plan for the new month reading.", "order": 30, "applicability": {"rosh_chodesh": True}}
        ],
    },
    {
        "id": "daily-shared-kaddish",
        "title": "Daily Kaddishim",
        "description": "Quick reference for which Kaddish variant appears where.",
        "service_id": "daily-shared",
        "order": 30,
        "applicability": {"requires_minyan": True},
        "items": [
            {"id": "daily-kaddish-half", "title": "Chatzi Kaddish", "description": "Marker between sections of the service.", "order": 10, "applicability": {"requires_minyan": True, "kaddish_type": "chatzi"}},
            {"id": "daily-kaddish-titkabal", "title": "Kaddish Titkabal", "description": "Leader's Kaddish after the Amidah repetitions.", "order": 20, "applicability": {"requires_minyan": True, "kaddish_type": "titkabal"}},
            {"id": "daily-kaddish-yatom", "title": "Kaddish Yatom", "description": "Mourner's Kaddish guidelines for each service.", "order": 30, "applicability": {"requires_minyan": True, "mourner_only": True, "kaddish_type": "yatom"}}
        ],
    },
    {
        "id": "shabbat-kabbalat-psalms",
        "title": "Kabbalat Shabbat Psalms",
        "description": "Sequence of six psalms ushering in Shabbat.",
        "service_id": "shabbat-kabbalat",
        "order": 10,
        "items": [
            {"id": "shabbat-psalm95", "title": "Psalm 95", "description": "Opening call to sing to God.", "order": 10, "applicability": {"shabbat": True}},
            {"id": "shabbat-psalm96", "title": "Psalm 96", "description": "Declare God's glory among the nations.", "order": 20, "applicability": {"shabbat": True}},
            {"id": "shabbat-psalm97", "title": "Psalm 97", "description": "God reigns; the earth rejoices.", "order": 30, "applicability": {"shabbat": True}},
            {"id": "shabbat-psalm98", "title": "Psalm 98", "description": "Sing a new song for redemption.", "order": 40, "applicability": {"shabbat": True}},
            {"id": "shabbat-psalm99", "title": "Psalm 99", "description": "Holy is God enthroned between the cherubim.", "order": 50, "applicability": {"shabbat": True}},
            {"id": "shabbat-psalm29", "title": "Psalm 29", "description": "Voice of God over the waters.", "order": 60, "applicability": {"shabbat": True}}
        ],
    },
    {
        "id": "shabbat-kabbalat-lecha-dodi",
        "title": "Lecha Dodi & Welcoming",
        "description": "Verses and customs for greeting the Shabbat bride.",
        "service_id": "shabbat-kabbalat",
        "order": 20,
        "items": [
            {"id": "shabbat-lecha-dodi", "title": "Lecha Dodi", "description": "Acrostic poem welcoming Shabbat.", "order": 10, "applicability": {"shabbat": True}},
            {"id": "shabbat-mizmor-shir", "title": "Mizmor Shir", "description": "Psalm for Shabbat after Lecha Dodi.", "order": 20, "applicability": {"shabbat": True}},
            {"id": "shabbat-barchu-evening", "title": "Barchu", "description": "Call to prayer that transitions to Maariv.", "order": 30, "applicability": {"shabbat": True, "requires_minyan": True}}
        ],
    },
    {
        "id": "shabbat-evening-amidah",
        "title": "Maariv Amidah (Shabbat)",
        "description": "Seven-blessing structure highlighting Shabbat themes.",
        "service_id": "shabbat-evening",
        "order": 10,
        "items": [
            {"id": "shabbat-evening-me-ein-sheva", "title": "Me'ein Sheva", "description": "Leader's repetition summarizing the Amidah.", "order": 10, "applicability": {"shabbat": True, "requires_minyan": True}},
            {"id": "shabbat-evening-vayechulu", "title": "Vayechulu", "description": "Declaring the completion of creation.", "order": 20, "applicability": {"shabbat": True}},
            {"id": "shabbat-evening-kiddush", "title": "Friday Night Kiddush", "description": "Sanctifying Shabbat over wine.", "order": 30, "applicability": {"shabbat": True}, "notes": "Variants for home and synagogue. Text coming soon."}
        ],
    },
    {
        "id": "shabbat-morning-pesukei",
        "title": "Shabbat Pesukei D'Zimra",
        "description": "Expanded morning psalms with Nishmat and Shochen Ad.",
        "service_id": "shabbat-morning",
        "order": 10,
        "items": [
            {"id": "shabbat-birchot-song", "title": "Additional Psalms", "description": "Shabbat expansions before Nishmat.", "order": 10, "applicability": {"shabbat": True}},
            {"id": "shabbat-nishmat", "title": "Nishmat Kol Chai", "description": "Extended praise unique to Shabbat.", "order": 20, "applicability": {"shabbat": True}},
            {"id": "shabbat-shochen-ad", "title": "Shochen Ad", "description": "Transition prayer before the Shema blessings.", "order": 30, "applicability": {"shabbat": True}}
        ],
    },
    {
        "id": "shabbat-morning-torah",
        "title": "Torah Service Highlights",
        "description": "Blessings and honors for the Shabbat Torah service.",
        "service_id": "shabbat-morning",
        "order": 30,
        "applicability": {"shabbat": True, "requires_minyan": True},
        "items": [
            {"id": "shabbat-torah-opening", "title": "Opening the Ark", "description": "Ein Kamocha and Berich Shmei custom.", "order": 10, "applicability": {"shabbat": True, "requires_minyan": True}},
            {"id": "shabbat-aliyah-blessings", "title": "Aliyah Blessings", "description": "Before and after Torah blessings.", "order": 20, "applicability": {"shabbat": True, "requires_minyan": True, "torah_reading_context": "aliyah"}},
            {"id": "shabbat-hagbah", "title": "Hagbah & Gelilah", "description": "Raising and dressing the scroll.", "order": 30, "applicability": {"shabbat": True, "requires_minyan": True, "torah_reading_context": "hagbah"}}
        ],
    },
    {
        "id": "shabbat-musaf-structure",
        "title": "Shabbat Musaf",
        "description": "Musaf Amidah recalling the additional Shabbat offering.",
        "service_id": "shabbat-musaf",
        "order": 10,
        "items": [
            {"id": "shabbat-musaf-kedusha", "title": "Kedusha for Shabbat", "description": "Text unique to Shabbat Musaf.", "order": 10, "applicability": {"shabbat": True}},
            {"id": "shabbat-musaf-retzei", "title": "Retzei & Inserts", "description": "References to the Temple service.", "order": 20, "applicability": {"shabbat": True}},
            {"id": "shabbat-musaf-kaddish", "title": "Kaddish After Musaf", "description": "Placement of Kaddish Titkabal after Musaf.", "order": 30, "applicability": {"shabbat": True, "requires_minyan": True}}
        ],
    },
    {
        "id": "shabbat-mincha-elements",
        "title": "Shabbat Mincha Components",
        "description": "Torah reading and Amidah for late Shabbat.",
        "service_id": "shabbat-mincha",
        "order": 10,
        "items": [
            {"id": "shabbat-mincha-torah", "title": "Shabbat Mincha Torah", "description": "Reading the upcoming week's portion.", "order": 10, "applicability": {"shabbat": True, "requires_minyan": True}},
            {"id": "shabbat-mincha-amidah", "title": "Mincha Amidah Text", "description": "Three blessing structure for Shabbat afternoon.", "order": 20, "applicability": {"shabbat": True}},
            {"id": "shabbat-mincha-tzidkatcha", "title": "Tzidkatcha Tzedek", "description": "Psalm verses recited toward Shabbat's end.", "order": 30, "applicability": {"shabbat": True}}
        ],
    },
    {
        "id": "shabbat-havdalah-elements",
        "title": "Havdalah Elements",
        "description": "Wine, spices, and flame marking Shabbat's close.",
        "service_id": "shabbat-havdalah",
        "order": 10,
        "applicability": {"motzaei_shabbat": True},
        "items": [
            {"id": "havdalah-intro", "title": "Hinei El Yeshuati", "description": "Introductory verses for Havdalah.", "order": 10, "applicability": {"motzaei_shabbat": True}},
            {"id": "havdalah-brachot", "title": "Havdalah Blessings", "description": "Blessings over wine, spices, and flame.", "order": 20, "applicability": {"motzaei_shabbat": True}},
            {"id": "havdalah-song", "title": "Eliyahu HaNavi", "description": "Songs and customs following Havdalah.", "order": 30, "applicability": {"motzaei_shabbat": True}}
        ],
    },
    {
        "id": "rosh-chodesh-shacharit-elements",
        "title": "Rosh Chodesh Highlights",
        "description": "Additions within the Shacharit service for the new month.",
        "service_id": "rosh-chodesh-shacharit",
        "order": 10,
        "applicability": {"rosh_chodesh": True},
        "items": [
            {"id": "rosh-chodesh-yaaleh", "title": "Ya'aleh V'Yavo", "description": "Insert recited in the Amidah.", "order": 10, "applicability": {"rosh_chodesh": True}},
            {"id": "rosh-chodesh-halel", "title": "Partial Hallel Notes", "description": "Guidance for Rosh Chodesh Hallel custom.", "order": 20, "applicability": {"rosh_chodesh": True}, "notes": "Custom varies by community."},
            {"id": "rosh-chodesh-torah", "title": "Torah Reading", "description": "Aliyah plan for the new month reading.", "order": 30, "applicability": {"rosh_chodesh": True, "requires_minyan": True}}
        ],
    },
    {
        "id": "rosh-chodesh-musaf-elements",
        "title": "Rosh Chodesh Musaf",
        "description": "Musaf Amidah for the renewal of the moon.",
        "service_id": "rosh-chodesh-musaf",
        "order": 10,
        "applicability": {"rosh_chodesh": True},
        "items": [
            {"id": "rosh-chodesh-musaf-intro", "title": "Musaf Opening", "description": "Silent Amidah notes for Rosh Chodesh.", "order": 10, "applicability": {"rosh_chodesh": True}},
            {"id": "rosh-chodesh-musaf-middle", "title": "Middle Blessings", "description": "Text recalling the new month offerings.", "order": 20, "applicability": {"rosh_chodesh": True}},
            {"id": "rosh-chodesh-musaf-kaddish", "title": "Concluding Kaddish", "description": "Placement of Kaddish Titkabal after Musaf.", "order": 30, "applicability": {"rosh_chodesh": True, "requires_minyan": True}}
        ],
    },
    {
        "id": "rosh-chodesh-hallel-order",
        "title": "Rosh Chodesh Hallel Order",
        "description": "Psalms for partial Hallel with responsive reading cues.",
        "service_id": "rosh-chodesh-hallel",
        "order": 10,
        "applicability": {"rosh_chodesh": True},
        "items": [
            {"id": "rosh-chodesh-halel-opening", "title": "Opening Psalms", "description": "Beginning with Psalm 113.", "order": 10, "applicability": {"rosh_chodesh": True}},
            {"id": "rosh-chodesh-halel-skipped", "title": "Skipped Verses", "description": "Outline of verses traditionally omitted.", "order": 20, "applicability": {"rosh_chodesh": True}, "notes": "Practice differs by tradition."},
            {"id": "rosh-chodesh-halel-closing", "title": "Closing Blessing", "description": "Final beracha for partial Hallel.", "order": 30, "applicability": {"rosh_chodesh": True}}
        ],
    },
    {
        "id": "festival-rosh-hashanah-outline",
        "title": "Rosh Hashanah Services",
        "description": "Overview of Musaf sections and shofar blasts.",
        "service_id": "festival-rosh-hashanah",
        "order": 10,
        "items": [
            {"id": "rh-musaf-malchuyot", "title": "Malchuyot", "description": "Kingship verses and liturgy.", "order": 10, "applicability": {"holidays": ["rosh_hashanah"], "requires_minyan": True}},
            {"id": "rh-musaf-zichronot", "title": "Zichronot", "description": "Remembrance section with ten verses.", "order": 20, "applicability": {"holidays": ["rosh_hashanah"]}},
            {"id": "rh-musaf-shofarot", "title": "Shofarot", "description": "Verses and blasts for shofar service.", "order": 30, "applicability": {"holidays": ["rosh_hashanah"], "requires_minyan": True}}
        ],
    },
    {
        "id": "festival-yom-kippur-sections",
        "title": "Yom Kippur Highlights",
        "description": "Key prayers from Kol Nidrei to Ne'ilah.",
        "service_id": "festival-yom-kippur",
        "order": 10,
        "items": [
            {"id": "yk-kol-nidrei", "title": "Kol Nidrei", "description": "Annulment declaration opening Yom Kippur.", "order": 10, "applicability": {"holidays": ["yom_kippur"], "requires_minyan": True}},
            {"id": "yk-vidui", "title": "Vidui Series", "description": "Ashamnu and Al Chet confessions.", "order": 20, "applicability": {"holidays": ["yom_kippur"]}},
            {"id": "yk-neilah", "title": "Ne'ilah", "description": "Closing service with final shofar blast.", "order": 30, "applicability": {"holidays": ["yom_kippur"], "requires_minyan": True}}
        ],
    },
    {
        "id": "festival-pesach-outline",
        "title": "Pesach Services",
        "description": "Festival Amidah and Hallel notes for Pesach.",
        "service_id": "festival-pesach",
        "order": 10,
        "items": [
            {"id": "pesach-halel", "title": "Festival Hallel", "description": "Full Hallel first day, partial on later days.", "order": 10, "applicability": {"holidays": ["pesach"]}},
            {"id": "pesach-yaaleh", "title": "Ya'aleh V'Yavo", "description": "Insertions for festival Amidah.", "order": 20, "applicability": {"holidays": ["pesach"]}},
            {"id": "pesach-torah", "title": "Torah Readings", "description": "Outline of daily Torah portions during Pesach.", "order": 30, "applicability": {"holidays": ["pesach"], "requires_minyan": True}}
        ],
    },
    {
        "id": "festival-shavuot-outline",
        "title": "Shavuot Services",
        "description": "Akdamut, Ten Commandments reading, and Musaf notes.",
        "service_id": "festival-shavuot",
        "order": 10,
        "items": [
            {"id": "shavuot-akdamut", "title": "Akdamut", "description": "Piyut introduction before Torah reading.", "order": 10, "applicability": {"holidays": ["shavuot"], "requires_minyan": True}},
            {"id": "shavuot-ten-commandments", "title": "Torah Reading", "description": "Public reading of the Decalogue.", "order": 20, "applicability": {"holidays": ["shavuot"], "requires_minyan": True}},
            {"id": "shavuot-musaf", "title": "Shavuot Musaf", "description": "Festival-specific middle blessing.", "order": 30, "applicability": {"holidays": ["shavuot"]}}
        ],
    },
    {
        "id": "festival-sukkot-outline",
        "title": "Sukkot Services",
        "description": "Hoshanot, lulav, and festival Amidah guidance.",
        "service_id": "festival-sukkot",
        "order": 10,
        "items": [
            {"id": "sukkot-hoshanot", "title": "Hoshanot Circuits", "description": "Daily processions with lulav.", "order": 10, "applicability": {"holidays": ["sukkot"], "requires_minyan": True}},
            {"id": "sukkot-halel", "title": "Sukkot Hallel", "description": "Full Hallel each day.", "order": 20, "applicability": {"holidays": ["sukkot"]}},
            {"id": "sukkot-musaf", "title": "Sukkot Musaf", "description": "Musaf outline with unique offerings.", "order": 30, "applicability": {"holidays": ["sukkot"]}}
        ],
    },
    {
        "id": "festival-shemini-outline",
        "title": "Shemini Atzeret & Simchat Torah",
        "description": "Geshem prayer and Hakafot celebrations.",
        "service_id": "festival-shemini-atzeret",
        "order": 10,
        "items": [
            {"id": "shemini-geshem", "title": "Tefillat Geshem", "description": "Prayer for rain during Musaf.", "order": 10, "applicability": {"holidays": ["shemini_atzeret"]}},
            {"id": "simchat-hakafot", "title": "Hakafot", "description": "Seven circuits with Torah scrolls.", "order": 20, "applicability": {"holidays": ["simchat_torah"], "requires_minyan": True}},
            {"id": "simchat-aliyot", "title": "Aliyah Customs", "description": "Kol HaNe'arim and Chatan Torah/Bereshit honors.", "order": 30, "applicability": {"holidays": ["simchat_torah"], "requires_minyan": True}}
        ],
    },
    {
        "id": "festival-chanukah-outline",
        "title": "Chanukah Rituals",
        "description": "Lighting procedure, Al HaNisim, and Hallel.",
        "service_id": "festival-chanukah",
        "order": 10,
        "items": [
            {"id": "chanukah-lighting", "title": "Menorah Lighting", "description": "Order of lights and blessings for each night.", "order": 10, "applicability": {"holidays": ["chanukah"]}},
            {"id": "chanukah-al-hanisim", "title": "Al HaNisim", "description": "Insert for Amidah and Birkat Hamazon.", "order": 20, "applicability": {"holidays": ["chanukah"]}},
            {"id": "chanukah-halel", "title": "Chanukah Hallel", "description": "Full Hallel each morning.", "order": 30, "applicability": {"holidays": ["chanukah"]}}
        ],
    },
    {
        "id": "festival-purim-outline",
        "title": "Purim Observances",
        "description": "Megillah readings, Mishloach Manot, and festive meal.",
        "service_id": "festival-purim",
        "order": 10,
        "items": [
            {"id": "purim-megillah-night", "title": "Night Megillah", "description": "Evening reading with blessings.", "order": 10, "applicability": {"holidays": ["purim"], "requires_minyan": True}},
            {"id": "purim-al-hanisim", "title": "Al HaNisim", "description": "Insert for Amidah and Birkat Hamazon on Purim.", "order": 20, "applicability": {"holidays": ["purim"]}},
            {"id": "purim-day-megillah", "title": "Day Megillah", "description": "Morning reading and associated mitzvot.", "order": 30, "applicability": {"holidays": ["purim"], "requires_minyan": True}}
        ],
    },
    {
        "id": "fast-general-structure",
        "title": "Weekday Fast Structure",
        "description": "Selichot, Torah readings, and Anenu insertions.",
        "service_id": "fast-gedaliah",
        "order": 10,
        "items": [
            {"id": "fast-selichot", "title": "Selichot Outline", "description": "Structure of penitential prayers.", "order": 10, "applicability": {"fast_days": ["tzom_gedaliah"]}},
            {"id": "fast-anenu", "title": "Anenu", "description": "Insert for the leader during fast day Amidah.", "order": 20, "applicability": {"fast_days": ["tzom_gedaliah"], "requires_minyan": True}},
            {"id": "fast-torah", "title": "Torah Reading", "description": "Readings for fast day mornings and afternoons.", "order": 30, "applicability": {"fast_days": ["tzom_gedaliah"], "requires_minyan": True}}
        ],
    },
    {
        "id": "fast-mincha-supplements",
        "title": "Fast Day Mincha",
        "description": "Torah reading, Haftarah, and special prayers at Mincha.",
        "service_id": "fast-asara-btevet",
        "order": 10,
        "items": [
            {"id": "fast-mincha-torah", "title": "Torah Reading", "description": "Reading for afternoon service.", "order": 10, "applicability": {"fast_days": ["asara_btevet"], "requires_minyan": True}},
            {"id": "fast-mincha-haftarah", "title": "Haftarah", "description": "Reading from Yeshayahu for consolation.", "order": 20, "applicability": {"fast_days": ["asara_btevet"], "requires_minyan": True}},
            {"id": "fast-mincha-anenu", "title": "Anenu (Individuals)", "description": "Instructions when fasting personally.", "order": 30, "applicability": {"fast_days": ["asara_btevet"]}}
        ],
    },
    {
        "id": "flow-torah-service-guide",
        "title": "Torah Service Flow",
        "description": "Removing, reading, and returning the Torah scroll.",
        "service_id": "flow-torah-service",
        "order": 10,
        "applicability": {"requires_minyan": True},
        "items": [
            {"id": "flow-opening-ark", "title": "Opening the Ark", "description": "Ein Kamocha and Berich Shmei overview.", "order": 10, "applicability": {"requires_minyan": True}},
            {"id": "flow-aliyah-sequence", "title": "Aliyah Sequence", "description": "Calling the oleh, blessings, and reading cadence.", "order": 20, "applicability": {"requires_minyan": True, "torah_reading_context": "aliyah"}},
            {"id": "flow-hagbah-gelilah", "title": "Hagbah & Gelilah", "description": "Raising, displaying, and dressing the Torah.", "order": 30, "applicability": {"requires_minyan": True, "torah_reading_context": "hagbah"}}
        ],
    },
    {
        "id": "flow-kaddish-variants",
        "title": "Kaddish Variants",
        "description": "When to recite each Kaddish form and who leads it.",
        "service_id": "flow-kaddish",
        "order": 10,
        "applicability": {"requires_minyan": True},
        "items": [
            {"id": "flow-chatzi-kaddish", "title": "Chatzi Kaddish", "description": "Transitional Kaddish between sections.", "order": 10, "applicability": {"requires_minyan": True, "kaddish_type": "chatzi"}},
            {"id": "flow-kaddish-d-rabbanan", "title": "Kaddish D'Rabbanan", "description": "After learning or reciting rabbinic texts.", "order": 20, "applicability": {"requires_minyan": True, "kaddish_type": "derabbanan"}},
            {"id": "flow-kaddish-yatom-guide", "title": "Kaddish Yatom Guide", "description": "Who says it and when throughout services.", "order": 30, "applicability": {"requires_minyan": True, "mourner_only": True, "kaddish_type": "yatom"}}
        ],
    },
    {
        "id": "flow-special-readings-overview",
        "title": "Special Readings",
        "description": "Handling Maftir, Haftarah, and special Shabbatot.",
        "service_id": "flow-special-readings",
        "order": 10,
        "items": [
            {"id": "flow-maftir", "title": "Maftir Guidance", "description": "When to add Maftir and the extra aliyah.", "order": 10, "applicability": {"requires_minyan": True, "torah_reading_context": "maftir"}},
            {"id": "flow-haftarah-blessings", "title": "Haftarah Blessings", "description": "Blessings before and after the Haftarah.", "order": 20, "applicability": {"requires_minyan": True, "torah_reading_context": "haftarah"}},
            {"id": "flow-special-parshiot", "title": "Special Parshiot", "description": "Notes for Shekalim, Zachor, Parah, and HaChodesh.", "order": 30}
        ],
    },
    {
        "id": "practice-daily-routines",
        "title": "Daily Routines",
        "description": "Blessings for everyday mitzvot and practices.",
        "service_id": "practice-daily",
        "order": 10,
        "items": [
            {"id": "practice-asher-yatzar", "title": "Asher Yatzar", "description": "Blessing after using the restroom.", "order": 10},
            {"id": "practice-tzitzit-check", "title": "Checking Tzitzit", "description": "Reminder and blessing for tzitzit wearing.", "order": 20},
            {"id": "practice-birkat-hatorah", "title": "Birkat HaTorah", "description": "Blessings before morning Torah study.", "order": 30}
        ],
    },
    {
        "id": "practice-seasonal-moments",
        "title": "Seasonal Moments",
        "description": "Blessings marking seasonal shifts and mitzvot.",
        "service_id": "practice-seasonal",
        "order": 10,
        "items": [
            {
                "id": "practice-birkat-hailanot",
                "title": "Birkat Ha'Ilanot",
                "description": "Blessing on blossoming trees in Nissan.",
                "order": 10,
                "applicability": {"holidays": ["pesach"]},
                "notes": "Said once each spring when seeing blossoming trees.",
            },
            {"id": "practice-sefirat-intro", "title": "Sefirat HaOmer Prep", "description": "Checklist before counting the Omer.", "order": 20, "applicability": {"omer": True}},
            {"id": "practice-sukkah", "title": "Blessing for the Sukkah", "description": "Leishev BaSukkah for sitting in the sukkah.", "order": 30, "applicability": {"holidays": ["sukkot"]}}
        ],
    },
    {
        "id": "practice-phenomena-moments",
        "title": "Phenomena & Experiences",
        "description": "Blessings for natural wonders and life events.",
        "service_id": "practice-phenomena",
        "order": 10,
        "items": [
            {"id": "practice-thunder", "title": "Blessing for Thunder", "description": "Shekocho Ugvurato for powerful weather.", "order": 10},
            {"id": "practice-rainbow", "title": "Blessing for Rainbow", "description": "Zochair HaBrit when seeing a rainbow.", "order": 20},
            {"id": "practice-good-news", "title": "Shehecheyanu", "description": "Blessing for joyous new experiences.", "order": 30}
        ],
    },
    {
        "id": "meals-before-blessings",
        "title": "Blessings Before Eating",
        "description": "Brachot for primary food categories.",
        "service_id": "meals-before",
        "order": 10,
        "items": [
            {"id": "meals-hamotzi", "title": "Hamotzi", "description": "Bread blessing before meals.", "order": 10},
            {"id": "meals-mezonot", "title": "Mezonot", "description": "Blessing over grain-based foods.", "order": 20},
            {"id": "meals-hagefen", "title": "Borei Pri HaGafen", "description": "Blessing over wine and grape juice.", "order": 30},
            {"id": "meals-haetz", "title": "Borei Pri Ha'etz", "description": "Blessing over fruit of the tree.", "order": 40},
            {"id": "meals-haadama", "title": "Borei Pri HaAdama", "description": "Blessing over produce of the ground.", "order": 50},
            {"id": "meals-shehakol", "title": "Shehakol", "description": "Blessing for all other foods and drinks.", "order": 60}
        ],
    },
    {
        "id": "meals-after-blessings",
        "title": "After-Eating Blessings",
        "description": "Birkat Hamazon and short forms.",
        "service_id": "meals-after",
        "order": 10,
        "items": [
            {"id": "meals-birkat-hamazon", "title": "Birkat Hamazon", "description": "Grace after meals with section overview.", "order": 10, "outline": ["Zimun", "First blessing", "Second blessing", "Third blessing", "Harachaman"]},
            {"id": "meals-al-hamichya", "title": "Al HaMichya", "description": "Blessing after mezonot, wine, and fruit.", "order": 20},
            {"id": "meals-borei-nefashot", "title": "Borei Nefashot", "description": "Short after-blessing for snacks and drinks.", "order": 30}
        ],
    },
    {
        "id": "meals-special-rituals",
        "title": "Festive Meal Rituals",
        "description": "Kiddush, Havdalah, and seudot mitzvah notes.",
        "service_id": "meals-special",
        "order": 10,
        "items": [
            {"id": "meals-shabbat-kiddush", "title": "Shabbat Kiddush", "description": "Daytime Kiddush text and customs.", "order": 10, "applicability": {"shabbat": True}},
            {"id": "meals-havdalah-table", "title": "Havdalah at the Table", "description": "When Havdalah follows a meal or Yom Tov.", "order": 20, "applicability": {"motzaei_shabbat": True}},
            {"id": "meals-zimun", "title": "Zimun", "description": "Inviting others to Birkat Hamazon.", "order": 30, "applicability": {"requires_minyan": False}}
        ],
    },
    {
        "id": "personal-bedtime-flow",
        "title": "Bedtime Shema",
        "description": "Kriat Shema al HaMitah with protective psalms.",
        "service_id": "personal-bedtime",
        "order": 10,
        "items": [
            {"id": "bedtime-shema", "title": "Shema at Bedtime", "description": "Text and meditations before sleep.", "order": 10},
            {"id": "bedtime-hamapil", "title": "Hamapil", "description": "Blessing for restful sleep.", "order": 20},
            {"id": "bedtime-psalm91", "title": "Psalm 91", "description": "Protective psalm recited by many communities.", "order": 30}
        ],
    },
    {
        "id": "personal-reflection-tools",
        "title": "Personal Reflection",
        "description": "Guides for cheshbon hanefesh and gratitude journaling.",
        "service_id": "personal-reflection",
        "order": 10,
        "items": [
            {"id": "reflection-cheshbon", "title": "Daily Accounting", "description": "Prompts for end-of-day review.", "order": 10},
            {"id": "reflection-gratitude", "title": "Gratitude Three", "description": "List three things that went well.", "order": 20},
            {"id": "reflection-intentions", "title": "Intentions for Tomorrow", "description": "Setting mindful goals for the next day.", "order": 30}
        ],
    },
    {
        "id": "personal-travel-safety",
        "title": "Travel & Safety",
        "description": "Prayers before journeys and risky moments.",
        "service_id": "personal-travel",
        "order": 10,
        "items": [
            {"id": "travel-tefilat-haderech", "title": "Tefilat HaDerech", "description": "Prayer for safe travel.", "order": 10, "applicability": {"requires_minyan": False}},
            {"id": "travel-before-flight", "title": "Before Flying", "description": "Suggested psalms and practices before boarding.", "order": 20},
            {
                "id": "travel-returning",
                "title": "Returning Home",
                "description": "Birkat HaGomel cues when applicable.",
                "order": 30,
                "applicability": {"requires_minyan": True},
                "notes": "Birkat HaGomel traditionally requires a minyan.",
            },
        ],
    },
    {
        "id": "lifecycle-birth-outline",
        "title": "Birth & Naming",
        "description": "Welcoming a new baby with brit milah or simchat bat.",
        "service_id": "lifecycle-birth",
        "order": 10,
        "items": [
            {"id": "birth-brit-milah", "title": "Brit Milah Outline", "description": "Order of blessings and honors.", "order": 10, "applicability": {"requires_minyan": True}},
            {"id": "birth-zeved-habat", "title": "Simchat Bat / Zeved HaBat", "description": "Naming ceremony for daughters.", "order": 20},
            {"id": "birth-pidyon-haben", "title": "Pidyon HaBen", "description": "Redemption of the firstborn son.", "order": 30, "applicability": {"requires_minyan": True}}
        ],
    },
    {
        "id": "lifecycle-comingofage-outline",
        "title": "Coming of Age",
        "description": "Preparing for Bar/Bat Mitzvah celebrations.",
        "service_id": "lifecycle-coming-of-age",
        "order": 10,
        "items": [
            {"id": "mitzvah-aliyah", "title": "Aliyah Preparation", "description": "Rehearsing blessings and reading cues.", "order": 10},
            {"id": "mitzvah-speech", "title": "Dvar Torah Planning", "description": "Outline for crafting a Dvar Torah.", "order": 20},
            {"id": "mitzvah-celebration", "title": "Celebration Checklist", "description": "Ritual items and customs to include.", "order": 30}
        ],
    },
    {
        "id": "lifecycle-wedding-outline",
        "title": "Wedding",
        "description": "Erusin, Ketubah, and Sheva Brachot structure.",
        "service_id": "lifecycle-wedding",
        "order": 10,
        "items": [
            {"id": "wedding-erusin", "title": "Erusin", "description": "Betrothal blessings over wine and ring.", "order": 10},
            {"id": "wedding-ketubah", "title": "Ketubah Reading", "description": "Public reading and signing customs.", "order": 20},
            {"id": "wedding-sheva-brachot", "title": "Sheva Brachot", "description": "Blessings under the chuppah and at meals.", "order": 30, "applicability": {"requires_minyan": True}}
        ],
    },
    {
        "id": "lifecycle-mourning-outline",
        "title": "Mourning",
        "description": "Shiva prayers, Kaddish, and comfort practices.",
        "service_id": "lifecycle-mourning",
        "order": 10,
        "applicability": {"mourner_only": True},
        "items": [
            {"id": "mourning-aninut", "title": "Before Burial", "description": "Practices during aninut.", "order": 10},
            {"id": "mourning-shiva", "title": "Sitting Shiva", "description": "Daily prayer schedule and visitors.", "order": 20, "applicability": {"mourner_only": True}},
            {"id": "mourning-kaddish", "title": "Saying Kaddish", "description": "Timeline and guidance for mourners.", "order": 30, "applicability": {"mourner_only": True, "requires_minyan": True, "kaddish_type": "yatom"}}
        ],
    },
    {
        "id": "lifecycle-home-milestones",
        "title": "Home & Milestones",
        "description": "Chanukat Bayit, anniversaries, and other celebrations.",
        "service_id": "lifecycle-home",
        "order": 10,
        "items": [
            {"id": "home-chanukat", "title": "Chanukat Bayit", "description": "Dedication ceremony for a new home.", "order": 10},
            {"id": "home-anniversary", "title": "Anniversary Blessings", "description": "Ideas for marking anniversaries with prayer.", "order": 20},
            {"id": "home-graduate", "title": "Milestone Moments", "description": "Blessings for graduations or achievements.", "order": 30}
        ],
    },
    {
        "id": "seasonal-amidah-inserts",
        "title": "Amidah Inserts",
        "description": "Seasonal swaps such as Mashiv HaRuach and V'ten Tal U'Matar.",
        "service_id": "seasonal-amidah",
        "order": 10,
        "items": [
            {"id": "seasonal-mashiv-haruach", "title": "Mashiv HaRuach", "description": "Switching to rain language in Musaf.", "order": 10, "applicability": {"holidays": ["shemini_atzeret"], "diaspora_or_israel": "both"}},
            {"id": "seasonal-tal-geshem", "title": "Tal & Geshem", "description": "Notes on chanting Tal (Pesach) and Geshem (Shemini Atzeret).", "order": 20, "applicability": {"holidays": ["pesach", "shemini_atzeret"]}},
            {"id": "seasonal-vten-tal", "title": "V'ten Tal U'Matar", "description": "Date ranges for requesting rain.", "order": 30, "applicability": {"diaspora_or_israel": "both"}}
        ],
    },
    {
        "id": "seasonal-guides-summary",
        "title": "Seasonal Guides",
        "description": "Quick reference for Ya'aleh V'yavo, Al HaNisim, and more.",
        "service_id": "seasonal-guides",
        "order": 10,
        "items": [
            {"id": "seasonal-yaaleh-vyavo", "title": "Ya'aleh V'Yavo", "description": "When to insert in Amidah and Birkat Hamazon.", "order": 10, "applicability": {"rosh_chodesh": True, "holidays": ["pesach", "shavuot", "sukkot", "shemini_atzeret"]}},
            {"id": "seasonal-al-hanisim", "title": "Al HaNisim", "description": "Insert for Chanukah and Purim.", "order": 20, "applicability": {"holidays": ["chanukah", "purim"]}},
            {"id": "seasonal-yizkor", "title": "Yizkor Reminder", "description": "When Yizkor is recited.", "order": 30, "applicability": {"holidays": ["yom_kippur", "shemini_atzeret", "pesach", "shavuot"]}}
        ],
    },
    {
        "id": "seasonal-special-day-reminders",
        "title": "Special Day Reminders",
        "description": "Guide to Omer counting, Tachanun omissions, and daily changes.",
        "service_id": "seasonal-special-days",
        "order": 10,
        "items": [
            {"id": "seasonal-omer-calendar", "title": "Omer Calendar", "description": "Tracking which day we are counting tonight.", "order": 10, "applicability": {"omer": True}},
            {"id": "seasonal-tachanun-map", "title": "Tachanun Map", "description": "Days when Tachanun is omitted.", "order": 20},
            {"id": "seasonal-shir-shel-yom-guide", "title": "Shir Shel Yom Guide", "description": "Quick lookup for the day's psalm.", "order": 30}
        ],
    },
]

# ══════════════════════════════════════════════════════════════════════════════
# WEEKDAY AMIDAH - generated for each daily service
# ══════════════════════════════════════════════════════════════════════════════

WEEKDAY_AMIDAH_BLESSINGS: list[tuple[str, str, str]] = [
    ("1-avot", "Avot", "Opening blessing recalling the patriarchs and matriarchs."),
    ("2-gevurot", "Gevurot", "Celebrating divine strength and revival."),
    ("3-kedushat-hashem", "Kedushat Hashem", "Declaring God's holiness."),
    ("4-binah", "Binah", "Requesting wisdom and understanding."),
    ("5-teshuvah", "Teshuvah", "Seeking a return to Torah."),
    ("6-selichah", "Selichah", "Asking for forgiveness."),
    ("7-geulah", "Geulah", "Requesting redemption from distress."),
    ("8-refuah", "Refuah", "Praying for healing."),
    ("9-barech-alenu", "Birkat HaShanim", "Blessing for livelihood and rain."),
    ("10-kibbutz-galiyot", "Kibbutz Galuyot", "Gathering the exiles."),
    ("11-mishpat", "Din", "Restoring righteous judges."),
    ("12-minim", "Against Slander", "Guarding the community from those who sow harm."),
    ("13-tzadikim", "Tzadikim", "Supporting the righteous."),
    ("14-yerushalayim", "Boneh Yerushalayim", "Rebuilding Jerusalem."),
    ("15-mashiach", "Malchut Beit David", "Restoring the House of David."),
    ("16-tefillah", "Shomea Tefillah", "Hearing our prayers."),
    ("17-avodah", "Avodah", "Returning divine service to Zion."),
    ("18-hodaah", "Modim", "Offering thanksgiving."),
    ("19-shalom", "Sim Shalom", "Concluding blessing for peace."),
]

# (service_id, bucket_id)
WEEKDAY_AMIDAH_BUCKETS: list[tuple[str, str]] = [
    ("daily-shacharit", "daily-shacharit-weekday-amidah"),
    ("daily-mincha", "daily-mincha-amidah"),
    ("daily-maariv", "daily-maariv-amidah"),
]

AMIDAH_BASE_ORDER = 5


def _weekday_amidah_items(service_id: str, bucket_id: str) -> list[dict]:
    weekday_only = {"shabbat": False}
    items = [{
        "id": f"{service_id}-amidah-opening",
        "title": "Amidah Opening",
        "description": "Steps back, Adonai Sefatai, and quiet stance before the blessings.",
        "bucket_id": bucket_id,
        "order": AMIDAH_BASE_ORDER,
        "applicability": dict(weekday_only),
    }]
    for index, (key, title, description) in enumerate(WEEKDAY_AMIDAH_BLESSINGS, start=1):
        items.append({
            "id": f"{service_id}-{key}",
            "title": title,
            "description": description,
            "bucket_id": bucket_id,
            "order": AMIDAH_BASE_ORDER + index * 10,
            "applicability": {**weekday_only, "amidah_section": key},
        })
    items.append({
        "id": f"{service_id}-amidah-conclusion",
        "title": "Amidah Conclusion",
        "description": "Elokai Netzor, personal prayers, and stepping back.",
        "bucket_id": bucket_id,
        "order": AMIDAH_BASE_ORDER + (len(WEEKDAY_AMIDAH_BLESSINGS) + 1) * 10,
        "applicability": dict(weekday_only),
    })
    return items


def _build() -> dict[str, list[dict]]:
    services = []
    for row in SERVICE_ROWS:
        service_id, category_id, order, title, description = row[:5]
        entry = {"id": service_id, "category_id": category_id, "order": order,
                 "title": title, "description": description}
        if len(row) > 5:
            entry["applicability"] = row[5]
        services.append(entry)

    buckets, items = [], []
    for definition in BUCKET_DEFINITIONS:
        bucket = {k: v for k, v in definition.items() if k != "items"}
        buckets.append(bucket)
        for item in definition["items"]:
            items.append({**item, "bucket_id": bucket["id"]})

    for service_id, bucket_id in WEEKDAY_AMIDAH_BUCKETS:
        items.extend(_weekday_amidah_items(service_id, bucket_id))

    return {"categories": CATEGORIES, "services": services, "buckets": buckets, "items": items}


SIDDUR_CATALOG: dict[str, list[dict]] = _build()
