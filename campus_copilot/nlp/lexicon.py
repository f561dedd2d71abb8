# Role: Static keyword/phrase tables per category, in English, Sinhala and Tamil.
# Everything here is data; matching lives in fuzzy.py and the rule list in intent_classifier.py.

from __future__ import annotations

from typing import Dict, Tuple

# No hunger words here: those live in the mood table ("I'm hungry" gets a mood reply).
FOOD_KEYWORDS: Tuple[str, ...] = (
    "food", "menu", "cafeteria", "canteen", "canteens", "lunch", "breakfast", "dinner",
    "snack", "snacks", "meal", "dish", "eat", "drink", "drinks", "beverage", "juice",
    "coffee", "tea", "refreshment", "refreshments", "sandwich", "pizza", "burger", "rice",
    "noodles", "soup", "salad", "dessert", "fruit", "milk", "samosa", "pasta", "thali",
    "roti", "paratha", "dal", "biryani", "idli", "dosa", "vada", "chai",
    "cold drink", "soft drink", "ice cream", "smoothie", "momos", "mess", "tiffin",
    "canteen menu",
    "කෑම", "ආහාර", "කැන්ටිම",
    "உணவு", "உணவகம்", "காஃபி", "சாப்பாடு", "கேண்டீன்",
)

GREETING_WORDS: Tuple[str, ...] = (
    "hi", "hello", "hey", "hiya", "yo", "sup", "howdy", "greetings", "hola",
)

GREETING_PHRASES: Tuple[str, ...] = (
    "good morning", "good afternoon", "good evening", "how are you", "what's up", "whats up",
    "ආයුබෝවන්", "හෙලෝ", "කොහොමද", "සුභ උදෑසනක්",
    "வணக்கம்", "ஹலோ", "காலை வணக்கம்",
)

MOOD_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "tired": ("tired", "exhausted", "sleepy", "drained", "worn out", "මහන්සි", "නිදිමත", "சோர்வு", "களைப்பு"),
    "hungry": ("hungry", "starving", "famished", "බඩගිනි", "பசி"),
    "bored": ("bored", "boring", "nothing to do", "කම්මැලි", "එපා වෙලා", "சலிப்பு", "போர்"),
    "stressed": (
        "stressed", "stress", "anxious", "overwhelmed", "pressure", "nervous",
        "ආතතිය", "බය", "மன அழுத்தம்", "பதற்றம்",
    ),
    "sad": ("sad", "unhappy", "lonely", "depressed", "feeling down", "upset", "දුක", "அழுகை", "சோகம்", "கவலை"),
    "happy": ("happy", "excited", "glad", "great day", "සතුටු", "සතුටින්", "மகிழ்ச்சி", "சந்தோஷம்"),
}

# Evaluation order for moods; first hit wins.
MOOD_ORDER: Tuple[str, ...] = ("tired", "hungry", "bored", "stressed", "sad", "happy")

AFFIRMATIVE_KEYWORDS: Tuple[str, ...] = (
    "yes", "yeah", "yep", "yup", "sure", "ok", "okay", "y", "let's play", "lets play",
    "let's go", "lets go", "of course",
    "ඔව්", "හරි", "ஆம்", "சரி",
)

LOCATION_KEYWORDS: Tuple[str, ...] = (
    "where", "directions", "direction", "locate", "location", "navigate", "map", "find",
    "how to get to", "how do i get to", "way to",
    "කොහෙද", "කොතැනද", "මාර්ගය",
    "எங்கே", "எங்கு", "வழி",
)

CAMPUS_LOCATIONS: Tuple[str, ...] = (
    "IT Faculty",
    "Engineering Faculty",
    "Architecture Faculty",
    "Library",
    "Cafeteria",
    "Main Building",
)

SCHEDULE_KEYWORDS: Tuple[str, ...] = (
    "schedule", "schedules", "class", "classes", "timetable", "lecture", "lectures",
    "my next class",
    "කාලසටහන", "පන්ති", "දේශන",
    "அட்டவணை", "வகுப்பு", "விரிவுரை",
)

BUS_KEYWORDS: Tuple[str, ...] = (
    "bus", "buses", "shuttle", "transport", "transportation",
    "බස්", "ප්‍රවාහන",
    "பேருந்து", "பஸ்", "போக்குவரத்து",
)

EVENT_KEYWORDS: Tuple[str, ...] = (
    "event", "events", "upcoming", "workshop", "workshops", "seminar", "seminars", "conference",
    "සිදුවීම්", "උත්සව", "වැඩමුළු",
    "நிகழ்வு", "நிகழ்வுகள்", "பட்டறை",
)

MODULE_KEYWORDS: Tuple[str, ...] = (
    "module", "modules", "subject", "subjects", "course", "courses",
    "විෂය", "මොඩියුල",
    "பாடம்", "பாடங்கள்", "தொகுதி",
)

ACKNOWLEDGMENT_KEYWORDS: Tuple[str, ...] = (
    "thanks", "thank", "thx", "ty", "ok", "okay", "cool", "great", "nice", "awesome",
    "got it", "appreciate it", "cheers", "perfect",
    "ස්තූතියි", "ස්තුතියි", "හොඳයි",
    "நன்றி", "சரி",
)

MEAL_WORDS: Dict[str, Tuple[str, ...]] = {
    "breakfast": ("breakfast", "උදේ කෑම", "උදෑසන", "காலை உணவு", "காலை"),
    "lunch": ("lunch", "දවල් කෑම", "දිවා", "மதிய உணவு", "மதியம்"),
    "dinner": ("dinner", "රෑ කෑම", "රාත්‍රී", "இரவு உணவு", "இரவு"),
}

# Loose substring buckets for the fallback path only; real topic words are caught by the rules above.
FALLBACK_TOPICS: Dict[str, Tuple[str, ...]] = {
    "food": ("eat", "drink", "cafe", "cook", "hungr"),
    "bus": ("ride", "route", "commute", "travel", "stop"),
    "event": ("happening", "fest", "party", "concert", "club"),
    "schedule": ("time", "exam", "lesson", "lab", "tutorial"),
    "location": ("place", "building", "room", "hall", "office"),
}

FALLBACK_TOPIC_ORDER: Tuple[str, ...] = ("food", "bus", "event", "schedule", "location")

# Optional heuristic: Latin-script transliterations that hint at the user's language.
TRANSLITERATION_HINTS: Dict[str, Tuple[str, ...]] = {
    "si": ("ayubowan", "kohomada", "panthi", "pannthi", "kema", "bus eka", "sthuthi", "mokakda"),
    "ta": ("vanakkam", "vakuppu", "saappadu", "nandri", "enge", "eppadi", "perunthu"),
}

# A reply containing any of these is never read as a "yes" to a game offer.
NEGATION_WORDS: Tuple[str, ...] = ("no", "not", "nope", "nah", "don't", "dont", "නැහැ", "එපා", "இல்லை", "வேண்டாம்")

# Everyday words one edit away from a keyword; they only ever match exactly.
NEVER_FUZZY: Tuple[str, ...] = (
    "launch", "lurch", "clash", "clasp", "classy", "coarse", "seminal", "paste",
)
