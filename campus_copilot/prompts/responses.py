# Role: Localized reply templates keyed by (template key, language). Several keys hold synonymous
# variants; any one of them is an acceptable answer, so callers must not depend on which one is picked.

from __future__ import annotations

import random
from typing import Dict, List, Optional

Templates = Dict[str, Dict[str, List[str]]]

TEMPLATES: Templates = {
    "greeting": {
        "en": [
            "Hello! How can I help you today?",
            "Hi there! What can I do for you?",
            "Hey! I'm here to help. What do you need?",
            "Hello! I'm your campus assistant. What would you like to know?",
        ],
        "si": [
            "ආයුබෝවන්! අද මට ඔබට කෙසේ උදව් කළ හැකිද?",
            "හෙලෝ! මට ඔබට කුමක් කළ හැකිද?",
            "ආයුබෝවන්! මම ඔබේ කැම්පස් සහායකයා. ඔබට දැනගත යුත්තේ කුමක්ද?",
        ],
        "ta": [
            "வணக்கம்! இன்று நான் உங்களுக்கு எப்படி உதவ முடியும்?",
            "ஹலோ! உங்களுக்கு என்ன வேண்டும்?",
            "வணக்கம்! நான் உங்கள் வளாக உதவியாளர். என்ன தெரிந்து கொள்ள விரும்புகிறீர்கள்?",
        ],
    },
    "mood_tired": {
        "en": [
            "Sounds like a long day. Grab some water and take a short break. Want to play a quick game to recharge? (yes/no)",
            "You deserve a rest! How about a quick campus quiz game to wake up your brain? (yes/no)",
        ],
        "si": ["දිගු දවසක් වගේ. පොඩි විවේකයක් ගන්න. ප්‍රබෝධමත් වෙන්න ඉක්මන් ක්‍රීඩාවක් කරමුද? (ඔව්/නැහැ)"],
        "ta": ["நீண்ட நாள் போல தெரிகிறது. சிறிது ஓய்வு எடுங்கள். புத்துணர்ச்சி பெற ஒரு சிறிய விளையாட்டு விளையாடலாமா? (ஆம்/இல்லை)"],
    },
    "mood_hungry": {
        "en": [
            "Hungry? I can show you the canteen menus. Just say \"food\" and pick a canteen.",
            "Let's get you fed! Type \"menu\" to see what the canteens are serving.",
        ],
        "si": ["බඩගිනිද? කැන්ටීන් මෙනු බලන්න \"කෑම\" කියා ටයිප් කරන්න."],
        "ta": ["பசிக்கிறதா? உணவக மெனுவைப் பார்க்க \"உணவு\" என்று தட்டச்சு செய்யுங்கள்."],
    },
    "mood_bored": {
        "en": [
            "Bored? Let's fix that. Want to play the campus quiz game? (yes/no)",
            "How about a quick game to pass the time? (yes/no)",
        ],
        "si": ["කම්මැලිද? කැම්පස් ප්‍රශ්න ක්‍රීඩාව කරමුද? (ඔව්/නැහැ)"],
        "ta": ["சலிப்பாக உள்ளதா? வளாக வினாடி வினா விளையாட்டு விளையாடலாமா? (ஆம்/இல்லை)"],
    },
    "mood_stressed": {
        "en": [
            "Take a deep breath, you've got this. Would you like to try the mood insights game to check in with yourself? (yes/no)",
            "Exams and deadlines can pile up. Want to try a short mood check-in game? (yes/no)",
        ],
        "si": ["ගැඹුරු හුස්මක් ගන්න, ඔබට පුළුවන්. ඔබේ මනෝභාවය බලන ක්‍රීඩාව උත්සාහ කරමුද? (ඔව්/නැහැ)"],
        "ta": ["ஆழ்ந்த மூச்சு விடுங்கள், உங்களால் முடியும். மனநிலை சரிபார்ப்பு விளையாட்டை முயற்சிக்கலாமா? (ஆம்/இல்லை)"],
    },
    "mood_sad": {
        "en": [
            "I'm sorry you're feeling this way. Talking to a friend or the student counsellor can help. Want to try the mood insights game? (yes/no)",
            "That sounds hard. Would a short mood check-in game help? (yes/no)",
        ],
        "si": ["ඔබට එසේ දැනීම ගැන කණගාටුයි. මිතුරෙකු හෝ ශිෂ්‍ය උපදේශකවරයා සමඟ කතා කිරීම උදව් වේවි. මනෝභාව ක්‍රීඩාව උත්සාහ කරමුද? (ඔව්/නැහැ)"],
        "ta": ["நீங்கள் இப்படி உணர்வதற்கு வருந்துகிறேன். நண்பர் அல்லது மாணவர் ஆலோசகருடன் பேசுவது உதவும். மனநிலை விளையாட்டை முயற்சிக்கலாமா? (ஆம்/இல்லை)"],
    },
    "mood_happy": {
        "en": [
            "Love the energy! Anything I can help you with today?",
            "That's great to hear! What can I do for you?",
        ],
        "si": ["ඒක අහන්න සතුටුයි! අද මට ඔබට උදව් කළ හැක්කේ කෙසේද?"],
        "ta": ["கேட்க மகிழ்ச்சியாக உள்ளது! இன்று நான் எப்படி உதவ முடியும்?"],
    },
    "acknowledgment": {
        "en": [
            "You're welcome! Is there anything else I can help you with?",
            "Happy to help! Let me know if you need anything else.",
            "Anytime! Feel free to ask if you have more questions.",
        ],
        "si": ["ඔබව සාදරයෙන් පිළිගනිමු! තවත් යමක් අවශ්‍යද?"],
        "ta": ["பரவாயில்லை! வேறு ஏதாவது உதவி வேண்டுமா?"],
    },
    "location_help": {
        "en": ["I can show you these places on the campus map: {locations}. Which one are you looking for?"],
        "si": ["මට මෙම ස්ථාන කැම්පස් සිතියමේ පෙන්විය හැක: {locations}. ඔබ සොයන්නේ කුමක්ද?"],
        "ta": ["இந்த இடங்களை வளாக வரைபடத்தில் காட்ட முடியும்: {locations}. நீங்கள் எதைத் தேடுகிறீர்கள்?"],
    },
    "student_only": {
        "en": ["Class schedules and modules are only available for student accounts."],
        "si": ["පන්ති කාලසටහන් සහ විෂයයන් ලබා ගත හැක්කේ ශිෂ්‍ය ගිණුම් සඳහා පමණි."],
        "ta": ["வகுப்பு அட்டவணைகள் மற்றும் பாடங்கள் மாணவர் கணக்குகளுக்கு மட்டுமே கிடைக்கும்."],
    },
    "degree_not_set": {
        "en": ["I need to know your degree to help with that. Please set your degree in your profile."],
        "si": ["ඒ සඳහා ඔබේ උපාධිය දැනගත යුතුයි. කරුණාකර ඔබේ පැතිකඩෙහි උපාධිය සකසන්න."],
        "ta": ["அதற்கு உங்கள் பட்டப்படிப்பு தெரிய வேண்டும். உங்கள் சுயவிவரத்தில் பட்டப்படிப்பை அமைக்கவும்."],
    },
    "schedule_header": {
        "en": ["Here are your remaining {degree} classes for {day}:"],
        "si": ["{day} දිනට ඉතිරි {degree} පන්ති මෙන්න:"],
        "ta": ["{day} அன்று மீதமுள்ள {degree} வகுப்புகள் இதோ:"],
    },
    "no_classes_today": {
        "en": ["There are no {degree} classes scheduled for today ({day})."],
        "si": ["අද ({day}) {degree} පන්ති කිසිවක් නියමිත නැත."],
        "ta": ["இன்று ({day}) {degree} வகுப்புகள் எதுவும் திட்டமிடப்படவில்லை."],
    },
    "no_more_classes": {
        "en": ["You have no more {degree} classes today. Enjoy the rest of your day!"],
        "si": ["අද ඔබට තවත් {degree} පන්ති නැත. ඉතිරි දවස භුක්ති විඳින්න!"],
        "ta": ["இன்று உங்களுக்கு மேலும் {degree} வகுப்புகள் இல்லை. மீதமுள்ள நாளை அனுபவியுங்கள்!"],
    },
    "bus_header": {
        "en": ["Here are the campus bus routes:"],
        "si": ["කැම්පස් බස් මාර්ග මෙන්න:"],
        "ta": ["வளாக பேருந்து வழித்தடங்கள் இதோ:"],
    },
    "no_bus_routes": {
        "en": ["I don't see any bus routes in the system yet."],
        "si": ["පද්ධතියේ තවම බස් මාර්ග කිසිවක් නැත."],
        "ta": ["கணினியில் இன்னும் பேருந்து வழித்தடங்கள் எதுவும் இல்லை."],
    },
    "events_header": {
        "en": ["Here are the upcoming events:"],
        "si": ["ඉදිරි සිදුවීම් මෙන්න:"],
        "ta": ["வரவிருக்கும் நிகழ்வுகள் இதோ:"],
    },
    "no_events": {
        "en": ["There are no upcoming events right now."],
        "si": ["දැනට ඉදිරි සිදුවීම් කිසිවක් නැත."],
        "ta": ["தற்போது வரவிருக்கும் நிகழ்வுகள் எதுவும் இல்லை."],
    },
    "no_modules": {
        "en": ["I couldn't find any modules for the {degree} degree."],
        "si": ["{degree} උපාධිය සඳහා විෂයයන් කිසිවක් හමු නොවීය."],
        "ta": ["{degree} பட்டப்படிப்புக்கு பாடங்கள் எதுவும் கிடைக்கவில்லை."],
    },
    "canteen_none": {
        "en": ["No canteen menus are available right now."],
        "si": ["දැනට කැන්ටීන් මෙනු කිසිවක් නොමැත."],
        "ta": ["தற்போது உணவக மெனுக்கள் எதுவும் இல்லை."],
    },
    "canteen_ask_meal": {
        "en": ["Which meal would you like to see for {canteen}? (breakfast, lunch, dinner)"],
        "si": ["{canteen} සඳහා ඔබට බැලීමට අවශ්‍ය කුමන ආහාර වේලද? (breakfast, lunch, dinner)"],
        "ta": ["{canteen} க்கு எந்த உணவு வேளையைப் பார்க்க விரும்புகிறீர்கள்? (breakfast, lunch, dinner)"],
    },
    "canteen_invalid": {
        "en": ["I don't know a canteen called \"{name}\". Please choose one of: {choices}."],
        "si": ["\"{name}\" නමින් කැන්ටීනක් මා දන්නේ නැත. කරුණාකර මේවායින් එකක් තෝරන්න: {choices}."],
        "ta": ["\"{name}\" என்ற உணவகம் எனக்குத் தெரியாது. இவற்றில் ஒன்றைத் தேர்ந்தெடுக்கவும்: {choices}."],
    },
    "meal_invalid": {
        "en": ["\"{name}\" isn't a meal I know. Please choose breakfast, lunch or dinner."],
        "si": ["\"{name}\" මා දන්නා ආහාර වේලක් නොවේ. කරුණාකර breakfast, lunch හෝ dinner තෝරන්න."],
        "ta": ["\"{name}\" எனக்குத் தெரிந்த உணவு வேளை அல்ல. breakfast, lunch அல்லது dinner தேர்ந்தெடுக்கவும்."],
    },
    "menu_header": {
        "en": ["{meal} at {canteen}:"],
        "si": ["{canteen} හි {meal}:"],
        "ta": ["{canteen} இல் {meal}:"],
    },
    "menu_empty": {
        "en": ["{canteen} has no {meal} items listed right now."],
        "si": ["{canteen} හි දැනට {meal} අයිතම ලැයිස්තුගත කර නැත."],
        "ta": ["{canteen} இல் தற்போது {meal} உணவுகள் பட்டியலிடப்படவில்லை."],
    },
    "canteen_gone": {
        "en": ["Sorry, the menu for {canteen} is no longer available. Say \"food\" to start again."],
        "si": ["සමාවන්න, {canteen} සඳහා මෙනුව තවදුරටත් නොමැත. නැවත ආරම්භ කිරීමට \"කෑම\" කියන්න."],
        "ta": ["மன்னிக்கவும், {canteen} மெனு இனி கிடைக்கவில்லை. மீண்டும் தொடங்க \"உணவு\" என்று சொல்லுங்கள்."],
    },
    "fallback": {
        "en": [
            "I'm not sure I understand. You can ask me about class schedules, bus timings, canteen menus, events or campus locations.",
            "Sorry, I didn't get that. Try asking about your classes, buses, food, events or where something is.",
        ],
        "si": ["මට ඔබේ ප්‍රශ්නය තේරුම් ගැනීමට අපහසුයි. පන්ති කාලසටහන්, බස් වේලාවන්, කැන්ටීන් මෙනු, සිදුවීම් හෝ ස්ථාන ගැන අසන්න."],
        "ta": ["உங்கள் கேள்வியை புரிந்து கொள்ள எனக்கு சிரமமாக உள்ளது. வகுப்பு அட்டவணைகள், பேருந்து நேரங்கள், உணவக மெனு, நிகழ்வுகள் அல்லது இடங்கள் பற்றி கேளுங்கள்."],
    },
    "fallback_clarify": {
        "en": ["Are you asking about {topic}? Try asking it like: \"{example}\"."],
        "si": ["ඔබ අසන්නේ {topic} ගැනද? මෙසේ අසන්න: \"{example}\"."],
        "ta": ["நீங்கள் {topic} பற்றி கேட்கிறீர்களா? இப்படி கேளுங்கள்: \"{example}\"."],
    },
    "fallback_escalation": {
        "en": [
            "I'm still having trouble understanding. Here are some things you can ask me:\n"
            "1. Show my class schedule\n"
            "2. When is the next bus?\n"
            "3. Any upcoming events?\n"
            "4. Show the canteen menu\n"
            "5. Where is the library?"
        ],
        "si": [
            "මට තවමත් තේරුම් ගැනීමට අපහසුයි. ඔබට මෙවැනි දේ ඇසිය හැක:\n"
            "1. මගේ පන්ති කාලසටහන\n"
            "2. ඊළඟ බස් එක කවදාද?\n"
            "3. ඉදිරි සිදුවීම්\n"
            "4. කැන්ටීන් මෙනුව\n"
            "5. පුස්තකාලය කොහෙද?"
        ],
        "ta": [
            "எனக்கு இன்னும் புரியவில்லை. நீங்கள் இவற்றைக் கேட்கலாம்:\n"
            "1. எனது வகுப்பு அட்டவணை\n"
            "2. அடுத்த பேருந்து எப்போது?\n"
            "3. வரவிருக்கும் நிகழ்வுகள்\n"
            "4. உணவக மெனு\n"
            "5. நூலகம் எங்கே?"
        ],
    },
    "error_fetching_schedule": {
        "en": ["Sorry, I couldn't fetch your schedule. Please try again later."],
        "si": ["සමාවන්න, ඔබේ කාලසටහන ලබා ගැනීමට නොහැකි විය. කරුණාකර පසුව නැවත උත්සාහ කරන්න."],
        "ta": ["மன்னிக்கவும், உங்கள் அட்டவணையைப் பெற முடியவில்லை. பின்னர் மீண்டும் முயற்சிக்கவும்."],
    },
    "error_fetching_bus": {
        "en": ["Sorry, I couldn't fetch the bus routes. Please try again later."],
        "si": ["සමාවන්න, බස් මාර්ග ලබා ගැනීමට නොහැකි විය. කරුණාකර පසුව නැවත උත්සාහ කරන්න."],
        "ta": ["மன்னிக்கவும், பேருந்து வழித்தடங்களைப் பெற முடியவில்லை. பின்னர் மீண்டும் முயற்சிக்கவும்."],
    },
    "error_fetching_events": {
        "en": ["Sorry, I couldn't fetch the events. Please try again later."],
        "si": ["සමාවන්න, සිදුවීම් ලබා ගැනීමට නොහැකි විය. කරුණාකර පසුව නැවත උත්සාහ කරන්න."],
        "ta": ["மன்னிக்கவும், நிகழ்வுகளைப் பெற முடியவில்லை. பின்னர் மீண்டும் முயற்சிக்கவும்."],
    },
    "error_fetching_modules": {
        "en": ["Sorry, I couldn't fetch your modules. Please try again later."],
        "si": ["සමාවන්න, ඔබේ විෂයයන් ලබා ගැනීමට නොහැකි විය. කරුණාකර පසුව නැවත උත්සාහ කරන්න."],
        "ta": ["மன்னிக்கவும், உங்கள் பாடங்களைப் பெற முடியவில்லை. பின்னர் மீண்டும் முயற்சிக்கவும்."],
    },
    "error_fetching_canteen": {
        "en": ["Sorry, I couldn't fetch the canteen menus. Please try again later."],
        "si": ["සමාවන්න, කැන්ටීන් මෙනු ලබා ගැනීමට නොහැකි විය. කරුණාකර පසුව නැවත උත්සාහ කරන්න."],
        "ta": ["மன்னிக்கவும், உணவக மெனுக்களைப் பெற முடியவில்லை. பின்னர் மீண்டும் முயற்சிக்கவும்."],
    },
    "error_generic": {
        "en": ["Sorry, I encountered an error. Please try again."],
        "si": ["සමාවෙන්න, මට දෝෂයක් ඇති විය. කරුණාකර නැවත උත්සාහ කරන්න."],
        "ta": ["மன்னிக்கவும், நான் ஒரு பிழையை சந்தித்தேன். தயவுசெய்து மீண்டும் முயற்சிக்கவும்."],
    },
}

# Labels used inside rendered blocks and fallback questions.
LABELS: Dict[str, Dict[str, str]] = {
    "duration": {"en": "Duration", "si": "කාලය", "ta": "கால அளவு"},
    "schedule": {"en": "Schedule", "si": "කාලසටහන", "ta": "அட்டவணை"},
    "date": {"en": "Date", "si": "දිනය", "ta": "தேதி"},
    "time": {"en": "Time", "si": "වේලාව", "ta": "நேரம்"},
    "location": {"en": "Location", "si": "ස්ථානය", "ta": "இடம்"},
    "with": {"en": "with", "si": "සමඟ", "ta": "உடன்"},
    "topic_food": {"en": "food or the canteen", "si": "කෑම හෝ කැන්ටීන්", "ta": "உணவு அல்லது உணவகம்"},
    "topic_bus": {"en": "buses", "si": "බස්", "ta": "பேருந்துகள்"},
    "topic_event": {"en": "events", "si": "සිදුවීම්", "ta": "நிகழ்வுகள்"},
    "topic_schedule": {"en": "your class schedule", "si": "ඔබේ පන්ති කාලසටහන", "ta": "உங்கள் வகுப்பு அட்டவணை"},
    "topic_location": {"en": "a campus location", "si": "කැම්පස් ස්ථානයක්", "ta": "ஒரு வளாக இடம்"},
    "example_food": {"en": "show the canteen menu", "si": "කැන්ටීන් මෙනුව පෙන්වන්න", "ta": "உணவக மெனுவைக் காட்டு"},
    "example_bus": {"en": "when is the next bus?", "si": "ඊළඟ බස් එක කවදාද?", "ta": "அடுத்த பேருந்து எப்போது?"},
    "example_event": {"en": "any upcoming events?", "si": "ඉදිරි සිදුවීම් මොනවාද?", "ta": "வரவிருக்கும் நிகழ்வுகள் என்ன?"},
    "example_schedule": {"en": "show my schedule", "si": "මගේ කාලසටහන පෙන්වන්න", "ta": "எனது அட்டவணையைக் காட்டு"},
    "example_location": {"en": "where is the library?", "si": "පුස්තකාලය කොහෙද?", "ta": "நூலகம் எங்கே?"},
}


def variants(key: str, language: str) -> List[str]:
    # Unknown languages fall back to English; unknown keys are a programming error.
    table = TEMPLATES[key]
    return table.get(language) or table["en"]


def render(key: str, language: str, rng: Optional[random.Random] = None, **values: str) -> str:
    # Key line: picking among synonymous variants is the only source of non-determinism.
    chooser = rng or random
    template = chooser.choice(variants(key, language))
    return template.format(**values) if values else template


def label(key: str, language: str) -> str:
    entry = LABELS[key]
    return entry.get(language) or entry["en"]
