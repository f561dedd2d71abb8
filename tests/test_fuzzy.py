from campus_copilot.nlp.fuzzy import (
    best_phrase_match,
    find_keyword,
    find_phrase_in_tokens,
    is_similar,
    normalize,
    tokenize,
)


def test_normalize_and_tokenize():
    assert normalize("  Where   IS the\tLibrary ") == "where is the library"
    assert tokenize("Hi, where's the bus?") == ["hi", "where's", "the", "bus"]


def test_is_similar_uses_edit_distance():
    assert is_similar("shedule", "schedule", 1)
    assert not is_similar("schdl", "schedule", 1)


def test_find_keyword_tolerates_one_typo_in_long_words():
    assert find_keyword("show my shedule", ["schedule"]) == "schedule"
    assert find_keyword("any evnets", ["events"]) is None  # transposition costs 2
    assert find_keyword("any evens", ["events"]) == "events"


def test_short_words_match_exactly_only():
    assert find_keyword("is there a bus", ["bus"]) == "bus"
    assert find_keyword("i'm so busy", ["bus"]) is None
    assert find_keyword("even so", ["event"]) is None


def test_multiword_and_non_latin_keywords_match_by_substring():
    assert find_keyword("what's on the canteen menu today", ["canteen menu"]) == "canteen menu"
    assert find_keyword("අද පන්ති තියෙනවද", ["පන්ති"]) == "පන්ති"


def test_exact_mode_rejects_typos():
    assert find_keyword("wherr is it", ["where"], max_distance=0) is None


def test_best_phrase_match_for_whole_message():
    names = ["IT Faculty", "Library", "Main Building"]
    assert best_phrase_match("libary", names) == "Library"
    assert best_phrase_match("the main bulding", names) == "Main Building"
    assert best_phrase_match("cafeteria menu", names) is None


def test_find_phrase_in_tokens_uses_a_sliding_window():
    names = ["IT Faculty", "Library"]
    assert find_phrase_in_tokens(["where", "is", "the", "it", "faculty"], names) == "IT Faculty"
    assert find_phrase_in_tokens(["where", "is", "room", "9"], names) is None


def test_typos_keep_the_first_letter():
    assert find_keyword("who is the winner", ["dinner"]) is None
    assert find_keyword("glass art", ["class"]) is None
    assert find_keyword("what's for dinnr", ["dinner"]) == "dinner"


def test_everyday_words_never_stand_in_for_keywords():
    assert find_keyword("the launch event", ["lunch"]) is None
    assert find_keyword("lunch please", ["lunch"]) == "lunch"
