import pytest

from campus_copilot.nlp.sentiment import analyze_sentiment, sentiment_label


def test_empty_text_is_neutral():
    assert analyze_sentiment("") == 0.0
    assert analyze_sentiment("   ") == 0.0


def test_short_positive_message_scores_per_word():
    assert analyze_sentiment("thanks, great help") == 1.0


def test_mixed_words_cancel_out():
    assert analyze_sentiment("good but slow") == 0.0


def test_long_messages_are_normalized_by_length():
    text = "the bus was late " + "and " * 16  # 20 tokens, one negative word
    assert analyze_sentiment(text) == pytest.approx(-0.5)


def test_score_is_clamped():
    assert analyze_sentiment("bad awful terrible") == -1.0


def test_whole_words_only():
    assert analyze_sentiment("likely") == 0.0


def test_sentiment_label():
    assert sentiment_label(0.4) == "positive"
    assert sentiment_label(-0.1) == "negative"
    assert sentiment_label(0.0) == "neutral"
