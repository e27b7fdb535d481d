from src.analytics.text_metrics import (
    count_characters,
    count_paragraphs,
    count_sentences,
    count_words,
)
from src.utils.tokens import escape_markup, is_word, word_core


def test_word_core_trims_edge_punctuation():
    assert word_core("(Hello),") == "Hello"
    assert word_core("don't") == "don't"
    assert word_core("--") == ""
    assert word_core("_x_") == "x"


def test_punctuation_only_tokens_are_not_words():
    assert count_words("Hello, world! -- ...") == 2
    assert not is_word("—")


def test_count_words_is_unicode_aware():
    assert count_words("Café naïve 42 über") == 4
    assert count_words("") == 0


def test_count_sentences_uses_delimiter_split():
    assert count_sentences("One. Two! Three? Four") == 4
    # Abbreviations over-split.
    assert count_sentences("e.g. this is it.") == 2
    assert count_sentences("   ") == 0
    assert count_sentences("") == 0


def test_count_paragraphs_uses_blank_lines():
    assert count_paragraphs("First para.\n\nSecond\n  \nThird") == 3
    assert count_paragraphs("one\ntwo") == 1
    assert count_paragraphs("") == 0


def test_count_characters_ignores_whitespace():
    assert count_characters("a b  c") == 3
    assert count_characters("") == 0


def test_escape_markup_only_touches_angle_brackets_and_ampersand():
    assert escape_markup('<a href="x">&</a>') == '&lt;a href="x"&gt;&amp;&lt;/a&gt;'


def test_byte_order_mark_is_not_a_character():
    assert count_characters("\ufeffHello") == 5
