import pytest
from prose_guard import ConfigurationError, DEFAULT_WEASEL_PATTERN
from prose_guard.detectors.weasel import WeaselDetector, find_weasel_words


@pytest.fixture
def detector():
    return WeaselDetector()


def test_two_weasel_words_in_order(detector):
    text = "This is very important and quite significant."
    matches = detector.detect(text)
    assert [m.word for m in matches] == ["very", "quite"]
    assert all(m.line == 1 for m in matches)
    assert matches[0].position == 8
    assert matches[1].position == 27


def test_context_window_radius_20(detector):
    text = "This is very important and quite significant."
    first = detector.detect(text)[0]
    assert first.context_start == 0
    assert first.context == "This is very important and quite"


def test_match_on_third_line(detector):
    text = "First line.\nSecond line.\nThat was fairly obvious."
    matches = detector.detect(text)
    assert len(matches) == 1
    assert matches[0].line == 3
    assert matches[0].word == "fairly"
    assert matches[0].position == 9


def test_empty_pattern_matches_nothing():
    assert find_weasel_words("very many various things", "") == []


def test_whitespace_pattern_matches_nothing():
    assert find_weasel_words("very many various things", "   ") == []


def test_invalid_pattern_raises_configuration_error():
    with pytest.raises(ConfigurationError) as exc_info:
        find_weasel_words("very nice", "very|(unbalanced")
    assert isinstance(exc_info.value, ValueError)
    assert "unbalanced" in str(exc_info.value)


def test_case_insensitive(detector):
    matches = detector.detect("VERY good, Quite good.")
    assert [m.phrase for m in matches] == ["VERY", "Quite"]


def test_grouped_sub_pattern(detector):
    matches = detector.detect("There is a number of reasons.")
    assert len(matches) == 1
    assert matches[0].phrase == "is a number"
    assert matches[0].position == 6


def test_word_boundaries(detector):
    assert detector.detect("Everything in manyfold ways.") == []


def test_repeated_words_do_not_overlap(detector):
    matches = detector.detect("very very very")
    assert [m.position for m in matches] == [0, 5, 10]


def test_context_clipped_at_line_end(detector):
    matches = detector.detect("it was very")
    assert matches[0].context == "it was very"
    assert matches[0].context_start == 0


def test_context_clipped_in_long_line(detector):
    line = "x" * 30 + " very " + "y" * 30
    m = detector.detect(line)[0]
    assert m.position == 31
    assert m.context_start == 11
    assert m.context == line[11:55]
    assert m.highlight() == (line[11:31], "very", line[35:55])


def test_carriage_returns_are_stripped(detector):
    matches = detector.detect("first\r\nvery second\r\n")
    assert len(matches) == 1
    assert matches[0].line == 2
    assert matches[0].context == "very second"


def test_zero_length_alternative_is_ignored():
    matches = find_weasel_words("quite very", "very|")
    assert [(m.phrase, m.position) for m in matches] == [("very", 6)]


def test_custom_regex_alternative():
    matches = find_weasel_words("It was sort of fine, kind   of.", r"sort of|kind\s+of")
    assert [m.phrase for m in matches] == ["sort of", "kind   of"]


def test_offsets_index_into_original_text(detector):
    text = (
        "Many people have various opinions.\n"
        "\n"
        "Some are extremely vocal, a few are mostly quiet.\n"
        "There is a number of clearly vast differences."
    )
    lines = text.split("\n")
    matches = detector.detect(text)
    assert len(matches) == 8
    for m in matches:
        assert lines[m.line - 1][m.position:m.end] == m.phrase
        offset = m.position - m.context_start
        assert m.context[offset:offset + len(m.phrase)].lower() == m.phrase.lower()
    keys = [(m.line, m.position) for m in matches]
    assert keys == sorted(keys)


def test_idempotent(detector):
    text = "Several huge problems.\nA tiny, tiny fix."
    assert detector.detect(text) == detector.detect(text)


def test_default_pattern_is_used():
    assert find_weasel_words("quite", DEFAULT_WEASEL_PATTERN)[0].word == "quite"


def test_empty_text(detector):
    assert detector.detect("") == []
    assert detector.detect("   \n\t\n") == []


def test_accented_letters_are_word_characters(detector):
    assert detector.detect("évery day, trèsvery") == []
    assert [m.word for m in detector.detect("très very")] == ["very"]
