import pytest

from lyrics_picker.match.distance import distance, normalize_name


@pytest.mark.parametrize("name", ["", "Hey Jude", "The Beatles", "Song feat. X", "  a  b  c "])
def test_distance_to_self_is_zero(name):
    assert distance(name, name) == 0


def test_token_order_does_not_matter():
    assert distance("Hey Jude", "Jude Hey") == 0


def test_case_does_not_matter():
    assert distance("HEY JUDE", "hey jude") == 0


@pytest.mark.parametrize("annotated", ["Song feat. X", "Song feat X", "Song ft. X", "Song FT X", "Song Feat. X"])
def test_featuring_marker_is_ignored(annotated):
    assert distance(annotated, "Song X") == 0


def test_featured_artist_name_still_counts():
    # only the marker is dropped, the name after it is a regular token
    assert distance("Song feat. X", "Song") == 1


def test_normalize_name():
    assert normalize_name("Jude Hey feat. X") == "heyjudex"
    assert normalize_name("  ") == ""


def test_deletion_is_cheaper_than_insertion():
    assert distance("Hey Jude", "Hey Jud") == 1
    assert distance("Hey Jud", "Hey Jude") == 2


def test_distance_is_not_symmetric():
    assert distance("abc", "ab") != distance("ab", "abc")


def test_against_empty_strings():
    assert distance("abc", "") == 3
    assert distance("", "abc") == 3


def test_deterministic():
    assert distance("The Beatles", "Beatles") == distance("The Beatles", "Beatles")
