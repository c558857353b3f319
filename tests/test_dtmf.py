import pytest

from voipkit.dtmf import char_to_dtmf, dtmf_to_char


@pytest.mark.parametrize("ch", list("0123456789*#ABCD!"))
def test_round_trip_char(ch):
    assert dtmf_to_char(char_to_dtmf(ch)) == ch


@pytest.mark.parametrize("event", range(17))
def test_round_trip_event(event):
    assert char_to_dtmf(dtmf_to_char(event)) == event


def test_digits_map_to_their_values():
    assert [char_to_dtmf(str(d)) for d in range(10)] == list(range(10))


def test_star_and_pound():
    assert char_to_dtmf("*") == 10
    assert char_to_dtmf("#") == 11


@pytest.mark.parametrize("lower", list("abcd"))
def test_lowercase_letters_equal_uppercase(lower):
    assert char_to_dtmf(lower) == char_to_dtmf(lower.upper())


def test_lowercase_does_not_round_trip_to_lowercase():
    assert dtmf_to_char(char_to_dtmf("a")) == "A"


@pytest.mark.parametrize("bad", ["x", "E", " ", "", "12"])
def test_bad_char(bad):
    with pytest.raises(ValueError, match="bad dtmf char"):
        char_to_dtmf(bad)


@pytest.mark.parametrize("bad", [17, 255, -1])
def test_bad_event(bad):
    with pytest.raises(ValueError, match="bad tel event"):
        dtmf_to_char(bad)