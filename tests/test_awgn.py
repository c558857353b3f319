from itertools import islice

from voipkit.awgn import AWGN, DBM0_MAX_POWER


def test_known_samples():
    awgn = AWGN(-50.0)
    assert [awgn.get() for _ in range(5)] == [64, -28, 1, 34, -73]


def test_iteration_matches_get():
    a = AWGN(-50.0)
    b = AWGN(-50.0)
    assert list(islice(a, 20)) == [b.get() for _ in range(20)]


def test_iter_known_samples():
    assert list(islice(AWGN(-50.0), 5)) == [64, -28, 1, 34, -73]


def test_deterministic_for_same_seed():
    a = AWGN(-30.0, seed=12345)
    b = AWGN(-30.0, seed=12345)
    assert list(islice(a, 100)) == list(islice(b, 100))


def test_negative_seed_same_as_positive():
    a = AWGN(-40.0, seed=-999)
    b = AWGN(-40.0, seed=999)
    assert list(islice(a, 50)) == list(islice(b, 50))


def test_from_dbov_matches_dbm0():
    a = AWGN.from_dbov(7162534, -50.0 - DBM0_MAX_POWER)
    assert list(islice(a, 5)) == [64, -28, 1, 34, -73]


def test_loud_noise_saturates_within_int16():
    samples = list(islice(AWGN(100.0), 200))
    assert all(-32768 <= s <= 32767 for s in samples)
    assert any(s in (32767, -32768) for s in samples)


def test_louder_noise_has_more_energy():
    quiet = list(islice(AWGN(-60.0), 500))
    loud = list(islice(AWGN(-20.0), 500))
    assert sum(s * s for s in loud) > sum(s * s for s in quiet)