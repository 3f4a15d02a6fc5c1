from recruitment.utils.passwords import ALGORITHM, hash_password, verify_password


def test_hash_is_salted_and_not_plaintext():
    first = hash_password("hunter2", iterations=1_000)
    second = hash_password("hunter2", iterations=1_000)
    assert first != second
    assert "hunter2" not in first
    assert first.startswith(f"{ALGORITHM}$1000$")


def test_verify_password_round_trip():
    stored = hash_password("hunter2", iterations=1_000)
    assert verify_password("hunter2", stored) is True
    assert verify_password("hunter3", stored) is False


def test_verify_password_rejects_missing_or_malformed_hash():
    assert verify_password("hunter2", None) is False
    assert verify_password("hunter2", "") is False
    assert verify_password("hunter2", "hunter2") is False
    assert verify_password("hunter2", "md5$1$00$00") is False
