import pytest

from shelf_api.security import (
    hash_password,
    stored_answers,
    verify_password,
    verify_security_answers,
)


def test_hash_password_is_salted():
    first = hash_password("secret", rounds=4)
    second = hash_password("secret", rounds=4)
    assert first != "secret"
    assert first != second
    assert first.startswith("$2")


def test_hash_password_uses_cost_factor():
    assert hash_password("secret", rounds=5).split("$")[2] == "05"


def test_verify_password():
    hashed = hash_password("secret", rounds=4)
    assert verify_password("secret", hashed)
    assert not verify_password("Secret", hashed)
    assert not verify_password("", hashed)


def test_verify_password_never_compares_plaintext():
    assert not verify_password("secret", "secret")
    assert not verify_password("secret", "")


def test_verify_security_answers_positional():
    stored = ["Hedwig", "Quidditch Through the Ages", "Evans"]
    assert verify_security_answers(["Hedwig", "Quidditch Through the Ages", "Evans"], stored)
    assert not verify_security_answers(["Evans", "Quidditch Through the Ages", "Hedwig"], stored)
    assert not verify_security_answers(["hedwig", "Quidditch Through the Ages", "Evans"], stored)


@pytest.mark.parametrize(
    "provided, stored",
    [
        (["a", "b"], ["a", "b"]),
        (["a", "b", "c"], ["a", "b"]),
        ([], []),
    ],
)
def test_verify_security_answers_requires_three(provided, stored):
    assert not verify_security_answers(provided, stored)


def test_stored_answers():
    user = {
        "email": "x@example.com",
        "securityQuestions": [
            {"question": "q1", "answer": "a"},
            {"answer": "b"},
            {"answer": "c"},
        ],
    }
    assert stored_answers(user) == ["a", "b", "c"]
    assert stored_answers({"email": "x@example.com"}) is None
    assert stored_answers({"securityQuestions": ["a", "b", "c"]}) is None
