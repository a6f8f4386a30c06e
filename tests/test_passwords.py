import pytest

from textcrypt.passwords import (
    LOWERCASE,
    NUMBERS,
    SYMBOLS,
    UPPERCASE,
    charset,
    generate_password,
    generate_passwords,
)


def test_default_length_and_charset():
    pw = generate_password()
    assert len(pw) == 16
    assert set(pw) <= set(UPPERCASE + LOWERCASE + NUMBERS + SYMBOLS)


def test_lookalikes_excluded():
    assert "O" not in charset()
    assert "l" not in charset()


@pytest.mark.parametrize("groups, allowed", [
    (dict(lowercase=False, number=False, symbol=False), UPPERCASE),
    (dict(uppercase=False, number=False, symbol=False), LOWERCASE),
    (dict(uppercase=False, lowercase=False, symbol=False), NUMBERS),
    (dict(uppercase=False, lowercase=False, number=False), SYMBOLS),
])
def test_single_group(groups, allowed):
    assert set(generate_password(64, **groups)) <= set(allowed)


def test_many_passwords():
    pws = generate_passwords(5, 20)
    assert len(pws) == 5
    assert all(len(pw) == 20 for pw in pws)
    assert len(set(pws)) == 5


@pytest.mark.parametrize("kwargs", [
    dict(length=0),
    dict(uppercase=False, lowercase=False, number=False, symbol=False),
])
def test_invalid(kwargs):
    with pytest.raises(ValueError):
        generate_password(**kwargs)


def test_invalid_count():
    with pytest.raises(ValueError):
        generate_passwords(0)
