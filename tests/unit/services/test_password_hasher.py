from src.app.services.password_hasher import hash_password, verify_password


def test_hash_round_trip():
    password_hash = hash_password("Wonderland1!")

    assert password_hash != "Wonderland1!"
    assert password_hash.startswith("$2")
    assert verify_password("Wonderland1!", password_hash)
    assert not verify_password("Wonderland2!", password_hash)


def test_each_hash_uses_fresh_salt():
    assert hash_password("Wonderland1!") != hash_password("Wonderland1!")


def test_verify_against_non_bcrypt_value():
    assert not verify_password("Wonderland1!", "not-a-bcrypt-hash")
