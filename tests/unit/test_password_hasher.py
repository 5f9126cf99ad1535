"""Tests for PasswordHasher."""

import pytest

from catalog.core.crypto import PasswordHasher, PasswordHashingError


class TestPasswordHasher:
    @pytest.mark.parametrize("password", ["secret1", "", "pässwörd-ünïcode", "x" * 100])
    def test_hash_verifies_against_original_password(self, password_hasher, password):
        digest = password_hasher.hash(password)

        assert password_hasher.verify(password, digest) is True

    def test_other_password_does_not_verify(self, password_hasher):
        digest = password_hasher.hash("secret1")

        assert password_hasher.verify("secret2", digest) is False

    def test_same_password_hashes_differently(self, password_hasher):
        # Salt is random and embedded in the digest.
        assert password_hasher.hash("secret1") != password_hasher.hash("secret1")

    def test_cost_factor_is_embedded_in_digest(self):
        hasher = PasswordHasher(rounds=5)

        assert hasher.hash("secret1").startswith("$2b$05$")
        assert hasher.hash("secret1", rounds=4).startswith("$2b$04$")

    def test_digest_from_other_cost_still_verifies(self, password_hasher):
        digest = PasswordHasher(rounds=5).hash("secret1")

        assert password_hasher.verify("secret1", digest) is True

    def test_default_cost_factor(self):
        assert PasswordHasher().rounds == 10

    @pytest.mark.parametrize("rounds", [0, 3, 32])
    def test_rejects_out_of_range_cost_factor(self, rounds):
        with pytest.raises(ValueError):
            PasswordHasher(rounds=rounds)

    def test_malformed_digest_raises_instead_of_mismatch(self, password_hasher):
        with pytest.raises(PasswordHashingError):
            password_hasher.verify("secret1", "not-a-bcrypt-hash")
