"""Tests for validators and the validation registry."""

import hashlib
import threading

import pytest

from mhash import variants
from mhash.exceptions import DigestTooLongError
from mhash.exceptions import RegistryFrozenError
from mhash.hashes import SHAKE_NATIVE_LENGTHS
from mhash.hashes import native_function
from mhash.multihash import MultiHash
from mhash.validation import HashValidator
from mhash.validation import IdentityValidator
from mhash.validation import ShakeValidator
from mhash.validation import ValidationRegistry
from mhash.validation import Validator
from mhash.validation import prefix_matches

DATA = b"The quick brown fox jumps over the lazy dog"

HASHLIB = {
    variants.SHA1: hashlib.sha1,
    variants.SHA2_256: hashlib.sha256,
    variants.SHA2_512: hashlib.sha512,
    variants.SHA3_512: hashlib.sha3_512,
    variants.SHA3_384: hashlib.sha3_384,
    variants.SHA3_256: hashlib.sha3_256,
    variants.SHA3_224: hashlib.sha3_224,
    variants.BLAKE2B: hashlib.blake2b,
    variants.BLAKE2S: hashlib.blake2s,
}


def _flip(digest: bytes, index: int) -> bytes:
    return digest[:index] + bytes([digest[index] ^ 0x01]) + digest[index + 1 :]


class TestPrefixMatches:
    """Tests for the prefix comparison helper."""

    def test_full_and_prefix(self):
        assert prefix_matches(b"abc", b"abc")
        assert prefix_matches(b"ab", b"abc")
        assert prefix_matches(b"", b"abc")

    def test_mismatch(self):
        assert not prefix_matches(b"abd", b"abc")

    def test_too_long(self):
        with pytest.raises(DigestTooLongError) as exc_info:
            prefix_matches(b"abcd", b"abc")
        assert exc_info.value.length == 4
        assert exc_info.value.max_length == 3


class TestBuiltinValidators:
    """Tests for the hashlib validators registered by default."""

    @pytest.mark.parametrize("variant", list(HASHLIB), ids=str)
    def test_every_prefix_validates(self, validators, variant):
        full = HASHLIB[variant](DATA).digest()
        for k in range(len(full) + 1):
            assert MultiHash(variant, full[:k]).validate(DATA, validators) is True

    @pytest.mark.parametrize("variant", list(HASHLIB), ids=str)
    def test_single_byte_difference_fails(self, validators, variant):
        full = HASHLIB[variant](DATA).digest()
        for index in range(len(full)):
            assert MultiHash(variant, _flip(full, index)).validate(DATA, validators) is False

    def test_different_data_fails(self, validators):
        mh = MultiHash(variants.SHA2_256, hashlib.sha256(DATA).digest())
        assert mh.validate(DATA + b".", validators) is False

    def test_identity(self, validators):
        assert MultiHash(variants.IDENTITY, DATA).validate(DATA, validators) is True
        assert MultiHash(variants.IDENTITY, DATA[:5]).validate(DATA, validators) is True
        assert MultiHash(variants.IDENTITY, b"Thx").validate(DATA, validators) is False

    def test_identity_longer_than_data(self, validators):
        with pytest.raises(DigestTooLongError):
            MultiHash(variants.IDENTITY, DATA + b"!").validate(DATA, validators)

    @pytest.mark.parametrize("variant", [variants.SHAKE_128, variants.SHAKE_256], ids=str)
    def test_shake_any_length(self, validators, variant):
        native = SHAKE_NATIVE_LENGTHS[variant]
        long_digest = hashlib.new(variant.name.replace("-", "_"), DATA).digest(native * 3)
        for k in (0, 1, native, native * 3):
            assert MultiHash(variant, long_digest[:k]).validate(DATA, validators) is True
        assert MultiHash(variant, _flip(long_digest, native * 2)).validate(DATA, validators) is False

    def test_application_specific_has_no_validator(self, validators):
        assert MultiHash.with_code(0x0401, b"\x00").validate(DATA, validators) is None

    def test_missing_validator_returns_none(self):
        registry = ValidationRegistry()
        mh = MultiHash(variants.SHA2_256, hashlib.sha256(DATA).digest())
        assert mh.validate(DATA, registry) is None

    def test_every_standard_variant_covered(self, validators):
        assert set(validators.variants()) == set(variants.STANDARD_VARIANTS)


class TestValidatorClasses:
    """Tests for the validator implementations themselves."""

    def test_hash_validator_too_long(self):
        validator = HashValidator(native_function(variants.SHA1))
        with pytest.raises(DigestTooLongError):
            validator.validate(bytes(21), DATA)

    def test_shake_validator_rejects_other_variants(self):
        with pytest.raises(ValueError):
            ShakeValidator(variants.SHA1)

    def test_identity_validator_accepts_bytearray(self):
        assert IdentityValidator().validate(bytearray(DATA[:3]), memoryview(DATA))

    def test_reprs(self):
        assert repr(HashValidator(native_function(variants.SHA1))) == "HashValidator('hash_sha1')"
        assert repr(ShakeValidator(variants.SHAKE_128)) == "ShakeValidator('shake-128')"

    def test_validator_is_abstract(self):
        with pytest.raises(TypeError):
            Validator()  # type: ignore[abstract]


class TestValidationRegistry:
    """Tests for registration, lookup and freezing."""

    def test_register_and_get(self):
        registry = ValidationRegistry()
        validator = IdentityValidator()
        registry.register(variants.IDENTITY, validator)
        assert registry.get(variants.IDENTITY) is validator
        assert registry.get(0x00) is validator
        assert registry.get("identity") is validator
        assert registry.get(variants.SHA1) is None
        assert variants.IDENTITY in registry
        assert "identity" in registry
        assert 0x99 not in registry

    def test_register_application_specific(self):
        class Constant(Validator):
            def validate(self, digest, data):
                return digest == b"ok"

        registry = ValidationRegistry()
        registry.register(0x0401, Constant())
        assert MultiHash.with_code(0x0401, b"ok").validate(b"", registry) is True
        assert MultiHash.with_code(0x0401, b"no").validate(b"", registry) is False
        assert MultiHash.with_code(0x0402, b"ok").validate(b"", registry) is None

    def test_replacement_logged(self, caplog):
        registry = ValidationRegistry()
        registry.register(variants.IDENTITY, IdentityValidator())
        with caplog.at_level("WARNING", logger="mhash.registry"):
            registry.register(variants.IDENTITY, IdentityValidator())
        assert "Replacing validator for identity" in caplog.text

    def test_frozen_registry_rejects_registration(self, validators):
        assert validators.frozen
        with pytest.raises(RegistryFrozenError):
            validators.register(variants.SHA1, IdentityValidator())

    def test_concurrent_reads_after_freeze(self, validators):
        mh = MultiHash(variants.SHA2_256, hashlib.sha256(DATA).digest())
        results = []

        def worker():
            for _ in range(50):
                results.append(validators.validate(mh, DATA))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert results == [True] * 400

    def test_repr(self):
        registry = ValidationRegistry()
        registry.register(variants.SHA1, HashValidator(native_function(variants.SHA1)))
        assert repr(registry) == "ValidationRegistry([sha1], open)"
