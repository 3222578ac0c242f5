"""Tests for generators and the generation registry."""

import hashlib

import pytest

from mhash import variants
from mhash.exceptions import LengthTooLongError
from mhash.exceptions import RegistryFrozenError
from mhash.exceptions import UnknownCodeError
from mhash.exceptions import UnsupportedVariantError
from mhash.generation import DEFAULT_VARIANT
from mhash.generation import GenerationRegistry
from mhash.generation import Generator
from mhash.generation import HashGenerator
from mhash.hashes import SHAKE_NATIVE_LENGTHS
from mhash.multihash import MultiHash
from mhash.plugins import create_generation_registry

DATA = b"hello multihash"


class TestBuiltinGenerators:
    """Tests for the hashlib generators registered by default."""

    def test_default_variant_is_sha2_256(self, generators):
        assert DEFAULT_VARIANT is variants.SHA2_256
        mh = generators.generate(DATA)
        assert mh == MultiHash(variants.SHA2_256, hashlib.sha256(DATA).digest())

    @pytest.mark.parametrize(
        "variant", [v for v in variants.STANDARD_VARIANTS if not v.is_unbounded], ids=str
    )
    def test_fixed_variants_generate_full_length(self, generators, variant):
        mh = generators.generate(DATA, variant)
        assert mh.variant is variant
        assert len(mh) == variant.max_len

    @pytest.mark.parametrize("variant", [variants.SHAKE_128, variants.SHAKE_256], ids=str)
    def test_shake_native_length(self, generators, variant):
        assert len(generators.generate(DATA, variant)) == SHAKE_NATIVE_LENGTHS[variant]

    def test_identity_stores_data(self, generators):
        assert generators.generate(DATA, "identity").digest == DATA

    def test_variant_by_code_and_name(self, generators):
        assert generators.generate(DATA, 0x40) == generators.generate(DATA, "blake2b")
        assert generators.generate(DATA, "blake2b").digest == hashlib.blake2b(DATA).digest()

    def test_generated_hash_validates(self, generators, validators):
        for variant in variants.STANDARD_VARIANTS:
            assert generators.generate(DATA, variant).validate(DATA, validators) is True

    def test_unknown_variant(self, generators):
        with pytest.raises(UnknownCodeError):
            generators.generate(DATA, "md5")

    def test_application_specific_unsupported(self, generators):
        with pytest.raises(UnsupportedVariantError):
            generators.generate(DATA, 0x0401)


class TestGenerationRegistry:
    """Tests for explicit registries."""

    def test_overridable_default(self):
        registry = GenerationRegistry(default_variant="blake2s")
        registry.register("blake2s", HashGenerator(lambda d: hashlib.blake2s(d).digest()))
        assert registry.generate(DATA).variant is variants.BLAKE2S

    def test_factory_default_variant(self):
        registry = create_generation_registry(load_entry_points=False, default_variant="sha3-256")
        assert registry.default_variant is variants.SHA3_256
        assert registry.generate(DATA).name == "sha3-256"

    def test_empty_registry(self):
        with pytest.raises(UnsupportedVariantError, match="sha2-256"):
            GenerationRegistry().generate(DATA)

    def test_oversized_generator_output_rejected(self):
        class Oversized(Generator):
            def digest(self, data):
                return bytes(21)

        registry = GenerationRegistry()
        registry.register(variants.SHA1, Oversized())
        with pytest.raises(LengthTooLongError):
            registry.generate(DATA, variants.SHA1)

    def test_application_specific_generator(self):
        class Tagged(Generator):
            def digest(self, data):
                return b"tag:" + data[:4]

        registry = GenerationRegistry(default_variant=0x0404)
        registry.register(0x0404, Tagged())
        assert registry.generate(DATA) == MultiHash.with_code(0x0404, b"tag:hell")

    def test_frozen(self, generators):
        with pytest.raises(RegistryFrozenError):
            generators.register(variants.SHA1, HashGenerator(lambda d: b""))
