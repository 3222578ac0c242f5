"""Registry of validators keyed by variant."""

from __future__ import annotations

import logging

from mhash.multihash import MultiHash
from mhash.registry import VariantTable
from mhash.validation.base import Validator

logger = logging.getLogger(__name__)


class ValidationRegistry(VariantTable[Validator]):
    """
    Validators keyed by variant.

    Built explicitly and passed to call sites; see ``mhash.plugins.create_validation_registry`` for a
    registry populated from the installed plugins.

    Examples:
        >>> import hashlib
        >>> from mhash.validation.base import HashValidator
        >>> from mhash.variants import SHA2_256
        >>> registry = ValidationRegistry()
        >>> registry.register(SHA2_256, HashValidator(lambda d: hashlib.sha256(d).digest()))
        >>> mh = MultiHash(SHA2_256, hashlib.sha256(b"data").digest()[:8])
        >>> registry.validate(mh, b"data")
        True
        >>> registry.validate(MultiHash.with_name("sha1", b""), b"data") is None
        True
    """

    kind = "validator"

    def validate(self, multihash: MultiHash, data: bytes) -> bool | None:
        """
        Validate ``multihash`` against ``data``.

        Returns:
            True on a match, False on a mismatch and None when no validator is registered for the
            multihash's variant.

        Raises:
            DigestTooLongError: If the digest is longer than the recomputed hash.
        """
        validator = self._entries.get(multihash.variant)
        if validator is None:
            logger.debug(f"No validator registered for {multihash.variant}")
            return None
        return validator.validate(multihash.digest, data)


__all__ = ["ValidationRegistry"]
