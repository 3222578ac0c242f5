"""Hook specifications through which plugins contribute validators and generators."""

from __future__ import annotations

from collections.abc import Iterable

from mhash.generation.base import Generator
from mhash.validation.base import Validator
from mhash.variants import Variant

from .markers import hook_spec


class RegistrySpec:
    """Hook specifications called once while a registry is being initialized."""

    @hook_spec
    def mhash_register_validators(self) -> Iterable[tuple[Variant | int | str, Validator]]:
        """
        Called to collect the validators a plugin provides.

        Returns:
            ``(variant, validator)`` pairs, or None to contribute nothing. Pairs from plugins
            registered later replace those from earlier ones for the same variant.
        """

    @hook_spec
    def mhash_register_generators(self) -> Iterable[tuple[Variant | int | str, Generator]]:
        """
        Called to collect the generators a plugin provides.

        Returns:
            ``(variant, generator)`` pairs, or None to contribute nothing. Pairs from plugins
            registered later replace those from earlier ones for the same variant.
        """
