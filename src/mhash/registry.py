"""Per-variant lookup tables with a one-time initialization window."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from typing import Generic, TypeVar

from typing_extensions import Self

from mhash.exceptions import RegistryFrozenError
from mhash.exceptions import UnknownCodeError
from mhash.variants import Variant
from mhash.variants import resolve

logger = logging.getLogger(__name__)

T = TypeVar("T")


class VariantTable(Generic[T]):
    """
    Mapping from variant to a shared handler object (validator or generator).

    Registration happens during an initialization phase and is serialized by a lock. Calling
    ``freeze`` closes that phase: later registrations raise ``RegistryFrozenError`` and lookups,
    which never lock, may then run from any number of threads.
    """

    kind = "handler"

    def __init__(self) -> None:
        self._entries: dict[Variant, T] = {}
        self._lock = threading.Lock()
        self._frozen = False

    def register(self, variant: Variant | int | str, handler: T) -> None:
        """
        Bind ``handler`` to ``variant``, replacing any previous binding.

        Args:
            variant: Variant, numeric code or canonical name.
            handler: Object shared for the lifetime of the registry.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
        """
        resolved = resolve(variant)
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"cannot register {self.kind} for {resolved}: registry is frozen"
                )
            previous = self._entries.get(resolved)
            if previous is not None and previous is not handler:
                logger.warning(f"Replacing {self.kind} for {resolved}: {previous!r} -> {handler!r}")
            self._entries[resolved] = handler
        logger.debug(f"Registered {self.kind} {handler!r} for {resolved}")

    def get(self, variant: Variant | int | str) -> T | None:
        """Return the handler bound to ``variant``, or None."""
        return self._entries.get(resolve(variant))

    def freeze(self) -> Self:
        """End the initialization window. Returns self for chaining."""
        with self._lock:
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def variants(self) -> tuple[Variant, ...]:
        """Variants with a registered handler, ordered by code."""
        return tuple(sorted(self._entries, key=lambda v: v.code))

    def __contains__(self, variant: object) -> bool:
        if isinstance(variant, Variant):
            return variant in self._entries
        if isinstance(variant, (int, str)) and not isinstance(variant, bool):
            try:
                return self.get(variant) is not None
            except UnknownCodeError:
                return False
        return False

    def __iter__(self) -> Iterator[Variant]:
        return iter(self.variants())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        names = ", ".join(str(v) for v in self.variants())
        state = "frozen" if self._frozen else "open"
        return f"{type(self).__name__}([{names}], {state})"
