"""Utility functions to build plugin managers and the registries they populate."""

import logging
from inspect import isclass
from typing import Any

from pluggy import PluginManager

from mhash.generation.registry import GenerationRegistry
from mhash.settings import get_global_settings
from mhash.validation.registry import ValidationRegistry
from mhash.variants import Variant

from .builtin import HashlibPlugin
from .markers import HOOK_NAMESPACE
from .specs import RegistrySpec

logger = logging.getLogger(__name__)

PLUGIN_ENTRY_POINT = "mhash.plugins"  # entry-point group third-party plugins are loaded from


# region API


def create_plugin_manager(*plugins: Any, load_entry_points: bool | None = None) -> PluginManager:
    """
    Create a PluginManager with the built-in hashlib plugin and any extra plugins.

    Plugins registered later override earlier registrations for the same variant, so explicitly
    passed plugins win over entry-point plugins, which win over the built-in one.

    Args:
        *plugins: Plugin instances implementing ``RegistrySpec`` hooks.
        load_entry_points: Whether to load plugins from the ``mhash.plugins`` entry point group.
            Defaults to the global settings.

    Returns:
        A PluginManager ready to populate registries.
    """
    if load_entry_points is None:
        load_entry_points = get_global_settings().load_entry_points

    manager = _create_plugin_manager()
    manager.register(HashlibPlugin())

    if load_entry_points:
        count = manager.load_setuptools_entrypoints(PLUGIN_ENTRY_POINT)  # Doesn't use setuptools
        logger.debug(f"Loaded {count} plugin(s) from entry point group '{PLUGIN_ENTRY_POINT}'")

    for plugin in plugins:
        if isclass(plugin):
            raise TypeError(
                "mhash expects plugins to be registered as instances. "
                "Have you forgotten the `()` when registering a plugin class?"
            )
        if not manager.is_registered(plugin):  # pragma: no branch
            manager.register(plugin)

    return manager


def create_validation_registry(
    *plugins: Any,
    plugin_manager: PluginManager | None = None,
    load_entry_points: bool | None = None,
) -> ValidationRegistry:
    """
    Build a frozen ValidationRegistry populated by the plugins.

    Args:
        *plugins: Extra plugin instances, ignored when ``plugin_manager`` is given.
        plugin_manager: Existing manager to use instead of creating one.
        load_entry_points: Passed to ``create_plugin_manager``.
    """
    manager = plugin_manager
    if manager is None:
        manager = create_plugin_manager(*plugins, load_entry_points=load_entry_points)
    registry = ValidationRegistry()
    _call_in_registration_order(manager, "mhash_register_validators", registry)
    return registry.freeze()


def create_generation_registry(
    *plugins: Any,
    plugin_manager: PluginManager | None = None,
    load_entry_points: bool | None = None,
    default_variant: Variant | int | str | None = None,
) -> GenerationRegistry:
    """
    Build a frozen GenerationRegistry populated by the plugins.

    Args:
        *plugins: Extra plugin instances, ignored when ``plugin_manager`` is given.
        plugin_manager: Existing manager to use instead of creating one.
        load_entry_points: Passed to ``create_plugin_manager``.
        default_variant: Default variant for ``generate``. Defaults to the global settings.
    """
    if default_variant is None:
        default_variant = get_global_settings().default_variant
    logger.debug(f"Default generation variant: {default_variant}")

    manager = plugin_manager
    if manager is None:
        manager = create_plugin_manager(*plugins, load_entry_points=load_entry_points)
    registry = GenerationRegistry(default_variant=default_variant)
    _call_in_registration_order(manager, "mhash_register_generators", registry)
    return registry.freeze()


# region Helpers


def _create_plugin_manager() -> PluginManager:
    """Create a new PluginManager instance and register mhash's hook specs."""
    manager = PluginManager(HOOK_NAMESPACE)
    manager.trace.root.setwriter(
        logger.debug if logger.getEffectiveLevel() == logging.DEBUG else None
    )
    manager.enable_tracing()
    manager.add_hookspecs(RegistrySpec)
    return manager


def _call_in_registration_order(manager: PluginManager, hook_name: str, registry: Any) -> None:
    """
    Call ``hook_name`` through pluggy and register the returned pairs, earliest plugin first.

    pluggy returns results last-registered-first. Registering them in reverse lets pairs from later
    plugins replace those from earlier ones.
    """
    hook = getattr(manager.hook, hook_name)
    logger.debug(f"Running {hook_name} on {len(hook.get_hookimpls())} plugin(s)")
    for contributions in reversed(hook()):
        for variant, handler in contributions:
            registry.register(variant, handler)
