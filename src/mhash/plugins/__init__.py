from mhash.plugins.builtin import HashlibPlugin
from mhash.plugins.manager import PLUGIN_ENTRY_POINT
from mhash.plugins.manager import create_generation_registry
from mhash.plugins.manager import create_plugin_manager
from mhash.plugins.manager import create_validation_registry

from .markers import hook_impl

__all__ = [
    "PLUGIN_ENTRY_POINT",
    "HashlibPlugin",
    "create_generation_registry",
    "create_plugin_manager",
    "create_validation_registry",
    "hook_impl",
]
