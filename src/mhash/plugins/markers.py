"""Markers used to declare mhash hook specifications and implementations."""

import pluggy

HOOK_NAMESPACE = "mhash"

hook_spec = pluggy.HookspecMarker(HOOK_NAMESPACE)
hook_impl = pluggy.HookimplMarker(HOOK_NAMESPACE)
