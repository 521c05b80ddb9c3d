from cchooks.models.discovery import DecisionResult, DiscoveryResult
from cchooks.models.hook import Hook, HookDefinition, HookMatcher
from cchooks.models.results import (
    HookPatchResult,
    InstallResult,
    UninstallOutcome,
    UninstallResult,
)

__all__ = [
    "DecisionResult",
    "DiscoveryResult",
    "Hook",
    "HookDefinition",
    "HookMatcher",
    "HookPatchResult",
    "InstallResult",
    "UninstallOutcome",
    "UninstallResult",
]
