"""Public API for cchooks.

Stable interface for tools that manage their own hooks:

    from pathlib import Path
    from cchooks.api import (
        HookDefinition,
        read_settings_text,
        remove_hooks_with_definition,
        write_settings_text,
    )

    definition = HookDefinition.model_validate(
        {"PreToolUse": [{"matcher": "*", "hooks": [{"type": "command", "command": "my-tool"}]}]}
    )
    settings = Path(".claude/settings.local.json")
    text = read_settings_text(settings) or ""
    result = remove_hooks_with_definition(text, definition)
    if result.changed_count:
        write_settings_text(settings, result.content)
"""

from cchooks.commands.install import install_hooks
from cchooks.commands.uninstall import uninstall_hooks
from cchooks.context import HooksContext, create_context
from cchooks.definitions import DEFAULT_HOOK_DEFINITION
from cchooks.io.definition import load_hook_definition
from cchooks.io.settings_file import read_settings_text, write_settings_text
from cchooks.models import (
    DecisionResult,
    DiscoveryResult,
    Hook,
    HookDefinition,
    HookMatcher,
    HookPatchResult,
    InstallResult,
    UninstallOutcome,
    UninstallResult,
)
from cchooks.operations.decision import make_install_decision
from cchooks.operations.discovery import discover_claude_directories
from cchooks.operations.hook_install import AddHooksResult, add_hooks
from cchooks.operations.hook_removal import remove_hooks_with_binary, remove_hooks_with_definition
from cchooks.operations.install import perform_installation, report_install_results
from cchooks.operations.uninstall import perform_uninstallation, report_uninstall_results

__all__ = [
    "DEFAULT_HOOK_DEFINITION",
    "AddHooksResult",
    "DecisionResult",
    "DiscoveryResult",
    "Hook",
    "HookDefinition",
    "HookMatcher",
    "HookPatchResult",
    "HooksContext",
    "InstallResult",
    "UninstallOutcome",
    "UninstallResult",
    "add_hooks",
    "create_context",
    "discover_claude_directories",
    "install_hooks",
    "load_hook_definition",
    "make_install_decision",
    "perform_installation",
    "perform_uninstallation",
    "read_settings_text",
    "remove_hooks_with_binary",
    "remove_hooks_with_definition",
    "report_install_results",
    "report_uninstall_results",
    "uninstall_hooks",
    "write_settings_text",
]
