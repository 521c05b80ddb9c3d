"""The hook definition managed when none is configured."""

from cchooks.config import HooksConfig
from cchooks.io.definition import load_hook_definition
from cchooks.models.hook import HookDefinition

DEFAULT_HOOK_DEFINITION = HookDefinition.model_validate(
    {
        "PreToolUse": [
            {
                "matcher": "*",
                "hooks": [{"type": "command", "command": "happy-coder-hooks PreToolUse"}],
            }
        ],
        "PostToolUse": [
            {
                "matcher": "*",
                "hooks": [{"type": "command", "command": "happy-coder-hooks PostToolUse"}],
            }
        ],
    }
)


def definition_label(definition: HookDefinition) -> str:
    """Name shown to the user for a definition: the program its hooks run."""
    commands = definition.commands()
    if not commands or not commands[0].split():
        return "hooks"
    return commands[0].split()[0]


def resolve_definition(config: HooksConfig) -> HookDefinition:
    if config.definition_path is None:
        return DEFAULT_HOOK_DEFINITION
    return load_hook_definition(config.definition_path)
