"""Hook definition file I/O."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from cchooks.models.hook import HookDefinition


def load_hook_definition(definition_path: Path) -> HookDefinition:
    """Load a YAML hook definition.

    The file maps event names to lists of matchers:

        PreToolUse:
          - matcher: "*"
            hooks:
              - type: command
                command: my-tool PreToolUse

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid YAML or not a valid definition
    """
    with open(definition_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in hook definition {definition_path}: {e}") from e

    if not isinstance(data, dict) or not data:
        raise ValueError(
            f"Hook definition {definition_path} must map event names to lists of matchers"
        )

    try:
        return HookDefinition.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid hook definition {definition_path}:\n{e}") from e
