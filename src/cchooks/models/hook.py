"""Hook models for Claude Code settings files."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel


class Hook(BaseModel):
    """A shell command bound to a lifecycle event."""

    model_config = ConfigDict(frozen=True)

    type: Literal["command"] = "command"
    command: str = Field(..., min_length=1)


class HookMatcher(BaseModel):
    """A matcher pattern and the ordered hooks that fire when it matches."""

    model_config = ConfigDict(frozen=True)

    matcher: str
    hooks: tuple[Hook, ...]

    def to_settings(self) -> dict[str, Any]:
        """Plain data in the shape written to settings files."""
        return self.model_dump(mode="json")


class HookDefinition(RootModel[dict[str, tuple[HookMatcher, ...]]]):
    """Hooks keyed by event name, as installed or removed as one unit."""

    model_config = ConfigDict(frozen=True)

    def events(self) -> list[str]:
        return list(self.root)

    def matchers(self, event: str) -> tuple[HookMatcher, ...]:
        return self.root.get(event, ())

    def items(self) -> list[tuple[str, tuple[HookMatcher, ...]]]:
        return list(self.root.items())

    def to_settings(self) -> dict[str, list[dict[str, Any]]]:
        return {event: [m.to_settings() for m in matchers] for event, matchers in self.root.items()}

    def commands(self) -> list[str]:
        return [
            hook.command
            for matchers in self.root.values()
            for matcher in matchers
            for hook in matcher.hooks
        ]
