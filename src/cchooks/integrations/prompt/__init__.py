from cchooks.integrations.prompt.abc import Choice, Prompter
from cchooks.integrations.prompt.fake import FakePrompter
from cchooks.integrations.prompt.real import ClickPrompter

__all__ = ["Choice", "ClickPrompter", "FakePrompter", "Prompter"]
