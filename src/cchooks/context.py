"""Application context with dependency injection.

The HooksContext dataclass holds every collaborator a command talks to
(prompts, diff display, user feedback) plus configuration and the two
directories discovery starts from. It is created once at the CLI entry point
and threaded through the install and uninstall flows.
"""

from dataclasses import dataclass
from pathlib import Path

from cchooks.config import HooksConfig, load_config
from cchooks.definitions import DEFAULT_HOOK_DEFINITION, resolve_definition
from cchooks.integrations.diff import DiffViewer
from cchooks.integrations.prompt import Prompter
from cchooks.models.hook import HookDefinition
from cchooks.output import UserFeedback


@dataclass(frozen=True)
class HooksContext:
    """Immutable context holding all dependencies for hook operations.

    Attributes:
        prompter: Asks the user yes/no and list questions
        diff_viewer: Shows the change an uninstall would make
        feedback: User-facing messages
        config: Settings loaded from the environment
        definition: Hooks installed and removed by the commands
        cwd: Directory discovery starts from
        home: Upper boundary of discovery
    """

    prompter: Prompter
    diff_viewer: DiffViewer
    feedback: UserFeedback
    config: HooksConfig
    definition: HookDefinition
    cwd: Path
    home: Path

    @staticmethod
    def for_test(
        prompter: Prompter | None = None,
        diff_viewer: DiffViewer | None = None,
        feedback: UserFeedback | None = None,
        config: HooksConfig | None = None,
        definition: HookDefinition | None = None,
        cwd: Path | None = None,
        home: Path | None = None,
    ) -> "HooksContext":
        """Create test context with optional pre-configured implementations.

        Uses fakes by default so no prompt blocks and no process starts.

        Args:
            prompter: Defaults to a FakePrompter with no answers (every prompt cancelled)
            diff_viewer: Defaults to FakeDiffViewer()
            feedback: Defaults to RecordingFeedback()
            config: Defaults to HooksConfig()
            definition: Defaults to the bundled definition
            cwd: Defaults to Path("/fake/home/project")
            home: Defaults to Path("/fake/home")

        Example:
            >>> prompter = FakePrompter(select_answers=[str(tmp_path)])
            >>> ctx = HooksContext.for_test(prompter=prompter, cwd=tmp_path, home=tmp_path.parent)
        """
        from cchooks.integrations.diff import FakeDiffViewer
        from cchooks.integrations.prompt import FakePrompter
        from cchooks.output import RecordingFeedback

        resolved_home = home if home is not None else Path("/fake/home")
        return HooksContext(
            prompter=prompter if prompter is not None else FakePrompter(),
            diff_viewer=diff_viewer if diff_viewer is not None else FakeDiffViewer(),
            feedback=feedback if feedback is not None else RecordingFeedback(),
            config=config if config is not None else HooksConfig(),
            definition=definition if definition is not None else DEFAULT_HOOK_DEFINITION,
            cwd=cwd if cwd is not None else resolved_home / "project",
            home=resolved_home,
        )


def create_context(config: HooksConfig | None = None) -> HooksContext:
    """Create production context with real implementations.

    Called once at the CLI entry point. Reads the process working directory
    and home directory here so nothing below does.

    Raises:
        ValueError: If the environment configuration or definition file is invalid
    """
    from cchooks.integrations.diff import SubprocessDiffViewer
    from cchooks.integrations.prompt import ClickPrompter
    from cchooks.output import InteractiveFeedback

    resolved_config = config if config is not None else load_config()
    return HooksContext(
        prompter=ClickPrompter(),
        diff_viewer=SubprocessDiffViewer(),
        feedback=InteractiveFeedback(),
        config=resolved_config,
        definition=resolve_definition(resolved_config),
        cwd=Path.cwd(),
        home=Path.home(),
    )
