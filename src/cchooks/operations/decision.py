"""Decide where hooks get installed.

The decision is a small state machine. Discovery produces the initial
state; each user answer moves it along through a pure transition function;
it ends in a terminal state that converts to a ``DecisionResult``:

    FoundHere ──────────────────────────────► proceed
    FoundInParent ── yes ──► FoundHere
                  └─ no ───► NotFound
    NotFound ── candidate ─► Create ────────► proceed, create .claude
             └─ cancel ────► Cancelled ─────► stop

Only ``make_install_decision`` talks to the user.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from cchooks.integrations.prompt import Choice, Prompter
from cchooks.models.discovery import DecisionResult, DiscoveryResult
from cchooks.operations.rendering import candidate_display_name, parent_display_path
from cchooks.output import UserFeedback

logger = logging.getLogger(__name__)

CANCEL_VALUE = "__CANCEL__"
USE_PARENT_MESSAGE = "Should I use that parent .claude directory?"
CREATE_LOCATION_MESSAGE = "Where should I create the .claude directory?"


@dataclass(frozen=True)
class FoundHere:
    root: Path


@dataclass(frozen=True)
class FoundInParent:
    root: Path
    candidates: tuple[Path, ...]


@dataclass(frozen=True)
class NotFound:
    candidates: tuple[Path, ...]


@dataclass(frozen=True)
class Create:
    directory: Path


@dataclass(frozen=True)
class Cancelled:
    pass


DecisionState = FoundHere | FoundInParent | NotFound | Create | Cancelled


def initial_state(discovery: DiscoveryResult) -> DecisionState:
    if discovery.found and discovery.root_path is not None:
        if discovery.is_current_directory:
            return FoundHere(discovery.root_path)
        return FoundInParent(discovery.root_path, discovery.candidates)
    return NotFound(discovery.candidates)


def answer_use_parent(state: FoundInParent, use_parent: bool | None) -> FoundHere | NotFound:
    """A missing answer counts as "no"."""
    if use_parent:
        return FoundHere(state.root)
    return NotFound(state.candidates)


def answer_location(state: NotFound, selection: str | None) -> Create | Cancelled:
    """Only a value naming one of the candidates creates anything."""
    for candidate in state.candidates:
        if selection == str(candidate):
            return Create(candidate)
    return Cancelled()


def is_terminal(state: DecisionState) -> bool:
    return isinstance(state, FoundHere | Create | Cancelled)


def to_decision_result(state: DecisionState) -> DecisionResult:
    match state:
        case FoundHere(root=root):
            return DecisionResult(proceed=True, target_directory=root, create_new_directory=False)
        case Create(directory=directory):
            return DecisionResult(
                proceed=True, target_directory=directory, create_new_directory=True
            )
        case Cancelled():
            return DecisionResult.cancelled()
        case _:
            raise ValueError(f"Decision is not finished: {state}")


def location_choices(candidates: tuple[Path, ...], cwd: Path) -> list[Choice]:
    """Candidates nearest first, then a cancel choice."""
    choices = [
        Choice(title=candidate_display_name(candidate, cwd), value=str(candidate))
        for candidate in candidates
    ]
    choices.append(Choice(title=click.style("Cancel installation", fg="red"), value=CANCEL_VALUE))
    return choices


def _ask_use_parent(
    state: FoundInParent, prompter: Prompter, feedback: UserFeedback, cwd: Path
) -> FoundHere | NotFound:
    feedback.warning(" I need to check something with you:")
    feedback.info(
        f"I found a .claude directory in a parent folder ({parent_display_path(state.root, cwd)})"
    )
    feedback.detail("If I install there, the hooks will apply to that entire project.")
    feedback.detail("That includes this directory and all its siblings.")

    next_state = answer_use_parent(state, prompter.confirm(USE_PARENT_MESSAGE, default=True))
    if isinstance(next_state, NotFound):
        feedback.info("\nOkay, I won't use the parent directory.")
    return next_state


def _ask_location(
    state: NotFound, prompter: Prompter, feedback: UserFeedback, cwd: Path
) -> Create | Cancelled:
    feedback.info("\nI can create a new .claude directory for you.")
    feedback.detail("This will establish a new scope for Claude settings.")

    choices = location_choices(state.candidates, cwd)
    selection = prompter.select(CREATE_LOCATION_MESSAGE, choices, default_index=len(choices) - 1)
    next_state = answer_location(state, selection)
    if isinstance(next_state, Cancelled):
        feedback.info("\nI understand. No changes made.")
    return next_state


def make_install_decision(
    discovery: DiscoveryResult,
    prompter: Prompter,
    feedback: UserFeedback,
    cwd: Path,
) -> DecisionResult:
    """Turn a discovery result into an install target, asking the user as needed.

    Args:
        discovery: Result of discover_claude_directories()
        prompter: Source of user answers
        feedback: Destination for user-facing messages
        cwd: Directory relative to which paths are displayed

    Returns:
        DecisionResult with proceed=False when the user cancelled
    """
    state = initial_state(discovery)
    while not is_terminal(state):
        logger.debug("Decision state: %s", state)
        match state:
            case FoundInParent():
                state = _ask_use_parent(state, prompter, feedback, cwd)
            case NotFound():
                state = _ask_location(state, prompter, feedback, cwd)

    logger.debug("Decision finished: %s", state)
    if isinstance(state, FoundHere) and state.root == cwd:
        feedback.success("\nGreat! I'll use the .claude directory that's already here.")
    return to_decision_result(state)
