"""cchooks: Manage Claude Code hooks in hand-edited .claude settings files.

For library use, import from the public API:
    from cchooks.api import add_hooks, remove_hooks_with_definition, discover_claude_directories

Import from submodules:
- version: __version__
- api: Public API (install/uninstall flows, patching, discovery, models)
- jsonc: Comment-preserving JSON editing
"""

from cchooks.version import __version__ as __version__
