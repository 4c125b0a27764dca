"""Static command catalog.

The registry, the engine protocol binding and the help screen are all
derived from :data:`COMMANDS`; adding a command means adding one entry
here and one method to the engine.
"""

from __future__ import annotations

from gitlet_shell.core.models import CommandSpec

REPOSITORY = "Repository Management"
FILES = "File Operations"
INFORMATION = "Information"
CHECKOUT = "Checkout"
BRANCHING = "Branching"
ADVANCED = "Advanced"
REMOTE = "Remote Operations"
OTHER = "Other"

CATEGORIES: tuple[str, ...] = (
    REPOSITORY,
    FILES,
    INFORMATION,
    CHECKOUT,
    BRANCHING,
    ADVANCED,
    REMOTE,
    OTHER,
)
"""Help sections, in display order."""

COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec("init", "init", "Initialize a new Gitlet repository", REPOSITORY, "init"),
    CommandSpec("add", "add <file>", "Add a file to staging area", FILES, "add"),
    CommandSpec("rm", "rm <file>", "Remove a file from staging", FILES, "rm"),
    CommandSpec("commit", 'commit "<message>"', "Commit staged changes", FILES, "commit"),
    CommandSpec("status", "status", "Show working directory status", INFORMATION, "status"),
    CommandSpec("log", "log", "Display commit history", INFORMATION, "log"),
    CommandSpec("global-log", "global-log", "Display all commits", INFORMATION, "global_log"),
    CommandSpec("find", 'find "<message>"', "Find commits by message", INFORMATION, "find"),
    CommandSpec(
        "checkout",
        "checkout -- <file>\ncheckout <id> -- <file>\ncheckout <branch>",
        "Checkout a file from HEAD\nCheckout a file from a commit\nCheckout a branch",
        CHECKOUT,
        "checkout",
    ),
    CommandSpec("branch", "branch <name>", "Create a new branch", BRANCHING, "branch"),
    CommandSpec("rm-branch", "rm-branch <name>", "Remove a branch", BRANCHING, "rm_branch"),
    CommandSpec("reset", "reset <commit-id>", "Reset HEAD to a commit", ADVANCED, "reset"),
    CommandSpec("merge", "merge <branch>", "Merge a branch into current", ADVANCED, "merge"),
    CommandSpec(
        "add-remote", "add-remote <name> <dir>", "Add a remote repository", REMOTE, "add_remote",
    ),
    CommandSpec("rm-remote", "rm-remote <name>", "Remove a remote", REMOTE, "rm_remote"),
    CommandSpec("fetch", "fetch <remote> <branch>", "Fetch from remote", REMOTE, "fetch"),
    CommandSpec("push", "push <remote> <branch>", "Push to remote", REMOTE, "push"),
    CommandSpec("pull", "pull <remote> <branch>", "Pull from remote", REMOTE, "pull"),
)

BUILTINS: tuple[tuple[str, str], ...] = (
    ("help", "Show this help message"),
    ("quit / exit", "Exit interactive mode"),
)
"""Shell directives handled by the interactive loop, listed under *Other*."""


def commands_in(category: str) -> tuple[CommandSpec, ...]:
    """Return catalog entries belonging to *category*, in catalog order."""
    return tuple(spec for spec in COMMANDS if spec.category == category)


def help_rows(category: str) -> list[tuple[str, str]]:
    """Return ``(usage, summary)`` rows for one help section.

    Multi-form commands (``checkout``) contribute one row per form.
    """
    if category == OTHER:
        return list(BUILTINS)
    rows: list[tuple[str, str]] = []
    for spec in commands_in(category):
        rows.extend(zip(spec.usage.split("\n"), spec.summary.split("\n")))
    return rows
