from __future__ import annotations

INSTALL_COMMAND = "install"

NPM_COMMANDS: frozenset[str] = frozenset(
    {
        "access", "adduser", "bin", "bugs", "c", "cache", "completion", "config",
        "ddp", "dedupe", "deprecate", "dist-tag", "docs", "doctor", "edit",
        "explore", "get", "help", "help-search", "i", "init", "install",
        "install-test", "it", "link", "list", "ln", "login", "logout", "ls",
        "outdated", "owner", "pack", "ping", "prefix", "prune", "publish", "rb",
        "rebuild", "repo", "restart", "root", "run", "run-script", "s", "se",
        "search", "set", "shrinkwrap", "star", "stars", "start", "stop", "t",
        "team", "test", "tst", "un", "uninstall", "unpublish", "unstar", "up",
        "update", "v", "version", "view", "whoami",
    }
)


def is_npm_command(command: str) -> bool:
    return command in NPM_COMMANDS


def classify_command(command: str) -> list[str]:
    """Turn a raw command string into the npm argument vector.

    - ``"install --save react"`` -> ``["install", "--save", "react"]``
    - ``"install"`` -> ``["install"]``
    - ``"clean"`` -> ``["run", "clean"]``
    """
    if any(char.isspace() for char in command):
        return command.split()
    if is_npm_command(command):
        return [command]
    return ["run", command]
