"""
Argv preprocessor for forgiving CLI flag and command handling.

Normalizes sys.argv before Typer parses it, handling common user patterns:
- ``ldock load notes.txt --config=/tmp/ld`` → ``ldock --config=/tmp/ld load notes.txt``
- ``ldock --debug --version`` → ``ldock --debug version``
- ``ldock help load`` → ``ldock load --help``
"""

_GLOBAL_FLAGS = {"--debug"}
_GLOBAL_OPTIONS = {"--config"}


def preprocess_argv(argv: list[str]) -> list[str]:
    """Normalize CLI arguments for Typer compatibility.

    Applied rules (in order):
    1. Global flags and options hoisted before the subcommand
    2. ``--version`` / ``-V`` as first remaining arg → ``version`` subcommand
    3. ``help`` pseudo-command → ``--help`` appended to subcommands
    """
    if not argv:
        return argv

    # Rule 1: hoist global flags and options
    hoisted, rest = _split_globals(argv)

    # Rule 2: --version / -V at top level → version subcommand
    if rest and rest[0] in ("--version", "-V"):
        return [*hoisted, "version"]

    # Rule 3: help pseudo-command → --help
    if rest and rest[0] == "help":
        return [*hoisted, *_rewrite_help(rest[1:])]

    return [*hoisted, *rest]


def _rewrite_help(rest: list[str]) -> list[str]:
    """Rewrite ``help [subcmd]`` into ``[subcmd] --help``."""
    for token in rest:
        if token.startswith("-") or token == "help":
            continue
        return [token, "--help"]
    return ["--help"]


def _split_globals(argv: list[str]) -> tuple[list[str], list[str]]:
    """Separate global flags (``--debug``) and options (``--config``) from the rest.

    Both ``--config=PATH`` and ``--config PATH`` are recognized; the last
    one given wins once Typer parses them. Everything after ``--`` is left
    alone.
    """
    hoisted: list[str] = []
    rest: list[str] = []
    seen_flags: set[str] = set()
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--":
            rest.extend(argv[i:])
            break
        if token in _GLOBAL_FLAGS:
            # Drop duplicates entirely
            if token not in seen_flags:
                hoisted.append(token)
                seen_flags.add(token)
        elif token.split("=", 1)[0] in _GLOBAL_OPTIONS and "=" in token:
            hoisted.append(token)
        elif token in _GLOBAL_OPTIONS and i + 1 < len(argv):
            hoisted.extend(argv[i : i + 2])
            i += 1
        else:
            rest.append(token)
        i += 1
    return hoisted, rest
