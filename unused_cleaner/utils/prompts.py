"""Interactive yes/no confirmation."""

from typing import Callable


def confirm(
    message: str,
    default: bool = False,
    input_func: Callable[[str], str] = input,
) -> bool:
    """Ask a yes/no question on the terminal.

    Args:
        message: Question to display.
        default: Answer used for empty input, EOF, or Ctrl-C.
        input_func: Injected for tests (defaults to builtin input).

    Returns:
        True if the user confirmed.
    """
    suffix = "[Y/n]" if default else "[y/N]"
    try:
        response = input_func(f"{message} {suffix} ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        print()
        return default

    if not response:
        return default
    return response in ("y", "yes")
