from __future__ import annotations

from typing import Optional

from rich.console import Console

YES = {"y", "yes"}


def is_yes(text: str) -> bool:
    return text.strip().lower() in YES


def console_confirm(prompt: str, console: Optional[Console] = None, default_yes: bool = False) -> bool:
    """Ask a yes/no question on the terminal.

    An empty answer takes the default; end of input counts as no.
    """
    console = console or Console()
    suffix = "[Y/n]" if default_yes else "[y/N]"
    try:
        ans = console.input(f"{prompt} {suffix} ", markup=False)
    except EOFError:
        return False
    if not ans.strip():
        return default_yes
    return is_yes(ans)
