# Used for CLI diagnostics only; rendered commands are never styled.

red_text = lambda x: f"\x1b[31m{x}\x1b[0m"
green_text = lambda x: f"\x1b[32m{x}\x1b[0m"

bold = lambda x: f"\x1b[1m{x}\x1b[0m"
dim = lambda x: f"\x1b[2m{x}\x1b[0m"

HEADER_WIDTH = 40


def section_header(title: str, width: int = HEADER_WIDTH) -> str:
    """Render a section header like: ━━ Title ━━━━━━━━━━━━━━━━━━"""
    prefix = f"━━ {title} "
    fill = "━" * max(0, width - len(prefix))
    return bold(f"{prefix}{fill}")


def error_line(message: str) -> str:
    return red_text(f"error: {message}")
