"""
Funciones que imprimen directamente a la consola.
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from formpreview.cli.theme.palette import get_console, get_palette


def styled_header(text: str, subtitle: str = None) -> Panel:
    """Crea un encabezado estilizado."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)

    return Panel(
        content,
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 2),
    )


def styled_success(text: str) -> Text:
    """Texto de éxito."""
    p = get_palette()
    return Text(f"[+] {text}", style=p.success)


def styled_warning(text: str) -> Text:
    """Texto de advertencia."""
    p = get_palette()
    return Text(f"[!] {text}", style=p.warning)


def styled_error(text: str) -> Text:
    """Texto de error."""
    p = get_palette()
    return Text(f"[x] {text}", style=p.error)


def styled_info(text: str) -> Text:
    """Texto informativo."""
    p = get_palette()
    return Text(f"[i] {text}", style=p.info)


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    get_console().print(styled_header(text, subtitle))


def print_success(text: str) -> None:
    """Imprime mensaje de éxito."""
    get_console().print(styled_success(text))


def print_warning(text: str) -> None:
    """Imprime advertencia."""
    get_console().print(styled_warning(text))


def print_error(text: str) -> None:
    """Imprime error."""
    get_console().print(styled_error(text))


def print_info(text: str) -> None:
    """Imprime información."""
    get_console().print(styled_info(text))


def print_json(text: str, title: str = None) -> None:
    """Imprime un bloque JSON dentro de un panel."""
    p = get_palette()
    get_console().print(Panel(
        Text(text, style=p.accent),
        title=title,
        title_align="left",
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 1),
    ))
