"""
Iconos Unicode con fallback a ASCII si el terminal no soporta Unicode.
"""

import sys
from dataclasses import dataclass
from typing import Optional


def _detect_unicode_support() -> bool:
    """Detecta si el terminal soporta caracteres Unicode."""
    try:
        encoding = getattr(sys.stdout, 'encoding', None) or 'ascii'
        "❯◉○✓✗⚠ℹ".encode(encoding)
        return True
    except (UnicodeEncodeError, LookupError):
        return False


@dataclass
class IconSet:
    """Conjunto de iconos para la interfaz."""
    pointer: str          # Campo seleccionado
    selected: str         # Opción elegida (radio/select)
    unselected: str       # Opción no elegida
    check: str            # Campo válido
    cross: str            # Campo inválido
    warning: str          # Campo pendiente
    info: str             # Campo opcional


ICONS_UNICODE = IconSet(
    pointer="❯",
    selected="◉",
    unselected="○",
    check="✓",
    cross="✗",
    warning="⚠",
    info="ℹ",
)

ICONS_ASCII = IconSet(
    pointer=">",
    selected="(*)",
    unselected="( )",
    check="[+]",
    cross="[x]",
    warning="[!]",
    info="[i]",
)


_active_icons: Optional[IconSet] = None


def get_icons() -> IconSet:
    """Obtiene el conjunto de iconos apropiado para el terminal."""
    global _active_icons

    if _active_icons is None:
        _active_icons = ICONS_UNICODE if _detect_unicode_support() else ICONS_ASCII

    return _active_icons


def reset_icons_cache() -> None:
    """Resetea el cache de iconos (útil para tests)."""
    global _active_icons
    _active_icons = None
