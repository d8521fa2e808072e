"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from rich.console import Console
from rich.theme import Theme


class ThemeName(Enum):
    """Temas disponibles."""
    DARK = "dark"
    LIGHT = "light"


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Títulos, campo seleccionado
    secondary: str    # Subtítulos, encabezados de tabla
    accent: str       # Valores ingresados

    # Colores semánticos
    success: str      # Campo válido, envío habilitado
    warning: str      # Campo pendiente
    error: str        # Campo inválido, banner de esquema
    info: str         # Información
    muted: str        # Texto secundario/atenuado

    # Bordes
    border: str

    # Navegación interactiva
    nav_confirm: str  # Tecla de envío
    nav_cancel: str   # Tecla de cancelación
    input_text: str   # Texto en edición


# Tema oscuro - colores pasteles sobre fondo oscuro
THEME_DARK = ColorPalette(
    primary="#5f87af",      # Azul suave
    secondary="#87afaf",    # Cyan apagado
    accent="#af87af",       # Púrpura suave
    success="#87af87",      # Verde suave
    warning="#d7af5f",      # Amarillo/naranja suave
    error="#d75f5f",        # Rojo suave
    info="#5f87af",         # Azul info
    muted="#808080",        # Gris
    border="#5f5f5f",       # Gris oscuro
    nav_confirm="#87af87",
    nav_cancel="#d75f5f",
    input_text="#ffffff",
)

# Tema claro - mayor contraste sobre fondo blanco
THEME_LIGHT = ColorPalette(
    primary="#005f87",      # Azul profundo
    secondary="#005f5f",    # Verde azulado
    accent="#5f005f",       # Púrpura oscuro
    success="#005f00",      # Verde oscuro
    warning="#875f00",      # Ocre
    error="#af0000",        # Rojo
    info="#005f87",
    muted="#6c6c6c",        # Gris medio
    border="#a8a8a8",       # Gris claro
    nav_confirm="#005f00",
    nav_cancel="#af0000",
    input_text="#000000",
)

THEMES = {
    ThemeName.DARK: THEME_DARK,
    ThemeName.LIGHT: THEME_LIGHT,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DARK
    _name: ThemeName = ThemeName.DARK
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._name = theme
        cls._palette = THEMES.get(theme, THEME_DARK)
        cls._console = None  # Recrear console con el nuevo tema

    @classmethod
    def get_theme(cls) -> ThemeName:
        return cls._name

    @classmethod
    def get_palette(cls) -> ColorPalette:
        """Obtiene la paleta de colores actual."""
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "title": f"bold {p.primary}",
                "nav.confirm": f"bold {p.nav_confirm}",
                "nav.cancel": f"bold {p.nav_cancel}",
                "input": f"bold {p.input_text}",
                "input.cursor": f"blink bold {p.input_text}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
