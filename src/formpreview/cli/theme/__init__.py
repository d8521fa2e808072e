"""
Sistema de temas para la interfaz CLI de formpreview.

El paquete esta organizado en modulos:
- palette: Paletas oscura/clara y gestion del tema (CLITheme, ColorPalette)
- icons: Iconos Unicode con fallback ASCII
- printing: Funciones que imprimen directamente a consola
- subscription: Deteccion del modo oscuro con alcance explicito
"""

from formpreview.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DARK,
    THEME_LIGHT,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)
from formpreview.cli.theme.icons import IconSet, get_icons, reset_icons_cache
from formpreview.cli.theme.printing import (
    styled_header,
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
    print_header,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_json,
)
from formpreview.cli.theme.subscription import (
    ThemeSubscription,
    detect_dark_mode,
    resolve_theme,
)

__all__ = [
    # Paletas
    "ThemeName",
    "ColorPalette",
    "THEME_DARK",
    "THEME_LIGHT",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # Iconos
    "IconSet",
    "get_icons",
    "reset_icons_cache",
    # Impresión
    "styled_header",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    "print_header",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_json",
    # Suscripción
    "ThemeSubscription",
    "detect_dark_mode",
    "resolve_theme",
]
