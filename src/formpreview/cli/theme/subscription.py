"""
Detección del modo oscuro del terminal.

El tema se adquiere al iniciar un comando y se libera al terminar,
restaurando el anterior; no hay un listener global.
"""

import os
from typing import Callable, List, Mapping, Optional

from formpreview.config import ThemeMode
from formpreview.cli.theme.palette import CLITheme, ThemeName


def detect_dark_mode(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Detecta si el fondo del terminal es oscuro.

    Usa COLORFGBG ("fg;bg"): fondos 0-6 y 8 son oscuros. Sin la
    variable se asume fondo oscuro.
    """
    env = os.environ if environ is None else environ
    value = env.get("COLORFGBG", "")
    if not value:
        return True
    try:
        background = int(value.split(";")[-1])
    except ValueError:
        return True
    return background in (0, 1, 2, 3, 4, 5, 6, 8)


def resolve_theme(mode: ThemeMode, environ: Optional[Mapping[str, str]] = None) -> ThemeName:
    """Convierte el modo configurado en un tema concreto."""
    if mode == ThemeMode.DARK:
        return ThemeName.DARK
    if mode == ThemeMode.LIGHT:
        return ThemeName.LIGHT
    return ThemeName.DARK if detect_dark_mode(environ) else ThemeName.LIGHT


class ThemeSubscription:
    """
    Suscripción al tema del terminal con alcance explícito.

    Ejemplo:
        with ThemeSubscription(ThemeMode.AUTO) as sub:
            sub.add_listener(lambda name: ...)
            ...
    """

    def __init__(self, mode: ThemeMode = ThemeMode.AUTO, environ: Optional[Mapping[str, str]] = None):
        self.mode = mode
        self._environ = environ
        self._listeners: List[Callable[[ThemeName], None]] = []
        self._previous: Optional[ThemeName] = None
        self.active = False

    def __enter__(self) -> "ThemeSubscription":
        self._previous = CLITheme.get_theme()
        self.active = True
        CLITheme.set_theme(resolve_theme(self.mode, self._environ))
        return self

    def __exit__(self, *exc) -> None:
        self._listeners.clear()
        self.active = False
        if self._previous is not None:
            CLITheme.set_theme(self._previous)

    @property
    def theme(self) -> ThemeName:
        return CLITheme.get_theme()

    def add_listener(self, listener: Callable[[ThemeName], None]) -> None:
        """Registra un callback que recibe el tema al cambiar."""
        self._listeners.append(listener)

    def refresh(self, environ: Optional[Mapping[str, str]] = None) -> ThemeName:
        """Vuelve a detectar el tema y notifica si cambió."""
        if not self.active:
            raise RuntimeError("Suscripción de tema no activa")
        if environ is not None:
            self._environ = environ
        new_theme = resolve_theme(self.mode, self._environ)
        if new_theme != CLITheme.get_theme():
            CLITheme.set_theme(new_theme)
            for listener in list(self._listeners):
                listener(new_theme)
        return new_theme
