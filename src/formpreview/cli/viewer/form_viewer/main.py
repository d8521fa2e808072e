"""
Función principal del formulario interactivo.
"""

import shutil
from typing import Optional

from rich.live import Live

from formpreview.app import FormPreviewApp
from formpreview.cli.theme import ThemeSubscription, get_console
from formpreview.cli.viewer.terminal import get_key, clear_screen
from formpreview.core.submission import SubmissionRecord

from .models import ViewerState, FormResult
from .builders import build_display
from .handlers import handle_key


def interactive_form(
    app: FormPreviewApp,
    subscription: Optional[ThemeSubscription] = None,
) -> Optional[SubmissionRecord]:
    """
    Muestra el formulario del esquema cargado en app.

    Args:
        app: Aplicación con el esquema ya cargado
        subscription: Tema activo; se vuelve a detectar al redimensionar

    Returns:
        SubmissionRecord enviado, o None si el usuario sale sin enviar
    """
    console = get_console()
    state = ViewerState(app=app)

    theme_changes = []
    if subscription is not None:
        subscription.add_listener(theme_changes.append)

    # Guardar tamaño inicial del terminal para detectar cambios
    last_terminal_size = shutil.get_terminal_size()

    clear_screen()

    with Live(console=console, auto_refresh=False, screen=False) as live:
        live.update(build_display(state), refresh=True)

        while True:
            key = get_key()
            result = handle_key(key, state)

            if result is not None:
                if result.get("_cancel"):
                    return None
                if result.get("_result") == FormResult.SUBMITTED:
                    return result["record"]

            # Detectar si cambió el tamaño del terminal
            current_size = shutil.get_terminal_size()
            if current_size != last_terminal_size:
                last_terminal_size = current_size
                if subscription is not None:
                    subscription.refresh()
                # Reiniciar Live para evitar acumulación de contenido
                live.stop()
                clear_screen()
                if theme_changes:
                    # La consola con la paleta anterior quedó descartada
                    live.console = get_console()
                    theme_changes.clear()
                live.start()

            live.update(build_display(state), refresh=True)
