"""
Handlers de teclas para el formulario interactivo.

Cada módulo maneja un modo específico del formulario.
"""

from typing import Optional

from ..models import ViewerState

from .navigate import handle_navigate
from .edit import handle_edit_text, handle_edit_select


def handle_confirm_cancel(key: str, state: ViewerState) -> Optional[dict]:
    """Maneja el modo de confirmación de salida."""
    if key in ('s', 'S', 'y', 'Y'):
        return {"_cancel": True}
    elif key in ('n', 'N', 'esc'):
        state.mode = "navigate"
        state.message = ""
    return None


def handle_key(key: str, state: ViewerState) -> Optional[dict]:
    """
    Maneja una tecla presionada.

    Returns:
        None si debe continuar el loop
        dict con resultado si debe salir
    """
    if key == 'ctrl_c':
        return {"_cancel": True}

    current = state.current_spec()
    if current is None:
        # Formulario sin campos renderizados: solo se puede salir
        if key in ('esc', 'q'):
            return {"_cancel": True}
        return None

    if state.mode == "confirm_cancel":
        return handle_confirm_cancel(key, state)
    elif state.mode == "edit_text":
        return handle_edit_text(key, state, current)
    elif state.mode == "edit_select":
        return handle_edit_select(key, state, current)
    elif state.mode == "navigate":
        return handle_navigate(key, state, current)

    return None


__all__ = ["handle_key"]
