"""
Handlers para los modos de edición (texto y selección).

Cada pulsación que altera el valor se aplica de inmediato al estado
del formulario, que re-valida el campo en el acto.
"""

from typing import Optional

from formpreview.core.registry import RenderSpec

from ..models import ViewerState


def _apply(state: ViewerState, current: RenderSpec) -> None:
    state.app.on_field_change(current.field_id, state.input_buffer)


def _finish_text(state: ViewerState, current: RenderSpec) -> None:
    machine = state.app.machine
    if machine.get(current.field_id).touched and machine.visible_error(current.field_id) is None:
        state.message = f"{current.field.label or current.field_id} actualizado"
    state.mode = "navigate"
    state.input_buffer = ""
    # Avanzar al siguiente campo
    state.next_field()


def handle_edit_text(key: str, state: ViewerState, current: RenderSpec) -> Optional[dict]:
    """Maneja el modo de edición de texto."""
    if key == 'enter':
        if current.multiline:
            state.input_buffer += "\n"
            _apply(state, current)
        else:
            _finish_text(state, current)

    elif key == 'tab':
        _finish_text(state, current)

    elif key == 'esc':
        # Descartar la edición restaurando el valor anterior
        if state.input_buffer != state.original_value:
            state.input_buffer = state.original_value
            _apply(state, current)
        state.mode = "navigate"
        state.input_buffer = ""
        state.message = ""

    elif key == 'backspace':
        if state.input_buffer:
            state.input_buffer = state.input_buffer[:-1]
            _apply(state, current)

    elif key == 'space':
        state.input_buffer += " "
        _apply(state, current)

    elif isinstance(key, str) and len(key) == 1 and key.isprintable():
        state.input_buffer += key
        _apply(state, current)

    return None


def handle_edit_select(key: str, state: ViewerState, current: RenderSpec) -> Optional[dict]:
    """Maneja el modo de selección (select o radio)."""
    n_options = len(current.choices)

    if key == 'up':
        state.select_idx = (state.select_idx - 1) % n_options
    elif key == 'down':
        state.select_idx = (state.select_idx + 1) % n_options

    elif key in ('enter', 'space'):
        selected = current.choices[state.select_idx]
        state.app.on_field_change(current.field_id, selected.value)
        state.message = f"{current.field.label or current.field_id} actualizado"
        state.mode = "navigate"
        state.next_field()

    elif key == 'esc':
        state.mode = "navigate"
        state.message = ""

    return None
