"""
Handler para el modo de navegación del formulario.
"""

from typing import Optional

from formpreview.config import FieldType
from formpreview.core.registry import RenderSpec

from ..models import ViewerState, FormResult


def handle_navigate(key: str, state: ViewerState, current: RenderSpec) -> Optional[dict]:
    """Maneja el modo de navegación."""
    app = state.app

    if key == 'q':
        # El envío está deshabilitado mientras el formulario no sea enviable
        if not app.status.submittable:
            state.message = "Completa los campos para habilitar el envío"
            return None
        record = app.on_submit_attempt()
        if record is None:
            state.message = "Envío bloqueado"
            return None
        return {"_result": FormResult.SUBMITTED, "record": record}

    elif key == 'esc':
        # Mostrar confirmación de salida
        state.mode = "confirm_cancel"

    elif key == 'up':
        state.prev_field()
        state.message = ""

    elif key == 'down':
        state.next_field()
        state.message = ""

    elif key == 'enter':
        state.message = ""
        value = app.machine.get(current.field_id).value

        if current.kind in (FieldType.SELECT, FieldType.RADIO):
            if not current.choices:
                state.message = "El campo no tiene opciones"
                return None
            state.mode = "edit_select"
            state.select_idx = 0
            # Posicionar en el valor actual si existe
            for idx, opt in enumerate(current.choices):
                if opt.value == value:
                    state.select_idx = idx
                    break
        else:
            state.mode = "edit_text"
            state.input_buffer = value
            state.original_value = value

    return None
