"""
Modelos de datos para el formulario interactivo.
"""

from dataclasses import dataclass
from typing import Optional

from formpreview.app import FormPreviewApp
from formpreview.core.registry import RenderSpec


class FormResult:
    """Resultado de un formulario interactivo."""
    SUBMITTED = "submitted"  # Formulario enviado
    CANCEL = "cancel"  # Usuario canceló


@dataclass
class ViewerState:
    """Estado de navegación del visor (el estado de los campos vive en app)."""
    app: FormPreviewApp
    selected_idx: int = 0
    mode: str = "navigate"  # "navigate", "edit_text", "edit_select", "confirm_cancel"
    input_buffer: str = ""
    original_value: str = ""  # Valor previo a la edición, para Esc
    select_idx: int = 0  # Para modo select/radio
    message: str = ""

    @property
    def specs(self) -> list[RenderSpec]:
        return self.app.machine.specs

    def current_spec(self) -> Optional[RenderSpec]:
        """Campo seleccionado, o None si el formulario no tiene campos."""
        specs = self.specs
        if not specs:
            return None
        return specs[self.selected_idx % len(specs)]

    def next_field(self) -> None:
        if self.specs:
            self.selected_idx = (self.selected_idx + 1) % len(self.specs)

    def prev_field(self) -> None:
        if self.specs:
            self.selected_idx = (self.selected_idx - 1) % len(self.specs)
