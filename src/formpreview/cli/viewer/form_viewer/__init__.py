"""
Visor interactivo tipo formulario para ingreso de datos.

Muestra una tabla con los campos del esquema que el usuario puede
navegar y completar; cada pulsación re-valida el campo editado.
"""

from .models import FormResult, ViewerState
from .main import interactive_form
from .builders import build_display, format_field_value
from .handlers import handle_key

__all__ = [
    "FormResult",
    "ViewerState",
    "interactive_form",
    "build_display",
    "format_field_value",
    "handle_key",
]
