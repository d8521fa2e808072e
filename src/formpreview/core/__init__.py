"""
Núcleo de formpreview: registro de campos, validación, estado y envío.
"""

from formpreview.core.registry import (
    FIELD_HANDLERS,
    RenderSpec,
    coerce_field,
    resolve_field,
    resolve_fields,
)
from formpreview.core.validation import (
    REQUIRED_MESSAGE,
    ValidationResult,
    compile_pattern,
    evaluate,
)
from formpreview.core.state import FieldState, FormStatus, FormStateMachine
from formpreview.core.submission import SubmissionRecord, submit
from formpreview.core.debounce import Debouncer

__all__ = [
    # Registro
    "FIELD_HANDLERS",
    "RenderSpec",
    "coerce_field",
    "resolve_field",
    "resolve_fields",
    # Validación
    "REQUIRED_MESSAGE",
    "ValidationResult",
    "compile_pattern",
    "evaluate",
    # Estado
    "FieldState",
    "FormStatus",
    "FormStateMachine",
    # Envío
    "SubmissionRecord",
    "submit",
    # Utilidades
    "Debouncer",
]
