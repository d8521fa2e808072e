"""
Excepciones de formpreview.

Los errores de esquema son terminales para la carga actual; los errores
de campo son locales y nunca abortan el resto del formulario.
"""

from typing import Iterable


class FormPreviewError(ValueError):
    """Error base de formpreview."""


class SchemaError(FormPreviewError):
    """El texto del esquema no pudo cargarse."""


class SchemaParseError(SchemaError):
    """El texto no es JSON bien formado."""


class SchemaStructureError(SchemaError):
    """JSON válido pero sin formTitle, formDescription o fields."""

    def __init__(self, message: str, missing: Iterable[str] = ()):
        super().__init__(message)
        self.missing = tuple(missing)


class FieldValidationError(FormPreviewError):
    """Un campo no cumple sus reglas de validación."""

    def __init__(self, field_id: str, message: str):
        super().__init__(f"{field_id}: {message}")
        self.field_id = field_id
        self.message = message


class SubmissionBlocked(FormPreviewError):
    """Envío intentado con el formulario no enviable."""

    def __init__(self, reason: str, errors: Iterable[FieldValidationError] = ()):
        super().__init__(reason)
        self.reason = reason
        self.errors = list(errors)
