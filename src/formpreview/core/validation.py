"""
Motor de validación de campos.

Funciones puras: dado un campo y un valor candidato, deciden si pasa y
con qué mensaje falla. Se ejecutan en cada cambio de valor.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import js_regex

from formpreview.config import FieldType, FormField

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "Este campo es requerido"
INVALID_MESSAGE = "Valor inválido"

PATTERN_TYPES = frozenset({FieldType.TEXT.value, FieldType.EMAIL.value})


@dataclass(frozen=True)
class ValidationResult:
    """Resultado de validar un valor."""
    valid: bool
    message: Optional[str] = None


VALID = ValidationResult(valid=True)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Optional[re.Pattern]:
    """
    Compila un patrón con semántica de RegExp de JavaScript.

    \\d y \\w solo aceptan ASCII y $ no acepta un salto de línea final.
    Retorna None si el patrón no es una expresión regular válida.
    """
    try:
        return js_regex.compile(pattern)
    except (re.error, NotImplementedError, ValueError) as e:
        logger.warning("Patrón de validación inválido %r: %s", pattern, e)
        return None


def evaluate(field: FormField, value: str) -> ValidationResult:
    """
    Valida el valor de un campo.

    Reglas en orden fijo, gana el primer fallo:
    1. Requerido: valor exactamente vacío
    2. Patrón (solo text/email con validation y valor no vacío)

    Args:
        field: Definición del campo
        value: Valor actual (sin recortar)

    Returns:
        ValidationResult con valid y mensaje de error
    """
    if field.required and value == "":
        return ValidationResult(valid=False, message=REQUIRED_MESSAGE)

    # Un valor vacío opcional no se contrasta con el patrón
    if value and field.validation is not None and field.type in PATTERN_TYPES:
        regex = compile_pattern(field.validation.pattern)
        if regex is not None and regex.search(value) is None:
            return ValidationResult(
                valid=False,
                message=field.validation.message or INVALID_MESSAGE,
            )

    return VALID
