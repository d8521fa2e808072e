"""
Validación estructural del esquema de formulario.

Verifica solo la forma mínima (formTitle, formDescription, fields) antes
de intentar renderizar. Los campos individuales no se validan aquí.
"""

import json
from typing import Any

from pydantic import ValidationError

from formpreview.config import FormSchema
from formpreview.errors import SchemaParseError, SchemaStructureError


STRUCTURE_MESSAGE = (
    "Estructura JSON inválida. Asegúrese de incluir formTitle, formDescription y fields."
)

_SCHEMA_KEYS = ("fields", "formDescription", "formTitle")


def validate_schema(raw: Any) -> FormSchema:
    """
    Valida la forma de primer nivel de un esquema ya decodificado.

    Args:
        raw: Objeto decodificado (normalmente un dict)

    Returns:
        FormSchema con los campos crudos

    Raises:
        SchemaStructureError: Si falta una clave, tiene tipo incorrecto
            o fields no es una lista
    """
    if not isinstance(raw, dict):
        raise SchemaStructureError(STRUCTURE_MESSAGE, missing=_SCHEMA_KEYS)

    try:
        return FormSchema.model_validate(raw)
    except ValidationError as e:
        missing = []
        for err in e.errors():
            key = str(err["loc"][0]) if err["loc"] else ""
            if key and key not in missing:
                missing.append(key)
        raise SchemaStructureError(
            f"{STRUCTURE_MESSAGE} Revisar: {', '.join(missing)}",
            missing=missing,
        ) from e


def parse_schema_text(text: str) -> FormSchema:
    """
    Decodifica texto JSON y valida su estructura.

    Raises:
        SchemaParseError: Si el texto no es JSON bien formado
        SchemaStructureError: Si la estructura es inválida
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaParseError(
            f"JSON inválido: {e.msg} (línea {e.lineno}, columna {e.colno})"
        ) from e
    return validate_schema(raw)


def schema_to_json(schema: FormSchema) -> str:
    """Serializa el esquema con indentación (para copiar/compartir)."""
    return json.dumps(schema.model_dump(by_alias=True), indent=2, ensure_ascii=False)
