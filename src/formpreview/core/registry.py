"""
Registro de tipos de campo.

Cada FieldType tiene un handler que define cómo se presenta el campo y
qué validación admite. Un tipo no reconocido resuelve a None: el campo
se omite del formulario, de la validación y del envío.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from formpreview.config import FieldOption, FieldType, FormField, FormSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderSpec:
    """Contrato de presentación de un campo resuelto."""
    field: FormField
    kind: FieldType
    control: str  # "input", "select", "radio_group", "textarea"
    input_type: str = ""  # "text" o "email" para control "input"
    multiline: bool = False
    initial_value: str = ""
    pattern_eligible: bool = False
    choices: Tuple[FieldOption, ...] = ()

    @property
    def field_id(self) -> str:
        return self.field.id


def _render_text(field: FormField) -> RenderSpec:
    return RenderSpec(field=field, kind=FieldType.TEXT, control="input",
                      input_type="text", pattern_eligible=True)


def _render_email(field: FormField) -> RenderSpec:
    return RenderSpec(field=field, kind=FieldType.EMAIL, control="input",
                      input_type="email", pattern_eligible=True)


def _render_select(field: FormField) -> RenderSpec:
    # El select muestra siempre una opción: la primera es el valor inicial
    initial = field.options[0].value if field.options else ""
    return RenderSpec(field=field, kind=FieldType.SELECT, control="select",
                      initial_value=initial, choices=tuple(field.options))


def _render_radio(field: FormField) -> RenderSpec:
    return RenderSpec(field=field, kind=FieldType.RADIO, control="radio_group",
                      choices=tuple(field.options))


def _render_textarea(field: FormField) -> RenderSpec:
    return RenderSpec(field=field, kind=FieldType.TEXTAREA, control="textarea",
                      multiline=True)


FIELD_HANDLERS: Dict[FieldType, Callable[[FormField], RenderSpec]] = {
    FieldType.TEXT: _render_text,
    FieldType.EMAIL: _render_email,
    FieldType.SELECT: _render_select,
    FieldType.RADIO: _render_radio,
    FieldType.TEXTAREA: _render_textarea,
}

_missing_handlers = set(FieldType) - set(FIELD_HANDLERS)
if _missing_handlers:
    raise RuntimeError(
        f"Tipos de campo sin handler: {sorted(t.value for t in _missing_handlers)}"
    )


def coerce_field(raw: Any) -> Optional[FormField]:
    """Interpreta una entrada cruda de fields; None si no tiene id utilizable."""
    if isinstance(raw, FormField):
        return raw
    if not isinstance(raw, dict):
        return None
    try:
        return FormField.model_validate(raw)
    except ValidationError:
        return None


def resolve_field(raw: Union[FormField, Any]) -> Optional[RenderSpec]:
    """
    Resuelve un campo a su contrato de presentación.

    Returns:
        RenderSpec, o None si el tipo no es reconocido o el campo
        no puede identificarse
    """
    field = coerce_field(raw)
    if field is None:
        logger.debug("Campo sin id utilizable omitido: %r", raw)
        return None

    try:
        kind = FieldType(field.type)
    except ValueError:
        logger.debug("Campo '%s' con tipo desconocido '%s' omitido", field.id, field.type)
        return None

    return FIELD_HANDLERS[kind](field)


def resolve_fields(schema: FormSchema) -> List[RenderSpec]:
    """Resuelve todos los campos del esquema, en orden de presentación."""
    specs: List[RenderSpec] = []
    seen = set()
    for raw in schema.fields:
        spec = resolve_field(raw)
        if spec is None:
            continue
        if spec.field_id in seen:
            logger.warning("Id de campo repetido '%s': se conserva la primera aparición", spec.field_id)
            continue
        seen.add(spec.field_id)
        specs.append(spec)
    return specs
