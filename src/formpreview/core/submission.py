"""
Envío del formulario.

Re-valida todos los campos y construye el registro id -> valor, o
bloquea el envío. No persiste nada: el registro se entrega al host.
"""

import json
import logging
from typing import Dict, Iterator, Mapping, Sequence

from pydantic import RootModel, ValidationInfo, model_validator

from formpreview.errors import FieldValidationError, SubmissionBlocked
from formpreview.core.registry import RenderSpec
from formpreview.core.state import FieldState, FormStatus
from formpreview.core.validation import evaluate

logger = logging.getLogger(__name__)


class SubmissionRecord(RootModel[Dict[str, str]]):
    """
    Registro de envío: id de campo -> valor.

    Al validarse con context={"field_ids": [...]} exige exactamente
    esas claves.
    """

    @model_validator(mode="after")
    def check_field_ids(self, info: ValidationInfo) -> "SubmissionRecord":
        field_ids = (info.context or {}).get("field_ids")
        if field_ids is not None and set(self.root) != set(field_ids):
            extra = sorted(set(self.root) - set(field_ids))
            missing = sorted(set(field_ids) - set(self.root))
            raise ValueError(f"Claves no coinciden con el esquema (sobran: {extra}, faltan: {missing})")
        return self

    def __getitem__(self, key: str) -> str:
        return self.root[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def keys(self):
        return self.root.keys()

    def to_dict(self) -> Dict[str, str]:
        return dict(self.root)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.root, indent=indent, ensure_ascii=False)


def submit(
    status: FormStatus,
    field_states: Mapping[str, FieldState],
    specs: Sequence[RenderSpec],
) -> SubmissionRecord:
    """
    Intenta enviar el formulario.

    Args:
        status: Estado derivado del formulario
        field_states: Snapshot de los estados por id
        specs: Campos renderizados, en orden

    Returns:
        SubmissionRecord con un valor por campo renderizado

    Raises:
        SubmissionBlocked: Si el formulario no es enviable
    """
    errors = []
    for spec in specs:
        result = evaluate(spec.field, field_states[spec.field_id].value)
        if not result.valid:
            errors.append(FieldValidationError(spec.field_id, result.message))

    if not status.submittable:
        reason = "Formulario sin modificar" if status.all_valid else "Formulario con errores"
        raise SubmissionBlocked(reason, errors)
    if errors:
        raise SubmissionBlocked("Formulario con errores", errors)

    values = {spec.field_id: field_states[spec.field_id].value for spec in specs}
    record = SubmissionRecord.model_validate(
        values, context={"field_ids": [spec.field_id for spec in specs]}
    )
    logger.info("Formulario enviado con %d campos", len(record))
    return record
