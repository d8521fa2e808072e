"""
Máquina de estados del formulario.

Mantiene valor, marca de modificación y error de cada campo renderizado,
y deriva la validez del formulario completo tras cada cambio.
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from formpreview.config import FormSchema
from formpreview.errors import FieldValidationError
from formpreview.core.registry import RenderSpec, resolve_fields
from formpreview.core.validation import evaluate

logger = logging.getLogger(__name__)


@dataclass
class FieldState:
    """Estado de un campo."""
    value: str = ""
    touched: bool = False
    error: Optional[str] = None

    @property
    def pristine(self) -> bool:
        return not self.touched


@dataclass(frozen=True)
class FormStatus:
    """Estado derivado del formulario completo."""
    all_valid: bool = True
    any_touched: bool = False

    @property
    def submittable(self) -> bool:
        return self.all_valid and self.any_touched


class FormStateMachine:
    """
    Dueño exclusivo de los FieldState del esquema cargado.

    Cada campo pasa de pristine a modificado en su primer cambio y no
    vuelve atrás; solo cargar un nuevo esquema reinicia el estado.
    """

    def __init__(self, schema: Optional[FormSchema] = None):
        self._schema: Optional[FormSchema] = None
        self._specs: List[RenderSpec] = []
        self._fields: Dict[str, FieldState] = {}
        self._status = FormStatus()
        if schema is not None:
            self.load(schema)

    @property
    def schema(self) -> Optional[FormSchema]:
        return self._schema

    @property
    def specs(self) -> List[RenderSpec]:
        """Campos renderizados, en orden."""
        return list(self._specs)

    @property
    def status(self) -> FormStatus:
        return self._status

    def load(self, schema: FormSchema) -> None:
        """Carga un esquema descartando todo el estado anterior."""
        self._schema = schema
        self._specs = resolve_fields(schema)
        self._fields = {
            spec.field_id: FieldState(value=spec.initial_value) for spec in self._specs
        }
        self._recompute()
        logger.info(
            "Esquema '%s' cargado: %d de %d campos renderizados",
            schema.form_title, len(self._specs), len(schema.fields),
        )

    def clear(self) -> None:
        """Descarta el esquema y el estado de todos los campos."""
        self._schema = None
        self._specs = []
        self._fields = {}
        self._status = FormStatus()

    def get_spec(self, field_id: str) -> Optional[RenderSpec]:
        """Obtiene el contrato de un campo por su id."""
        for spec in self._specs:
            if spec.field_id == field_id:
                return spec
        return None

    def get(self, field_id: str) -> FieldState:
        """Copia del estado de un campo."""
        return replace(self._fields[field_id])

    def snapshot(self) -> Dict[str, FieldState]:
        """Copia de los estados de todos los campos."""
        return {key: replace(state) for key, state in self._fields.items()}

    def get_values(self) -> Dict[str, str]:
        """Retorna diccionario con todos los valores."""
        return {key: state.value for key, state in self._fields.items()}

    def change(self, field_id: str, value: str) -> FieldState:
        """
        Aplica un cambio de valor a un campo.

        Raises:
            KeyError: Si el campo no está renderizado
        """
        spec = self.get_spec(field_id)
        if spec is None:
            raise KeyError(f"Campo no renderizado: {field_id}")

        state = self._fields[field_id]
        state.value = value
        state.touched = True
        state.error = evaluate(spec.field, value).message
        self._recompute()
        return replace(state)

    def visible_error(self, field_id: str) -> Optional[str]:
        """Error a mostrar: ninguno mientras el campo esté pristine."""
        state = self._fields[field_id]
        return state.error if state.touched else None

    def errors(self) -> List[FieldValidationError]:
        """Errores de los campos ya modificados."""
        return [
            FieldValidationError(key, state.error)
            for key, state in self._fields.items()
            if state.touched and state.error
        ]

    def count_valid(self) -> tuple[int, int]:
        """Retorna (campos_válidos, campos_renderizados)."""
        valid = sum(
            1 for spec in self._specs
            if evaluate(spec.field, self._fields[spec.field_id].value).valid
        )
        return valid, len(self._specs)

    def _recompute(self) -> None:
        valid, total = self.count_valid()
        self._status = FormStatus(
            all_valid=valid == total,
            any_touched=any(state.touched for state in self._fields.values()),
        )
