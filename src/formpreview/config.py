"""Modelos Pydantic para el esquema del formulario y la configuración."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class FieldType(str, Enum):
    """Tipos de campo soportados."""
    TEXT = "text"
    EMAIL = "email"
    SELECT = "select"
    RADIO = "radio"
    TEXTAREA = "textarea"


class ThemeMode(str, Enum):
    """Modo de color de la interfaz."""
    AUTO = "auto"
    DARK = "dark"
    LIGHT = "light"


# ============================================================================
# Modelos de Campo
# ============================================================================

class FieldOption(BaseModel):
    """Opción de un campo de selección cerrada (select/radio)."""
    value: str = Field(..., description="Valor enviado")
    label: str = Field(default="", description="Texto visible")

    @field_validator("label", mode="after")
    @classmethod
    def default_label(cls, v: str, info) -> str:
        if not v:
            return info.data.get("value", "")
        return v


class FieldValidation(BaseModel):
    """Regla de patrón para campos text/email."""
    pattern: str = Field(..., description="Expresión regular")
    message: str = Field(default="", description="Mensaje si no coincide")


def _coerce_option(raw: Any) -> Optional[FieldOption]:
    """Convierte una opción cruda; None si no tiene un valor utilizable."""
    if not isinstance(raw, dict):
        return None
    value = raw.get("value")
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None
    label = raw.get("label")
    return FieldOption(
        value=str(value),
        label=label if isinstance(label, str) else "",
    )


class FormField(BaseModel):
    """
    Definición de un campo del formulario.

    La interpretación es tolerante: un campo mal formado se degrada
    (sin etiqueta, sin opciones, sin validación) en lugar de invalidar
    todo el esquema. Solo el id es obligatorio.
    """

    model_config = ConfigDict(extra="ignore")

    id: StrictStr = Field(..., min_length=1, description="Identificador único")
    type: str = Field(default="", description="Tipo de campo (puede ser desconocido)")
    label: str = Field(default="", description="Etiqueta visible")
    required: bool = Field(default=False, description="Campo requerido")
    placeholder: Optional[str] = Field(default=None, description="Texto de ayuda")
    validation: Optional[FieldValidation] = Field(default=None, description="Regla de patrón")
    options: list[FieldOption] = Field(default_factory=list, description="Opciones select/radio")

    @field_validator("type", "label", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""

    @field_validator("required", mode="before")
    @classmethod
    def coerce_required(cls, v: Any) -> bool:
        return bool(v)

    @field_validator("placeholder", mode="before")
    @classmethod
    def coerce_placeholder(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None

    @field_validator("validation", mode="before")
    @classmethod
    def coerce_validation(cls, v: Any) -> Optional[dict]:
        if not isinstance(v, dict) or not isinstance(v.get("pattern"), str):
            return None
        message = v.get("message")
        return {"pattern": v["pattern"], "message": message if isinstance(message, str) else ""}

    @field_validator("options", mode="before")
    @classmethod
    def coerce_options(cls, v: Any) -> list[FieldOption]:
        if not isinstance(v, list):
            return []
        options = (_coerce_option(raw) for raw in v)
        return [opt for opt in options if opt is not None]


# ============================================================================
# Esquema del Formulario
# ============================================================================

class FormSchema(BaseModel):
    """
    Esquema completo del formulario.

    Solo se valida la forma de primer nivel; las entradas de `fields`
    se conservan crudas y se interpretan al resolver cada campo.
    """

    model_config = ConfigDict(extra="ignore")

    form_title: StrictStr = Field(..., alias="formTitle", min_length=1, description="Título")
    form_description: StrictStr = Field(
        ..., alias="formDescription", min_length=1, description="Descripción"
    )
    fields: list[Any] = Field(..., strict=True, description="Campos en orden de render")


# ============================================================================
# Configuración de la Aplicación
# ============================================================================

DEFAULT_SUBMISSION_FILENAME = "form_submission.json"


class PreviewSettings(BaseModel):
    """Configuración de la vista previa."""
    debounce_seconds: float = Field(default=0.5, ge=0, description="Espera antes de re-parsear (s)")
    submission_filename: str = Field(
        default=DEFAULT_SUBMISSION_FILENAME, min_length=1, description="Archivo de envío"
    )
    theme: ThemeMode = Field(default=ThemeMode.AUTO, description="Tema de colores")
