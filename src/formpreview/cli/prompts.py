"""
Llenado del formulario con preguntas secuenciales (questionary).

Alternativa al visor de tabla: cada campo se pregunta en orden y el
motor de validación decide si la respuesta se acepta.
"""

from typing import Optional

import questionary
from questionary import Style

from formpreview.app import FormPreviewApp
from formpreview.config import FieldType
from formpreview.cli.theme import get_palette, print_error, print_header
from formpreview.core.registry import RenderSpec
from formpreview.core.submission import SubmissionRecord
from formpreview.core.validation import evaluate

NO_SELECTION = "(sin selección)"


def get_prompt_style() -> Style:
    """Obtiene el estilo de questionary basado en el tema actual."""
    p = get_palette()
    return Style([
        ('qmark', f'fg:{p.accent} bold'),
        ('question', 'bold'),
        ('answer', f'fg:{p.success} bold'),
        ('pointer', f'fg:{p.accent} bold'),
        ('highlighted', f'fg:{p.primary} bold'),
        ('selected', f'fg:{p.success} bold'),
        ('instruction', f'fg:{p.muted} italic'),
        ('text', ''),
        ('disabled', f'fg:{p.muted} italic'),
        ('separator', f'fg:{p.border}'),
    ])


def make_validator(spec: RenderSpec):
    """Validador para questionary: True o el mensaje de error."""
    def _validate(value: str) -> bool | str:
        result = evaluate(spec.field, value)
        return True if result.valid else result.message
    return _validate


def ask_field(spec: RenderSpec, current: str, style: Style) -> Optional[str]:
    """
    Pregunta el valor de un campo.

    Returns:
        Respuesta, o None si el usuario canceló (Ctrl+C)
    """
    label = spec.field.label or spec.field_id
    if spec.field.required:
        label += " *"

    if spec.kind in (FieldType.SELECT, FieldType.RADIO):
        choices = [questionary.Choice(title=opt.label, value=opt.value) for opt in spec.choices]
        if not spec.field.required or not choices:
            choices.append(questionary.Choice(title=NO_SELECTION, value=""))
        default = next((c for c in choices if c.value == current), None)
        return questionary.select(
            label,
            choices=choices,
            default=default,
            use_indicator=spec.kind == FieldType.RADIO,
            style=style,
        ).ask()

    return questionary.text(
        label,
        default=current,
        instruction=spec.field.placeholder,
        multiline=spec.multiline,
        validate=make_validator(spec),
        style=style,
    ).ask()


def fill_form(app: FormPreviewApp) -> Optional[SubmissionRecord]:
    """
    Recorre los campos del esquema cargado y envía el formulario.

    Returns:
        SubmissionRecord, o None si se canceló o el envío quedó bloqueado
    """
    schema = app.schema
    style = get_prompt_style()
    print_header(schema.form_title, schema.form_description)

    for spec in app.machine.specs:
        current = app.machine.get(spec.field_id).value
        answer = ask_field(spec, current, style)
        if answer is None:
            return None
        app.on_field_change(spec.field_id, answer)

    record = app.on_submit_attempt()
    if record is None and app.last_blocked is not None:
        print_error(f"Envío bloqueado: {app.last_blocked.reason}")
        for err in app.last_blocked.errors:
            print_error(str(err))
    return record
