"""
Comandos CLI para completar y enviar formularios.
"""

from pathlib import Path
from typing import Annotated, List, Optional

import typer

from formpreview.config import PreviewSettings, ThemeMode
from formpreview.core.submission import SubmissionRecord
from formpreview.cli.common import load_app, parse_assignments
from formpreview.cli.theme import (
    ThemeSubscription,
    print_error,
    print_json,
    print_success,
    print_warning,
)


def _finish(app, record: Optional[SubmissionRecord], output: Optional[Path]) -> None:
    if record is None:
        print_warning("Formulario no enviado")
        raise typer.Exit(1)
    print_json(record.to_json(), title="Envío")
    if output is not None:
        path = app.save_submission(output)
        print_success(f"Envío guardado en: {path}")


def preview(
    schema_file: Annotated[Path, typer.Argument(help="Archivo JSON del esquema")],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Archivo de envío")] = None,
    theme: Annotated[ThemeMode, typer.Option("--theme", help="Tema de colores")] = ThemeMode.AUTO,
):
    """
    Muestra el formulario interactivo del esquema.

    Ejemplo:
        formpreview preview contacto.json -o form_submission.json
    """
    from formpreview.cli.viewer.form_viewer import interactive_form

    with ThemeSubscription(theme) as subscription:
        app = load_app(schema_file, PreviewSettings(theme=theme))
        record = interactive_form(app, subscription)
        _finish(app, record, output)


def fill(
    schema_file: Annotated[Path, typer.Argument(help="Archivo JSON del esquema")],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Archivo de envío")] = None,
    theme: Annotated[ThemeMode, typer.Option("--theme", help="Tema de colores")] = ThemeMode.AUTO,
):
    """
    Completa el formulario respondiendo una pregunta por campo.

    Ejemplo:
        formpreview fill contacto.json
    """
    from formpreview.cli.prompts import fill_form

    with ThemeSubscription(theme):
        app = load_app(schema_file, PreviewSettings(theme=theme))
        record = fill_form(app)
        _finish(app, record, output)


def submit(
    schema_file: Annotated[Path, typer.Argument(help="Archivo JSON del esquema")],
    values: Annotated[Optional[List[str]], typer.Option("--set", "-s", help="Valor de campo: id=valor")] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Archivo de envío")] = None,
):
    """
    Completa y envía el formulario sin interacción.

    Ejemplo:
        formpreview submit contacto.json -s name="John Doe" -s email=john@example.com
    """
    app = load_app(schema_file)

    for field_id, value in parse_assignments(values or []):
        if app.machine.get_spec(field_id) is None:
            print_warning(f"Campo '{field_id}' no renderizado, se ignora")
            continue
        app.on_field_change(field_id, value)

    record = app.on_submit_attempt()
    if record is None:
        blocked = app.last_blocked
        print_error(f"Envío bloqueado: {blocked.reason}")
        for err in blocked.errors:
            print_error(str(err))
        raise typer.Exit(1)

    _finish(app, record, output)


__all__ = ["preview", "fill", "submit"]
