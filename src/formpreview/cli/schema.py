"""
Comandos CLI sobre el esquema: validación y edición en vivo.
"""

import time
from pathlib import Path
from typing import Annotated, Callable, Optional

import typer
from rich.table import Table
from rich import box

from formpreview.app import FormPreviewApp
from formpreview.config import FormSchema, PreviewSettings
from formpreview.core.registry import coerce_field, resolve_field
from formpreview.cli.common import load_app
from formpreview.cli.theme import (
    get_console,
    get_palette,
    print_error,
    print_header,
    print_info,
    print_success,
)


def build_fields_table(schema: FormSchema) -> Table:
    """Tabla con todos los campos del esquema y si se renderizan."""
    p = get_palette()
    table = Table(
        title="Campos",
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
    )
    table.add_column("#", justify="right")
    table.add_column("Id")
    table.add_column("Tipo")
    table.add_column("Etiqueta")
    table.add_column("Requerido", justify="center")
    table.add_column("Renderizado", justify="center")

    for idx, raw in enumerate(schema.fields, start=1):
        field = coerce_field(raw)
        if field is None:
            table.add_row(str(idx), "-", "-", "-", "-", f"[{p.error}]no (sin id)[/]")
            continue
        rendered = resolve_field(field) is not None
        table.add_row(
            str(idx),
            field.id,
            field.type or "-",
            field.label or "-",
            "sí" if field.required else "no",
            f"[{p.success}]sí[/]" if rendered else f"[{p.warning}]no (tipo desconocido)[/]",
        )
    return table


def validate(
    schema_file: Annotated[Path, typer.Argument(help="Archivo JSON del esquema")],
    as_json: Annotated[bool, typer.Option("--json", help="Imprimir el esquema normalizado")] = False,
):
    """
    Valida la estructura de un esquema de formulario.

    Ejemplo:
        formpreview validate contacto.json
    """
    app = load_app(schema_file)

    if as_json:
        typer.echo(app.schema_json())
        return

    schema = app.schema
    print_header(schema.form_title, schema.form_description)
    get_console().print(build_fields_table(schema))
    rendered = len(app.machine.specs)
    print_success(f"Esquema válido: {rendered} de {len(schema.fields)} campos renderizados")


def report_schema(schema: Optional[FormSchema], error: Optional[str]) -> None:
    """Informa el resultado de cada re-procesamiento del esquema."""
    stamp = time.strftime("%H:%M:%S")
    if error:
        print_error(f"{stamp} {error}")
    elif schema is None:
        print_info(f"{stamp} Sin esquema")
    else:
        print_success(f"{stamp} '{schema.form_title}': {len(schema.fields)} campos")


def watch_file(
    schema_file: Path,
    app: FormPreviewApp,
    interval: float = 0.2,
    should_stop: Callable[[], bool] = lambda: False,
) -> None:
    """
    Observa el archivo y entrega cada cambio al editor de la app.

    El editor espera una pausa antes de procesar, así que solo el
    último contenido de una ráfaga de escrituras se valida.
    """
    last_mtime: Optional[float] = None
    while not should_stop():
        try:
            mtime = schema_file.stat().st_mtime
        except FileNotFoundError:
            mtime = None
        if mtime != last_mtime:
            last_mtime = mtime
            text = schema_file.read_text(encoding="utf-8") if mtime is not None else ""
            app.schema_text_input(text)
        time.sleep(interval)


def watch(
    schema_file: Annotated[Path, typer.Argument(help="Archivo JSON del esquema")],
    debounce: Annotated[float, typer.Option("--debounce", "-d", help="Espera en segundos")] = 0.5,
    interval: Annotated[float, typer.Option("--interval", help="Intervalo de sondeo (s)")] = 0.2,
):
    """
    Re-valida el esquema cada vez que el archivo cambia.

    Ejemplo:
        formpreview watch contacto.json --debounce 1
    """
    settings = PreviewSettings(debounce_seconds=debounce)
    app = FormPreviewApp(settings=settings, on_schema=report_schema)
    print_info(f"Observando {schema_file} (Ctrl+C para salir)")
    try:
        watch_file(schema_file, app, interval=interval)
    except KeyboardInterrupt:
        pass
    finally:
        app.close()
