"""
Utilidades comunes para módulos CLI.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from formpreview.app import FormPreviewApp
from formpreview.config import PreviewSettings
from formpreview.cli.theme import get_console, print_error


def configure_logging(verbose: bool = False) -> None:
    """Envía los logs de formpreview a la consola Rich."""
    logger = logging.getLogger("formpreview")
    logger.handlers.clear()
    if not verbose:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)
        return
    handler = RichHandler(console=get_console(), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def read_schema_text(schema_file: Path) -> str:
    """Lee el archivo del esquema o termina con error."""
    try:
        return schema_file.read_text(encoding="utf-8")
    except OSError as e:
        print_error(f"No se pudo leer {schema_file}: {e.strerror or e}")
        raise typer.Exit(1)


def load_app(schema_file: Path, settings: Optional[PreviewSettings] = None) -> FormPreviewApp:
    """
    Crea la aplicación y carga el esquema del archivo.

    Termina con código 1 si el esquema no es válido.
    """
    app = FormPreviewApp(settings=settings)
    schema = app.on_schema_text_change(read_schema_text(schema_file))
    if schema is None:
        print_error(app.schema_error or f"El archivo {schema_file} está vacío")
        raise typer.Exit(1)
    return app


def parse_assignments(assignments: list[str]) -> list[tuple[str, str]]:
    """
    Convierte opciones "id=valor" en pares.

    Raises:
        typer.BadParameter: Si falta el '='
    """
    pairs = []
    for item in assignments:
        if "=" not in item:
            raise typer.BadParameter(f"Se esperaba id=valor, recibido: {item}")
        key, value = item.split("=", 1)
        pairs.append((key.strip(), value))
    return pairs
