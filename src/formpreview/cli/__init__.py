"""
CLI de formpreview - Vista previa de formularios definidos en JSON.

Comandos:
- validate: Valida la estructura de un esquema
- watch: Re-valida el esquema cada vez que el archivo cambia
- preview: Formulario interactivo en la terminal
- fill: Formulario pregunta por pregunta
- submit: Envío no interactivo con valores id=valor
"""

from typing import Annotated

import typer

# Crear aplicación principal
app = typer.Typer(
    name="formpreview",
    help="Vista previa interactiva de formularios definidos en JSON.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Mostrar logs de depuración")] = False,
):
    """
    formpreview - Renderiza y valida formularios a partir de un esquema JSON.
    """
    from formpreview.cli.common import configure_logging
    configure_logging(verbose)


def _register_commands():
    """Registra los comandos de los submódulos."""
    from formpreview.cli.form import fill, preview, submit
    from formpreview.cli.schema import validate, watch

    app.command("validate")(validate)
    app.command("watch")(watch)
    app.command("preview")(preview)
    app.command("fill")(fill)
    app.command("submit")(submit)


_register_commands()


__all__ = ["app"]
