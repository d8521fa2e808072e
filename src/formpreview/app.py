"""
Aplicación host de la vista previa.

Conecta el editor de esquema (con espera antes de re-parsear), la
máquina de estados del formulario y el envío. Es la superficie de
callbacks que usan las interfaces de terminal.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from formpreview.config import FormSchema, PreviewSettings
from formpreview.errors import SchemaError, SubmissionBlocked
from formpreview.schema import parse_schema_text, schema_to_json
from formpreview.core.debounce import Debouncer
from formpreview.core.state import FieldState, FormStateMachine, FormStatus
from formpreview.core.submission import SubmissionRecord, submit

logger = logging.getLogger(__name__)


class FormPreviewApp:
    """
    Estado de una sesión de vista previa.

    Args:
        settings: Configuración (espera, archivo de envío)
        on_submit: Callback que recibe cada registro enviado
        on_schema: Callback tras cada procesamiento del esquema,
            recibe (esquema o None, mensaje de error o None)
        timer_factory: Fábrica de timers para el editor (tests)
    """

    def __init__(
        self,
        settings: Optional[PreviewSettings] = None,
        on_submit: Optional[Callable[[SubmissionRecord], None]] = None,
        on_schema: Optional[Callable[[Optional[FormSchema], Optional[str]], None]] = None,
        timer_factory: Optional[Callable] = None,
    ):
        self.settings = settings or PreviewSettings()
        self.on_submit = on_submit
        self.on_schema = on_schema
        self.machine = FormStateMachine()
        self.schema_error: Optional[str] = None
        self.last_submission: Optional[SubmissionRecord] = None
        self.last_blocked: Optional[SubmissionBlocked] = None

        debouncer_kwargs = {"delay": self.settings.debounce_seconds}
        if timer_factory is not None:
            debouncer_kwargs["timer_factory"] = timer_factory
        self.editor = Debouncer(self.on_schema_text_change, **debouncer_kwargs)

    @property
    def schema(self) -> Optional[FormSchema]:
        return self.machine.schema

    @property
    def status(self) -> FormStatus:
        return self.machine.status

    # ------------------------------------------------------------------
    # Editor de esquema
    # ------------------------------------------------------------------

    def schema_text_input(self, text: str) -> None:
        """Registra texto del editor; se procesa tras la pausa configurada."""
        self.editor.schedule(text)

    def on_schema_text_change(self, text: str) -> Optional[FormSchema]:
        """
        Procesa el texto del esquema.

        Un error deja el formulario sin esquema y guarda el mensaje en
        schema_error. Texto vacío limpia el formulario sin error.
        """
        self.schema_error = None
        self.last_blocked = None
        schema = None
        if not text.strip():
            self.machine.clear()
        else:
            try:
                schema = parse_schema_text(text)
            except SchemaError as e:
                self.schema_error = str(e)
                self.machine.clear()
                logger.info("Esquema rechazado: %s", e)
            else:
                self.machine.load(schema)

        if self.on_schema is not None:
            self.on_schema(schema, self.schema_error)
        return schema

    def load_schema(self, schema: FormSchema) -> None:
        """Carga un esquema ya validado."""
        self.schema_error = None
        self.last_blocked = None
        self.machine.load(schema)

    def schema_json(self) -> Optional[str]:
        """JSON formateado del esquema cargado, para copiar."""
        if self.schema is None:
            return None
        return schema_to_json(self.schema)

    # ------------------------------------------------------------------
    # Formulario
    # ------------------------------------------------------------------

    def on_field_change(self, field_id: str, raw_value: str) -> FieldState:
        """Aplica el valor ingresado en un control."""
        return self.machine.change(field_id, raw_value)

    def on_submit_attempt(self) -> Optional[SubmissionRecord]:
        """
        Intenta enviar el formulario.

        Returns:
            SubmissionRecord, o None si el envío está bloqueado
        """
        try:
            record = submit(self.machine.status, self.machine.snapshot(), self.machine.specs)
        except SubmissionBlocked as e:
            self.last_blocked = e
            logger.info("Envío bloqueado: %s", e.reason)
            return None

        self.last_blocked = None
        self.last_submission = record
        if self.on_submit is not None:
            self.on_submit(record)
        return record

    def save_submission(self, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Guarda el último envío como JSON formateado.

        Raises:
            ValueError: Si todavía no hay envío
        """
        if self.last_submission is None:
            raise ValueError("No hay envío para guardar")

        filepath = Path(path or self.settings.submission_filename)
        filepath.write_text(self.last_submission.to_json() + "\n", encoding="utf-8")
        logger.info("Envío guardado en %s", filepath)
        return filepath

    def close(self) -> None:
        """Cancela el procesamiento pendiente del editor."""
        self.editor.cancel()
