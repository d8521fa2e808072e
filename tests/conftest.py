"""Configuración de pytest para tests de formpreview."""

import json

import pytest

from formpreview.app import FormPreviewApp
from formpreview.schema import validate_schema


EMAIL_PATTERN = "^[^\\s@]+@[^\\s@]+\\.[^\\s@]+$"


class FakeTimer:
    """Timer controlado manualmente, con la interfaz de threading.Timer."""

    created = []

    def __init__(self, delay, function, args=()):
        self.delay = delay
        self.function = function
        self.args = args
        self.daemon = False
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        """Dispara el callback aunque haya sido cancelado (simula carrera)."""
        self.function(*self.args)


@pytest.fixture
def fake_timer():
    """Clase FakeTimer con registro limpio."""
    FakeTimer.created = []
    return FakeTimer


@pytest.fixture
def schema_dict():
    """Esquema de ejemplo: nombre y email requeridos."""
    return {
        "formTitle": "Test Form",
        "formDescription": "Please fill out the form",
        "fields": [
            {
                "id": "name",
                "label": "Full Name",
                "type": "text",
                "required": True,
                "placeholder": "Enter your name",
            },
            {
                "id": "email",
                "label": "Email Address",
                "type": "email",
                "required": True,
                "placeholder": "Enter your email",
                "validation": {
                    "pattern": EMAIL_PATTERN,
                    "message": "Please enter a valid email address",
                },
            },
        ],
    }


@pytest.fixture
def mixed_schema_dict():
    """Esquema con todos los tipos de campo y uno desconocido."""
    return {
        "formTitle": "Encuesta",
        "formDescription": "Preguntas varias",
        "fields": [
            {"id": "name", "type": "text", "label": "Nombre", "required": True},
            {"id": "country", "type": "select", "label": "País", "required": True,
             "options": [{"value": "uy", "label": "Uruguay"}, {"value": "ar", "label": "Argentina"}]},
            {"id": "plan", "type": "radio", "label": "Plan", "required": False,
             "options": [{"value": "basic", "label": "Básico"}, {"value": "pro", "label": "Pro"}]},
            {"id": "comments", "type": "textarea", "label": "Comentarios", "required": False},
            {"id": "birthday", "type": "date", "label": "Nacimiento", "required": True},
        ],
    }


@pytest.fixture
def schema(schema_dict):
    """FormSchema validado del esquema de ejemplo."""
    return validate_schema(schema_dict)


@pytest.fixture
def app(schema_dict):
    """FormPreviewApp con el esquema de ejemplo cargado."""
    preview_app = FormPreviewApp()
    preview_app.on_schema_text_change(json.dumps(schema_dict))
    return preview_app


@pytest.fixture
def schema_file(tmp_path, schema_dict):
    """Archivo JSON con el esquema de ejemplo."""
    path = tmp_path / "form.json"
    path.write_text(json.dumps(schema_dict), encoding="utf-8")
    return path
