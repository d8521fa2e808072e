"""
Tests para core/state.py - Máquina de estados del formulario.
"""

import pytest

from formpreview.core.state import FormStateMachine, FormStatus
from formpreview.core.validation import REQUIRED_MESSAGE
from formpreview.schema import validate_schema


@pytest.fixture
def machine(schema):
    """Máquina con el esquema de ejemplo cargado."""
    return FormStateMachine(schema)


@pytest.fixture
def mixed_machine(mixed_schema_dict):
    """Máquina con todos los tipos de campo."""
    return FormStateMachine(validate_schema(mixed_schema_dict))


class TestLoad:
    """Tests de carga del esquema."""

    def test_initial_state(self, machine):
        """Test todos los campos pristine y sin errores visibles."""
        for spec in machine.specs:
            state = machine.get(spec.field_id)
            assert state.pristine
            assert machine.visible_error(spec.field_id) is None
        assert machine.errors() == []

    def test_initial_status_not_submittable(self, machine):
        """Test formulario recién cargado no es enviable."""
        assert not machine.status.any_touched
        assert not machine.status.all_valid
        assert not machine.status.submittable

    def test_initial_values(self, mixed_machine):
        """Test valores iniciales por tipo de control."""
        assert mixed_machine.get_values() == {
            "name": "",
            "country": "uy",
            "plan": "",
            "comments": "",
        }

    def test_unknown_type_excluded(self, mixed_machine):
        """Test campo desconocido no bloquea la validez."""
        mixed_machine.change("name", "Ana")
        assert mixed_machine.status.all_valid
        assert mixed_machine.status.submittable

    def test_reload_resets_state(self, machine, schema):
        """Test cargar de nuevo descarta valores y marcas."""
        machine.change("name", "John")
        machine.load(schema)
        assert machine.get("name").value == ""
        assert machine.get("name").pristine
        assert not machine.status.any_touched

    def test_clear(self, machine):
        """Test limpiar deja la máquina sin campos."""
        machine.clear()
        assert machine.schema is None
        assert machine.specs == []
        assert machine.get_values() == {}
        assert machine.status == FormStatus()

    def test_empty_machine(self):
        """Test máquina sin esquema."""
        machine = FormStateMachine()
        assert machine.schema is None
        assert not machine.status.submittable


class TestChange:
    """Tests de cambios de valor."""

    def test_change_marks_touched(self, machine):
        """Test el primer cambio marca el campo."""
        state = machine.change("name", "John")
        assert state.touched
        assert state.value == "John"
        assert state.error is None
        assert machine.status.any_touched

    def test_touched_is_permanent(self, machine):
        """Test volver al valor inicial no restaura pristine."""
        machine.change("name", "John")
        machine.change("name", "")
        state = machine.get("name")
        assert state.touched
        assert state.error == REQUIRED_MESSAGE

    def test_error_only_on_touched_field(self, machine):
        """Test cambiar un campo no muestra errores de otros."""
        machine.change("name", "John")
        assert machine.visible_error("name") is None
        assert machine.visible_error("email") is None
        assert [err.field_id for err in machine.errors()] == []

    def test_invalid_email(self, machine):
        """Test email inválido produce el mensaje del esquema."""
        machine.change("email", "invalidemail")
        assert machine.visible_error("email") == "Please enter a valid email address"
        errors = machine.errors()
        assert len(errors) == 1
        assert errors[0].field_id == "email"

    def test_submittable_when_all_valid(self, machine):
        """Test enviable con todos los campos válidos y alguno modificado."""
        machine.change("name", "John Doe")
        assert not machine.status.submittable
        machine.change("email", "john.doe@example.com")
        assert machine.status.submittable

    def test_unrendered_field(self, mixed_machine):
        """Test cambiar un campo no renderizado falla."""
        with pytest.raises(KeyError):
            mixed_machine.change("birthday", "2000-01-01")
        with pytest.raises(KeyError):
            mixed_machine.change("inexistente", "x")

    def test_get_returns_copy(self, machine):
        """Test modificar la copia no altera el estado."""
        state = machine.get("name")
        state.value = "otro"
        assert machine.get("name").value == ""

    def test_snapshot_returns_copies(self, machine):
        """Test snapshot independiente del estado interno."""
        snapshot = machine.snapshot()
        snapshot["name"].touched = True
        assert machine.get("name").pristine


class TestCountValid:
    """Tests para count_valid."""

    def test_counts_all_rendered(self, mixed_machine):
        """Test cuenta sobre campos renderizados, tocados o no."""
        assert mixed_machine.count_valid() == (3, 4)
        mixed_machine.change("name", "Ana")
        assert mixed_machine.count_valid() == (4, 4)


class TestSubmittable:
    """Tests de habilitación del envío."""

    def test_required_gating(self, schema_dict):
        """Test requerido vacío deshabilita y con valor habilita."""
        schema_dict["fields"] = schema_dict["fields"][:1]
        machine = FormStateMachine(validate_schema(schema_dict))

        machine.change("name", "")
        assert not machine.status.submittable
        machine.change("name", "John Doe")
        assert machine.status.submittable

    def test_untouched_optional_form(self, schema_dict):
        """Test formulario válido sin modificar no es enviable."""
        schema_dict["fields"] = [{"id": "note", "type": "text", "label": "Nota", "required": False}]
        machine = FormStateMachine(validate_schema(schema_dict))
        assert machine.status.all_valid
        assert not machine.status.submittable
