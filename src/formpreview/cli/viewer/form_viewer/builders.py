"""
Funciones para construir componentes visuales del formulario.
"""

from rich.console import Group
from rich.table import Table
from rich.text import Text
from rich.panel import Panel
from rich import box

from formpreview.cli.theme import get_palette, get_icons
from formpreview.config import FieldType
from formpreview.core.registry import RenderSpec

from .models import ViewerState


def format_field_value(spec: RenderSpec, value: str) -> str:
    """Formatea el valor de un campo para mostrar."""
    if value == "":
        return "-"

    if spec.kind in (FieldType.SELECT, FieldType.RADIO):
        # Buscar label de la opción seleccionada
        for opt in spec.choices:
            if opt.value == value:
                return opt.label
        return value

    if spec.multiline:
        lines = value.splitlines() or [""]
        return lines[0] + (" …" if len(lines) > 1 else "")

    return value


def build_header(state: ViewerState) -> Panel:
    """Título y descripción del formulario."""
    p = get_palette()
    schema = state.app.schema
    content = Text(schema.form_title, style=f"bold {p.primary}")
    content.append(f"\n{schema.form_description}", style=p.muted)
    return Panel(content, border_style=p.border, box=box.ROUNDED, padding=(0, 2))


def build_form_table(state: ViewerState) -> Table:
    """Construye la tabla del formulario."""
    p = get_palette()
    icons = get_icons()
    machine = state.app.machine

    table = Table(
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
        expand=False,
    )

    table.add_column("#", justify="right", width=3)
    table.add_column("Campo", justify="left", width=25)
    table.add_column("Valor", justify="left", width=30)
    table.add_column("Estado", justify="center", width=12)

    for idx, spec in enumerate(state.specs):
        is_selected = idx == state.selected_idx
        fld_state = machine.get(spec.field_id)
        error = machine.visible_error(spec.field_id)

        # Estado visual: los errores solo aparecen tras modificar el campo
        if error:
            status_icon, status_style, status_text = icons.cross, p.error, "inválido"
        elif fld_state.touched:
            status_icon, status_style, status_text = icons.check, p.success, "válido"
        elif spec.field.required:
            status_icon, status_style, status_text = icons.warning, p.warning, "pendiente"
        else:
            status_icon, status_style, status_text = icons.info, p.muted, "opcional"

        value_str = format_field_value(spec, fld_state.value)
        if fld_state.value == "" and spec.field.placeholder:
            value_str = spec.field.placeholder

        label = spec.field.label or spec.field_id
        if spec.field.required:
            label += " *"

        if is_selected:
            row_style = f"bold reverse {p.primary}"
            idx_text = Text(f">{idx + 1}", style=row_style)
            label_text = Text(label, style=row_style)
            value_text = Text(value_str, style=row_style)
            status_full = Text(f"{status_icon} {status_text}", style=row_style)
        else:
            idx_text = Text(str(idx + 1), style=p.muted)
            label_text = Text(label, style="bold" if spec.field.required else p.muted)
            if fld_state.value:
                value_text = Text(value_str, style=f"bold {p.accent}")
            else:
                value_text = Text(value_str, style=f"italic {p.muted}")
            status_full = Text(f"{status_icon} {status_text}", style=status_style)

        table.add_row(idx_text, label_text, value_text, status_full)

    return table


def build_field_feedback(state: ViewerState) -> Text:
    """Error del campo actual (si fue modificado) o su texto de ayuda."""
    p = get_palette()
    spec = state.current_spec()
    text = Text()
    if spec is None:
        return text

    error = state.app.machine.visible_error(spec.field_id)
    if error:
        text.append(f"  {error}", style=f"bold {p.error}")
    elif state.app.machine.get(spec.field_id).touched:
        text.append("  Campo válido", style=p.success)
    elif spec.field.placeholder:
        text.append(f"  {spec.field.placeholder}", style=p.info)
    return text


def build_select_options(state: ViewerState) -> Table:
    """Construye tabla de opciones para modo select/radio."""
    p = get_palette()
    icons = get_icons()
    spec = state.current_spec()
    current_value = state.app.machine.get(spec.field_id).value

    table = Table(
        title=f"Seleccionar: {spec.field.label or spec.field_id}",
        title_style=f"bold {p.accent}",
        border_style=p.accent,
        box=box.ROUNDED,
        show_header=False,
        padding=(0, 1),
    )

    table.add_column("", width=3)
    if spec.kind == FieldType.RADIO:
        table.add_column("", width=3)
    table.add_column("Opción", width=40)

    for idx, opt in enumerate(spec.choices):
        is_cursor = idx == state.select_idx
        row_style = f"bold reverse {p.primary}" if is_cursor else ""
        marker = Text(icons.pointer if is_cursor else " ", style=row_style or p.muted)
        opt_text = Text(opt.label, style=row_style)

        if spec.kind == FieldType.RADIO:
            is_checked = opt.value == current_value
            mark = Text(
                icons.selected if is_checked else icons.unselected,
                style=row_style or (f"bold {p.success}" if is_checked else p.muted),
            )
            table.add_row(marker, mark, opt_text)
        else:
            table.add_row(marker, opt_text)

    return table


def build_nav_text(state: ViewerState) -> Text:
    """Construye el texto de navegación."""
    p = get_palette()
    nav = Text()

    if state.mode == "navigate":
        nav.append("  [", style=p.muted)
        nav.append("↑↓", style=f"bold {p.primary}")
        nav.append("] Navegar  ", style=p.muted)
        nav.append("[", style=p.muted)
        nav.append("Enter", style=f"bold {p.primary}")
        nav.append("] Editar  ", style=p.muted)
        # El envío solo se ofrece cuando el formulario es enviable
        if state.app.status.submittable:
            nav.append("[", style=p.muted)
            nav.append("q", style=f"bold {p.nav_confirm}")
            nav.append("] Enviar  ", style=p.muted)
        else:
            nav.append("[q] Enviar (deshabilitado)  ", style=f"dim {p.muted}")
        nav.append("[", style=p.muted)
        nav.append("Esc", style=f"bold {p.nav_cancel}")
        nav.append("] Salir", style=p.muted)

    elif state.mode == "edit_text":
        spec = state.current_spec()
        nav.append(f"  {spec.field.label or spec.field_id}: ", style=f"bold {p.accent}")
        nav.append(state.input_buffer.replace("\n", "⏎"), style=f"bold {p.input_text}")
        nav.append("_", style=f"blink bold {p.input_text}")
        if spec.multiline:
            nav.append("  [Enter] Nueva línea  [Tab] Confirmar  [Esc] Descartar", style=p.muted)
        else:
            nav.append("  [Enter] Confirmar  [Esc] Descartar", style=p.muted)

    elif state.mode == "edit_select":
        nav.append("  [", style=p.muted)
        nav.append("↑↓", style=f"bold {p.primary}")
        nav.append("] Navegar  ", style=p.muted)
        nav.append("[", style=p.muted)
        nav.append("Enter", style=f"bold {p.primary}")
        nav.append("] Seleccionar  ", style=p.muted)
        nav.append("[", style=p.muted)
        nav.append("Esc", style=f"bold {p.primary}")
        nav.append("] Cancelar", style=p.muted)

    elif state.mode == "confirm_cancel":
        nav.append("  ¿Salir sin enviar? ", style=f"bold {p.warning}")
        nav.append("[s/n]", style=p.muted)

    return nav


def build_message_text(state: ViewerState) -> Text:
    """Construye el texto de mensaje."""
    p = get_palette()
    if not state.message:
        return Text("")

    if "Error" in state.message or "bloqueado" in state.message.lower():
        style = f"bold {p.error}"
    elif "enviado" in state.message.lower() or "actualizado" in state.message.lower():
        style = f"bold {p.success}"
    else:
        style = p.info

    return Text(f"  {state.message}", style=style)


def build_progress_panel(state: ViewerState) -> Panel:
    """Construye el panel de progreso."""
    p = get_palette()
    valid, total = state.app.machine.count_valid()

    text = Text()
    text.append("  Válidos: ", style=p.muted)
    text.append(f"{valid}/{total}", style=f"bold {p.accent}")
    text.append(" campos", style=p.muted)

    if state.app.status.submittable:
        text.append("  │  ", style=p.muted)
        text.append("✓ Listo para enviar", style=f"bold {p.success}")

    return Panel(text, border_style=p.border, padding=(0, 1))


def build_display(state: ViewerState) -> Group:
    """Construye el display completo."""
    p = get_palette()
    app = state.app

    if app.schema is None:
        placeholder = app.schema_error or "No hay un esquema válido cargado"
        return Group(Text(f"  {placeholder}", style=f"bold {p.error}" if app.schema_error else p.muted))

    elements = [build_header(state), Text(""), build_form_table(state)]

    if state.mode == "edit_select":
        elements.append(Text(""))
        elements.append(build_select_options(state))

    elements.append(build_field_feedback(state))
    elements.append(Text(""))
    elements.append(build_progress_panel(state))
    elements.append(build_nav_text(state))

    if state.message:
        elements.append(build_message_text(state))

    return Group(*elements)
