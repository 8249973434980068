"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Solo se usan en modo verbose; stdout queda libre.
"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from core.domain.models import MessageProperty, StreamResult


def build_properties_table(properties: list[MessageProperty], *, source: str) -> Table:
    """Tabla con las propiedades del mensaje que se va a enviar."""

    table = Table(title=f"IOT message ({source})")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for prop in properties:
        table.add_row(prop.key, prop.value)
    return table


def build_result_text(result: StreamResult) -> Text:
    text = Text()
    text.append("Sent ", style="green")
    text.append(f"{result.bytes_sent} bytes", style="bold")
    text.append(f" (HTTP {result.status_code})", style="dim")
    if result.truncated:
        text.append(" [truncated]", style="yellow")
    return text
