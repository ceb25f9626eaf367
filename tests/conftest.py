"""Shared fixtures for the journal insights tests."""

import pytest


def build_week_prompt(
    user_name="Ana",
    reflections="6",
    mood="8.3",
    energy="7.5",
    stress="3.0",
    moments="4",
    highlights=('1. "Hoy caminé por el parque con mi hermana"', '2. "Terminé el proyecto a tiempo"'),
):
    """Weekly prompt in the layout the journaling app sends."""
    lines = []
    if user_name is not None:
        lines.append(f"Analiza las reflexiones de {user_name} de esta semana y escribe un resumen.")
    else:
        lines.append("Analiza las reflexiones y escribe un resumen.")
    lines.append("")
    lines.append("DATOS DE LA SEMANA:")
    if reflections is not None:
        lines.append(f"Total de días con reflexiones: {reflections}")
    if mood is not None:
        lines.append(f"Estado de ánimo promedio: {mood}/10")
    if energy is not None:
        lines.append(f"Nivel de energía promedio: {energy}/10")
    if stress is not None:
        lines.append(f"Nivel de estrés promedio: {stress}/10")
    if highlights:
        lines.append("")
        lines.append("REFLEXIONES DESTACADAS:")
        lines.extend(highlights)
    lines.append("")
    lines.append("MOMENTOS ESPECIALES:")
    if moments is not None:
        lines.append(f"Total de momentos registrados: {moments}")
    lines.append("")
    return "\n".join(lines)


@pytest.fixture
def week_prompt():
    return build_week_prompt
