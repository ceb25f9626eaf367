"""Text templates for the weekly insight responses."""

GREETING_TEMPLATE = "**¡Hola {user_name}!**"

WEEKLY_SUMMARY_HEADER = "**RESUMEN SEMANAL:**"
INSIGHTS_HEADER = "**INSIGHTS PROFUNDOS:**"
RECOMMENDATIONS_HEADER = "**RECOMENDACIONES PERSONALIZADAS:**"
CLOSING_HEADER = "**REFLEXIÓN FINAL:**"

BULLET = "• "

# Summary paragraph
SUMMARY_OPENING = "Esta semana registraste {count} reflexiones, mostrando {mood_phrase}"
MOOD_PHRASES = {
    "high": "un excelente estado de ánimo promedio de {mood}/10.",
    "balanced": "un estado de ánimo equilibrado de {mood}/10.",
    "low": "un estado de ánimo de {mood}/10, sugiriendo algunos desafíos importantes.",
}
ENERGY_OPENING = "Tu nivel de energía ({energy}/10) {energy_phrase}"
ENERGY_PHRASES = {
    "high": "muestra vitalidad constante.",
    "balanced": "indica un equilibrio energético razonable.",
    "low": "sugiere la necesidad de recargar energías.",
}

# Insight bullets
CONSISTENCY_EXCEPTIONAL = "Tu consistencia en la reflexión ({count} días) demuestra un compromiso excepcional"
CONSISTENCY_REGULAR = "Tu práctica regular de reflexión muestra disciplina personal valiosa"
CONSISTENCY_OPPORTUNITY = "Hay oportunidad para mayor consistencia en tu práctica reflexiva"

EMOTION_BALANCED = "Logras mantener un equilibrio emocional admirable con bajo estrés"
EMOTION_POSITIVE = "Tu capacidad de mantener una perspectiva positiva es una fortaleza clave"
EMOTION_HONEST = "Tu honestidad sobre los desafíos emocionales muestra gran autoconocimiento"

ENERGY_HIGH = "Tu alta energía sugiere hábitos de vida que te favorecen"
ENERGY_LOW = "Los niveles bajos de energía podrían indicar necesidad de cambios en rutinas"

HIGHLIGHTS_DEPTH = "Tus reflexiones muestran profundidad y sinceridad en el autoexamen"

# Recommendation bullets
RECOMMEND_FREQUENCY = "Intenta reflexionar más frecuentemente - incluso 2 minutos diarios marcan diferencia"
RECOMMEND_LOW_MOOD = (
    "Considera incorporar una pequeña actividad que disfrutes cada día",
    "Explora técnicas de manejo emocional como respiración o caminatas",
)
RECOMMEND_HIGH_MOOD = (
    "Mantén las prácticas que están funcionando tan bien para ti",
    "Considera compartir tu enfoque positivo con otros",
)
RECOMMEND_LOW_ENERGY = (
    "Revisa tus patrones de sueño y nutrición para optimizar energía",
    "Pequeños descansos durante el día pueden ser muy efectivos",
)
RECOMMEND_HIGH_STRESS = (
    "Identifica las principales fuentes de estrés y abórdalas gradualmente",
    "Técnicas de relajación específicas podrían ser muy beneficiosas",
)

# Closing reflection
CLOSING_CELEBRATORY = (
    "Tu dedicación constante y tu actitud positiva crean una base sólida para el "
    "crecimiento continuo. ¡Excelente trabajo!"
)
CLOSING_RESILIENCE = (
    "Atravesar momentos difíciles con la voluntad de reflexionar demuestra una "
    "fortaleza admirable. Cada día es una nueva oportunidad."
)
CLOSING_ENCOURAGEMENT = (
    "Tu compromiso con el autoconocimiento te está llevando por un camino valioso "
    "de desarrollo personal. ¡Continúa adelante!"
)

EMPTY_WEEK_TEMPLATE = """**¡Hola {user_name}!**

**OBSERVACIÓN CLAVE:**
Esta semana no registraste reflexiones en tu diario, y eso también nos dice algo valioso.

**INSIGHT PROFUNDO:**
Los períodos sin registro suelen coincidir con semanas muy ocupadas o momentos de transición. Esto es completamente normal y parte del ritmo natural de la vida.

**RECOMENDACIÓN PERSONALIZADA:**
Prueba la "reflexión de 30 segundos": antes de dormir, pregúntate simplemente "¿Cómo me sentí hoy?" No necesitas escribir un párrafo; incluso una palabra o emoji cuenta.

Recuerda: la constancia importa más que la perfección. ¡Nos vemos la próxima semana! 🌟"""

FALLBACK_RESPONSE = """**¡Hola!**

He analizado tus datos de esta semana y puedo ver tu compromiso con el bienestar personal.

**INSIGHT CLAVE:**
Tu práctica de reflexión muestra una dedicación valiosa al autoconocimiento.

**RECOMENDACIÓN:**
Continúa con esta práctica tan beneficiosa para tu desarrollo personal.

¡Sigue adelante en tu camino de crecimiento!"""
