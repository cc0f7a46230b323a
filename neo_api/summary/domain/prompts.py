"""Prompt construction for exercise progress summaries."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ...models.summary import SetLogForSummary

MAX_SETS_IN_PROMPT = 30
FALLBACK_SUMMARY = "No se pudo generar un resumen."

_CAUSE_BY_ALERT: Dict[str, str] = {
    "improvement": "progreso",
    "regression": "retroceso",
}


def _number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _format_set(log: SetLogForSummary) -> str:
    rir = "?" if log.rir is None else _number(log.rir)
    e1rm = "?" if log.est_1rm is None else f"{log.est_1rm:.1f}"
    return (
        f"{log.date} | {_number(log.weight)}kg × {log.reps} reps "
        f"| RIR: {rir} | e1RM: {e1rm}"
    )


def system_prompt(alert_type: str) -> str:
    cause = _CAUSE_BY_ALERT.get(alert_type, "estancamiento")
    return (
        "Eres un analista de rendimiento deportivo. Responde SOLO en español.\n"
        "Dado el historial de sets de un ejercicio, genera un resumen breve "
        "(3-5 frases máximo) explicando:\n"
        f"- La causa principal del {cause} (¿fue por cambio de peso, "
        "repeticiones, RIR, o combinación?).\n"
        "- Si el volumen o intensidad cambiaron significativamente.\n"
        "- Una recomendación breve y concreta.\n"
        "\n"
        "Sé directo, técnico y conciso. No uses introducciones ni despedidas. "
        "No uses markdown, solo texto plano."
    )


def user_prompt(
    exercise_name: str,
    set_logs: Sequence[SetLogForSummary],
    pct_change: Optional[float],
    alert_type: str,
) -> str:
    change = "?" if pct_change is None else f"{pct_change * 100:.1f}"
    lines = "\n".join(_format_set(log) for log in list(set_logs)[-MAX_SETS_IN_PROMPT:])
    return (
        f"Ejercicio: {exercise_name}\n"
        f"Cambio reciente: {change}%\n"
        f"Tipo de alerta: {alert_type}\n"
        "\n"
        "Historial de sets (fecha | peso × reps | RIR | e1RM estimado):\n"
        f"{lines}"
    )


def build_messages(
    exercise_name: str,
    set_logs: Sequence[SetLogForSummary],
    pct_change: Optional[float],
    alert_type: str,
) -> List[Dict[str, str]]:
    """Return chat messages asking for a short Spanish progress summary."""
    return [
        {"role": "system", "content": system_prompt(alert_type)},
        {
            "role": "user",
            "content": user_prompt(exercise_name, set_logs, pct_change, alert_type),
        },
    ]
