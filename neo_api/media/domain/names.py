"""Translate Spanish exercise names into catalogue search terms."""

from __future__ import annotations

from typing import Dict, Final

SPANISH_TO_ENGLISH: Final[Dict[str, str]] = {
    "press banca": "barbell bench press",
    "press de banca": "barbell bench press",
    "press inclinado": "incline bench press",
    "press declinado": "decline bench press",
    "press militar": "overhead press",
    "press hombro": "shoulder press",
    "sentadilla": "barbell squat",
    "sentadillas": "barbell squat",
    "peso muerto": "deadlift",
    "peso muerto rumano": "romanian deadlift",
    "curl biceps": "bicep curl",
    "curl bíceps": "bicep curl",
    "curl martillo": "hammer curl",
    "dominadas": "pull up",
    "fondos": "dip",
    "remo con barra": "barbell row",
    "remo con mancuerna": "dumbbell row",
    "jalón al pecho": "lat pulldown",
    "jalon al pecho": "lat pulldown",
    "extensión tríceps": "tricep extension",
    "extension triceps": "tricep extension",
    "elevaciones laterales": "lateral raise",
    "elevacion lateral": "lateral raise",
    "face pull": "face pull",
    "hip thrust": "hip thrust",
    "prensa": "leg press",
    "prensa de piernas": "leg press",
    "extensión de cuádriceps": "leg extension",
    "extension de cuadriceps": "leg extension",
    "curl femoral": "leg curl",
    "curl de piernas": "leg curl",
    "zancadas": "lunge",
    "plancha": "plank",
    "crunch": "crunch",
    "abdominales": "crunch",
    "press arnold": "arnold press",
    "aperturas": "chest fly",
    "apertura con mancuernas": "dumbbell fly",
    "pájaros": "reverse fly",
    "pajaros": "reverse fly",
    "encogimientos": "shrug",
    "encogimiento de hombros": "barbell shrug",
    "gemelos": "calf raise",
    "elevación de gemelos": "calf raise",
    "curl predicador": "preacher curl",
    "curl concentrado": "concentration curl",
    "press francés": "skull crusher",
    "press frances": "skull crusher",
    "pullover": "pullover",
    "remo en polea": "cable row",
    "jalón en polea": "cable pulldown",
}


def search_term_for(exercise_name: str) -> str:
    """Return the English catalogue term for ``exercise_name``.

    Exact matches win, then the first mapping whose key contains or is
    contained in the name. Unknown names are returned unchanged since they
    are often English already.
    """
    lower = exercise_name.lower().strip()

    direct = SPANISH_TO_ENGLISH.get(lower)
    if direct:
        return direct

    for key, value in SPANISH_TO_ENGLISH.items():
        if key in lower or lower in key:
            return value

    return exercise_name
