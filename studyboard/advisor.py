"""Short study advice from Gemini, based on the per-subject totals.

The engine never depends on this: every failure turns into a fallback
sentence so the caller can always show something.
"""

from __future__ import annotations
import logging
from typing import Any, Mapping, Optional

import google.generativeai as genai

DEFAULT_MODEL = "gemini-2.5-flash"
MISSING_KEY_MESSAGE = "Configura la tua API key per ricevere consigli."
DEFAULT_ADVICE = "Continua così, stai andando alla grande!"
FALLBACK_ADVICE = "Non riesco a ottenere un consiglio adesso. Continua a studiare!"


def build_prompt(summary: Mapping[str, int]) -> str:
    subject_data = ", ".join(f"{name}: {minutes}m" for name, minutes in summary.items())
    return (
        "You are a study productivity coach.\n"
        f"Here is a student's study time distribution: [{subject_data}].\n"
        "Provide a single, short, motivating, and specific sentence of advice or "
        "encouragement based on their balance (or lack thereof).\n"
        "If the list is empty, tell them to start studying!\n"
        "Answer in Italian and keep it under 30 words."
    )


def _extract_text(resp: Any) -> str:
    text = getattr(resp, "text", None)
    if isinstance(text, str):
        return text.strip()
    return ""


def get_study_insight(summary: Mapping[str, int], api_key: Optional[str],
                      model_name: str = DEFAULT_MODEL) -> str:
    if not api_key:
        logging.warning("API key Gemini mancante.")
        return MISSING_KEY_MESSAGE
    try:
        genai.configure(api_key=api_key)
        model = genai.GenerativeModel(model_name)
        resp = model.generate_content(build_prompt(summary))
        return _extract_text(resp) or DEFAULT_ADVICE
    except Exception as exc:
        logging.warning(f"Consiglio Gemini non disponibile: {exc}", exc_info=True)
        return FALLBACK_ADVICE
