"""
Patient-level summary built from every visit summary a user has.

The aggregate is never stored in the database. Each dashboard load asks the
model for a fresh one and keeps it, together with any translation, in the
user's session until the next load replaces it.
"""
import logging
from dataclasses import asdict, dataclass
from typing import ClassVar, List, Optional

from django.db import DatabaseError

from medi.errors import GenerationError, MediError, StoreError
from visits import ai
from visits.models import Visit

logger = logging.getLogger(__name__)

EMPTY_PLACEHOLDER = "Add a Document to Get Started"
SUMMARY_FAILED = "Failed to generate summary. Please try again later."
TRANSLATION_FAILED = "Failed to translate summary. Please try again later."

PATIENT_SUMMARY_PROMPT = """Given the following summaries of medical documents for this patient:

{summaries}

Please provide a comprehensive medical summary. Some things to include can be past health issues they've had,
prescriptions or medications they have received, pattern of medical visits and treatments.
Keep it concise but informative. Output only the text, nothing else, no formatting or headers or anything. If nothing is provided,
please just say "{placeholder}\""""

SUMMARY_TRANSLATION_PROMPT = """Translate the following medical summary to {language}. Don't do any formating or headers or introductions, just provide the text.
Maintain medical accuracy and terminology:

{text}"""


@dataclass
class SummaryPanel:
    text: Optional[str] = None
    error: Optional[str] = None
    language: str = ""
    translated: str = ""
    showing_translation: bool = False

    session_key: ClassVar[str] = "patient_summary"

    @property
    def displayed(self) -> Optional[str]:
        if self.showing_translation and self.translated:
            return self.translated
        return self.text

    @property
    def toggle_label(self) -> Optional[str]:
        if not self.translated:
            return None
        return "Show English" if self.showing_translation else f"Show {self.language}"

    def toggle(self) -> None:
        if self.translated:
            self.showing_translation = not self.showing_translation

    def save(self, session) -> None:
        session[self.session_key] = asdict(self)

    @classmethod
    def load(cls, session) -> "SummaryPanel":
        data = session.get(cls.session_key)
        if not data:
            return cls()
        return cls(**data)


def fetch_summaries(user) -> List[str]:
    try:
        return list(Visit.objects.filter(user=user).order_by("visit_date").values_list("summary", flat=True))
    except DatabaseError as e:
        raise StoreError("Could not load visit summaries", cause=e) from e


def build_patient_summary_prompt(summaries: List[str]) -> str:
    return PATIENT_SUMMARY_PROMPT.format(
        summaries="\n".join(summaries),
        placeholder=EMPTY_PLACEHOLDER,
    )


def generate_patient_summary(user) -> SummaryPanel:
    try:
        summaries = fetch_summaries(user)
        # no truncation - prompt grows with the number of visits
        text = ai.generate_text(build_patient_summary_prompt(summaries))
    except MediError as e:
        logger.error("Failed to get summary for %s: %s", user, e)
        return SummaryPanel(error=SUMMARY_FAILED)
    return SummaryPanel(text=text)


def translate_panel(panel: SummaryPanel, language: str) -> SummaryPanel:
    if not panel.text or not language:
        return panel
    prompt = SUMMARY_TRANSLATION_PROMPT.format(language=language, text=panel.text)
    try:
        translated = ai.generate_text(prompt)
    except GenerationError as e:
        logger.error("Translation failed: %s", e)
        panel.error = TRANSLATION_FAILED
        return panel

    panel.error = None
    panel.language = language
    panel.translated = translated
    panel.showing_translation = True
    return panel
