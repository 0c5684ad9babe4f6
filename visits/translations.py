from dataclasses import dataclass
from typing import Optional


@dataclass
class VisitRow:
    """What the history table shows for one visit."""
    visit: object
    translation: Optional[dict] = None

    @property
    def showing_translation(self) -> bool:
        return bool(self.translation and self.translation.get("showing"))

    @property
    def text(self) -> str:
        if self.showing_translation:
            return self.translation["text"]
        return self.visit.summary or "No summary available"

    @property
    def toggle_label(self) -> Optional[str]:
        if not self.translation:
            return None
        if self.showing_translation:
            return "Show Original"
        return f"Show {self.translation['language']}"


class TranslationCache:
    """
    Per-visit translations held in the user's session.

    Keyed by visit id. Stored rows are never touched; toggling only flips
    which text is displayed. Signing out flushes the session and with it
    every cached translation.
    """
    session_key = "visit_translations"

    def __init__(self, session):
        self.session = session

    def _entries(self) -> dict:
        return dict(self.session.get(self.session_key, {}))

    def _save(self, entries: dict) -> None:
        self.session[self.session_key] = entries

    def get(self, visit_id) -> Optional[dict]:
        return self._entries().get(str(visit_id))

    def store(self, visit_id, language: str, text: str) -> dict:
        entries = self._entries()
        entry = {"language": language, "text": text, "showing": True}
        entries[str(visit_id)] = entry
        self._save(entries)
        return entry

    def toggle(self, visit_id) -> Optional[bool]:
        entries = self._entries()
        entry = entries.get(str(visit_id))
        if entry is None:
            return None
        entry = dict(entry, showing=not entry["showing"])
        entries[str(visit_id)] = entry
        self._save(entries)
        return entry["showing"]

    def discard(self, visit_id) -> None:
        entries = self._entries()
        if entries.pop(str(visit_id), None) is not None:
            self._save(entries)

    def rows(self, visits) -> list:
        entries = self._entries()
        return [VisitRow(visit=v, translation=entries.get(str(v.pk))) for v in visits]
