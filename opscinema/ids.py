"""Deterministic identifiers."""

from __future__ import annotations

from uuid import UUID, uuid5

EVIDENCE_NAMESPACE_UUID = UUID(int=0xD4214DA8_7C85_4FF4_84BA_9E6F0BBA4A1F)


def deterministic_evidence_id(session_id: UUID | str, kind: str, source_id: str) -> UUID:
    """Derive a stable evidence id from its session, kind and source."""
    session = session_id if isinstance(session_id, UUID) else UUID(session_id)
    return uuid5(EVIDENCE_NAMESPACE_UUID, f"{session}:{kind}:{source_id}")