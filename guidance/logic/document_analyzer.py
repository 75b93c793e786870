"""
Document Classifier

Tags an uploaded file with a document kind and education level from its
file name, before the external extractor fills in the entities.
"""

from typing import Optional, Tuple

from .contracts import DocumentKind, EducationLevel


_BACHELOR_TOKENS = ("bachelor", "degree", "btech")
_MASTER_TOKENS = ("master", "ms")
_SCORE_CARD_TOKENS = ("ielts", "toefl", "sat", "gre", "gmat")


def classify_document(file_name: str) -> Tuple[DocumentKind, Optional[EducationLevel]]:
    """
    Guess the document kind and education level from a file name.

    Checks are ordered: grade markers first, then degree transcripts,
    then test score cards. Anything else is treated as a certificate.
    """
    name = (file_name or "").lower()

    if "10" in name:
        return DocumentKind.MARKSHEET, EducationLevel.TENTH
    if "12" in name:
        return DocumentKind.MARKSHEET, EducationLevel.TWELFTH
    if any(token in name for token in _BACHELOR_TOKENS):
        return DocumentKind.TRANSCRIPT, EducationLevel.BACHELOR
    if any(token in name for token in _MASTER_TOKENS):
        return DocumentKind.TRANSCRIPT, EducationLevel.MASTER
    if any(token in name for token in _SCORE_CARD_TOKENS):
        return DocumentKind.SCORE_CARD, None
    return DocumentKind.CERTIFICATE, None
