"""Log-safe fingerprints for journal content.

Journal text is private. Logs carry a hash of the text so a specific
classification can be correlated with a stored entry without the
content itself ever reaching log storage.
"""
import hashlib
from typing import Optional


def fingerprint_text(text: Optional[str]) -> str:
    """Hash journal text for logging without exposing content.

    Args:
        text: Raw journal text (None and non-strings hash as empty)

    Returns:
        SHA-256 hex digest of the text
    """
    if not isinstance(text, str):
        text = ""
    # Lone surrogates (e.g. from a JSON "\ud83d" escape) are valid str values
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()
