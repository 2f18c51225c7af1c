from typing import Any

from .languages import is_supported

NO_ERRORS = "No errors."


def _validate_language(value: Any, label: str) -> str | None:
    if not isinstance(value, str):
        return f"{label} must be of type string."
    if len(value) <= 1:
        return f"{label} must contain at least two characters."
    if not is_supported(value):
        return (
            f"{label} language is not supported or incorrect "
            f"{label.lower()} language code provided."
        )
    return None


def validate_request(text: Any, source: Any, target: Any) -> tuple[bool, str]:
    """Check a translation request, reporting only the first rule it breaks."""
    if not isinstance(text, str):
        return False, "Text must be of type string."
    if len(text) <= 0:
        return False, "Text must contain at least one character."

    for value, label in ((source, "Source"), (target, "Target")):
        error = _validate_language(value, label)
        if error:
            return False, error

    return True, NO_ERRORS
