"""Language codes accepted by the translation endpoint."""

SUPPORTED_LANGUAGES: frozenset[str] = frozenset(
    code.lower()
    for code in (
        "af", "sq", "am", "ar", "hy", "az", "eu", "be", "bn", "bs", "bg", "ca",
        "ceb", "zh", "zh-TW", "co", "hr", "cs", "da", "nl", "en", "eo", "et",
        "fi", "fr", "gl", "ka", "de", "el", "gu", "ht", "ha", "haw", "he", "hi",
        "hmn", "hu", "is", "ig", "id", "ga", "it", "ja", "jv", "kn", "kk", "km",
        "rw", "ko", "ku", "ky", "la", "lo", "lv", "lt", "lb", "mk", "mg", "ms",
        "ml", "mt", "mi", "mr", "mn", "my", "ne", "no", "ny", "or", "ps", "fa",
        "pl", "pt", "pa", "ro", "ru", "sm", "gd", "sr", "st", "sn", "sd", "si",
        "sk", "sl", "so", "es", "su", "sw", "sv", "tl", "tg", "ta", "tt", "te",
        "th", "tr", "tk", "uk", "ur", "ug", "uz", "vi", "cy", "xh", "yi", "yo",
        "zu",
    )
)


def is_supported(code: str) -> bool:
    return code.lower() in SUPPORTED_LANGUAGES
