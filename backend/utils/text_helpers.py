import unicodedata

_APOSTROPHES = {"'", "’", "ʼ"}


def normalize_name(name: str) -> str:
    """Canonical comparison key for a country name.

    Case, accents, whitespace and apostrophes are ignored, so
    "Côte d'Ivoire" and "cotedivoire" produce the same key.
    """
    # Lowercase first: some uppercase letters lower into a base letter plus
    # a combining mark (e.g. "İ"), which the decomposition step then drops.
    decomposed = unicodedata.normalize("NFD", name.lower())
    return "".join(
        ch for ch in decomposed
        if not unicodedata.combining(ch)
        and not ch.isspace()
        and ch not in _APOSTROPHES
    )
