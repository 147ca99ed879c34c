"""
Text processing utilities for labels and contact fields.

Pure functions shared by the section renderers. None of them mutate their input.
"""

import re

# Uppercase letters anywhere except the first character of the key
_INTERNAL_UPPERCASE = re.compile(r"(?<!^)([A-Z])")

# "ci cd" however it ends up spaced/capitalized after word splitting
_CI_CD_TOKEN = re.compile(r"\bci\s*cd\b", re.IGNORECASE)

_NON_DIGIT = re.compile(r"\D")


def format_label(key: str) -> str:
    """
    Derive a human-readable label from a camelCase identifier.

    Steps, in order:
    1. Insert a space before each internal uppercase letter
    2. Capitalize the first character
    3. Rewrite the token "ci cd" (any case, any spacing) to "CI/CD"

    Args:
        key: Non-empty camelCase identifier (skill category or stat name)

    Returns:
        Display label

    Raises:
        ValueError: If key is empty

    Examples:
        >>> format_label("programmingLanguages")
        'Programming Languages'
        >>> format_label("ciCd")
        'CI/CD'
    """
    if not key:
        raise ValueError("format_label requires a non-empty identifier key")

    spaced = _INTERNAL_UPPERCASE.sub(r" \1", key)
    label = spaced[0].upper() + spaced[1:]
    return _CI_CD_TOKEN.sub("CI/CD", label)


def dial_number(phone: str) -> str:
    """
    Strip every non-digit character from a formatted phone number.

    Example:
        >>> dial_number("+1 (555) 010-2030")
        '15550102030'
    """
    return _NON_DIGIT.sub("", phone)


def download_filename(name: str, suffix: str = "Resume.pdf") -> str:
    """
    Build the download file name offered for the resume action.

    Whitespace runs in the name become single underscores.

    Example:
        >>> download_filename("Ada  Lovelace")
        'Ada_Lovelace_Resume.pdf'
    """
    stem = "_".join(name.split())
    return f"{stem}_{suffix}" if stem else suffix
