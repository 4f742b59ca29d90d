import re

FIRST_INTEGER_RE = re.compile(r"\d+", re.ASCII)
INT64_MAX = 2**63 - 1


def extract_first_integer(text: str) -> int:
    """
    Return the value of the first run of decimal digits in text, or 0 if there is none.
    Signs and decimal points are not interpreted: "-3.5" yields 3.
    """
    match = FIRST_INTEGER_RE.search(text)
    if not match:
        return 0
    digits = match.group(0).lstrip("0") or "0"
    # Larger runs saturate at the int64 maximum
    if len(digits) > len(str(INT64_MAX)):
        return INT64_MAX
    return min(int(digits), INT64_MAX)


def contains_string(text: str, needle: str) -> bool:
    """Case-sensitive literal substring test"""
    return needle in text
