from typing import Optional


def credits_from_code(code: str) -> Optional[int]:
    """
    Credit hours encoded as the last character of a subject code.

    "CS104" -> 4, "ABCX" -> None. A trailing "0" comes back as 0; callers
    reject it together with None since a zero-credit subject is not valid.
    """
    if not code:
        return None
    last = code[-1]
    if last not in "0123456789":
        return None
    return int(last)
