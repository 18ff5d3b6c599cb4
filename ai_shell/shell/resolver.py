import shutil


def first_token(line: str) -> str:
    """Returns the first whitespace-delimited token of `line`, or "" if there is none."""
    parts = line.split()
    return parts[0] if parts else ""


def is_resolvable(token: str) -> bool:
    """
    Checks whether `token` names an executable the shell could find.

    The lookup follows the platform's own rules (PATH, plus PATHEXT and the
    current directory on Windows). Lookup errors count as "not found".
    """
    if not token or not token.strip():
        return False

    try:
        return shutil.which(token.strip()) is not None
    except (OSError, ValueError):
        return False
