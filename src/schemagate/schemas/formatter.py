"""Human-readable rendering of validation diagnostics."""

ROOT_MARKER = "$"
ROOT_LABEL = "<root>"


def display_path(path: str) -> str:
    """Strip the ``$.`` root prefix, or render the bare root as a label.

    >>> display_path("$.orderInfo.cityName")
    'orderInfo.cityName'
    >>> display_path("$")
    '<root>'
    """
    if path.startswith(ROOT_MARKER + "."):
        return path[len(ROOT_MARKER) + 1:]
    if path == ROOT_MARKER:
        return ROOT_LABEL
    return path


def format_error(path: str, message: str) -> str:
    return f"field [{display_path(path)}]: {message}"
