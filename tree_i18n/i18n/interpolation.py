"""Named placeholder substitution for resolved translations."""

from typing import Any, Mapping


def interpolate(template: str, params: Mapping[str, Any]) -> str:
    """Replace every "{name}" in template with str(params[name]).

    Parameters are applied one after another in the caller's order, each
    over the output of the previous replacement. Text inserted for an
    earlier parameter is therefore visible to later ones: with
    params {"a": "{b}", "b": "x"} the template "{a}" becomes "x".

    Placeholders without a parameter are left as they are and parameters
    without a placeholder are ignored.

    Args:
        template: Translation string containing {name} placeholders.
        params: Mapping of placeholder name to value.

    Returns:
        The interpolated string.
    """
    for name, value in params.items():
        template = template.replace(f"{{{name}}}", str(value))
    return template
