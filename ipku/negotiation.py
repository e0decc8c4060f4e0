import enum


class Format(enum.Enum):
    TEXT = 'text'
    JSON = 'json'
    HTML = 'html'


def _header_values(headers, name):
    """
    All values of header ``name``, matched case-insensitively.

    Works with Werkzeug ``Headers`` and with plain mappings whose values are
    strings or lists of strings.
    """
    if hasattr(headers, 'getlist'):
        return headers.getlist(name)

    values = []
    for key, value in headers.items():
        if key.lower() != name.lower():
            continue
        if isinstance(value, str):
            values.append(value)
        else:
            values.extend(value)
    return values


def is_command_line_client(headers):
    return any('curl' in value for value in _header_values(headers, 'User-Agent'))


def wants_structured_format(headers):
    return any('application/json' in value for value in _header_values(headers, 'Accept'))


def negotiate(headers):
    """Pick the response format: curl first, then JSON, HTML otherwise."""
    if is_command_line_client(headers):
        return Format.TEXT
    if wants_structured_format(headers):
        return Format.JSON
    return Format.HTML
