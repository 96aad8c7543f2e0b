import re
from typing import Any, Dict, Mapping, Optional

_LEADING_INT = re.compile(r'^[+-]?\d+')


def get_layer(layers: Any, name: str) -> Optional[Dict[str, Any]]:
    """Return the named protocol layer if it is a mapping, else None."""
    if not isinstance(layers, Mapping):
        return None
    layer = layers.get(name)
    if isinstance(layer, Mapping):
        return layer
    return None


def field_value(layer: Optional[Mapping[str, Any]], key: str) -> Optional[str]:
    """
    Read a single field from a layer as a string.

    tshark ek output encodes values as strings, and repeated fields
    (tunnels, multiple headers) as lists; the first element wins.
    Empty and non-scalar values are treated as absent.

    Args:
        layer: Layer mapping (or None)
        key: Field name, e.g. 'ip_ip_src'

    Returns:
        The field as a stripped string, or None
    """
    if layer is None:
        return None

    value = layer.get(key)
    if isinstance(value, list):
        value = value[0] if value else None

    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return None

    text = str(value).strip()
    return text or None


def first_field(layer: Optional[Mapping[str, Any]], *keys: str) -> Optional[str]:
    """Return the first present field among keys (short name, then ek long name)."""
    for key in keys:
        value = field_value(layer, key)
        if value is not None:
            return value
    return None


def leading_int(text: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a string, ignoring what follows.

    '1500', ' 1500.0' and '10abc' give 1500, 1500 and 10; text without
    leading digits gives None.
    """
    if text is None:
        return None
    match = _LEADING_INT.match(text.strip())
    if not match:
        return None
    return int(match.group(0))
