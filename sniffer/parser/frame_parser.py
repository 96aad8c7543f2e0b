from typing import Any

from .fields import first_field, get_layer, leading_int


def parse_frame_length(layers: Any) -> int:
    """
    Parse the captured frame length in bytes.

    Only the leading integer of the field is read ('1500' and '1500.0'
    both give 1500). Absent, unparsable or negative lengths give 0.
    """
    value = first_field(get_layer(layers, 'frame'), 'frame_len', 'frame_frame_len')
    length = leading_int(value)
    if length is None or length < 0:
        return 0
    return length
