"""
Shape encoders

- primitive: canonical text for integers, floats, booleans, strings and timestamps
- sequence: ordered lists of primitives
- record: flat models, dataclasses and mappings of primitives
"""

from .primitive import encode_primitive, format_timestamp, primitive_to_string
from .record import encode_record, is_record, record_fields, wire_names
from .sequence import encode_sequence, sequence_delimiters

__all__ = [
    "encode_primitive",
    "encode_record",
    "encode_sequence",
    "format_timestamp",
    "is_record",
    "primitive_to_string",
    "record_fields",
    "sequence_delimiters",
    "wire_names",
]
