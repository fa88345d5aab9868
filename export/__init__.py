"""Export Module - Flat-file renderings of a ranked batch."""
from export.exporters import to_csv, to_flat_csv, to_json, to_records, write_export
from export.blueprint import blueprint_filename, to_blueprint_markdown

__all__ = [
    'to_csv',
    'to_flat_csv',
    'to_json',
    'to_records',
    'write_export',
    'to_blueprint_markdown',
    'blueprint_filename',
]
