"""Engine core utilities: value types, text conversion, input actions and mappings, layer stacks, file watching and crash handling."""

__version__ = "0.1.0"

__all__ = [
    "data_types",
    "unique_id",
    "text_utils",
    "input_action",
    "input_mapping",
    "layers",
    "file_watcher",
    "crash_handler",
]