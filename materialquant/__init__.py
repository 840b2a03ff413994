"""Color utilities, image color quantization and theme value types."""

__version__ = "0.1.0"

__all__ = ["celebi", "hex_utils", "lab", "theme", "utils", "wsmeans", "wu"]