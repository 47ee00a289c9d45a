from .batch import BatchConverter, ConversionResult, ConvertSettings, iter_spt_files, output_path_for
from .messages import MessageCatalog

__all__ = [
    "BatchConverter",
    "ConversionResult",
    "ConvertSettings",
    "iter_spt_files",
    "MessageCatalog",
    "output_path_for",
]
