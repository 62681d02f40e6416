from .config import ConfigData, DEFAULT_CONFIG
from .errors import (
    CircularTypeError,
    DepthLimitError,
    InferenceError,
    MonotypeError,
    TypeMismatchError,
    UndefinedNameError,
)
from .format import show_type
from .type_inference import Inferer, infer_type

__all__ = (
    "CircularTypeError",
    "ConfigData",
    "DEFAULT_CONFIG",
    "DepthLimitError",
    "Inferer",
    "infer_type",
    "InferenceError",
    "MonotypeError",
    "show_type",
    "TypeMismatchError",
    "UndefinedNameError",
)
