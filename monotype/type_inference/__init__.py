from .main import Inferer, infer_type
from .utils import (
    compose_substitutions,
    merge_substitutions,
    substitute,
    Substitution,
    unify,
)

__all__ = (
    "compose_substitutions",
    "Inferer",
    "infer_type",
    "merge_substitutions",
    "substitute",
    "Substitution",
    "unify",
)
