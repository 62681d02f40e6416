from typing import Any, Dict, Tuple

from .format import show_type

Span = Tuple[int, int]


class MonotypeError(Exception):
    """
    This base exception for the entire library. It should never be
    caught or thrown directly, one of its subclasses should be used
    instead.

    Methods
    -------
    to_json()
        Generate an error report that can be dumped as a JSON object.
    """

    name = "monotype_error"

    def to_json(self) -> Dict[str, Any]:
        """
        Generate an error report in JSON format.

        Returns
        -------
        Dict[str, Any]
            The full error report as a single `dict` object that can
            be converted into a JSON object.
        """
        return {"error_name": self.name, "message": str(self)}


class InferenceError(MonotypeError):
    """
    This is the base for every way that inferring the type of an
    expression can fail.
    """

    name = "inference_error"


class CircularTypeError(InferenceError):
    """
    This is an error where 2 types are supposed to be unified but one
    type (`inner`) occurs inside the other (`outer`), leading to an
    infinitely recursive substitution.
    """

    name = "circular_type_error"

    def __init__(self, inner, outer) -> None:
        super().__init__(f"{show_type(inner)} occurs inside of {show_type(outer)}")
        self.inner = inner
        self.outer = outer

    def to_json(self):
        return {
            "error_name": self.name,
            "inner": show_type(self.inner),
            "outer": show_type(self.outer),
        }


class DepthLimitError(InferenceError):
    """
    This is an error where an expression is nested more deeply than the
    engine is allowed to recurse.
    """

    name = "depth_limit_exceeded"

    def __init__(self, node, max_depth: int) -> None:
        super().__init__(f"Expression nested deeper than {max_depth} levels")
        self.span: Span = node.span
        self.max_depth: int = max_depth

    def to_json(self):
        return {
            "error_name": self.name,
            "start": self.span[0],
            "end": self.span[1],
            "max_depth": self.max_depth,
        }


class TypeMismatchError(InferenceError):
    """
    This error is caused by the type inferer being unable to unify the
    two sides of a type equation.
    """

    name = "type_mismatch"

    def __init__(self, left, right) -> None:
        super().__init__(f"Cannot unify {show_type(left)} with {show_type(right)}")
        self.left = left
        self.right = right

    def to_json(self):
        return {
            "error_name": self.name,
            "actual_type": {
                "start": self.left.span[0],
                "end": self.left.span[1],
                "type": show_type(self.left),
            },
            "expected_type": {
                "start": self.right.span[0],
                "end": self.right.span[1],
                "type": show_type(self.right),
            },
        }


class UndefinedNameError(InferenceError):
    """
    This is an error where the expression tries to refer to a name that
    has not been bound by an enclosing lambda or `let`.
    """

    name = "undefined_name"

    def __init__(self, name):
        super().__init__(f'The name "{name.value}" has not been defined.')
        self.span: Span = name.span
        self.value: str = name.value

    def to_json(self):
        return {
            "error_name": self.name,
            "start": self.span[0],
            "end": self.span[1],
            "value": self.value,
        }
