# pylint: disable=R0903, C0115
from abc import ABC, abstractmethod
from itertools import count
from typing import Iterator

from .base import Span


class Type(ABC):
    """
    This is the base class for the program's representation of types in
    the type system.

    Attributes
    ----------
    span: Span
        The position of the expression that this type was created for.

    Warnings
    --------
    - This class should not be used directly, instead use one of its
      subclasses.
    """

    __slots__ = ("span",)

    def __init__(self, span: Span) -> None:
        self.span: Span = span

    @abstractmethod
    def __eq__(self, other) -> bool:
        ...

    @abstractmethod
    def __contains__(self, value) -> bool:
        ...


class ConcreteType(Type, ABC):
    """
    A type whose shape is known, as opposed to a `TypeVar`.

    Attributes
    ----------
    error: bool
        Whether this type was carried forward from a sub-expression
        that failed to type check.
    """

    __slots__ = ("error",)

    def __init__(self, span: Span, error: bool = False) -> None:
        super().__init__(span)
        self.error: bool = error

    @abstractmethod
    def mark_error(self) -> "ConcreteType":
        """Make a copy of this type with the `error` flag set."""


class ErrorType(ConcreteType):
    __slots__ = ()

    def mark_error(self) -> "ErrorType":
        return ErrorType(self.span, True)

    def __eq__(self, other) -> bool:
        return isinstance(other, ErrorType) and self.error == other.error

    def __contains__(self, value) -> bool:
        return False

    def __hash__(self) -> int:
        return hash(("Error", self.error))

    def __repr__(self) -> str:
        return "Error?" if self.error else "Error"


class FuncType(ConcreteType):
    __slots__ = ("arg_type", "return_type")

    def __init__(
        self, span: Span, arg_type: Type, return_type: Type, error: bool = False
    ) -> None:
        super().__init__(span, error)
        self.arg_type: Type = arg_type
        self.return_type: Type = return_type

    def mark_error(self) -> "FuncType":
        return FuncType(self.span, self.arg_type, self.return_type, True)

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, FuncType)
            and self.error == other.error
            and self.arg_type == other.arg_type
            and self.return_type == other.return_type
        )

    def __contains__(self, value) -> bool:
        return value in self.arg_type or value in self.return_type

    def __hash__(self) -> int:
        return hash((self.arg_type, self.return_type, self.error))

    def __repr__(self) -> str:
        suffix = "?" if self.error else ""
        return f"(-> {repr(self.arg_type)} {repr(self.return_type)}){suffix}"


class NumberType(ConcreteType):
    __slots__ = ()

    def mark_error(self) -> "NumberType":
        return NumberType(self.span, True)

    def __eq__(self, other) -> bool:
        return isinstance(other, NumberType) and self.error == other.error

    def __contains__(self, value) -> bool:
        return False

    def __hash__(self) -> int:
        return hash(("Number", self.error))

    def __repr__(self) -> str:
        return "Number?" if self.error else "Number"


class TypeVar(Type):
    __slots__ = ("value",)

    def __init__(self, span: Span, value: int) -> None:
        super().__init__(span)
        self.value: int = value

    def __eq__(self, other) -> bool:
        return isinstance(other, TypeVar) and self.value == other.value

    def __contains__(self, value) -> bool:
        return isinstance(value, TypeVar) and self.value == value.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"@{self.value}"


class TypeVarSupply:
    """
    Hand out type vars that are guaranteed to be unique within one
    inference run.

    Notes
    -----
    - The ids are strictly increasing so two vars from the same supply
      can never be mistaken for each other.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter: Iterator[int] = count(start)

    def fresh(self, span: Span) -> TypeVar:
        """
        Make a new type var that has never been handed out before.

        Parameters
        ----------
        span: Span
            The position of the expression that needs the type var.

        Returns
        -------
        TypeVar
            The brand new type var.
        """
        return TypeVar(span, next(self._counter))
