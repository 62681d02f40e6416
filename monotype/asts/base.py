from abc import ABC, abstractmethod
from numbers import Real
from typing import Optional, Tuple

Span = Tuple[int, int]


class ASTNode(ABC):
    """
    The base of all the nodes used in the expression tree.

    Attributes
    ----------
    span: Span
        The position in the source text that this node came from.
    """

    def __init__(self, span: Span) -> None:
        self.span: Span = span

    @abstractmethod
    def visit(self, visitor):
        """Run `visitor` on this node by selecting the correct method."""

    def __bool__(self) -> bool:
        return True


class Apply(ASTNode):
    __slots__ = ("arg", "func", "span")

    def __init__(self, span: Span, func: ASTNode, arg: ASTNode) -> None:
        super().__init__(span)
        self.func: ASTNode = func
        self.arg: ASTNode = arg

    def visit(self, visitor):
        return visitor.visit_apply(self)

    def __eq__(self, other) -> bool:
        if isinstance(other, Apply):
            return self.func == other.func and self.arg == other.arg
        return NotImplemented

    __hash__ = object.__hash__


class Lambda(ASTNode):
    __slots__ = ("body", "param", "span")

    def __init__(self, span: Span, param: str, body: ASTNode) -> None:
        super().__init__(span)
        self.param: str = param
        self.body: ASTNode = body

    def visit(self, visitor):
        return visitor.visit_lambda(self)

    def __eq__(self, other) -> bool:
        if isinstance(other, Lambda):
            return self.param == other.param and self.body == other.body
        return NotImplemented

    __hash__ = object.__hash__


class Let(ASTNode):
    """
    A non-recursive local binding. The bound value is not in scope
    inside itself and its type is not generalised.
    """

    __slots__ = ("body", "name", "span", "value")

    def __init__(self, span: Span, name: str, value: ASTNode, body: ASTNode) -> None:
        super().__init__(span)
        self.name: str = name
        self.value: ASTNode = value
        self.body: ASTNode = body

    def visit(self, visitor):
        return visitor.visit_let(self)

    def __eq__(self, other) -> bool:
        if isinstance(other, Let):
            return (
                self.name == other.name
                and self.value == other.value
                and self.body == other.body
            )
        return NotImplemented

    __hash__ = object.__hash__


class Name(ASTNode):
    __slots__ = ("span", "value")

    def __init__(self, span: Span, value: Optional[str]) -> None:
        if value is None:
            raise TypeError("`value` is supposed to be a string, not None.")

        super().__init__(span)
        self.value: str = value

    def visit(self, visitor):
        return visitor.visit_name(self)

    def __eq__(self, other):
        if isinstance(other, str):
            return self.value == other
        if isinstance(other, Name):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


class Number(ASTNode):
    __slots__ = ("span", "value")

    def __init__(self, span: Span, value: Real = 0) -> None:
        super().__init__(span)
        self.value: Real = value

    def visit(self, visitor):
        return visitor.visit_number(self)

    def __eq__(self, other) -> bool:
        if isinstance(other, Number):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)
