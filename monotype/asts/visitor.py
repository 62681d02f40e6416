# pylint: disable=C0116
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from . import base

_ReturnType = TypeVar("_ReturnType", covariant=True)


class BaseASTVisitor(Generic[_ReturnType], ABC):
    """
    The base class for the visitors that operate on the expression
    nodes kept in `asts.base`.
    """

    def run(self, node: base.ASTNode) -> _ReturnType:
        """
        Run this visitor on the entire tree as if `node` is the root of
        the entire AST.

        Parameters
        ----------
        node: base.ASTNode
            The (assumed) root node for the entire AST.
        """
        return node.visit(self)

    @abstractmethod
    def visit_apply(self, node: base.Apply) -> _ReturnType:
        ...

    @abstractmethod
    def visit_lambda(self, node: base.Lambda) -> _ReturnType:
        ...

    @abstractmethod
    def visit_let(self, node: base.Let) -> _ReturnType:
        ...

    @abstractmethod
    def visit_name(self, node: base.Name) -> _ReturnType:
        ...

    @abstractmethod
    def visit_number(self, node: base.Number) -> _ReturnType:
        ...
