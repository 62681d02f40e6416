from logging import INFO
from typing import List, Optional, Tuple

from ..asts import base, visitor
from ..asts.types_ import (
    ConcreteType,
    ErrorType,
    FuncType,
    NumberType,
    Type,
    TypeVarSupply,
)
from ..config import ConfigData, DEFAULT_CONFIG
from ..errors import (
    DepthLimitError,
    InferenceError,
    TypeMismatchError,
    UndefinedNameError,
)
from ..format import ASTPrinter, show_type
from ..log import logger
from ..scope import Scope
from . import utils

Result = Tuple[utils.Substitution, Type]


def infer_type(tree: base.ASTNode, config: ConfigData = DEFAULT_CONFIG) -> Type:
    """
    Find the type of an expression with no free names in it.

    Parameters
    ----------
    tree: ASTNode
        The expression whose type is wanted.
    config: ConfigData
        Options that change how the inference engine behaves.

    Raises
    ------
    InferenceError
        The type could not be inferred (only raised when
        `config.recover` is off, or the failure can't be recovered
        from).

    Returns
    -------
    Type
        The type of the expression with everything that is known about
        its type vars filled in.
    """
    return Inferer(config).run(tree)


class Inferer(visitor.BaseASTVisitor[Result]):
    """
    Infer the type of an expression one node at a time, building up a
    substitution as constraints are discovered.

    Attributes
    ----------
    config: ConfigData
        The options in effect for this inferer.
    current_scope: Scope[Type]
        The types of all the names bound around the node currently
        being visited.
    errors: List[InferenceError]
        The errors that were recovered from in the last run. It is only
        ever filled when `config.recover` is on.
    supply: TypeVarSupply
        Where all the fresh type vars for this inferer come from.

    Notes
    -----
    - Each visit method returns the substitution found while visiting
      the node along with the node's type. The type already has that
      substitution applied to it.
    - The supply of type vars is never reset, so types produced by
      different runs of the same inferer never share type vars.
    """

    def __init__(
        self,
        config: ConfigData = DEFAULT_CONFIG,
        supply: Optional[TypeVarSupply] = None,
    ) -> None:
        self.config: ConfigData = config
        self.supply: TypeVarSupply = TypeVarSupply() if supply is None else supply
        self.current_scope: Scope[Type] = Scope(None)
        self.errors: List[InferenceError] = []
        self._depth: int = 0

    def run(self, node: base.ASTNode) -> Type:
        """
        Infer the type of `node` in an empty scope.

        Parameters
        ----------
        node: base.ASTNode
            The root of the expression tree.

        Returns
        -------
        Type
            The inferred type of the whole expression.
        """
        _, type_ = self.infer(node, Scope(None))
        return type_

    def infer(self, node: base.ASTNode, scope: Scope[Type]) -> Result:
        """
        Infer the type of `node` using the name bindings in `scope`.

        Parameters
        ----------
        node: base.ASTNode
            The root of the expression tree.
        scope: Scope[Type]
            The types of the names that `node` can refer to.

        Returns
        -------
        Tuple[Substitution, Type]
            Everything learned about the type vars along the way and the
            inferred type of `node`.
        """
        self.current_scope = scope
        self.errors = []
        self._depth = 0
        substitution, type_ = self._infer(node)
        logger.debug("substitution: %r", substitution)
        if logger.isEnabledFor(INFO):
            logger.info("%s :: %s", node.visit(ASTPrinter()), show_type(type_))
        return substitution, type_

    def visit_apply(self, node: base.Apply) -> Result:
        func_sub, func_type = self._infer(node.func)
        arg_sub, arg_type = self._infer(node.arg)
        substitution = self._merge(func_sub, arg_sub)

        result_type = self.supply.fresh(node.span)
        func_type = utils.substitute(func_type, substitution)
        expected = utils.substitute(
            FuncType(node.span, arg_type, result_type), substitution
        )
        try:
            extra = utils.unify(func_type, expected)
        except TypeMismatchError as error:
            if not self.config.recover:
                raise
            self._record(error)
            return substitution, self._recovered_result(node, func_type)

        substitution = utils.compose_substitutions(substitution, extra)
        return substitution, utils.substitute(result_type, substitution)

    def visit_lambda(self, node: base.Lambda) -> Result:
        param_type = self.supply.fresh(node.span)
        outer_scope = self.current_scope
        self.current_scope = outer_scope.extend(node.param, param_type)
        substitution, body_type = self._infer(node.body)
        self.current_scope = outer_scope
        return substitution, utils.substitute(
            FuncType(node.span, param_type, body_type), substitution
        )

    def visit_let(self, node: base.Let) -> Result:
        value_sub, value_type = self._infer(node.value)
        outer_scope = self.current_scope
        self.current_scope = outer_scope.extend(node.name, value_type)
        body_sub, body_type = self._infer(node.body)
        self.current_scope = outer_scope
        substitution = self._merge(value_sub, body_sub)
        return substitution, utils.substitute(body_type, substitution)

    def visit_name(self, node: base.Name) -> Result:
        try:
            return {}, self.current_scope[node]
        except UndefinedNameError as error:
            if not self.config.recover:
                logger.error("Undefined name: %s", node.value)
                raise
            self._record(error)
            return {}, ErrorType(node.span, True)

    def visit_number(self, node: base.Number) -> Result:
        return {}, NumberType(node.span)

    def _infer(self, node: base.ASTNode) -> Result:
        if self._depth >= self.config.max_depth:
            logger.fatal("Reached the depth limit (%d)", self.config.max_depth)
            raise DepthLimitError(node, self.config.max_depth)

        self._depth += 1
        result = node.visit(self)
        self._depth -= 1
        return result

    def _merge(
        self, left: utils.Substitution, right: utils.Substitution
    ) -> utils.Substitution:
        try:
            return utils.merge_substitutions(left, right)
        except TypeMismatchError as error:
            if not self.config.recover:
                raise
            self._record(error)
            return left

    def _record(self, error: InferenceError) -> None:
        logger.warning("Recovering from %s: %s", error.name, error)
        self.errors.append(error)

    @staticmethod
    def _recovered_result(node: base.Apply, func_type: Type) -> Type:
        if isinstance(func_type, FuncType) and isinstance(
            func_type.return_type, ConcreteType
        ):
            return func_type.return_type.mark_error()
        return ErrorType(node.span, True)
