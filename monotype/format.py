from .asts import base, visitor
from .asts.types_ import ConcreteType, ErrorType, FuncType, NumberType, Type, TypeVar

VAR_ID_WIDTH = 4


def show_type_var(type_var: TypeVar) -> str:
    """
    Represent a type var as a short string.

    Notes
    -----
    - Only the first few hex digits of the id are kept, so the result
      is meant for a human reading a diagnostic and is not guaranteed
      to be unique.

    Parameters
    ----------
    type_var: TypeVar
        The type var to be represented.

    Returns
    -------
    str
        The string representation of the type var.
    """
    digits = format(type_var.value, f"0{VAR_ID_WIDTH}x")[:VAR_ID_WIDTH]
    return f"<{digits}>"


def show_type(type_: Type, bracket: bool = False) -> str:
    """
    Turn `type_` into a string representation.

    Parameters
    ----------
    type_: Type
        The type to turn into a string.
    bracket: bool = False
        Whether to parenthesise function type representations.

    Returns
    -------
    str
        The resulting type representation.
    """
    if isinstance(type_, TypeVar):
        return show_type_var(type_)
    if isinstance(type_, ConcreteType):
        result = _show_shape(type_)
        if type_.error:
            return f"({result})?"
        return f"({result})" if bracket and isinstance(type_, FuncType) else result
    raise TypeError(f"{type(type_)} is an invalid subtype of types.Type.")


def _show_shape(type_: ConcreteType) -> str:
    if isinstance(type_, FuncType):
        return f"{show_type(type_.arg_type, True)} -> {show_type(type_.return_type)}"
    if isinstance(type_, NumberType):
        return "Number"
    if isinstance(type_, ErrorType):
        return "Error"
    raise TypeError(f"{type(type_)} is an invalid subtype of types.ConcreteType.")


class ASTPrinter(visitor.BaseASTVisitor[str]):
    """This visitor produces a one-line string version of an expression."""

    def visit_apply(self, node: base.Apply) -> str:
        func = node.func.visit(self)
        arg = node.arg.visit(self)
        if isinstance(node.func, (base.Lambda, base.Let)):
            func = f"({func})"
        if not isinstance(node.arg, (base.Name, base.Number)):
            arg = f"({arg})"
        return f"{func} {arg}"

    def visit_lambda(self, node: base.Lambda) -> str:
        return f"\\{node.param} -> {node.body.visit(self)}"

    def visit_let(self, node: base.Let) -> str:
        return f"let {node.name} = {node.value.visit(self)} in {node.body.visit(self)}"

    def visit_name(self, node: base.Name) -> str:
        return node.value

    def visit_number(self, node: base.Number) -> str:
        return repr(node.value)
