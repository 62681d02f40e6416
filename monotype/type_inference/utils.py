from logging import DEBUG
from typing import Dict, Mapping

from ..asts.types_ import ErrorType, FuncType, NumberType, Type, TypeVar
from ..errors import CircularTypeError, TypeMismatchError
from ..format import show_type
from ..log import logger

Substitution = Mapping[TypeVar, Type]


def unify(left: Type, right: Type) -> Substitution:
    """
    Build a substitution that makes `left` and `right` equal or fail if
    it's impossible.

    Parameters
    ----------
    left: Type
        One side of the type equation. If both sides are type vars,
        this one becomes the key in the result.
    right: Type
        The other side of the type equation.

    Raises
    ------
    TypeMismatchError
        The error thrown when `left` and `right` can't be unified.
    CircularTypeError
        The error thrown when a type var would have to contain itself.

    Returns
    -------
    Substitution
        The substitution that unifies the two types.
    """
    result = _unify(left, right)
    if logger.isEnabledFor(DEBUG):
        logger.debug("(%s) ~ (%s) => %r", show_type(left), show_type(right), result)
    return result


def _unify(left: Type, right: Type) -> Substitution:
    if isinstance(left, ErrorType):
        return {right: left} if isinstance(right, TypeVar) else {}
    if isinstance(right, ErrorType):
        return unify(right, left)
    if isinstance(left, TypeVar):
        if left == right:
            return {}
        if left in right:
            logger.fatal(
                "Circularity detected in (%s) ~ (%s)", show_type(left), show_type(right)
            )
            raise CircularTypeError(left, right)
        return {left: right}
    if isinstance(right, TypeVar):
        return unify(right, left)
    if isinstance(left, NumberType) and isinstance(right, NumberType):
        return {}
    if isinstance(left, FuncType) and isinstance(right, FuncType):
        arg_sub = unify(left.arg_type, right.arg_type)
        return_sub = unify(
            substitute(left.return_type, arg_sub),
            substitute(right.return_type, arg_sub),
        )
        return compose_substitutions(arg_sub, return_sub)
    logger.error("Cannot unify: (%s) ~ (%s)", show_type(left), show_type(right))
    raise TypeMismatchError(left, right)


def compose_substitutions(first: Substitution, second: Substitution) -> Substitution:
    """
    Combine two substitutions so that the result does the same job as
    applying `first` and then `second`.

    Notes
    -----
    - `second` is applied to all the values in `first` before they are
      combined, and `second` wins if both have the same key. As long as
      both arguments are idempotent, the result is too.

    Parameters
    ----------
    first: Substitution
        The substitution that was found earlier.
    second: Substitution
        The substitution found later, whose vars may still appear in
        the values of `first`.

    Returns
    -------
    Substitution
        The combined substitution.
    """
    if not second:
        return first
    result: Dict[TypeVar, Type] = {
        var: substitute(value, second) for var, value in first.items()
    }
    result.update(second)
    return result


def merge_substitutions(left: Substitution, right: Substitution) -> Substitution:
    """
    Combine two substitutions that were found independently of each
    other into one bigger one without losing any data.

    Notes
    -----
    - This function can't be implemented using `dict.update` because
      that method would silently drop one of the values when both
      substitutions have the same key. Here those values are unified
      instead.

    Parameters
    ----------
    left: Substitution
        One of the substitutions to be merged.
    right: Substitution
        The other substitution to be merged. Its bindings are
        resolved against `left` first.

    Raises
    ------
    TypeMismatchError
        When both substitutions have the same key with incompatible
        values.

    Returns
    -------
    Substitution
        The substitution that contains both left and right plus any
        other replacements needed to make duplicate keys agree.
    """
    if not (left and right):
        return left or right

    merged: Substitution = left
    for var, value in right.items():
        value = substitute(value, merged)
        known = merged.get(var)
        extra = unify(var, value) if known is None else unify(known, value)
        merged = compose_substitutions(merged, extra)
    logger.debug("%r <> %r => %r", left, right, merged)
    return merged


def substitute(type_: Type, substitution: Substitution) -> Type:
    """
    Replace the type vars in `type_` with the types in `substitution`.

    Notes
    -----
    - Each var is replaced only once, the type it is replaced with is
      not itself substituted. Every substitution made in this package
      is idempotent so a single pass is always enough.

    Parameters
    ----------
    type_: Type
        The type containing type vars to replace.
    substitution: Substitution
        The mapping used to replace the type vars.

    Returns
    -------
    Type
        A new type with the known type vars replaced.
    """
    if isinstance(type_, TypeVar):
        return substitution.get(type_, type_)
    if isinstance(type_, FuncType):
        return FuncType(
            type_.span,
            substitute(type_.arg_type, substitution),
            substitute(type_.return_type, substitution),
            type_.error,
        )
    if isinstance(type_, (ErrorType, NumberType)):
        return type_
    raise TypeError(f"{type_} is an invalid subtype of Type.")
