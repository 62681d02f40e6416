from typing import Dict, Generic, Iterator, Mapping, Optional, Tuple, TypeVar, Union

from .asts.base import Name
from .errors import UndefinedNameError

ValType = TypeVar("ValType")
NameLike = Union[str, Name]


def _to_name(name: NameLike) -> Name:
    return Name((0, 0), name) if isinstance(name, str) else name


# pylint: disable=R0903
class Scope(Generic[ValType]):
    """
    A mapping of the names bound at some point in an expression to
    their values.

    Notes
    -----
    - Scopes are never changed after they are made. Binding a new name
      makes a new child scope, so sibling sub-expressions can never
      see each other's bindings.

    Attributes
    ----------
    _data: Dict[str, ValType]
        The names bound by this scope alone and their values.
    _parent: Optional[Scope]
        A scope that wraps around `self` and can be requested for
        names that were bound before `self` was made.
    """

    __slots__ = ("_data", "_parent")

    def __init__(
        self, parent: Optional["Scope"], data: Optional[Mapping[str, ValType]] = None
    ) -> None:
        self._data: Dict[str, ValType] = dict(data or {})
        self._parent: Optional[Scope] = parent

    @classmethod
    def from_dict(cls, data: Mapping[str, ValType]) -> "Scope[ValType]":
        """Create a top-level scope using the bindings in `data`."""
        return cls(None, data)

    def extend(self, name: NameLike, value: ValType) -> "Scope[ValType]":
        """
        Bind `name` to `value` in a new scope nested inside this one.

        Parameters
        ----------
        name: NameLike
            The name being bound. It shadows any outer binding.
        value: ValType
            The value bound to `name`.

        Returns
        -------
        Scope[ValType]
            The new child scope. `self` is left untouched.
        """
        return Scope(self, {_to_name(name).value: value})

    def depth(self, name: NameLike) -> int:
        """
        Find how many scopes up `name` was bound.

        Returns
        -------
        int
            `0` if `name` is bound here, `-1` if it is not bound at all.
        """
        key = _to_name(name).value
        if key in self._data:
            return 0
        if self._parent is None:
            return -1
        parent_depth = self._parent.depth(key)
        return -1 if parent_depth == -1 else parent_depth + 1

    def __bool__(self) -> bool:
        return bool(self._data) or bool(self._parent)

    def __contains__(self, name: NameLike) -> bool:
        return self.depth(name) != -1

    def __iter__(self) -> Iterator[Tuple[str, ValType]]:
        for key, value in self._data.items():
            yield (key, value)

    def __getitem__(self, name: NameLike) -> ValType:
        name = _to_name(name)
        if name.value in self._data:
            return self._data[name.value]
        if self._parent is not None:
            return self._parent[name]
        raise UndefinedNameError(name)
