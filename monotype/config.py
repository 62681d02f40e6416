from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 128


@dataclass(eq=True, frozen=True)
class ConfigData:
    """
    All of the options that change how the inference engine behaves.

    Attributes
    ----------
    max_depth: int
        How deeply nested an expression can be before the engine gives
        up on it.
    recover: bool
        Whether to keep going after a type error by typing the broken
        sub-expression as `Error` instead of raising.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    recover: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(
                f"`max_depth` has to be a positive number, not {self.max_depth}."
            )

    def __or__(self, other):
        if isinstance(other, ConfigData):
            return ConfigData(
                max(self.max_depth, other.max_depth),
                self.recover or other.recover,
            )
        if isinstance(other, dict):
            return ConfigData(
                other.get("max_depth", self.max_depth),
                other.get("recover", self.recover),
            )
        return NotImplemented


DEFAULT_CONFIG = ConfigData()
