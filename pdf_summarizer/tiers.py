from enum import Enum


class LengthTier(str, Enum):
    """
    Summary length presets. Each maps to a (max_length, min_length) pair
    passed to the model.
    """

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @property
    def max_length(self) -> int:
        return _MAX_LENGTHS[self]

    @property
    def min_length(self) -> int:
        # floor(0.6 * max_length) without float rounding
        return self.max_length * 6 // 10

    @classmethod
    def parse(cls, value: str) -> "LengthTier":
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(t.value for t in cls)
            raise ValueError(f"Invalid length '{value}'. Choose one of: {choices}.") from None


_MAX_LENGTHS = {
    LengthTier.SHORT: 150,
    LengthTier.MEDIUM: 250,
    LengthTier.LONG: 400,
}
