from typing import Optional

from rational import Rational, compare

Bound = Optional[Rational]


def _check_bound(value: object) -> None:
    if value is not None and not isinstance(value, Rational):
        raise TypeError(f"interval bound must be Rational or None, got {type(value).__name__}")


class Interval:
    """Range of rationals; a `None` end is unbounded."""

    a: Bound
    b: Bound
    left_open: bool
    right_open: bool

    @staticmethod
    def empty():
        return Interval(Rational(0), Rational(0), True, True)

    @staticmethod
    def point(p: Rational):
        return Interval(p, p, False, False)

    @staticmethod
    def open(l: Bound, r: Bound):
        return Interval(l, r, True, True)

    @staticmethod
    def closed(l: Bound, r: Bound):
        return Interval(l, r, False, False)

    @staticmethod
    def left_open(l: Bound, r: Bound):
        return Interval(l, r, True, False)

    @staticmethod
    def right_open(l: Bound, r: Bound):
        return Interval(l, r, False, True)

    @staticmethod
    def unbounded():
        return Interval(None, None, True, True)

    def __init__(
        self,
        l: Bound,
        r: Bound,
        lo: bool = False,
        ro: bool = False,
    ):
        _check_bound(l)
        _check_bound(r)
        object.__setattr__(self, "a", l)
        object.__setattr__(self, "b", r)
        # an infinite end is never included
        object.__setattr__(self, "left_open", lo or l is None)
        object.__setattr__(self, "right_open", ro or r is None)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Interval is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Interval is immutable")

    def left(self) -> Bound:
        return self.a

    def right(self) -> Bound:
        return self.b

    def contains(self, x: Rational) -> bool:
        if not isinstance(x, Rational):
            raise TypeError(f"expected Rational, got {type(x).__name__}")
        if self.a is not None:
            c = compare(x, self.a)
            if c < 0 or (c == 0 and self.left_open):
                return False
        if self.b is not None:
            c = compare(x, self.b)
            if c > 0 or (c == 0 and self.right_open):
                return False
        return True

    def __contains__(self, x: Rational) -> bool:
        return self.contains(x)

    def is_empty(self):
        if self.a is None or self.b is None:
            return False
        c = compare(self.a, self.b)
        return c > 0 or (c == 0 and (self.left_open or self.right_open))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return False
        return (self.a, self.b, self.left_open, self.right_open) == (
            other.a,
            other.b,
            other.left_open,
            other.right_open,
        )

    def __hash__(self) -> int:
        return hash((self.a, self.b, self.left_open, self.right_open))

    def __repr__(self):
        return f"Interval({self.a!r}, {self.b!r}, {self.left_open}, {self.right_open})"

    def __str__(self):
        s = "(" if self.left_open else "["

        if self.a is None:
            s += "-∞"
        else:
            s += str(self.a)
        s += ", "
        if self.b is None:
            s += "∞"
        else:
            s += str(self.b)

        s += ")" if self.right_open else "]"

        return s
