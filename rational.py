from __future__ import annotations
import logging
import numbers
import operator
import re
from math import gcd
from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
	from interval import Interval

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


class InvalidArgument(ValueError):
	"""A Rational was requested from arguments that cannot describe one."""


class DivisionByZero(InvalidArgument, ZeroDivisionError):
	"""Zero denominator, either given directly or produced by a reciprocal."""


class FormatError(ValueError):
	"""Text that is not `<integer>` or `<integer>/<integer>`."""


def _to_int(value: object) -> int:
	# bool is an int subclass but never a sensible numerator
	if isinstance(value, bool):
		raise TypeError("expected an integer, got bool")
	try:
		return operator.index(value)
	except TypeError:
		raise TypeError(f"expected an integer, got {type(value).__name__}") from None


def _sign(n: int) -> int:
	return (n > 0) - (n < 0)


def _normalize(n: int, d: int) -> Tuple[int, int]:
	if d == 0:
		raise DivisionByZero("denominator cannot be zero")
	g = gcd(n, d)  # gcd(0, d) == |d|, so zero becomes (0, 1)
	s = _sign(n) * _sign(d)
	return s * (abs(n) // g), abs(d) // g


class Rational:
	"""Exact fraction in lowest terms with a positive denominator.

	Instances are immutable. Every constructor goes through the same
	normalization, so two equal values always hold the same pair.
	"""
	__slots__ = ("_num", "_den")

	def __init__(self, num: int, den: int = 1) -> None:
		n, d = _normalize(_to_int(num), _to_int(den))
		object.__setattr__(self, "_num", n)
		object.__setattr__(self, "_den", d)

	@classmethod
	def create(cls, num: int, den: int = 1) -> Rational:
		return cls(num, den)

	@classmethod
	def from_string(cls, s: str) -> Rational:
		return parse(s)

	def __setattr__(self, name: str, value: object) -> None:
		raise AttributeError(f"{type(self).__name__} is immutable")

	def __delattr__(self, name: str) -> None:
		raise AttributeError(f"{type(self).__name__} is immutable")

	def __reduce__(self):
		return (type(self), (self._num, self._den))

	def numerator(self) -> int:
		return self._num

	def denominator(self) -> int:
		return self._den

	def is_zero(self) -> bool:
		return self._num == 0

	def is_int(self) -> bool:
		return self._den == 1

	def to_int(self) -> int:
		if self._den != 1:
			raise ValueError(f"{self.to_string()} is not an integer")
		return self._num

	def range_to(self, other: Rational) -> Interval:
		from interval import Interval
		return Interval.closed(self, other)

	def __add__(self, other: Rational | int) -> Rational:
		rhs = _coerce(other)
		if rhs is None:
			return NotImplemented
		return add(self, rhs)

	def __radd__(self, other: int) -> Rational:
		lhs = _coerce(other)
		if lhs is None:
			return NotImplemented
		return add(lhs, self)

	def __sub__(self, other: Rational | int) -> Rational:
		rhs = _coerce(other)
		if rhs is None:
			return NotImplemented
		return subtract(self, rhs)

	def __rsub__(self, other: int) -> Rational:
		lhs = _coerce(other)
		if lhs is None:
			return NotImplemented
		return subtract(lhs, self)

	def __mul__(self, other: Rational | int) -> Rational:
		rhs = _coerce(other)
		if rhs is None:
			return NotImplemented
		return multiply(self, rhs)

	def __rmul__(self, other: int) -> Rational:
		lhs = _coerce(other)
		if lhs is None:
			return NotImplemented
		return multiply(lhs, self)

	def __truediv__(self, other: Rational | int) -> Rational:
		rhs = _coerce(other)
		if rhs is None:
			return NotImplemented
		return divide(self, rhs)

	def __rtruediv__(self, other: int) -> Rational:
		lhs = _coerce(other)
		if lhs is None:
			return NotImplemented
		return divide(lhs, self)

	def __neg__(self) -> Rational:
		return negate(self)

	def __pos__(self) -> Rational:
		return self

	def __abs__(self) -> Rational:
		return absolute(self)

	def __pow__(self, exp: int) -> Rational:
		if isinstance(exp, bool) or not isinstance(exp, numbers.Integral):
			return NotImplemented
		return power(self, exp)

	def __eq__(self, other: object) -> bool:
		if self is other:
			return True
		if not isinstance(other, Rational):
			return False
		return self._num == other._num and self._den == other._den

	def __hash__(self) -> int:
		return hash((self._num, self._den))

	def __lt__(self, other: Rational) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return compare(self, other) < 0

	def __le__(self, other: Rational) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return compare(self, other) <= 0

	def __gt__(self, other: Rational) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return compare(self, other) > 0

	def __ge__(self, other: Rational) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return compare(self, other) >= 0

	def to_string(self) -> str:
		return to_string(self)

	def __str__(self) -> str:
		return self.to_string()

	def __repr__(self) -> str:
		return f"Rational({self._num}, {self._den})"


ZERO = Rational(0)
ONE = Rational(1)


def _coerce(value: object) -> Rational | None:
	if isinstance(value, Rational):
		return value
	if isinstance(value, numbers.Integral) and not isinstance(value, bool):
		return Rational(value)
	return None


def create(n: int, d: int) -> Rational:
	return Rational(n, d)


def rational_of(n: int, d: int = 1) -> Rational:
	"""Build a Rational from two integers of any size."""
	return create(n, d)


def add(a: Rational, b: Rational) -> Rational:
	base = a._den * b._den
	return create(a._num * (base // a._den) + b._num * (base // b._den), base)


def negate(a: Rational) -> Rational:
	return create(-a._num, a._den)


def subtract(a: Rational, b: Rational) -> Rational:
	return add(a, negate(b))


def multiply(a: Rational, b: Rational) -> Rational:
	return create(a._num * b._num, a._den * b._den)


def reciprocal(a: Rational) -> Rational:
	return create(a._den, a._num)


def divide(a: Rational, b: Rational) -> Rational:
	return multiply(a, reciprocal(b))


def absolute(a: Rational) -> Rational:
	return create(abs(a._num), a._den)


def power(a: Rational, exp: int) -> Rational:
	exp = _to_int(exp)
	base = reciprocal(a) if exp < 0 else a
	# powers of coprime integers stay coprime
	return create(base._num ** abs(exp), base._den ** abs(exp))


def compare(a: Rational, b: Rational) -> int:
	"""Return -1, 0 or 1 as `a` is less than, equal to or greater than `b`."""
	return _sign(subtract(a, b)._num)


def to_string(r: Rational) -> str:
	if r._den == 1:
		return str(r._num)
	return f"{r._num}/{r._den}"


def _parse_int(text: str, source: str) -> int:
	if not _INTEGER.fullmatch(text):
		logger.debug("rejecting rational %r: bad integer part %r", source, text)
		raise FormatError(f"unable to parse rational: {source!r}")
	return int(text)


def parse(s: str) -> Rational:
	"""Parse `n` or `n/d` into a normalized Rational.

	`"117/1098"` is accepted and reduced to 13/122. A zero denominator
	raises DivisionByZero; anything outside the grammar raises FormatError.
	"""
	if not isinstance(s, str):
		raise TypeError(f"expected str, got {type(s).__name__}")
	parts: List[str] = s.split("/")
	if len(parts) == 1:
		return create(_parse_int(parts[0], s), 1)
	if len(parts) == 2:
		return create(_parse_int(parts[0], s), _parse_int(parts[1], s))
	logger.debug("rejecting rational %r: %d '/'-separated parts", s, len(parts))
	raise FormatError(f"unable to parse rational: {s!r}")
