"""Floating-point helpers behind every pitch conversion.

Three operations are needed: ``pow2``, ``log2`` and ``round_half_away``. They
are provided by one of two interchangeable backends:

    "std"       Delegates to the ``math`` module (default).
    "portable"  Pure float arithmetic (range reduction plus short series),
                for sandboxed or stripped-down interpreters.

Both backends agree on every MIDI number, name and range check; at most the
last bits of a frequency differ.

    import pitchy.math_backend

    pitchy.math_backend.set_backend("portable")
    pitchy.math_backend.pow2(0.5)   # 1.4142135623730951

The backend can also be chosen before import through the
``PITCHY_MATH_BACKEND`` environment variable.

Rounding is half away from zero (``2.5 -> 3.0``, ``-2.5 -> -3.0``), not the
banker's rounding of Python's built-in ``round()``.
"""

import dataclasses
import logging
import math
import os
import typing


logger = logging.getLogger(__name__)

ENV_VAR = "PITCHY_MATH_BACKEND"
DEFAULT_BACKEND = "std"

_INF = float("inf")
_LN2 = 0.6931471805599453
_SERIES_EPSILON = 1e-17

# Beyond these exponents the result over/underflows a double.
_MAX_EXPONENT = 1100


@dataclasses.dataclass(frozen=True)
class MathBackend:

	"""
	A named set of the three float operations.
	"""

	name: str
	pow2: typing.Callable[[float], float]
	log2: typing.Callable[[float], float]
	round: typing.Callable[[float], float]


# ─── std backend ──────────────────────────────────────────────────────────────


def _std_pow2 (exponent: float) -> float:

	try:
		return math.pow(2.0, exponent)
	except OverflowError:
		return _INF


def _std_log2 (x: float) -> float:

	# math.log2 raises where IEEE log2 returns -inf / nan.
	if x == 0.0:
		return -_INF

	if x < 0.0:
		return math.nan

	return math.log2(x)


def _std_round (x: float) -> float:

	if not math.isfinite(x):
		return x

	truncated = float(math.trunc(x))
	remainder = x - truncated

	if remainder >= 0.5:
		return truncated + 1.0

	if remainder <= -0.5:
		return truncated - 1.0

	return truncated


# ─── portable backend ─────────────────────────────────────────────────────────


def _is_nan (x: float) -> bool:
	return x != x


def _scale_by_power_of_two (value: float, exponent: int) -> float:

	"""Multiply by 2 ** exponent one exact step at a time."""

	while exponent > 0:
		value *= 2.0
		exponent -= 1

	while exponent < 0:
		value *= 0.5
		exponent += 1

	return value


def _floor_int (x: float) -> int:

	n = int(x)

	if n > x:
		n -= 1

	return n


def _exp_series (x: float) -> float:

	"""Taylor series of e ** x, accurate for |x| < 1."""

	total = 1.0
	term = 1.0
	k = 1

	while True:
		term *= x / k
		if abs(term) < _SERIES_EPSILON * abs(total):
			break
		total += term
		k += 1

	return total


def _portable_pow2 (exponent: float) -> float:

	if _is_nan(exponent):
		return exponent

	if exponent > _MAX_EXPONENT:
		return _INF

	if exponent < -_MAX_EXPONENT:
		return 0.0

	whole = _floor_int(exponent)
	fraction = exponent - whole

	return _scale_by_power_of_two(_exp_series(fraction * _LN2), whole)


def _portable_log2 (x: float) -> float:

	if _is_nan(x) or x < 0.0:
		return float("nan")

	if x == 0.0:
		return -_INF

	if x == _INF:
		return _INF

	# Reduce x to m * 2 ** e with m in [1/sqrt(2), sqrt(2)).
	exponent = 0
	mantissa = x

	while mantissa >= 2.0:
		mantissa *= 0.5
		exponent += 1

	while mantissa < 1.0:
		mantissa *= 2.0
		exponent -= 1

	if mantissa > 1.4142135623730951:
		mantissa *= 0.5
		exponent += 1

	# ln(m) = 2 * atanh(s), s = (m - 1) / (m + 1)
	s = (mantissa - 1.0) / (mantissa + 1.0)
	s_squared = s * s
	term = s
	total = 0.0
	k = 1

	while True:
		contribution = term / k
		total += contribution
		if abs(contribution) < _SERIES_EPSILON:
			break
		term *= s_squared
		k += 2

	return exponent + (2.0 * total) / _LN2


def _portable_round (x: float) -> float:

	if _is_nan(x) or x == _INF or x == -_INF:
		return x

	# Doubles this large have no fractional part.
	if abs(x) >= 4503599627370496.0:
		return x

	truncated = float(int(x))
	remainder = x - truncated

	if remainder >= 0.5:
		return truncated + 1.0

	if remainder <= -0.5:
		return truncated - 1.0

	return truncated


BACKENDS: typing.Dict[str, MathBackend] = {
	"std": MathBackend(name="std", pow2=_std_pow2, log2=_std_log2, round=_std_round),
	"portable": MathBackend(name="portable", pow2=_portable_pow2, log2=_portable_log2, round=_portable_round),
}

_active: MathBackend = BACKENDS[DEFAULT_BACKEND]


def set_backend (name: str) -> None:

	"""
	Select the process-wide math backend.

	Parameters:
		name: ``"std"`` or ``"portable"``.

	Raises:
		ValueError: If the name is not a known backend.
	"""

	global _active

	if name not in BACKENDS:
		raise ValueError(f"Unknown math backend '{name}'. Available: {sorted(BACKENDS)}")

	if name != _active.name:
		logger.debug(f"Math backend switched from {_active.name} to {name}")

	_active = BACKENDS[name]


def get_backend () -> str:

	"""Return the name of the active backend."""

	return _active.name


def pow2 (exponent: float) -> float:
	"""Return 2 ** exponent."""
	return _active.pow2(exponent)


def log2 (x: float) -> float:
	"""Return the base-2 logarithm (-inf for 0, nan for negative input)."""
	return _active.log2(x)


def round_half_away (x: float) -> float:
	"""Return the nearest integer as a float, ties away from zero."""
	return _active.round(x)


def _select_from_environment () -> None:

	name = os.environ.get(ENV_VAR)

	if not name:
		return

	try:
		set_backend(name.strip().lower())
	except ValueError:
		logger.warning(f"Ignoring {ENV_VAR}={name!r}; using the {_active.name} backend")


_select_from_environment()
