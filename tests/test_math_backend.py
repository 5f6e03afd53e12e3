import math

import pytest

import pitchy.math_backend


def test_default_backend_is_std () -> None:

	"""The math module backend is active unless something switched it."""

	assert pitchy.math_backend.DEFAULT_BACKEND == "std"
	assert pitchy.math_backend.get_backend() in pitchy.math_backend.BACKENDS


def test_unknown_backend_rejected () -> None:

	"""Selecting a backend that does not exist should raise and keep the current one."""

	before = pitchy.math_backend.get_backend()

	with pytest.raises(ValueError, match="Unknown math backend"):
		pitchy.math_backend.set_backend("fortran")

	assert pitchy.math_backend.get_backend() == before


def test_set_backend_switches (math_backend: str) -> None:

	assert pitchy.math_backend.get_backend() == math_backend


def test_pow2_exact_integers (math_backend: str) -> None:

	"""Integer exponents are exact powers of two on every backend."""

	assert pitchy.math_backend.pow2(0.0) == 1.0
	assert pitchy.math_backend.pow2(1.0) == 2.0
	assert pitchy.math_backend.pow2(-1.0) == 0.5
	assert pitchy.math_backend.pow2(10.0) == 1024.0
	assert pitchy.math_backend.pow2(-3.0) == 0.125


def test_pow2_fractional (math_backend: str) -> None:

	assert pitchy.math_backend.pow2(0.5) == pytest.approx(math.sqrt(2.0), rel=1e-14)
	assert pitchy.math_backend.pow2(1.0 / 12.0) == pytest.approx(1.0594630943592953, rel=1e-14)
	assert pitchy.math_backend.pow2(-5.75) == pytest.approx(2.0 ** -5.75, rel=1e-14)


def test_pow2_overflow_and_underflow (math_backend: str) -> None:

	"""Huge exponents saturate instead of raising."""

	assert pitchy.math_backend.pow2(5000.0) == float("inf")
	assert pitchy.math_backend.pow2(-5000.0) == 0.0


def test_log2_values (math_backend: str) -> None:

	assert pitchy.math_backend.log2(1.0) == 0.0
	assert pitchy.math_backend.log2(8.0) == 3.0
	assert pitchy.math_backend.log2(0.25) == -2.0
	assert pitchy.math_backend.log2(10.0) == pytest.approx(3.321928094887362, rel=1e-14)
	assert pitchy.math_backend.log2(12543.853951415975 / 440.0) == pytest.approx(58.0 / 12.0, rel=1e-14)


def test_log2_edge_cases (math_backend: str) -> None:

	"""Zero gives -inf and negatives give nan, as IEEE log2 does."""

	assert pitchy.math_backend.log2(0.0) == float("-inf")
	assert math.isnan(pitchy.math_backend.log2(-1.0))
	assert pitchy.math_backend.log2(float("inf")) == float("inf")


def test_round_half_away_from_zero (math_backend: str) -> None:

	"""Ties round away from zero, unlike the built-in round()."""

	assert pitchy.math_backend.round_half_away(2.5) == 3.0
	assert pitchy.math_backend.round_half_away(-2.5) == -3.0
	assert pitchy.math_backend.round_half_away(0.5) == 1.0
	assert pitchy.math_backend.round_half_away(68.4) == 68.0
	assert pitchy.math_backend.round_half_away(68.6) == 69.0
	assert pitchy.math_backend.round_half_away(-0.4) == 0.0

	# The largest double below 0.5 must not round up.
	assert pitchy.math_backend.round_half_away(0.49999999999999994) == 0.0


def test_round_non_finite (math_backend: str) -> None:

	assert pitchy.math_backend.round_half_away(float("inf")) == float("inf")
	assert pitchy.math_backend.round_half_away(float("-inf")) == float("-inf")
	assert math.isnan(pitchy.math_backend.round_half_away(float("nan")))


def test_backends_agree_on_semitone_grid () -> None:

	"""Both backends give the same frequencies to within a few ulps."""

	std = pitchy.math_backend.BACKENDS["std"]
	portable = pitchy.math_backend.BACKENDS["portable"]

	for semitone in range(-69, 59):
		exponent = semitone / 12.0
		assert portable.pow2(exponent) == pytest.approx(std.pow2(exponent), rel=1e-14)


def test_backend_from_environment (monkeypatch: pytest.MonkeyPatch) -> None:

	monkeypatch.setenv(pitchy.math_backend.ENV_VAR, "Portable")
	pitchy.math_backend._select_from_environment()

	assert pitchy.math_backend.get_backend() == "portable"


def test_bad_environment_value_is_ignored (monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:

	"""An unknown name in the environment logs a warning instead of failing the import."""

	pitchy.math_backend.set_backend("std")
	monkeypatch.setenv(pitchy.math_backend.ENV_VAR, "gpu")

	with caplog.at_level("WARNING", logger="pitchy.math_backend"):
		pitchy.math_backend._select_from_environment()

	assert pitchy.math_backend.get_backend() == "std"
	assert "Ignoring" in caplog.text
