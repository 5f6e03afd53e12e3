import typing

import pytest

import pitchy.math_backend


@pytest.fixture(autouse=True)
def restore_math_backend () -> typing.Iterator[None]:

	"""Put the math backend back after tests that switch it."""

	original = pitchy.math_backend.get_backend()
	yield
	pitchy.math_backend.set_backend(original)


@pytest.fixture(params=sorted(pitchy.math_backend.BACKENDS))
def math_backend (request: pytest.FixtureRequest) -> str:

	"""Run the test once per math backend."""

	pitchy.math_backend.set_backend(request.param)
	return request.param
