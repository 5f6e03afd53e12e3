import argparse
import logging
import os
import sys
import typing

import yaml

import pitchy.errors
import pitchy.math_backend
import pitchy.pitch


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "pitchy.yaml"


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.

	Raises:
		ValueError: If the file is not valid YAML or its top level is not a mapping.
	"""

	if not os.path.exists(config_path):
		logger.debug(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		try:
			config = yaml.safe_load(f)
		except yaml.YAMLError as e:
			raise ValueError(f"Invalid config file {config_path}: {e}") from None

	if config is None:
		return {}

	if not isinstance(config, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")

	return config


def config_section (config: dict, key: str) -> dict:

	"""
	Return one section of the config, or an empty dict when it is absent.
	"""

	section = config.get(key) or {}

	if not isinstance(section, dict):
		raise ValueError(f"Config section '{key}' must be a mapping, got {type(section).__name__}")

	return section


def log_level (name: typing.Union[str, int]) -> int:

	"""
	Resolve a logging level name such as ``"INFO"`` to its numeric value.

	Raises:
		ValueError: If the level is not one ``logging`` knows.
	"""

	if isinstance(name, int):
		return name

	level = logging.getLevelName(str(name).upper())

	if not isinstance(level, int):
		raise ValueError(f"Unknown logging level: {name!r}")

	return level


def build_parser () -> argparse.ArgumentParser:

	"""
	Create the command line parser.
	"""

	parser = argparse.ArgumentParser(prog="pitchy", description="Convert between note names, MIDI numbers and frequencies")
	parser.add_argument("names", nargs="*", help="Note names, e.g. A4 C#-1 Bb3")
	parser.add_argument("--midi", type=int, action="append", default=[], help="MIDI note number (repeatable)")
	parser.add_argument("--freq", type=float, action="append", default=[], help="Frequency in Hz (repeatable)")
	parser.add_argument("--transpose", type=float, default=0.0, help="Semitones to transpose by before printing")
	parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help=f"YAML config file (default: {DEFAULT_CONFIG_PATH})")
	parser.add_argument("--backend", choices=sorted(pitchy.math_backend.BACKENDS), help="Math backend (overrides config)")

	return parser


def describe (pitch: pitchy.pitch.Pitch) -> str:

	"""
	Format one pitch as ``name  midi  frequency``.
	"""

	return f"{pitch.name():<5} midi={pitch.midi_number():<3} {pitch.frequency:.3f} Hz"


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Entry point for ``python -m pitchy``. Returns the process exit code.
	"""

	parser = build_parser()
	args = parser.parse_args(argv)

	try:
		config = load_config(args.config)

		level = log_level(config_section(config, 'logging').get('level', 'WARNING'))
		logging.basicConfig(level=level)

		backend = args.backend or config_section(config, 'math').get('backend')

		if backend:
			pitchy.math_backend.set_backend(backend)

	except ValueError as e:
		print(e, file=sys.stderr)
		return 1

	if not (args.names or args.midi or args.freq):
		parser.print_usage(sys.stderr)
		return 1

	sources: typing.List[typing.Tuple[str, typing.Callable[[], pitchy.pitch.Pitch]]] = []
	sources.extend((name, lambda name=name: pitchy.pitch.Pitch.parse(name)) for name in args.names)
	sources.extend((f"midi {midi}", lambda midi=midi: pitchy.pitch.Pitch.from_midi(midi)) for midi in args.midi)
	sources.extend((f"{freq} Hz", lambda freq=freq: pitchy.pitch.Pitch(freq)) for freq in args.freq)

	status = 0

	for label, make_pitch in sources:

		try:
			pitch = make_pitch().transpose(args.transpose)
			print(describe(pitch))
		except pitchy.errors.PitchyError as e:
			logger.info(f"Could not convert {label}: {e}")
			print(f"{label}: {e}", file=sys.stderr)
			status = 1

	return status


if __name__ == "__main__":
	sys.exit(main())
