"""Frequency-based pitch and the frequency ↔ MIDI ↔ name conversions.

``Pitch`` wraps a raw frequency in Hz with no notational context. It converts
to and from MIDI note numbers (A4 = 69 = 440 Hz, 12-TET), transposes by any
number of semitones, and parses note names such as ``"C#4"`` or ``"Db-1"``.
For spelled notes (letter, accidental, octave) see ``pitchy.note.Note``.

    import pitchy

    a4 = pitchy.Pitch.parse("A4")
    a4.frequency           # 440.0
    a4.midi_number()       # 69
    a4.transpose(3).name() # "C5"

Strict conversions (``midi_number``, ``from_midi``, ``parse``) raise a
``PitchyError``. The cheap queries (``octave``, ``pitch_class``,
``letter_name``) return ``None`` when the frequency has no MIDI number.

The module-level functions (``frequency_from_midi``, ``parse_name``, ...)
are thin wrappers for callers that prefer plain floats and ints.
"""

import dataclasses
import logging
import re
import typing

import pitchy.errors
import pitchy.math_backend
import pitchy.note
import pitchy.symbols


logger = logging.getLogger(__name__)

A4_FREQUENCY = 440.0
A4_MIDI = 69
SEMITONES_PER_OCTAVE = 12

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 4

_OCTAVE_CHARS = "0123456789-"
_OCTAVE_PATTERN = re.compile(r"-?[0-9]+")

# Octave text is read as a signed 8-bit value and combined in 16 bits.
_OCTAVE_MIN, _OCTAVE_MAX = -128, 127
_WIDE_MIN, _WIDE_MAX = -32768, 32767


def _checked (value: int) -> int:

	if not _WIDE_MIN <= value <= _WIDE_MAX:
		raise pitchy.errors.MidiOverflow()

	return value


def _is_finite (x: float) -> bool:

	"""False for nan and the infinities."""

	return x == x and x not in (float("inf"), float("-inf"))


def midi_from_octave (octave: int, semitone: int) -> int:

	"""
	Combine an octave and a semitone offset into an (unchecked) MIDI number.

	``semitone`` may fall outside 0-11 (``B#`` is 12, ``Cb`` is -1). Each step
	is checked against a signed 16-bit range so that arbitrary octave input is
	reported as ``MidiOverflow`` rather than producing a wrapped value.

	Raises:
		MidiOverflow: If any intermediate value leaves the 16-bit range.
	"""

	value = _checked(_checked(octave) + 1)
	value = _checked(value * SEMITONES_PER_OCTAVE)

	return _checked(value + semitone)


def check_midi_range (midi: int) -> int:

	"""Return ``midi`` unchanged, or raise ``OutOfMidiRange`` outside 0-127."""

	if not pitchy.errors.MIDI_MIN <= midi <= pitchy.errors.MIDI_MAX:
		raise pitchy.errors.OutOfMidiRange.clamped(midi)

	return midi


def split_name (text: str) -> typing.Tuple[str, int]:

	"""
	Split a note name into its note part and its octave.

	The note part is everything before the first ASCII digit or ``-``.
	Surrounding whitespace is ignored and the remaining text must be 2-4
	characters long. A name with no octave at all (``"C"``) is reported as
	an octave problem; letters after the octave digits (``"C4x"``) as a
	name problem.

	Returns:
		``(note_part, octave)``, e.g. ``("C#", -1)`` for ``"C#-1"``.

	Raises:
		InvalidName: If the length is outside 2-4 or text trails the octave.
		InvalidOctave: If there is no octave or it is not a signed 8-bit integer.
	"""

	stripped = text.strip()
	length_error = pitchy.errors.InvalidName(f"Note name must be {MIN_NAME_LENGTH}-{MAX_NAME_LENGTH} characters: {text!r}")

	if not stripped or len(stripped) > MAX_NAME_LENGTH:
		raise length_error

	split_index = next(
		(i for i, char in enumerate(stripped) if char in _OCTAVE_CHARS),
		None
	)

	if split_index is None:
		raise pitchy.errors.InvalidOctave(f"No octave in note name: {text!r}")

	if len(stripped) < MIN_NAME_LENGTH:
		raise length_error

	note_part = stripped[:split_index]
	octave_part = stripped[split_index:]

	if any(char not in _OCTAVE_CHARS for char in octave_part):
		raise pitchy.errors.InvalidName(f"Unexpected characters after the octave in note name: {text!r}")

	if not _OCTAVE_PATTERN.fullmatch(octave_part):
		raise pitchy.errors.InvalidOctave(f"Invalid octave {octave_part!r} in note name: {text!r}")

	octave = int(octave_part)

	if not _OCTAVE_MIN <= octave <= _OCTAVE_MAX:
		raise pitchy.errors.InvalidOctave(f"Octave {octave} out of range in note name: {text!r}")

	return note_part, octave


def _frequency_for_midi (midi: int) -> float:

	return A4_FREQUENCY * pitchy.math_backend.pow2((midi - A4_MIDI) / SEMITONES_PER_OCTAVE)


@dataclasses.dataclass(frozen=True, order=True)
class Pitch:

	"""
	A musical pitch represented purely by its frequency in Hz.

	The frequency is not validated; values outside the MIDI range are fine
	until a MIDI number or a name is requested.
	"""

	frequency: float


	@classmethod
	def from_midi (cls, midi: int) -> "Pitch":

		"""
		Create a pitch from a MIDI note number (0-127).

		Raises:
			OutOfMidiRange: If the number is outside 0-127.
		"""

		return cls(_frequency_for_midi(check_midi_range(midi)))


	@classmethod
	def parse (cls, text: str) -> "Pitch":

		"""Parse a note name such as ``"A4"``, ``"c#-1"``, ``"Bb3"`` or ``"F♯5"``.

		Grammar: letter, optional ``#``/``♯``/``b``/``♭``, signed octave; 2-4
		characters in total. The letter and flat marker are case-insensitive.

		Parameters:
			text: The note name.

		Returns:
			The pitch at the equal-tempered frequency of that note.

		Raises:
			InvalidName: Wrong length or unrecognised note part (``"H#4"``).
			InvalidOctave: Missing or unparseable octave (``"C"``).
			MidiOverflow: Octave/semitone arithmetic overflowed.
			OutOfMidiRange: The note lies outside MIDI 0-127 (``"A9"``).

		Example:
			```python
			Pitch.parse("A4").frequency        # 440.0
			Pitch.parse("C#-1").midi_number()  # 1
			Pitch.parse("Db4") == Pitch.parse("C#4")  # True
			```
		"""

		try:
			note_part, octave = split_name(text)
			semitone = pitchy.symbols.note_name_to_pc(note_part)
			midi = check_midi_range(midi_from_octave(octave, semitone))
		except pitchy.errors.PitchyError as error:
			logger.debug(f"Rejected note name {text!r}: {error}")
			raise

		return cls(_frequency_for_midi(midi))


	from_str = parse


	@classmethod
	def from_note (cls, note: "pitchy.note.Note") -> "Pitch":

		"""Convert a spelled note to its pitch (see ``Note.to_pitch``)."""

		return note.to_pitch()


	def midi_number (self) -> int:

		"""
		Return the nearest MIDI note number.

		Computes ``69 + 12 * log2(f / 440)`` and rounds half away from zero.

		Raises:
			OutOfMidiRange: If the rounded value is outside 0-127. The error's
				``hint`` is the nearest boundary (0 or 127).
		"""

		raw = A4_MIDI + SEMITONES_PER_OCTAVE * pitchy.math_backend.log2(self.frequency / A4_FREQUENCY)
		rounded = pitchy.math_backend.round_half_away(raw)

		if pitchy.errors.MIDI_MIN <= rounded <= pitchy.errors.MIDI_MAX:
			return int(rounded)

		hint = pitchy.errors.MIDI_MAX if rounded > pitchy.errors.MIDI_MAX else pitchy.errors.MIDI_MIN

		# nan and ±inf have no integer value to report.
		if not _is_finite(rounded):
			raise pitchy.errors.OutOfMidiRange(hint=hint)

		raise pitchy.errors.OutOfMidiRange(hint=hint, requested=int(rounded))


	def _optional_midi (self) -> typing.Optional[int]:

		try:
			return self.midi_number()
		except pitchy.errors.OutOfMidiRange:
			return None


	def transpose (self, semitones: float) -> "Pitch":

		"""
		Return this pitch moved by a number of semitones.

		Positive values raise the pitch, negative values lower it, and
		fractional values give microtonal offsets. The result is not range
		checked.

		Example:
			```python
			Pitch.parse("C4").transpose(2).midi_number()  # 62 (D4, ~293.665 Hz)
			```
		"""

		return Pitch(self.frequency * pitchy.math_backend.pow2(semitones / SEMITONES_PER_OCTAVE))


	def octave (self) -> typing.Optional[int]:

		"""
		Return the MIDI-convention octave (A4 -> 4, C-1 -> -1).

		Returns ``None`` if the frequency is outside the MIDI range.
		"""

		midi = self._optional_midi()

		if midi is None:
			return None

		return midi // SEMITONES_PER_OCTAVE - 1


	def pitch_class (self) -> typing.Optional[int]:

		"""Return the semitone within the octave (C = 0 ... B = 11), or ``None``."""

		midi = self._optional_midi()

		if midi is None:
			return None

		return midi % SEMITONES_PER_OCTAVE


	def letter_name (self) -> typing.Optional[str]:

		"""Return the sharp-biased name without octave (``"C#"``), or ``None``."""

		pitch_class = self.pitch_class()

		if pitch_class is None:
			return None

		return pitchy.symbols.SHARP_NAMES[pitch_class]


	def to_note (self) -> "pitchy.note.Note":

		"""Spell this pitch as a ``Note`` (see ``Note.from_pitch``)."""

		return pitchy.note.Note.from_pitch(self)


	def name (self) -> str:

		"""
		Return the spelled name, e.g. ``"A4"`` or ``"C#3"``.

		Raises:
			OutOfMidiRange: If the frequency has no MIDI number.
		"""

		return self.to_note().name


	def __str__ (self) -> str:

		try:
			return self.name()
		except pitchy.errors.PitchyError:
			return f"{self.frequency:.3f} Hz"


# ─── Functional API ───────────────────────────────────────────────────────────


def frequency_from_midi (midi: int) -> float:
	"""Return the frequency in Hz for a MIDI number (0-127)."""
	return Pitch.from_midi(midi).frequency


def midi_from_frequency (frequency: float) -> int:
	"""Return the nearest MIDI number for a frequency in Hz."""
	return Pitch(frequency).midi_number()


def transpose (frequency: float, semitones: float) -> float:
	"""Return the frequency moved by a number of semitones."""
	return Pitch(frequency).transpose(semitones).frequency


def parse_name (text: str) -> float:
	"""Return the frequency in Hz for a note name."""
	return Pitch.parse(text).frequency


def format_name (value: typing.Union[Pitch, int, float]) -> str:

	"""
	Return the spelled name for a ``Pitch``, a MIDI number (``int``) or a
	frequency in Hz (``float``).
	"""

	if isinstance(value, Pitch):
		pitch = value
	elif isinstance(value, int) and not isinstance(value, bool):
		pitch = Pitch.from_midi(value)
	elif isinstance(value, float):
		pitch = Pitch(value)
	else:
		raise TypeError(f"Expected a Pitch, MIDI number or frequency, got {type(value).__name__}")

	return pitch.name()


def note_from_frequency (frequency: float) -> "pitchy.note.Note":
	"""Spell a frequency in Hz as a ``Note``."""
	return pitchy.note.Note.from_pitch(Pitch(frequency))


def frequency_from_note (note: "pitchy.note.Note") -> float:
	"""Return the frequency in Hz of a spelled ``Note``."""
	return note.to_pitch().frequency
