"""Exceptions raised by pitchy conversions.

Every error derives from ``PitchyError``, which is itself a ``ValueError``, so
code that already treats bad musical input as a ``ValueError`` keeps working.

- ``InvalidName``: the note part of a name is not a recognised spelling (e.g. ``"H#4"``).
- ``InvalidOctave``: the octave part is missing or is not a signed integer.
- ``OutOfMidiRange``: a MIDI number falls outside 0-127. Carries the nearest
  clamped boundary as ``hint`` (diagnostic only, never a substitute note).
- ``MidiOverflow``: combining octave and semitone overflowed before range checking.
- ``Unspelled``: no letter + accidental pair reaches a semitone. Should never
  happen with the standard letter table.
- ``InvalidAccidental``: a semitone offset outside -2..2 was given as an accidental.
"""

import typing


MIDI_MIN = 0
MIDI_MAX = 127


class PitchyError (ValueError):

	"""Base class for all pitch, note and symbol conversion errors."""

	message = "Pitch conversion failed"

	def __init__ (self, message: typing.Optional[str] = None) -> None:

		super().__init__(message if message is not None else self.message)


class InvalidName (PitchyError):

	message = "The note name is invalid or unrecognized"


class InvalidOctave (PitchyError):

	message = "The octave portion could not be parsed"


class MidiOverflow (PitchyError):

	message = "The MIDI note could not be computed due to numeric overflow"


class Unspelled (PitchyError):

	message = "The pitch could not be spelled as a standard letter and accidental"


class OutOfMidiRange (PitchyError):

	"""
	A computed or requested MIDI number lies outside 0-127.

	``hint`` is the requested value clamped into range. ``requested`` is the
	unclamped value when one exists (``None`` for frequencies whose MIDI
	number is not a finite number).
	"""

	def __init__ (self, hint: int, requested: typing.Optional[int] = None) -> None:

		self.hint = hint
		self.requested = requested

		if requested is None:
			text = f"The computed MIDI note is outside the valid 0-127 range (nearest: {hint})"
		else:
			text = f"The computed MIDI note {requested} is outside the valid 0-127 range (nearest: {hint})"

		super().__init__(text)


	@classmethod
	def clamped (cls, requested: int) -> "OutOfMidiRange":

		"""Build the error for an integer MIDI value, clamping the hint into range."""

		return cls(hint=max(MIDI_MIN, min(MIDI_MAX, requested)), requested=requested)


class InvalidAccidental (PitchyError):

	"""The semitone offset does not correspond to any accidental."""

	def __init__ (self, offset: int) -> None:

		self.offset = offset
		super().__init__(f"invalid semitone offset for accidental: {offset}")
