"""Build mido note messages from pitches, notes and names.

For sequencers and synth front ends that already speak ``mido``. Nothing is
opened or sent here; the caller owns the port.

    import pitchy.messages

    msg = pitchy.messages.note_on("C#4", velocity=100, channel=9)
    port.send(msg)

    pitchy.messages.pitch_from_message(msg).name()   # "C#4"
"""

import typing

import mido

import pitchy.note
import pitchy.pitch


NoteLike = typing.Union["pitchy.pitch.Pitch", "pitchy.note.Note", str, int]

NOTE_MESSAGE_TYPES = ("note_on", "note_off")


def midi_number_of (value: NoteLike) -> int:

	"""
	Resolve a ``Pitch``, ``Note``, note name or MIDI number to a MIDI number.

	Raises:
		PitchyError: If the value cannot be resolved or is outside 0-127.
		TypeError: For unsupported value types.
	"""

	if isinstance(value, (pitchy.pitch.Pitch, pitchy.note.Note)):
		return value.midi_number()

	if isinstance(value, str):
		return pitchy.pitch.Pitch.parse(value).midi_number()

	if isinstance(value, int) and not isinstance(value, bool):
		return pitchy.pitch.check_midi_range(value)

	raise TypeError(f"Expected a Pitch, Note, note name or MIDI number, got {type(value).__name__}")


def note_on (value: NoteLike, velocity: int = 64, channel: int = 0) -> mido.Message:

	"""Return a ``note_on`` message for the value."""

	return mido.Message("note_on", note=midi_number_of(value), velocity=velocity, channel=channel)


def note_off (value: NoteLike, velocity: int = 0, channel: int = 0) -> mido.Message:

	"""Return a ``note_off`` message for the value."""

	return mido.Message("note_off", note=midi_number_of(value), velocity=velocity, channel=channel)


def pitch_from_message (message: mido.Message) -> "pitchy.pitch.Pitch":

	"""
	Return the pitch of a ``note_on`` or ``note_off`` message.

	Raises:
		ValueError: For any other message type.
	"""

	if message.type not in NOTE_MESSAGE_TYPES:
		raise ValueError(f"Expected a note_on or note_off message, got {message.type}")

	return pitchy.pitch.Pitch.from_midi(message.note)
