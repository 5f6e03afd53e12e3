"""Spelled notes: a letter, an accidental and an octave.

``Note`` is the notational counterpart of ``Pitch``. Converting a pitch to a
note chooses a spelling (sharp-biased: naturals first, then sharps, then
flats, double accidentals last); converting back goes through the MIDI
number, so ``Note(B, SHARP, 3)`` and ``Note(C, NATURAL, 4)`` sound the same.

    import pitchy

    note = pitchy.Note.from_midi(61)
    note.name                        # "C#4"
    pitchy.Note.parse("Db4").name    # "Db4"  (written spelling kept)
    pitchy.Note.parse("Db4").to_pitch() == note.to_pitch()  # True
"""

import dataclasses
import logging
import typing

import pitchy.errors
import pitchy.pitch
import pitchy.symbols


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A musical note spelled with a letter, an accidental and an octave.

	Construction does not check the MIDI range; ``to_pitch`` and
	``midi_number`` do.
	"""

	letter: pitchy.symbols.NoteLetter
	accidental: pitchy.symbols.Accidental = pitchy.symbols.Accidental.NATURAL
	octave: int = 4


	@staticmethod
	def spell (semitone: int) -> typing.Tuple[pitchy.symbols.NoteLetter, pitchy.symbols.Accidental]:

		"""Return the preferred (letter, accidental) for a semitone 0-11."""

		return pitchy.symbols.spell(semitone)


	@classmethod
	def from_pitch (cls, pitch: "pitchy.pitch.Pitch") -> "Note":

		"""
		Spell a pitch using the nearest MIDI number.

		Raises:
			OutOfMidiRange: If the pitch has no MIDI number.
			Unspelled: If no letter and accidental reach the semitone.
		"""

		midi = pitch.midi_number()
		octave = midi // pitchy.pitch.SEMITONES_PER_OCTAVE - 1
		semitone = midi % pitchy.pitch.SEMITONES_PER_OCTAVE

		try:
			letter, accidental = cls.spell(semitone)
		except pitchy.errors.Unspelled:
			logger.error(f"No spelling for semitone {semitone} (MIDI {midi}); the letter table is inconsistent")
			raise

		return cls(letter=letter, accidental=accidental, octave=octave)


	@classmethod
	def from_midi (cls, midi: int) -> "Note":

		"""Spell a MIDI number (0-127)."""

		return cls.from_pitch(pitchy.pitch.Pitch.from_midi(midi))


	@classmethod
	def parse (cls, text: str) -> "Note":

		"""
		Parse a note name, keeping its written spelling.

		Accepts the same names as ``Pitch.parse`` (``"Db4"`` stays D-flat
		rather than becoming C#). The MIDI range is not checked here.

		Raises:
			InvalidName, InvalidOctave: As for ``Pitch.parse``.
		"""

		note_part, octave = pitchy.pitch.split_name(text)

		# Validates against the canonical spellings before splitting letter/accidental.
		pitchy.symbols.note_name_to_pc(note_part)

		letter = pitchy.symbols.NoteLetter.from_text(note_part[0])
		accidental = pitchy.symbols.Accidental.from_text(note_part[1:])

		return cls(letter=letter, accidental=accidental, octave=octave)


	@property
	def semitone (self) -> int:

		"""Letter plus accidental offset; may fall outside 0-11 (``Cb`` is -1)."""

		return int(self.letter) + int(self.accidental)


	def midi_number (self) -> int:

		"""
		Return the MIDI number of this note.

		Raises:
			MidiOverflow: If the octave is too large to combine.
			OutOfMidiRange: If the note is outside 0-127.
		"""

		midi = pitchy.pitch.midi_from_octave(self.octave, self.semitone)

		return pitchy.pitch.check_midi_range(midi)


	def to_pitch (self) -> "pitchy.pitch.Pitch":

		"""Return the equal-tempered pitch of this note."""

		return pitchy.pitch.Pitch.from_midi(self.midi_number())


	def transpose (self, semitones: int) -> "Note":

		"""
		Move by whole semitones and re-spell the result.

		Raises:
			ValueError: If ``semitones`` is not a whole number. Use
				``Pitch.transpose`` for fractional shifts.
		"""

		if not float(semitones).is_integer():
			raise ValueError(f"Notes transpose by whole semitones, got {semitones!r}")

		return Note.from_pitch(self.to_pitch().transpose(int(semitones)))


	@property
	def name (self) -> str:

		"""Letter, accidental and octave, e.g. ``"C#4"``, ``"Bb-1"``."""

		return f"{self.letter}{self.accidental}{self.octave}"


	def __str__ (self) -> str:

		return self.name
