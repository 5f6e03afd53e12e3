"""Note letters, accidentals and the note-name tables.

Module-level constants:
- `SHARP_NAMES`: pitch class (0-11) to sharp-biased name (``"C"``, ``"C#"``, ...)
- `NOTE_NAME_TO_PC`: accepted note spellings (lower-cased) to pitch class
- `SPELLING_PRIORITY`: the order in which accidentals are tried when spelling a semitone

Letters and accidentals are ``IntEnum`` members whose values are semitone
offsets, so ``NoteLetter.E + Accidental.FLAT == 3`` and sorting a list of
letters orders them by pitch.
"""

import enum
import typing

import pitchy.errors


class NoteLetter (enum.IntEnum):

	"""
	The seven diatonic letters, valued by their chromatic offset from C.
	"""

	C = 0
	D = 2
	E = 4
	F = 5
	G = 7
	A = 9
	B = 11


	@classmethod
	def all (cls) -> typing.Tuple["NoteLetter", ...]:

		"""Return the letters in spelling search order: C, D, E, F, G, A, B."""

		return _LETTER_ORDER


	@classmethod
	def from_text (cls, text: str) -> "NoteLetter":

		"""
		Look up a letter case-insensitively.

		Raises:
			InvalidName: If the text is not a single letter A-G.
		"""

		try:
			return cls[text.upper()]
		except KeyError:
			raise pitchy.errors.InvalidName(f"Unknown note letter: {text!r}") from None


	def __str__ (self) -> str:

		return self.name


	def __format__ (self, format_spec: str) -> str:

		return format(str(self), format_spec)


_LETTER_ORDER: typing.Tuple[NoteLetter, ...] = (
	NoteLetter.C,
	NoteLetter.D,
	NoteLetter.E,
	NoteLetter.F,
	NoteLetter.G,
	NoteLetter.A,
	NoteLetter.B,
)


class Accidental (enum.IntEnum):

	"""
	A signed semitone adjustment applied to a letter.
	"""

	DOUBLE_FLAT = -2
	FLAT = -1
	NATURAL = 0
	SHARP = 1
	DOUBLE_SHARP = 2


	@classmethod
	def from_offset (cls, offset: int) -> "Accidental":

		"""
		Return the accidental for a semitone offset in -2..2.

		Raises:
			InvalidAccidental: For any other offset.
		"""

		try:
			return cls(offset)
		except ValueError:
			raise pitchy.errors.InvalidAccidental(offset) from None


	@classmethod
	def from_text (cls, text: str) -> "Accidental":

		"""
		Parse a single accidental marker: ``""``, ``"#"``, ``"♯"``, ``"b"`` or ``"♭"``.

		Double accidentals are not accepted from text.

		Raises:
			InvalidName: For any other marker.
		"""

		folded = text.lower()

		if folded not in _MARKER_TO_ACCIDENTAL:
			raise pitchy.errors.InvalidName(f"Unknown accidental: {text!r}")

		return _MARKER_TO_ACCIDENTAL[folded]


	@property
	def symbol (self) -> str:

		"""The typographic form: ``""``, ``"♯"``, ``"♭"``, ``"𝄪"`` or ``"𝄫"``."""

		return _ACCIDENTAL_SYMBOL[self]


	def __str__ (self) -> str:

		return _ACCIDENTAL_TEXT[self]


	def __format__ (self, format_spec: str) -> str:

		return format(str(self), format_spec)


_ACCIDENTAL_TEXT: typing.Dict[Accidental, str] = {
	Accidental.DOUBLE_FLAT: "𝄫",
	Accidental.FLAT: "b",
	Accidental.NATURAL: "",
	Accidental.SHARP: "#",
	Accidental.DOUBLE_SHARP: "𝄪",
}

_ACCIDENTAL_SYMBOL: typing.Dict[Accidental, str] = {
	Accidental.DOUBLE_FLAT: "𝄫",
	Accidental.FLAT: "♭",
	Accidental.NATURAL: "",
	Accidental.SHARP: "♯",
	Accidental.DOUBLE_SHARP: "𝄪",
}

_MARKER_TO_ACCIDENTAL: typing.Dict[str, Accidental] = {
	"": Accidental.NATURAL,
	"#": Accidental.SHARP,
	"♯": Accidental.SHARP,
	"b": Accidental.FLAT,
	"♭": Accidental.FLAT,
}


# Naturals first, then sharps before flats; doubles only as a last resort.
SPELLING_PRIORITY: typing.Tuple[Accidental, ...] = (
	Accidental.NATURAL,
	Accidental.SHARP,
	Accidental.FLAT,
	Accidental.DOUBLE_SHARP,
	Accidental.DOUBLE_FLAT,
)


SHARP_NAMES: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]


NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"c": 0,
	"c#": 1,
	"db": 1,
	"d": 2,
	"d#": 3,
	"eb": 3,
	"e": 4,
	"f": 5,
	"f#": 6,
	"gb": 6,
	"g": 7,
	"g#": 8,
	"ab": 8,
	"a": 9,
	"a#": 10,
	"bb": 10,
	"b": 11,
}

# Typographic spellings of the same names.
NOTE_NAME_TO_PC.update({
	name[0] + {"#": "♯", "b": "♭"}[name[1]]: pc
	for name, pc in list(NOTE_NAME_TO_PC.items())
	if len(name) == 2
})


def note_name_to_pc (name: str) -> int:

	"""Return the pitch class (0-11) for a canonical note spelling.

	Matching is case-insensitive and accepts ``#``/``♯`` and ``b``/``♭``.
	Only the twelve naturals and the five sharp/flat enharmonic pairs are
	recognised; ``"E#"``, ``"Cb"`` and double accidentals are not.

	Parameters:
		name: Note name without octave (e.g. ``"C"``, ``"f#"``, ``"B♭"``).

	Returns:
		Pitch class integer (0-11).

	Raises:
		InvalidName: If the name is not recognised.

	Example:
		```python
		note_name_to_pc("C")    # → 0
		note_name_to_pc("Db")   # → 1
		note_name_to_pc("a♯")   # → 10
		```
	"""

	folded = name.lower()

	if folded not in NOTE_NAME_TO_PC:
		raise pitchy.errors.InvalidName(f"Unknown note name: {name!r}. Expected e.g. 'C', 'F#', 'Bb'.")

	return NOTE_NAME_TO_PC[folded]


def spell (semitone: int) -> typing.Tuple[NoteLetter, Accidental]:

	"""
	Choose a letter and accidental for a semitone within the octave (0-11).

	Accidentals are tried in ``SPELLING_PRIORITY`` order and, for each, letters
	in ``NoteLetter.all()`` order; the first pair whose offsets sum to the
	semitone wins. This makes the result sharp-biased: ``1 -> (C, SHARP)``.

	Raises:
		Unspelled: If no pair reaches the semitone.
	"""

	for accidental in SPELLING_PRIORITY:
		for letter in NoteLetter.all():
			if letter + accidental == semitone:
				return letter, accidental

	raise pitchy.errors.Unspelled()
