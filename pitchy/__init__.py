"""
pitchy - musical pitch conversions for Python.

Converts between three representations of a pitch in 12-tone equal
temperament (A4 = 440 Hz):

- **Frequency** in Hz, wrapped by ``Pitch``.
- **MIDI note number** 0-127 (A4 = 69, middle C = C4 = 60).
- **Spelled note**: letter, accidental and octave, ``Note`` (e.g. ``C#4``).

Conversions are pure and deterministic. Names prefer naturals, then sharps
(MIDI 61 is ``C#4``, never ``Db4``), and parse back to the same MIDI number.

Minimal example:

    ```python
    import pitchy

    a4 = pitchy.Pitch.parse("A4")
    a4.frequency                  # 440.0
    a4.midi_number()              # 69
    a4.transpose(12).name()       # "A5"

    pitchy.Note.from_midi(70).name        # "A#4"
    pitchy.Pitch.from_midi(128)           # raises pitchy.OutOfMidiRange
    ```

The float helpers run on the ``math`` module by default, or on a pure
arithmetic backend (``pitchy.math_backend.set_backend("portable")``).

Package-level exports: ``Pitch``, ``Note``, ``NoteLetter``, ``Accidental``,
the error classes, and the functional API (``frequency_from_midi``,
``midi_from_frequency``, ``transpose``, ``parse_name``, ``format_name``,
``note_from_frequency``, ``frequency_from_note``).
"""

import pitchy.errors
import pitchy.math_backend
import pitchy.symbols
import pitchy.pitch
import pitchy.note


Pitch = pitchy.pitch.Pitch
Note = pitchy.note.Note
NoteLetter = pitchy.symbols.NoteLetter
Accidental = pitchy.symbols.Accidental

PitchyError = pitchy.errors.PitchyError
InvalidName = pitchy.errors.InvalidName
InvalidOctave = pitchy.errors.InvalidOctave
OutOfMidiRange = pitchy.errors.OutOfMidiRange
MidiOverflow = pitchy.errors.MidiOverflow
Unspelled = pitchy.errors.Unspelled
InvalidAccidental = pitchy.errors.InvalidAccidental

frequency_from_midi = pitchy.pitch.frequency_from_midi
midi_from_frequency = pitchy.pitch.midi_from_frequency
transpose = pitchy.pitch.transpose
parse_name = pitchy.pitch.parse_name
format_name = pitchy.pitch.format_name
note_from_frequency = pitchy.pitch.note_from_frequency
frequency_from_note = pitchy.pitch.frequency_from_note
