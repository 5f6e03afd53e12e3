import logging

import pitchy
import pitchy.messages

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)

# A C minor arpeggio, written with flats, played two octaves up.
ARPEGGIO = ["C3", "Eb3", "G3", "Bb3"]

for name in ARPEGGIO:

	pitch = pitchy.Pitch.parse(name).transpose(24)

	logger.info(f"{name:<4} -> {pitch.name():<4} {pitch.frequency:8.2f} Hz")

	msg = pitchy.messages.note_on(pitch, velocity=90, channel=0)
	logger.info(f"     {msg}")

# Anything outside MIDI 0-127 is reported with the nearest valid note.
try:
	pitchy.Pitch.parse("C3").transpose(120).midi_number()
except pitchy.OutOfMidiRange as e:
	logger.warning(f"{e} - clamped display: {pitchy.format_name(e.hint)}")
