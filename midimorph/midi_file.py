"""Standard MIDI File export.

Serialises a note list into a byte-exact format 0 file: an ``MThd`` header
(format 0, one track, 480 ticks per quarter note) followed by a single
``MTrk`` chunk holding a tempo meta event, the note-on/note-off stream in time
order and an end-of-track meta event.

Every channel event carries its own status byte (no running status), so the
output is identical across implementations for the same notes and tempo.
``mido`` provides the message bodies and is used to read files back.
"""

import datetime
import io
import logging
import math
import os
import struct
import typing

import mido

import midimorph.constants.ticks
import midimorph.generator


logger = logging.getLogger(__name__)


MIME_TYPE = "audio/midi"
FILE_EXTENSION = ".mid"

HEADER_CHUNK_ID = b"MThd"
TRACK_CHUNK_ID = b"MTrk"
HEADER_LENGTH = 6
FILE_FORMAT = 0
TRACK_COUNT = 1

MICROSECONDS_PER_MINUTE = 60_000_000
MAX_TEMPO_MICROSECONDS = 0xFFFFFF		# 3-byte set_tempo field


def encode_variable_length (value: int) -> bytes:

	"""
	Encode a non-negative integer as a MIDI variable-length quantity.

	Seven bits per byte, most significant group first; every byte except the
	last has its high bit set.

	Example:
		```python
		encode_variable_length(0)      # → b"\\x00"
		encode_variable_length(128)    # → b"\\x81\\x00"
		encode_variable_length(16383)  # → b"\\xff\\x7f"
		```
	"""

	if value < 0:
		raise ValueError(f"Variable-length quantities cannot be negative ({value})")

	groups = [value & 0x7F]
	value >>= 7

	while value > 0:
		groups.append((value & 0x7F) | 0x80)
		value >>= 7

	return bytes(reversed(groups))


def tempo_to_microseconds (tempo: float) -> int:

	"""
	Convert beats per minute to microseconds per quarter note (floored).

	Raises ``ValueError`` when the tempo is not positive or is too slow for the
	3-byte tempo field (below 4 BPM).
	"""

	if not tempo > 0:
		raise ValueError(f"Tempo must be positive, got {tempo}")

	microseconds = math.floor(MICROSECONDS_PER_MINUTE / tempo)

	if microseconds > MAX_TEMPO_MICROSECONDS:
		raise ValueError(f"Tempo {tempo} BPM is too slow to encode")

	return microseconds


def note_events (notes: typing.Iterable[midimorph.generator.MidiNote]) -> typing.List[typing.Tuple[int, mido.Message]]:

	"""
	Expand notes into ``(absolute_tick, message)`` pairs sorted by tick.

	Each note contributes a note-on at its start and a note-off (velocity 0) at
	its end. Events at the same tick keep their insertion order.
	"""

	events: typing.List[typing.Tuple[int, mido.Message]] = []

	for note in notes:
		events.append((note.start_time, mido.Message('note_on', channel=0, note=note.pitch, velocity=note.velocity)))
		events.append((note.end_time, mido.Message('note_off', channel=0, note=note.pitch, velocity=0)))

	events.sort(key=lambda event: event[0])

	return events


def _track_data (notes: typing.Iterable[midimorph.generator.MidiNote], tempo: float) -> bytes:

	"""Serialise the event stream of the single track."""

	data = bytearray()

	tempo_message = mido.MetaMessage('set_tempo', tempo=tempo_to_microseconds(tempo))
	data += encode_variable_length(0)
	data += bytes(tempo_message.bytes())

	current_tick = 0

	for tick, message in note_events(notes):
		data += encode_variable_length(tick - current_tick)
		data += bytes(message.bytes())
		current_tick = tick

	data += encode_variable_length(0)
	data += bytes(mido.MetaMessage('end_of_track').bytes())

	return bytes(data)


def encode (notes: typing.Iterable[midimorph.generator.MidiNote], tempo: float) -> bytes:

	"""
	Encode notes and a tempo as a format 0 Standard MIDI File.

	The result can be written straight to a ``.mid`` file (MIME type
	``audio/midi``).
	"""

	track = _track_data(notes, tempo)

	header = HEADER_CHUNK_ID + struct.pack(
		">IHHH",
		HEADER_LENGTH,
		FILE_FORMAT,
		TRACK_COUNT,
		midimorph.constants.ticks.PPQ
	)

	return header + TRACK_CHUNK_ID + struct.pack(">I", len(track)) + track


def to_midi_file (notes: typing.Iterable[midimorph.generator.MidiNote], tempo: float) -> mido.MidiFile:

	"""Encode notes and read the result back as a ``mido.MidiFile``."""

	return mido.MidiFile(file=io.BytesIO(encode(notes, tempo)))


def default_filename (now: typing.Optional[datetime.datetime] = None) -> str:

	"""Timestamped file name, e.g. ``midi-morph-20260101_120000.mid``."""

	if now is None:
		now = datetime.datetime.now()

	return now.strftime("midi-morph-%Y%m%d_%H%M%S") + FILE_EXTENSION


def save (notes: typing.Iterable[midimorph.generator.MidiNote], tempo: float, filename: typing.Optional[str] = None) -> str:

	"""
	Write notes to a MIDI file and return the path written.

	Without a filename a timestamped name in the current directory is used.
	The ``.mid`` extension is appended when missing.
	"""

	if filename is None:
		filename = default_filename()

	elif os.path.splitext(filename)[1].lower() not in (".mid", ".midi"):
		filename += FILE_EXTENSION

	data = encode(notes, tempo)

	with open(filename, "wb") as f:
		f.write(data)

	logger.info(f"Saved {filename} ({len(data)} bytes)")

	return filename
