"""Play a generated pattern through a MIDI output port.

The preview sends the same note-on/note-off stream the exporter writes, timed
against the event loop clock. It makes no sound itself; route the port to a
synth or DAW.

```python
name, port = midimorph.midi_utils.select_output_device()
asyncio.run(midimorph.preview.play(notes, tempo=120, midi_out=port))
```
"""

import asyncio
import logging
import typing

import mido

import midimorph.constants.ticks
import midimorph.generator
import midimorph.midi_file


logger = logging.getLogger(__name__)


class MidiOutput (typing.Protocol):

	"""The part of a ``mido`` output port the preview needs."""

	def send (self, message: mido.Message) -> None:
		...


def ticks_to_seconds (ticks: float, tempo: float) -> float:

	"""Convert ticks at 480 PPQ to seconds at the given BPM."""

	return ticks / midimorph.constants.ticks.PPQ * 60.0 / tempo


async def play (
	notes: typing.Sequence[midimorph.generator.MidiNote],
	tempo: float,
	midi_out: MidiOutput
) -> int:

	"""
	Send the notes to ``midi_out`` in real time.

	Returns the number of messages sent. If the coroutine is cancelled, or a
	send fails, note-offs are sent for every note still sounding before the
	exception propagates.
	"""

	if tempo <= 0:
		raise ValueError(f"Tempo must be positive, got {tempo}")

	events = midimorph.midi_file.note_events(notes)
	loop = asyncio.get_running_loop()
	start = loop.time()
	sounding: typing.Dict[int, int] = {}
	sent = 0

	logger.info(f"Previewing {len(notes)} notes at {tempo} BPM")

	try:

		for tick, message in events:

			delay = start + ticks_to_seconds(tick, tempo) - loop.time()

			if delay > 0:
				await asyncio.sleep(delay)

			midi_out.send(message)
			sent += 1

			if message.type == 'note_on':
				sounding[message.note] = sounding.get(message.note, 0) + 1
			elif sounding.get(message.note, 0) > 0:
				sounding[message.note] -= 1

	finally:

		hanging = [note for note, count in sounding.items() if count > 0]

		if hanging:
			logger.info(f"Preview stopped - releasing {len(hanging)} notes")

		for note in hanging:
			midi_out.send(mido.Message('note_off', channel=0, note=note, velocity=0))

	return sent
