import logging

import midimorph
import midimorph.display


logging.basicConfig(level=logging.INFO)

# Two bars of D dorian, fairly busy and loosely played.
params = midimorph.GeneratorParams(
	bars=2,
	tempo=104,
	root_note=62,
	scale="dorian",
	density=0.6,
	velocity_min=70,
	velocity_max=115,
	pitch_range=10,
	note_length_min=1,
	note_length_max=3,
	humanize=0.3,
	seed=2024
)

notes = midimorph.generate(params)

print(midimorph.display.summary_line(params, notes))
for line in midimorph.display.render_piano_roll(notes, params.bars):
	print(line)

midimorph.save(notes, params.tempo, "dorian_sketch.mid")
