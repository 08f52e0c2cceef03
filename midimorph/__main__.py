import argparse
import asyncio
import dataclasses
import logging
import sys
import typing

import midimorph.config
import midimorph.display
import midimorph.generator
import midimorph.midi_file
import midimorph.midi_utils
import midimorph.preview


logger = logging.getLogger(__name__)


def build_parser () -> argparse.ArgumentParser:

	"""
	Command line options. Anything given here overrides the config file.
	"""

	parser = argparse.ArgumentParser(prog="midimorph", description="Generate a MIDI pattern from a scale and a seed")
	parser.add_argument("--config", default="midimorph.yaml", help="YAML config file (default: midimorph.yaml)")
	parser.add_argument("--seed", type=int, help="Random seed (default: pick one)")
	parser.add_argument("--bars", type=int, help="Pattern length in bars")
	parser.add_argument("--tempo", type=int, help="Tempo in BPM")
	parser.add_argument("--root", type=int, dest="root_note", help="Root MIDI note (60 = C4)")
	parser.add_argument("--scale", help="Scale name, e.g. 'minor_pentatonic' or 'Dorian'")
	parser.add_argument("--density", type=float, help="Note probability per step (0-1)")
	parser.add_argument("--humanize", type=float, help="Timing/velocity jitter (0-1)")
	parser.add_argument("--output", "-o", help="Output .mid file (default: timestamped name)")
	parser.add_argument("--grid", action="store_true", help="Print an ASCII piano roll")
	parser.add_argument("--preview", nargs="?", const="", metavar="DEVICE", help="Play the pattern on a MIDI output")
	parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point: generate a pattern, write it to disk and optionally play it.
	"""

	args = build_parser().parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	config = midimorph.config.load_config(args.config)

	overrides = {
		name: getattr(args, name)
		for name in ("seed", "bars", "tempo", "root_note", "scale", "density", "humanize")
		if getattr(args, name) is not None
	}

	try:
		params = midimorph.config.params_from_config(config)
		params = midimorph.config.sanitize(dataclasses.replace(params, **overrides))
	except ValueError as e:
		logger.error(str(e))
		return 2

	# Fix the seed up front so the summary, the file and the preview agree.
	if params.seed is None:
		params = params.reseed()

	notes = midimorph.generator.generate(params)

	print(midimorph.display.summary_line(params, notes))

	if args.grid:
		for line in midimorph.display.render_piano_roll(notes, params.bars):
			print(line)

	output = args.output or (config.get('output') or {}).get('filename')

	try:
		midimorph.midi_file.save(notes, params.tempo, output)
	except OSError as e:
		logger.error(f"Failed to save MIDI file: {e}")
		return 1

	if args.preview is not None:

		_, midi_out = midimorph.midi_utils.select_output_device(args.preview or None)

		if midi_out is None:
			return 1

		try:
			asyncio.run(midimorph.preview.play(notes, params.tempo, midi_out))
		except KeyboardInterrupt:
			logger.info("Stopping...")
		finally:
			midi_out.close()

	return 0


if __name__ == "__main__":
	sys.exit(main())
