import logging
import typing

import mido


logger = logging.getLogger(__name__)


def select_output_device (device_name: typing.Optional[str] = None) -> typing.Tuple[typing.Optional[str], typing.Optional[typing.Any]]:

	"""
	Open a MIDI output port for previewing a pattern.

	If `device_name` is given, that port is opened when it exists.
	Otherwise, when exactly one port is available it is selected automatically.
	With several ports and no name there is no way to choose, so the available
	names are logged and nothing is opened.

	Returns:
		A tuple of (device_name, midi_out_object) or (None, None) on failure.
	"""

	try:
		outputs = mido.get_output_names()
		logger.info(f"Available MIDI outputs: {outputs}")

		if not outputs:
			logger.error("No MIDI output devices found.")
			return None, None

		if device_name is not None:

			if device_name in outputs:
				midi_out = mido.open_output(device_name)
				logger.info(f"Opened MIDI output: {device_name}")
				return device_name, midi_out

			logger.error(f"MIDI output device '{device_name}' not found. Available devices: {outputs}")
			return None, None

		if len(outputs) == 1:
			selected_name = outputs[0]
			midi_out = mido.open_output(selected_name)
			logger.info(f"One MIDI output found - using '{selected_name}'")
			return selected_name, midi_out

		logger.error(f"Several MIDI outputs found - pass one with --preview. Available devices: {outputs}")
		return None, None

	except Exception as e:
		logger.error(f"Failed to open MIDI output: {e}")
		return None, None
