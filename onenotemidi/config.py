"""
Configuration for onenotemidi
"""

# General MIDI instruments (by convention only, any 0-127 value is accepted)
GRAND_PIANO = 0
GUITAR = 24

MIDDLE_C = 60  # C4

# Protocol limits
MAX_CHANNEL = 15  # 4 bits
MAX_DATA_VALUE = 127  # 7 bits

# Default note
DEFAULT_CHANNEL = 0
DEFAULT_INSTRUMENT = GRAND_PIANO
DEFAULT_PITCH = MIDDLE_C
DEFAULT_VELOCITY = 127  # Max velocity (volume)
DEFAULT_LENGTH_MS = 3000  # Note length in milliseconds

# Output device
DEFAULT_DEVICE_INDEX = 0
MIDI_DEVICE_KEYWORD = ''  # Empty matches every output port

# Logging
LOG_FILE = 'onenotemidi.log'  # Empty string disables the file log
