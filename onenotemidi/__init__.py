"""
onenotemidi - play a single MIDI note on an output device.
"""
