"""
CLI entrypoint for onenotemidi.

`/main.py` delegates to `onenotemidi.cli.main()`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from onenotemidi.devices import MidoSink, RecordingSink
from onenotemidi.errors import DeviceError, ValidationError
from onenotemidi.facade import play_note
from onenotemidi.messages import note_name
from onenotemidi.player import PlaybackRequest
import onenotemidi.config as config

EXIT_OK = 0
EXIT_DEVICE_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_INTERRUPTED = 130

SAMPLE_USAGE = """\
Sample Usage:

  %(prog)s -i 24 -p 80
      Play Guitar Note

  %(prog)s -c 1 -i 24 -p 81 -v 120 -l 2000
      Sets Guitar to Channel 1, Plays A Note, at Volume 120, for 2 seconds
"""


def _configure_logging(verbose: bool = False):
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.LOG_FILE:
        handlers.insert(0, logging.FileHandler(config.LOG_FILE))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play one MIDI note. All flags are optional.",
        epilog=SAMPLE_USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "-?", "--help", action="help", help="Print this help")
    parser.add_argument(
        "-c", "--channel",
        type=_non_negative_int,
        default=None,
        help=f"Channel [0-{config.MAX_CHANNEL}]. Default: {config.DEFAULT_CHANNEL}",
    )
    parser.add_argument(
        "-i", "--instrument",
        type=_non_negative_int,
        default=None,
        help=f"Instrument [0-{config.MAX_DATA_VALUE}]. Default: {config.DEFAULT_INSTRUMENT} (Grand Piano)",
    )
    parser.add_argument(
        "-p", "--pitch",
        type=_non_negative_int,
        default=None,
        help=f"Pitch (Note) [0-{config.MAX_DATA_VALUE}]. Default: {config.DEFAULT_PITCH} (Middle C Note)",
    )
    parser.add_argument(
        "-v", "--velocity",
        type=_non_negative_int,
        default=None,
        help=f"Velocity (Volume) [0-{config.MAX_DATA_VALUE}]. Default: {config.DEFAULT_VELOCITY}",
    )
    parser.add_argument(
        "-l", "--length",
        type=_non_negative_int,
        default=None,
        help=f"Note length in milliseconds. Default: {config.DEFAULT_LENGTH_MS} (3 Seconds)",
    )
    parser.add_argument("-s", "--simple", action="store_true", help="Use Simple Midi Api, no error detection")
    parser.add_argument(
        "-d", "--device",
        type=_non_negative_int,
        default=config.DEFAULT_DEVICE_INDEX,
        help=f"Output device index. Default: {config.DEFAULT_DEVICE_INDEX}",
    )
    parser.add_argument("--dry-run", action="store_true", help="Log the messages instead of sending them")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def request_from_args(args: argparse.Namespace) -> PlaybackRequest:
    """Build a PlaybackRequest, falling back to defaults for missing flags."""
    values = {
        "channel": args.channel,
        "instrument": args.instrument,
        "pitch": args.pitch,
        "velocity": args.velocity,
        "length_ms": args.length,
    }
    return PlaybackRequest(**{name: value for name, value in values.items() if value is not None})


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)
    logger = logging.getLogger(__name__)

    request = request_from_args(args)

    if not argv:
        print("Play Piano C Note")

    sink = RecordingSink() if args.dry_run else MidoSink()

    try:
        play_note(request, sink, simple=args.simple, device_index=args.device)
    except ValidationError as e:
        print(f"Exception: {e}")
        return EXIT_USAGE_ERROR
    except DeviceError as e:
        print(f"Exception: {e}")
        return EXIT_DEVICE_ERROR
    except KeyboardInterrupt:
        logger.info("Received interrupt signal")
        print("\nInterrupted, note stopped.")
        return EXIT_INTERRUPTED

    if args.dry_run:
        for message in sink.sent:
            print(f"{message.to_bytes().hex(' ')}  (0x{message.to_dword():08X})")

    logger.info("Played %s", note_name(request.pitch))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
