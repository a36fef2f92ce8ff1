from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path

from .binary import sequence
from .binary.codecs.addressor import BitRangeError
from .binary.reader import bit_string, extract, load_bytes
from .formats.gif import GifFormatError, read_screen_descriptor
from .models.common import IntType
from .models.field import FieldReading

logger = logging.getLogger("bitlab.cli")


def setup_logging(log_level=logging.INFO):
    """initialize python logging infrastructure"""
    # stdout carries command output
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )
    logging.getLogger().setLevel(log_level)


def _int(text: str) -> int:
    return int(text, 0)


def _count(text: str) -> int:
    n = int(text)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def cmd_get(args):
    raw = load_bytes(args.input)
    target = IntType(args.type)
    view, address = sequence.address_of(raw, args.byte, args.bit, args.width, target.bits)
    reading = FieldReading(
        address=address,
        type=target,
        value=extract(view, address, target),
        bits=bit_string(view, address),
    )
    print(json.dumps(reading.model_dump(mode="json"), indent=2))


def cmd_set(args):
    data = bytearray(load_bytes(args.input))
    sequence.set_bits(data, args.byte, args.bit, args.width, args.value)
    Path(args.output).write_bytes(data)
    logger.info("Wrote %d bytes to %s", len(data), args.output)


def cmd_bit(args):
    if not (args.set or args.clear):
        print(json.dumps(sequence.get_bit(load_bytes(args.input), args.byte, args.bit)))
        return
    data = bytearray(load_bytes(args.input))
    if args.set:
        sequence.set_bit(data, args.byte, args.bit)
    else:
        sequence.clear_bit(data, args.byte, args.bit)
    out = args.output or args.input
    Path(out).write_bytes(data)
    logger.info("Wrote %d bytes to %s", len(data), out)


def cmd_gif(args):
    desc = read_screen_descriptor(args.input)
    print(json.dumps(desc.model_dump(mode="json"), indent=2))


def cmd_plot(args):
    from .viz import plot_field
    plot_field(args.input, args.byte, args.bit, args.width, context=args.context)


def _add_field_args(sp, *, width: bool = True):
    sp.add_argument("input", help="Path to a binary file")
    sp.add_argument("--byte", type=_int, required=True, help="Byte offset of the field")
    sp.add_argument("--bit", type=_int, default=0, help="Bit offset from the MSB of that byte")
    if width:
        sp.add_argument("--width", type=_int, required=True, help="Field width in bits (1..64)")


def build_parser():
    p = argparse.ArgumentParser(prog="bitlab", description="Read and patch bit fields in binary files")
    p.add_argument("--debug", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("get", help="print a field as JSON")
    _add_field_args(sp)
    sp.add_argument("--type", default=IntType.U64.value, choices=[t.value for t in IntType],
                    help="Output integer type (signed types sign-extend)")
    sp.set_defaults(func=cmd_get)

    sp = sub.add_parser("set", help="write a patched copy of a file")
    _add_field_args(sp)
    sp.add_argument("--value", type=_int, required=True, help="Value to store (low WIDTH bits)")
    sp.add_argument("output", help="Output file path")
    sp.set_defaults(func=cmd_set)

    sp = sub.add_parser("bit", help="test, set or clear a single bit")
    _add_field_args(sp, width=False)
    g = sp.add_mutually_exclusive_group()
    g.add_argument("--set", action="store_true")
    g.add_argument("--clear", action="store_true")
    sp.add_argument("-o", "--output", default=None, help="Output file (default: modify INPUT)")
    sp.set_defaults(func=cmd_bit)

    sp = sub.add_parser("gif", help="print a GIF logical screen descriptor as JSON")
    sp.add_argument("input")
    sp.set_defaults(func=cmd_gif)

    sp = sub.add_parser("plot", help="show the bit layout of a field")
    _add_field_args(sp)
    sp.add_argument("--context", type=_count, default=0, help="Extra bytes to show around the field")
    sp.set_defaults(func=cmd_plot)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    if ns.cmd == "bit" and ns.output and not (ns.set or ns.clear):
        p.error("bit: --output needs --set or --clear")
    setup_logging(logging.DEBUG if ns.debug else logging.WARNING)
    try:
        ns.func(ns)
    except (BitRangeError, GifFormatError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
