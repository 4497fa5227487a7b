#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for Go-compatible varints.

Usage:
    python varint_tool.py encode 300
    python varint_tool.py encode -1 --signed
    python varint_tool.py decode "ac 02"
    python varint_tool.py --port /dev/ttyACM0 send 300
    python varint_tool.py --port /dev/ttyACM0 recv --signed

Requirements:
    pip install pyserial
"""

import argparse
import sys

try:
    import serial
except ImportError:
    print("Error: pyserial not installed. Run: pip install pyserial")
    sys.exit(1)

from govarint import (
    SerialPort,
    VarintError,
    decode_leb128_i64,
    decode_leb128_u64,
    decode_uvarint,
    decode_varint,
    encode_leb128_i64,
    encode_leb128_u64,
    encode_uvarint,
    encode_varint,
    read_uvarint,
    read_varint,
)
from govarint.transport import DEFAULT_BAUDRATE, DEFAULT_TIMEOUT

ENCODERS = {
    "uvarint": encode_uvarint,
    "varint": encode_varint,
    "leb128": encode_leb128_u64,
    "leb128-signed": encode_leb128_i64,
}

DECODERS = {
    "uvarint": decode_uvarint,
    "varint": decode_varint,
    "leb128": decode_leb128_u64,
    "leb128-signed": decode_leb128_i64,
}


class _EchoSource:
    """Wraps a byte source and prints every byte read."""

    def __init__(self, source):
        self._source = source

    def read_byte(self):
        byte = self._source.read_byte()
        if byte is not None:
            print(f"  <- 0x{byte:02x}")
        return byte


def format_hex(data: bytes) -> str:
    return data.hex(" ")


def cmd_encode(value: int, encoding: str, verbose: bool = False):
    """Print the encoding of a value."""
    data = ENCODERS[encoding](value)
    if verbose:
        for i, byte in enumerate(data):
            more = "more" if byte & 0x80 else "last"
            print(f"  [{i}] 0x{byte:02x} payload=0x{byte & 0x7F:02x} ({more})")
    print(f"{format_hex(data)}  ({len(data)} bytes)")


def cmd_decode(hex_data: str, encoding: str, verbose: bool = False):
    """Decode the first value in a hex string."""
    data = bytes.fromhex(hex_data)
    value, offset = DECODERS[encoding](data)
    if verbose and offset < len(data):
        print(f"  {len(data) - offset} trailing bytes ignored")
    print(f"{value}  ({offset} bytes)")


def cmd_send(port: SerialPort, value: int, signed: bool, verbose: bool = False):
    """Write one value to the serial port."""
    if signed:
        count = port.write_varint(value)
    else:
        count = port.write_uvarint(value)
    if verbose:
        data = encode_varint(value) if signed else encode_uvarint(value)
        print(f"  -> {format_hex(data)}")
    print(f"Sent {value} ({count} bytes) on {port.port}")


def cmd_recv(port: SerialPort, signed: bool, verbose: bool = False):
    """Read one value from the serial port."""
    source = _EchoSource(port) if verbose else port
    if signed:
        value, count = read_varint(source)
    else:
        value, count = read_uvarint(source)
    print(f"{value}  ({count} bytes)")


def _encoding(args) -> str:
    if args.leb128_signed:
        return "leb128-signed"
    if args.leb128:
        return "leb128"
    if args.signed:
        return "varint"
    return "uvarint"


def _add_encoding_options(parser):
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--signed", "-s", action="store_true",
                       help="Zigzag signed varint")
    group.add_argument("--leb128", action="store_true",
                       help="Unsigned LEB128")
    group.add_argument("--leb128-signed", action="store_true",
                       help="Signed (two's complement) LEB128")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode and decode Go-compatible varints"
    )
    parser.add_argument(
        "--port", "-p",
        help="Serial port for send/recv (e.g., /dev/ttyACM0)"
    )
    parser.add_argument("--baudrate", type=int, default=DEFAULT_BAUDRATE,
                        help="Serial baud rate")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                        help="Serial read timeout in seconds")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show individual bytes")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode an integer")
    encode_parser.add_argument("value", type=int, help="Integer to encode")
    _add_encoding_options(encode_parser)

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode hex bytes")
    decode_parser.add_argument("data", help="Hex bytes, e.g. \"ac 02\"")
    _add_encoding_options(decode_parser)

    # send command
    send_parser = subparsers.add_parser("send", help="Write a varint to --port")
    send_parser.add_argument("value", type=int, help="Integer to send")
    send_parser.add_argument("--signed", "-s", action="store_true",
                             help="Zigzag signed varint")

    # recv command
    recv_parser = subparsers.add_parser("recv", help="Read a varint from --port")
    recv_parser.add_argument("--signed", "-s", action="store_true",
                             help="Zigzag signed varint")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "encode":
            cmd_encode(args.value, _encoding(args), args.verbose)
            return
        if args.command == "decode":
            cmd_decode(args.data, _encoding(args), args.verbose)
            return
    except (VarintError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if not args.port:
        print(f"Error: {args.command} requires --port")
        sys.exit(1)

    try:
        port = SerialPort(args.port, baudrate=args.baudrate, timeout=args.timeout)
    except serial.SerialException as e:
        print(f"Error opening {args.port}: {e}")
        sys.exit(1)

    try:
        if args.command == "send":
            cmd_send(port, args.value, args.signed, args.verbose)
        elif args.command == "recv":
            cmd_recv(port, args.signed, args.verbose)
    except (VarintError, ValueError, serial.SerialException) as e:
        print(f"Error: {e}")
        sys.exit(1)
    finally:
        port.close()


if __name__ == "__main__":
    main()
