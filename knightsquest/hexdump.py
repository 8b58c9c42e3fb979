"""Show the bytes of a program or sequential file as a hex listing.

Eleven bytes go on each line after the address of the first of them. A program
file begins with its two-byte load address, which sets the starting address.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

BYTES_PER_LINE = 0x0B


def format_address(address: int) -> str:
    """Return a 16-bit address as a dollar sign and four hex digits."""
    if not 0 <= address <= 0xFFFF:
        raise ValueError(f"address out of range: {address}")
    return f"${address:04X}"


def dump_lines(data, program: bool) -> list[str]:
    """Return the listing of a file's contents.

    After each full line a new address prefix begins, so a file whose length is
    a whole number of lines ends with an address alone.
    """
    raw = bytes(data)
    lines: list[str] = []
    address = 0
    if program:
        if len(raw) < 2:
            raise ValueError("a program file starts with a two-byte load address")
        low, high = raw[0], raw[1]
        address = low + high * 256
        lines.append(f"*=${high:02X}{low:02X}")
        raw = raw[2:]

    for start in range(0, len(raw), BYTES_PER_LINE):
        chunk = raw[start:start + BYTES_PER_LINE]
        hex_bytes = " ".join(f"{value:02X}" for value in chunk)
        lines.append(f"{format_address(address)}: {hex_bytes}")
        if len(chunk) < BYTES_PER_LINE:
            return lines
        address = (address + BYTES_PER_LINE) & 0xFFFF
    lines.append(f"{format_address(address)}:")
    return lines


def main(argv=None) -> int:
    """Print the hex listing of a file."""
    parser = argparse.ArgumentParser(prog="knightsquest-hexdump",
                                     description="Show a file as a hex listing.")
    parser.add_argument("file", type=Path, help="the file to show")
    parser.add_argument("-p", "--program", action="store_true",
                        help="the file is a program with a load address")
    args = parser.parse_args(argv)
    try:
        data = args.file.read_bytes()
        lines = dump_lines(data, args.program)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0