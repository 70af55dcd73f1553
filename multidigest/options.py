"""Command-line option parsing for the disc dumping front end."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

PROGRAM_NAME = "FriiDump"
VERSION = "0.5.3.1"

_U32_MASK = 0xFFFFFFFF
_UNSET = _U32_MASK
MAX_COMMAND = 4
MAX_DISC_TYPE = 3

EXIT_HELP = 1
EXIT_BAD_OPTION = 7

NO_ARGUMENT = 0
REQUIRED_ARGUMENT = 1
OPTIONAL_ARGUMENT = 2

_LONG_OPTIONS: Tuple[Tuple[str, int, str], ...] = (
    ("help", NO_ARGUMENT, "h"),
    ("autodump", NO_ARGUMENT, "a"),
    ("gui", NO_ARGUMENT, "g"),
    ("device", REQUIRED_ARGUMENT, "d"),
    ("raw", REQUIRED_ARGUMENT, "r"),
    ("iso", REQUIRED_ARGUMENT, "i"),
    ("unscramble", REQUIRED_ARGUMENT, "u"),
    ("nohash", NO_ARGUMENT, "H"),
    ("resume", NO_ARGUMENT, "s"),
    ("method0", OPTIONAL_ARGUMENT, "0"),
    ("method1", OPTIONAL_ARGUMENT, "1"),
    ("method2", OPTIONAL_ARGUMENT, "2"),
    ("method3", OPTIONAL_ARGUMENT, "3"),
    ("method4", OPTIONAL_ARGUMENT, "4"),
    ("method5", OPTIONAL_ARGUMENT, "5"),
    ("method6", OPTIONAL_ARGUMENT, "6"),
    ("method7", NO_ARGUMENT, "7"),
    ("method8", NO_ARGUMENT, "8"),
    ("method9", NO_ARGUMENT, "9"),
    ("stop", NO_ARGUMENT, "p"),
    ("command", REQUIRED_ARGUMENT, "c"),
    ("startsector", REQUIRED_ARGUMENT, "t"),
    ("size", REQUIRED_ARGUMENT, "S"),
    ("speed", REQUIRED_ARGUMENT, "x"),
    ("type", REQUIRED_ARGUMENT, "T"),
    ("allmethods", NO_ARGUMENT, "A"),
)

_SHORT_OPTIONS = "hpagd:r:i:u:Hs0::1::2::3::4::5::6::789c:t:S:x:T:A"


def _parse_short_spec(spec: str) -> dict:
    table = {}
    for match in re.finditer(r"(\w)(:{0,2})", spec):
        table[match.group(1)] = len(match.group(2))
    return table


_SHORT_TABLE = _parse_short_spec(_SHORT_OPTIONS)

_HELP_TEXT = (
    "\n"
    "Available command line options:\n"
    "\n"
    " -h, --help\t\t\tShow this help\n"
    " -a, --autodump\t\t\tDump the disc to an ISO file with an\n"
    "\t\t\t\tautomatically-generated name, resuming the dump\n"
    "\t\t\t\tif possible\n"
    " -g, --gui\t\t\tUse more verbose output that can be easily\n"
    "\t\t\t\tparsed by a GUI frontend\n"
    " -d, --device <device>\t\tDump disc from device <device>\n"
    " -p, --stop\t\t\tInstruct device to stop disc rotation\n"
    " -c, --command <nr>\t\tForce memory dump command:\n"
    "\t\t\t\t0 - vanilla 2064\n"
    "\t\t\t\t1 - vanilla 2384\n"
    "\t\t\t\t2 - Hitachi\n"
    "\t\t\t\t3 - Lite-On\n"
    "\t\t\t\t4 - Renesas\n"
    " -x, --speed <x>\t\tSet streaming speed (1, 24, 32, 64, etc.,\n"
    "\t\t\t\twhere 1 = 150 KiB/s and so on)\n"
    " -T, --type <nr>\t\tForce disc type:\n"
    "\t\t\t\t0 - GameCube\n"
    "\t\t\t\t1 - Wii\n"
    "\t\t\t\t2 - Wii_DL\n"
    "\t\t\t\t3 - DVD\n"
    " -S, --size <sectors>\t\tForce disc size\n"
    " -r, --raw <file>\t\tOutput to file <file> in raw format (2064-byte\n"
    "\t\t\t\tsectors)\n"
    " -i, --iso <file>\t\tOutput to file <file> in ISO format (2048-byte\n"
    "\t\t\t\tsectors)\n"
    " -u, --unscramble <file>\tConvert (unscramble) raw image contained in\n"
    "\t\t\t\t<file> to ISO format\n"
    " -H, --nohash\t\t\tDo not compute CRC32/MD5/SHA-1 hashes\n"
    "\t\t\t\tfor generated files\n"
    " -s, --resume\t\t\tResume partial dump\n"
    "\t\t\t\t-  General  -----------------------------------\n"
    " -0, --method0[=<req>,<exp>]\tUse dumping method 0 (Optional argument\n"
    "\t\t\t\tspecifies how many sectors to request from disc\n"
    "\t\t\t\tand read from cache at a time. Values should be\n"
    "\t\t\t\tseparated with a comma. Default 16,16)\n"
    "\t\t\t\t-  Non-Streaming  -----------------------------\n"
    " -1, --method1[=<req>,<exp>]\tUse dumping method 1 (Default 16,16)\n"
    " -2, --method2[=<req>,<exp>]\tUse dumping method 2 (Default 16,16)\n"
    " -3, --method3[=<req>,<exp>]\tUse dumping method 3 (Default 16,16)\n"
    "\t\t\t\t-  Streaming  ---------------------------------\n"
    " -4, --method4[=<req>,<exp>]\tUse dumping method 4 (Default 27,27)\n"
    " -5, --method5[=<req>,<exp>]\tUse dumping method 5 (Default 27,27)\n"
    " -6, --method6[=<req>,<exp>]\tUse dumping method 6 (Default 27,27)\n"
    "\t\t\t\t-  Hitachi  -----------------------------------\n"
    " -7, --method7\t\t\tUse dumping method 7 (Read and dump 5 blocks\n"
    "\t\t\t\tat a time, using streaming read)\n"
    " -8, --method8\t\t\tUse dumping method 8 (Read and dump 5 blocks\n"
    "\t\t\t\tat a time, using streaming read, using DMA)\n"
    " -9, --method9\t\t\tUse dumping method 9 (Read and dump 5 blocks\n"
    "\t\t\t\tat a time, using streaming read, using DMA and\n"
    "\t\t\t\tsome speed tricks)\n"
    " -A, --allmethods\t\tTry all known methods and commands until\n"
    "\t\t\t\tone works.\n"
)


class UsageError(Exception):
    """The command line cannot be acted upon."""

    def __init__(self, message: str, exit_status: int = EXIT_HELP, show_help: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.exit_status = exit_status
        self.show_help = show_help


@dataclass
class Options:
    """Settings chosen on the command line; ``None`` means not given."""

    device: Optional[str] = None
    autodump: bool = False
    gui: bool = False
    raw_in: Optional[str] = None
    raw_out: Optional[str] = None
    iso_out: Optional[str] = None
    resume: bool = False
    dump_method: Optional[int] = None
    command: Optional[int] = None
    start_sector: Optional[int] = None
    sectors_no: Optional[int] = None
    speed: Optional[int] = None
    disctype: Optional[int] = None
    sec_disc: Optional[int] = None
    sec_mem: Optional[int] = None
    no_hashing: bool = False
    no_unscrambling: bool = False
    no_flushing: bool = False
    stop_unit: bool = False
    allmethods: bool = False
    extra_args: List[str] = field(default_factory=list)


def help_text() -> str:
    """Return the option summary shown for -h and bad usage."""
    return _HELP_TEXT


def welcome_text() -> str:
    """Return the banner printed at start-up."""
    return (
        f"{PROGRAM_NAME} {VERSION}\n"
        "This software comes with ABSOLUTELY NO WARRANTY.\n"
        "This is free software, and you are welcome to redistribute it\n"
        "under certain conditions; see COPYING for details.\n"
        "\n"
    )


def _atol(text: str) -> int:
    """Parse a leading integer the lenient way: junk yields 0."""
    match = re.match(r"[ \t\n\r\f\v]*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _u32(value: int) -> Optional[int]:
    """Wrap to an unsigned 32-bit value; the all-ones value means unset."""
    value &= _U32_MASK
    return None if value == _UNSET else value


def _help_error() -> UsageError:
    return UsageError(help_text(), EXIT_HELP, show_help=True)


def _bad_option(message: str) -> UsageError:
    return UsageError(message, EXIT_BAD_OPTION)


def _scan(args: Sequence[str]) -> Iterator[Tuple[Optional[str], Optional[str]]]:
    """Yield (option key, argument) pairs in order; non-options have key None."""
    index = 0
    while index < len(args):
        arg = args[index]
        index += 1
        if arg == "--":
            for rest in args[index:]:
                yield None, rest
            return
        if arg.startswith("--"):
            name, has_eq, value = arg[2:].partition("=")
            exact = [opt for opt in _LONG_OPTIONS if opt[0] == name]
            candidates = exact or [opt for opt in _LONG_OPTIONS if opt[0].startswith(name)]
            if not candidates:
                raise _bad_option(f"unrecognized option '--{name}'")
            if len(candidates) > 1:
                raise _bad_option(f"option '{arg}' is ambiguous")
            long_name, has_arg, key = candidates[0]
            if has_eq:
                if has_arg == NO_ARGUMENT:
                    raise _bad_option(f"option '--{long_name}' doesn't allow an argument")
                yield key, value
            elif has_arg == REQUIRED_ARGUMENT:
                if index >= len(args):
                    raise _bad_option(f"option '{arg}' requires an argument")
                yield key, args[index]
                index += 1
            else:
                yield key, None
        elif arg.startswith("-") and len(arg) > 1:
            position = 1
            while position < len(arg):
                char = arg[position]
                kind = _SHORT_TABLE.get(char)
                if kind is None:
                    raise _bad_option(f"invalid option -- {char}")
                rest = arg[position + 1:]
                if kind == NO_ARGUMENT:
                    yield char, None
                    position += 1
                    continue
                if kind == REQUIRED_ARGUMENT and not rest:
                    if index >= len(args):
                        raise _bad_option(f"option requires an argument -- {char}")
                    rest = args[index]
                    index += 1
                yield char, rest or None
                break
        else:
            yield None, arg


def _apply_method(options: Options, key: str, value: Optional[str]) -> None:
    options.dump_method = int(key)
    if value is None:
        return
    tokens = [token for token in value.split(",") if token]
    if len(tokens) < 2:
        raise _help_error()
    digit = re.search(r"\d", tokens[0])
    if digit is None:
        raise _help_error()
    options.sec_disc = _u32(_atol(tokens[0][digit.start():]))
    options.sec_mem = _u32(_atol(tokens[1]))


def _bounded(value: str, limit: int) -> int:
    number = _atol(value) & _U32_MASK
    if number > limit:
        raise _help_error()
    return number


def _apply(options: Options, key: str, value: Optional[str]) -> None:
    if key == "h":
        raise _help_error()
    if key == "p":
        options.stop_unit = True
    elif key == "a":
        options.autodump = True
        options.resume = True
    elif key == "g":
        options.gui = True
    elif key == "d":
        options.device = value
    elif key == "r":
        options.raw_out = value
    elif key == "i":
        options.iso_out = value
    elif key == "u":
        options.raw_in = value
    elif key == "H":
        options.no_hashing = True
    elif key == "s":
        options.resume = True
    elif key in "0123456":
        _apply_method(options, key, value)
    elif key in "789":
        options.dump_method = int(key)
    elif key == "c":
        options.command = _bounded(value or "", MAX_COMMAND)
    elif key == "t":
        options.start_sector = _u32(_atol(value or ""))
    elif key == "S":
        options.sectors_no = _u32(_atol(value or ""))
    elif key == "x":
        options.speed = _u32(_atol(value or ""))
    elif key == "T":
        options.disctype = _bounded(value or "", MAX_DISC_TYPE)
    elif key == "A":
        options.allmethods = True
        options.resume = True


def _check(options: Options) -> None:
    if not options.device and not options.raw_in:
        raise UsageError("No operation specified. Please use the -d or -u options.")
    if options.raw_in and options.raw_out:
        raise UsageError(
            "Are you sure you want to convert a raw image to another raw image? ;)\n"
            "Take a look at the -i and -a options!"
        )
    if options.autodump and (options.raw_out or options.iso_out):
        raise UsageError("The -r and -i options cannot be used together with -a.")


def parse_options(argv: Optional[Sequence[str]] = None) -> Options:
    """Parse arguments (without the program name) into :class:`Options`.

    Raises :class:`UsageError` carrying the exit status and message to show.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        raise _help_error()
    options = Options()
    for key, value in _scan(args):
        if key is None:
            options.extra_args.append(value or "")
        else:
            _apply(options, key, value)
    if options.extra_args:
        sys.stderr.write("WARNING: Extra parameters ignored\n")
    _check(options)
    return options