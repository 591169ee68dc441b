"""
Fingerprint label script parsing.

Only the drawing subset used by shipping label layouts is recognized:
text fields (!F T), line boxes (!F B) and barcodes (!F C). Setup
commands are acknowledged and ignored, anything else that starts with
the drawing prefix is reported as a warning.
"""

# Standard Library
import dataclasses
import re
import typing


COMMENT_PREFIX = "//"
DRAW_PREFIX = "!F"
CONTROL_PREFIXES = ("!Y", "!V", "!P")
CONTROL_MARKERS = ("!C",)
LINE_DIRECTIONS = ("N", "E")
# files saved with a BOM carry it on the first line
BYTE_ORDER_MARK = "\ufeff"

LINE_BREAK_PATTERN = re.compile(r"\r?\n")

_SIGNED = r"(-?[0-9]+)"
_UNSIGNED = r"([0-9]+)"
_LETTER = r"([A-Z])"
_QUOTED = r"\"([^\"]*)\""

# !F T S <Y> <X> <orient> <font> <xMul> <yMul> "<text>"
TEXT_PATTERN = re.compile(
	r"!F\s+T\s+S\s+" + _SIGNED + r"\s+" + _SIGNED + r"\s+" + _LETTER
	+ r"\s+" + _UNSIGNED + r"\s+" + _UNSIGNED + r"\s+" + _UNSIGNED
	+ r"\s+" + _QUOTED + r"\s*"
)
# !F B <dir> <Y> <X> L <thickness> <length>
LINE_PATTERN = re.compile(
	r"!F\s+B\s+" + _LETTER + r"\s+" + _SIGNED + r"\s+" + _SIGNED
	+ r"\s+L\s+" + _UNSIGNED + r"\s+" + _UNSIGNED + r"\s*"
)
# !F C S <Y> <X> <orient> <height> <module> <extra> "<data>"
BARCODE_PATTERN = re.compile(
	r"!F\s+C\s+S\s+" + _SIGNED + r"\s+" + _SIGNED + r"\s+" + _LETTER
	+ r"\s+" + _UNSIGNED + r"\s+" + _UNSIGNED + r"\s+" + _UNSIGNED
	+ r"\s+" + _QUOTED + r"\s*"
)


@dataclasses.dataclass(frozen=True)
class TextCommand:
	kind: typing.ClassVar[str] = "text"
	x: int
	y: int
	line_no: int
	orient: str
	font_id: int
	x_mul: int
	y_mul: int
	value: str = ""


@dataclasses.dataclass(frozen=True)
class LineCommand:
	kind: typing.ClassVar[str] = "line"
	x: int
	y: int
	line_no: int
	direction: str
	thickness: int
	length: int


@dataclasses.dataclass(frozen=True)
class BarcodeCommand:
	kind: typing.ClassVar[str] = "barcode"
	x: int
	y: int
	line_no: int
	orient: str
	height: int
	module: int
	extra: int
	value: str = ""


Command = TextCommand | LineCommand | BarcodeCommand
# a builder returns either a command or a warning for a matched line
BuildResult = tuple[Command | None, str | None]


#============================================
def build_text_command(match: re.Match, line_no: int) -> BuildResult:
	"""
	Build a text command from a TEXT_PATTERN match.

	Args:
		match: Regex match of the whole line.
		line_no: 1-based source line number.

	Returns:
		Tuple of (command, warning).
	"""
	command = TextCommand(
		y=int(match.group(1)),
		x=int(match.group(2)),
		line_no=line_no,
		orient=match.group(3),
		font_id=int(match.group(4)),
		x_mul=int(match.group(5)),
		y_mul=int(match.group(6)),
		value=match.group(7) or "",
	)
	return (command, None)


#============================================
def build_line_command(match: re.Match, line_no: int) -> BuildResult:
	"""
	Build a line command from a LINE_PATTERN match.

	Only north and east strokes are drawn; any other direction turns
	into a warning.

	Args:
		match: Regex match of the whole line.
		line_no: 1-based source line number.

	Returns:
		Tuple of (command, warning).
	"""
	direction = match.group(1)
	if direction not in LINE_DIRECTIONS:
		warning = f"Line {line_no}: unsupported !F B direction '{direction}' (only N/E rendered)."
		return (None, warning)
	command = LineCommand(
		y=int(match.group(2)),
		x=int(match.group(3)),
		line_no=line_no,
		direction=direction,
		thickness=int(match.group(4)),
		length=int(match.group(5)),
	)
	return (command, None)


#============================================
def build_barcode_command(match: re.Match, line_no: int) -> BuildResult:
	"""
	Build a barcode command from a BARCODE_PATTERN match.

	Args:
		match: Regex match of the whole line.
		line_no: 1-based source line number.

	Returns:
		Tuple of (command, warning).
	"""
	command = BarcodeCommand(
		y=int(match.group(1)),
		x=int(match.group(2)),
		line_no=line_no,
		orient=match.group(3),
		height=int(match.group(4)),
		module=int(match.group(5)),
		extra=int(match.group(6)),
		value=match.group(7) or "",
	)
	return (command, None)


# first full match wins
LINE_MATCHERS: tuple[tuple[re.Pattern, typing.Callable[[re.Match, int], BuildResult]], ...] = (
	(TEXT_PATTERN, build_text_command),
	(LINE_PATTERN, build_line_command),
	(BARCODE_PATTERN, build_barcode_command),
)


#============================================
def is_control_command(line: str) -> bool:
	"""
	Check whether a stripped line is a setup/control command.

	Args:
		line: Stripped script line.

	Returns:
		True for commands that configure the printer but draw nothing.
	"""
	if line in CONTROL_MARKERS:
		return True
	return line.startswith(CONTROL_PREFIXES)


#============================================
def is_silent_line(line: str) -> bool:
	"""
	Check whether a stripped line is skipped without a warning.

	Args:
		line: Stripped script line.

	Returns:
		True for blank lines, comments, control commands and lines
		outside the drawing command family.
	"""
	if not line:
		return True
	if line.startswith(COMMENT_PREFIX):
		return True
	if is_control_command(line):
		return True
	return not line.startswith(DRAW_PREFIX)


#============================================
def classify_line(raw: str, line_no: int) -> BuildResult:
	"""
	Classify one script line.

	Args:
		raw: Source line without its line break.
		line_no: 1-based source line number.

	Returns:
		Tuple of (command, warning); both None for silent lines.
	"""
	line = raw.strip().strip(BYTE_ORDER_MARK).strip()
	if is_silent_line(line):
		return (None, None)
	for pattern, builder in LINE_MATCHERS:
		match = pattern.fullmatch(line)
		if match is not None:
			return builder(match, line_no)
	return (None, f"Line {line_no}: unparsed/ignored command: {raw}")


#============================================
def split_lines(script_text: str) -> list[str]:
	"""
	Split script text on LF or CRLF line breaks.

	Args:
		script_text: Full script text.

	Returns:
		List of lines without line breaks.
	"""
	return LINE_BREAK_PATTERN.split(script_text)


#============================================
def parse_script(script_text: str) -> tuple[tuple[Command, ...], tuple[str, ...]]:
	"""
	Parse a Fingerprint label script.

	Args:
		script_text: Full script text.

	Returns:
		Tuple of (commands, warnings) in source order.
	"""
	commands: list[Command] = []
	warnings: list[str] = []
	for index, raw in enumerate(split_lines(script_text)):
		command, warning = classify_line(raw, index + 1)
		if command is not None:
			commands.append(command)
		if warning is not None:
			warnings.append(warning)
	return (tuple(commands), tuple(warnings))


#============================================
def count_commands(commands: typing.Iterable[Command]) -> dict[str, int]:
	"""
	Count commands by kind.

	Args:
		commands: Parsed commands.

	Returns:
		Counts keyed by "text", "line" and "barcode".
	"""
	counts = {"text": 0, "line": 0, "barcode": 0}
	for command in commands:
		counts[command.kind] = counts.get(command.kind, 0) + 1
	return counts
