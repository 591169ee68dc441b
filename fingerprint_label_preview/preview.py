"""
Parse-and-render orchestration with status summaries.
"""

# Standard Library
import dataclasses

# PIP3 modules
import PIL.Image

# local repo modules
import fingerprint_label_preview as flp
import fingerprint_label_preview.config
import fingerprint_label_preview.render
import fingerprint_label_preview.script_parser


Command = flp.script_parser.Command

SUMMARY_WARNING_PREVIEW = flp.config.SUMMARY_WARNING_PREVIEW


@dataclasses.dataclass
class PreviewResult:
	commands: tuple[Command, ...]
	warnings: tuple[str, ...]
	image: PIL.Image.Image
	summary: str
	status: str


#============================================
def summarize(commands: tuple[Command, ...], warnings: tuple[str, ...]) -> str:
	"""
	Build the one-line status summary for a parse.

	Args:
		commands: Parsed commands.
		warnings: Parser warnings.

	Returns:
		Summary text.
	"""
	counts = flp.script_parser.count_commands(commands)
	summary = (
		f"Parsed {len(commands)} command(s): "
		f"text={counts['text']}, lines={counts['line']}, barcode={counts['barcode']}."
	)
	if warnings:
		shown = " | ".join(warnings[:SUMMARY_WARNING_PREVIEW])
		summary += f" Warnings: {len(warnings)} (showing first {SUMMARY_WARNING_PREVIEW}): {shown}"
	return summary


#============================================
def status_kind(warnings: tuple[str, ...]) -> str:
	"""
	Classify the status line.

	Args:
		warnings: Parser warnings.

	Returns:
		"warn" when there are warnings, "info" otherwise.
	"""
	if warnings:
		return "warn"
	return "info"


#============================================
def build_preview(
	script_text: str,
	zoom: float,
	pixel_density: float = 1.0,
) -> PreviewResult:
	"""
	Parse a script and render its preview.

	Args:
		script_text: Full script text.
		zoom: Preview zoom factor.
		pixel_density: Device pixels per preview pixel.

	Returns:
		PreviewResult with the image and status text.
	"""
	commands, warnings = flp.script_parser.parse_script(script_text)
	image = flp.render.render_label(commands, zoom, pixel_density)
	result = PreviewResult(
		commands=commands,
		warnings=warnings,
		image=image,
		summary=summarize(commands, warnings),
		status=status_kind(warnings),
	)
	return result
