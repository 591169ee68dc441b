"""
CLI entry points for Fingerprint label previews.
"""

# Standard Library
import argparse
import pathlib
import sys
import time

# local repo modules
import fingerprint_label_preview as flp
import fingerprint_label_preview.config
import fingerprint_label_preview.pdf_export
import fingerprint_label_preview.preview
import fingerprint_label_preview.sample


PreviewConfig = flp.config.PreviewConfig
PreviewResult = flp.preview.PreviewResult

DEFAULT_ZOOM = flp.config.DEFAULT_ZOOM
DEFAULT_PIXEL_DENSITY = flp.config.DEFAULT_PIXEL_DENSITY
DEFAULT_ENCODING = flp.config.DEFAULT_ENCODING
DEFAULT_MAX_WARNINGS = flp.config.DEFAULT_MAX_WARNINGS
SAMPLE_OUTPUT_NAME = "sample_label.png"


#============================================
def default_output_path(args: argparse.Namespace) -> str:
	"""
	Pick the PNG path when none was given.

	Args:
		args: Parsed argparse namespace.

	Returns:
		Output PNG path.
	"""
	if args.sample or args.input in (None, "-"):
		return SAMPLE_OUTPUT_NAME
	return str(pathlib.Path(args.input).with_suffix(".png"))


#============================================
def build_config(args: argparse.Namespace) -> PreviewConfig:
	"""
	Build preview config from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		PreviewConfig.
	"""
	output_path = args.output_path
	if output_path is None:
		output_path = default_output_path(args)
	config = PreviewConfig(
		zoom=args.zoom,
		pixel_density=args.pixel_density,
		encoding=args.encoding,
		output_path=output_path,
		pdf_path=args.pdf_path,
		max_warnings=args.max_warnings,
	)
	return config


#============================================
def read_script(args: argparse.Namespace, encoding: str) -> str:
	"""
	Read the label script selected on the command line.

	Args:
		args: Parsed argparse namespace.
		encoding: Text encoding of the script file.

	Returns:
		Script text.
	"""
	if args.sample:
		return flp.sample.SAMPLE_SCRIPT
	if args.input == "-":
		return sys.stdin.read()
	return pathlib.Path(args.input).read_text(encoding=encoding)


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Argument list, defaults to sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Render a preview of a Fingerprint 4x6 label script.")
	parser.add_argument("input", nargs="?", default=None, help="Label script file, or - for stdin.")

	input_group = parser.add_argument_group("Input")
	input_group.add_argument("-s", "--sample", dest="sample", action="store_true", help="Render the bundled sample label.")
	input_group.add_argument("-e", "--encoding", dest="encoding", default=DEFAULT_ENCODING, help="Script file encoding.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", default=None, help="Output PNG path.")
	output_group.add_argument("-p", "--pdf", dest="pdf_path", default=None, help="Also write a PDF to this path.")
	output_group.add_argument(
		"-w",
		"--max-warnings",
		dest="max_warnings",
		type=int,
		default=DEFAULT_MAX_WARNINGS,
		help="Limit number of warnings printed.",
	)

	render_group = parser.add_argument_group("Rendering")
	render_group.add_argument("-z", "--zoom", dest="zoom", type=float, default=DEFAULT_ZOOM, help="Zoom factor.")
	render_group.add_argument(
		"-r",
		"--pixel-density",
		dest="pixel_density",
		type=float,
		default=DEFAULT_PIXEL_DENSITY,
		help="Device pixels per preview pixel.",
	)

	parser.set_defaults(sample=False)

	args = parser.parse_args(argv)
	if args.input is None and not args.sample:
		parser.error("an input script or --sample is required")
	if args.input is not None and args.sample:
		parser.error("give either an input script or --sample, not both")
	if args.zoom <= 0.0:
		parser.error("--zoom must be positive")
	if args.pixel_density <= 0.0:
		parser.error("--pixel-density must be positive")
	if args.max_warnings < 0:
		parser.error("--max-warnings must not be negative")
	return args


#============================================
def run_pipeline(args: argparse.Namespace) -> PreviewResult:
	"""
	Run the full pipeline from script text to preview files.

	Args:
		args: Parsed argparse namespace.

	Returns:
		PreviewResult.
	"""
	config = build_config(args)
	print("Fingerprint label preview")
	if args.sample:
		print("Input: bundled sample")
	else:
		print(f"Input: {args.input}")
	print(f"Output PNG: {config.output_path}")
	if config.pdf_path:
		print(f"Output PDF: {config.pdf_path}")
	print(f"Zoom: {config.zoom:.2f}x")
	print(f"Pixel density: {config.pixel_density}")

	start_time = time.perf_counter()
	script_text = read_script(args, config.encoding)
	result = flp.preview.build_preview(script_text, config.zoom, config.pixel_density)
	render_end = time.perf_counter()

	output_path = pathlib.Path(config.output_path)
	output_path.parent.mkdir(parents=True, exist_ok=True)
	result.image.save(output_path)
	print(f"Image written: {output_path} ({result.image.width}x{result.image.height})")

	if config.pdf_path:
		pdf_path = pathlib.Path(config.pdf_path)
		pdf_path.parent.mkdir(parents=True, exist_ok=True)
		flp.pdf_export.render_label_pdf(result.commands, pdf_path)
		print(f"PDF written: {pdf_path}")

	print(result.summary)
	for warning in result.warnings[:config.max_warnings]:
		print(warning)
	hidden = len(result.warnings) - config.max_warnings
	if hidden > 0:
		print(f"... {hidden} more warning(s) not shown")

	total_time = time.perf_counter() - start_time
	print(
		"Timing: render={:.2f}s total={:.2f}s".format(
			render_end - start_time,
			total_time,
		)
	)
	return result


#============================================
def main() -> None:
	"""
	Main entry point.
	"""
	args = parse_args()
	run_pipeline(args)
