"""
Vector PDF export of parsed label commands.

PDF space shares the printer's bottom-left origin, so commands are drawn
in printer dots under a single dots-to-points scale.
"""

# Standard Library
import pathlib
import typing

# PIP3 modules
import reportlab.pdfbase.pdfmetrics
import reportlab.pdfgen.canvas

# local repo modules
import fingerprint_label_preview as flp
import fingerprint_label_preview.config
import fingerprint_label_preview.geometry
import fingerprint_label_preview.render
import fingerprint_label_preview.script_parser


TextCommand = flp.script_parser.TextCommand
LineCommand = flp.script_parser.LineCommand
BarcodeCommand = flp.script_parser.BarcodeCommand
Command = flp.script_parser.Command

LABEL_WIDTH_DOTS = flp.config.LABEL_WIDTH_DOTS
LABEL_HEIGHT_DOTS = flp.config.LABEL_HEIGHT_DOTS
BORDER_INSET = flp.config.BORDER_INSET
BORDER_WIDTH = flp.config.BORDER_WIDTH
BARCODE_OUTLINE_WIDTH = flp.config.BARCODE_OUTLINE_WIDTH
BARCODE_CAPTION_SIZE = flp.config.BARCODE_CAPTION_SIZE
PDF_FONT_REGULAR = flp.config.PDF_FONT_REGULAR
PDF_FONT_BOLD = flp.config.PDF_FONT_BOLD
PDF_FONT_MONO = flp.config.PDF_FONT_MONO


#============================================
def page_size() -> tuple[float, float]:
	"""
	Compute the PDF page size of the label.

	Returns:
		Tuple of (width, height) in points.
	"""
	width = flp.config.dots_to_points(LABEL_WIDTH_DOTS)
	height = flp.config.dots_to_points(LABEL_HEIGHT_DOTS)
	return (width, height)


#============================================
def fill_native_box(
	pdf: reportlab.pdfgen.canvas.Canvas,
	box: tuple[float, float, float, float],
) -> None:
	"""
	Fill a raster-space box, converted to printer space.

	Args:
		pdf: ReportLab canvas.
		box: Raster box in dots.
	"""
	x0, y0, x1, y1 = flp.geometry.raster_box_to_native(box)
	pdf.rect(x0, y0, x1 - x0, y1 - y0, stroke=0, fill=1)


#============================================
def draw_paper(pdf: reportlab.pdfgen.canvas.Canvas) -> None:
	"""
	Draw the label background and its edge.

	Args:
		pdf: ReportLab canvas.
	"""
	pdf.setFillColorRGB(1.0, 1.0, 1.0)
	pdf.rect(0, 0, LABEL_WIDTH_DOTS, LABEL_HEIGHT_DOTS, stroke=0, fill=1)
	pdf.setStrokeColorRGB(0.0, 0.0, 0.0, alpha=0.25)
	pdf.setLineWidth(BORDER_WIDTH)
	pdf.rect(
		BORDER_INSET,
		BORDER_INSET,
		LABEL_WIDTH_DOTS - 2 * BORDER_INSET,
		LABEL_HEIGHT_DOTS - 2 * BORDER_INSET,
		stroke=1,
		fill=0,
	)
	pdf.setStrokeColorRGB(0.0, 0.0, 0.0, alpha=1.0)


#============================================
def draw_line_command(pdf: reportlab.pdfgen.canvas.Canvas, command: LineCommand) -> None:
	"""
	Draw a line command as a flat-capped stroke.

	Args:
		pdf: ReportLab canvas.
		command: Line command.
	"""
	if command.length <= 0:
		return
	start, end = flp.render.line_endpoints(command)
	x0, y0 = flp.geometry.to_native_space(start[0], start[1])
	x1, y1 = flp.geometry.to_native_space(end[0], end[1])
	pdf.setStrokeColorRGB(0.0, 0.0, 0.0)
	pdf.setLineCap(0)
	pdf.setLineWidth(max(1, command.thickness))
	pdf.line(x0, y0, x1, y1)


#============================================
def draw_barcode_placeholder(pdf: reportlab.pdfgen.canvas.Canvas, command: BarcodeCommand) -> None:
	"""
	Draw a barcode placeholder with its caption.

	Args:
		pdf: ReportLab canvas.
		command: Barcode command.
	"""
	box = flp.render.barcode_box(command)
	x0, y0, x1, y1 = flp.geometry.raster_box_to_native(box)
	pdf.setFillColorRGB(1.0, 1.0, 1.0)
	pdf.setStrokeColorRGB(0.0, 0.0, 0.0)
	pdf.setLineWidth(BARCODE_OUTLINE_WIDTH)
	pdf.rect(x0, y0, x1 - x0, y1 - y0, stroke=1, fill=1)

	pdf.setFillColorRGB(0.0, 0.0, 0.0)
	for bar in flp.render.barcode_bar_boxes(command, box):
		fill_native_box(pdf, bar)

	if not command.value:
		return
	caption_top = flp.render.barcode_caption_top(box)
	if caption_top is None:
		return
	ascent = reportlab.pdfbase.pdfmetrics.getAscent(PDF_FONT_MONO) * BARCODE_CAPTION_SIZE / 1000.0
	baseline = LABEL_HEIGHT_DOTS - caption_top - ascent
	pdf.setFont(PDF_FONT_MONO, BARCODE_CAPTION_SIZE)
	pdf.drawString(x0, baseline, command.value)


#============================================
def draw_text_command(pdf: reportlab.pdfgen.canvas.Canvas, command: TextCommand) -> None:
	"""
	Draw a text command at its baseline origin.

	Args:
		pdf: ReportLab canvas.
		command: Text command.
	"""
	if not command.value:
		return
	font_name = PDF_FONT_REGULAR
	if flp.render.text_face(command) == "bold":
		font_name = PDF_FONT_BOLD
	pdf.saveState()
	pdf.setFillColorRGB(0.0, 0.0, 0.0)
	pdf.translate(command.x, command.y)
	pdf.scale(flp.render.text_x_scale(command), 1.0)
	pdf.setFont(font_name, flp.render.resolve_font_px(command))
	pdf.drawString(0, 0, command.value)
	pdf.restoreState()


#============================================
def render_label_pdf(
	commands: typing.Iterable[Command],
	output_path: pathlib.Path,
) -> pathlib.Path:
	"""
	Write commands to a single-page PDF at the label's physical size.

	Args:
		commands: Parsed commands.
		output_path: Output PDF path.

	Returns:
		The output path.
	"""
	commands = list(commands)
	output_path = pathlib.Path(output_path)
	pdf = reportlab.pdfgen.canvas.Canvas(str(output_path), pagesize=page_size())
	dot_scale = flp.config.dots_to_points(1.0)
	pdf.scale(dot_scale, dot_scale)

	draw_paper(pdf)
	for command in commands:
		if isinstance(command, LineCommand):
			draw_line_command(pdf, command)
	for command in commands:
		if isinstance(command, BarcodeCommand):
			draw_barcode_placeholder(pdf, command)
	for command in commands:
		if isinstance(command, TextCommand):
			draw_text_command(pdf, command)

	pdf.showPage()
	pdf.save()
	return output_path
