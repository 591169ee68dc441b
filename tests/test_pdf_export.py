import pathlib

import fitz
import PIL.Image
import pypdf

import fingerprint_label_preview.pdf_export as pdf_export
import fingerprint_label_preview.sample
import fingerprint_label_preview.script_parser as script_parser


DOTS_PER_INCH = 406
INK_THRESHOLD = 128


#============================================
def _render_pdf_first_page(path: pathlib.Path) -> PIL.Image.Image:
	"""
	Render the first page of a PDF at printer resolution.

	Args:
		path: PDF path.

	Returns:
		PIL image.
	"""
	document = fitz.open(path)
	page = document[0]
	scale = DOTS_PER_INCH / 72.0
	matrix = fitz.Matrix(scale, scale)
	pixmap = page.get_pixmap(matrix=matrix, alpha=False)
	image = PIL.Image.frombytes("RGB", [pixmap.width, pixmap.height], pixmap.samples)
	document.close()
	return image


#============================================
def test_page_size_is_four_by_six_inches() -> None:
	"""
	The label page is 288 x 432 points.
	"""
	width, height = pdf_export.page_size()
	assert abs(width - 288.0) < 0.001
	assert abs(height - 432.0) < 0.001


#============================================
def test_sample_pdf_written(tmp_path: pathlib.Path) -> None:
	"""
	The sample exports to a single 4x6 page carrying its text.
	"""
	commands, _warnings = script_parser.parse_script(fingerprint_label_preview.sample.SAMPLE_SCRIPT)
	output_path = tmp_path / "sample.pdf"
	result = pdf_export.render_label_pdf(commands, output_path)
	assert result == output_path
	assert output_path.stat().st_size > 0

	reader = pypdf.PdfReader(str(output_path))
	assert len(reader.pages) == 1
	page = reader.pages[0]
	assert abs(float(page.mediabox.width) - 288.0) < 0.01
	assert abs(float(page.mediabox.height) - 432.0) < 0.01
	text = page.extract_text()
	assert "ILSE" in text
	assert "Kolli" in text


#============================================
def test_pdf_line_lands_in_printer_space(tmp_path: pathlib.Path) -> None:
	"""
	Rasterized at printer resolution, a north stroke lands where the
	raster preview puts it.
	"""
	commands, _warnings = script_parser.parse_script("!F B N 757 50 L 5 990")
	output_path = tmp_path / "line.pdf"
	pdf_export.render_label_pdf(commands, output_path)
	gray = _render_pdf_first_page(output_path).convert("L")
	# raster y for native y 1200 is 2436 - 1200
	assert gray.getpixel((50, 1236)) < INK_THRESHOLD
	assert gray.getpixel((70, 1236)) > INK_THRESHOLD
	assert gray.getpixel((50, 1600)) < INK_THRESHOLD
	assert gray.getpixel((50, 600)) > INK_THRESHOLD
