"""
Shared configuration and constants.
"""

# Standard Library
import dataclasses
import types


DOTS_PER_INCH = 406
LABEL_WIDTH_INCHES = 4.0
LABEL_HEIGHT_INCHES = 6.0
LABEL_WIDTH_DOTS = 1624
LABEL_HEIGHT_DOTS = 2436
POINTS_PER_INCH = 72.0

DEFAULT_ZOOM = 0.5
DEFAULT_PIXEL_DENSITY = 1.0
DEFAULT_ENCODING = "utf-8"
DEFAULT_MAX_WARNINGS = 20
SUMMARY_WARNING_PREVIEW = 2

# base pixel size per Fingerprint font id
FONT_BASE_PX = types.MappingProxyType({
	1: 18,
	2: 22,
	3: 28,
	4: 34,
	5: 40,
	6: 50,
	7: 60,
	8: 86,
})
DEFAULT_FONT_PX = 22
BOLD_FONT_ID_MIN = 6
# glyphs beyond this pixel size only clip
MAX_FONT_PX = 4096

PAPER_COLOR = (255, 255, 255)
INK_COLOR = (0, 0, 0)
# rgba(0, 0, 0, 0.25) over white
BORDER_COLOR = (191, 191, 191)
BORDER_INSET = 1
BORDER_WIDTH = 2

BARCODE_MIN_HEIGHT = 40
BARCODE_DEFAULT_HEIGHT = 200
BARCODE_MIN_WIDTH = 220
BARCODE_DEFAULT_MODULE = 2
BARCODE_WIDTH_PER_CHAR = 8
BARCODE_RIGHT_MARGIN = 10
BARCODE_OUTLINE_WIDTH = 2
BARCODE_QUIET_ZONE = 6
BARCODE_BAR_INSET = 4
BARCODE_CAPTION_SIZE = 18
BARCODE_CAPTION_GAP = 6
BARCODE_CAPTION_BOTTOM_MARGIN = 4

FONT_REGULAR_CANDIDATES = (
	"DejaVuSans.ttf",
	"LiberationSans-Regular.ttf",
	"Arial.ttf",
	"/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
	"/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
	"/Library/Fonts/Arial.ttf",
)
FONT_BOLD_CANDIDATES = (
	"DejaVuSans-Bold.ttf",
	"LiberationSans-Bold.ttf",
	"Arialbd.ttf",
	"/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
	"/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
	"/Library/Fonts/Arial Bold.ttf",
)
FONT_MONO_CANDIDATES = (
	"DejaVuSansMono-Bold.ttf",
	"LiberationMono-Bold.ttf",
	"Consolas.ttf",
	"/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Bold.ttf",
	"/usr/share/fonts/truetype/liberation/LiberationMono-Bold.ttf",
)

PDF_FONT_REGULAR = "Helvetica"
PDF_FONT_BOLD = "Helvetica-Bold"
PDF_FONT_MONO = "Courier-Bold"


@dataclasses.dataclass
class PreviewConfig:
	zoom: float
	pixel_density: float
	encoding: str
	output_path: str | None
	pdf_path: str | None
	max_warnings: int


#============================================
def dots_to_points(value: float) -> float:
	"""
	Convert printer dots to PDF points.

	Args:
		value: Dots value.

	Returns:
		Points value.
	"""
	return value * POINTS_PER_INCH / DOTS_PER_INCH
