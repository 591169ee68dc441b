"""
Raster rendering of parsed label commands.
"""

# Standard Library
import functools
import math
import typing

# PIP3 modules
import PIL.Image
import PIL.ImageDraw
import PIL.ImageFont

# local repo modules
import fingerprint_label_preview as flp
import fingerprint_label_preview.config
import fingerprint_label_preview.geometry
import fingerprint_label_preview.pattern
import fingerprint_label_preview.script_parser


TextCommand = flp.script_parser.TextCommand
LineCommand = flp.script_parser.LineCommand
BarcodeCommand = flp.script_parser.BarcodeCommand
Command = flp.script_parser.Command

to_raster_space = flp.geometry.to_raster_space
scale_box = flp.geometry.scale_box

LABEL_WIDTH_DOTS = flp.config.LABEL_WIDTH_DOTS
LABEL_HEIGHT_DOTS = flp.config.LABEL_HEIGHT_DOTS
FONT_BASE_PX = flp.config.FONT_BASE_PX
DEFAULT_FONT_PX = flp.config.DEFAULT_FONT_PX
BOLD_FONT_ID_MIN = flp.config.BOLD_FONT_ID_MIN
MAX_FONT_PX = flp.config.MAX_FONT_PX
PAPER_COLOR = flp.config.PAPER_COLOR
INK_COLOR = flp.config.INK_COLOR
BORDER_COLOR = flp.config.BORDER_COLOR
BORDER_INSET = flp.config.BORDER_INSET
BORDER_WIDTH = flp.config.BORDER_WIDTH
BARCODE_MIN_HEIGHT = flp.config.BARCODE_MIN_HEIGHT
BARCODE_DEFAULT_HEIGHT = flp.config.BARCODE_DEFAULT_HEIGHT
BARCODE_MIN_WIDTH = flp.config.BARCODE_MIN_WIDTH
BARCODE_DEFAULT_MODULE = flp.config.BARCODE_DEFAULT_MODULE
BARCODE_WIDTH_PER_CHAR = flp.config.BARCODE_WIDTH_PER_CHAR
BARCODE_RIGHT_MARGIN = flp.config.BARCODE_RIGHT_MARGIN
BARCODE_OUTLINE_WIDTH = flp.config.BARCODE_OUTLINE_WIDTH
BARCODE_QUIET_ZONE = flp.config.BARCODE_QUIET_ZONE
BARCODE_BAR_INSET = flp.config.BARCODE_BAR_INSET
BARCODE_CAPTION_SIZE = flp.config.BARCODE_CAPTION_SIZE
BARCODE_CAPTION_GAP = flp.config.BARCODE_CAPTION_GAP
BARCODE_CAPTION_BOTTOM_MARGIN = flp.config.BARCODE_CAPTION_BOTTOM_MARGIN

FONT_CANDIDATES = {
	"regular": flp.config.FONT_REGULAR_CANDIDATES,
	"bold": flp.config.FONT_BOLD_CANDIDATES,
	"mono": flp.config.FONT_MONO_CANDIDATES,
}

Box = tuple[float, float, float, float]


#============================================
def clamp(value: float, low: float, high: float) -> float:
	"""
	Clamp a value into a range.

	When high < low the lower bound wins.

	Args:
		value: Input value.
		low: Lower bound.
		high: Upper bound.

	Returns:
		Clamped value.
	"""
	return max(low, min(high, value))


#============================================
def compute_surface_size(zoom: float, pixel_density: float) -> tuple[int, int]:
	"""
	Compute the raster surface size in pixels.

	Args:
		zoom: Preview zoom factor.
		pixel_density: Device pixels per preview pixel.

	Returns:
		Tuple of (width, height) in pixels.
	"""
	if zoom <= 0.0:
		raise ValueError(f"zoom must be positive, got {zoom}")
	if pixel_density <= 0.0:
		raise ValueError(f"pixel_density must be positive, got {pixel_density}")
	width = int(math.floor(LABEL_WIDTH_DOTS * zoom * pixel_density))
	height = int(math.floor(LABEL_HEIGHT_DOTS * zoom * pixel_density))
	return (width, height)


#============================================
@functools.lru_cache(maxsize=64)
def load_font(size: int, face: str = "regular") -> PIL.ImageFont.FreeTypeFont:
	"""
	Load a TrueType font, falling back to Pillow's bundled font.

	Args:
		size: Font size in pixels.
		face: One of "regular", "bold" or "mono".

	Returns:
		Font object.
	"""
	for path in FONT_CANDIDATES[face]:
		try:
			return PIL.ImageFont.truetype(path, size)
		except OSError:
			continue
	return PIL.ImageFont.load_default(size=size)


#============================================
def resolve_font_px(command: TextCommand) -> float:
	"""
	Resolve the text size in dots for a text command.

	Args:
		command: Text command.

	Returns:
		Font size in dots.
	"""
	base = FONT_BASE_PX.get(command.font_id, DEFAULT_FONT_PX)
	return base * (command.y_mul or 1)


#============================================
def text_x_scale(command: TextCommand) -> float:
	"""
	Approximate Fingerprint width scaling from the x/y multipliers.

	Args:
		command: Text command.

	Returns:
		Horizontal scale factor.
	"""
	return (command.x_mul or 1) / (command.y_mul or 1)


#============================================
def text_face(command: TextCommand) -> str:
	"""
	Pick the font face for a text command.

	Args:
		command: Text command.

	Returns:
		"bold" for the large font ids, "regular" otherwise.
	"""
	if command.font_id >= BOLD_FONT_ID_MIN:
		return "bold"
	return "regular"


#============================================
def line_endpoints(command: LineCommand) -> tuple[tuple[float, float], tuple[float, float]]:
	"""
	Compute raster endpoints for a line command.

	Args:
		command: Line command.

	Returns:
		Tuple of (start, end) raster points.
	"""
	if command.direction == "E":
		end = (command.x + command.length, command.y)
	else:
		end = (command.x, command.y + command.length)
	start_point = to_raster_space(command.x, command.y)
	end_point = to_raster_space(end[0], end[1])
	return (start_point, end_point)


#============================================
def line_box(command: LineCommand) -> Box | None:
	"""
	Compute the raster area covered by a flat-capped line stroke.

	Args:
		command: Line command.

	Returns:
		Box (x0, y0, x1, y1) or None for zero-length lines.
	"""
	if command.length <= 0:
		return None
	start, end = line_endpoints(command)
	half = max(1, command.thickness) / 2.0
	if command.direction == "E":
		return (start[0], start[1] - half, end[0], end[1] + half)
	return (end[0] - half, end[1], start[0] + half, start[1])


#============================================
def barcode_height(command: BarcodeCommand) -> int:
	"""
	Compute the placeholder height in dots.

	Args:
		command: Barcode command.

	Returns:
		Height in dots.
	"""
	return max(BARCODE_MIN_HEIGHT, command.height or BARCODE_DEFAULT_HEIGHT)


#============================================
def estimate_barcode_width(command: BarcodeCommand) -> float:
	"""
	Estimate the placeholder width in dots, kept inside the label.

	Args:
		command: Barcode command.

	Returns:
		Width in dots.
	"""
	module = max(1, command.module or BARCODE_DEFAULT_MODULE)
	data_len = len(command.value or "")
	raw = max(BARCODE_MIN_WIDTH, data_len * module * BARCODE_WIDTH_PER_CHAR)
	return clamp(raw, BARCODE_MIN_WIDTH, LABEL_WIDTH_DOTS - command.x - BARCODE_RIGHT_MARGIN)


#============================================
def barcode_box(command: BarcodeCommand) -> Box:
	"""
	Compute the raster box of a barcode placeholder.

	The barcode grows up from its printer-space anchor, so in raster
	space the box ends at the anchor.

	Args:
		command: Barcode command.

	Returns:
		Box (x0, y0, x1, y1).
	"""
	anchor_x, anchor_y = to_raster_space(command.x, command.y)
	height = barcode_height(command)
	width = estimate_barcode_width(command)
	top = anchor_y - height
	return (anchor_x, top, anchor_x + width, top + height)


#============================================
def barcode_bar_boxes(command: BarcodeCommand, box: Box) -> list[Box]:
	"""
	Lay out the black bars of a barcode placeholder.

	Args:
		command: Barcode command.
		box: Placeholder box from barcode_box().

	Returns:
		Raster boxes of the black bars, left to right.
	"""
	seed = flp.pattern.hash_string(command.value or "")
	bars = flp.pattern.iter_bars(seed, command.module)
	cursor = box[0] + BARCODE_QUIET_ZONE
	limit = box[2] - BARCODE_QUIET_ZONE
	top = box[1] + BARCODE_BAR_INSET
	bottom = box[3] - BARCODE_BAR_INSET
	boxes: list[Box] = []
	while cursor < limit:
		is_black, bar_width = next(bars)
		if is_black:
			boxes.append((cursor, top, cursor + bar_width, bottom))
		cursor += bar_width
	return boxes


#============================================
def barcode_caption_top(box: Box) -> float | None:
	"""
	Compute the raster top of the human readable barcode caption.

	Args:
		box: Placeholder box from barcode_box().

	Returns:
		Caption top in dots, or None when it would leave the label.
	"""
	caption_top = box[3] + BARCODE_CAPTION_GAP
	if caption_top < LABEL_HEIGHT_DOTS - BARCODE_CAPTION_BOTTOM_MARGIN:
		return caption_top
	return None


#============================================
def fill_box(draw: PIL.ImageDraw.ImageDraw, box: Box, scale: float, color: tuple[int, int, int]) -> None:
	"""
	Fill a dot-space box on the raster surface.

	Args:
		draw: Pillow drawing context.
		box: Box in dots.
		scale: Pixels per dot.
		color: RGB fill color.
	"""
	x0, y0, x1, y1 = scale_box(box, scale)
	# Pillow rectangles include their far edge
	x1 = max(x0, x1 - 1)
	y1 = max(y0, y1 - 1)
	draw.rectangle((x0, y0, x1, y1), fill=color)


#============================================
def stroke_box(
	draw: PIL.ImageDraw.ImageDraw,
	box: Box,
	scale: float,
	color: tuple[int, int, int],
	line_width: float,
) -> None:
	"""
	Stroke a dot-space box with the stroke centered on its edges.

	Args:
		draw: Pillow drawing context.
		box: Box in dots.
		scale: Pixels per dot.
		color: RGB stroke color.
		line_width: Stroke width in dots.
	"""
	half = line_width / 2.0
	outer = (box[0] - half, box[1] - half, box[2] + half, box[3] + half)
	x0, y0, x1, y1 = scale_box(outer, scale)
	x1 = max(x0, x1 - 1)
	y1 = max(y0, y1 - 1)
	width = max(1, int(round(line_width * scale)))
	draw.rectangle((x0, y0, x1, y1), outline=color, width=width)


#============================================
def draw_scaled_text(
	image: PIL.Image.Image,
	origin: tuple[float, float],
	text: str,
	font: PIL.ImageFont.FreeTypeFont,
	x_scale: float = 1.0,
	anchor: str = "ls",
) -> None:
	"""
	Draw text with an optional horizontal stretch.

	The glyphs are rendered into a mask, stretched, then pasted in ink.

	Args:
		image: Target RGB image.
		origin: Anchor point in pixels.
		text: Text to draw.
		font: Font object.
		x_scale: Horizontal scale factor.
		anchor: Pillow text anchor for the origin.
	"""
	left, top, right, bottom = font.getbbox(text, anchor=anchor)
	left = int(math.floor(left))
	top = int(math.floor(top))
	right = int(math.ceil(right))
	bottom = int(math.ceil(bottom))
	if right <= left or bottom <= top:
		return
	mask = PIL.Image.new("L", (right - left, bottom - top), 0)
	PIL.ImageDraw.Draw(mask).text((-left, -top), text, font=font, fill=255, anchor=anchor)
	paste_y = int(round(origin[1] + top))
	if x_scale == 1.0:
		image.paste(INK_COLOR, (int(round(origin[0] + left)), paste_y), mask)
		return
	# stretch only the columns that land on the surface
	dest_left = origin[0] + left * x_scale
	dest_right = dest_left + mask.width * x_scale
	visible_left = int(round(max(0.0, dest_left)))
	visible_right = int(round(min(float(image.width), dest_right)))
	if visible_right <= visible_left:
		return
	source_left = max(0.0, (visible_left - dest_left) / x_scale)
	source_right = min(float(mask.width), (visible_right - dest_left) / x_scale)
	if source_right <= source_left:
		return
	mask = mask.resize(
		(visible_right - visible_left, mask.height),
		PIL.Image.Resampling.LANCZOS,
		box=(source_left, 0, source_right, mask.height),
	)
	image.paste(INK_COLOR, (visible_left, paste_y), mask)


#============================================
def draw_paper(draw: PIL.ImageDraw.ImageDraw, scale: float) -> None:
	"""
	Paint the label background and its edge.

	Args:
		draw: Pillow drawing context.
		scale: Pixels per dot.
	"""
	fill_box(draw, (0, 0, LABEL_WIDTH_DOTS, LABEL_HEIGHT_DOTS), scale, PAPER_COLOR)
	border = (
		BORDER_INSET,
		BORDER_INSET,
		LABEL_WIDTH_DOTS - BORDER_INSET,
		LABEL_HEIGHT_DOTS - BORDER_INSET,
	)
	stroke_box(draw, border, scale, BORDER_COLOR, BORDER_WIDTH)


#============================================
def draw_line_command(draw: PIL.ImageDraw.ImageDraw, command: LineCommand, scale: float) -> None:
	"""
	Draw a line command.

	Args:
		draw: Pillow drawing context.
		command: Line command.
		scale: Pixels per dot.
	"""
	box = line_box(command)
	if box is None:
		return
	fill_box(draw, box, scale, INK_COLOR)


#============================================
def draw_barcode_placeholder(
	image: PIL.Image.Image,
	draw: PIL.ImageDraw.ImageDraw,
	command: BarcodeCommand,
	scale: float,
) -> None:
	"""
	Draw a barcode placeholder with its caption.

	Args:
		image: Target RGB image.
		draw: Pillow drawing context for the same image.
		command: Barcode command.
		scale: Pixels per dot.
	"""
	box = barcode_box(command)
	fill_box(draw, box, scale, PAPER_COLOR)
	stroke_box(draw, box, scale, INK_COLOR, BARCODE_OUTLINE_WIDTH)
	for bar in barcode_bar_boxes(command, box):
		fill_box(draw, bar, scale, INK_COLOR)

	if not command.value:
		return
	caption_top = barcode_caption_top(box)
	if caption_top is None:
		return
	font_size = max(1, int(round(BARCODE_CAPTION_SIZE * scale)))
	font = load_font(font_size, "mono")
	origin = (box[0] * scale, caption_top * scale)
	draw_scaled_text(image, origin, command.value, font, anchor="la")


#============================================
def draw_text_command(image: PIL.Image.Image, command: TextCommand, scale: float) -> None:
	"""
	Draw a text command, baseline anchored at its origin.

	Args:
		image: Target RGB image.
		command: Text command.
		scale: Pixels per dot.
	"""
	if not command.value:
		return
	font_size = int(round(resolve_font_px(command) * scale))
	font_size = max(1, min(font_size, MAX_FONT_PX, image.height))
	font = load_font(font_size, text_face(command))
	origin_x, origin_y = to_raster_space(command.x, command.y)
	origin = (origin_x * scale, origin_y * scale)
	draw_scaled_text(image, origin, command.value, font, x_scale=text_x_scale(command))


#============================================
def draw_label(
	image: PIL.Image.Image | None,
	commands: typing.Iterable[Command],
	scale: float,
) -> None:
	"""
	Paint commands onto a caller-owned surface.

	Paper first, then lines, barcodes and text, each group in source
	order.

	Args:
		image: Target RGB image, or None to skip drawing.
		commands: Parsed commands.
		scale: Pixels per dot.
	"""
	if image is None:
		return
	commands = list(commands)
	draw = PIL.ImageDraw.Draw(image)
	draw_paper(draw, scale)
	for command in commands:
		if isinstance(command, LineCommand):
			draw_line_command(draw, command, scale)
	for command in commands:
		if isinstance(command, BarcodeCommand):
			draw_barcode_placeholder(image, draw, command, scale)
	for command in commands:
		if isinstance(command, TextCommand):
			draw_text_command(image, command, scale)


#============================================
def render_label(
	commands: typing.Iterable[Command],
	zoom: float,
	pixel_density: float = 1.0,
) -> PIL.Image.Image:
	"""
	Render commands into a new label image.

	Args:
		commands: Parsed commands.
		zoom: Preview zoom factor.
		pixel_density: Device pixels per preview pixel.

	Returns:
		RGB image of the label.
	"""
	width, height = compute_surface_size(zoom, pixel_density)
	image = PIL.Image.new("RGB", (width, height), PAPER_COLOR)
	draw_label(image, commands, zoom * pixel_density)
	return image
