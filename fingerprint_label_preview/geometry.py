"""
Coordinate transforms between printer space and raster space.

Printer (native) space has its origin at the bottom-left corner of the
label with Y growing upward. Raster space has its origin at the top-left
corner with Y growing downward. Both are measured in printer dots.
"""

# local repo modules
import fingerprint_label_preview as flp
import fingerprint_label_preview.config


LABEL_HEIGHT_DOTS = flp.config.LABEL_HEIGHT_DOTS


#============================================
def to_raster_space(x_dots: float, y_dots: float) -> tuple[float, float]:
	"""
	Convert a printer-space point into raster space.

	Args:
		x_dots: X position in dots.
		y_dots: Y position in dots, measured up from the bottom edge.

	Returns:
		Tuple of (x, y) measured from the top-left corner.
	"""
	return (x_dots, LABEL_HEIGHT_DOTS - y_dots)


#============================================
def to_native_space(x_raster: float, y_raster: float) -> tuple[float, float]:
	"""
	Convert a raster-space point back into printer space.

	The vertical flip is its own inverse.

	Args:
		x_raster: X position in dots.
		y_raster: Y position in dots, measured down from the top edge.

	Returns:
		Tuple of (x, y) measured from the bottom-left corner.
	"""
	return (x_raster, LABEL_HEIGHT_DOTS - y_raster)


#============================================
def raster_box_to_native(
	box: tuple[float, float, float, float],
) -> tuple[float, float, float, float]:
	"""
	Convert a raster-space box into a printer-space box.

	Args:
		box: Raster box (x0, y0, x1, y1) with y0 at the top.

	Returns:
		Printer box (x0, y0, x1, y1) with y0 at the bottom.
	"""
	x0, top = to_native_space(box[0], box[1])
	x1, bottom = to_native_space(box[2], box[3])
	return (min(x0, x1), min(top, bottom), max(x0, x1), max(top, bottom))


#============================================
def scale_box(
	box: tuple[float, float, float, float],
	scale: float,
) -> tuple[int, int, int, int]:
	"""
	Scale a dot-space raster box into integer pixel coordinates.

	Args:
		box: Box (x0, y0, x1, y1) in dots, any corner order.
		scale: Pixels per dot.

	Returns:
		Normalized pixel box (x0, y0, x1, y1) with x0 <= x1 and y0 <= y1.
	"""
	x0 = int(round(min(box[0], box[2]) * scale))
	x1 = int(round(max(box[0], box[2]) * scale))
	y0 = int(round(min(box[1], box[3]) * scale))
	y1 = int(round(max(box[1], box[3]) * scale))
	return (x0, y0, x1, y1)
