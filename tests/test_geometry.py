import fingerprint_label_preview.config
import fingerprint_label_preview.geometry as geometry
import fingerprint_label_preview.render
import fingerprint_label_preview.script_parser


LABEL_HEIGHT_DOTS = fingerprint_label_preview.config.LABEL_HEIGHT_DOTS


#============================================
def test_label_dimensions() -> None:
	"""
	A 4x6 inch label at 406 dpi is 1624 x 2436 dots.
	"""
	config = fingerprint_label_preview.config
	assert config.LABEL_WIDTH_DOTS == int(config.LABEL_WIDTH_INCHES * config.DOTS_PER_INCH)
	assert config.LABEL_HEIGHT_DOTS == int(config.LABEL_HEIGHT_INCHES * config.DOTS_PER_INCH)
	assert LABEL_HEIGHT_DOTS == 2436


#============================================
def test_origin_flip_at_edges() -> None:
	"""
	The bottom edge maps to the raster bottom and the top edge to row 0.
	"""
	for x in (0, 1, 812, 1623):
		assert geometry.to_raster_space(x, 0) == (x, 2436)
		assert geometry.to_raster_space(x, 2436) == (x, 0)


#============================================
def test_native_space_round_trip() -> None:
	"""
	The vertical flip undoes itself.
	"""
	raster = geometry.to_raster_space(300, 1000)
	assert raster == (300, 1436)
	assert geometry.to_native_space(raster[0], raster[1]) == (300, 1000)


#============================================
def test_text_origin_scenario() -> None:
	"""
	The sample "Från" field lands at raster (990, 525).
	"""
	commands, _warnings = fingerprint_label_preview.script_parser.parse_script(
		'!F T S 1911 990 L 2 1 1 "Från"'
	)
	command = commands[0]
	assert geometry.to_raster_space(command.x, command.y) == (990, 525)


#============================================
def test_north_line_endpoints_scenario() -> None:
	"""
	A north stroke moves up the label, so raster Y decreases.
	"""
	commands, _warnings = fingerprint_label_preview.script_parser.parse_script(
		"!F B N 1725 960 L 10 50"
	)
	start, end = fingerprint_label_preview.render.line_endpoints(commands[0])
	assert start == (960, 711)
	assert end == (960, 661)


#============================================
def test_raster_box_to_native() -> None:
	"""
	Raster boxes convert to bottom-up printer boxes.
	"""
	box = geometry.raster_box_to_native((10, 100, 50, 300))
	assert box == (10, 2136, 50, 2336)


#============================================
def test_scale_box_normalizes_and_rounds() -> None:
	"""
	Scaled boxes are integer and ordered.
	"""
	assert geometry.scale_box((10, 20, 4, 2), 0.5) == (2, 1, 5, 10)
	assert geometry.scale_box((0, 0, 1624, 2436), 1.0) == (0, 0, 1624, 2436)
