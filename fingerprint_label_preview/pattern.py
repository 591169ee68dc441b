"""
Deterministic bar patterns for barcode placeholders.

The bars are not a real symbology. They only vary with the barcode data
so that different values look different in the preview.
"""

# Standard Library
import typing


UINT32_MASK = 0xFFFFFFFF
FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
DEFAULT_MODULE = 2


#============================================
def utf16_code_units(value: str) -> typing.Iterator[int]:
	"""
	Yield the UTF-16 code units of a string.

	Args:
		value: Input string.

	Yields:
		16-bit code units, two per astral character.
	"""
	data = value.encode("utf-16-le", "surrogatepass")
	for index in range(0, len(data), 2):
		yield data[index] | (data[index + 1] << 8)


#============================================
def hash_string(value: str) -> int:
	"""
	Hash a string with 32-bit FNV-1a.

	Args:
		value: Input string.

	Returns:
		Unsigned 32-bit hash.
	"""
	state = FNV_OFFSET_BASIS
	for unit in utf16_code_units(value):
		state ^= unit
		state = (state * FNV_PRIME) & UINT32_MASK
	return state


#============================================
def xorshift32(state: int) -> int:
	"""
	Advance a 32-bit xorshift state by one step.

	Args:
		state: Current unsigned 32-bit state.

	Returns:
		Next unsigned 32-bit state.
	"""
	state ^= (state << 13) & UINT32_MASK
	state ^= state >> 17
	state ^= (state << 5) & UINT32_MASK
	return state


#============================================
def iter_bars(seed: int, module: int) -> typing.Iterator[tuple[bool, int]]:
	"""
	Generate an endless bar sequence from a seed.

	Args:
		seed: Initial 32-bit state, usually hash_string(value).
		module: Barcode module width; 0 falls back to the default.

	Yields:
		Tuples of (is_black, width) with width in [1, module * 2].
	"""
	span = max(1, (module or DEFAULT_MODULE) * 2)
	state = seed & UINT32_MASK
	while True:
		state = xorshift32(state)
		is_black = (state & 1) == 0
		width = 1 + ((state >> 1) % span)
		yield (is_black, width)
