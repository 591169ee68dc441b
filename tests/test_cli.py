import pathlib

import pytest

import fingerprint_label_preview.cli as cli


#============================================
def test_sample_pipeline(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
	"""
	The sample renders to PNG and PDF and prints its summary.
	"""
	png_path = tmp_path / "out" / "label.png"
	pdf_path = tmp_path / "out" / "label.pdf"
	args = cli.parse_args(["--sample", "-o", str(png_path), "-p", str(pdf_path), "-z", "0.25"])
	result = cli.run_pipeline(args)
	assert png_path.exists()
	assert pdf_path.exists()
	assert result.image.size == (406, 609)
	output = capsys.readouterr().out
	assert "Parsed 52 command(s): text=41, lines=9, barcode=2." in output
	assert "Input: bundled sample" in output


#============================================
def test_script_file_with_encoding(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
	"""
	Script files decode with the requested encoding and list warnings.
	"""
	script_path = tmp_path / "label.prn"
	script_path.write_bytes('!F T S 1911 990 L 2 1 1 "Från"\n!F X Y Z\n'.encode("latin-1"))
	args = cli.parse_args([str(script_path), "-e", "latin-1", "-z", "0.1"])
	config = cli.build_config(args)
	assert config.output_path == str(tmp_path / "label.png")
	result = cli.run_pipeline(args)
	assert result.commands[0].value == "Från"
	output = capsys.readouterr().out
	assert "Line 2: unparsed/ignored command: !F X Y Z" in output
	assert (tmp_path / "label.png").exists()


#============================================
def test_warning_limit(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
	"""
	Printed warnings respect the limit.
	"""
	script_path = tmp_path / "bad.prn"
	script_path.write_text("!F A\n!F B\n!F C\n", encoding="utf-8")
	args = cli.parse_args([str(script_path), "-w", "1", "-z", "0.1"])
	cli.run_pipeline(args)
	output = capsys.readouterr().out
	assert "Line 1: unparsed/ignored command: !F A" in output
	assert "Line 3: unparsed/ignored command: !F C" not in output
	assert "... 2 more warning(s) not shown" in output


#============================================
@pytest.mark.parametrize(
	"argv",
	[
		[],
		["--sample", "label.prn"],
		["--sample", "-z", "0"],
		["--sample", "-r", "-1"],
		["--sample", "-w", "-2"],
	],
)
def test_bad_arguments(argv: list[str]) -> None:
	"""
	Invalid combinations exit through argparse.
	"""
	with pytest.raises(SystemExit):
		cli.parse_args(argv)
