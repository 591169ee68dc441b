#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Render a Fingerprint 4x6 label script to a PNG (and optional PDF) preview.
"""

# local repo modules
import fingerprint_label_preview.cli


if __name__ == "__main__":
	fingerprint_label_preview.cli.main()
