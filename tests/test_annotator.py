#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit tests for the vector document model and size annotation
"""

import sys
import os
import shutil
import unittest
import tempfile
import logging
from pathlib import Path

# Add parent directory to path to allow importing modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ftvicons.utils.errors import InvalidSize, VectorDocumentError
from ftvicons.vector.annotator import annotate, annotate_file, parse_size
from ftvicons.vector.document import VectorDocument

SAMPLE_VECTOR = """<?xml version="1.0" encoding="utf-8"?>
<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp"
    android:height="24dp"
    android:viewportWidth="24"
    android:viewportHeight="24">
    <!-- traced artwork -->
    <path android:fillColor="#FFFFFF" android:pathData="M0,0h24v24h-24z"/>
</vector>
"""

BARE_VECTOR = """<?xml version="1.0" encoding="utf-8"?>
<vector xmlns:android="http://schemas.android.com/apk/res/android">
    <path android:fillColor="#000000" android:pathData="M0,0h1v1h-1z"/>
</vector>
"""


class TestParseSize(unittest.TestCase):
    """Test cases for --size values"""

    def test_aliases(self):
        self.assertEqual(parse_size("banner"), (320, 180, "banner"))
        self.assertEqual(parse_size("icon"), (108, 108, "icon"))

    def test_numeric(self):
        self.assertEqual(parse_size("512x256"), (512, 256, None))
        self.assertEqual(parse_size("0x0"), (0, 0, None))

    def test_invalid(self):
        for value in ("512", "axb", "-1x5", "12x", "x12", "1.5x2", "", "Banner", "10X10"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidSize):
                    parse_size(value)


class TestVectorDocument(unittest.TestCase):
    """Test cases for parsing and serialising vector documents"""

    def test_parse_keeps_declaration_and_inner_comments(self):
        doc = VectorDocument.parse(SAMPLE_VECTOR)
        self.assertEqual(doc.root_name, "vector")
        self.assertEqual(doc.get("width"), "24dp")

        text = doc.to_string()
        self.assertTrue(text.startswith('<?xml version="1.0" encoding="utf-8"?>\n'))
        self.assertIn("<!-- traced artwork -->", text)
        self.assertIn('xmlns:android="http://schemas.android.com/apk/res/android"', text)
        self.assertIn('android:pathData="M0,0h24v24h-24z"', text)

    def test_prolog_comments_survive(self):
        doc = VectorDocument.parse(
            '<?xml version="1.0"?>\n<!-- generated -->\n'
            '<vector xmlns:android="http://schemas.android.com/apk/res/android"/>'
        )
        self.assertEqual(doc.comments, [" generated "])
        self.assertIn("<!-- generated -->", doc.to_string())

    def test_document_without_declaration(self):
        doc = VectorDocument.parse('<vector xmlns:android="http://schemas.android.com/apk/res/android"/>')
        self.assertTrue(doc.to_string().startswith("<?xml"))

    def test_malformed(self):
        with self.assertRaises(VectorDocumentError):
            VectorDocument.parse("<vector><path></vector>")


class TestAnnotate(unittest.TestCase):
    """Test cases for size attribute upsert and usage comments"""

    def setUp(self):
        logging.disable(logging.CRITICAL)

    def tearDown(self):
        logging.disable(logging.NOTSET)

    def test_banner_annotation(self):
        doc = annotate(VectorDocument.parse(SAMPLE_VECTOR), 320, 180, "banner")
        text = doc.to_string()

        self.assertIn('android:width="320px"', text)
        self.assertIn('android:height="180px"', text)
        self.assertIn('android:viewportWidth="320"', text)
        self.assertIn('android:viewportHeight="180"', text)
        self.assertNotIn("24dp", text)
        self.assertEqual(text.count("<!-- intended-usage: banner -->"), 1)

        # The comment sits right after the declaration, before the root
        lines = text.splitlines()
        self.assertTrue(lines[0].startswith("<?xml"))
        self.assertEqual(lines[1], "<!-- intended-usage: banner -->")
        self.assertTrue(lines[2].startswith("<vector"))

    def test_idempotent_attributes(self):
        doc = VectorDocument.parse(SAMPLE_VECTOR)
        annotate(doc, 108, 108)
        annotate(doc, 108, 108)
        text = doc.to_string()

        for name in ("width", "height", "viewportWidth", "viewportHeight"):
            with self.subTest(attribute=name):
                self.assertEqual(text.count(f"android:{name}="), 1)
        self.assertNotIn("intended-usage", text)

    def test_second_call_wins(self):
        doc = VectorDocument.parse(SAMPLE_VECTOR)
        annotate(doc, 320, 180)
        annotate(doc, 64, 32)
        self.assertEqual(doc.get("width"), "64px")
        self.assertEqual(doc.get("height"), "32px")
        self.assertEqual(doc.get("viewportWidth"), "64")
        self.assertEqual(doc.get("viewportHeight"), "32")
        self.assertEqual(doc.to_string().count("android:width="), 1)

    def test_missing_attributes_are_added(self):
        doc = annotate(VectorDocument.parse(BARE_VECTOR), 48, 24)
        self.assertEqual(
            [doc.get(n) for n in ("width", "height", "viewportWidth", "viewportHeight")],
            ["48px", "24px", "48", "24"],
        )

    def test_existing_attribute_keeps_position(self):
        doc = annotate(VectorDocument.parse(SAMPLE_VECTOR), 1, 2)
        names = [key.rsplit("}", 1)[-1] for key in doc.root.attrib]
        self.assertEqual(names, ["width", "height", "viewportWidth", "viewportHeight"])

    def test_usage_comment_repeats(self):
        doc = VectorDocument.parse(SAMPLE_VECTOR)
        annotate(doc, 108, 108, "icon")
        annotate(doc, 108, 108, "icon")
        text = doc.to_string()
        self.assertEqual(text.count("<!-- intended-usage: icon -->"), 2)
        self.assertEqual(text.count("android:width="), 1)

    def test_usage_comment_goes_before_existing_comments(self):
        doc = VectorDocument.parse(
            '<?xml version="1.0"?>\n<!-- generated -->\n'
            '<vector xmlns:android="http://schemas.android.com/apk/res/android"/>'
        )
        annotate(doc, 1, 1, "banner")
        self.assertEqual(doc.comments, [" intended-usage: banner ", " generated "])

    def test_string_digits_accepted(self):
        doc = annotate(VectorDocument.parse(BARE_VECTOR), "64", "32")
        self.assertEqual(doc.get("width"), "64px")

    def test_invalid_sizes_leave_document_unchanged(self):
        doc = VectorDocument.parse(SAMPLE_VECTOR)
        before = doc.to_string()

        for width, height in ((-1, 10), (10, -1), (1.5, 10), ("12a", 10),
                              (True, 10), (None, 10), (10, "")):
            with self.subTest(width=width, height=height):
                with self.assertRaises(InvalidSize):
                    annotate(doc, width, height, "banner")
                self.assertEqual(doc.to_string(), before)


class TestAnnotateFile(unittest.TestCase):
    """Test cases for annotating a file on disk"""

    def setUp(self):
        logging.disable(logging.CRITICAL)
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        logging.disable(logging.NOTSET)
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_annotate_file(self):
        path = Path(self.temp_dir) / "icon.xml"
        path.write_text(SAMPLE_VECTOR, encoding="utf-8")

        annotate_file(path, 108, 108, "icon")

        text = path.read_text(encoding="utf-8")
        self.assertIn('android:width="108px"', text)
        self.assertIn("<!-- intended-usage: icon -->", text)

    def test_missing_file(self):
        with self.assertRaises(VectorDocumentError):
            annotate_file(Path(self.temp_dir) / "missing.xml", 1, 1)


if __name__ == '__main__':
    unittest.main()
