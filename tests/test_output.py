"""Tests for the PPM and PNG writers."""

import io

import numpy as np
from PIL import Image

from pathtrace.output.image_writer import save_png, save_ppm, write_ppm


class TestWritePpm:
    """Tests for the plain-text P3 stream."""

    def test_header_and_rows(self):
        """Test the header and one tab-separated line per row."""
        stream = io.StringIO()
        pixels = [(1, 2, 3), (4, 5, 6), (7, 8, 9), (10, 11, 12)]
        count = write_ppm(stream, 2, 2, pixels)
        assert count == 4
        assert stream.getvalue() == "P3\n2 2\n255\n1 2 3\t4 5 6\n7 8 9\t10 11 12\n"

    def test_consumes_lazily(self):
        """Test that rows are written before the iterator is exhausted."""
        stream = io.StringIO()
        seen = []

        def pixels():
            for i in range(4):
                seen.append(stream.getvalue().count("\n"))
                yield (i, i, i)

        write_ppm(stream, 2, 2, pixels())
        # The third pixel is requested after the first row was written
        assert seen == [3, 3, 4, 4]

    def test_partial_last_row(self):
        """Test that a short final row is still terminated."""
        stream = io.StringIO()
        write_ppm(stream, 2, 2, [(0, 0, 0)] * 3)
        assert stream.getvalue().endswith("0 0 0\n")


class TestSaveFiles:
    """Tests for writing frames to disk."""

    def frame(self):
        frame = np.zeros((2, 3, 3), dtype=np.uint8)
        frame[0, 0] = (255, 0, 0)
        frame[1, 2] = (0, 0, 255)
        return frame

    def test_save_png(self, tmp_path):
        """Test that Pillow writes a readable PNG with the right pixels."""
        path = tmp_path / "out.png"
        save_png(path, self.frame())
        with Image.open(path) as img:
            assert img.size == (3, 2)
            assert img.mode == "RGB"
            assert img.getpixel((0, 0)) == (255, 0, 0)
            assert img.getpixel((2, 1)) == (0, 0, 255)

    def test_save_ppm(self, tmp_path):
        """Test that a frame is written as P3 text."""
        path = tmp_path / "out.ppm"
        save_ppm(path, self.frame())
        lines = path.read_text().splitlines()
        assert lines[:3] == ["P3", "3 2", "255"]
        assert lines[3].split("\t")[0] == "255 0 0"
        assert lines[4].split("\t")[2] == "0 0 255"
