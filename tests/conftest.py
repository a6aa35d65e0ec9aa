"""
Shared fixtures: small images written to disk with Pillow, and a stdin that never delivers.
"""

import os
import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path):
    """Write a uniform image and return its path as a string."""
    def _make(size, color, mode="RGB", name="img.png"):
        path = tmp_path / name
        Image.new(mode, size, color=color).save(path)
        return str(path)
    return _make


@pytest.fixture
def silent_stdin():
    """Read end of a pipe nobody writes to, so readline() blocks until teardown."""
    read_fd, write_fd = os.pipe()
    stream = os.fdopen(read_fd, "r")
    yield stream
    os.close(write_fd)
    # the abandoned reader sees EOF now, close waits for it to let go of the buffer
    stream.close()
