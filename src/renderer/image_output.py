# renderer/image_output.py
import os
from typing import TextIO
import numpy as np
from PIL import Image

def write_ppm(stream: TextIO, pixels: np.ndarray):
    """
    Write 8-bit pixels (height x width x 3, top row first) as a plain-text
    P3 PPM image: a header followed by one "r g b" line per pixel.
    """
    height, width = pixels.shape[0], pixels.shape[1]
    stream.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in pixels.reshape(-1, 3):
        stream.write(f"{r} {g} {b}\n")

def save_image(path: str, pixels: np.ndarray):
    """
    Save 8-bit pixels to ``path``. ``.ppm`` files are written as plain-text
    P3; any other extension is encoded by Pillow.
    """
    if os.path.splitext(path)[1].lower() == ".ppm":
        with open(path, "w") as f:
            write_ppm(f, pixels)
        return
    Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path)
