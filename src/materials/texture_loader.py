# materials/texture_loader.py
import os
from PIL import Image, UnidentifiedImageError
import numpy as np
from materials.textures import ImageTexture

def load_image_data(image_path: str) -> np.ndarray:
    """
    Decode an image file into a height x width x 3 uint8 RGB array.

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image can't be decoded
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            # Convert to RGB if necessary
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return np.array(img, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture. Failures propagate so that a scene
    with a broken texture is rejected before rendering starts.
    """
    return ImageTexture(load_image_data(image_path))
