# materials/texture_loader.py
import logging
import os
from PIL import Image, UnidentifiedImageError
from pathtracer.errors import TextureLoadError
from pathtracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def load_texture(image_path) -> ImageTexture:
    """
    Load an image file as a texture, converting it to RGB.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object

    Raises:
        FileNotFoundError: If the image file doesn't exist
        TextureLoadError: If the file cannot be decoded as an image
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            img.load()
            texture = ImageTexture.from_image(img)
    except (UnidentifiedImageError, OSError) as e:
        raise TextureLoadError(f"Error loading texture {image_path}: {e}") from e

    logger.info("Loaded texture %s (%dx%d)", image_path, texture.width, texture.height)
    return texture

def create_image_material(image_path, material_class, **material_params):
    """Instantiate material_class over the texture loaded from image_path,
    forwarding any extra keyword arguments (e.g. fuzz for Metal)."""
    texture = load_texture(image_path)
    return material_class(texture, **material_params)
