"""Materials, textures and the direction PDFs used for importance sampling."""
