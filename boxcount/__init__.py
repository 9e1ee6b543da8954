"""Box counting of non-white pixels in square images, fractal-dimension estimates and file-based message pipes."""

__version__ = "0.1.0"
__all__ = ["pipe", "image", "counting", "cli", "pipedemo"]