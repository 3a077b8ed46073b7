"""Line-at-a-time reading from file descriptors with leftover bytes kept between calls."""

__version__ = "0.1.0"
__all__ = ["reader"]