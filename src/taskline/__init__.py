"""Line-oriented personal task manager."""

__version__ = "0.1.0"
