"""Line editing core: text buffer, completion and Emacs/Vi key handling."""

__version__ = "0.1.0"