"""Line parsers and a command that turn reconnaissance tool output into clean lists of URLs, hosts and ports."""

__version__ = "0.1.0"