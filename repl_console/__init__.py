"""Line-history-aware interactive console for pluggable evaluators."""

__version__ = "0.1.0"
