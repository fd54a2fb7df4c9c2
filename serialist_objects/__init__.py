"""MIDI chord segmentation, numeric list generators and an editable multi-voice list with undo."""

__version__ = "0.1.0"
__all__ = ["segmenter", "generators", "multilist"]