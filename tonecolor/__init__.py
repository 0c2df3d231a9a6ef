from .core import AnnotateOptions, build_annotations, compute_annotations
from .romanizer import CharTableRomanizer, PypinyinRomanizer
from .types import Annotation, TextRange, ToneColorConfig

__all__ = [
    "AnnotateOptions",
    "Annotation",
    "CharTableRomanizer",
    "PypinyinRomanizer",
    "TextRange",
    "ToneColorConfig",
    "build_annotations",
    "compute_annotations",
]
