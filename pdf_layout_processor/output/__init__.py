"""Output generation modules."""

from .json_generator import JSONGenerator
from .text_generator import TextGenerator
from .summary_generator import SummaryGenerator
from .visualizer import PdfVisualizer
from .units import ROLE_LABELS, iter_units

__all__ = ["JSONGenerator", "TextGenerator", "SummaryGenerator", "PdfVisualizer", "ROLE_LABELS", "iter_units"]
