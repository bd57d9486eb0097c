"""
ollama_boolean - classify a question as yes (1), no (0) or unknown (2)
using a local Ollama model
"""

from .classification import Classification, ClassificationResult, YesNoClassifier

__version__ = "1.0.0"

__all__ = ["Classification", "ClassificationResult", "YesNoClassifier", "__version__"]
