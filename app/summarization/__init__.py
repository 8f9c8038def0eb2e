from app.summarization.factory import SummarizerFactory
from app.summarization.post_processor import PostProcessor
from app.summarization.summarizer import Summarizer

__all__ = ["PostProcessor", "Summarizer", "SummarizerFactory"]
