from app.summarization.base import BaseSummarizer
from app.summarization.factory import SummarizerFactory
from app.summarization.summarizer import Summarizer

__all__ = ["BaseSummarizer", "Summarizer", "SummarizerFactory"]
