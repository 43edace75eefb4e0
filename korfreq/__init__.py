"""
한국어 텍스트 단어 빈도 분석 패키지
"""
from .analyzer import ERROR_MESSAGE, TextAnalyzer, analyze, process_bytes, process_text

__all__ = ["ERROR_MESSAGE", "TextAnalyzer", "analyze", "process_bytes", "process_text"]
