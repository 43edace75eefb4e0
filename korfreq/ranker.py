"""
랭커 모듈
단어 빈도 집계 및 빈도 내림차순 정렬
"""
from collections import defaultdict

TOP_K = 10


class FrequencyRanker:
    """
    단어 빈도 랭커

    동률은 처음 등장한 순서를 유지한다 (dict 삽입 순서 + 안정 정렬).
    """

    def __init__(self, top_k=TOP_K):
        self.top_k = top_k

    @staticmethod
    def count(words):
        """단어 시퀀스를 {word: count} 빈도표로 집계"""
        freq = defaultdict(int)
        for word in words:
            freq[word] += 1
        return freq

    def rank(self, freq):
        """
        빈도표를 빈도 높은 순으로 정렬

        Returns: [(word, count), ...] 최대 top_k 개
        """
        ranked = sorted(freq.items(), key=lambda x: x[1], reverse=True)
        return ranked[:self.top_k]
