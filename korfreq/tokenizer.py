"""
토크나이저 모듈
공백 분리, 구두점 제거, ASCII 정규화
"""

# 토큰 앞뒤에서만 떼어내는 ASCII 구두점
PUNCTUATION = b".,!?;:\"'()[]{}<>"

ASCII_ALNUM = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")


def split_tokens(data):
    """ASCII 공백 기준으로 바이트열을 토큰 리스트로 분리"""
    return data.split()


def trim_punct(token):
    """앞뒤에 붙은 구두점 제거 (바이트 >= 128 은 건드리지 않음)"""
    return token.strip(PUNCTUATION)


def normalize_word(token):
    """
    ASCII 기준 정규화

    - 영문/숫자: 남기고, 영문은 소문자로
    - 그 외 ASCII 문자: 위치와 상관없이 버림
    - 비-ASCII 바이트 (대부분 한글): 그대로 보존
    """
    trimmed = trim_punct(token)
    kept = bytes(b for b in trimmed if b >= 128 or b in ASCII_ALNUM)
    # bytes.lower()는 ASCII 대문자만 바꾼다
    return kept.lower()


class Tokenizer:
    """한국어/영어 혼합 텍스트 토크나이저"""

    def tokenize(self, data):
        """바이트열을 정규화된 단어 리스트로 변환 (빈 단어는 제외)"""
        words = []
        for token in split_tokens(data):
            word = normalize_word(token)
            if word:
                words.append(word)
        return words
