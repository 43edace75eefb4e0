"""
노이즈 단어 필터
너무 짧은 단어, 불용어, 동사/형용사 어미로 끝나는 단어를 걸러낸다.
"""


def _encode_all(words):
    return tuple(w.encode("utf-8") for w in words)


# 완전히 버릴 단어들: 단독 조사, 연결어
STOPWORDS = frozenset(_encode_all([
    "은", "는", "이", "가",
    "을", "를",
    "에", "에서", "에게", "으로", "으로써", "부터", "까지",
    "와", "과",
    "도", "만",
    "및", "등",
    "때문에", "위해", "통해",
]))

VERB_ENDINGS = _encode_all([
    "한다", "된다", "있다", "가진다", "받는다",
    "하였다", "하며", "하면서",
    "위하여", "의하여",
])

ADJ_ENDINGS = _encode_all([
    "관한", "관련한",
])

# 한글 1글자 = UTF-8 3바이트
MIN_WORD_BYTES = 4


def is_noise_word(word):
    """노이즈 단어 여부 판별"""
    if len(word) < MIN_WORD_BYTES:
        return True

    if word in STOPWORDS:
        return True

    # bytes.endswith는 튜플을 받아 하나라도 맞으면 True
    if word.endswith(VERB_ENDINGS):
        return True

    if word.endswith(ADJ_ENDINGS):
        return True

    return False
