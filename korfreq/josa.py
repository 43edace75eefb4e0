"""
조사 제거 모듈
명사 + 조사 형태에서 뒤 조사 하나를 떼어낸다.
예: "국회의" -> "국회", "우리나라에는" -> "우리나라"
"""

# 우선순위 순서. 앞의 항목이 뒤의 항목을 가린다 ("에는"의 두 번째 항목은 도달 불가)
JOSA_ENDINGS = tuple(
    s.encode("utf-8")
    for s in (
        "에는", "에게는",
        "으로써", "으로서",
        "으로는", "으로",
        "까지", "부터",
        "에서", "에게",
        "에는",
        "에",
        "의",
        "은", "는", "이", "가",
        "을", "를",
        "와", "과",
        "도", "만",
    )
)


def strip_josa(word):
    """
    뒤에 붙은 조사 하나를 제거

    길이는 바이트 단위. 단어 길이가 조사 길이의 2배를 넘을 때만 떼어낸다.
    """
    for suffix in JOSA_ENDINGS:
        if len(word) > len(suffix) * 2 and word.endswith(suffix):
            return word[:-len(suffix)]
    return word
