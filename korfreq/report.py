"""
리포트 모듈
분석 결과를 고정 형식의 텍스트로 렌더링
"""

HEADER_LENGTH = "=== 텍스트 길이: {length} bytes ===\n"
HEADER_TOP = "=== 상위 10개 단어 ===\n"
FOOTER = "============================\n"


def format_report(length, ranked):
    """
    리포트 바이트열 생성

    Args:
        length: 원본 입력의 바이트 길이
        ranked: [(word, count), ...] (word는 bytes)
    """
    parts = [
        HEADER_LENGTH.format(length=length).encode("utf-8"),
        HEADER_TOP.encode("utf-8"),
    ]
    for word, count in ranked:
        parts.append(word + b" : " + str(count).encode("ascii") + b"\n")
    parts.append(FOOTER.encode("utf-8"))
    return b"".join(parts)
