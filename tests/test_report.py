from korfreq.report import format_report


def test_empty_report_layout():
    expected = (
        "=== 텍스트 길이: 5 bytes ===\n"
        "=== 상위 10개 단어 ===\n"
        "============================\n"
    )
    assert format_report(5, []) == expected.encode("utf-8")


def test_word_lines():
    ranked = [("국회".encode("utf-8"), 3), (b"hello", 1)]
    expected = (
        "=== 텍스트 길이: 42 bytes ===\n"
        "=== 상위 10개 단어 ===\n"
        "국회 : 3\n"
        "hello : 1\n"
        "============================\n"
    )
    assert format_report(42, ranked) == expected.encode("utf-8")


def test_raw_bytes_pass_through():
    report = format_report(4, [(b"\xff\xfe\xfd\xfc", 1)])
    assert b"\xff\xfe\xfd\xfc : 1\n" in report
