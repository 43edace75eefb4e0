"""
Pytest configuration and shared fixtures
"""
import pytest


@pytest.fixture
def sample_text():
    """Mixed Korean/ASCII sample"""
    return (
        "헌법은 국민의 기본권을 보장한다.\n"
        "국민은 법 앞에 평등하다. 국민의 권리에 관한 사항은 정한다.\n"
        "Python은 좋은 언어이다. python은!\n"
    )


@pytest.fixture
def sample_file(tmp_path, sample_text):
    """Sample text written to a UTF-8 file"""
    path = tmp_path / "input.txt"
    path.write_bytes(sample_text.encode("utf-8"))
    return path
