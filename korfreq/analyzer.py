"""
분석기 모듈
토큰화 -> 조사 제거 -> 노이즈 제거 -> 빈도 집계 -> 정렬 -> 리포트
"""
from .josa import strip_josa
from .noise import is_noise_word
from .ranker import FrequencyRanker
from .report import format_report
from .tokenizer import Tokenizer

ERROR_MESSAGE = "입력 오류\n"
ENCODING = "utf-8"
# 잘못된 멀티바이트 시퀀스도 그대로 통과시키고 되돌릴 수 있도록
ERRORS = "surrogateescape"


class TextAnalyzer:
    """
    단어 빈도 분석 파이프라인

    호출 사이에 공유되는 가변 상태가 없다. 모든 중간 데이터는 호출 지역 변수.
    """

    def __init__(self):
        self.tokenizer = Tokenizer()
        self.ranker = FrequencyRanker()

    def extract_words(self, data):
        """정규화 + 조사 제거 + 노이즈 제거를 통과한 단어들 (등장 순서)"""
        words = []
        for word in self.tokenizer.tokenize(data):
            word = strip_josa(word)
            if not word:
                continue
            if is_noise_word(word):
                continue
            words.append(word)
        return words

    def rank_bytes(self, data):
        """바이트열 -> [(word, count), ...]"""
        freq = self.ranker.count(self.extract_words(data))
        return self.ranker.rank(freq)

    def report_bytes(self, data):
        """바이트열 -> 리포트 바이트열"""
        return format_report(len(data), self.rank_bytes(data))

    def analyze(self, data):
        """
        화면 표시용 분석 결과

        Returns:
            {
                'length': int,
                'results': [{'rank', 'word', 'count'}, ...]
            }
        """
        data = _to_bytes(data)
        if data is None:
            return {'length': 0, 'results': []}

        results = []
        for rank, (word, count) in enumerate(self.rank_bytes(data), 1):
            results.append(
                {
                    'rank': rank,
                    'word': word.decode(ENCODING, ERRORS),
                    'count': count,
                }
            )
        return {'length': len(data), 'results': results}


def _to_bytes(raw):
    """
    str/bytes 입력을 bytes로. 그 외는 None

    escape 범위 밖의 lone surrogate 는 surrogatepass 로 인코딩한다.
    C 문자열처럼 첫 NUL 바이트에서 입력이 끝난다.
    """
    if isinstance(raw, str):
        try:
            data = raw.encode(ENCODING, ERRORS)
        except UnicodeEncodeError:
            data = raw.encode(ENCODING, "surrogatepass")
    elif isinstance(raw, (bytes, bytearray, memoryview)):
        data = bytes(raw)
    else:
        return None
    return data.split(b"\x00", 1)[0]


_default_analyzer = TextAnalyzer()


def process_bytes(raw):
    """
    바이트 경계 진입점

    입력이 없거나 bytes 계열이 아니면 "입력 오류\\n" 을 UTF-8로 반환한다.
    반환값은 호출마다 새로 만들어지며 호출자가 소유한다.
    """
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        return ERROR_MESSAGE.encode(ENCODING)
    return _default_analyzer.report_bytes(_to_bytes(raw))


def process_text(raw):
    """
    텍스트를 분석해서 리포트 문자열을 반환

    str 이면 UTF-8로 인코딩해서 바이트 길이를 센다.
    입력이 None 이거나 str/bytes 가 아니면 ERROR_MESSAGE 를 그대로 반환한다.
    """
    data = _to_bytes(raw)
    if data is None:
        return ERROR_MESSAGE
    return _default_analyzer.report_bytes(data).decode(ENCODING, ERRORS)


def analyze(raw):
    return _default_analyzer.analyze(raw)
