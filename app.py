"""
Streamlit page for the word-frequency analyzer.
Pick a .txt file (or paste text), press the button, read the report.
Run with: streamlit run app.py
"""
import time

import streamlit as st

from korfreq import analyze, process_bytes


st.set_page_config(
    page_title="텍스트 단어 빈도 분석",
    page_icon="W",
    layout="centered",
)

st.markdown(
    """
<style>
    .stats-bar { display: flex; flex-wrap: wrap; gap: 10px; margin: 8px 0 18px 0; }
    .stat-chip { background: rgba(217, 107, 140, 0.12); color: #7b5a66; border-radius: 999px; padding: 6px 12px; font-size: 13px; }

    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
</style>
""",
    unsafe_allow_html=True,
)


def build_view(data):
    """
    화면 표시용 (리포트 문자열, 표 행) 생성

    잘못된 UTF-8 바이트는 U+FFFD 로 바꿔서 보여준다.
    """
    report = process_bytes(data).decode("utf-8", "replace")
    rows = []
    for r in analyze(data)["results"]:
        word = r["word"].encode("utf-8", "surrogateescape").decode("utf-8", "replace")
        rows.append({"순위": r["rank"], "단어": word, "빈도": r["count"]})
    return report, rows


def render_result(report, rows, elapsed):
    st.markdown(
        f"""
    <div class=\"stats-bar\">\n        <span class=\"stat-chip\">Words: {len(rows)}</span>\n        <span class=\"stat-chip\">Time: {elapsed:.3f}s</span>\n    </div>
    """,
        unsafe_allow_html=True,
    )

    st.code(report, language="text")

    if not rows:
        st.warning("집계된 단어가 없습니다.")
        return

    st.dataframe(
        rows,
        hide_index=True,
        use_container_width=True,
    )
    st.bar_chart(rows, x="단어", y="빈도")


def main():
    if "log" not in st.session_state:
        st.session_state.log = "텍스트 파일을 선택한 뒤 '분석하기'를 눌러주세요.\n"
    if "analysis" not in st.session_state:
        st.session_state.analysis = None

    st.title("텍스트 단어 빈도 분석")

    with st.form("analyze_form", clear_on_submit=False):
        uploaded = st.file_uploader("텍스트 파일", type=["txt"])
        pasted = st.text_area("또는 텍스트 붙여넣기", value="", height=150)
        analyze_clicked = st.form_submit_button("분석하기", type="primary")

    if analyze_clicked:
        if uploaded is not None:
            data = uploaded.getvalue()
        elif pasted.strip():
            data = pasted.encode("utf-8")
        else:
            st.session_state.log = "먼저 텍스트(.txt) 파일을 선택해 주세요.\n"
            st.session_state.analysis = None
            data = None

        if data is not None:
            log = f"파일을 읽었습니다. 길이: {len(data)} bytes\n"
            start_time = time.time()
            with st.spinner("분석 중..."):
                report, rows = build_view(data)
            elapsed = time.time() - start_time
            log += "분석 완료! 결과가 화면에 표시되었습니다.\n"
            st.session_state.log = log
            st.session_state.analysis = (report, rows, elapsed)

    st.info(st.session_state.log)

    if st.session_state.analysis:
        render_result(*st.session_state.analysis)


if __name__ == "__main__":
    main()
