from readability_engine.classification import audience_for_score, level_for_score
from readability_engine.config import ReadabilityConfig
from readability_engine.constraints import (
    EMPTY_CONTENT,
    LOW_READABILITY,
    TOO_SHORT,
    find_content_issues,
    has_blocking_issues,
)
from readability_engine.models import Document
from readability_engine.pipeline import analyze_corpus, analyze_document
from readability_engine.scoring import compute_readability_score
from tests.utils import EASY_POST, HTML_POST


def test_analyze_document_attaches_labels():
    report = analyze_document(Document(doc_id="post", text=EASY_POST))

    assert report.score == compute_readability_score(EASY_POST)
    assert report.level == level_for_score(report.score)
    assert report.audience == audience_for_score(report.score)
    assert report.word_count == len(EASY_POST.split())
    assert report.character_count == len(EASY_POST)
    assert report.breakdown is None


def test_analyze_document_includes_breakdown_when_configured():
    config = ReadabilityConfig(include_breakdown=True)
    report = analyze_document(Document("post", EASY_POST), config)

    assert report.breakdown is not None
    assert report.breakdown.score == report.score
    assert report.breakdown.paragraph_count == 2


def test_blank_document_reports_zero_words():
    report = analyze_document(Document("blank", "   "))
    assert report.score == 0
    assert report.word_count == 0
    assert report.level == "Very Difficult"


def test_strip_markup_changes_scored_text():
    raw = analyze_document(Document("post", HTML_POST), ReadabilityConfig())
    stripped = analyze_document(
        Document("post", HTML_POST), ReadabilityConfig(strip_markup=True)
    )
    assert stripped.character_count < raw.character_count
    assert stripped.score != raw.score


def test_find_content_issues():
    config = ReadabilityConfig(min_content_chars=50, min_readability_score=99.5)
    short = Document("short", "Too short.")
    report = analyze_document(short, config)
    issues = find_content_issues(short, report, config)
    codes = [issue.code for issue in issues]

    assert TOO_SHORT in codes
    assert LOW_READABILITY in codes
    assert has_blocking_issues(issues)


def test_low_readability_alone_is_not_blocking():
    config = ReadabilityConfig(min_readability_score=100)
    doc = Document("post", EASY_POST)
    issues = find_content_issues(doc, analyze_document(doc, config), config)
    assert [issue.code for issue in issues] == [LOW_READABILITY]
    assert not has_blocking_issues(issues)


def test_analyze_corpus_flags_empty_documents():
    documents = [Document("good", EASY_POST), Document("empty", "")]
    results = analyze_corpus(documents, ReadabilityConfig())

    good_report, good_issues = results["good"]
    empty_report, empty_issues = results["empty"]
    assert good_issues == []
    assert good_report.score > 0
    assert empty_report.score == 0
    assert [issue.code for issue in empty_issues] == [EMPTY_CONTENT]


def test_byte_order_mark_only_document_is_empty():
    results = analyze_corpus([Document("bom", "\ufeff  \n")], ReadabilityConfig())
    report, issues = results["bom"]
    assert report.score == 0
    assert report.word_count == 0
    assert [issue.code for issue in issues] == [EMPTY_CONTENT]
