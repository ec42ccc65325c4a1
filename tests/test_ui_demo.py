from excuse_engine.schema import ExcuseContext
from ui_demo_streamlit.app import run_engine


def test_run_engine_payload():
    context = ExcuseContext("technology", urgency="critical", audience="authority", relationship="distant")
    result = run_engine(context, "en", with_proof=True, seed=3)
    assert result["excuse"].believability_score == 95
    assert result["score_level"] == "HIGH"
    assert result["proof"].filename == "tech_error.png"
    assert result["document"].startswith("EXCUSE DOCUMENT")
    assert result["document_name"].startswith("excuse_technology_")
    assert result["proof_document"].endswith("demonstration purposes only.")


def test_run_engine_without_proof():
    context = ExcuseContext("personal", urgency="low", audience="romantic", relationship="close")
    result = run_engine(context, "es", with_proof=False, seed=1)
    assert result["score_level"] == "LOW"
    assert result["proof"] is None
    assert result["proof_document"] is None
