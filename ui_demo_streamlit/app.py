"""Streamlit demo UI for excuse-engine."""

from __future__ import annotations

import random
from typing import Any, Optional

from excuse_engine.exporters import download_filename, render_excuse_document
from excuse_engine.explain import explain_score
from excuse_engine.generator import generate_excuse
from excuse_engine.proof import generate_proof, render_proof_document
from excuse_engine.schema import AUDIENCES, CATEGORIES, CONTENT_LANGUAGES, RELATIONSHIPS, TIMEFRAMES, URGENCIES
from excuse_engine.schema import ExcuseContext


def _score_level(score: int) -> str:
    if score >= 85:
        return "HIGH"
    if score >= 65:
        return "MED"
    return "LOW"


def run_engine(context: ExcuseContext, language: str, with_proof: bool, seed: Optional[int] = None) -> dict[str, Any]:
    """Run all engine steps and return a UI-friendly result payload."""

    rng = random.Random(seed)
    excuse = generate_excuse(context, language, rng=rng)
    proof = generate_proof(excuse.category, excuse.content, rng=rng) if with_proof else None

    return {
        "excuse": excuse,
        "score_level": _score_level(excuse.believability_score),
        "explanation": explain_score(context),
        "document": render_excuse_document(excuse),
        "document_name": download_filename("excuse", excuse.category),
        "proof": proof,
        "proof_document": render_proof_document(proof) if proof is not None else None,
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Excuse Engine Demo", layout="wide")
    st.title("Excuse Engine - Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        situation = st.selectbox("Situation", options=list(CATEGORIES), index=2)
        urgency = st.selectbox("Urgency", options=list(URGENCIES), index=1)
        audience = st.selectbox("Audience", options=list(AUDIENCES), index=1)
        timeframe = st.selectbox("Timeframe", options=list(TIMEFRAMES), index=0)
        relationship = st.selectbox("Relationship", options=list(RELATIONSHIPS), index=1)
        language = st.selectbox("Language", options=list(CONTENT_LANGUAGES), index=0)
        with_proof = st.checkbox("Generate proof", value=True)
        run = st.button("Generate excuse", type="primary")

    if not run:
        st.info("Configure the situation in the sidebar and click **Generate excuse**.")
        return

    try:
        context = ExcuseContext.from_dict(
            {
                "situation": situation,
                "urgency": urgency,
                "audience": audience,
                "timeframe": timeframe,
                "relationship": relationship,
            }
        )
        result = run_engine(context, language, with_proof)
    except ValueError as exc:
        st.error(f"Input error: {exc}")
        return

    excuse = result["excuse"]
    st.subheader(excuse.title)
    st.write(excuse.content)

    c1, c2 = st.columns(2)
    c1.metric("Believability", f"{excuse.believability_score}%")
    c2.metric("Level", result["score_level"])
    st.table(result["explanation"]["adjustments"])
    st.download_button("Download excuse", result["document"], file_name=result["document_name"])

    if result["proof"] is not None:
        proof = result["proof"]
        st.subheader("Proof")
        st.write(f"**{proof.type}**: {proof.content}")
        st.caption(proof.description)
        st.text(result["proof_document"])
        st.download_button("Download proof", result["proof_document"], file_name=proof.filename)


if __name__ == "__main__":
    main()
