import random

from excuse_engine.proof import generate_proof, render_proof_document
from excuse_engine.schema import PROOF_TYPES


def test_fixed_proof_per_category(now):
    expected = {
        "work": ("email", "client_emergency.png"),
        "family": ("message", "family_messages.png"),
        "technology": ("screenshot", "tech_error.png"),
        "weather": ("photo", "weather_conditions.jpg"),
        "emergency": ("document", "incident_report.pdf"),
        "personal": ("photo", "personal_emergency.jpg"),
    }
    for category, (proof_type, filename) in expected.items():
        proof = generate_proof(category, rng=random.Random(0), now=now)
        assert (proof.type, proof.filename) == (proof_type, filename)
        assert proof.type in PROOF_TYPES


def test_unknown_category_uses_personal_proof(now):
    proof = generate_proof("space", "whatever", rng=random.Random(0), now=now)
    assert proof.filename == "personal_emergency.jpg"


def test_medical_and_transport_pick_from_their_types(now):
    medical = {generate_proof("medical", rng=random.Random(seed), now=now).type for seed in range(60)}
    transport = {generate_proof("transport", rng=random.Random(seed), now=now).type for seed in range(60)}
    assert medical == {"screenshot", "document", "email"}
    assert transport == {"photo", "screenshot", "receipt"}


def test_work_deadline_is_two_days_out(now):
    proof = generate_proof("work", rng=random.Random(0), now=now)
    assert proof.sender == "client@importantcompany.com"
    assert "The new deadline is now 01/17/2025 at 9:00 AM." in proof.full_content


def test_emergency_document_ids(now):
    proof = generate_proof("emergency", rng=random.Random(9), now=now)
    assert proof.document_id.startswith("PIR-2024-")
    assert 0 <= int(proof.document_id.rsplit("-", 1)[1]) < 100000
    assert "Date: 01/15/2025" in proof.full_content
    assert proof.authority == "Metropolitan Police Department"


def test_render_email(now):
    proof = generate_proof("work", rng=random.Random(0), now=now)
    text = render_proof_document(proof, now=now)
    assert text.startswith("From: client@importantcompany.com\nTo: me@example.com\n")
    assert "Subject: URGENT: Project Deadline Moved Up" in text
    assert "Date: 01/15/2025, 02:30:00 PM" in text
    assert text.endswith("This is a simulated email for demonstration purposes only.")


def test_render_document(now):
    proof = generate_proof("emergency", rng=random.Random(1), now=now)
    text = render_proof_document(proof, now=now)
    assert text.startswith("Police Incident Report\n\n")
    assert f"Document ID: {proof.document_id}" in text
    assert "Authority: Metropolitan Police Department" in text
    assert text.endswith("This is a simulated document for demonstration purposes only.")


def test_render_other_types(now):
    proof = generate_proof("weather", rng=random.Random(0), now=now)
    text = render_proof_document(proof, now=now)
    assert "Description: Image showing dangerous weather conditions in local area" in text
    assert "Type: photo" in text
    assert text.endswith("This is simulated content for demonstration purposes only.")
