"""Fabricated proof artifacts per excuse category."""

from __future__ import annotations

from datetime import datetime, timedelta
import random
from typing import Callable, Optional

import structlog

from excuse_engine.schema import Proof

logger = structlog.get_logger(__name__)

DEFAULT_RECIPIENT = "me@example.com"


def _date(now: datetime) -> str:
    return now.strftime("%m/%d/%Y")


def _time(now: datetime) -> str:
    return now.strftime("%I:%M:%S %p")


def _datetime(now: datetime) -> str:
    return f"{_date(now)}, {_time(now)}"


def _medical_proof(rng: random.Random, now: datetime) -> Proof:
    selected = rng.choice(["screenshot", "document", "email"])
    if selected == "screenshot":
        return Proof(
            type="screenshot",
            content="Screenshot of appointment confirmation from hospital app",
            description="Mobile app notification showing emergency appointment booking",
            filename="appointment_confirmation.png",
            preview_content=(
                "City Hospital Mobile App\n\nAppointment Confirmed\n\nDr. Sarah Johnson, MD\n"
                "Emergency Consultation\nDate: Today, 2:30 PM\nLocation: Emergency Wing\n"
                "Reference: #EMG-2024-0157\n\nPlease arrive 15 minutes early.\n"
                "Bring valid ID and insurance card."
            ),
        )
    if selected == "document":
        return Proof(
            type="document",
            content="Medical certificate from Dr. Sarah Johnson, MD",
            description="Official medical certificate recommending rest and recovery",
            filename="medical_certificate.pdf",
            document_title="Medical Certificate",
            document_id=f"MC-2024-{rng.randrange(10000)}",
            authority="City General Hospital",
            full_content=(
                "This is to certify that the patient has been examined and found to be suffering from acute "
                "gastroenteritis. The patient is advised complete bed rest for 24-48 hours and should avoid "
                "solid foods. Return to normal activities is recommended only after symptoms have completely "
                "subsided.\n\nThis condition is highly contagious and the patient should remain isolated to "
                "prevent spread to others.\n\nMedical attention was sought due to severe symptoms including "
                "nausea, vomiting, and dehydration requiring immediate care."
            ),
        )
    return Proof(
        type="email",
        content="Email from reception@cityhospital.com regarding urgent consultation",
        description="Hospital email confirming emergency appointment slot",
        filename="hospital_email.png",
        sender="reception@cityhospital.com",
        subject="Emergency Appointment Confirmation - Urgent",
        full_content=(
            "Dear Patient,\n\nThis email confirms your emergency appointment scheduled for today at 2:30 PM "
            "with Dr. Sarah Johnson in our Emergency Wing.\n\nAppointment Details:\n"
            f"- Date: {_date(now)}\n- Time: 2:30 PM\n- Doctor: Dr. Sarah Johnson, MD\n"
            "- Department: Emergency Medicine\n- Reference: EMG-2024-0157\n\n"
            "Please arrive 15 minutes early and bring:\n- Valid photo ID\n- Insurance card\n"
            "- List of current medications\n\nIf you need to reschedule, please call (555) 123-4567 "
            "immediately.\n\nCity General Hospital\nEmergency Department"
        ),
    )


def _transport_proof(rng: random.Random, now: datetime) -> Proof:
    selected = rng.choice(["photo", "screenshot", "receipt"])
    if selected == "photo":
        return Proof(
            type="photo",
            content="Photo of broken down vehicle with hazard lights on",
            description="Clear image showing car stopped on roadside with visible damage",
            filename="breakdown_photo.jpg",
            photo_details=(
                "Vehicle stopped on highway shoulder with hazard lights flashing, visible steam from engine "
                "compartment, emergency triangle placed behind vehicle"
            ),
        )
    if selected == "screenshot":
        return Proof(
            type="screenshot",
            content='Screenshot of ride-sharing app showing "No drivers available"',
            description="App interface displaying service unavailability in area",
            filename="rideshare_unavailable.png",
            preview_content=(
                "UberX\n\nNo drivers available\n\nThere are no drivers in your area right now. This could be "
                "due to high demand or weather conditions.\n\nEstimated wait time: 45+ minutes\n\n"
                "Try again later or consider alternative transportation.\n\n"
                f"Last updated: {_time(now)}"
            ),
        )
    return Proof(
        type="receipt",
        content="Towing service receipt from AAA Roadside Assistance",
        description="Official receipt showing emergency towing charges",
        filename="towing_receipt.pdf",
        preview_content=(
            "AAA ROADSIDE ASSISTANCE\nEmergency Towing Service\n\n"
            f"Receipt #: TOW-{rng.randrange(100000)}\nDate: {_date(now)}\nTime: {_time(now)}\n\n"
            "Services Provided:\n- Emergency Roadside Assistance\n- Vehicle Towing (15 miles)\n"
            "- Diagnostic Check\n\nTotal: $125.00\nPaid: Credit Card\n\nThank you for choosing AAA!"
        ),
    )


def _work_proof(rng: random.Random, now: datetime) -> Proof:
    deadline = now + timedelta(days=2)
    return Proof(
        type="email",
        content="Email thread with client regarding urgent deadline changes",
        description="Client communication showing critical project requirements",
        filename="client_emergency.png",
        sender="client@importantcompany.com",
        subject="URGENT: Project Deadline Moved Up - Immediate Action Required",
        full_content=(
            "Hi there,\n\nI hope this email finds you well. Unfortunately, I have some urgent news regarding "
            "our project timeline.\n\nDue to unexpected changes in our board meeting schedule, we need to move "
            f"up the project delivery date by 48 hours. The new deadline is now {_date(deadline)} at 9:00 AM.\n\n"
            "I understand this is extremely short notice, but this project is critical for our Q1 presentation "
            "to stakeholders. We're willing to discuss additional compensation for the rush delivery.\n\n"
            "Please confirm receipt of this email and let me know if you can accommodate this timeline change."
            "\n\nBest regards,\nJohn Smith\nProject Manager\nImportant Company Inc."
        ),
    )


def _family_proof(rng: random.Random, now: datetime) -> Proof:
    return Proof(
        type="message",
        content="Text message from family member about emergency situation",
        description="SMS conversation showing family crisis details",
        filename="family_messages.png",
        preview_content=(
            "Mom (2 minutes ago)\nHoney, I need you to come to the hospital right away. Dad had a fall and "
            "we're in the emergency room. He's conscious but they want to run some tests.\n\n"
            "You (1 minute ago)\nOh no! Which hospital? I'm leaving work now.\n\n"
            "Mom (Just now)\nSt. Mary's Hospital, Emergency entrance. Room 12. Please hurry but drive safely. "
            "I'll keep you updated.\n\nDelivered ✓"
        ),
    )


def _technology_proof(rng: random.Random, now: datetime) -> Proof:
    return Proof(
        type="screenshot",
        content="Screenshot of system error message and internet speed test",
        description="Technical diagnostics showing connectivity/system failures",
        filename="tech_error.png",
        preview_content=(
            "SYSTEM ERROR\n\nConnection Failed\nError Code: 0x80070057\n\nYour internet connection appears "
            "to be offline. Please check your network settings and try again.\n\nInternet Speed Test Results:\n"
            "Download: 0.00 Mbps\nUpload: 0.00 Mbps\nPing: Timeout\n\n"
            "Last successful connection: Yesterday 11:47 PM\n\nTroubleshooting steps attempted:\n"
            "✓ Restart router\n✓ Check cables\n✓ Contact ISP\n\n"
            "ISP Status: Outage reported in your area\nEstimated repair time: 4-6 hours"
        ),
    )


def _weather_proof(rng: random.Random, now: datetime) -> Proof:
    return Proof(
        type="photo",
        content="Photo of severe weather conditions affecting travel",
        description="Image showing dangerous weather conditions in local area",
        filename="weather_conditions.jpg",
        photo_details=(
            "Heavy flooding on main road with water level reaching car door height, multiple vehicles "
            "stranded, emergency vehicles present, road closure signs visible"
        ),
    )


def _emergency_proof(rng: random.Random, now: datetime) -> Proof:
    return Proof(
        type="document",
        content="Police incident report or emergency services documentation",
        description="Official documentation of emergency situation involvement",
        filename="incident_report.pdf",
        document_title="Police Incident Report",
        document_id=f"PIR-2024-{rng.randrange(100000)}",
        authority="Metropolitan Police Department",
        full_content=(
            f"INCIDENT REPORT\n\nIncident Number: {rng.randrange(1000000)}\nDate: {_date(now)}\n"
            f"Time: {_time(now)}\nLocation: Main Street & 5th Avenue\n\n"
            "Nature of Incident: Traffic Accident - Witness Statement Required\n\n"
            "Summary: Witness observed motor vehicle collision at intersection. Statement required for "
            "insurance and legal proceedings. Witness cooperation essential for case resolution.\n\n"
            "Witness Information:\nStatus: Cooperative witness\nStatement: Provided on scene\n"
            "Follow-up: May be required for court proceedings\n\n"
            f"Officer Badge #: 4521\nReport Filed: {_datetime(now)}"
        ),
    )


def _personal_proof(rng: random.Random, now: datetime) -> Proof:
    return Proof(
        type="photo",
        content="Photo evidence of personal emergency situation",
        description="Visual proof of circumstances preventing attendance",
        filename="personal_emergency.jpg",
        photo_details=(
            "Locked out of residence, keys visible inside through window, locksmith business card in hand, "
            "timestamp showing current date and time"
        ),
    )


PROOF_GENERATORS: dict[str, Callable[[random.Random, datetime], Proof]] = {
    "medical": _medical_proof,
    "transport": _transport_proof,
    "work": _work_proof,
    "family": _family_proof,
    "technology": _technology_proof,
    "weather": _weather_proof,
    "emergency": _emergency_proof,
    "personal": _personal_proof,
}


def generate_proof(
    category: str,
    content: str = "",
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> Proof:
    """Fabricate a proof artifact for ``category``.

    ``content`` is the excuse text the proof accompanies; the artifacts are
    fixed per category and do not depend on it.
    """

    generator = PROOF_GENERATORS.get(category, _personal_proof)
    proof = generator(rng or random.Random(), now or datetime.now())
    logger.debug("proof.generated", category=category, proof_type=proof.type, filename=proof.filename)
    return proof


def render_proof_document(proof: Proof, now: Optional[datetime] = None) -> str:
    """Render the plain-text download for a proof artifact."""

    now = now or datetime.now()
    if proof.type == "email":
        return (
            f"From: {proof.sender or 'noreply@example.com'}\n"
            f"To: {DEFAULT_RECIPIENT}\n"
            f"Subject: {proof.subject or 'Important Notice'}\n"
            f"Date: {_datetime(now)}\n\n"
            f"{proof.full_content or proof.content}\n\n"
            "---\nThis is a simulated email for demonstration purposes only."
        )
    if proof.type == "document":
        document_id = proof.document_id or f"DOC-{int(now.timestamp() * 1000)}"
        return (
            f"{proof.document_title or 'Official Document'}\n\n"
            f"{proof.full_content or proof.content}\n\n"
            f"Document ID: {document_id}\n"
            f"Generated: {_datetime(now)}\n"
            f"Authority: {proof.authority or 'Official Authority'}\n\n"
            "---\nThis is a simulated document for demonstration purposes only."
        )
    return (
        f"{proof.content}\n\n"
        f"Description: {proof.description}\n"
        f"Type: {proof.type}\n"
        f"Generated: {_datetime(now)}\n\n"
        "---\nThis is simulated content for demonstration purposes only."
    )
