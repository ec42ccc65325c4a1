"""Demo script for excuse-engine."""

import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from excuse_engine.apology import generate_apology
from excuse_engine.metrics import compute_metrics
from excuse_engine.schema import ExcuseContext
from excuse_engine.scoring import rank_excuses
from excuse_engine.store import AppStore


def main() -> None:
    rng = random.Random(7)
    store = AppStore()
    contexts = [
        ExcuseContext("transport", urgency="high", audience="work", relationship="professional"),
        ExcuseContext("medical", urgency="critical", audience="authority", relationship="distant"),
        ExcuseContext("personal", urgency="low", audience="friends", relationship="close"),
    ]
    for context in contexts:
        excuse, proof = store.generate(context, rng=rng)
        store.save_excuse(excuse)
        print(f"[{excuse.believability_score}] {excuse.title}: {excuse.content}")
        if proof is not None:
            print(f"    proof: {proof.type} -> {proof.filename}")

    print("Ranked:", [e.id[:8] for e in rank_excuses(store.state.saved_excuses)])
    print("Metrics:", compute_metrics(store.state.excuses))
    print("Apology:", generate_apology("sincere", "short", rng=rng).content)


if __name__ == "__main__":
    main()
