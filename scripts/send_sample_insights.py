import random
import os, sys
# ensure project root is on path
sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from insight_intake.intake import InsightIntake
from insight_intake.kinds import INSIGHT_KINDS


def candidate():
    kind = random.choice(sorted(INSIGHT_KINDS))
    c = {"type": kind, "event": f"{kind}Event{random.randint(1, 5)}", "data": {"value": random.randint(0, 100)}}
    roll = random.random()
    # roughly a third of the candidates are malformed
    if roll < 0.1:
        c["type"] = random.randint(0, 9)
    elif roll < 0.2:
        c["event"] = None
    elif roll < 0.3:
        del c["data"]
    elif roll < 0.35:
        c = random.choice([0, "track", None, [c]])
    return c


def send(n=50):
    intake = InsightIntake(policy="drop")
    for _ in range(n):
        intake.submit(candidate())
    return intake.stats()


if __name__ == '__main__':
    counts = send()
    print(f"Sent sample insights: {counts['accepted']} accepted, {counts['dropped']} dropped")
