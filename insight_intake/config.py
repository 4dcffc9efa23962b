from dotenv import load_dotenv
import os

from .intake import POLICIES
from .kinds import INSIGHT_KINDS

load_dotenv()

INSIGHT_STRICT_KINDS = os.getenv("INSIGHT_STRICT_KINDS", "false").lower() in ("true", "1", "yes")

# an empty list falls back to the built-in kinds
INSIGHT_KINDS_ALLOWED = frozenset(
    k.strip() for k in os.getenv("INSIGHT_KINDS", "").split(",") if k.strip()
) or INSIGHT_KINDS

INVALID_INSIGHT_POLICY = os.getenv("INVALID_INSIGHT_POLICY", "reject").lower()
if INVALID_INSIGHT_POLICY not in POLICIES:
    raise ValueError(f"INVALID_INSIGHT_POLICY must be one of {POLICIES}, got '{INVALID_INSIGHT_POLICY}'")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
