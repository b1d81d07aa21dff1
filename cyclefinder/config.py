# cyclefinder/config.py
import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


def parse_vertices(raw: str) -> List[str]:
    """"A,B,C" -> ['A', 'B', 'C'];  "ABC" -> ['A', 'B', 'C']"""
    raw = raw.strip()
    if "," in raw:
        return [v.strip() for v in raw.split(",") if v.strip()]
    return [ch for ch in raw if not ch.isspace()]


# --- input ---------------------------------------------------------------
INPUT_PATH        = os.getenv("CYCLES_INPUT_PATH", "data/sample.txt")
VERTICES          = parse_vertices(os.getenv("CYCLES_VERTICES", "ABCDEFG"))
MALFORMED_POLICY  = os.getenv("CYCLES_MALFORMED_POLICY", "skip").lower()   # skip | strict

# --- capacity bounds -------------------------------------------------------
MAX_VERTICES      = int(os.getenv("CYCLES_MAX_VERTICES", 100))
MAX_EDGES         = int(os.getenv("CYCLES_MAX_EDGES", 100))
MAX_CYCLES        = int(os.getenv("CYCLES_MAX_CYCLES", 1000))
MAX_LENGTH        = _optional_int("CYCLES_MAX_LENGTH")    # vertex-count convention, None = unbounded

LOG_LEVEL         = os.getenv("LOG_LEVEL", "INFO")
