"""Defaults for index construction and batch search, overridable from the environment."""
import os

# rank checkpoint spacing, in character units
CHECKPOINT_STRIDE = int(os.environ.get("RLFM_CHECKPOINT_STRIDE", 128))

# worker processes used by batch search
NUM_PROCESSES = int(os.environ.get("RLFM_PROCESSES", 8))

# rotation sort strategy: "doubling" or "naive"
CONSTRUCTION = os.environ.get("RLFM_CONSTRUCTION", "doubling").strip().lower()

CONSTRUCTIONS = ("doubling", "naive")
