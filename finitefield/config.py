"""Global configuration for finitefield."""

import os

# ---------- Fixed-width integers ----------
# Limbs are 64-bit words; the default width is 4 limbs (256 bits).
LIMB_BITS = 64
DEFAULT_LIMBS = 4

# ---------- Generic engine ----------
# Backing ring used when a FieldElement is built without an explicit one.
DEFAULT_RING_NAME = "i64"

# ---------- Well-known prime orders ----------
MERSENNE_127 = 2**127 - 1
# Coordinate field of secp256k1.
SECP256K1_PRIME = 2**256 - 2**32 - 977

# ---------- Logging ----------
# FINITEFIELD_LOG_LEVEL overrides the level used by the demo script.
LOG_LEVEL = os.environ.get("FINITEFIELD_LOG_LEVEL", "WARNING").upper()
