import os

# --- Mining ---
MIN_SUPPORT = int(os.environ.get("FPG_MIN_SUPPORT", "2"))  # absolute count

# --- Transaction tables ---
ITEMS_COLUMN = os.environ.get("FPG_ITEMS_COLUMN", "items")
WEIGHT_COLUMN = os.environ.get("FPG_WEIGHT_COLUMN", "weight")
ITEM_SEPARATOR = os.environ.get("FPG_ITEM_SEPARATOR", ",")

# --- Logging ---
LOG_LEVEL = os.environ.get("FPG_LOG_LEVEL", "INFO")
LOG_FORMAT = os.environ.get(
    "FPG_LOG_FORMAT", "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
)
