import os

# The API tests drive ticks explicitly through POST /tick.
os.environ.setdefault("COZY_ENABLE_TICK_LOOP", "0")
