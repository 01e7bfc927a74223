import os
import sys

# Ensure src/ is importable as hotel_booking.* and handlers.*, and tests/ for shared doubles
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
TESTS = os.path.abspath(os.path.dirname(__file__))
for path in (ROOT, TESTS):
	if path not in sys.path:
		sys.path.insert(0, path)
