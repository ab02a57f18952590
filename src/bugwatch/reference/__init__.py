"""Static insect activity reference data.

Thresholds, seasonal insect lists, and recommendation text that don't
change between calls. See ``activity.py``.
"""

from bugwatch.reference.activity import SEASONAL_ADVICE as SEASONAL_ADVICE
from bugwatch.reference.activity import SEASONAL_INSECTS as SEASONAL_INSECTS
