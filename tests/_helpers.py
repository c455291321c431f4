from __future__ import annotations

# first nine published record exponents, all below 13000
EARLY_RECORDS = [1, 3, 28, 59, 146, 643, 4004, 8651, 12655]
